"""Syntactic validation of email addresses and domains."""
from riskmail.validation.address_validator import (
    InvalidEmailFormatError,
    validate_address,
    validate_domain,
)

__all__ = ["InvalidEmailFormatError", "validate_address", "validate_domain"]
