"""Email field canonicalization for risk-scoring requests."""
from riskmail.models.email import Email, EmailBuilder, EmailPayload
from riskmail.validation.address_validator import InvalidEmailFormatError

__all__ = ["Email", "EmailBuilder", "EmailPayload", "InvalidEmailFormatError"]
