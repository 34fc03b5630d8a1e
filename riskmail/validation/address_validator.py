"""Address and domain syntax checks.

Both checks delegate to ``email-validator``.  DNS deliverability checks are
never performed; only grammar is checked.  Quoted local parts such as
``"user@host"@example.org`` and internationalized addresses are accepted.

The input is validated exactly as supplied: surrounding whitespace is not
stripped first, so ``" example.com"`` is rejected.
"""
from __future__ import annotations

import logging

from email_validator import EmailNotValidError, validate_email
from email_validator.syntax import validate_email_domain_name

logger = logging.getLogger(__name__)


class InvalidEmailFormatError(ValueError):
    """Raised when an address or domain fails syntactic validation.

    Carries the rejected ``value`` and the ``field`` it was supplied for
    (``"address"`` or ``"domain"``).
    """

    def __init__(self, field: str, value: str, reason: str | None = None):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"The email {field} {value} is not valid.")


def validate_address(address: str) -> None:
    """Raise :class:`InvalidEmailFormatError` unless *address* is a syntactically valid email address."""
    try:
        validate_email(
            address,
            allow_smtputf8=True,
            allow_quoted_local=True,
            check_deliverability=False,
        )
    except EmailNotValidError as exc:
        logger.debug("validate_address: rejected (length=%d)", len(address))
        raise InvalidEmailFormatError("address", address, str(exc)) from exc


def validate_domain(domain: str) -> None:
    """Raise :class:`InvalidEmailFormatError` unless *domain* is a syntactically valid domain name."""
    try:
        validate_email_domain_name(domain)
    except EmailNotValidError as exc:
        logger.debug("validate_domain: rejected (length=%d)", len(domain))
        raise InvalidEmailFormatError("domain", domain, str(exc)) from exc
