"""Email field of a risk-scoring request.

``EmailBuilder`` accumulates raw values and produces an immutable
``Email`` record.  The record stores what the caller supplied and derives
its outputs on demand:

address
    The raw address verbatim, or the MD5 of its canonical form when
    hashing was requested.  Plain-text output is never normalized.
domain
    The explicitly supplied domain, otherwise the substring after the
    last ``@`` of the raw address.  Never typo-corrected or IDNA-encoded.
"""
from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from riskmail.core.security import md5_hex
from riskmail.core.settings import get_settings
from riskmail.normalization.email_normalizer import canonicalize, extract_domain
from riskmail.validation.address_validator import validate_address, validate_domain

logger = logging.getLogger(__name__)


class EmailPayload(BaseModel):
    """Wire shape of the email field; absent values are omitted on dump."""

    address: str | None = None
    domain: str | None = None


@dataclass(frozen=True, slots=True)
class Email:
    raw_address: str | None = None
    domain: str | None = None
    hash_address: bool = False

    @property
    def address(self) -> str | None:
        """Address to transmit: raw, MD5 of the canonical form, or ``None``."""
        if self.raw_address is None:
            return None
        if self.hash_address:
            return md5_hex(canonicalize(self.raw_address))
        return self.raw_address

    @property
    def address_md5(self) -> str | None:
        """MD5 of the canonical address regardless of ``hash_address``.

        Deprecated: use :attr:`address` together with
        :meth:`EmailBuilder.hash_address` instead.
        """
        warnings.warn(
            "Email.address_md5 is deprecated; use Email.address with hash_address()",
            DeprecationWarning,
            stacklevel=2,
        )
        if self.raw_address is None:
            return None
        return md5_hex(canonicalize(self.raw_address))

    def to_payload(self) -> dict[str, Any]:
        """Return the serializable fields, omitting those that are unset."""
        return EmailPayload(address=self.address, domain=self.domain).model_dump(exclude_none=True)


class EmailBuilder:
    """Collects email inputs for an :class:`Email`.

    Setters validate synchronously and raise
    :class:`~riskmail.validation.InvalidEmailFormatError` on bad input
    unless validation is disabled.  When *enable_validation* is omitted the
    ``EMAIL_VALIDATION_ENABLED`` setting decides.
    """

    def __init__(self, enable_validation: bool | None = None):
        if enable_validation is None:
            enable_validation = get_settings().email_validation_enabled
        self._enable_validation = enable_validation
        self._address: str | None = None
        self._domain: str | None = None
        self._hash_address = False

    def address(self, address: str) -> EmailBuilder:
        """Set the address, and the domain when none has been set yet.

        The address is sent in plain text unless :meth:`hash_address` is
        also called.
        """
        if self._enable_validation:
            validate_address(address)

        if self._domain is None:
            self._domain = extract_domain(address)
        self._address = address
        return self

    def hash_address(self) -> EmailBuilder:
        """Send the address as the MD5 of its canonical form."""
        self._hash_address = True
        return self

    def domain(self, domain: str) -> EmailBuilder:
        """Set the domain explicitly; only needed when no address is set."""
        if self._enable_validation:
            validate_domain(domain)
        self._domain = domain
        return self

    def build(self) -> Email:
        logger.debug(
            "EmailBuilder.build: address_set=%s domain_set=%s hashed=%s",
            self._address is not None,
            self._domain is not None,
            self._hash_address,
        )
        return Email(raw_address=self._address, domain=self._domain, hash_address=self._hash_address)
