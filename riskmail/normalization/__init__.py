"""Normalization package.

Email canonicalization used before an address is hashed for transmission.
The public entry points are:

``extract_domain(address)``
    Domain after the last ``@`` of an unmodified address, or ``None``.

``canonicalize(address)``
    Lowercased, trimmed address with a cleaned domain and its sub-address
    suffix removed.  Only ever used as digest input; plain-text output is
    never normalized.
"""
from riskmail.normalization.email_normalizer import (
    canonicalize,
    clean_domain,
    extract_domain,
    strip_local_part,
)

__all__ = ["canonicalize", "clean_domain", "extract_domain", "strip_local_part"]
