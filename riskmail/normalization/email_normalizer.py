"""Email normalizer.

Converts a raw email address into the canonical form that is hashed
before transmission.  Stages run in a fixed order:

1. trim control characters and spaces (U+0000 to U+0020), lowercase
2. split on the *last* ``@`` (quoted local parts may contain ``@``)
3. clean the domain: trim, drop one trailing dot, IDNA-encode, then apply
   the typo table from ``riskmail.core.constants``
4. strip the sub-address suffix of the local part, choosing the delimiter
   from the cleaned domain (``-`` for Yahoo, ``+`` for everything else)

An address with no ``@``, or with ``@`` as its final character, is
returned after step 1 only.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging

from riskmail.core.constants import (
    ADDRESS_DASH_PATTERN,
    ADDRESS_PLUS_PATTERN,
    DASH_DELIMITED_DOMAINS,
    TYPO_DOMAINS,
)

logger = logging.getLogger(__name__)

# Control characters and space, U+0000 to U+0020; other Unicode whitespace is kept
_TRIM_CHARS = "".join(map(chr, range(0x21)))


def _split_index(address: str) -> int | None:
    """Index of the last ``@`` in *address*, or ``None`` when it has no domain part."""
    index = address.rfind("@")
    if index == -1 or index + 1 == len(address):
        return None
    return index


def extract_domain(address: str) -> str | None:
    """Return the substring after the last ``@`` of *address*, verbatim.

    No trimming or case folding is applied.  Returns ``None`` when there is
    no ``@`` or it is the last character.
    """
    index = _split_index(address)
    if index is None:
        return None
    return address[index + 1 :]


def _to_ascii(domain: str) -> str:
    try:
        return domain.encode("idna").decode("ascii")
    except UnicodeError:
        # Empty or over-long labels; keep the domain as cleaned so far
        logger.debug("clean_domain: IDNA encoding failed (length=%d)", len(domain))
        return domain


def clean_domain(domain: str) -> str:
    """Return the cleaned form of *domain* used for hashing.

    Strips surrounding control characters and spaces (U+0000 to U+0020)
    and a single trailing dot, converts an internationalized name to its
    ASCII-compatible form, then replaces a known typo domain with the
    intended one.  Callers are expected to have lowercased the value
    already.
    """
    domain = domain.strip(_TRIM_CHARS)

    if domain.endswith("."):
        domain = domain[:-1]

    domain = _to_ascii(domain)

    return TYPO_DOMAINS.get(domain, domain)


def strip_local_part(local_part: str, domain: str) -> str:
    """Remove the sub-address suffix from *local_part* for the given cleaned *domain*.

    ``user+tag`` becomes ``user`` (``user-tag`` for ``yahoo.com``).  A
    delimiter in the first position leaves the local part unchanged.
    """
    if domain in DASH_DELIMITED_DOMAINS:
        pattern = ADDRESS_DASH_PATTERN
    else:
        pattern = ADDRESS_PLUS_PATTERN

    match = pattern.match(local_part)
    if match is None:
        return local_part
    return match.group(1)


def canonicalize(raw: str) -> str:
    """Return *raw* email address in canonical form for hashing.

    Parameters
    ----------
    raw:
        Address exactly as supplied by the caller.

    Returns
    -------
    str
        ``local@domain`` with whitespace trimmed, lowercased, the domain
        cleaned by :func:`clean_domain` and the local part reduced by
        :func:`strip_local_part`.  Without a domain part the trimmed,
        lowercased input is returned unchanged.  The result is a fixed
        point: canonicalizing it again yields the same string.
    """
    address = raw.strip(_TRIM_CHARS).lower()

    index = _split_index(address)
    if index is None:
        logger.debug("canonicalize: no domain part (length=%d)", len(address))
        return address

    local_part = address[:index]
    domain = clean_domain(address[index + 1 :])
    local_part = strip_local_part(local_part, domain)

    return f"{local_part}@{domain}"
