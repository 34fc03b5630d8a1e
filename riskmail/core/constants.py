"""Fixed lookup data used by email canonicalization.

Typo domains
------------
Exact-match corrections applied to the cleaned, ASCII-encoded domain of an
address before it is hashed.  Matching is case-sensitive against the
already-lowercased domain; no fuzzy or edit-distance matching is done.

Local-part suffix patterns
--------------------------
Most providers treat ``user+tag`` as ``user``.  Yahoo uses ``-`` as its
sub-address delimiter instead, so ``yahoo.com`` gets the dash pattern and
every other domain gets the plus pattern.  A delimiter in first position
never matches: the captured prefix must be non-empty.
"""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

# ---------------------------------------------------------------------------
# Typo domain corrections
# ---------------------------------------------------------------------------

TYPO_DOMAINS: Mapping[str, str] = MappingProxyType(
    {
        # gmail.com
        "35gmai.com": "gmail.com",
        "636gmail.com": "gmail.com",
        "gamil.com": "gmail.com",
        "gmail.comu": "gmail.com",
        "gmial.com": "gmail.com",
        "gmil.com": "gmail.com",
        "yahoogmail.com": "gmail.com",
        # outlook.com
        "putlook.com": "outlook.com",
    }
)

# ---------------------------------------------------------------------------
# Sub-address stripping
# ---------------------------------------------------------------------------

DASH_DELIMITED_DOMAINS: frozenset[str] = frozenset({"yahoo.com"})

# The suffix may not span a line terminator; such local parts are left as is.
_SUFFIX = r"[^\n\r\u0085\u2028\u2029]*"

ADDRESS_PLUS_PATTERN: re.Pattern[str] = re.compile(r"\A([^+]+)\+" + _SUFFIX + r"\Z")
ADDRESS_DASH_PATTERN: re.Pattern[str] = re.compile(r"\A([^-]+)-" + _SUFFIX + r"\Z")
