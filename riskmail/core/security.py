from __future__ import annotations

import hashlib


def md5_hex(value: str) -> str:
    """Return the lowercase hexadecimal MD5 digest of *value* encoded as UTF-8.

    MD5 here is a fixed wire format for privacy-preserving transmission, not
    a security primitive, so the FIPS ``usedforsecurity`` guard is disabled.
    """
    return hashlib.md5(value.encode("utf-8"), usedforsecurity=False).hexdigest()
