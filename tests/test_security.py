"""Tests for riskmail/core/security.py — digest helper."""
from __future__ import annotations

import hashlib

from riskmail.core.security import md5_hex


def test_md5_hex_matches_hashlib() -> None:
    assert md5_hex("test@test.org") == hashlib.md5(b"test@test.org").hexdigest()


def test_md5_hex_is_lowercase_32_chars() -> None:
    digest = md5_hex("test")
    assert digest == "098f6bcd4621d373cade4e832627b4f6"
    assert len(digest) == 32
    assert digest == digest.lower()


def test_md5_hex_encodes_utf8() -> None:
    assert md5_hex("bücher") == hashlib.md5("bücher".encode("utf-8")).hexdigest()
