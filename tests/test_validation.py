"""Tests for riskmail/validation — address and domain syntax checks."""
from __future__ import annotations

import pytest

from riskmail.validation import InvalidEmailFormatError, validate_address, validate_domain


class TestValidateAddress:
    @pytest.mark.parametrize(
        "address",
        [
            "test@test.org",
            "TEST@TEST.org",
            "Test+alias@maxmind.com",
            "+@maxmind.com",
            "Test-foo-foo2@yahoo.com",
            "test@bücher.com",
            '"test@test"@test.org',
        ],
    )
    def test_valid(self, address: str) -> None:
        validate_address(address)

    @pytest.mark.parametrize(
        "address",
        ["a@test@test.org", "test", "test@", "@test", "  Test@maxmind.com"],
    )
    def test_invalid(self, address: str) -> None:
        with pytest.raises(InvalidEmailFormatError):
            validate_address(address)

    def test_error_carries_rejected_value(self) -> None:
        with pytest.raises(InvalidEmailFormatError) as excinfo:
            validate_address("a@test@test.org")
        assert excinfo.value.value == "a@test@test.org"
        assert excinfo.value.field == "address"
        assert excinfo.value.reason
        assert str(excinfo.value) == "The email address a@test@test.org is not valid."

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            validate_address("test")


class TestValidateDomain:
    @pytest.mark.parametrize("domain", ["domain.com", "test.org", "bücher.com", "sub.example.co.uk"])
    def test_valid(self, domain: str) -> None:
        validate_domain(domain)

    @pytest.mark.parametrize("domain", [" domain.com", "bad domain @!", "maxmind.com.", "a..b"])
    def test_invalid(self, domain: str) -> None:
        with pytest.raises(InvalidEmailFormatError) as excinfo:
            validate_domain(domain)
        assert excinfo.value.field == "domain"
        assert excinfo.value.value == domain
