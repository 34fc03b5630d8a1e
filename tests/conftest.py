import pytest


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("EMAIL_VALIDATION_ENABLED", raising=False)

    from riskmail.core.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
