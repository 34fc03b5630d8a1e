"""Logging configuration for the ``riskmail`` logger tree.

Library modules log through ``logging.getLogger(__name__)`` and only ever
emit lengths and outcomes.  Applications that want riskmail's records on
the console call :func:`setup_logging` once at startup; otherwise records
propagate to whatever handlers the host application configured.

``AddressRedactingFilter`` scrubs anything address-shaped from a record
before it is emitted.  It also covers the message of
``InvalidEmailFormatError``, which embeds the rejected value and is the
string most likely to reach a log through ``logger.exception`` or
``"%s" % exc`` in calling code.
"""
import logging
import logging.config
import re

REDACTED = "[REDACTED]"

# (pattern, replacement); the rejection message goes first so values
# containing spaces are removed whole.
_REDACTIONS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"(The email (?:address|domain) ).*?( is not valid\.)", re.DOTALL), rf"\1{REDACTED}\2"),
    (re.compile(r"\S*@\S*"), REDACTED),
]


def redact(text: str) -> str:
    """Return *text* with rejected values and ``@``-bearing tokens replaced."""
    for pattern, replacement in _REDACTIONS:
        text = pattern.sub(replacement, text)
    return text


class AddressRedactingFilter(logging.Filter):
    def _scrub(self, value: object) -> object:
        if isinstance(value, BaseException):
            return redact(str(value))
        if isinstance(value, str):
            return redact(value)
        return value

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = self._scrub(record.msg)

        if isinstance(record.args, tuple):
            record.args = tuple(self._scrub(arg) for arg in record.args)
        elif isinstance(record.args, dict):
            record.args = {key: self._scrub(arg) for key, arg in record.args.items()}

        if record.exc_info and record.exc_info[1] is not None:
            # Pre-render the traceback so the formatter does not re-expose it
            record.exc_text = redact(logging.Formatter().formatException(record.exc_info))
            record.exc_info = None

        return True


def setup_logging(level: str | None = None) -> None:
    """Attach a redacting console handler to the ``riskmail`` logger.

    *level* defaults to the ``LOG_LEVEL`` setting.  Records handled here do
    not propagate further, so they are not printed twice.
    """
    if level is None:
        from riskmail.core.settings import get_settings

        level = get_settings().log_level

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "redact_addresses": {"()": "riskmail.core.logging.AddressRedactingFilter"},
            },
            "formatters": {
                "default": {"format": "%(asctime)s %(levelname)s %(name)s %(message)s"},
            },
            "handlers": {
                "riskmail_console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "filters": ["redact_addresses"],
                },
            },
            "loggers": {
                "riskmail": {
                    "handlers": ["riskmail_console"],
                    "level": level.upper(),
                    "propagate": False,
                },
            },
        }
    )
