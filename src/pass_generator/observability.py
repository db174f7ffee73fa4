"""Logging setup for pass generation.

Components log through ``structlog`` and never configure it themselves;
applications embedding the generator call ``configure_logging`` once at
startup (or install their own structlog configuration).
"""

import logging.config
import typing as t

import structlog

from pass_generator import settings

# Event keys whose values never reach the log output
SENSITIVE_KEYS = (
    "password",
    "passin",
    "passout",
    "secret",
    "token",
    "authorization",
)

REDACTED = "[REDACTED]"


def scrub_secrets(logger: t.Any, method_name: str, event_dict: dict[str, t.Any]) -> dict[str, t.Any]:
    """Redact certificate passwords and tokens from log events.

    Nested dictionaries are scrubbed recursively.
    """

    def _scrub_dict(d: dict[str, t.Any]) -> dict[str, t.Any]:
        for key in list(d.keys()):
            if any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS):
                d[key] = REDACTED
            elif isinstance(d[key], dict):
                d[key] = _scrub_dict(d[key])
        return d

    return _scrub_dict(event_dict)


def redact_arguments(arguments: t.Sequence[str]) -> list[str]:
    """Hide OpenSSL password arguments (``pass:<secret>``) from a command line."""
    return [f"pass:{REDACTED}" if argument.startswith("pass:") else argument for argument in arguments]


SHARED_PROCESSORS: list[t.Any] = [
    structlog.contextvars.merge_contextvars,  # Merge context variables
    structlog.stdlib.add_logger_name,  # Add logger name
    structlog.stdlib.add_log_level,  # Add log level
    structlog.stdlib.PositionalArgumentsFormatter(),  # Format positional args
    structlog.processors.TimeStamper(fmt="iso"),  # Add ISO timestamp
    structlog.processors.StackInfoRenderer(),  # Render stack info
    structlog.processors.format_exc_info,  # Format exceptions
    structlog.processors.UnicodeDecoder(),  # Decode unicode
    scrub_secrets,  # Scrub secrets before rendering
]


def configure_logging(level: str | None = None, json_output: bool | None = None) -> None:
    """Route structlog and stdlib logging through one rendering pipeline.

    Args:
        level: Root log level name. Defaults to ``PASS_LOG_LEVEL``.
        json_output: Render JSON lines instead of the colored console format.
            Defaults to ``PASS_LOG_JSON``.
    """
    level = (level or settings.PASS_LOG_LEVEL).upper()
    if json_output is None:
        json_output = settings.PASS_LOG_JSON

    renderer: t.Any = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structured": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "processor": renderer,
                    "foreign_pre_chain": SHARED_PROCESSORS,
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "structured",
                },
            },
            "root": {
                "handlers": ["console"],
                "level": level,
            },
        }
    )

    structlog.configure(
        processors=[*SHARED_PROCESSORS, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
