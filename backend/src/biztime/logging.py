"""BizTime log output.

Every record, whether from our own structlog loggers, uvicorn or SQLAlchemy,
leaves through one stdout handler. The events we emit ourselves:

- ``request_completed`` (middleware): method, path, status, duration_ms
- ``company_created`` / ``company_updated`` / ``company_deleted``: code
- ``invoice_created`` / ``invoice_updated`` / ``invoice_deleted``: invoice_id
- ``domain_error``, ``validation_error``: the message sent to the client
- ``database_error``, ``unhandled_exception``: full traceback, never sent

``request_id`` is bound per request by RequestIDMiddleware and merged into
all of them. LOG_FORMAT=console swaps the JSON lines for coloured text when
running locally.
"""

import logging
import logging.config
import sys
from datetime import UTC, datetime
from typing import Any

import structlog
from structlog.stdlib import BoundLogger

from biztime.config import Settings, settings


def _utc_timestamp(
    _logger: object,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    event_dict["timestamp"] = datetime.now(UTC).isoformat()
    return event_dict


def _event_enrichers() -> list[Any]:
    """Processors applied to our events and to foreign stdlib records alike."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _utc_timestamp,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def configure_logging(config: Settings) -> None:
    """Point structlog and the root logger at stdout with the configured format."""
    enrichers = _event_enrichers()
    renderer: Any = (
        structlog.dev.ConsoleRenderer()
        if config.log_format == "console"
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *enrichers,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "biztime": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "processor": renderer,
                    "foreign_pre_chain": enrichers,
                },
            },
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "formatter": "biztime",
                    "stream": sys.stdout,
                },
            },
            "loggers": {
                "": {
                    "handlers": ["stdout"],
                    "level": config.log_level.upper(),
                },
            },
        }
    )


configure_logging(settings)


def get_logger(name: str) -> BoundLogger:
    """Logger for a BizTime module, e.g. ``get_logger(__name__)``."""
    return structlog.get_logger(name)  # type: ignore[no-any-return]
