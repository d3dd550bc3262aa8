import logging

import structlog

from biztime.config import Settings, settings
from biztime.logging import configure_logging


def _root_renderer() -> object:
    formatter = logging.getLogger().handlers[0].formatter
    assert isinstance(formatter, structlog.stdlib.ProcessorFormatter)
    return formatter.processors[-1]


def test_json_is_the_default_format() -> None:
    configure_logging(Settings(_env_file=None))
    try:
        assert isinstance(_root_renderer(), structlog.processors.JSONRenderer)
    finally:
        configure_logging(settings)


def test_console_format_for_local_runs() -> None:
    configure_logging(Settings(_env_file=None, log_format="console", log_level="debug"))
    try:
        assert isinstance(_root_renderer(), structlog.dev.ConsoleRenderer)
        assert logging.getLogger().level == logging.DEBUG
    finally:
        configure_logging(settings)
