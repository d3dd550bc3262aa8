from typing import Any

import pytest

from biztime import server
from biztime.config import settings


def test_main_serves_the_app_on_configured_address(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = []
    monkeypatch.setattr(server.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
    monkeypatch.setattr(settings, "port", 9123)

    server.main()

    assert calls == [
        (
            ("biztime.main:app",),
            {"host": settings.host, "port": 9123, "log_config": None},
        )
    ]
