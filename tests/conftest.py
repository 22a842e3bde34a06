from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable

import pytest

from calc_report.core.config import get_settings


@pytest.fixture(autouse=True)
def reset_app_state(monkeypatch):
    for key in ("CALC_REPORT_INPUT_PATH", "CALC_REPORT_OUTPUT_PATH", "CALC_REPORT_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    # main() installs a handler bound to the captured stderr of the current test.
    app_logger = logging.getLogger("calc_report")
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
    app_logger.propagate = True
    app_logger.setLevel(logging.NOTSET)


@pytest.fixture()
def write_input(tmp_path: Path) -> Callable[[Any], Path]:
    def _write(payload: Any, name: str = "input.json") -> Path:
        path = tmp_path / name
        text = payload if isinstance(payload, str) else json.dumps(payload)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
