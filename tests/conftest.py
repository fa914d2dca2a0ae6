# tests/conftest.py

from __future__ import annotations

import logging
import os
import time
from collections.abc import Callable, Iterator
from pathlib import Path
from types import SimpleNamespace

import pytest


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with cli.main.

    A SimpleNamespace rather than the real config keeps tests independent of
    the developer's environment and .env file.
    """
    return SimpleNamespace(
        app_name="fluent-task-test",
        log_level="INFO",
        log_to_file=False,
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def local_tz(monkeypatch: pytest.MonkeyPatch) -> Iterator[Callable[[str], None]]:
    """
    Switch the process-local timezone for one test.

    Uses POSIX TZ strings so no tzdata package is needed.
    """
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() unavailable")

    def _set(tz: str) -> None:
        monkeypatch.setenv("TZ", tz)
        time.tzset()

    yield _set

    monkeypatch.undo()
    time.tzset()


@pytest.fixture()
def utc(local_tz: Callable[[str], None]) -> None:
    local_tz("UTC0")
    assert os.environ["TZ"] == "UTC0"


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """cli.main() replaces root handlers; put the original ones back after each test."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level

    yield

    for h in list(root.handlers):
        if h not in saved_handlers:
            root.removeHandler(h)
            h.close()
    for h in saved_handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(saved_level)
    logging.captureWarnings(False)
