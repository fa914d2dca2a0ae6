# tests/test_cli.py

from __future__ import annotations

import logging

from fluent_task.cli.main import build_example_tasks, main
from fluent_task.logging_setup import LOG_FILE_NAME


def test_main_prints_two_tasks(utc, settings, capsys) -> None:
    assert main(settings) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "name: Task1, action: Run antivirus, period: 604800 seconds, "
        "last_run: 01/01/1970 00:00:00, next_run: 12/01/2020 06:00:01",
        "name: , action: , period: 0 seconds, "
        "last_run: 01/01/1970 00:00:00, next_run: 12/01/2019 06:00:01",
    ]


def test_main_writes_log_file_when_enabled(utc, settings, capsys) -> None:
    settings.log_to_file = True
    settings.log_level = "DEBUG"

    assert main(settings) == 0
    for h in logging.getLogger().handlers:
        h.flush()

    log_file = settings.data_dir / LOG_FILE_NAME
    assert log_file.exists()
    assert "Built task" in log_file.read_text(encoding="utf-8")
    # logs never leak into stdout
    assert "Built task" not in capsys.readouterr().out


def test_example_tasks() -> None:
    weekly, one_shot = build_example_tasks()
    assert weekly.period == 604800
    assert one_shot.period == 0
