# tests/test_task_models.py

from __future__ import annotations

import dataclasses

import pytest

from fluent_task.errors import InvalidPeriod
from fluent_task.tasks.task_models import EPOCH, Task, TimeUnit


def test_time_unit_lengths() -> None:
    assert TimeUnit.MINUTE == 60
    assert TimeUnit.HOUR == 3600
    assert TimeUnit.DAY == 86400
    assert TimeUnit.WEEK == 604800
    assert TimeUnit.MONTH == 30 * TimeUnit.DAY
    assert TimeUnit.YEAR == 365 * TimeUnit.DAY


def test_task_is_frozen() -> None:
    task = Task(name="a")
    with pytest.raises(dataclasses.FrozenInstanceError):
        task.name = "b"  # type: ignore[misc]


def test_str_matches_output_format(utc) -> None:
    task = Task(name="Task1", action="Run antivirus", period=604800.0, next_run=1578808801.0)
    assert str(task) == (
        "name: Task1, action: Run antivirus, period: 604800 seconds, "
        "last_run: 01/01/1970 00:00:00, next_run: 12/01/2020 06:00:01"
    )


def test_str_keeps_fractional_period(utc) -> None:
    assert "period: 1.5 seconds" in str(Task(period=1.5))


def test_defaults() -> None:
    task = Task()
    assert (task.name, task.action, task.period) == ("", "", 0.0)
    assert task.last_run == task.next_run == EPOCH
    assert not task.is_recurring
    assert Task(period=60).is_recurring


@pytest.mark.parametrize("bad", [-5, -0.001, float("nan"), float("inf"), True, "60"])
def test_task_rejects_invalid_period(bad) -> None:
    with pytest.raises(InvalidPeriod):
        Task(period=bad)
