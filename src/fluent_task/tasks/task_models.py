# src/fluent_task/tasks/task_models.py

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

from ..errors import InvalidPeriod
from .timefmt import format_instant

if TYPE_CHECKING:
    from .task_builder import TaskBuilder

logger = logging.getLogger(__name__)

EPOCH: float = 0.0


class TimeUnit(IntEnum):
    """
    Unit lengths in seconds.

    Fixed approximations, not calendar arithmetic: a month is always 30 days
    and a year is always 365 days.
    """

    SECOND = 1
    MINUTE = 60
    HOUR = 60 * 60
    DAY = 24 * 60 * 60
    WEEK = 7 * 24 * 60 * 60
    MONTH = 30 * 24 * 60 * 60
    YEAR = 365 * 24 * 60 * 60


def is_valid_period(value: object) -> bool:
    """A period is a finite, non-negative number (bools are not numbers here)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value >= 0


def _format_seconds(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


@dataclass(frozen=True, slots=True)
class Task:
    """
    A named action with a recurrence period and its last/next run instants.

    Instants are POSIX timestamps. period == 0 means the task runs once.
    Build instances with Task.create(); a finished Task is never mutated.
    """

    name: str = ""
    action: str = ""
    period: float = 0.0
    last_run: float = EPOCH
    next_run: float = EPOCH

    def __post_init__(self) -> None:
        if not is_valid_period(self.period):
            logger.debug("Rejected period %r for task %r", self.period, self.name)
            raise InvalidPeriod(self.period)

    @staticmethod
    def create() -> TaskBuilder:
        from .task_builder import TaskBuilder

        return TaskBuilder()

    @property
    def is_recurring(self) -> bool:
        return self.period > 0

    def __str__(self) -> str:
        return (
            f"name: {self.name}"
            f", action: {self.action}"
            f", period: {_format_seconds(self.period)} seconds"
            f", last_run: {format_instant(self.last_run)}"
            f", next_run: {format_instant(self.next_run)}"
        )
