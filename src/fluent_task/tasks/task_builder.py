# src/fluent_task/tasks/task_builder.py

"""
Staged fluent builder for Task.

    Task.create()
        .with_().name("Task1")
        .doing().action("Run antivirus")
        .runs().every(1).week()
        .begins().on("12/01/2020 06:00:01")
        .build()

Every stage is a view over one shared draft. Stages only group setters for
discoverability; they can be visited in any order, repeatedly, or skipped.
build() hands the draft over to a Task and retires the builder, so any later
call on the builder or one of its stages raises BuilderConsumed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from ..errors import BuilderConsumed, InvalidPeriod
from .task_models import EPOCH, Task, TimeUnit, is_valid_period
from .timefmt import parse_instant

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _TaskDraft:
    name: str = ""
    action: str = ""
    period: float = 0.0
    last_run: float = EPOCH
    next_run: float = EPOCH
    consumed: bool = False


class TaskBuilderBase:
    """Stage transitions and build(), shared by the builder and all stages."""

    __slots__ = ("_draft",)

    def __init__(self, draft: _TaskDraft) -> None:
        self._draft = draft

    def _live(self) -> _TaskDraft:
        if self._draft.consumed:
            logger.debug("Rejected call on a consumed TaskBuilder")
            raise BuilderConsumed()
        return self._draft

    def with_(self) -> TaskWithBuilder:
        return TaskWithBuilder(self._live())

    def doing(self) -> TaskDoingBuilder:
        return TaskDoingBuilder(self._live())

    def runs(self) -> TaskRunsBuilder:
        return TaskRunsBuilder(self._live())

    def begins(self) -> TaskBeginsBuilder:
        return TaskBeginsBuilder(self._live())

    def build(self) -> Task:
        draft = self._live()
        task = Task(
            name=draft.name,
            action=draft.action,
            period=draft.period,
            last_run=draft.last_run,
            next_run=draft.next_run,
        )
        draft.consumed = True
        logger.debug(
            "Built task name=%r period=%s next_run=%s", task.name, task.period, task.next_run
        )
        return task


class TaskBuilder(TaskBuilderBase):
    """Entry point of the chain; owns a fresh draft."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(_TaskDraft())


class TaskWithBuilder(TaskBuilderBase):
    __slots__ = ()

    def name(self, name: str) -> TaskWithBuilder:
        self._live().name = name
        return self


class TaskDoingBuilder(TaskBuilderBase):
    __slots__ = ()

    def action(self, action: str) -> TaskDoingBuilder:
        self._live().action = action
        return self


class TaskRunsBuilder(TaskBuilderBase):
    """
    Recurrence period setters.

    Singular units (second() .. year()) set the period to exactly one unit.
    Plural units (seconds() .. years()) multiply the current period, so they
    are meant to follow every(n): every(3).days() == 3 days. Calling a plural
    unit twice compounds the multiplication.
    """

    __slots__ = ()

    def once(self) -> TaskRunsBuilder:
        self._live().period = 0.0
        return self

    def every(self, n: float) -> TaskRunsBuilder:
        draft = self._live()
        if isinstance(n, bool):
            logger.debug("Rejected boolean period %r", n)
            raise InvalidPeriod(n)
        try:
            value = float(n)
        except (TypeError, ValueError) as e:
            logger.debug("Rejected non-numeric period %r", n)
            raise InvalidPeriod(n) from e
        if not is_valid_period(value):
            logger.debug("Rejected period %r", n)
            raise InvalidPeriod(n)
        draft.period = value
        return self

    def _set_unit(self, unit: TimeUnit) -> TaskRunsBuilder:
        self._live().period = float(unit)
        return self

    def _scale(self, unit: TimeUnit) -> TaskRunsBuilder:
        draft = self._live()
        scaled = draft.period * int(unit)
        if not is_valid_period(scaled):
            logger.debug("Period %r overflows when scaled by %s", draft.period, unit.name)
            raise InvalidPeriod(scaled)
        draft.period = scaled
        return self

    def second(self) -> TaskRunsBuilder:
        return self._set_unit(TimeUnit.SECOND)

    def seconds(self) -> TaskRunsBuilder:
        return self._scale(TimeUnit.SECOND)

    def minute(self) -> TaskRunsBuilder:
        return self._set_unit(TimeUnit.MINUTE)

    def minutes(self) -> TaskRunsBuilder:
        return self._scale(TimeUnit.MINUTE)

    def hour(self) -> TaskRunsBuilder:
        return self._set_unit(TimeUnit.HOUR)

    def hours(self) -> TaskRunsBuilder:
        return self._scale(TimeUnit.HOUR)

    def day(self) -> TaskRunsBuilder:
        return self._set_unit(TimeUnit.DAY)

    def days(self) -> TaskRunsBuilder:
        return self._scale(TimeUnit.DAY)

    def week(self) -> TaskRunsBuilder:
        return self._set_unit(TimeUnit.WEEK)

    def weeks(self) -> TaskRunsBuilder:
        return self._scale(TimeUnit.WEEK)

    def month(self) -> TaskRunsBuilder:
        return self._set_unit(TimeUnit.MONTH)

    def months(self) -> TaskRunsBuilder:
        return self._scale(TimeUnit.MONTH)

    def year(self) -> TaskRunsBuilder:
        return self._set_unit(TimeUnit.YEAR)

    def years(self) -> TaskRunsBuilder:
        return self._scale(TimeUnit.YEAR)


class TaskBeginsBuilder(TaskBuilderBase):
    __slots__ = ()

    def on(self, date: str) -> TaskBeginsBuilder:
        """Set next_run from local DD/MM/YYYY HH:MM:SS text (ParseError if malformed)."""
        draft = self._live()
        draft.next_run = parse_instant(date)
        return self

    def at(self, instant: float | datetime) -> TaskBeginsBuilder:
        """Set next_run from a timestamp or datetime (naive datetimes are local time)."""
        draft = self._live()
        if isinstance(instant, datetime):
            draft.next_run = instant.timestamp()
        elif isinstance(instant, (int, float)) and not isinstance(instant, bool):
            draft.next_run = float(instant)
        else:
            raise TypeError(f"Expected a timestamp or datetime, got {type(instant).__name__}")
        return self
