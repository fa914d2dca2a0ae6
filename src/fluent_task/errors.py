# src/fluent_task/errors.py

"""Exceptions raised by fluent_task. All of them derive from TaskError."""

from __future__ import annotations


class TaskError(Exception):
    """Base class for fluent_task errors."""


class ParseError(TaskError, ValueError):
    """Timestamp text does not match DD/MM/YYYY HH:MM:SS."""

    def __init__(self, text: str, reason: str | None = None) -> None:
        self.text = text
        msg = f"Cannot parse timestamp {text!r}: expected DD/MM/YYYY HH:MM:SS"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class InvalidPeriod(TaskError, ValueError):
    """Negative or non-finite recurrence period."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid period {value!r}: must be a finite number >= 0")


class BuilderConsumed(TaskError, RuntimeError):
    """The builder already produced its Task and cannot be reused."""

    def __init__(self) -> None:
        super().__init__("TaskBuilder already built its Task; start a new one with Task.create()")
