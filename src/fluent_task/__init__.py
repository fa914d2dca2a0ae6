"""
fluent_task: fluent construction of Task records.

    task = (
        Task.create()
        .with_().name("Task1")
        .doing().action("Run antivirus")
        .runs().every(1).week()
        .begins().on("12/01/2020 06:00:01")
        .build()
    )
"""

from .errors import BuilderConsumed, InvalidPeriod, ParseError, TaskError
from .tasks.task_builder import TaskBuilder
from .tasks.task_models import EPOCH, Task, TimeUnit
from .tasks.timefmt import format_instant, parse_instant

__all__ = [
    "EPOCH",
    "BuilderConsumed",
    "InvalidPeriod",
    "ParseError",
    "Task",
    "TaskBuilder",
    "TaskError",
    "TimeUnit",
    "format_instant",
    "parse_instant",
]
