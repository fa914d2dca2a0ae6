# src/fluent_task/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the two example tasks and prints them to stdout,
one per line.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..logging_setup import setup_logging
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)


def build_example_tasks() -> list[Task]:
    weekly = (
        Task.create()
        .with_().name("Task1")
        .doing().action("Run antivirus")
        .runs().every(1).week()
        .begins().on("12/01/2020 06:00:01")
        .build()
    )
    one_shot = Task.create().runs().once().begins().on("12/01/2019 06:00:01").build()
    return [weekly, one_shot]


def main(settings: Settings | None = None) -> int:
    settings = settings or get_settings()

    console_level = getattr(logging, str(settings.log_level).upper(), logging.INFO)
    log_dir = settings.data_dir if settings.log_to_file else None
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.debug("Starting %s...", settings.app_name)

    for task in build_example_tasks():
        print(task)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
