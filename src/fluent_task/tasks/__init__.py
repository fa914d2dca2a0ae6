"""
Task subsystem.

Components:
- timefmt.py: DD/MM/YYYY HH:MM:SS <-> instant conversion (local time)
- task_models.py: data structures (Task, TimeUnit)
- task_builder.py: staged fluent builder producing Task
"""
