"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Frequency)
- recurrence.py: is_due(task, day) predicate
- task_store.py: whole-list persistence on top of a key-value storage
- task_api.py: create/delete/toggle/edit and the per-day list
"""
