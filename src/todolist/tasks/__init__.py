"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Filters, Snapshot and the enums)
- task_store.py: SQLite key/value storage for the snapshot and theme, first-run seeding
- task_manager.py: in-memory collection, filters/sort/search, persist-on-write
"""
