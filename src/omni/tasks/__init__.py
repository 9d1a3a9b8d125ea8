"""
Task subsystem.

Components:
- dates.py: DD-MM-YYYY[ HHMM] parsing and formatting
- task_models.py: data structures (Task, Todo, Deadline, Event)
- task_list.py: ordered in-memory collection addressed by index
- task_store.py: line-oriented file storage kept in step with the list
- task_api.py: small high-level helpers pairing list changes with file writes
"""
