"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus) and their JSON mapping
- task_store.py: JSON-file storage + query/update helpers
"""
