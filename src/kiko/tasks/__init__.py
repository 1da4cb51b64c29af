"""
Task subsystem.

Components:
- task_models.py: data structures (Todo, Deadline, Event, TaskType)
- task_store.py: flat-file storage + line codec
- task_list.py: ordered task collection, persisted on every mutation
- history.py: snapshot stack backing undo
"""
