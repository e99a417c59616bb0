"""
Task subsystem.

Components:
- dates.py: user/storage/display conversions for deadline and event dates
- task_models.py: task variants (Todo, Deadline, Event) and their save format
- task_list.py: the ordered, 1-indexed session collection
- task_store.py: plain-text file storage
"""
