"""
Command line side of the tracker.

- parser.py: raw line -> keyword/remainder -> Command; add text -> Task
- command_models.py: the command variants
- commands.py: execute_command (single dispatch point) and its results
- bootstrap.py: AppState construction, load/save policy
- main.py: entrypoint
"""
