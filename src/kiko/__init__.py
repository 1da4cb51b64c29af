"""
Kiko: a personal task-tracking assistant driven by single-line text commands.

Subpackages:
- core: date/command parsing, errors, response texts, app state
- tasks: task model, flat-file storage, task list, undo history
- cli: command registry, bootstrap, entry point
- connectors: console front end
"""

__version__ = "0.1.0"
