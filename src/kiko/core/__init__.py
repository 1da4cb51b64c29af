"""
Transport-agnostic core.

Components:
- dates.py: multi-format datetime parsing
- parser.py: command classification and argument extraction
- errors.py: exception types
- ports.py: interfaces shared with storage and front ends
- persona.py: user-facing reply texts
- state.py: application state container
"""
