"""Core Layer: pure helper logic, no IO, no settings, no logging.

Invariants:
    - No module in core/ imports from services/, infrastructure/, or config
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from the settings-aware shell in services/
"""
