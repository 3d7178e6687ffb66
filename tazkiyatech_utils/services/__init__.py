"""Services Layer: settings-aware wrappers around the pure core.

Invariants:
    - Services read configuration and log; the math stays in core/
"""
