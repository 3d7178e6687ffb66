"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - RgbColor holds a 24-bit (or ARGB 32-bit) packed int, HexColor a "#RRGGBB" string
    - Px, Dp and ScreenDensity wrap floats: never mix px and dp in one expression
    - Presence has exactly two members (the Optional slot is a two-state tagged union)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

RgbColor = NewType("RgbColor", int)
HexColor = NewType("HexColor", str)            # "#RRGGBB"

Px = NewType("Px", float)
Dp = NewType("Dp", float)
ScreenDensity = NewType("ScreenDensity", float)  # dpi / 160, > 0


# ─── Enums ───────────────────────────────────────────────────────

class Presence(str, Enum):
    """The two states of an Optional slot. Fixed at construction."""
    PRESENT = "present"
    ABSENT = "absent"
