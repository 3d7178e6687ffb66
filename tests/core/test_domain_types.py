"""Domain Types: verifies rich type definitions and enum values.

Tests:
    - NewType wrappers exist and are callable
    - Presence has exactly two members and serializes to string
"""

from tazkiyatech_utils.core.domain_types import (
    RgbColor, HexColor, Px, Dp, ScreenDensity, Presence,
)


def test_value_types_wrap_primitives():
    assert RgbColor(0xFF0000) == 0xFF0000
    assert HexColor("#FF0000") == "#FF0000"
    assert Px(10.0) == 10.0
    assert Dp(5.0) == 5.0
    assert ScreenDensity(2.0) == 2.0


def test_presence_has_exactly_two_states():
    assert set(Presence) == {Presence.PRESENT, Presence.ABSENT}


def test_presence_serializes_to_string():
    assert Presence.PRESENT.value == "present"
    assert Presence.ABSENT.value == "absent"
