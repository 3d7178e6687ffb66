"""Dimensions: pure px/dp conversions against an explicit screen density.

Invariants:
    - density = dpi / BASELINE_DPI, and must be > 0
    - dp = px / density; px = dp * density
    - No settings lookup here: density is always passed in (see services/display_metrics)
"""

from tazkiyatech_utils.core.domain_types import Dp, Px, ScreenDensity
from tazkiyatech_utils.core.errors import ErrorContext, InvalidArgumentError


BASELINE_DPI: int = 160


def density_from_dpi(dpi: float) -> ScreenDensity:
    """Logical density for a screen of the given dots-per-inch."""
    if dpi <= 0:
        raise InvalidArgumentError(
            f"dpi must be positive, got {dpi}",
            argument="dpi",
            context=ErrorContext(operation="density_from_dpi"),
        )
    return ScreenDensity(dpi / BASELINE_DPI)


def convert_px_to_dp(px: Px, density: ScreenDensity) -> Dp:
    """Converts pixels to density independent pixels: dp = px / (dpi / 160)."""
    _check_density(density, "convert_px_to_dp")
    return Dp(px / density)


def convert_dp_to_px(dp: Dp, density: ScreenDensity) -> Px:
    """Converts density independent pixels to pixels: px = dp * (dpi / 160)."""
    _check_density(density, "convert_dp_to_px")
    return Px(dp * density)


def _check_density(density: float, operation: str) -> None:
    if density <= 0:
        raise InvalidArgumentError(
            f"density must be positive, got {density}",
            argument="density",
            context=ErrorContext(operation=operation),
        )
