"""Display Metrics: px/dp conversions using the configured screen density.

Invariants:
    - An explicit density argument always wins over the configured one
    - Conversion math lives in core/dimensions; this module only resolves the density
"""

import logging

from tazkiyatech_utils.config import get_settings
from tazkiyatech_utils.core.dimensions import convert_dp_to_px, convert_px_to_dp
from tazkiyatech_utils.core.domain_types import Dp, Px, ScreenDensity

logger = logging.getLogger(__name__)


def screen_density() -> ScreenDensity:
    """The logical density of the display, from TAZKIYATECH_SCREEN_DENSITY."""
    return ScreenDensity(get_settings().screen_density)


def px_to_dp(px: float, density: float | None = None) -> Dp:
    return convert_px_to_dp(Px(px), _resolve_density(density, "px_to_dp"))


def dp_to_px(dp: float, density: float | None = None) -> Px:
    return convert_dp_to_px(Dp(dp), _resolve_density(density, "dp_to_px"))


def _resolve_density(density: float | None, operation: str) -> ScreenDensity:
    if density is not None:
        return ScreenDensity(density)
    resolved = screen_density()
    logger.debug(
        "Using configured screen density",
        extra={"operation": operation, "density": resolved},
    )
    return resolved
