"""
Display Geometry Module

Looks up the pixel bounds of the primary monitor.
"""

from typing import Callable, List, NamedTuple

from screeninfo import get_monitors, ScreenInfoError

from .errors import MonitorUnavailableError
from .logging_setup import get_logger

logger = get_logger(__name__)


class MonitorBounds(NamedTuple):
    """
    Exclusive upper bounds for cursor coordinates on a monitor.

    The origin is the monitor's top-left corner on the virtual desktop.
    """
    max_x: int
    max_y: int
    origin_x: int = 0
    origin_y: int = 0


def get_primary_bounds(enumerate_monitors: Callable[[], List] = get_monitors) -> MonitorBounds:
    """
    Get the size of the primary monitor.

    The monitor flagged as primary wins; otherwise the first one reported
    is used.

    Args:
        enumerate_monitors: Callable returning screeninfo Monitor objects

    Returns:
        Bounds of the primary monitor

    Raises:
        MonitorUnavailableError: If no monitor can be found
    """
    try:
        monitors = enumerate_monitors()
    except ScreenInfoError as e:
        raise MonitorUnavailableError(e) from e

    if not monitors:
        raise MonitorUnavailableError()

    primary = next((m for m in monitors if getattr(m, 'is_primary', False)), monitors[0])

    if primary.width <= 0 or primary.height <= 0:
        raise MonitorUnavailableError(ValueError(f"monitor reports size {primary.width}x{primary.height}"))

    origin_x = int(getattr(primary, 'x', 0))
    origin_y = int(getattr(primary, 'y', 0))
    logger.info(f"Primary monitor: {primary.width}x{primary.height} at ({origin_x}, {origin_y})")
    return MonitorBounds(int(primary.width), int(primary.height), origin_x, origin_y)
