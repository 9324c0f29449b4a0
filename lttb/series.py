"""Downsampling of several named signals at once."""

import logging
from typing import Dict, List, Mapping, Optional

from .config import settings
from .downsampler import downsample
from .models import DataPoint, Points

logger = logging.getLogger(__name__)


def downsample_signals(
    signals: Mapping[str, Points], max_points: Optional[int] = None
) -> Dict[str, List[DataPoint]]:
    """
    Sort each signal by x and reduce the long ones with LTTB.

    Args:
        signals: Signal name -> sequence of (x, y) points, in any order
        max_points: Maximum points per signal; defaults to
            ``settings.default_max_points``

    Returns:
        Signal name -> list of DataPoint, in the order of ``signals``
    """
    if max_points is None:
        max_points = settings.default_max_points
    if max_points < 3:
        raise ValueError(f"max_points must be at least 3, got {max_points}")

    result: Dict[str, List[DataPoint]] = {}
    for name, raw_points in signals.items():
        points = sorted(raw_points, key=lambda p: p[0])
        if len(points) > max_points:
            points = downsample(points, max_points)
            logger.debug(f"Signal {name}: {len(raw_points)} -> {len(points)} points")
        result[name] = [DataPoint(float(x), float(y)) for x, y in points]

    return result
