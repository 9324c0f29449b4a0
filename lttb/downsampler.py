"""LTTB (Largest Triangle Three Buckets) downsampling algorithm."""

import logging
from typing import List, Tuple

from .models import Points

logger = logging.getLogger(__name__)


def _is_trivial(n: int, threshold: int) -> bool:
    """True when no reduction is performed and the input is returned as is."""
    return threshold >= n or threshold <= 2 or n <= 2


def bucket_bounds(n: int, threshold: int) -> List[Tuple[int, int]]:
    """
    Compute the interior buckets for downsampling ``n`` points to ``threshold``.

    Args:
        n: Number of input points
        threshold: Target number of output points

    Returns:
        Half-open ``(start, end)`` index ranges, one per interior bucket.
        Empty when no reduction would be performed.
    """
    if _is_trivial(n, threshold):
        return []

    bucket_count = threshold - 2

    # Bucket size (excluding first and last points)
    every = (n - 2) / bucket_count

    bounds = []
    for i in range(bucket_count):
        start = int(i * every) + 1
        end = min(int((i + 1) * every) + 1, n - 1)
        bounds.append((start, end))

    # Last bucket always runs up to the final point
    start, _ = bounds[-1]
    bounds[-1] = (start, n - 1)

    return bounds


def select_indices(data: Points, threshold: int) -> List[int]:
    """
    Select the indices of the points LTTB keeps.

    Args:
        data: Sequence of (x, y) points
        threshold: Target number of points

    Returns:
        Increasing list of input indices; every index when no reduction applies
    """
    n = len(data)
    bounds = bucket_bounds(n, threshold)
    if not bounds:
        return list(range(n))

    last = n - 1

    # Always include first and last points
    selected = [0]

    for i, (range_start, range_end) in enumerate(bounds):
        # Calculate point average for next bucket
        if i + 1 < len(bounds):
            avg_range_start, avg_range_end = bounds[i + 1]
        else:
            avg_range_start, avg_range_end = last, n

        avg_range_length = avg_range_end - avg_range_start

        if avg_range_length > 0:
            avg_x = sum(data[j][0] for j in range(avg_range_start, avg_range_end)) / avg_range_length
            avg_y = sum(data[j][1] for j in range(avg_range_start, avg_range_end)) / avg_range_length
        else:
            avg_x, avg_y = data[last][0], data[last][1]

        # Point in previous bucket
        point_x, point_y = data[selected[-1]][0], data[selected[-1]][1]

        # Find point in current bucket that forms largest triangle
        max_area = -1.0
        max_area_index = range_start

        for j in range(range_start, range_end):
            area = 0.5 * abs(
                (point_x - avg_x) * (data[j][1] - point_y)
                - (point_x - data[j][0]) * (avg_y - point_y)
            )

            # Strictly greater: first point wins a tie
            if area > max_area:
                max_area = area
                max_area_index = j

        selected.append(max_area_index)

    selected.append(last)

    logger.debug(f"LTTB selected {len(selected)} of {n} points")

    return selected


def downsample(data: Points, threshold: int) -> Points:
    """
    Downsample time-series data using LTTB algorithm.

    Preserves visual characteristics by selecting points that form
    the largest triangles, maintaining peaks, troughs, and trends.

    The input is returned unchanged when ``threshold`` is 0, 1, 2 or
    at least ``len(data)``, and when there are two points or fewer.

    Args:
        data: Sequence of (x, y) points, usually ordered by x
        threshold: Target number of points

    Returns:
        New list of exactly ``threshold`` points, starting and ending with
        the first and last input points, or ``data`` itself
    """
    if _is_trivial(len(data), threshold):
        return data

    return [data[i] for i in select_indices(data, threshold)]
