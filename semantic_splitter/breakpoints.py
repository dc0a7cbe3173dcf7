"""
Breakpoint selection by percentile threshold.

The threshold is read from the sorted distances at
``floor(len(distances) * breakpoint_threshold)``. Only distances strictly
above it become breakpoints, so raising breakpoint_threshold never adds
breakpoints.

A breakpoint is a sentence index meaning "cut before this sentence". The gap
at distance index ``i`` maps to breakpoint ``i + 1``.
"""

import logging
import math
from typing import Optional

logger = logging.getLogger(__name__)


def percentile_threshold(
    distances: list[float], breakpoint_threshold: float
) -> Optional[float]:
    """
    Distance value at the given percentile, or None for no distances.

    With breakpoint_threshold=1.0 the index would point one past the end;
    it is clamped to the last element (the maximum distance).
    """
    if not distances:
        return None
    sorted_distances = sorted(distances)
    threshold_index = math.floor(len(distances) * breakpoint_threshold)
    threshold_index = min(threshold_index, len(distances) - 1)
    return sorted_distances[threshold_index]


def find_breakpoints(distances: list[float], breakpoint_threshold: float) -> list[int]:
    """
    Sentence indices at which to cut, in ascending order.

    Args:
        distances: Distances between adjacent windows, in window order.
        breakpoint_threshold: Percentile in [0, 1].

    Returns:
        ``i + 1`` for every ``distances[i]`` strictly above the threshold.
    """
    threshold = percentile_threshold(distances, breakpoint_threshold)
    if threshold is None:
        return []
    return breakpoints_above(distances, threshold)


def breakpoints_above(distances: list[float], threshold: float) -> list[int]:
    """``i + 1`` for every ``distances[i]`` strictly above an already chosen threshold."""
    breakpoints = [
        index + 1 for index, distance in enumerate(distances) if distance > threshold
    ]
    logger.debug(
        "Threshold %.6f flags %d of %d gaps", threshold, len(breakpoints), len(distances)
    )
    return breakpoints
