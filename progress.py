# progress.py
from __future__ import annotations
import numpy as np

RING_STEPS = 80  # resolution of the progress border
SIDES = 8


def border_progress(elapsed: int, total: int) -> int:
    """
    map elapsed/total onto 0..RING_STEPS
    0 when there is no total to count against
    """
    if total <= 0:
        return 0
    return int(elapsed / (total / RING_STEPS))


def active_side(border: int) -> int:
    """
    which octagon side (1..8, clockwise from the top edge) is highlighted
    one side per 10 border steps
    """
    return max(1, min(SIDES, 1 + int(border) // 10))


def octagon_vertices(radius: float = 1.0) -> np.ndarray:
    """
    closed outline of a regular octagon with a flat top edge, shape (9, 2)
    vertex k-1 -> vertex k is side k, starting at the top-left corner
    and going clockwise
    """
    angles = np.deg2rad(112.5 - 45.0 * np.arange(SIDES + 1))
    return radius * np.column_stack((np.cos(angles), np.sin(angles)))
