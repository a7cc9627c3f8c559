"""Small numeric helpers."""

from __future__ import annotations

import math

import numpy as np


def align_up(size: int, alignment: int) -> int:
    """Round ``size`` up to a multiple of the power-of-two ``alignment``."""
    return (size + alignment - 1) & ~(alignment - 1)


def calculate_mip_count(width: int, height: int) -> int:
    """Number of mip levels for a texture of the given dimensions."""
    smallest = min(width, height)
    if smallest <= 0:
        raise ValueError("texture dimensions must be positive")
    return math.floor(math.log2(smallest)) + 1


def smooth_step(v1, v2, t: float) -> np.ndarray:
    """Interpolate between two vectors with a clamped smoothstep curve."""
    t = min(max(t, 0.0), 1.0)
    t = t * t * (3.0 - 2.0 * t)
    a = np.asarray(v1, dtype=np.float32)
    b = np.asarray(v2, dtype=np.float32)
    return a * (1.0 - t) + b * t