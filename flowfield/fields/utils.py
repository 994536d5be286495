"""
Utility functions for field implementations.

This module contains numeric helpers used by the pole force law and a grid
sampler for applications that need the whole field at once, separated from
the main field logic for clarity.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Sequence

from flowfield.core.utils import MAX_FLOAT, MIN_FLOAT
from flowfield.fields.base import FlowField2D


def clamp_overflow(value: np.float32) -> np.float32:
    """
    Replace an infinite force component with the closest finite float32.

    +inf becomes MAX_FLOAT and -inf becomes MIN_FLOAT. NaN and finite values
    are returned untouched.
    """
    if value == np.inf:
        return MAX_FLOAT
    if value == -np.inf:
        return MIN_FLOAT
    return value


SAMPLING_MODES = {
    "vec":              lambda field, x, y: field.get_vec(x, y),
    "normalized":       lambda field, x, y: field.get_normalized_vec(x, y),
    "perp":             lambda field, x, y: field.get_perp_vec(x, y),
    "perp_normalized":  lambda field, x, y: field.get_perp_normalized_vec(x, y),
}


def sample_grid(field: FlowField2D, xs: Sequence[float], ys: Sequence[float], mode: str = "vec") -> NDArray:
    """
    Sample a field on the grid spanned by `xs` and `ys`.

    Args:
        field: the field to sample
        xs: x coordinates of the grid columns
        ys: y coordinates of the grid rows
        mode: which query to use, one of "vec", "normalized", "perp", "perp_normalized"

    Returns:
        NDArray: float32 array of shape [len(ys), len(xs), 2], where
            out[i, j] is the field at (xs[j], ys[i])

    Raises:
        ValueError: If mode is not recognized
    """
    if mode not in SAMPLING_MODES:
        raise ValueError(f"Unknown sampling mode: {mode}. "
                         f"Supported modes: {', '.join(SAMPLING_MODES)}")

    query = SAMPLING_MODES[mode]
    out = np.zeros((len(ys), len(xs), 2), dtype=np.float32)

    for i, y in enumerate(ys):
        for j, x in enumerate(xs):
            out[i, j] = query(field, x, y)

    return out
