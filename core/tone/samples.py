"""
core/tone/samples.py — Linear rescaling of sample buffers.

Inputs are never modified; a fresh ``list[float]`` is always returned so the
result compares cleanly with plain lists and can be serialized as-is.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


def normalize(
    samples: Sequence[float],
    min_value: float = -1.0,
    max_value: float = 1.0,
) -> list[float]:
    """Rescale samples from their own [min, max] onto [min_value, max_value].

    Degenerate case: when every sample has the same value the input range has
    zero width. The result is then ``min_value`` repeated (not the midpoint
    of the target range) and no division takes place.

    Args:
        samples: Audio amplitudes (list, tuple or NumPy array).
        min_value: Lower bound of the target range.
        max_value: Upper bound of the target range.

    Returns:
        New list of the same length. Empty input gives ``[]``.

    Example:
        >>> normalize([1, 2, 3], 0.0, 1.0)
        [0.0, 0.5, 1.0]
    """
    values = np.array(samples, dtype=np.float64)
    if values.size == 0:
        return []

    current_min = float(values.min())
    current_max = float(values.max())
    if current_min == current_max:
        return [float(min_value)] * values.size

    scaled = (values - current_min) / (current_max - current_min)
    return (scaled * (max_value - min_value) + min_value).tolist()
