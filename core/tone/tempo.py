"""
core/tone/tempo.py — Tempo estimation from inter-onset intervals.

Deliberately simple: BPM = 60 / mean(IOI). No outlier rejection, no
smoothing, no octave-error correction. Feed it clean beat-level intervals.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from core.errors import EmptyInputError, OutOfRangeError

SECONDS_PER_MINUTE: float = 60.0


def estimate_tempo_bpm(intervals: Sequence[float]) -> float:
    """Estimate tempo from inter-onset intervals.

    Args:
        intervals: Gaps in seconds between consecutive onsets.

    Returns:
        Estimated tempo in beats per minute.

    Raises:
        EmptyInputError: If intervals is empty.
        OutOfRangeError: If the mean interval is not positive.
    """
    values = np.asarray(intervals, dtype=np.float64)
    if values.size == 0:
        raise EmptyInputError("IOI sequence cannot be empty.")

    mean_ioi = float(values.mean())
    if mean_ioi <= 0.0:
        raise OutOfRangeError(f"Mean inter-onset interval must be > 0 s, got {mean_ioi}")
    return SECONDS_PER_MINUTE / mean_ioi
