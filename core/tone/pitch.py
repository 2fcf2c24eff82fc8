"""
core/tone/pitch.py — Frequency ↔ pitch conversion in 12-tone equal temperament.

Formulas (A4 = MIDI 69 = 440 Hz):
    frequency = 440 × 2^((midi − 69) / 12)
    midi      = round(12 × log₂(hz / 440) + 69)

Usage:
    from core.tone.pitch import frequency_of, note_of
    frequency_of(69)   # 440.0
    note_of(261.63)    # 'C4'
"""

from __future__ import annotations

import math
import numbers

from core.errors import OutOfRangeError
from core.tone.types import A4_HZ, A4_MIDI, NOTE_NAMES, Pitch

MIDI_MIN: int = 0
MIDI_MAX: int = 127


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    Python's ``round`` uses banker's rounding, which would send a frequency
    exactly between two semitones to the even one.
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def frequency_of(midi_note: int) -> float:
    """Return the frequency in Hz of a MIDI note number.

    Args:
        midi_note: MIDI note number in [0, 127].

    Returns:
        Frequency in Hz. ``frequency_of(69) == 440.0``.

    Raises:
        OutOfRangeError: If midi_note is not an integer in [0, 127].
    """
    # bool is an int subclass but never a note number
    if isinstance(midi_note, bool) or not isinstance(midi_note, numbers.Integral):
        raise OutOfRangeError(f"Invalid MIDI note number {midi_note!r}. Must be an integer.")
    if not MIDI_MIN <= midi_note <= MIDI_MAX:
        raise OutOfRangeError(
            f"Invalid MIDI note number {midi_note}. Must be between {MIDI_MIN} and {MIDI_MAX}."
        )
    return A4_HZ * 2.0 ** ((midi_note - A4_MIDI) / 12)


def pitch_of(frequency_hz: float) -> Pitch:
    """Map a frequency to the nearest equal-tempered pitch.

    The semitone number is not clamped, so sub-audio and ultrasonic inputs
    yield octaves outside the MIDI range rather than an error.

    Args:
        frequency_hz: Frequency in Hz. Must be finite and > 0.

    Returns:
        Pitch with MIDI number, name, octave and cent deviation.

    Raises:
        OutOfRangeError: If frequency_hz is not a finite positive number.
    """
    # Checked before log2 so a bad input never surfaces as a math domain error
    if not (math.isfinite(frequency_hz) and frequency_hz > 0.0):
        raise OutOfRangeError(f"Frequency must be a finite value > 0 Hz, got {frequency_hz}")

    semitones = 12.0 * math.log2(frequency_hz / A4_HZ) + A4_MIDI
    midi = _round_half_away(semitones)
    return Pitch(
        midi=midi,
        name=NOTE_NAMES[midi % 12],
        octave=midi // 12 - 1,
        cents=(semitones - midi) * 100.0,
    )


def note_of(frequency_hz: float) -> str:
    """Return the closest note name for a frequency, e.g. ``'A4'``, ``'C#5'``.

    Raises:
        OutOfRangeError: If frequency_hz is not a finite positive number.
    """
    return pitch_of(frequency_hz).label
