"""
core/tone/types.py — Frozen value types for pitch conversion.

No I/O, no state. ``Pitch.label`` is computed so the name and octave are not
stored twice.
"""

from __future__ import annotations

from dataclasses import dataclass

NOTE_NAMES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)
"""Chromatic pitch-class names, sharps only, indexed by ``midi % 12``."""

A4_MIDI: int = 69
"""MIDI note number of concert A."""

A4_HZ: float = 440.0
"""Reference tuning for 12-tone equal temperament."""


@dataclass(frozen=True)
class Pitch:
    """Nearest equal-tempered pitch for a frequency.

    Invariants:
        name in NOTE_NAMES
        -50.0 <= cents <= 50.0
        octave == midi // 12 - 1
    """

    midi: int
    """Semitone number on the MIDI scale. Not clamped to 0–127."""

    name: str
    """Pitch-class name, e.g. 'A', 'C#'."""

    octave: int
    """Scientific pitch notation octave. MIDI 60 is octave 4."""

    cents: float
    """Signed deviation of the measured frequency from this pitch."""

    @property
    def label(self) -> str:
        """Scientific pitch notation, e.g. 'A4', 'C#5'."""
        return f"{self.name}{self.octave}"
