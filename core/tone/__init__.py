"""
core/tone/ — Pure tone math: pitch conversion, tempo, sample normalization.

No I/O, no shared state; every function is safe to call from any thread.

Exports:
    Types:   Pitch, NOTE_NAMES
    Pitch:   frequency_of, note_of, pitch_of
    Tempo:   estimate_tempo_bpm
    Samples: normalize
"""

from core.tone.pitch import frequency_of, note_of, pitch_of
from core.tone.samples import normalize
from core.tone.tempo import estimate_tempo_bpm
from core.tone.types import NOTE_NAMES, Pitch

__all__ = [
    "NOTE_NAMES",
    "Pitch",
    "estimate_tempo_bpm",
    "frequency_of",
    "normalize",
    "note_of",
    "pitch_of",
]
