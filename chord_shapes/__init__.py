"""Chord shape library for resolving chord labels and fingering slash chords.

This library resolves chord quality tokens (in many spellings) to
intervals, works out which pitch classes a slash chord must sound, and
generates fretboard fingerings for a six-string instrument in standard
tuning.

Examples
--------
>>> from chord_shapes import resolve_quality_to_intervals, slash_chord_pitch_classes

>>> # Resolve a quality in any spelling
>>> resolve_quality_to_intervals("min7")
[0, 3, 7, 10]

>>> # Am7/E: bass first, then the remaining chord tones
>>> slash_chord_pitch_classes(9, "m7", 7)
[4, 9, 0, 7]

>>> # Fingerings for a slash chord label
>>> from chord_shapes import generate_from_slash_label
>>> [f.shape for f in generate_from_slash_label("C/E")]
['x-7-5-5-8-8', '12-10-10-12-13-15']
"""

from chord_shapes.converter import from_pychord, quality_to_harte
from chord_shapes.fretboard import (
    Barre,
    Fingering,
    PlayabilityCheck,
    ToneCheck,
    check_playability,
    find_fingerings,
    generate_from_slash_label,
    generate_slash_chord_fingerings,
    verify_fingering,
)
from chord_shapes.models import Chord
from chord_shapes.theory import (
    ChordFormula,
    SlashChordInfo,
    UnknownIntervalError,
    bass_interval,
    formula_to_intervals,
    interval_semitones,
    is_registered,
    normalize_interval_set,
    normalize_quality_token,
    normalize_to_pitch_class,
    parse_slash_label,
    resolve_quality_to_intervals,
    slash_chord_display_info,
    slash_chord_pitch_classes,
)

__all__ = [
    "Barre",
    "Chord",
    "ChordFormula",
    "Fingering",
    "PlayabilityCheck",
    "SlashChordInfo",
    "ToneCheck",
    "UnknownIntervalError",
    "bass_interval",
    "check_playability",
    "find_fingerings",
    "formula_to_intervals",
    "from_pychord",
    "generate_from_slash_label",
    "generate_slash_chord_fingerings",
    "interval_semitones",
    "is_registered",
    "normalize_interval_set",
    "normalize_quality_token",
    "normalize_to_pitch_class",
    "parse_slash_label",
    "quality_to_harte",
    "resolve_quality_to_intervals",
    "slash_chord_display_info",
    "slash_chord_pitch_classes",
    "verify_fingering",
]
