"""Fretboard fingering generation for slash chords.

This module places a slash chord's bass on string 6 or 5, searches the
strings above it for the remaining chord tones, and ranks the playable
shapes by difficulty.
"""

from chord_shapes.fretboard.audit import PlayabilityCheck, ToneCheck, check_playability, verify_fingering
from chord_shapes.fretboard.generator import (
    generate_from_slash_label,
    generate_slash_chord_fingerings,
)
from chord_shapes.fretboard.lookup import CatalogueFn, find_fingerings
from chord_shapes.fretboard.models import (
    Barre,
    Difficulty,
    Fingering,
    FingeringSearch,
    GeneratedFingering,
)
from chord_shapes.fretboard.search import SearchFn, greedy_search

__all__ = [
    "Barre",
    "CatalogueFn",
    "Difficulty",
    "Fingering",
    "FingeringSearch",
    "GeneratedFingering",
    "PlayabilityCheck",
    "SearchFn",
    "ToneCheck",
    "check_playability",
    "find_fingerings",
    "generate_from_slash_label",
    "generate_slash_chord_fingerings",
    "greedy_search",
    "verify_fingering",
]
