"""Music theory core: intervals, chord formulas, the quality registry and
slash chord semantics.
"""

from chord_shapes.theory.formulas import (
    Alteration,
    ChordBase,
    ChordFormula,
    Extension,
    SeventhType,
    formula_to_intervals,
    formula_to_string,
)
from chord_shapes.theory.intervals import (
    EXTENDED_INTERVALS,
    INTERVALS,
    UnknownIntervalError,
    interval_semitones,
    normalize_interval_set,
    normalize_to_pitch_class,
    semitone_name,
)
from chord_shapes.theory.registry import (
    CANONICAL_FORMULAS,
    CANONICAL_QUALITIES,
    CHORD_REGISTRY,
    QUALITY_ALIASES,
    CanonicalQuality,
    all_aliases,
    all_registered_qualities,
    is_registered,
    normalize_quality_token,
    resolve_quality_to_intervals,
)
from chord_shapes.theory.slash_chords import (
    SLASH_CHORD_PATTERNS,
    SlashChordDefinition,
    SlashChordInfo,
    all_slash_chord_patterns,
    bass_interval,
    chord_pitch_classes,
    parse_slash_label,
    slash_chord_display_info,
    slash_chord_pitch_classes,
    supported_bass_intervals,
)

__all__ = [
    "CANONICAL_FORMULAS",
    "CANONICAL_QUALITIES",
    "CHORD_REGISTRY",
    "EXTENDED_INTERVALS",
    "INTERVALS",
    "QUALITY_ALIASES",
    "SLASH_CHORD_PATTERNS",
    "Alteration",
    "CanonicalQuality",
    "ChordBase",
    "ChordFormula",
    "Extension",
    "SeventhType",
    "SlashChordDefinition",
    "SlashChordInfo",
    "UnknownIntervalError",
    "all_aliases",
    "all_registered_qualities",
    "all_slash_chord_patterns",
    "bass_interval",
    "chord_pitch_classes",
    "formula_to_intervals",
    "formula_to_string",
    "interval_semitones",
    "is_registered",
    "normalize_interval_set",
    "normalize_quality_token",
    "normalize_to_pitch_class",
    "parse_slash_label",
    "resolve_quality_to_intervals",
    "semitone_name",
    "slash_chord_display_info",
    "slash_chord_pitch_classes",
    "supported_bass_intervals",
]
