"""Slash chord semantics.

A slash chord is a quality plus a bass interval: ``C/E`` is a C major
triad over its major third (bass interval 4), ``Cm7/Bb`` a C minor
seventh over its minor seventh (bass interval 10). This module computes
the pitch classes such a chord must sound, parses ``Root[Quality]/Bass``
labels, and attaches curated display names.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from chord_shapes.models import Chord
from chord_shapes.pitch_class import NOTE_TO_PC
from chord_shapes.theory.intervals import normalize_to_pitch_class
from chord_shapes.theory.registry import normalize_quality_token, resolve_quality_to_intervals

if TYPE_CHECKING:
    from collections.abc import Mapping

# Root[Quality]/Bass
SLASH_LABEL_RE = re.compile(r"^([A-G][#b]?)([^/]*)/([A-G][#b]?)$")


@dataclass(frozen=True)
class SlashChordDefinition:
    """A curated slash chord pattern.

    Parameters
    ----------
    quality : str
        Canonical quality token ("", "m", "7", "m7", "M7", ...).
    bass_interval : int
        Semitones from the root up to the bass (0-11).
    display_name : str
        Human-readable pattern name, spelled on a C root.
    """

    quality: str
    bass_interval: int
    display_name: str


@dataclass(frozen=True)
class SlashChordInfo:
    """Everything known about a parsed slash chord label.

    Parameters
    ----------
    root : str
        Root note name as written.
    quality : str
        Quality token as written.
    bass : str
        Bass note name as written.
    bass_interval : int
        Semitones from root up to bass (0-11).
    intervals : tuple[int, ...]
        Resolved chord intervals (raw, not including the bass).
    display_name : str | None
        Curated pattern name, or None if the pattern is not catalogued.
    pattern_key : str | None
        Catalogue key (e.g. "m7/7"), or None.
    """

    root: str
    quality: str
    bass: str
    bass_interval: int
    intervals: tuple[int, ...]
    display_name: str | None
    pattern_key: str | None


def _pattern(quality: str, bass_interval: int, display_name: str) -> SlashChordDefinition:
    return SlashChordDefinition(quality=quality, bass_interval=bass_interval, display_name=display_name)


# Keyed by "<pattern quality>/<bass interval>"
SLASH_CHORD_PATTERNS: Mapping[str, SlashChordDefinition] = MappingProxyType(
    {
        # Major
        "major/2": _pattern("", 2, "C/D (2nd in bass)"),
        "major/4": _pattern("", 4, "C/E (3rd in bass)"),
        "major/5": _pattern("", 5, "C/F (4th in bass)"),
        "major/7": _pattern("", 7, "C/G (5th in bass)"),
        "major/9": _pattern("", 9, "C/A (6th in bass)"),
        "major/10": _pattern("", 10, "C/Bb (minor 7th in bass)"),
        "major/11": _pattern("", 11, "C/B (major 7th in bass)"),
        # Minor
        "minor/3": _pattern("m", 3, "Cm/Eb (minor 3rd in bass)"),
        "minor/7": _pattern("m", 7, "Cm/G (5th in bass)"),
        "minor/9": _pattern("m", 9, "Cm/A (6th in bass)"),
        "minor/10": _pattern("m", 10, "Cm/Bb (minor 7th in bass)"),
        # Dominant seventh
        "7/3": _pattern("7", 3, "C7/Eb (minor 3rd in bass, blues)"),
        "7/4": _pattern("7", 4, "C7/E (3rd in bass)"),
        "7/5": _pattern("7", 5, "C7/F (4th in bass)"),
        "7/7": _pattern("7", 7, "C7/G (5th in bass)"),
        "7/10": _pattern("7", 10, "C7/Bb (minor 7th in bass)"),
        # Minor seventh
        "m7/3": _pattern("m7", 3, "Cm7/Eb (minor 3rd in bass)"),
        "m7/5": _pattern("m7", 5, "Cm7/F (4th in bass)"),
        "m7/7": _pattern("m7", 7, "Cm7/G (5th in bass)"),
        "m7/10": _pattern("m7", 10, "Cm7/Bb (minor 7th in bass)"),
        # Major seventh
        "M7/4": _pattern("M7", 4, "CM7/E (3rd in bass)"),
        "M7/5": _pattern("M7", 5, "CM7/F (4th in bass)"),
        "M7/7": _pattern("M7", 7, "CM7/G (5th in bass)"),
        "M7/11": _pattern("M7", 11, "CM7/B (major 7th in bass)"),
        # Diminished
        "dim/3": _pattern("dim", 3, "Cdim/Eb (minor 3rd in bass)"),
        "dim/6": _pattern("dim", 6, "Cdim/Gb (diminished 5th in bass)"),
        "dim/9": _pattern("dim", 9, "Cdim/A (diminished 7th in bass)"),
        # Diminished seventh
        "dim7/3": _pattern("dim7", 3, "Cdim7/Eb (minor 3rd in bass)"),
        "dim7/6": _pattern("dim7", 6, "Cdim7/Gb (diminished 5th in bass)"),
        "dim7/9": _pattern("dim7", 9, "Cdim7/Bbb (diminished 7th in bass)"),
        # Augmented
        "aug/4": _pattern("aug", 4, "Caug/E (3rd in bass)"),
        "aug/8": _pattern("aug", 8, "Caug/G# (augmented 5th in bass)"),
        # Half-diminished
        "m7b5/3": _pattern("m7b5", 3, "Cm7b5/Eb (minor 3rd in bass)"),
        "m7b5/6": _pattern("m7b5", 6, "Cm7b5/Gb (diminished 5th in bass)"),
        "m7b5/10": _pattern("m7b5", 10, "Cm7b5/Bb (minor 7th in bass)"),
        # Sixth
        "6/4": _pattern("6", 4, "C6/E (3rd in bass)"),
        "6/7": _pattern("6", 7, "C6/G (5th in bass)"),
        "6/9": _pattern("6", 9, "C6/A (6th in bass)"),
        # Minor sixth
        "m6/3": _pattern("m6", 3, "Cm6/Eb (minor 3rd in bass)"),
        "m6/7": _pattern("m6", 7, "Cm6/G (5th in bass)"),
        "m6/9": _pattern("m6", 9, "Cm6/A (6th in bass)"),
        # Suspended
        "sus4/5": _pattern("sus4", 5, "Csus4/F (4th in bass)"),
        "sus4/7": _pattern("sus4", 7, "Csus4/G (5th in bass)"),
        "7sus4/5": _pattern("7sus4", 5, "C7sus4/F (4th in bass)"),
        "7sus4/7": _pattern("7sus4", 7, "C7sus4/G (5th in bass)"),
        "7sus4/10": _pattern("7sus4", 10, "C7sus4/Bb (minor 7th in bass)"),
        # Added ninth
        "add9/2": _pattern("add9", 2, "Cadd9/D (9th in bass)"),
        "add9/4": _pattern("add9", 4, "Cadd9/E (3rd in bass)"),
        "add9/7": _pattern("add9", 7, "Cadd9/G (5th in bass)"),
    }
)

# Canonical quality token -> catalogue key prefix, where they differ
_PATTERN_QUALITY_NAMES: Mapping[str, str] = MappingProxyType({"": "major", "m": "minor"})


def _pattern_quality(quality: str) -> str:
    canonical = normalize_quality_token(quality)
    return _PATTERN_QUALITY_NAMES.get(canonical, canonical)


def chord_pitch_classes(root_pitch_class: int, quality: str) -> list[int]:
    """Return the pitch classes of an unslashed chord.

    Intervals are resolved through the registry and reduced mod 12, so a
    9th and a 2nd collapse to one entry. Order follows the resolved
    intervals; duplicates are dropped.

    Examples
    --------
    >>> chord_pitch_classes(9, "m7")
    [9, 0, 4, 7]
    """
    pitch_classes: list[int] = []
    for interval in resolve_quality_to_intervals(quality):
        pitch_class = normalize_to_pitch_class(root_pitch_class + interval)
        if pitch_class not in pitch_classes:
            pitch_classes.append(pitch_class)
    return pitch_classes


def slash_chord_pitch_classes(root_pitch_class: int, quality: str, bass_interval: int) -> list[int]:
    """Compute the pitch classes a slash chord sounds, bass first.

    If the bass is already a chord tone it is moved to the front;
    otherwise it is prepended as an added tone. Unknown qualities fall
    back to a major triad.

    Parameters
    ----------
    root_pitch_class : int
        Pitch class of the root (0-11).
    quality : str
        Quality token in any accepted spelling.
    bass_interval : int
        Semitones from the root up to the bass.

    Returns
    -------
    list[int]
        Bass pitch class followed by the remaining chord tones, no duplicates.

    Examples
    --------
    >>> slash_chord_pitch_classes(9, "m7", 7)
    [4, 9, 0, 7]
    >>> slash_chord_pitch_classes(0, "", 2)
    [2, 0, 4, 7]
    """
    bass_pitch_class = normalize_to_pitch_class(root_pitch_class + bass_interval)
    chord_tones = chord_pitch_classes(root_pitch_class, quality)
    return [bass_pitch_class, *(pc for pc in chord_tones if pc != bass_pitch_class)]


def parse_slash_label(text: str) -> Chord | None:
    """Parse a ``Root[Quality]/Bass`` label.

    Parameters
    ----------
    text : str
        The label (e.g., "Am7/E", "C/E", "F#m7b5/C").

    Returns
    -------
    Chord | None
        The parsed chord with the quality as written, or None if the text
        is not a slash chord label.

    Examples
    --------
    >>> parse_slash_label("Am7/E")
    Chord(root='A', quality='m7', bass='E')
    >>> parse_slash_label("Am7") is None
    True
    """
    match = SLASH_LABEL_RE.match(text)
    if match is None:
        return None
    root, quality, bass = match.groups()
    return Chord(root=root, quality=quality, bass=bass)


def bass_interval(root: str, bass: str) -> int:
    """Compute the interval from a root note up to a bass note.

    Unknown note names give 0.

    Examples
    --------
    >>> bass_interval("A", "E")
    7
    >>> bass_interval("C", "Bb")
    10
    """
    root_pc = NOTE_TO_PC.get(root)
    bass_pc = NOTE_TO_PC.get(bass)
    if root_pc is None or bass_pc is None:
        return 0
    return normalize_to_pitch_class(bass_pc - root_pc)


def find_pattern_key(quality: str, interval: int) -> str | None:
    """Return the catalogue key for a quality and bass interval, if curated.

    Examples
    --------
    >>> find_pattern_key("min7", 7)
    'm7/7'
    >>> find_pattern_key("", 1) is None
    True
    """
    key = f"{_pattern_quality(quality)}/{interval}"
    return key if key in SLASH_CHORD_PATTERNS else None


def slash_chord_display_info(label: str) -> SlashChordInfo | None:
    """Parse a slash chord label and describe it.

    Parameters
    ----------
    label : str
        The slash chord label (e.g., "Am7/G").

    Returns
    -------
    SlashChordInfo | None
        The description, or None if the label does not parse.

    Examples
    --------
    >>> info = slash_chord_display_info("Am7/E")
    >>> info.bass_interval, info.display_name
    (7, 'Cm7/G (5th in bass)')
    """
    chord = parse_slash_label(label)
    if chord is None or chord.bass is None:
        return None

    interval = bass_interval(chord.root, chord.bass)
    pattern_key = find_pattern_key(chord.quality, interval)
    display_name = SLASH_CHORD_PATTERNS[pattern_key].display_name if pattern_key else None

    return SlashChordInfo(
        root=chord.root,
        quality=chord.quality,
        bass=chord.bass,
        bass_interval=interval,
        intervals=tuple(resolve_quality_to_intervals(chord.quality)),
        display_name=display_name,
        pattern_key=pattern_key,
    )


def all_slash_chord_patterns() -> list[SlashChordDefinition]:
    """Return every curated slash chord pattern."""
    return list(SLASH_CHORD_PATTERNS.values())


def supported_bass_intervals(quality: str) -> list[int]:
    """Return the curated bass intervals for a quality, ascending.

    Examples
    --------
    >>> supported_bass_intervals("m")
    [3, 7, 9, 10]
    """
    prefix = f"{_pattern_quality(quality)}/"
    return sorted(
        definition.bass_interval for key, definition in SLASH_CHORD_PATTERNS.items() if key.startswith(prefix)
    )
