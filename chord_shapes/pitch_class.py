"""Note-name and pitch-class operations.

Pitch classes are integers 0-11 with C=0. Note names accept sharp, flat
and the enharmonic spellings ``Fb``, ``E#``, ``Cb`` and ``B#``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from chord_shapes.theory.intervals import normalize_to_pitch_class

if TYPE_CHECKING:
    from collections.abc import Mapping

    from chord_shapes.models import Chord

# Note name to pitch class (0-11, where C=0)
NOTE_TO_PC: Mapping[str, int] = MappingProxyType(
    {
        "C": 0,
        "C#": 1,
        "Db": 1,
        "D": 2,
        "D#": 3,
        "Eb": 3,
        "E": 4,
        "Fb": 4,
        "E#": 5,
        "F": 5,
        "F#": 6,
        "Gb": 6,
        "G": 7,
        "G#": 8,
        "Ab": 8,
        "A": 9,
        "A#": 10,
        "Bb": 10,
        "B": 11,
        "Cb": 11,
        "B#": 0,
    }
)

# Pitch class to sharp note name (prefer sharps for consistency)
PC_TO_NOTE: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")


def note_to_pc(note: str) -> int:
    """Convert a note name to pitch class (0-11).

    Parameters
    ----------
    note : str
        Note name (e.g., "C", "F#", "Bb").

    Returns
    -------
    int
        Pitch class (0-11, where C=0).

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> note_to_pc("F#")
    6
    >>> note_to_pc("B#")
    0
    """
    if note in NOTE_TO_PC:
        return NOTE_TO_PC[note]
    msg = f"Unknown note: {note}"
    raise ValueError(msg)


def pc_to_note(pitch_class: int) -> str:
    """Convert a pitch class to its sharp note name.

    Examples
    --------
    >>> pc_to_note(10)
    'A#'
    >>> pc_to_note(-1)
    'B'
    """
    return PC_TO_NOTE[normalize_to_pitch_class(pitch_class)]


def chord_to_pitch_classes(chord: Chord) -> frozenset[int]:
    """Convert a Chord to the set of absolute pitch classes it sounds.

    The quality is resolved through the registry (unknown qualities fall
    back to a major triad); the bass of a slash chord is included.

    Examples
    --------
    >>> from chord_shapes.models import Chord
    >>> sorted(chord_to_pitch_classes(Chord(root="G", quality="m")))
    [2, 7, 10]
    >>> sorted(chord_to_pitch_classes(Chord(root="C", quality="", bass="D")))
    [0, 2, 4, 7]
    """
    from chord_shapes.theory.slash_chords import chord_pitch_classes

    pitch_classes = set(chord_pitch_classes(note_to_pc(chord.root), chord.quality))
    if chord.bass:
        pitch_classes.add(note_to_pc(chord.bass))
    return frozenset(pitch_classes)


def transpose_chord(chord: Chord, semitones: int) -> Chord:
    """Transpose a chord by a number of semitones.

    Root and bass are respelled with sharps; the quality is kept as written.

    Examples
    --------
    >>> from chord_shapes.models import Chord
    >>> str(transpose_chord(Chord(root="A", quality="m7", bass="E"), 3))
    'Cm7/G'
    """
    from chord_shapes.models import Chord as ChordModel

    new_root = pc_to_note(note_to_pc(chord.root) + semitones)
    new_bass = pc_to_note(note_to_pc(chord.bass) + semitones) if chord.bass else None
    return ChordModel(root=new_root, quality=chord.quality, bass=new_bass)
