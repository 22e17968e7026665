"""Data models for fretboard fingerings.

Fret arrays are six-element tuples indexed from string 1 (high E) to
string 6 (low E); ``None`` marks a muted string and ``0`` an open one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from chord_shapes.fretboard.instrument import UNASSIGNED_FINGER

Difficulty = Literal["easy", "medium", "hard"]

DIFFICULTY_ORDER: dict[Difficulty, int] = {"easy": 0, "medium": 1, "hard": 2}

Frets = tuple[int | None, ...]


@dataclass(frozen=True)
class FingeringSearch:
    """Input to a single per-bass-string search.

    Parameters
    ----------
    bass_string : int
        String index carrying the bass (0 = string 1 ... 5 = string 6).
    bass_fret : int
        Fret of the bass note on that string (never 0).
    bass_pitch_class : int
        Absolute pitch class of the bass.
    root_pitch_class : int
        Absolute pitch class of the chord root.
    required : tuple[int, ...]
        Chord tones the other strings should cover (bass excluded).
    bass_is_chord_tone : bool
        Whether the bass is one of the chord's own tones.
    """

    bass_string: int
    bass_fret: int
    bass_pitch_class: int
    root_pitch_class: int
    required: tuple[int, ...]
    bass_is_chord_tone: bool


@dataclass(frozen=True)
class GeneratedFingering:
    """Raw search result before finger estimation.

    Parameters
    ----------
    frets : Frets
        Fret per string, ``None`` for muted.
    bass_string : int
        String index carrying the bass.
    bass_fret : int
        Fret of the bass note.
    intervals : tuple[int, ...]
        Root-relative pitch classes actually sounded, recomputed from frets.
    difficulty : Difficulty
        Difficulty bucket.
    """

    frets: Frets
    bass_string: int
    bass_fret: int
    intervals: tuple[int, ...]
    difficulty: Difficulty


@dataclass(frozen=True)
class Barre:
    """One finger stopping several strings at the same fret.

    Parameters
    ----------
    fret : int
        The barred fret.
    strings : tuple[int, int]
        Lowest and highest string index covered.
    """

    fret: int
    strings: tuple[int, int]


@dataclass(frozen=True)
class Fingering:
    """A playable chord shape.

    Parameters
    ----------
    id : str
        Identifier, e.g. "slash-Cm7-0".
    frets : Frets
        Fret per string, ``None`` for muted.
    fingers : tuple[int | None, ...]
        Finger per string: 1-4, ``UNASSIGNED_FINGER`` for a fretted
        position no finger was left for, ``None`` for open or muted.
    barre : Barre | None
        The reported barre, if any.
    has_multiple_barres : bool
        True when more barres were found than the one reported.
    base_fret : int
        First fret shown in a diagram (at least 1).
    muted : tuple[bool, ...]
        Per-string mute flags.
    difficulty : Difficulty
        Difficulty bucket.
    intervals : tuple[int, ...]
        Root-relative pitch classes actually sounded.
    bass_string : int
        String index carrying the bass.
    bass_fret : int
        Fret of the bass note.
    """

    id: str
    frets: Frets
    fingers: tuple[int | None, ...]
    barre: Barre | None
    has_multiple_barres: bool
    base_fret: int
    muted: tuple[bool, ...]
    difficulty: Difficulty
    intervals: tuple[int, ...]
    bass_string: int
    bass_fret: int

    @property
    def unassigned_strings(self) -> tuple[int, ...]:
        """String indices that are fretted but have no finger."""
        return tuple(i for i, finger in enumerate(self.fingers) if finger == UNASSIGNED_FINGER)

    @property
    def shape(self) -> str:
        """Tab-style shape from string 6 to string 1 (e.g., "x-7-5-5-8-8")."""
        return "-".join("x" if fret is None else str(fret) for fret in reversed(self.frets))
