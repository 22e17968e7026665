"""Chord label data model.

This module provides the parsed form of a chord label such as
``"Am7/E"``: a root note name, a quality token and an optional bass.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Chord:
    """Parsed chord label.

    Parameters
    ----------
    root : str
        The root note of the chord (e.g., "C", "F#", "Bb").
    quality : str
        The quality token as written (e.g., "", "m7", "maj7", "ø7").
    bass : str | None
        The bass note if different from root (for slash chords).

    Examples
    --------
    >>> chord = Chord(root="A", quality="m7", bass="E")
    >>> str(chord)
    'Am7/E'
    >>> chord.to_harte()
    'A:min7/E'
    """

    root: str
    quality: str
    bass: str | None = None

    @property
    def label(self) -> str:
        """Lead-sheet label (e.g., "Am7/E")."""
        result = f"{self.root}{self.quality}"
        if self.bass:
            result = f"{result}/{self.bass}"
        return result

    @property
    def is_slash(self) -> bool:
        """Whether the chord names an explicit bass note."""
        return bool(self.bass)

    def to_harte(self) -> str:
        """Convert to Harte notation string.

        Returns
        -------
        str
            Chord in Harte notation (e.g., "A:min7", "C:maj/E").
        """
        from chord_shapes.converter import quality_to_harte

        result = f"{self.root}:{quality_to_harte(self.quality)}"
        if self.bass:
            result = f"{result}/{self.bass}"
        return result

    def __str__(self) -> str:
        """Return the lead-sheet label as default string representation."""
        return self.label
