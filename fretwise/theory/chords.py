"""Chords - Pitch sets built by transposing a root by fixed offsets."""

from dataclasses import dataclass
from typing import List, Set, Tuple

from ..core import PitchClass
from .intervals import get_chord_formula


@dataclass(frozen=True)
class Chord:
    """Represents a chord built on a root."""

    name: str  # Display name (e.g., "C Major", "G7")
    root: PitchClass
    offsets: Tuple[int, ...]  # Semitones above the root, in voicing order
    quality: str = ""  # "major", "minor", "dominant7", "major7", "minor7", etc.

    # Name suffixes appended to the root name
    NAME_SUFFIXES = {
        "major": " Major",
        "minor": " Minor",
        "dominant7": "7",
        "major7": "Maj7",
        "minor7": "min7",
        "diminished": "dim",
        "augmented": "aug",
        "sus2": "sus2",
        "sus4": "sus4",
        "diminished7": "dim7",
        "half_diminished7": "m7b5",
    }

    def notes(self) -> List[PitchClass]:
        """Get the chord's pitches, root first. Duplicates are kept."""
        return [self.root] + [self.root.transpose(offset) for offset in self.offsets]

    def note_names(self) -> List[str]:
        return [note.name for note in self.notes()]

    def pitch_classes(self) -> Set[int]:
        """Get pitch classes (0-11) in the chord."""
        return {note.pitch_class for note in self.notes()}

    @property
    def symbol(self) -> str:
        """Get chord symbol (e.g., 'Cmaj7', 'Am', 'A#7')."""
        quality_map = {
            "major": "",
            "minor": "m",
            "diminished": "dim",
            "augmented": "aug",
            "dominant7": "7",
            "major7": "maj7",
            "minor7": "m7",
            "diminished7": "dim7",
            "half_diminished7": "m7b5",
            "sus2": "sus2",
            "sus4": "sus4",
        }
        suffix = quality_map.get(self.quality, self.quality)
        root = self.root.name.split("/")[0]
        return f"{root}{suffix}"

    @classmethod
    def major(cls, root: PitchClass) -> "Chord":
        return build_chord(root, "major")

    @classmethod
    def minor(cls, root: PitchClass) -> "Chord":
        return build_chord(root, "minor")

    @classmethod
    def dominant7(cls, root: PitchClass) -> "Chord":
        return build_chord(root, "dominant7")

    @classmethod
    def major7(cls, root: PitchClass) -> "Chord":
        return build_chord(root, "major7")

    @classmethod
    def minor7(cls, root: PitchClass) -> "Chord":
        return build_chord(root, "minor7")


def build_chord(root: PitchClass, quality: str) -> Chord:
    """
    Build a chord from a registered formula.

    Args:
        root: Root pitch
        quality: Formula name (e.g., "major", "dominant7")

    Returns:
        Chord named like "C Major", "C7", "CMaj7", "Cmin7"

    Raises:
        UnknownFormula: If no chord formula is registered under `quality`
    """
    formula = get_chord_formula(quality)
    suffix = Chord.NAME_SUFFIXES.get(formula.name, f" {formula.display}")
    return Chord(
        name=f"{root.name}{suffix}",
        root=root,
        offsets=formula.intervals,
        quality=formula.name,
    )
