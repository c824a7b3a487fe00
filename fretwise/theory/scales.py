"""Scales - Ordered pitch sequences built by walking interval steps from a root."""

from dataclasses import dataclass
from typing import List, Set, Tuple

from ..core import PitchClass
from .intervals import get_scale_formula


@dataclass(frozen=True)
class Scale:
    """A named scale: a root plus the successive semitone steps above it.

    The step list is consumed exactly once, left to right, so a scale always
    has one more note than it has steps (the last note closes the octave for
    the built-in formulas).
    """

    name: str  # Display name (e.g., "C Major")
    root: PitchClass
    steps: Tuple[int, ...]
    quality: str = ""  # Registry key (e.g., "major"), empty for ad-hoc scales

    def notes(self) -> List[PitchClass]:
        """Get the scale's pitches, root first."""
        notes = [self.root]
        current = self.root
        for step in self.steps:
            current = current.transpose(step)
            notes.append(current)
        return notes

    def note_names(self) -> List[str]:
        return [note.name for note in self.notes()]

    def pitch_classes(self) -> Set[int]:
        """Get pitch classes (0-11) in the scale."""
        return {note.pitch_class for note in self.notes()}

    @property
    def degree_count(self) -> int:
        """Number of distinct scale degrees (one per step)."""
        return len(self.steps)

    @property
    def is_heptatonic(self) -> bool:
        return self.degree_count == 7

    @classmethod
    def major(cls, root: PitchClass) -> "Scale":
        return build_scale(root, "major")

    @classmethod
    def minor(cls, root: PitchClass) -> "Scale":
        return build_scale(root, "minor")

    @classmethod
    def pentatonic_major(cls, root: PitchClass) -> "Scale":
        return build_scale(root, "pentatonic_major")

    @classmethod
    def pentatonic_minor(cls, root: PitchClass) -> "Scale":
        return build_scale(root, "pentatonic_minor")

    @classmethod
    def blues(cls, root: PitchClass) -> "Scale":
        return build_scale(root, "blues")


def build_scale(root: PitchClass, quality: str) -> Scale:
    """
    Build a scale from a registered formula.

    Args:
        root: Root pitch
        quality: Formula name (e.g., "major", "pentatonic_minor", "dorian")

    Returns:
        Scale named like "C Major"

    Raises:
        UnknownFormula: If no scale formula is registered under `quality`
    """
    formula = get_scale_formula(quality)
    return Scale(
        name=f"{root.name} {formula.display}",
        root=root,
        steps=formula.intervals,
        quality=formula.name,
    )
