"""PitchClass data class - the fundamental unit of the theory model."""

from dataclasses import dataclass
from typing import Optional
import numpy as np

from .constants import (
    CHROMATIC_NAMES,
    SEMITONES_PER_OCTAVE,
    DEFAULT_OCTAVE,
    A4_PITCH,
    A4_FREQUENCY,
)
from .errors import InvalidRootNote


@dataclass(frozen=True)
class PitchClass:
    """An absolute pitch with its chromatic name.

    The pitch is the source of truth (MIDI numbering, C4 = 60, any integer
    allowed); the name is always derived from ``pitch mod 12``.
    """

    pitch: int

    @property
    def pitch_class(self) -> int:
        """Get pitch class (0-11, where 0=C)."""
        return self.pitch % SEMITONES_PER_OCTAVE

    @property
    def name(self) -> str:
        """Get chromatic name (e.g., 'C', 'F#/Gb')."""
        return CHROMATIC_NAMES[self.pitch_class]

    @property
    def octave(self) -> int:
        return self.pitch // SEMITONES_PER_OCTAVE - 1

    @property
    def pitch_name(self) -> str:
        """Get name with octave (e.g., 'C4', 'A#/Bb3')."""
        return f"{self.name}{self.octave}"

    @property
    def frequency(self) -> float:
        """Equal-tempered frequency in Hz (A4 = 440)."""
        return float(A4_FREQUENCY * np.power(2.0, (self.pitch - A4_PITCH) / 12.0))

    def transpose(self, semitones: int) -> "PitchClass":
        """Return the pitch `semitones` above (or below, if negative) this one."""
        return PitchClass(self.pitch + semitones)

    def same_class(self, other: "PitchClass") -> bool:
        """Whether both pitches are octave-equivalent."""
        return self.pitch_class == other.pitch_class

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_index(cls, index: int, octave: int = DEFAULT_OCTAVE) -> "PitchClass":
        """Build a pitch from a chromatic index (0=C) and an octave number."""
        return cls(SEMITONES_PER_OCTAVE * (octave + 1) + index % SEMITONES_PER_OCTAVE)


def find_root(text: str, octave: int = DEFAULT_OCTAVE) -> Optional[PitchClass]:
    """
    Look up a root note by lenient name matching.

    An exact spelling ("Db", "C#", "e") wins first; otherwise the first
    chromatic entry containing `text` is used, so "#/D" still finds "C#/Db".

    Args:
        text: User-supplied note name (e.g., "C", "F#", "Bb")
        octave: Octave of the returned pitch (4 gives C4 = 60)

    Returns:
        The matching PitchClass, or None when nothing matches
    """
    text = text.strip() if text else ""
    if not text:
        return None
    spelled = text[0].upper() + text[1:]

    for index, name in enumerate(CHROMATIC_NAMES):
        if spelled in name.split("/"):
            return PitchClass.from_index(index, octave)

    for index, name in enumerate(CHROMATIC_NAMES):
        if text in name:
            return PitchClass.from_index(index, octave)

    return None


def resolve_root(text: str, octave: int = DEFAULT_OCTAVE) -> PitchClass:
    """Like find_root, but raise InvalidRootNote when nothing matches."""
    root = find_root(text, octave)
    if root is None:
        raise InvalidRootNote(text)
    return root
