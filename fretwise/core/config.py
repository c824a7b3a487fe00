"""Configuration shared by the fretboard, interval naming, and practice layers."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .constants import (
    STANDARD_TUNING,
    DEFAULT_NUM_FRETS,
    DEFAULT_OCTAVE,
    QUIZ_MAX_FRET,
)


class MatchPolicy(Enum):
    """How fretboard cells are matched against target notes."""
    PITCH_CLASS = "pitch_class"
    SUBSTRING = "substring"


@dataclass
class TheoryConfig:
    """Configuration for fretwise components.

    Attributes:
        tuning: Open-string MIDI pitches, string 0 first (default: standard E, high to low)
        num_frets: Number of frets above the open string (default: 24)
        match_policy: Highlight matching policy, "pitch_class" or "substring" (default: "pitch_class")
        octave_as_interval: Name non-zero multiples of 12 semitones "Octave" (default: False)
        default_octave: Octave used when resolving root names (default: 4)
        seed: Seed for exercise generation, None for fresh entropy (default: None)
        quiz_max_fret: Highest fret asked in fretboard exercises (default: 11)
    """

    tuning: Tuple[int, ...] = STANDARD_TUNING
    num_frets: int = DEFAULT_NUM_FRETS
    match_policy: str = MatchPolicy.PITCH_CLASS.value
    octave_as_interval: bool = False
    default_octave: int = DEFAULT_OCTAVE
    seed: Optional[int] = None
    quiz_max_fret: int = QUIZ_MAX_FRET

    @property
    def policy(self) -> MatchPolicy:
        return MatchPolicy(self.match_policy)
