"""Interval formulas - Named semitone collections shared by scales and chords.

Provides:
- Scale formulas (successive semitone steps)
- Chord formulas (semitone offsets from the root)
- Interval naming by semitone distance, and the reverse lookup
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..core import PitchClass, TheoryConfig, UnknownFormula


@dataclass(frozen=True)
class IntervalFormula:
    """A named, immutable sequence of semitone intervals."""

    name: str  # Registry key (e.g., "major", "minor7")
    intervals: Tuple[int, ...]
    kind: str  # "steps" (scale deltas) or "offsets" (chord offsets from root)
    display: str = ""  # Human-readable label (e.g., "Pentatonic Major")

    def __post_init__(self):
        if self.kind not in ("steps", "offsets"):
            raise ValueError(f"Unknown formula kind: {self.kind}")
        if self.kind == "steps" and any(step <= 0 for step in self.intervals):
            raise ValueError(f"Scale steps must be positive: {self.intervals}")

    @property
    def span(self) -> int:
        """Semitones covered from the root to the last interval."""
        if not self.intervals:
            return 0
        if self.kind == "steps":
            return sum(self.intervals)
        return max(self.intervals)


def _scale(name: str, steps: Tuple[int, ...], display: str) -> IntervalFormula:
    return IntervalFormula(name=name, intervals=steps, kind="steps", display=display)


def _chord(name: str, offsets: Tuple[int, ...], display: str) -> IntervalFormula:
    return IntervalFormula(name=name, intervals=offsets, kind="offsets", display=display)


# Scale formulas (successive semitone steps from the root)
SCALE_FORMULAS: Dict[str, IntervalFormula] = {
    "major": _scale("major", (2, 2, 1, 2, 2, 2, 1), "Major"),
    "minor": _scale("minor", (2, 1, 2, 2, 1, 2, 2), "Minor"),
    "pentatonic_major": _scale("pentatonic_major", (2, 2, 3, 2, 3), "Pentatonic Major"),
    "pentatonic_minor": _scale("pentatonic_minor", (3, 2, 2, 3, 2), "Pentatonic Minor"),
    "blues": _scale("blues", (3, 2, 1, 1, 3, 2), "Blues"),
    # Modes of the major scale
    "dorian": _scale("dorian", (2, 1, 2, 2, 2, 1, 2), "Dorian"),
    "phrygian": _scale("phrygian", (1, 2, 2, 2, 1, 2, 2), "Phrygian"),
    "lydian": _scale("lydian", (2, 2, 2, 1, 2, 2, 1), "Lydian"),
    "mixolydian": _scale("mixolydian", (2, 2, 1, 2, 2, 1, 2), "Mixolydian"),
    "locrian": _scale("locrian", (1, 2, 2, 1, 2, 2, 2), "Locrian"),
}

SCALE_ALIASES = {
    "ionian": "major",
    "aeolian": "minor",
    "natural_minor": "minor",
}

# Chord formulas (semitone offsets from the root, root itself excluded)
CHORD_FORMULAS: Dict[str, IntervalFormula] = {
    # Triads
    "major": _chord("major", (4, 7), "Major"),
    "minor": _chord("minor", (3, 7), "Minor"),
    "diminished": _chord("diminished", (3, 6), "Diminished"),
    "augmented": _chord("augmented", (4, 8), "Augmented"),
    "sus2": _chord("sus2", (2, 7), "Sus2"),
    "sus4": _chord("sus4", (5, 7), "Sus4"),
    # Seventh chords
    "dominant7": _chord("dominant7", (4, 7, 10), "Dominant 7"),
    "major7": _chord("major7", (4, 7, 11), "Major 7"),
    "minor7": _chord("minor7", (3, 7, 10), "Minor 7"),
    "diminished7": _chord("diminished7", (3, 6, 9), "Diminished 7"),
    "half_diminished7": _chord("half_diminished7", (3, 6, 10), "Half Diminished 7"),
}

# The five qualities the roman-numeral resolver and the exercises draw from
CORE_CHORD_QUALITIES = ["major", "minor", "dominant7", "major7", "minor7"]


def _normalize(name: str) -> str:
    return name.strip().lower().replace(" ", "_").replace("-", "_")


def get_scale_formula(name: str) -> IntervalFormula:
    """Look up a scale formula by name (case and separator insensitive)."""
    key = _normalize(name)
    key = SCALE_ALIASES.get(key, key)
    try:
        return SCALE_FORMULAS[key]
    except KeyError:
        raise UnknownFormula(f"Unknown scale: {name}") from None


def get_chord_formula(name: str) -> IntervalFormula:
    """Look up a chord formula by name (case and separator insensitive)."""
    key = _normalize(name)
    try:
        return CHORD_FORMULAS[key]
    except KeyError:
        raise UnknownFormula(f"Unknown chord quality: {name}") from None


class IntervalNamer:
    """Name the distance between two pitches.

    Table is bijective over 1..12 semitones. By default distances are reduced
    modulo 12 before lookup, so an exact octave reduces to 0 and is reported
    as "Unknown interval". Set `octave_as_interval` in the config to name
    non-zero multiples of 12 "Octave" instead.
    """

    INTERVALS = {
        "Minor 2nd": 1,
        "Major 2nd": 2,
        "Minor 3rd": 3,
        "Major 3rd": 4,
        "Perfect 4th": 5,
        "Tritone": 6,
        "Perfect 5th": 7,
        "Minor 6th": 8,
        "Major 6th": 9,
        "Minor 7th": 10,
        "Major 7th": 11,
        "Octave": 12,
    }

    UNKNOWN = "Unknown interval"

    def __init__(self, config: Optional[TheoryConfig] = None):
        self.config = config or TheoryConfig()
        self._names = {semitones: name for name, semitones in self.INTERVALS.items()}

    def name_of(self, semitones: int, mod12: bool = True) -> str:
        """
        Get the interval name for a semitone distance.

        Args:
            semitones: Signed distance in semitones
            mod12: Reduce the absolute distance modulo 12 before lookup

        Returns:
            Interval name, or "Unknown interval" when nothing matches
        """
        distance = abs(semitones)
        if mod12:
            if self.config.octave_as_interval and distance and distance % 12 == 0:
                return "Octave"
            distance %= 12
        return self._names.get(distance, self.UNKNOWN)

    def semitones_of(self, name: str) -> int:
        """Reverse lookup: interval name to semitone count."""
        try:
            return self.INTERVALS[name]
        except KeyError:
            raise UnknownFormula(f"Unknown interval: {name}") from None

    def between(self, first: PitchClass, second: PitchClass) -> str:
        """Name the interval from `first` to `second`."""
        return self.name_of(second.pitch - first.pitch)

    def definitions(self) -> List[Tuple[str, int]]:
        """All (name, semitones) pairs, smallest interval first."""
        return sorted(self.INTERVALS.items(), key=lambda item: item[1])
