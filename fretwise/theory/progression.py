"""Chord progressions - Resolve roman numerals against a scale.

Implements:
- Degree lookup from roman-numeral tokens (I..VII, case-insensitive)
- Quality inference from case and the "7" suffix
- Progression assembly with degree checks for non-heptatonic scales
- The common progressions offered for practice
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from ..core import PitchClass, DegreeOutOfRange, UnknownFormula
from .chords import Chord, build_chord
from .scales import Scale, build_scale


class RomanNumeralResolver:
    """Map roman-numeral tokens to chords within a scale.

    Degrees assume a diatonic (7-degree) scale: I..VII map to 0..6.
    Unrecognized numerals fall back to degree 0 without raising. Diminished
    qualities are never inferred, so "vii" yields a minor triad.
    """

    NUMERALS = {
        "I": 0,
        "II": 1,
        "III": 2,
        "IV": 3,
        "V": 4,
        "VI": 5,
        "VII": 6,
    }

    _LEADING_NUMERAL = re.compile(r"^[ivIV]+")

    def degree_of(self, numeral: str) -> int:
        """Zero-based scale degree for a numeral token; 0 if unrecognized."""
        match = self._LEADING_NUMERAL.match(numeral.strip())
        if not match:
            return 0
        return self.NUMERALS.get(match.group(0).upper(), 0)

    def quality_of(self, numeral: str) -> str:
        """Chord quality implied by a numeral's case and 7 suffix."""
        token = numeral.strip()
        upper = token[:1].isupper()
        if "7" in token:
            return "dominant7" if upper else "minor7"
        return "major" if upper else "minor"

    def resolve(self, scale: Scale, numeral: str) -> Chord:
        """
        Resolve a numeral to a chord rooted on the matching scale degree.

        Args:
            scale: Reference scale
            numeral: Roman-numeral token (e.g., "IV", "ii", "V7")

        Returns:
            Chord on the scale degree

        Raises:
            DegreeOutOfRange: If the scale has fewer notes than the degree needs
        """
        notes = scale.notes()
        degree = self.degree_of(numeral)
        if degree >= len(notes):
            raise DegreeOutOfRange(numeral, degree, len(notes))
        return build_chord(notes[degree], self.quality_of(numeral))


@dataclass
class ChordProgression:
    """Container for a resolved chord progression."""

    name: str
    chords: List[Chord]
    numerals: List[str] = field(default_factory=list)  # e.g., ["I", "IV", "V"]
    scale: Optional[Scale] = None

    @property
    def key(self) -> Optional[str]:
        """Get key as string (e.g., 'C Major')."""
        if self.scale is not None:
            return self.scale.name
        return None

    def names(self) -> List[str]:
        """Get chord display names (e.g., ['C Major', 'G7'])."""
        return [c.name for c in self.chords]

    def symbols(self) -> List[str]:
        """Get chord symbols (e.g., ['C', 'G7', 'Am'])."""
        return [c.symbol for c in self.chords]

    def __len__(self) -> int:
        return len(self.chords)


def build_progression(
    scale: Scale,
    numerals: Sequence[str],
    name: Optional[str] = None,
    resolver: Optional[RomanNumeralResolver] = None,
) -> ChordProgression:
    """
    Build a progression by resolving each numeral against a scale.

    On scales that are not heptatonic only the scale's own degrees may be
    used, so the closing octave note of a pentatonic scale is never a root.

    Args:
        scale: Reference scale
        numerals: Roman-numeral tokens in order
        name: Progression name (default: numerals joined with "-")
        resolver: Resolver to use (default: a fresh RomanNumeralResolver)

    Returns:
        ChordProgression with one chord per numeral

    Raises:
        DegreeOutOfRange: If a numeral needs a degree the scale lacks
    """
    resolver = resolver or RomanNumeralResolver()
    numerals = list(numerals)
    chords = []
    for numeral in numerals:
        if not scale.is_heptatonic:
            degree = resolver.degree_of(numeral)
            if degree >= scale.degree_count:
                raise DegreeOutOfRange(numeral, degree, scale.degree_count)
        chords.append(resolver.resolve(scale, numeral))

    return ChordProgression(
        name=name or "-".join(numerals),
        chords=chords,
        numerals=numerals,
        scale=scale,
    )


# Presets: key -> (scale quality, numerals, label)
COMMON_PROGRESSIONS: Dict[str, Tuple[str, List[str], str]] = {
    "I-IV-V": ("major", ["I", "IV", "V"], "I-IV-V"),
    "pop": ("major", ["I", "V", "vi", "IV"], "I-V-vi-IV (Pop)"),
    "jazz": ("major", ["ii", "V", "I"], "ii-V-I (Jazz)"),
    "minor": ("minor", ["i", "iv", "v"], "i-iv-v"),
    "melancholic": ("major", ["vi", "IV", "I", "V"], "vi-IV-I-V (Melancholic)"),
}


def progression_from_preset(root: PitchClass, preset: str) -> ChordProgression:
    """
    Build one of the common progressions in the key of `root`.

    Args:
        root: Key root
        preset: Key of COMMON_PROGRESSIONS (e.g., "pop", "jazz")

    Returns:
        ChordProgression named like "C Major I-V-vi-IV (Pop)"
    """
    try:
        quality, numerals, label = COMMON_PROGRESSIONS[preset]
    except KeyError:
        raise UnknownFormula(f"Unknown progression: {preset}") from None

    scale = build_scale(root, quality)
    return build_progression(scale, numerals, name=f"{scale.name} {label}")
