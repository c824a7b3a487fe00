"""Theory layer - Scales, chords, intervals, and progressions.

This layer builds the tonal model on top of PitchClass:
- Interval formulas shared by scales and chords
- Scale construction by walking steps from a root
- Chord construction by offsetting a root
- Roman-numeral resolution and progression assembly
- Interval naming

Pipeline: PitchClass → [Scale, Chord] → RomanNumeralResolver → ChordProgression
"""

from .intervals import (
    IntervalFormula,
    IntervalNamer,
    SCALE_FORMULAS,
    CHORD_FORMULAS,
    CORE_CHORD_QUALITIES,
    get_scale_formula,
    get_chord_formula,
)
from .scales import Scale, build_scale
from .chords import Chord, build_chord
from .progression import (
    RomanNumeralResolver,
    ChordProgression,
    COMMON_PROGRESSIONS,
    build_progression,
    progression_from_preset,
)

__all__ = [
    # Intervals
    "IntervalFormula",
    "IntervalNamer",
    "SCALE_FORMULAS",
    "CHORD_FORMULAS",
    "CORE_CHORD_QUALITIES",
    "get_scale_formula",
    "get_chord_formula",
    # Scales
    "Scale",
    "build_scale",
    # Chords
    "Chord",
    "build_chord",
    # Progressions
    "RomanNumeralResolver",
    "ChordProgression",
    "COMMON_PROGRESSIONS",
    "build_progression",
    "progression_from_preset",
]
