"""fretwise - Music theory projected onto a fretted fingerboard.

Architecture Layers:
    1. core/       - PitchClass, chromatic table, configuration, errors
    2. theory/     - Intervals, scales, chords, roman-numeral progressions
    3. instrument/ - Fretboard grid, note lookup, highlighting
    4. practice/   - Seeded quiz exercises and answer checking
"""

__version__ = "0.1.0"

# Core types
from .core import (
    PitchClass,
    TheoryConfig,
    MatchPolicy,
    find_root,
    resolve_root,
    TheoryError,
    InvalidRootNote,
    DegreeOutOfRange,
    IndexOutOfRange,
    UnknownFormula,
)

# Theory layer
from .theory import (
    IntervalNamer,
    Scale,
    Chord,
    RomanNumeralResolver,
    ChordProgression,
    build_scale,
    build_chord,
    build_progression,
    progression_from_preset,
)

# Instrument layer
from .instrument import Fretboard

# Practice layer
from .practice import Exercise, ExerciseGenerator

__all__ = [
    # Core
    "PitchClass",
    "TheoryConfig",
    "MatchPolicy",
    "find_root",
    "resolve_root",
    "TheoryError",
    "InvalidRootNote",
    "DegreeOutOfRange",
    "IndexOutOfRange",
    "UnknownFormula",
    # Theory
    "IntervalNamer",
    "Scale",
    "Chord",
    "RomanNumeralResolver",
    "ChordProgression",
    "build_scale",
    "build_chord",
    "build_progression",
    "progression_from_preset",
    # Instrument
    "Fretboard",
    # Practice
    "Exercise",
    "ExerciseGenerator",
]
