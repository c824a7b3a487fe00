"""Core types, constants, and errors for fretwise."""

from .note import PitchClass, find_root, resolve_root
from .config import TheoryConfig, MatchPolicy
from .errors import (
    TheoryError,
    InvalidRootNote,
    DegreeOutOfRange,
    IndexOutOfRange,
    UnknownFormula,
)
from .constants import (
    CHROMATIC_NAMES,
    STANDARD_TUNING,
    DEFAULT_NUM_FRETS,
    MIDDLE_C,
)

__all__ = [
    "PitchClass",
    "find_root",
    "resolve_root",
    "TheoryConfig",
    "MatchPolicy",
    "TheoryError",
    "InvalidRootNote",
    "DegreeOutOfRange",
    "IndexOutOfRange",
    "UnknownFormula",
    "CHROMATIC_NAMES",
    "STANDARD_TUNING",
    "DEFAULT_NUM_FRETS",
    "MIDDLE_C",
]
