"""Fretboard - Project pitches onto (string, fret) coordinates.

The grid of absolute pitches is computed eagerly when the board is built
and stored as a read-only numpy array. Re-tuning builds a new board.
"""

import warnings
from typing import Iterable, List, Optional, Sequence, Tuple, Union
import numpy as np

from ..core import (
    PitchClass,
    TheoryConfig,
    MatchPolicy,
    IndexOutOfRange,
    CHROMATIC_NAMES,
    DEFAULT_NUM_FRETS,
    STANDARD_TUNING,
)
from ..core.constants import DEFAULT_FRET_RANGE


class Fretboard:
    """A fretted fingerboard with one open-string pitch per string.

    String 0 is the first entry of the tuning (the high E string in
    standard tuning). Fret 0 is the open string.
    """

    def __init__(
        self,
        tuning: Sequence[PitchClass],
        num_frets: int = DEFAULT_NUM_FRETS,
        config: Optional[TheoryConfig] = None,
    ):
        """
        Initialize Fretboard.

        Args:
            tuning: Open-string pitches, string 0 first
            num_frets: Number of frets above the open string
            config: Optional TheoryConfig (supplies the default match policy)
        """
        if not tuning:
            raise ValueError("Tuning must contain at least one string")
        if num_frets < 0:
            raise ValueError(f"Number of frets must be non-negative: {num_frets}")

        self.config = config or TheoryConfig()
        self._tuning = tuple(tuning)
        self._num_frets = num_frets

        open_pitches = np.array([note.pitch for note in self._tuning], dtype=np.int64)
        frets = np.arange(num_frets + 1, dtype=np.int64)
        grid = open_pitches[:, np.newaxis] + frets[np.newaxis, :]
        grid.setflags(write=False)
        self._grid = grid

    @classmethod
    def build(
        cls,
        tuning: Sequence[PitchClass],
        num_frets: int = DEFAULT_NUM_FRETS,
        config: Optional[TheoryConfig] = None,
    ) -> "Fretboard":
        return cls(tuning, num_frets, config)

    @classmethod
    def standard(cls, num_frets: int = DEFAULT_NUM_FRETS) -> "Fretboard":
        """Six-string guitar in standard tuning (E4 B3 G3 D3 A2 E2)."""
        return cls([PitchClass(p) for p in STANDARD_TUNING], num_frets)

    @classmethod
    def from_config(cls, config: TheoryConfig) -> "Fretboard":
        return cls([PitchClass(p) for p in config.tuning], config.num_frets, config)

    def retuned(self, tuning: Sequence[PitchClass]) -> "Fretboard":
        """Build a new board with the same fret count and a different tuning."""
        return Fretboard(tuning, self._num_frets, self.config)

    @property
    def tuning(self) -> Tuple[PitchClass, ...]:
        return self._tuning

    @property
    def num_strings(self) -> int:
        return len(self._tuning)

    @property
    def num_frets(self) -> int:
        return self._num_frets

    @property
    def grid(self) -> np.ndarray:
        """Read-only (num_strings, num_frets + 1) array of MIDI pitches."""
        return self._grid

    @property
    def string_labels(self) -> List[str]:
        """Open-string names, string 0 first."""
        return [note.name for note in self._tuning]

    def note_at(self, string: int, fret: int) -> PitchClass:
        """
        Get the pitch at a fretboard coordinate.

        Raises:
            IndexOutOfRange: If the coordinate is off the board
        """
        if not 0 <= string < self.num_strings:
            raise IndexOutOfRange(
                f"String {string} outside [0, {self.num_strings})"
            )
        if not 0 <= fret <= self._num_frets:
            raise IndexOutOfRange(f"Fret {fret} outside [0, {self._num_frets}]")
        return PitchClass(int(self._grid[string, fret]))

    def highlight(
        self,
        targets: Iterable[PitchClass],
        fret_range: Tuple[int, int] = DEFAULT_FRET_RANGE,
        policy: Optional[Union[MatchPolicy, str]] = None,
    ) -> np.ndarray:
        """
        Mark the cells that belong to a set of target notes.

        Args:
            targets: Notes to highlight (e.g., scale.notes() or chord.notes())
            fret_range: Inclusive (start, end) fret window
            policy: MatchPolicy or its value; defaults to the config's policy

        Returns:
            Boolean array of shape (num_strings, end - start + 1)

        Raises:
            IndexOutOfRange: If the fret window is off the board
        """
        start, end = self._check_range(fret_range)
        policy = MatchPolicy(policy) if policy is not None else self.config.policy
        classes = self._grid[:, start:end + 1] % 12

        targets = list(targets)
        if policy is MatchPolicy.PITCH_CLASS:
            target_classes = sorted({note.pitch_class for note in targets})
            return np.isin(classes, target_classes)

        warnings.warn(
            "Substring matching over-matches enharmonic names "
            "(e.g. 'C' matches 'C#/Db'); prefer MatchPolicy.PITCH_CLASS",
            stacklevel=2,
        )
        target_names = {note.name for note in targets}
        lookup = np.array([
            any(
                name == target or target in name or name in target
                for target in target_names
            )
            for name in CHROMATIC_NAMES
        ], dtype=bool)
        return lookup[classes]

    def names(self, fret_range: Tuple[int, int] = DEFAULT_FRET_RANGE) -> List[List[str]]:
        """Note names per string over an inclusive fret window."""
        start, end = self._check_range(fret_range)
        return [
            [CHROMATIC_NAMES[p % 12] for p in row]
            for row in self._grid[:, start:end + 1].tolist()
        ]

    def positions_of(
        self,
        note: PitchClass,
        fret_range: Optional[Tuple[int, int]] = None,
    ) -> List[Tuple[int, int]]:
        """All (string, fret) coordinates sharing the note's pitch class."""
        start, end = self._check_range(fret_range or (0, self._num_frets))
        mask = (self._grid[:, start:end + 1] % 12) == note.pitch_class
        return [(int(s), int(f) + start) for s, f in np.argwhere(mask)]

    def _check_range(self, fret_range: Tuple[int, int]) -> Tuple[int, int]:
        start, end = fret_range
        if not 0 <= start <= end <= self._num_frets:
            raise IndexOutOfRange(
                f"Fret range ({start}, {end}) outside [0, {self._num_frets}]"
            )
        return start, end

    def __repr__(self) -> str:
        return (
            f"Fretboard(tuning={' '.join(self.string_labels)}, "
            f"num_frets={self._num_frets})"
        )
