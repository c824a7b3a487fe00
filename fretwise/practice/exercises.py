"""Practice exercises - Seeded quiz generation and answer checking.

Exercise kinds:
- interval: name the interval between two notes
- chord_recognition: name the chord spelled by a set of notes
- chord_construction: spell the notes of a named chord
- fretboard: name the note at a string/fret position

Generation is pure: the same seed always yields the same exercises, and
nothing here reads from or writes to the console.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple
import numpy as np

from ..core import PitchClass, TheoryConfig, UnknownFormula, find_root
from ..instrument import Fretboard
from ..theory import IntervalNamer, CORE_CHORD_QUALITIES, build_chord, get_chord_formula

EXERCISE_KINDS = ["interval", "chord_recognition", "chord_construction", "fretboard"]


@dataclass
class Exercise:
    """A single practice question with its expected answer."""

    kind: str  # One of EXERCISE_KINDS
    prompt: str
    answer: str  # Display form of the correct answer
    expected: Tuple[int, ...] = field(default_factory=tuple)  # Pitch classes, where relevant

    def check(self, response: str) -> bool:
        """
        Check a user response against this exercise.

        Note names are compared by pitch class, so "Db" is accepted where the
        answer reads "C#/Db". Interval and chord-quality names are compared
        ignoring case and extra whitespace.
        """
        response = (response or "").strip()
        if not response:
            return False

        if self.kind == "chord_construction":
            notes = [find_root(token) for token in response.replace(",", " ").split()]
            if any(note is None for note in notes):
                return False
            return {note.pitch_class for note in notes} == set(self.expected)

        if self.kind == "fretboard":
            note = find_root(response)
            return note is not None and note.pitch_class == self.expected[0]

        if self.kind == "chord_recognition":
            root_text, _, quality = response.partition(" ")
            root = find_root(root_text)
            if root is None or root.pitch_class != self.expected[0]:
                return False
            display = self.answer.split(" ", 1)[1]
            return " ".join(quality.lower().split()) == display.lower()

        return " ".join(response.lower().split()) == self.answer.lower()


class ExerciseGenerator:
    """Generate practice exercises from a seeded random generator.

    Example:
        >>> generator = ExerciseGenerator(TheoryConfig(seed=7))
        >>> exercises = generator.session("interval", count=5)
    """

    def __init__(self, config: Optional[TheoryConfig] = None):
        """
        Initialize ExerciseGenerator.

        Args:
            config: TheoryConfig supplying the seed and quiz fret limit
        """
        self.config = config or TheoryConfig()
        self.rng = np.random.default_rng(self.config.seed)
        self.namer = IntervalNamer(self.config)

    def _random_root(self) -> PitchClass:
        return PitchClass.from_index(int(self.rng.integers(0, 12)), self.config.default_octave)

    def interval_exercise(self) -> Exercise:
        """Two notes 1-12 semitones apart; the answer names the distance."""
        start = self._random_root()
        size = int(self.rng.integers(1, 13))
        end = start.transpose(size)
        name = self.namer.name_of(size, mod12=False)
        return Exercise(
            kind="interval",
            prompt=f"Identify the interval: {start.name} to {end.name}",
            answer=name,
            expected=(start.pitch_class, end.pitch_class),
        )

    def _random_chord(self):
        root = self._random_root()
        quality = CORE_CHORD_QUALITIES[int(self.rng.integers(0, len(CORE_CHORD_QUALITIES)))]
        return root, quality, build_chord(root, quality)

    def chord_recognition_exercise(self) -> Exercise:
        """Spell a chord; the answer is its root and quality."""
        root, quality, chord = self._random_chord()
        display = get_chord_formula(quality).display
        return Exercise(
            kind="chord_recognition",
            prompt=f"Identify the quality of this chord: {' '.join(chord.note_names())}",
            answer=f"{root.name} {display}",
            expected=tuple(note.pitch_class for note in chord.notes()),
        )

    def chord_construction_exercise(self) -> Exercise:
        """Name a chord; the answer spells its notes."""
        root, quality, chord = self._random_chord()
        display = get_chord_formula(quality).display
        return Exercise(
            kind="chord_construction",
            prompt=f"Construct a {root.name} {display} chord",
            answer=" ".join(chord.note_names()),
            expected=tuple(note.pitch_class for note in chord.notes()),
        )

    def fretboard_exercise(self, fretboard: Optional[Fretboard] = None) -> Exercise:
        """Pick a string and fret; the answer is the note found there."""
        fretboard = fretboard or Fretboard.from_config(self.config)
        max_fret = min(self.config.quiz_max_fret, fretboard.num_frets)
        string = int(self.rng.integers(0, fretboard.num_strings))
        fret = int(self.rng.integers(0, max_fret + 1))
        note = fretboard.note_at(string, fret)
        # Strings are counted from the lowest-sounding one, as players do
        string_number = fretboard.num_strings - string
        return Exercise(
            kind="fretboard",
            prompt=f"What note is on string {string_number} at fret {fret}?",
            answer=note.name,
            expected=(note.pitch_class,),
        )

    def session(
        self,
        kind: str,
        count: int = 5,
        fretboard: Optional[Fretboard] = None,
    ) -> List[Exercise]:
        """
        Generate a batch of exercises of one kind.

        Args:
            kind: One of EXERCISE_KINDS
            count: Number of exercises
            fretboard: Board for fretboard exercises (default: from config)

        Returns:
            List of Exercise objects
        """
        if fretboard is None and kind == "fretboard":
            fretboard = Fretboard.from_config(self.config)

        makers: Dict[str, Callable[[], Exercise]] = {
            "interval": self.interval_exercise,
            "chord_recognition": self.chord_recognition_exercise,
            "chord_construction": self.chord_construction_exercise,
            "fretboard": lambda: self.fretboard_exercise(fretboard),
        }
        if kind not in makers:
            raise UnknownFormula(f"Unknown exercise kind: {kind}")
        if count < 0:
            raise ValueError(f"Exercise count must be non-negative: {count}")

        return [makers[kind]() for _ in range(count)]
