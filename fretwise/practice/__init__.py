"""Practice layer - Quiz-style exercises over the theory model."""

from .exercises import Exercise, ExerciseGenerator, EXERCISE_KINDS

__all__ = [
    "Exercise",
    "ExerciseGenerator",
    "EXERCISE_KINDS",
]
