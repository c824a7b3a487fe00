"""Instrument layer - Fingerboard projection of the theory model."""

from .fretboard import Fretboard

__all__ = [
    "Fretboard",
]
