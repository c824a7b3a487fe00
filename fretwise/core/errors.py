"""Exceptions raised by the theory model and fretboard."""


class TheoryError(Exception):
    """Base class for all fretwise errors."""


class InvalidRootNote(TheoryError, ValueError):
    """A root-note name did not match any entry of the chromatic table."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid root note: {text!r}")


class DegreeOutOfRange(TheoryError, IndexError):
    """A roman numeral points past the degrees a scale provides."""

    def __init__(self, numeral: str, degree: int, available: int):
        self.numeral = numeral
        self.degree = degree
        self.available = available
        super().__init__(
            f"Numeral {numeral!r} needs degree {degree + 1}, "
            f"but the scale only has {available}"
        )


class IndexOutOfRange(TheoryError, IndexError):
    """A fretboard coordinate or fret range lies outside the board."""


class UnknownFormula(TheoryError, KeyError):
    """No scale, chord, or interval is registered under the given name."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
