"""Global constants for fretwise."""

# Chromatic table, fixed enharmonic spelling per pitch class
CHROMATIC_NAMES = [
    "C", "C#/Db", "D", "D#/Eb", "E", "F",
    "F#/Gb", "G", "G#/Ab", "A", "A#/Bb", "B",
]

SEMITONES_PER_OCTAVE = 12

# Pitch defaults
MIDDLE_C = 60  # C4
DEFAULT_OCTAVE = 4
A4_PITCH = 69
A4_FREQUENCY = 440.0

# Fretboard defaults
STANDARD_TUNING = (64, 59, 55, 50, 45, 40)  # E4 B3 G3 D3 A2 E2, high to low
DEFAULT_NUM_FRETS = 24
DEFAULT_FRET_RANGE = (0, 12)

# Practice defaults
QUIZ_MAX_FRET = 11
