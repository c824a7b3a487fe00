"""Tests for the theory layer.

Tests cover:
- Interval formulas and interval naming
- Scale construction for every registered formula
- Chord construction and naming
- Roman numeral resolution and progression assembly
- Edge cases and documented fallbacks
"""

import pytest
from pathlib import Path

# Add project root to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from fretwise.core import (
    PitchClass,
    TheoryConfig,
    DegreeOutOfRange,
    UnknownFormula,
    resolve_root,
)
from fretwise.theory import (
    IntervalFormula,
    IntervalNamer,
    SCALE_FORMULAS,
    CHORD_FORMULAS,
    Scale,
    Chord,
    RomanNumeralResolver,
    ChordProgression,
    build_scale,
    build_chord,
    build_progression,
    progression_from_preset,
    get_scale_formula,
)


# ============================================================================
# Helpers
# ============================================================================

C4 = PitchClass(60)


def pitches(notes) -> list:
    """Absolute pitches of a note sequence."""
    return [n.pitch for n in notes]


def names(notes) -> list:
    """Names of a note sequence."""
    return [n.name for n in notes]


# ============================================================================
# Interval Tests
# ============================================================================

class TestIntervalFormula:
    """Tests for IntervalFormula and the registries."""

    def test_scale_formulas_close_the_octave(self):
        """Every built-in scale spans exactly one octave."""
        for formula in SCALE_FORMULAS.values():
            assert formula.span == 12, formula.name

    def test_chord_formulas_are_offsets(self):
        for formula in CHORD_FORMULAS.values():
            assert formula.kind == "offsets"

    def test_steps_must_be_positive(self):
        with pytest.raises(ValueError):
            IntervalFormula(name="bad", intervals=(2, 0, 3), kind="steps")

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            IntervalFormula(name="bad", intervals=(2,), kind="chords")

    def test_lookup_is_lenient_about_case_and_separators(self):
        assert get_scale_formula("Pentatonic Major").name == "pentatonic_major"
        assert get_scale_formula("pentatonic-minor").name == "pentatonic_minor"
        assert get_scale_formula("Ionian").name == "major"
        assert get_scale_formula("aeolian").name == "minor"

    def test_unknown_formula(self):
        with pytest.raises(UnknownFormula):
            get_scale_formula("bebop")
        with pytest.raises(KeyError):
            build_chord(C4, "power")


class TestIntervalNamer:
    """Tests for IntervalNamer."""

    def test_perfect_fifth(self):
        assert IntervalNamer().name_of(7) == "Perfect 5th"

    def test_every_size_named_once(self):
        namer = IntervalNamer()
        found = [namer.name_of(n) for n in range(1, 12)]
        assert len(set(found)) == 11
        assert "Unknown interval" not in found

    def test_octave_reduces_to_unknown(self):
        """An exact octave reduces to 0 semitones, which has no name."""
        namer = IntervalNamer()
        assert namer.name_of(12) == "Unknown interval"
        assert namer.name_of(24) == "Unknown interval"
        assert namer.name_of(0) == "Unknown interval"

    def test_octave_without_reduction(self):
        namer = IntervalNamer()
        assert namer.name_of(12, mod12=False) == "Octave"
        assert namer.name_of(13, mod12=False) == "Unknown interval"

    def test_octave_as_interval_config(self):
        namer = IntervalNamer(TheoryConfig(octave_as_interval=True))
        assert namer.name_of(12) == "Octave"
        assert namer.name_of(-24) == "Octave"
        assert namer.name_of(0) == "Unknown interval"
        assert namer.name_of(19) == "Perfect 5th"

    def test_compound_and_negative_distances(self):
        namer = IntervalNamer()
        assert namer.name_of(-7) == "Perfect 5th"
        assert namer.name_of(19) == "Perfect 5th"
        assert namer.name_of(-1) == "Minor 2nd"

    def test_reverse_lookup(self):
        namer = IntervalNamer()
        assert namer.semitones_of("Tritone") == 6
        assert namer.semitones_of("Octave") == 12
        for name, semitones in namer.definitions():
            if semitones < 12:
                assert namer.name_of(semitones) == name

    def test_reverse_lookup_unknown(self):
        with pytest.raises(UnknownFormula):
            IntervalNamer().semitones_of("Augmented 9th")

    def test_between(self):
        namer = IntervalNamer()
        assert namer.between(C4, PitchClass(67)) == "Perfect 5th"
        assert namer.between(PitchClass(67), C4) == "Perfect 5th"
        assert namer.between(C4, PitchClass(64)) == "Major 3rd"

    def test_definitions_order(self):
        definitions = IntervalNamer().definitions()
        assert len(definitions) == 12
        assert definitions[0] == ("Minor 2nd", 1)
        assert definitions[-1] == ("Octave", 12)


# ============================================================================
# Scale Tests
# ============================================================================

class TestScale:
    """Tests for Scale construction."""

    def test_c_major(self):
        scale = Scale.major(C4)
        assert scale.name == "C Major"
        assert pitches(scale.notes()) == [60, 62, 64, 65, 67, 69, 71, 72]
        assert scale.note_names() == ["C", "D", "E", "F", "G", "A", "B", "C"]

    def test_major_has_eight_notes_spanning_octave(self):
        """For every root, the major scale has 8 notes spanning 12 semitones."""
        for pitch in range(40, 80):
            notes = Scale.major(PitchClass(pitch)).notes()
            assert len(notes) == 8
            assert notes[7].pitch - notes[0].pitch == 12

    def test_natural_minor(self):
        scale = Scale.minor(PitchClass(57))
        assert scale.name == "A Minor"
        assert scale.note_names() == ["A", "B", "C", "D", "E", "F", "G", "A"]

    def test_pentatonic_major(self):
        scale = Scale.pentatonic_major(C4)
        assert scale.name == "C Pentatonic Major"
        assert pitches(scale.notes()) == [60, 62, 64, 67, 69, 72]

    def test_pentatonic_minor(self):
        scale = Scale.pentatonic_minor(PitchClass(57))
        assert scale.note_names() == ["A", "C", "D", "E", "G", "A"]

    def test_blues(self):
        scale = Scale.blues(PitchClass(57))
        assert scale.name == "A Blues"
        assert scale.note_names() == ["A", "C", "D", "D#/Eb", "E", "G", "A"]

    def test_note_count_is_steps_plus_one(self):
        for quality in SCALE_FORMULAS:
            scale = build_scale(C4, quality)
            assert len(scale.notes()) == len(scale.steps) + 1

    @pytest.mark.parametrize("quality,root,expected", [
        ("dorian", 62, ["D", "E", "F", "G", "A", "B", "C", "D"]),
        ("phrygian", 64, ["E", "F", "G", "A", "B", "C", "D", "E"]),
        ("lydian", 65, ["F", "G", "A", "B", "C", "D", "E", "F"]),
        ("mixolydian", 67, ["G", "A", "B", "C", "D", "E", "F", "G"]),
        ("locrian", 71, ["B", "C", "D", "E", "F", "G", "A", "B"]),
    ])
    def test_modes_use_white_keys(self, quality, root, expected):
        assert build_scale(PitchClass(root), quality).note_names() == expected

    def test_heptatonic(self):
        assert Scale.major(C4).is_heptatonic
        assert not Scale.pentatonic_major(C4).is_heptatonic
        assert Scale.blues(C4).degree_count == 6

    def test_pitch_classes(self):
        assert Scale.major(C4).pitch_classes() == {0, 2, 4, 5, 7, 9, 11}

    def test_idempotent_construction(self):
        """Building the same scale twice gives identical notes."""
        first = Scale.minor(PitchClass(64))
        second = Scale.minor(PitchClass(64))
        assert first == second
        assert first.notes() == second.notes()
        assert first.notes() == first.notes()

    def test_named_constructor_matches_generic(self):
        assert Scale.blues(C4) == build_scale(C4, "blues")

    def test_ad_hoc_scale(self):
        scale = Scale(name="Whole Tone", root=C4, steps=(2, 2, 2, 2, 2, 2))
        assert pitches(scale.notes()) == [60, 62, 64, 66, 68, 70, 72]


# ============================================================================
# Chord Tests
# ============================================================================

class TestChord:
    """Tests for Chord construction."""

    def test_dominant7(self):
        chord = Chord.dominant7(C4)
        assert pitches(chord.notes()) == [60, 64, 67, 70]
        assert chord.note_names() == ["C", "E", "G", "A#/Bb"]
        assert chord.name == "C7"

    def test_major_and_minor(self):
        assert pitches(Chord.major(C4).notes()) == [60, 64, 67]
        assert pitches(Chord.minor(C4).notes()) == [60, 63, 67]
        assert Chord.major(C4).name == "C Major"
        assert Chord.minor(PitchClass(57)).name == "A Minor"

    def test_seventh_chord_names(self):
        assert Chord.major7(C4).name == "CMaj7"
        assert Chord.minor7(PitchClass(62)).name == "Dmin7"
        assert Chord.major7(PitchClass(70)).name == "A#/BbMaj7"

    def test_symbols(self):
        assert Chord.minor(PitchClass(57)).symbol == "Am"
        assert Chord.minor7(PitchClass(62)).symbol == "Dm7"
        assert Chord.major7(PitchClass(70)).symbol == "A#maj7"
        assert build_chord(PitchClass(71), "half_diminished7").symbol == "Bm7b5"

    def test_root_first(self):
        chord = Chord.minor7(PitchClass(69))
        assert chord.notes()[0] == chord.root

    def test_duplicates_are_kept(self):
        chord = Chord(name="C5 stacked", root=C4, offsets=(12, 7, 12), quality="")
        assert pitches(chord.notes()) == [60, 72, 67, 72]

    def test_extended_qualities(self):
        assert pitches(build_chord(C4, "diminished").notes()) == [60, 63, 66]
        assert pitches(build_chord(C4, "augmented").notes()) == [60, 64, 68]
        assert pitches(build_chord(C4, "sus4").notes()) == [60, 65, 67]
        assert build_chord(C4, "diminished7").name == "Cdim7"

    def test_idempotent_construction(self):
        assert Chord.major7(C4).notes() == Chord.major7(C4).notes()


# ============================================================================
# Roman Numeral Tests
# ============================================================================

class TestRomanNumeralResolver:
    """Tests for RomanNumeralResolver."""

    def test_degrees(self):
        resolver = RomanNumeralResolver()
        for i, numeral in enumerate(["I", "II", "III", "IV", "V", "VI", "VII"]):
            assert resolver.degree_of(numeral) == i
            assert resolver.degree_of(numeral.lower()) == i

    def test_dominant_seventh_on_fifth_degree(self):
        chord = RomanNumeralResolver().resolve(Scale.major(C4), "V7")
        assert chord.quality == "dominant7"
        assert chord.root.pitch == 67
        assert pitches(chord.notes()) == [67, 71, 74, 77]
        assert chord.note_names() == ["G", "B", "D", "F"]

    def test_case_selects_quality(self):
        resolver = RomanNumeralResolver()
        scale = Scale.major(C4)
        assert resolver.resolve(scale, "IV").name == "F Major"
        assert resolver.resolve(scale, "ii").name == "D Minor"
        assert resolver.resolve(scale, "vi7").name == "Amin7"

    def test_mixed_case_compares_insensitively(self):
        chord = RomanNumeralResolver().resolve(Scale.major(C4), "Iv")
        assert chord.name == "F Major"

    def test_vii_is_minor_not_diminished(self):
        """Diminished qualities are not inferred."""
        chord = RomanNumeralResolver().resolve(Scale.major(C4), "vii")
        assert chord.quality == "minor"
        assert chord.note_names() == ["B", "D", "F#/Gb"]

    def test_unrecognized_numeral_falls_back_to_tonic(self):
        """Unknown numerals silently resolve on degree 0."""
        resolver = RomanNumeralResolver()
        scale = Scale.major(PitchClass(67))
        assert resolver.degree_of("X") == 0
        assert resolver.resolve(scale, "X").name == "G Major"
        assert resolver.resolve(scale, "bVII").name == "G Minor"
        assert resolver.resolve(scale, "").name == "G Minor"

    def test_degree_out_of_range(self):
        scale = Scale.pentatonic_major(C4)  # 6 notes
        with pytest.raises(DegreeOutOfRange) as exc_info:
            RomanNumeralResolver().resolve(scale, "VII")
        assert exc_info.value.degree == 6
        assert exc_info.value.available == 6

    def test_degree_out_of_range_is_index_error(self):
        scale = Scale(name="Dyad", root=C4, steps=(7,))
        with pytest.raises(IndexError):
            RomanNumeralResolver().resolve(scale, "iii")

    def test_resolver_reaches_closing_octave(self):
        """The resolver alone only checks the note count."""
        chord = RomanNumeralResolver().resolve(Scale.pentatonic_major(C4), "VI")
        assert chord.root.pitch == 72


class TestChordProgression:
    """Tests for progression assembly and presets."""

    def test_build_progression(self):
        progression = build_progression(Scale.major(C4), ["ii", "V7", "I"])
        assert isinstance(progression, ChordProgression)
        assert progression.name == "ii-V7-I"
        assert progression.names() == ["D Minor", "G7", "C Major"]
        assert progression.symbols() == ["Dm", "G7", "C"]
        assert progression.key == "C Major"
        assert len(progression) == 3

    def test_build_from_generator(self):
        """A one-shot iterable still fills name and numerals."""
        progression = build_progression(Scale.major(C4), (n for n in ["I", "V"]))
        assert progression.name == "I-V"
        assert progression.numerals == ["I", "V"]
        assert progression.names() == ["C Major", "G Major"]

    def test_rejects_missing_degree_on_pentatonic(self):
        scale = Scale.pentatonic_major(C4)
        with pytest.raises(DegreeOutOfRange):
            build_progression(scale, ["I", "VI"])

    def test_pentatonic_within_degrees(self):
        progression = build_progression(Scale.pentatonic_major(C4), ["I", "V"])
        assert progression.names() == ["C Major", "A Major"]

    def test_pop_preset(self):
        progression = progression_from_preset(C4, "pop")
        assert progression.name == "C Major I-V-vi-IV (Pop)"
        assert progression.symbols() == ["C", "G", "Am", "F"]

    def test_jazz_preset(self):
        progression = progression_from_preset(resolve_root("F"), "jazz")
        assert progression.symbols() == ["Gm", "C", "F"]

    def test_minor_preset(self):
        progression = progression_from_preset(PitchClass(57), "minor")
        assert progression.name == "A Minor i-iv-v"
        assert progression.symbols() == ["Am", "Dm", "Em"]

    def test_melancholic_preset(self):
        progression = progression_from_preset(PitchClass(67), "melancholic")
        assert progression.symbols() == ["Em", "C", "G", "D"]

    def test_unknown_preset(self):
        with pytest.raises(UnknownFormula):
            progression_from_preset(C4, "andalusian")
