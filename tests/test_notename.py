import pytest

from pitchkit import notename
from pitchkit.notename import FLAT_SYMBOL, SHARP_SYMBOL


def test_symbols():
    assert SHARP_SYMBOL == "♯"
    assert FLAT_SYMBOL == "♭"


@pytest.mark.parametrize(
    "name, pitch_class",
    [
        ("C", 0),
        ("d", 2),
        ("E", 4),
        ("F", 5),
        ("g", 7),
        ("A", 9),
        ("B", 11),
        ("A#", 10),
        ("Bb", 10),
        (f"A{SHARP_SYMBOL}", 10),
        (f"B{FLAT_SYMBOL}", 10),
        ("Db", 1),
        ("Cb", 11),
        ("B#", 0),
        ("E#", 5),
    ],
)
def test_parse_pitch_class(name, pitch_class):
    assert notename.parse_pitch_class(name) == pitch_class


@pytest.mark.parametrize("name", ["", "zz", "#3", f"{SHARP_SYMBOL}3", "42", "not a note"])
def test_parse_pitch_class_invalid(name):
    assert notename.parse_pitch_class(name) == -1


def test_parse_pitch_class_extra_accidentals():
    # Only the character right after the letter counts.
    assert notename.parse_pitch_class("C##") == 1
    assert notename.parse_pitch_class("Cb#") == 11
    assert notename.parse_pitch_class("Cf") == 0


def test_parse_octave():
    assert notename.parse_octave("A4") == 4
    assert notename.parse_octave("A#10") == 10
    assert notename.parse_octave("C") == 0
    assert notename.parse_octave("C#-1") == -1


def test_parse_octave_scattered_digits():
    assert notename.parse_octave("A4foo2") == 42
    assert notename.parse_octave("A-4-2") == -42
    assert notename.parse_octave("A 4-2") == 42


def test_parse():
    assert notename.parse("A#3") == (10, 3)
    assert notename.parse("b") == (11, 0)
    assert notename.parse("C0") == (0, 0)
    assert notename.parse("A4foo2") == (9, 42)
    assert notename.parse("zz") is None


@pytest.mark.parametrize("name", [" a # 4 ", "(A#4)", "A_#.4!", "\tA#\n4"])
def test_parse_ignores_other_characters(name):
    assert notename.parse(name) == notename.parse("A#4")


def test_pitch_class_name():
    assert [notename.pitch_class_name(pc) for pc in range(12)] == notename.NOTE_NAMES
    assert notename.pitch_class_name(-1) == ""
    assert notename.pitch_class_name(12) == ""


def test_format_name():
    assert notename.format_name(9, 4) == "A4"
    assert notename.format_name(10, 3) == "A#3"
    assert notename.format_name(1, -1) == "C#-1"


@pytest.mark.parametrize("name", ["xA4", "Note: A4", "hi"])
def test_parse_leading_word(name):
    # A name must start with a note letter; "not a note" would otherwise read as A.
    assert notename.parse(name) is None
