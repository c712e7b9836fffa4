"""Parsing and formatting of note names.

A note name is a pitch class followed by an octave, i.e. `A#4` or `Bb3`.
Parsing is lenient: characters outside the note alphabet are discarded,
so `" a # 4 "` is read the same as `A#4`.
"""

import re

SHARP_SYMBOL = "♯"
FLAT_SYMBOL = "♭"

NOTE_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

NOTES = {
    "c": 0,
    "d": 2,
    "e": 4,
    "f": 5,
    "g": 7,
    "a": 9,
    "b": 11,
}

ACCIDENTALS = {
    "#": 1,
    SHARP_SYMBOL: 1,
    "b": -1,
    FLAT_SYMBOL: -1,
}

DIGITS = "0123456789"
PITCH_CLASS_CHARS = "abcdefg#" + SHARP_SYMBOL + FLAT_SYMBOL

# The first digit, and a minus sign directly before it if any.
RE_OCTAVE_SIGN = re.compile(r"(-?)[0-9]")


def retain(text: str, chars: str) -> str:
    """Keep only the given characters in a string.

    Args:
        text: The string to filter.
        chars: The characters to keep.

    Returns:
        The characters of text found in chars, in their original order.
    """

    return "".join(c for c in text if c in chars)


def parse_octave(text: str) -> int:
    """Parse the octave of a note name.

    All digits in the text are joined together, wherever they are (`A4foo2` is octave 42).

    Args:
        text: The note name.

    Returns:
        The octave, or 0 if the text has no digits.
    """

    digits = retain(text, DIGITS)
    if not digits:
        return 0

    octave = int(digits)

    # RE_OCTAVE_SIGN always matches here, as there is at least one digit.
    if RE_OCTAVE_SIGN.search(text)[1]:
        octave = -octave

    return octave


def parse_pitch_class(text: str) -> int:
    """Parse the pitch class of a note name.

    The first note letter is the base of the pitch class, and the character right after it may be an accidental:
    `#` or `♯` for a sharp, `b` or `♭` for a flat.
    Any further characters are ignored.

    Args:
        text: The note name.

    Returns:
        The pitch class from 0 (C) to 11 (B), or -1 if the text is not a note name.
    """

    text = text.lower()

    # Words such as "not" are not note names, even if they contain note letters later on.
    letter = next((c for c in text if c.isalpha()), None)
    if letter is not None and letter not in NOTES:
        return -1

    name = retain(text, PITCH_CLASS_CHARS)
    if not name or name[0] not in NOTES:
        return -1

    pitch_class = NOTES[name[0]]

    if len(name) > 1:
        # A 'b' here is a flat, not the note B.
        pitch_class += ACCIDENTALS.get(name[1], 0)

    return pitch_class % 12


def parse(text: str) -> tuple[int, int] | None:
    """Parse a note name into its pitch class and octave.

    Args:
        text: The note name.

    Returns:
        A tuple of (pitch class, octave), or None if the text is not a note name.
    """

    pitch_class = parse_pitch_class(text)
    if pitch_class < 0:
        return None

    return pitch_class, parse_octave(text)


def pitch_class_name(pitch_class: int) -> str:
    """Get the canonical name of a pitch class.

    Sharps are always used, never flats.

    Args:
        pitch_class: The pitch class from 0 to 11.

    Returns:
        The name, or an empty string if the pitch class is out of range.
    """

    if 0 <= pitch_class < len(NOTE_NAMES):
        return NOTE_NAMES[pitch_class]

    return ""


def format_name(pitch_class: int, octave: int) -> str:
    """Format a pitch class and octave as a note name, i.e. (10, 4) -> `A#4`."""

    return f"{pitch_class_name(pitch_class)}{octave}"
