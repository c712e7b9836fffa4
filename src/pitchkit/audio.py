"""Conversions between frequencies and MIDI note numbers.

All conversions use twelve-tone equal temperament, tuned so that MIDI note 69 (A4) is 440 Hz.
Both scalars and NumPy arrays are accepted, so whole F0 contours can be converted at once.
"""

from typing import overload

import numpy as np
from numpy.typing import ArrayLike, NDArray

CONCERT_PITCH = 440.0
CONCERT_NOTE = 69

SEMITONES = 12


@overload
def midi_to_frequency(note: float) -> float: ...


@overload
def midi_to_frequency(note: NDArray) -> NDArray[np.float64]: ...


def midi_to_frequency(note):
    """Convert a MIDI note number to a frequency.

    Args:
        note: The MIDI note number. Fractional notes (i.e. pitch bends) are allowed.

    Returns:
        The frequency in hertz.
    """

    # Notes far above the MIDI range overflow to inf.
    with np.errstate(over="ignore"):
        semitones = np.asarray(note, dtype=np.float64) - CONCERT_NOTE
        freq = CONCERT_PITCH * np.exp2(semitones / SEMITONES)

    return _unwrap(freq)


@overload
def frequency_to_midi(frequency: float) -> float: ...


@overload
def frequency_to_midi(frequency: NDArray) -> NDArray[np.float64]: ...


def frequency_to_midi(frequency):
    """Convert a frequency to a MIDI note number.

    Frequencies of zero or less have no MIDI note number:
    they convert to -inf and nan respectively instead of raising.

    Args:
        frequency: The frequency in hertz.

    Returns:
        The (possibly fractional) MIDI note number.
    """

    with np.errstate(divide="ignore", invalid="ignore"):
        note = CONCERT_NOTE + SEMITONES * np.log2(
            np.asarray(frequency, dtype=np.float64) / CONCERT_PITCH
        )

    return _unwrap(note)


def _unwrap(value: ArrayLike):
    # 0-d arrays come from scalar input, so hand back a plain float.
    array = np.asarray(value)
    if array.ndim == 0:
        return float(array)

    return array
