import dataclasses
import logging
import math
from typing import Any, Self

from . import notename
from .audio import frequency_to_midi, midi_to_frequency

_log = logging.getLogger(__name__)


@dataclasses.dataclass(slots=True, frozen=True)
class Pitch:
    """A musical pitch.

    A pitch can be created from a frequency, a MIDI note number or a note name,
    and viewed as any of them. The frequency is always the canonical value.

    A pitch with a frequency of 0 is the sentinel pitch, which stands for an unspecified pitch or a note name that failed to parse.
    Its MIDI note number and name are meaningless, but accessing them never raises.

    Attributes:
        frequency: The frequency of the pitch in hertz.
    """

    frequency: float = 0.0

    @classmethod
    def from_frequency(cls, frequency: float) -> Self:
        """Create a pitch from a frequency, i.e. 440.

        Args:
            frequency: The frequency in hertz. It is stored as-is without validation.

        Returns:
            The pitch.
        """

        return cls(float(frequency))

    @classmethod
    def from_midi_note(cls, note: float) -> Self:
        """Create a pitch from a MIDI note number, i.e. 69.

        Args:
            note: The MIDI note number. Fractional notes are allowed for pitch bends.

        Returns:
            A pitch with its frequency corresponding to the MIDI note number.
        """

        return cls(float(midi_to_frequency(note)))

    @classmethod
    def from_note_name(cls, name: str) -> Self:
        """Create a pitch from a note name, i.e. `A#3`.

        The name should be a pitch class followed by an octave.
        Sharps and flats can be written as `#` and `b`, or with SHARP_SYMBOL and FLAT_SYMBOL.

        Args:
            name: The note name.

        Returns:
            The pitch, or the sentinel pitch (0 Hz) if the name could not be parsed.
        """

        parsed = notename.parse(name)
        if parsed is None:
            _log.debug(f"not a note name: {name!r}")
            return cls()

        pitch_class, octave = parsed

        # MIDI note numbers start from C-1, so add 1 to get an octave we can multiply by.
        return cls.from_midi_note((octave + 1) * 12 + pitch_class)

    @classmethod
    def parse(cls, name: str) -> Self:
        """Parse a note name, raising if it is invalid.

        Args:
            name: The note name.

        Returns:
            The parsed note name as a pitch.

        Raises:
            ValueError: The note name is invalid.
        """

        pitch = cls.from_note_name(name)
        if not pitch.is_valid:
            raise ValueError(f"note name is invalid: {name}")

        return pitch

    @property
    def is_valid(self) -> bool:
        """Whether or not the pitch has a usable (positive) frequency."""

        return self.frequency > 0

    @property
    def midi_note(self) -> float:
        """The pitch as a (possibly fractional) MIDI note number."""

        return frequency_to_midi(self.frequency)

    @property
    def midi_note_name(self) -> str:
        """The pitch as a note name, i.e. 440 Hz -> `A4`.

        Fractional MIDI notes are truncated, and sharps are always used over flats.
        The name of a pitch without a MIDI note number (0 Hz or less) is empty.
        """

        note = self.midi_note
        if not math.isfinite(note):
            return ""

        # Round off floating point error first, otherwise 59.99999999999999 would truncate to B3 instead of C4.
        note = int(round(note, 9))

        # The octave truncates towards zero like the pitch class, so MIDI -1 is B-1.
        return notename.format_name(note % 12, int(note / 12) - 1)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the pitch to a dict.

        Returns:
            A dict of the pitch's frequency, MIDI note number and name.
            The MIDI note number is None if the pitch has none (0 Hz or less).
        """

        midi = self.midi_note
        if not math.isfinite(midi):
            midi = None

        return {
            "frequency": self.frequency,
            "midi": midi,
            "name": self.midi_note_name,
        }

    @classmethod
    def from_dict(cls, pitch: dict[str, Any]) -> Self:
        """Parse a pitch from a dict.

        The frequency is used if present, then the MIDI note number, then the name.

        Args:
            pitch: The dict to parse from.

        Returns:
            The pitch.

        Raises:
            ValueError: The dict has none of the keys, or the name is invalid.
        """

        if "frequency" in pitch:
            return cls.from_frequency(pitch["frequency"])

        if pitch.get("midi") is not None:
            return cls.from_midi_note(pitch["midi"])

        if "name" in pitch:
            return cls.parse(pitch["name"])

        raise ValueError(f"pitch has no frequency, midi or name: {pitch}")

    def __str__(self) -> str:
        return self.midi_note_name
