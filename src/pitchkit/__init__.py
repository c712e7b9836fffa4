"""This module provides a pitch value that converts between frequencies, MIDI note numbers and note names."""

from . import audio, notename
from ._conv import converter
from .audio import frequency_to_midi, midi_to_frequency
from .notename import FLAT_SYMBOL, SHARP_SYMBOL
from .pitch import Pitch
