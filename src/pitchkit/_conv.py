from collections.abc import Mapping
from numbers import Real
from typing import Any

import cattrs

from .pitch import Pitch

converter = cattrs.Converter()
converter.register_unstructure_hook(Pitch, lambda p: p.frequency)


def _structure_pitch(value: Any, _: type) -> Pitch:
    # Numbers are frequencies and strings are note names.
    if isinstance(value, Real) and not isinstance(value, bool):
        return Pitch.from_frequency(value)

    if isinstance(value, str):
        return Pitch.parse(value)

    if isinstance(value, Mapping):
        return Pitch.from_dict(value)

    raise ValueError(f"can't structure {value!r} as a pitch")


converter.register_structure_hook(Pitch, _structure_pitch)
