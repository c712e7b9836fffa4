import json

import numpy as np

from pitchkit import Pitch, converter, frequency_to_midi

chord = [Pitch.from_note_name(name) for name in ["C4", "E4", "G4", "B♭4"]]

for pitch in chord:
    print(f"{pitch}: {pitch.frequency:.2f} Hz")

# A slightly flat recording of the same chord.
detuned = np.array([p.frequency for p in chord]) * 0.99
print(frequency_to_midi(detuned))

print(json.dumps(converter.unstructure(chord), indent=4))
