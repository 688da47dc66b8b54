"""MIDI and music-theory constants.

Convention: **C4 = 60** (Middle C), so a note's MIDI number is
``(octave + 1) * 12 + pitch_class``.

- `MIDI_NOTE_MIN` / `MIDI_NOTE_MAX`: the MIDI 1.0 note range (0–127)
- `MIDDLE_C`: C4
- `SEMITONES_PER_OCTAVE`: octave size used for hand offsets
- `DEFAULT_START_OCTAVE`: octave the right hand starts in
- `MINOR_THIRD` / `MAJOR_THIRD`: interval sizes used to classify diatonic chords
"""

MIDI_NOTE_MIN = 0
MIDI_NOTE_MAX = 127
MIDDLE_C = 60

SEMITONES_PER_OCTAVE = 12
NOTES_PER_SCALE = 7

DEFAULT_START_OCTAVE = 4

MINOR_THIRD = 3
MAJOR_THIRD = 4
