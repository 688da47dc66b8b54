"""Pitch classes, keys and MIDI note conversion.

This module is the "spelling" layer that sits between note names and raw MIDI
integers. Everything above it (scales, chords, exercises) works in pitch
classes and MIDI numbers; names only matter for display and for parsing user
input.

Module-level constants:
- `NOTE_NAME_TO_PC`: Maps note names (e.g., `"C"`, `"F#"`, `"Bb"`, `"D♭"`) to pitch classes (0-11)
- `PC_TO_NOTE_NAME`: Maps pitch classes to sharp-spelled display names (`"C♯"`)
- `PC_TO_KEY_NAME`: Maps pitch classes to conventional key names (`"D♭"`, `"G♭"`)

Enharmonic spelling never affects MIDI arithmetic: `Key.C_SHARP` displays as
``"D♭"`` but is pitch class 1 either way.
"""

import enum
import typing

import pianopractice.constants


NOTE_NAME_TO_PC: typing.Dict[str, int] = {
	"C": 0,
	"C#": 1,
	"Db": 1,
	"D": 2,
	"D#": 3,
	"Eb": 3,
	"E": 4,
	"F": 5,
	"F#": 6,
	"Gb": 6,
	"G": 7,
	"G#": 8,
	"Ab": 8,
	"A": 9,
	"A#": 10,
	"Bb": 10,
	"B": 11,
}

PC_TO_NOTE_NAME: typing.List[str] = [
	"C",
	"C♯",
	"D",
	"D♯",
	"E",
	"F",
	"F♯",
	"G",
	"G♯",
	"A",
	"A♯",
	"B",
]

PC_TO_KEY_NAME: typing.List[str] = [
	"C",
	"D♭",
	"D",
	"E♭",
	"E",
	"F",
	"G♭",
	"G",
	"A♭",
	"A",
	"B♭",
	"B",
]


class Note (enum.IntEnum):

	"""One of the 12 chromatic pitch classes. The value is the pitch class."""

	C = 0
	C_SHARP = 1
	D = 2
	D_SHARP = 3
	E = 4
	F = 5
	F_SHARP = 6
	G = 7
	G_SHARP = 8
	A = 9
	A_SHARP = 10
	B = 11

	@property
	def display_name (self) -> str:

		"""Sharp spelling, e.g. ``"C♯"``."""

		return PC_TO_NOTE_NAME[self.value]


class Key (enum.IntEnum):

	"""A tonal centre. The value is the pitch class of the tonic."""

	C = 0
	C_SHARP = 1
	D = 2
	D_SHARP = 3
	E = 4
	F = 5
	F_SHARP = 6
	G = 7
	G_SHARP = 8
	A = 9
	A_SHARP = 10
	B = 11

	@property
	def display_name (self) -> str:

		"""Conventional key spelling, e.g. ``"D♭"`` for ``Key.C_SHARP``."""

		return PC_TO_KEY_NAME[self.value]

	@property
	def sharp_name (self) -> str:

		"""Sharp spelling, e.g. ``"C♯"``."""

		return PC_TO_NOTE_NAME[self.value]

	@property
	def tonic (self) -> Note:

		"""The tonic as a `Note`."""

		return Note(self.value)


class HandSelection (enum.Enum):

	"""Which hand(s) an exercise is written for."""

	LEFT = "left"
	RIGHT = "right"
	BOTH = "both"


def _normalise_name (name: str) -> str:

	"""Fold unicode accidentals and letter case into the ``NOTE_NAME_TO_PC`` spelling."""

	cleaned = name.strip().replace("♯", "#").replace("♭", "b")

	if not cleaned:
		return cleaned

	return cleaned[0].upper() + cleaned[1:].lower()


def pitch_class_from_name (name: str) -> int:

	"""Return the pitch class for a note or key name.

	Accepts plain names (``"C"``, ``"F#"``, ``"Bb"``), unicode accidentals
	(``"D♭"``) and enum member names (``"C_SHARP"``, case-insensitive).

	Raises:
		ValueError: If the name is not recognised.
	"""

	normalised = _normalise_name(name)

	if normalised in NOTE_NAME_TO_PC:
		return NOTE_NAME_TO_PC[normalised]

	member = name.strip().upper()

	if member in Note.__members__:
		return Note.__members__[member].value

	raise ValueError(f"Unknown note name: {name!r}. Expected e.g. 'C', 'F#', 'Bb'.")


def note_from_name (name: str) -> Note:

	"""Parse a note name into a `Note`."""

	return Note(pitch_class_from_name(name))


def key_from_name (name: str) -> Key:

	"""Parse a key name into a `Key`."""

	return Key(pitch_class_from_name(name))


def note_to_midi (note: int, octave: int) -> int:

	"""Return the MIDI number of a pitch class in an octave.

	Example:
		```python
		note_to_midi(Note.C, 4)   # → 60 (Middle C)
		note_to_midi(Note.A, 4)   # → 69
		note_to_midi(Note.C, -1)  # → 0
		```
	"""

	return (octave + 1) * pianopractice.constants.SEMITONES_PER_OCTAVE + int(note) % 12


def is_valid_midi (midi_note: int) -> bool:

	"""True when the number is inside the MIDI note range."""

	return pianopractice.constants.MIDI_NOTE_MIN <= midi_note <= pianopractice.constants.MIDI_NOTE_MAX


def midi_to_note (midi_note: int) -> typing.Tuple[Note, int]:

	"""Split a MIDI number into ``(Note, octave)``.

	Raises:
		ValueError: If ``midi_note`` is outside 0–127.
	"""

	if not is_valid_midi(midi_note):
		raise ValueError(f"MIDI note out of range: {midi_note}")

	octave, pc = divmod(midi_note, pianopractice.constants.SEMITONES_PER_OCTAVE)

	return Note(pc), octave - 1


def midi_note_name (midi_note: int) -> str:

	"""Return a display name such as ``"C♯4"`` for a MIDI number."""

	note, octave = midi_to_note(midi_note)

	return f"{note.display_name}{octave}"
