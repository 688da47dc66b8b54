"""The exercise model shared by every builder and the tracker.

A `PracticeExercise` is an immutable, ordered tuple of `PracticeStep` values.
Each step holds the MIDI notes the player must produce and a `StepType` that
tells the tracker how to judge them:

- ``SEQUENTIAL``: one note, played on its own
- ``SIMULTANEOUS``: a chord, all notes held together
- ``PAIRED``: one note per hand, both held together

Builders validate their configuration before producing notes and raise
`ExerciseConfigError` naming the offending field, so a bad octave is reported
as such instead of as an anonymous out-of-range MIDI number.
"""

import dataclasses
import enum
import typing

import pianopractice.chords
import pianopractice.notes


class PracticeMode (enum.Enum):

	"""The five kinds of exercise the builders produce."""

	SCALES = "scales"
	ARPEGGIOS = "arpeggios"
	CHORDS_BY_KEY = "chords_by_key"
	CHORDS_BY_TYPE = "chords_by_type"
	CHORD_PROGRESSIONS = "chord_progressions"


class StepType (enum.Enum):

	"""How the notes of a step must be played."""

	SEQUENTIAL = "sequential"
	SIMULTANEOUS = "simultaneous"
	PAIRED = "paired"


class ExerciseConfigError (ValueError):

	"""A configuration that cannot produce a playable exercise.

	Attributes:
		field: Name of the configuration field at fault (e.g. ``"start_octave"``).
	"""

	def __init__ (self, field: str, message: str) -> None:

		super().__init__(f"{field}: {message}")
		self.field = field


def check_note_range (notes: typing.Iterable[int], field: str, value: typing.Any) -> None:

	"""Raise `ExerciseConfigError` against ``field`` if any note falls outside 0–127."""

	bad = [note for note in notes if not pianopractice.notes.is_valid_midi(note)]

	if bad:
		raise ExerciseConfigError(field, f"{value!r} produces MIDI notes outside 0-127: {sorted(set(bad))}")


@dataclasses.dataclass(frozen=True)
class StepLabel:

	"""
	Descriptive information attached to a step for display.
	"""

	display_name: str
	position: int
	hand: pianopractice.notes.HandSelection
	chord: typing.Optional[pianopractice.chords.Chord] = None
	roman_numeral: typing.Optional[str] = None
	degree: typing.Optional[int] = None


@dataclasses.dataclass(frozen=True)
class PracticeStep:

	"""
	One unit of an exercise: the notes to play and how to play them.
	"""

	notes: typing.Tuple[int, ...]
	step_type: StepType
	label: typing.Optional[StepLabel] = None

	def __post_init__ (self) -> None:

		"""Normalise ``notes`` to a tuple and check it is playable."""

		object.__setattr__(self, "notes", tuple(self.notes))

		if not self.notes:
			raise ValueError("A practice step needs at least one note")

		for note in self.notes:
			if not pianopractice.notes.is_valid_midi(note):
				raise ValueError(f"MIDI note out of range: {note}")

		if self.step_type is StepType.SEQUENTIAL and len(self.notes) != 1:
			raise ValueError(f"A sequential step holds exactly one note, got {len(self.notes)}")

		if self.step_type is StepType.PAIRED and len(self.notes) != 2:
			raise ValueError(f"A paired step holds exactly two notes, got {len(self.notes)}")

	@property
	def expected_notes (self) -> typing.FrozenSet[int]:

		"""The set of notes that completes this step."""

		return frozenset(self.notes)


	def to_dict (self) -> typing.Dict[str, typing.Any]:

		"""Plain-data form of the step."""

		data: typing.Dict[str, typing.Any] = {
			"notes": list(self.notes),
			"names": [pianopractice.notes.midi_note_name(note) for note in self.notes],
			"type": self.step_type.value,
		}

		if self.label is not None:
			data["label"] = self.label.display_name

			if self.label.roman_numeral is not None:
				data["roman_numeral"] = self.label.roman_numeral

		return data


@dataclasses.dataclass(frozen=True)
class PracticeExercise:

	"""
	An ordered, immutable sequence of practice steps.

	``quality`` names what is being practised: the scale, arpeggio or chord
	type name, or the progression name.
	"""

	steps: typing.Tuple[PracticeStep, ...]
	mode: PracticeMode
	title: str = ""
	hand_selection: pianopractice.notes.HandSelection = pianopractice.notes.HandSelection.RIGHT
	key: typing.Optional[pianopractice.notes.Key] = None
	quality: typing.Optional[str] = None

	def __post_init__ (self) -> None:

		object.__setattr__(self, "steps", tuple(self.steps))


	@classmethod
	def empty (
		cls,
		mode: PracticeMode,
		title: str = "",
		hand_selection: pianopractice.notes.HandSelection = pianopractice.notes.HandSelection.RIGHT,
		key: typing.Optional[pianopractice.notes.Key] = None,
		quality: typing.Optional[str] = None,
	) -> "PracticeExercise":

		"""An exercise with no steps."""

		return cls(steps=(), mode=mode, title=title, hand_selection=hand_selection, key=key, quality=quality)


	@property
	def is_empty (self) -> bool:

		return not self.steps


	def __len__ (self) -> int:

		return len(self.steps)


	def __iter__ (self) -> typing.Iterator[PracticeStep]:

		return iter(self.steps)


	def all_notes (self) -> typing.Set[int]:

		"""Every note the exercise uses, for sizing a keyboard display."""

		return {note for step in self.steps for note in step.notes}


	def note_range (self) -> typing.Optional[typing.Tuple[int, int]]:

		"""Return ``(lowest, highest)`` MIDI note, or ``None`` for an empty exercise."""

		notes = self.all_notes()

		if not notes:
			return None

		return min(notes), max(notes)


	def to_dict (self) -> typing.Dict[str, typing.Any]:

		"""Plain-data form of the exercise, suitable for YAML or JSON output."""

		note_range = self.note_range()

		return {
			"mode": self.mode.value,
			"title": self.title,
			"key": self.key.display_name if self.key is not None else None,
			"quality": self.quality,
			"hand": self.hand_selection.value,
			"range": [pianopractice.notes.midi_note_name(n) for n in note_range] if note_range is not None else None,
			"steps": [step.to_dict() for step in self.steps],
		}
