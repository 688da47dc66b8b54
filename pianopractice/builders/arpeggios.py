import dataclasses
import typing

import pianopractice.builders
import pianopractice.constants
import pianopractice.exercise
import pianopractice.intervals
import pianopractice.notes


@dataclasses.dataclass(frozen=True)
class ArpeggioConfig (pianopractice.builders.ExerciseConfig):

	"""An arpeggio on one root, over one or two octaves."""

	root_note: pianopractice.notes.Note = pianopractice.notes.Note.C
	arpeggio_type: pianopractice.intervals.ArpeggioType = pianopractice.intervals.ArpeggioType.MAJOR
	octaves: pianopractice.intervals.ArpeggioOctaves = pianopractice.intervals.ArpeggioOctaves.ONE

	def validate (self) -> None:

		super().validate()
		pianopractice.builders.require_type(self, "root_note", pianopractice.notes.Note)
		pianopractice.builders.require_type(self, "arpeggio_type", pianopractice.intervals.ArpeggioType)
		pianopractice.builders.require_type(self, "octaves", pianopractice.intervals.ArpeggioOctaves)


def arpeggio_run (
	root_note: pianopractice.notes.Note,
	arpeggio_type: pianopractice.intervals.ArpeggioType,
	octaves: pianopractice.intervals.ArpeggioOctaves,
	octave: int
) -> typing.List[int]:

	"""
	Return an arpeggio run up to its highest note and back down to the root.

	The second octave repeats the first-octave tones (without the root) an
	octave higher. The top note is played once.

	Example:
		```python
		arpeggio_run(Note.C, ArpeggioType.MAJOR, ArpeggioOctaves.ONE, 4)
		# → [60, 64, 67, 72, 67, 64, 60]
		arpeggio_run(Note.C, ArpeggioType.MAJOR, ArpeggioOctaves.TWO, 4)
		# → [60, 64, 67, 72, 76, 79, 84, 79, 76, 72, 67, 64, 60]
		```
	"""

	root = pianopractice.notes.note_to_midi(root_note, octave)
	ascending = [root + offset for offset in pianopractice.intervals.arpeggio_intervals(arpeggio_type)]

	if octaves is pianopractice.intervals.ArpeggioOctaves.TWO:
		ascending += [note + pianopractice.constants.SEMITONES_PER_OCTAVE for note in ascending[1:]]

	return ascending + list(reversed(ascending[:-1]))


def arpeggio_name (root_note: pianopractice.notes.Note, arpeggio_type: pianopractice.intervals.ArpeggioType, octaves: pianopractice.intervals.ArpeggioOctaves) -> str:

	"""Display name such as ``"C Major (1 Octave)"``."""

	span = "1 Octave" if octaves is pianopractice.intervals.ArpeggioOctaves.ONE else f"{octaves.value} Octaves"

	return f"{root_note.display_name} {pianopractice.intervals.ARPEGGIO_NAMES[arpeggio_type]} ({span})"


@pianopractice.builders.register_builder(ArpeggioConfig)
class ArpeggioBuilder (pianopractice.builders.ExerciseBuilder[ArpeggioConfig]):

	"""Builds arpeggio exercises."""

	def build (self) -> pianopractice.exercise.PracticeExercise:

		config = self.config

		right, left = pianopractice.builders.hand_runs(
			config,
			lambda octave: arpeggio_run(config.root_note, config.arpeggio_type, config.octaves, octave)
		)

		steps = pianopractice.builders.line_steps(right, left, config.hand_selection)

		return pianopractice.exercise.PracticeExercise(
			steps = tuple(steps),
			mode = pianopractice.exercise.PracticeMode.ARPEGGIOS,
			title = arpeggio_name(config.root_note, config.arpeggio_type, config.octaves),
			hand_selection = config.hand_selection,
			key = pianopractice.notes.Key(int(config.root_note)),
			quality = pianopractice.intervals.ARPEGGIO_NAMES[config.arpeggio_type],
		)
