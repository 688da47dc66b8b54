import dataclasses
import typing

import pianopractice.builders
import pianopractice.constants
import pianopractice.exercise
import pianopractice.intervals
import pianopractice.notes


@dataclasses.dataclass(frozen=True)
class ScaleConfig (pianopractice.builders.ExerciseConfig):

	"""A scale in one key, played up one octave and back down."""

	key: pianopractice.notes.Key = pianopractice.notes.Key.C
	scale_type: pianopractice.intervals.ScaleType = pianopractice.intervals.ScaleType.MAJOR

	def validate (self) -> None:

		super().validate()
		pianopractice.builders.require_type(self, "key", pianopractice.notes.Key)
		pianopractice.builders.require_type(self, "scale_type", pianopractice.intervals.ScaleType)


def scale_run (key: pianopractice.notes.Key, scale_type: pianopractice.intervals.ScaleType, octave: int) -> typing.List[int]:

	"""
	Return the 15-note up-and-down run of a scale starting on the tonic in ``octave``.

	The top note is played once.

	Example:
		```python
		scale_run(Key.C, ScaleType.MAJOR, 4)
		# → [60, 62, 64, 65, 67, 69, 71, 72, 71, 69, 67, 65, 64, 62, 60]
		```
	"""

	tonic = pianopractice.notes.note_to_midi(key, octave)
	offsets = pianopractice.intervals.scale_intervals(scale_type) + [pianopractice.constants.SEMITONES_PER_OCTAVE]

	ascending = [tonic + offset for offset in offsets]
	descending = list(reversed(ascending[:-1]))

	return ascending + descending


@pianopractice.builders.register_builder(ScaleConfig)
class ScaleBuilder (pianopractice.builders.ExerciseBuilder[ScaleConfig]):

	"""Builds scale exercises."""

	def build (self) -> pianopractice.exercise.PracticeExercise:

		config = self.config

		right, left = pianopractice.builders.hand_runs(
			config,
			lambda octave: scale_run(config.key, config.scale_type, octave)
		)

		steps = pianopractice.builders.line_steps(right, left, config.hand_selection)

		return pianopractice.exercise.PracticeExercise(
			steps = tuple(steps),
			mode = pianopractice.exercise.PracticeMode.SCALES,
			title = pianopractice.intervals.scale_name(config.key, config.scale_type),
			hand_selection = config.hand_selection,
			key = config.key,
			quality = pianopractice.intervals.SCALE_NAMES[config.scale_type],
		)
