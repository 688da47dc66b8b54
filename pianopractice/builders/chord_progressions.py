import dataclasses
import logging
import typing

import pianopractice.builders
import pianopractice.chords
import pianopractice.exercise
import pianopractice.notes
import pianopractice.progressions


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class ChordProgressionConfig (pianopractice.builders.ExerciseConfig):

	"""A named progression from the library, played in one key."""

	key: pianopractice.notes.Key = pianopractice.notes.Key.C
	progression_name: typing.Optional[str] = "I - V"

	def validate (self) -> None:

		super().validate()
		pianopractice.builders.require_type(self, "key", pianopractice.notes.Key)

		if self.progression_name is not None and not isinstance(self.progression_name, str):
			raise pianopractice.exercise.ExerciseConfigError("progression_name", f"expected a string, got {self.progression_name!r}")


@pianopractice.builders.register_builder(ChordProgressionConfig)
class ChordProgressionBuilder (pianopractice.builders.ExerciseBuilder[ChordProgressionConfig]):

	"""Builds chord-progression exercises.

	An unknown progression name is not an error: the result is an empty
	exercise and a warning is logged.
	"""

	def build (self) -> pianopractice.exercise.PracticeExercise:

		config = self.config
		progression = pianopractice.progressions.get_progression(config.progression_name)

		if progression is None:
			logger.warning(f"Unknown chord progression {config.progression_name!r}, building an empty exercise")

			return pianopractice.exercise.PracticeExercise.empty(
				pianopractice.exercise.PracticeMode.CHORD_PROGRESSIONS,
				title = f"{config.key.display_name}: {config.progression_name}",
				hand_selection = config.hand_selection,
				key = config.key,
				quality = config.progression_name,
			)

		steps: typing.List[pianopractice.exercise.PracticeStep] = []

		for position, (numeral, right) in enumerate(zip(progression.roman_numerals, progression.chord_notes(config.key, config.start_octave)), start=1):
			chord = pianopractice.chords.identify_chord(right)
			display_name = f"{numeral}: {chord.name()}" if chord is not None else numeral

			steps.append(pianopractice.builders.chord_step(
				config,
				right,
				position = position,
				chord = chord,
				roman_numeral = numeral,
				display_name = display_name,
			))

		return pianopractice.exercise.PracticeExercise(
			steps = tuple(steps),
			mode = pianopractice.exercise.PracticeMode.CHORD_PROGRESSIONS,
			title = f"{config.key.display_name}: {progression.name}",
			hand_selection = config.hand_selection,
			key = config.key,
			quality = progression.name,
		)
