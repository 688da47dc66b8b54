"""
One chord quality on all twelve roots (chord planing).
"""

import dataclasses
import enum
import typing

import pianopractice.builders
import pianopractice.chords
import pianopractice.circle_of_fifths
import pianopractice.exercise
import pianopractice.notes
import pianopractice.voicings


class KeyOrder (enum.Enum):

	"""Order in which the twelve roots are visited."""

	CHROMATIC = "chromatic"
	CIRCLE_OF_FIFTHS = "circle_of_fifths"


@dataclasses.dataclass(frozen=True)
class ChordsByTypeConfig (pianopractice.builders.ExerciseConfig):

	"""One chord type played on every root."""

	chord_type: pianopractice.chords.ChordType = pianopractice.chords.ChordType.MAJOR
	include_inversions: bool = True
	order: KeyOrder = KeyOrder.CHROMATIC
	voice_leading: bool = False

	def validate (self) -> None:

		super().validate()
		pianopractice.builders.require_type(self, "chord_type", pianopractice.chords.ChordType)
		pianopractice.builders.require_type(self, "include_inversions", bool)
		pianopractice.builders.require_type(self, "order", KeyOrder)
		pianopractice.builders.require_type(self, "voice_leading", bool)


def root_order (order: KeyOrder) -> typing.List[pianopractice.notes.Note]:

	"""Return all twelve roots in the requested order, starting on C."""

	if order is KeyOrder.CIRCLE_OF_FIFTHS:
		return [key.tonic for key in pianopractice.circle_of_fifths.fifths_from(pianopractice.notes.Key.C)]

	return list(pianopractice.notes.Note)


@pianopractice.builders.register_builder(ChordsByTypeConfig)
class ChordsByTypeBuilder (pianopractice.builders.ExerciseBuilder[ChordsByTypeConfig]):

	"""Builds chords-by-type exercises."""

	def build (self) -> pianopractice.exercise.PracticeExercise:

		config = self.config
		roots = root_order(config.order)

		if config.voice_leading:
			steps = self._voice_led_steps(roots)
		else:
			steps = self._inversion_steps(roots)

		suffix = " (with inversions)" if config.include_inversions and not config.voice_leading else ""

		return pianopractice.exercise.PracticeExercise(
			steps = tuple(steps),
			mode = pianopractice.exercise.PracticeMode.CHORDS_BY_TYPE,
			title = f"{config.chord_type.display_name} Chords{suffix} - All 12 Keys",
			hand_selection = config.hand_selection,
			quality = config.chord_type.display_name,
		)


	def _inversion_steps (self, roots: typing.List[pianopractice.notes.Note]) -> typing.List[pianopractice.exercise.PracticeStep]:

		config = self.config
		steps: typing.List[pianopractice.exercise.PracticeStep] = []

		for root in roots:
			chord = pianopractice.chords.Chord(root, config.chord_type)
			shapes = chord.inversions() if config.include_inversions else [chord]

			for shape in shapes:
				steps.append(pianopractice.builders.chord_step(config, shape.tones(config.start_octave), position=len(steps) + 1, chord=shape))

		return steps


	def _voice_led_steps (self, roots: typing.List[pianopractice.notes.Note]) -> typing.List[pianopractice.exercise.PracticeStep]:

		config = self.config
		intervals = pianopractice.chords.CHORD_INTERVALS[config.chord_type]
		state = pianopractice.voicings.VoiceLeadingState()
		steps: typing.List[pianopractice.exercise.PracticeStep] = []

		for position, root in enumerate(roots, start=1):
			voicing = state.next(intervals, pianopractice.notes.note_to_midi(root, config.start_octave))
			chord = pianopractice.chords.Chord(root, config.chord_type, pianopractice.chords.ChordInversion(state.inversion))

			steps.append(pianopractice.builders.chord_step(config, voicing, position=position, chord=chord))

		return steps
