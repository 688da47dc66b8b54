"""
Diatonic chords on every degree of a key.

The default exercise walks each degree through an arc of inversions and back
(root, 1st, 2nd, 1st for triads; root, 1st, 2nd, 3rd, 2nd, 1st for sevenths)
so the hand learns every shape of every chord in the key. With voice leading
enabled it plays one chord per degree instead, each in whichever inversion
sits closest to the chord before it.
"""

import dataclasses
import typing

import pianopractice.builders
import pianopractice.chords
import pianopractice.exercise
import pianopractice.intervals
import pianopractice.notes
import pianopractice.voicings


TRIAD_ARC: typing.Tuple[pianopractice.chords.ChordInversion, ...] = (
	pianopractice.chords.ChordInversion.ROOT,
	pianopractice.chords.ChordInversion.FIRST,
	pianopractice.chords.ChordInversion.SECOND,
	pianopractice.chords.ChordInversion.FIRST,
)

SEVENTH_ARC: typing.Tuple[pianopractice.chords.ChordInversion, ...] = (
	pianopractice.chords.ChordInversion.ROOT,
	pianopractice.chords.ChordInversion.FIRST,
	pianopractice.chords.ChordInversion.SECOND,
	pianopractice.chords.ChordInversion.THIRD,
	pianopractice.chords.ChordInversion.SECOND,
	pianopractice.chords.ChordInversion.FIRST,
)


@dataclasses.dataclass(frozen=True)
class ChordsByKeyConfig (pianopractice.builders.ExerciseConfig):

	"""The diatonic triads or seventh chords of one key."""

	key: pianopractice.notes.Key = pianopractice.notes.Key.C
	scale_type: pianopractice.intervals.ScaleType = pianopractice.intervals.ScaleType.MAJOR
	include_seventh_chords: bool = False
	voice_leading: bool = False

	def validate (self) -> None:

		super().validate()
		pianopractice.builders.require_type(self, "key", pianopractice.notes.Key)
		pianopractice.builders.require_type(self, "scale_type", pianopractice.intervals.ScaleType)
		pianopractice.builders.require_type(self, "include_seventh_chords", bool)
		pianopractice.builders.require_type(self, "voice_leading", bool)


def diatonic_chords (key: pianopractice.notes.Key, scale_type: pianopractice.intervals.ScaleType, sevenths: bool = False) -> typing.List[pianopractice.chords.Chord]:

	"""Return the root-position chord on each degree of a scale.

	Example:
		```python
		[c.name() for c in diatonic_chords(Key.C, ScaleType.MAJOR)]
		# → ["C", "Dm", "Em", "F", "G", "Am", "B°"]
		```
	"""

	if sevenths:
		chord_types = pianopractice.intervals.diatonic_seventh_types(key, scale_type)
	else:
		chord_types = pianopractice.intervals.diatonic_triad_types(key, scale_type)

	roots = pianopractice.intervals.scale_notes(key, scale_type)

	return [pianopractice.chords.Chord(root, chord_type) for root, chord_type in zip(roots, chord_types)]


@pianopractice.builders.register_builder(ChordsByKeyConfig)
class ChordsByKeyBuilder (pianopractice.builders.ExerciseBuilder[ChordsByKeyConfig]):

	"""Builds chords-by-key exercises."""

	def build (self) -> pianopractice.exercise.PracticeExercise:

		config = self.config
		chords = diatonic_chords(config.key, config.scale_type, config.include_seventh_chords)

		if config.voice_leading:
			steps = self._voice_led_steps(chords)
		else:
			steps = self._arc_steps(chords)

		kind = "Seventh Chords" if config.include_seventh_chords else "Triads"

		return pianopractice.exercise.PracticeExercise(
			steps = tuple(steps),
			mode = pianopractice.exercise.PracticeMode.CHORDS_BY_KEY,
			title = f"{pianopractice.intervals.scale_name(config.key, config.scale_type)} {kind}",
			hand_selection = config.hand_selection,
			key = config.key,
			quality = pianopractice.intervals.SCALE_NAMES[config.scale_type],
		)


	def _arc_steps (self, chords: typing.List[pianopractice.chords.Chord]) -> typing.List[pianopractice.exercise.PracticeStep]:

		"""Each degree through its inversion arc, all built from the start octave."""

		config = self.config
		arc = SEVENTH_ARC if config.include_seventh_chords else TRIAD_ARC
		steps: typing.List[pianopractice.exercise.PracticeStep] = []

		for degree, root_chord in enumerate(chords):
			numeral = pianopractice.intervals.roman_numeral(degree, root_chord.chord_type)

			for inversion in arc:
				chord = dataclasses.replace(root_chord, inversion=inversion)

				steps.append(pianopractice.builders.chord_step(
					config,
					chord.tones(config.start_octave),
					position = len(steps) + 1,
					chord = chord,
					roman_numeral = numeral,
					degree = degree + 1,
				))

		return steps


	def _voice_led_steps (self, chords: typing.List[pianopractice.chords.Chord]) -> typing.List[pianopractice.exercise.PracticeStep]:

		"""One chord per degree, each in the inversion nearest the previous chord."""

		config = self.config
		state = pianopractice.voicings.VoiceLeadingState()
		steps: typing.List[pianopractice.exercise.PracticeStep] = []

		for degree, root_chord in enumerate(chords):
			root_midi = pianopractice.notes.note_to_midi(root_chord.root, config.start_octave)
			voicing = state.next(pianopractice.chords.CHORD_INTERVALS[root_chord.chord_type], root_midi)
			chord = dataclasses.replace(root_chord, inversion=pianopractice.chords.ChordInversion(state.inversion))

			steps.append(pianopractice.builders.chord_step(
				config,
				voicing,
				position = degree + 1,
				chord = chord,
				roman_numeral = pianopractice.intervals.roman_numeral(degree, root_chord.chord_type),
				degree = degree + 1,
			))

		return steps
