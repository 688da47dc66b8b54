"""
Exercise builders, one per practice mode.

Each mode has a frozen config dataclass and an `ExerciseBuilder` subclass
registered against that config type. `build_exercise()` is the single entry
point: it validates the config and dispatches on its type. Importing the
`pianopractice` package registers the five built-in builders.

Example:
	```python
	import pianopractice.builders
	import pianopractice.builders.scales

	exercise = pianopractice.builders.build_exercise(
		pianopractice.builders.scales.ScaleConfig(key=Key.D, hand_selection=HandSelection.BOTH)
	)
	len(exercise)  # → 15
	```
"""

import abc
import dataclasses
import logging
import typing

import pianopractice.chords
import pianopractice.constants
import pianopractice.exercise
import pianopractice.notes


logger = logging.getLogger(__name__)


PracticeMode = pianopractice.exercise.PracticeMode


@dataclasses.dataclass(frozen=True)
class ExerciseConfig:

	"""Settings shared by every mode."""

	hand_selection: pianopractice.notes.HandSelection = pianopractice.notes.HandSelection.RIGHT
	start_octave: int = pianopractice.constants.DEFAULT_START_OCTAVE

	def validate (self) -> None:

		"""Raise `ExerciseConfigError` if the hand and octave settings are unusable."""

		if not isinstance(self.hand_selection, pianopractice.notes.HandSelection):
			raise pianopractice.exercise.ExerciseConfigError("hand_selection", f"expected a HandSelection, got {self.hand_selection!r}")

		if isinstance(self.start_octave, bool) or not isinstance(self.start_octave, int):
			raise pianopractice.exercise.ExerciseConfigError("start_octave", f"expected an integer, got {self.start_octave!r}")

		if self.start_octave < 0:
			raise pianopractice.exercise.ExerciseConfigError("start_octave", f"must not be negative, got {self.start_octave}")

		# The left hand plays an octave below the start octave.
		if self.hand_selection is not pianopractice.notes.HandSelection.RIGHT and self.start_octave < 1:
			raise pianopractice.exercise.ExerciseConfigError(
				"start_octave",
				f"{self.hand_selection.value} hand practice needs a start octave of at least 1, got {self.start_octave}"
			)

	@property
	def right_octave (self) -> int:

		return self.start_octave

	@property
	def left_octave (self) -> int:

		return self.start_octave - 1


def require_type (config: ExerciseConfig, field: str, expected: typing.Type[typing.Any]) -> None:

	"""Raise `ExerciseConfigError` unless ``config.<field>`` is an instance of ``expected``."""

	value = getattr(config, field)

	if not isinstance(value, expected):
		raise pianopractice.exercise.ExerciseConfigError(field, f"expected a {expected.__name__}, got {value!r}")


ConfigT = typing.TypeVar("ConfigT", bound=ExerciseConfig)


class ExerciseBuilder (abc.ABC, typing.Generic[ConfigT]):

	"""Abstract base for exercise builders."""

	def __init__ (self, config: ConfigT) -> None:

		"""Validate and store the configuration."""

		config.validate()
		self.config = config

	@abc.abstractmethod
	def build (self) -> pianopractice.exercise.PracticeExercise:

		"""Produce the exercise for the stored configuration."""

		...


_BUILDERS: typing.Dict[typing.Type[ExerciseConfig], typing.Type[ExerciseBuilder]] = {}


def register_builder (config_type: typing.Type[ExerciseConfig]) -> typing.Callable[[typing.Type[ExerciseBuilder]], typing.Type[ExerciseBuilder]]:

	"""Class decorator that makes a builder the handler for a config type.

	Example:
		```python
		@pianopractice.builders.register_builder(ScaleConfig)
		class ScaleBuilder (pianopractice.builders.ExerciseBuilder[ScaleConfig]):
			...
		```
	"""

	def decorator (builder_type: typing.Type[ExerciseBuilder]) -> typing.Type[ExerciseBuilder]:

		_BUILDERS[config_type] = builder_type
		return builder_type

	return decorator


def builder_for (config: ExerciseConfig) -> ExerciseBuilder:

	"""Return a builder instance for a config.

	Raises:
		TypeError: If no builder is registered for the config's type.
	"""

	builder_type = _BUILDERS.get(type(config))

	if builder_type is None:
		raise TypeError(f"No exercise builder registered for {type(config).__name__}")

	return builder_type(config)


def build_exercise (config: ExerciseConfig) -> pianopractice.exercise.PracticeExercise:

	"""Validate a config and build its exercise."""

	exercise = builder_for(config).build()

	logger.debug(f"Built {exercise.mode.value} exercise {exercise.title!r} with {len(exercise)} steps")

	return exercise


def line_steps (right: typing.List[int], left: typing.List[int], hand: pianopractice.notes.HandSelection) -> typing.List[pianopractice.exercise.PracticeStep]:

	"""Turn single-line material (scales, arpeggios) into steps for a hand selection.

	One hand gives one ``SEQUENTIAL`` step per note. Both hands zip the two
	runs index for index into ``PAIRED`` ``[left, right]`` steps.

	Raises:
		ValueError: If both hands are requested and the runs differ in length.
	"""

	steps: typing.List[pianopractice.exercise.PracticeStep] = []

	if hand is pianopractice.notes.HandSelection.BOTH:

		if len(left) != len(right):
			raise ValueError(f"Left and right runs differ in length: {len(left)} != {len(right)}")

		for position, (left_note, right_note) in enumerate(zip(left, right), start=1):
			label = pianopractice.exercise.StepLabel(
				display_name = f"Note {position} (Both Hands)",
				position = position,
				hand = hand,
			)
			steps.append(pianopractice.exercise.PracticeStep((left_note, right_note), pianopractice.exercise.StepType.PAIRED, label))

		return steps

	run = left if hand is pianopractice.notes.HandSelection.LEFT else right
	hand_name = "Left" if hand is pianopractice.notes.HandSelection.LEFT else "Right"

	for position, note in enumerate(run, start=1):
		label = pianopractice.exercise.StepLabel(
			display_name = f"Note {position} ({hand_name} Hand)",
			position = position,
			hand = hand,
		)
		steps.append(pianopractice.exercise.PracticeStep((note,), pianopractice.exercise.StepType.SEQUENTIAL, label))

	return steps


def hand_runs (config: ExerciseConfig, run_for_octave: typing.Callable[[int], typing.List[int]]) -> typing.Tuple[typing.List[int], typing.List[int]]:

	"""Build the right- and left-hand runs a config needs and range-check them.

	Only the hands that will actually be played are checked, so a right-hand
	exercise at octave 0 is fine even though its left-hand run would not be.
	"""

	hand = config.hand_selection
	right: typing.List[int] = []
	left: typing.List[int] = []

	if hand is not pianopractice.notes.HandSelection.LEFT:
		right = run_for_octave(config.right_octave)
		pianopractice.exercise.check_note_range(right, "start_octave", config.start_octave)

	if hand is not pianopractice.notes.HandSelection.RIGHT:
		left = run_for_octave(config.left_octave)
		pianopractice.exercise.check_note_range(left, "start_octave", config.start_octave)

	return right, left


def chord_step (
	config: ExerciseConfig,
	right: typing.List[int],
	position: int,
	chord: typing.Optional[pianopractice.chords.Chord] = None,
	roman_numeral: typing.Optional[str] = None,
	degree: typing.Optional[int] = None,
	display_name: typing.Optional[str] = None,
) -> pianopractice.exercise.PracticeStep:

	"""Build one ``SIMULTANEOUS`` step from a right-hand voicing.

	The voicing is spread across the configured hands and range-checked
	against the start octave. The label defaults to the chord's name.
	"""

	notes = pianopractice.chords.hand_voicing(right, config.hand_selection)
	pianopractice.exercise.check_note_range(notes, "start_octave", config.start_octave)

	if display_name is None:
		display_name = chord.name() if chord is not None else " ".join(pianopractice.notes.midi_note_name(n) for n in right)

	label = pianopractice.exercise.StepLabel(
		display_name = display_name,
		position = position,
		hand = config.hand_selection,
		chord = chord,
		roman_numeral = roman_numeral,
		degree = degree,
	)

	return pianopractice.exercise.PracticeStep(tuple(notes), pianopractice.exercise.StepType.SIMULTANEOUS, label)
