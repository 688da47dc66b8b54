import dataclasses

import pytest

import pianopractice.builders
import pianopractice.builders.scales
import pianopractice.exercise
import pianopractice.notes


HandSelection = pianopractice.notes.HandSelection


def test_every_mode_has_a_builder () -> None:

	"""Each built-in config type dispatches to its own builder."""

	modes = {builder.__name__ for builder in pianopractice.builders._BUILDERS.values()}

	assert modes == {
		"ScaleBuilder",
		"ArpeggioBuilder",
		"ChordsByKeyBuilder",
		"ChordsByTypeBuilder",
		"ChordProgressionBuilder",
	}


def test_unregistered_config_raises_type_error () -> None:

	with pytest.raises(TypeError, match="ExerciseConfig"):
		pianopractice.builders.build_exercise(pianopractice.builders.ExerciseConfig())


def test_register_builder (monkeypatch: pytest.MonkeyPatch) -> None:

	"""A new config type can be given a builder with the decorator."""

	monkeypatch.setattr(pianopractice.builders, "_BUILDERS", dict(pianopractice.builders._BUILDERS))

	@dataclasses.dataclass(frozen=True)
	class SingleNoteConfig (pianopractice.builders.ExerciseConfig):
		note: int = 60

	@pianopractice.builders.register_builder(SingleNoteConfig)
	class SingleNoteBuilder (pianopractice.builders.ExerciseBuilder[SingleNoteConfig]):

		def build (self) -> pianopractice.exercise.PracticeExercise:

			step = pianopractice.exercise.PracticeStep((self.config.note,), pianopractice.exercise.StepType.SEQUENTIAL)

			return pianopractice.exercise.PracticeExercise(steps=(step,), mode=pianopractice.exercise.PracticeMode.SCALES)

	exercise = pianopractice.builders.build_exercise(SingleNoteConfig(note=62))

	assert [step.notes for step in exercise] == [(62,)]


def test_builder_validates_on_construction () -> None:

	with pytest.raises(pianopractice.exercise.ExerciseConfigError):
		pianopractice.builders.scales.ScaleBuilder(pianopractice.builders.scales.ScaleConfig(hand_selection="both"))  # type: ignore[arg-type]


def test_hand_octaves () -> None:

	config = pianopractice.builders.ExerciseConfig(start_octave=3)

	assert config.right_octave == 3
	assert config.left_octave == 2


def test_start_octave_must_be_int () -> None:

	with pytest.raises(pianopractice.exercise.ExerciseConfigError) as info:
		pianopractice.builders.ExerciseConfig(start_octave=True).validate()  # type: ignore[arg-type]

	assert info.value.field == "start_octave"


def test_line_steps_rejects_uneven_runs () -> None:

	with pytest.raises(ValueError):
		pianopractice.builders.line_steps([60, 62], [48], HandSelection.BOTH)


def test_chord_step_label_defaults_to_note_names () -> None:

	step = pianopractice.builders.chord_step(pianopractice.builders.ExerciseConfig(), [60, 64, 67], position=1)

	assert step.label.display_name == "C4 E4 G4"
	assert step.step_type is pianopractice.exercise.StepType.SIMULTANEOUS
