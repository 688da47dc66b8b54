import pytest

import pianopractice.builders
import pianopractice.builders.scales
import pianopractice.exercise
import pianopractice.intervals
import pianopractice.notes


HandSelection = pianopractice.notes.HandSelection
Key = pianopractice.notes.Key
ScaleConfig = pianopractice.builders.scales.ScaleConfig
ScaleType = pianopractice.intervals.ScaleType
StepType = pianopractice.exercise.StepType

C_MAJOR_RUN = [60, 62, 64, 65, 67, 69, 71, 72, 71, 69, 67, 65, 64, 62, 60]


def test_c_major_right_hand () -> None:

	"""Up one octave and back down, the top note played once."""

	exercise = pianopractice.builders.build_exercise(ScaleConfig(key=Key.C))

	assert [step.notes[0] for step in exercise] == C_MAJOR_RUN
	assert all(step.step_type is StepType.SEQUENTIAL for step in exercise)
	assert exercise.title == "C Major (Ionian)"
	assert exercise.quality == "Major (Ionian)"
	assert exercise.key is Key.C
	assert exercise.mode is pianopractice.exercise.PracticeMode.SCALES


def test_left_hand_is_an_octave_lower () -> None:

	exercise = pianopractice.builders.build_exercise(ScaleConfig(key=Key.C, hand_selection=HandSelection.LEFT))

	assert [step.notes[0] for step in exercise] == [note - 12 for note in C_MAJOR_RUN]
	assert exercise.steps[0].label.display_name == "Note 1 (Left Hand)"


def test_both_hands_pair_left_and_right () -> None:

	"""Both hands give 15 paired steps, left note first."""

	exercise = pianopractice.builders.build_exercise(ScaleConfig(key=Key.C, hand_selection=HandSelection.BOTH))

	assert len(exercise) == 15
	assert all(step.step_type is StepType.PAIRED for step in exercise)
	assert exercise.steps[0].notes == (48, 60)
	assert exercise.steps[7].notes == (60, 72)
	assert exercise.steps[0].label.display_name == "Note 1 (Both Hands)"


def test_natural_minor_in_a () -> None:

	exercise = pianopractice.builders.build_exercise(ScaleConfig(key=Key.A, scale_type=ScaleType.MINOR, start_octave=3))

	assert [step.notes[0] for step in exercise][:8] == [57, 59, 60, 62, 64, 65, 67, 69]
	assert exercise.title == "A Natural Minor"


def test_every_scale_has_fifteen_steps () -> None:

	for scale_type in ScaleType:
		exercise = pianopractice.builders.build_exercise(ScaleConfig(key=Key.F_SHARP, scale_type=scale_type))
		assert len(exercise) == 15, scale_type


@pytest.mark.parametrize("hand", [HandSelection.LEFT, HandSelection.BOTH])
def test_left_hand_needs_octave_one (hand: HandSelection) -> None:

	"""The left hand plays below the start octave, so octave 0 is rejected."""

	with pytest.raises(pianopractice.exercise.ExerciseConfigError) as info:
		pianopractice.builders.build_exercise(ScaleConfig(key=Key.C, hand_selection=hand, start_octave=0))

	assert info.value.field == "start_octave"


def test_right_hand_at_octave_zero_is_fine () -> None:

	exercise = pianopractice.builders.build_exercise(ScaleConfig(key=Key.C, start_octave=0))

	assert exercise.steps[0].notes == (12,)


def test_octave_too_high_is_rejected () -> None:

	"""Notes above 127 are reported against the start octave."""

	with pytest.raises(pianopractice.exercise.ExerciseConfigError) as info:
		pianopractice.builders.build_exercise(ScaleConfig(key=Key.C, start_octave=10))

	assert info.value.field == "start_octave"


def test_wrong_type_names_the_field () -> None:

	with pytest.raises(pianopractice.exercise.ExerciseConfigError) as info:
		pianopractice.builders.build_exercise(ScaleConfig(key="C"))  # type: ignore[arg-type]

	assert info.value.field == "key"
	assert str(info.value).startswith("key:")


def test_negative_octave_is_rejected () -> None:

	with pytest.raises(pianopractice.exercise.ExerciseConfigError):
		pianopractice.builders.build_exercise(ScaleConfig(start_octave=-1))


def test_scale_run_helper () -> None:

	assert pianopractice.builders.scales.scale_run(Key.C, ScaleType.MAJOR, 4) == C_MAJOR_RUN
