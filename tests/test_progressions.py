import pytest

import pianopractice.notes
import pianopractice.progressions


Key = pianopractice.notes.Key
ProgressionDifficulty = pianopractice.progressions.ProgressionDifficulty


def test_library_order () -> None:

	assert pianopractice.progressions.progression_names() == [
		"I - V",
		"I - vi",
		"vi - IV",
		"I - V - vi - IV",
		"vi - IV - I - V",
		"I - vi - IV - V",
		"ii - V - I",
		"I - ♭VII - IV",
	]


def test_chord_notes_in_c () -> None:

	progression = pianopractice.progressions.get_progression("I - V")

	assert progression.chord_notes(Key.C) == [[60, 64, 67], [67, 71, 74]]
	assert len(progression) == 2


def test_flat_seven_chord () -> None:

	progression = pianopractice.progressions.get_progression("I - ♭VII - IV")

	assert progression.chord_notes(Key.C)[1] == [70, 74, 77]


def test_chord_notes_in_another_octave () -> None:

	progression = pianopractice.progressions.get_progression("vi - IV")

	assert progression.chord_notes(Key.A, octave=3) == [[66, 69, 73], [62, 66, 69]]


def test_difficulty_groups () -> None:

	counts = {
		difficulty: len(pianopractice.progressions.progressions_for_difficulty(difficulty))
		for difficulty in ProgressionDifficulty
	}

	assert counts == {
		ProgressionDifficulty.BEGINNER: 3,
		ProgressionDifficulty.INTERMEDIATE: 3,
		ProgressionDifficulty.ADVANCED: 2,
	}
	assert ProgressionDifficulty.ADVANCED.display_name == "Advanced"


@pytest.mark.parametrize("name", ["I-bVII-IV", "I - bVII - IV", "  I -♭VII-  IV "])
def test_name_lookup_is_forgiving (name: str) -> None:

	assert pianopractice.progressions.get_progression(name).name == "I - ♭VII - IV"


@pytest.mark.parametrize("name", [None, "", "I - IV - V - I"])
def test_unknown_names (name: str) -> None:

	assert pianopractice.progressions.get_progression(name) is None


def test_mismatched_progression_rejected () -> None:

	with pytest.raises(ValueError):
		pianopractice.progressions.ChordProgression(
			name = "broken",
			roman_numerals = ("I",),
			chords = ((0, 4, 7), (7, 11, 14)),
			difficulty = ProgressionDifficulty.BEGINNER,
		)
