import yaml

import pytest

import pianopractice.__main__
import pianopractice.notes


def test_show_prints_exercise_yaml (tmp_path, capsys: pytest.CaptureFixture) -> None:

	"""Flags override the (missing) config file."""

	missing = str(tmp_path / "none.yaml")

	assert pianopractice.__main__.main(["show", "--config", missing, "--key", "G"]) == 0

	data = yaml.safe_load(capsys.readouterr().out)

	assert data["title"] == "G Major (Ionian)"
	assert data["steps"][0]["notes"] == [67]
	assert data["steps"][0]["names"] == ["G4"]
	assert len(data["steps"]) == 15
	assert data["range"] == ["G4", "G5"]


def test_show_reads_config_file (tmp_path, capsys: pytest.CaptureFixture) -> None:

	path = tmp_path / "pianopractice.yaml"
	path.write_text("practice:\n  mode: chord_progressions\n  progression: ii - V - I\n")

	assert pianopractice.__main__.main(["show", "--config", str(path), "--hand", "both"]) == 0

	data = yaml.safe_load(capsys.readouterr().out)

	assert data["quality"] == "ii - V - I"
	assert data["hand"] == "both"
	assert data["steps"][0]["notes"] == [50, 53, 57, 62, 65, 69]
	assert data["steps"][0]["label"] == "ii: Dm"


def test_switch_flags (tmp_path, capsys: pytest.CaptureFixture) -> None:

	missing = str(tmp_path / "none.yaml")

	assert pianopractice.__main__.main(["show", "--config", missing, "--mode", "chords_by_key", "--sevenths"]) == 0

	data = yaml.safe_load(capsys.readouterr().out)

	assert len(data["steps"]) == 42


def test_bad_settings_exit_with_usage_error (tmp_path) -> None:

	missing = str(tmp_path / "none.yaml")

	assert pianopractice.__main__.main(["show", "--config", missing, "--hand", "both", "--octave", "0"]) == 2
	assert pianopractice.__main__.main(["show", "--config", missing, "--mode", "etudes"]) == 2


def test_list_progressions (capsys: pytest.CaptureFixture) -> None:

	assert pianopractice.__main__.main(["progressions"]) == 0

	out = capsys.readouterr().out

	assert "Beginner:" in out
	assert "ii - V - I" in out
	assert "I - ♭VII - IV" in out


def test_key_change_message () -> None:

	Key = pianopractice.notes.Key

	assert pianopractice.__main__.key_change_message(Key.C, Key.G) == "Next key: G (1/12 from C)"
	assert pianopractice.__main__.key_change_message(Key.D, Key.C) == "Next key: C (10/12 from D)"
	assert pianopractice.__main__.key_change_message(Key.C, Key.D_SHARP) == "Next key: E♭ (9/12 from C)"


def test_practice_without_midi_fails (tmp_path, patch_no_midi: None) -> None:

	missing = str(tmp_path / "none.yaml")

	assert pianopractice.__main__.main(["practice", "--config", missing]) == 1
