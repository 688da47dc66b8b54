"""Practice settings and YAML configuration loading.

A configuration file has two optional sections:

```yaml
practice:
  mode: chords_by_key
  key: Eb
  scale: dorian
  hand: both
  octave: 3
  sevenths: true
  auto_progress_keys: true

midi:
  input_device: "Digital Piano MIDI 1"
```

Enum values are written by name or value, case-insensitive (``"chords_by_key"``,
``"CHORDS_BY_KEY"``, ``"Chords By Key"``). Keys and notes accept the usual
spellings (``"C#"``, ``"Db"``, ``"D♭"``).
"""

import dataclasses
import enum
import logging
import os
import typing

import yaml

import pianopractice.builders
import pianopractice.builders.arpeggios
import pianopractice.builders.chord_progressions
import pianopractice.builders.chords_by_key
import pianopractice.builders.chords_by_type
import pianopractice.builders.scales
import pianopractice.chords
import pianopractice.constants
import pianopractice.exercise
import pianopractice.intervals
import pianopractice.notes


logger = logging.getLogger(__name__)


PracticeMode = pianopractice.exercise.PracticeMode


@dataclasses.dataclass(frozen=True)
class PracticeSettings:

	"""
	Everything needed to build an exercise in any mode.

	Only the fields relevant to ``mode`` are used; the rest are kept so that
	switching modes back and forth does not lose the other choices.
	"""

	mode: PracticeMode = PracticeMode.SCALES
	key: pianopractice.notes.Key = pianopractice.notes.Key.C
	scale_type: pianopractice.intervals.ScaleType = pianopractice.intervals.ScaleType.MAJOR
	root_note: pianopractice.notes.Note = pianopractice.notes.Note.C
	arpeggio_type: pianopractice.intervals.ArpeggioType = pianopractice.intervals.ArpeggioType.MAJOR
	arpeggio_octaves: pianopractice.intervals.ArpeggioOctaves = pianopractice.intervals.ArpeggioOctaves.ONE
	chord_type: pianopractice.chords.ChordType = pianopractice.chords.ChordType.MAJOR
	include_inversions: bool = True
	include_seventh_chords: bool = False
	progression_name: typing.Optional[str] = "I - V"
	hand_selection: pianopractice.notes.HandSelection = pianopractice.notes.HandSelection.RIGHT
	start_octave: int = pianopractice.constants.DEFAULT_START_OCTAVE
	voice_leading: bool = False
	auto_progress_keys: bool = False
	chord_order: pianopractice.builders.chords_by_type.KeyOrder = pianopractice.builders.chords_by_type.KeyOrder.CHROMATIC

	def __post_init__ (self) -> None:

		if not isinstance(self.mode, PracticeMode):
			raise pianopractice.exercise.ExerciseConfigError("mode", f"expected a PracticeMode, got {self.mode!r}")

		if not isinstance(self.auto_progress_keys, bool):
			raise pianopractice.exercise.ExerciseConfigError("auto_progress_keys", f"expected a bool, got {self.auto_progress_keys!r}")


	def exercise_config (self) -> pianopractice.builders.ExerciseConfig:

		"""Return the builder config for the current mode."""

		common = {"hand_selection": self.hand_selection, "start_octave": self.start_octave}

		if self.mode is PracticeMode.SCALES:
			return pianopractice.builders.scales.ScaleConfig(key=self.key, scale_type=self.scale_type, **common)

		if self.mode is PracticeMode.ARPEGGIOS:
			return pianopractice.builders.arpeggios.ArpeggioConfig(
				root_note = self.root_note,
				arpeggio_type = self.arpeggio_type,
				octaves = self.arpeggio_octaves,
				**common
			)

		if self.mode is PracticeMode.CHORDS_BY_KEY:
			return pianopractice.builders.chords_by_key.ChordsByKeyConfig(
				key = self.key,
				scale_type = self.scale_type,
				include_seventh_chords = self.include_seventh_chords,
				voice_leading = self.voice_leading,
				**common
			)

		if self.mode is PracticeMode.CHORDS_BY_TYPE:
			return pianopractice.builders.chords_by_type.ChordsByTypeConfig(
				chord_type = self.chord_type,
				include_inversions = self.include_inversions,
				order = self.chord_order,
				voice_leading = self.voice_leading,
				**common
			)

		return pianopractice.builders.chord_progressions.ChordProgressionConfig(
			key = self.key,
			progression_name = self.progression_name,
			**common
		)


	def build_exercise (self) -> pianopractice.exercise.PracticeExercise:

		"""Build the exercise these settings describe."""

		return pianopractice.builders.build_exercise(self.exercise_config())


SETTING_NAMES: typing.FrozenSet[str] = frozenset(field.name for field in dataclasses.fields(PracticeSettings))

# Short names accepted in configuration files and on the command line.
SETTING_ALIASES: typing.Dict[str, str] = {
	"hand": "hand_selection",
	"octave": "start_octave",
	"progression": "progression_name",
	"scale": "scale_type",
	"arpeggio": "arpeggio_type",
	"octaves": "arpeggio_octaves",
	"chord": "chord_type",
	"root": "root_note",
	"sevenths": "include_seventh_chords",
	"inversions": "include_inversions",
	"order": "chord_order",
}

_ENUM_FIELDS: typing.Dict[str, typing.Type[enum.Enum]] = {
	"mode": PracticeMode,
	"scale_type": pianopractice.intervals.ScaleType,
	"arpeggio_type": pianopractice.intervals.ArpeggioType,
	"chord_type": pianopractice.chords.ChordType,
	"hand_selection": pianopractice.notes.HandSelection,
	"chord_order": pianopractice.builders.chords_by_type.KeyOrder,
}

_BOOL_FIELDS = {"include_inversions", "include_seventh_chords", "voice_leading", "auto_progress_keys"}


def parse_enum (enum_type: typing.Type[enum.Enum], value: typing.Any, field: str) -> typing.Any:

	"""Convert a name or value into a member of ``enum_type``.

	Raises:
		ValueError: If nothing in the enum matches.
	"""

	if isinstance(value, enum_type):
		return value

	for member in enum_type:
		if value == member.value:
			return member

	if isinstance(value, str):
		folded = value.strip().upper().replace("-", "_").replace(" ", "_")

		if folded in enum_type.__members__:
			return enum_type.__members__[folded]

		for member in enum_type:
			if isinstance(member.value, str) and member.value.upper() == folded:
				return member

	choices = ", ".join(member.name.lower() for member in enum_type)
	raise ValueError(f"Invalid {field}: {value!r}. Expected one of: {choices}")


def _parse_arpeggio_octaves (value: typing.Any) -> pianopractice.intervals.ArpeggioOctaves:

	if isinstance(value, str) and value.strip().isdigit():
		value = int(value)

	return parse_enum(pianopractice.intervals.ArpeggioOctaves, value, "arpeggio_octaves")


def _parse_bool (value: typing.Any, field: str) -> bool:

	if isinstance(value, bool):
		return value

	if isinstance(value, str) and value.strip().lower() in ("true", "yes", "on", "1"):
		return True

	if isinstance(value, str) and value.strip().lower() in ("false", "no", "off", "0"):
		return False

	raise ValueError(f"Invalid {field}: {value!r}. Expected true or false")


def _parse_octave (value: typing.Any) -> int:

	"""Accept an int, a whole float or a numeric string. Bools are rejected."""

	if isinstance(value, bool):
		raise ValueError(f"Invalid start_octave: {value!r}. Expected an integer")

	if isinstance(value, int):
		return value

	if isinstance(value, float) and value.is_integer():
		return int(value)

	if isinstance(value, str):
		try:
			return int(value.strip())
		except ValueError:
			pass

	raise ValueError(f"Invalid start_octave: {value!r}. Expected an integer")


def parse_setting (name: str, value: typing.Any) -> typing.Tuple[str, typing.Any]:

	"""Resolve an alias and convert a raw value into the type a setting needs.

	Returns:
		``(field_name, converted_value)``

	Raises:
		ValueError: For an unknown setting or an unconvertible value.
	"""

	field = SETTING_ALIASES.get(name, name)

	if field not in SETTING_NAMES:
		raise ValueError(f"Unknown practice setting: {name!r}")

	if field in _ENUM_FIELDS:
		return field, parse_enum(_ENUM_FIELDS[field], value, field)

	if field in _BOOL_FIELDS:
		return field, _parse_bool(value, field)

	if field == "key":
		return field, value if isinstance(value, pianopractice.notes.Key) else pianopractice.notes.key_from_name(str(value))

	if field == "root_note":
		return field, value if isinstance(value, pianopractice.notes.Note) else pianopractice.notes.note_from_name(str(value))

	if field == "arpeggio_octaves":
		return field, _parse_arpeggio_octaves(value)

	if field == "start_octave":
		return field, _parse_octave(value)

	# progression_name
	return field, None if value is None else str(value)


def settings_from_dict (data: typing.Optional[typing.Dict[str, typing.Any]], base: typing.Optional[PracticeSettings] = None) -> PracticeSettings:

	"""Build `PracticeSettings` from the ``practice:`` section of a config mapping.

	Settings missing from the mapping keep their value from ``base`` (or the
	defaults).
	"""

	settings = base if base is not None else PracticeSettings()
	section = (data or {}).get("practice") or {}

	if not isinstance(section, dict):
		raise ValueError(f"The practice section must be a mapping, got {type(section).__name__}")

	changes = dict(parse_setting(str(name), value) for name, value in section.items())

	return dataclasses.replace(settings, **changes)


def input_device_from_dict (data: typing.Optional[typing.Dict[str, typing.Any]]) -> typing.Optional[str]:

	"""Return ``midi.input_device`` from a config mapping, if set."""

	midi = (data or {}).get("midi") or {}

	if not isinstance(midi, dict):
		raise ValueError(f"The midi section must be a mapping, got {type(midi).__name__}")

	device = midi.get("input_device")

	return str(device) if device is not None else None


def load_config (config_path: str = "pianopractice.yaml") -> typing.Dict[str, typing.Any]:

	"""
	Load configuration from a YAML file.

	A missing or empty file gives an empty mapping.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, "r") as f:
		data = yaml.safe_load(f)

	if data is None:
		return {}

	if not isinstance(data, dict):
		raise ValueError(f"Config file {config_path} must contain a mapping at the top level")

	return data
