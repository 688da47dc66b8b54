"""Named chord progressions written as interval lists from the tonic.

Each chord in a progression is a list of semitone offsets from the key's
tonic rather than a scale degree, so chromatic chords such as the borrowed
♭VII (``[10, 14, 17]``) sit alongside diatonic ones.

Example:
	```python
	progression = get_progression("I - V")
	progression.chord_notes(Key.C, octave=4)  # → [[60, 64, 67], [67, 71, 74]]
	```
"""

import dataclasses
import enum
import re
import typing

import pianopractice.notes


class ProgressionDifficulty (enum.Enum):

	"""How demanding a progression is to play."""

	BEGINNER = "beginner"
	INTERMEDIATE = "intermediate"
	ADVANCED = "advanced"

	@property
	def display_name (self) -> str:

		return self.value.capitalize()


@dataclasses.dataclass(frozen=True)
class ChordProgression:

	"""
	A named progression: one roman numeral and one interval list per chord.
	"""

	name: str
	roman_numerals: typing.Tuple[str, ...]
	chords: typing.Tuple[typing.Tuple[int, ...], ...]
	difficulty: ProgressionDifficulty
	description: str = ""

	def __post_init__ (self) -> None:

		"""Every chord needs a numeral and at least one tone."""

		if len(self.roman_numerals) != len(self.chords):
			raise ValueError(f"Progression {self.name!r} has {len(self.roman_numerals)} numerals for {len(self.chords)} chords")

		if any(not chord for chord in self.chords):
			raise ValueError(f"Progression {self.name!r} contains an empty chord")


	def chord_notes (self, key: pianopractice.notes.Key, octave: int = 4) -> typing.List[typing.List[int]]:

		"""Return the MIDI notes of every chord, built on the tonic in ``octave``."""

		tonic = pianopractice.notes.note_to_midi(key, octave)

		return [[tonic + offset for offset in chord] for chord in self.chords]


	def __len__ (self) -> int:

		return len(self.chords)


PROGRESSIONS: typing.List[ChordProgression] = [

	ChordProgression(
		name = "I - V",
		roman_numerals = ("I", "V"),
		chords = ((0, 4, 7), (7, 11, 14)),
		difficulty = ProgressionDifficulty.BEGINNER,
		description = "Tonic to dominant. The most basic move from home to tension.",
	),

	ChordProgression(
		name = "I - vi",
		roman_numerals = ("I", "vi"),
		chords = ((0, 4, 7), (9, 12, 16)),
		difficulty = ProgressionDifficulty.BEGINNER,
		description = "Tonic to relative minor. A gentle step with two common tones.",
	),

	ChordProgression(
		name = "vi - IV",
		roman_numerals = ("vi", "IV"),
		chords = ((9, 12, 16), (5, 9, 12)),
		difficulty = ProgressionDifficulty.BEGINNER,
		description = "Relative minor to subdominant, a lift from minor to major.",
	),

	ChordProgression(
		name = "I - V - vi - IV",
		roman_numerals = ("I", "V", "vi", "IV"),
		chords = ((0, 4, 7), (7, 11, 14), (9, 12, 16), (5, 9, 12)),
		difficulty = ProgressionDifficulty.INTERMEDIATE,
		description = "The four-chord pop progression.",
	),

	ChordProgression(
		name = "vi - IV - I - V",
		roman_numerals = ("vi", "IV", "I", "V"),
		chords = ((9, 12, 16), (5, 9, 12), (0, 4, 7), (7, 11, 14)),
		difficulty = ProgressionDifficulty.INTERMEDIATE,
		description = "The pop progression started on the relative minor.",
	),

	ChordProgression(
		name = "I - vi - IV - V",
		roman_numerals = ("I", "vi", "IV", "V"),
		chords = ((0, 4, 7), (9, 12, 16), (5, 9, 12), (7, 11, 14)),
		difficulty = ProgressionDifficulty.INTERMEDIATE,
		description = "The fifties progression, ending on the dominant so it loops back home.",
	),

	ChordProgression(
		name = "ii - V - I",
		roman_numerals = ("ii", "V", "I"),
		chords = ((2, 5, 9), (7, 11, 14), (0, 4, 7)),
		difficulty = ProgressionDifficulty.ADVANCED,
		description = "Supertonic, dominant, tonic. The cadence at the heart of jazz harmony.",
	),

	ChordProgression(
		name = "I - ♭VII - IV",
		roman_numerals = ("I", "♭VII", "IV"),
		chords = ((0, 4, 7), (10, 14, 17), (5, 9, 12)),
		difficulty = ProgressionDifficulty.ADVANCED,
		description = "Rock progression with the borrowed flat seven chord.",
	),
]


def _normalise_progression_name (name: str) -> str:

	"""Fold flat spellings and dash spacing so ``"I-bVII-IV"`` matches ``"I - ♭VII - IV"``."""

	folded = name.strip().replace("♭", "b")

	return " - ".join(part.strip() for part in re.split(r"\s*-\s*", folded))


_PROGRESSIONS_BY_NAME: typing.Dict[str, ChordProgression] = {
	_normalise_progression_name(progression.name): progression for progression in PROGRESSIONS
}


def get_progression (name: typing.Optional[str]) -> typing.Optional[ChordProgression]:

	"""Look up a progression by name, returning ``None`` when it is unknown.

	Example:
		```python
		get_progression("I - V").roman_numerals   # → ("I", "V")
		get_progression("I-bVII-IV").name         # → "I - ♭VII - IV"
		get_progression("I - IV - V - I")         # → None
		```
	"""

	if name is None:
		return None

	return _PROGRESSIONS_BY_NAME.get(_normalise_progression_name(name))


def progression_names () -> typing.List[str]:

	"""Names of every progression in library order."""

	return [progression.name for progression in PROGRESSIONS]


def progressions_for_difficulty (difficulty: ProgressionDifficulty) -> typing.List[ChordProgression]:

	"""Return the progressions at one difficulty level, in library order."""

	return [progression for progression in PROGRESSIONS if progression.difficulty is difficulty]
