"""Chord qualities, inversions and the `Chord` value type.

Module-level constants:
- `CHORD_INTERVALS`: Maps each `ChordType` to its intervals (semitones from root)
- `CHORD_SUFFIX`: Maps each `ChordType` to the suffix used in chord names (e.g. `"m"`, `"ø7"`)
- `CHORD_TYPE_NAMES`: Maps each `ChordType` to a display name (e.g. `"Half-Diminished 7th"`)
- `INVERSION_NAMES`: Maps each `ChordInversion` to its short label (e.g. `"1st inv"`)

Inverted chords are always voiced upwards from the root: the tones below the
new bass note move up an octave, so a C major first inversion built from C4
is E4 G4 C5, never E3 G3 C4.
"""

import dataclasses
import enum
import typing

import pianopractice.notes
import pianopractice.voicings


class ChordType (enum.Enum):

	"""Chord qualities: four triads and seven seventh chords."""

	MAJOR = "major"
	MINOR = "minor"
	DIMINISHED = "diminished"
	AUGMENTED = "augmented"
	MAJOR_7TH = "major_7th"
	DOMINANT_7TH = "dominant_7th"
	MINOR_7TH = "minor_7th"
	HALF_DIMINISHED_7TH = "half_diminished_7th"
	DIMINISHED_7TH = "diminished_7th"
	MINOR_MAJOR_7TH = "minor_major_7th"
	AUGMENTED_7TH = "augmented_7th"

	@property
	def is_seventh (self) -> bool:

		"""True for four-note chords."""

		return len(CHORD_INTERVALS[self]) == 4

	@property
	def display_name (self) -> str:

		return CHORD_TYPE_NAMES[self]


class ChordInversion (enum.IntEnum):

	"""Which chord tone is in the bass. The value is the rotation count."""

	ROOT = 0
	FIRST = 1
	SECOND = 2
	THIRD = 3

	@property
	def label (self) -> str:

		return INVERSION_NAMES[self]


CHORD_INTERVALS: typing.Dict[ChordType, typing.List[int]] = {
	ChordType.MAJOR: [0, 4, 7],
	ChordType.MINOR: [0, 3, 7],
	ChordType.DIMINISHED: [0, 3, 6],
	ChordType.AUGMENTED: [0, 4, 8],
	ChordType.MAJOR_7TH: [0, 4, 7, 11],
	ChordType.DOMINANT_7TH: [0, 4, 7, 10],
	ChordType.MINOR_7TH: [0, 3, 7, 10],
	ChordType.HALF_DIMINISHED_7TH: [0, 3, 6, 10],
	ChordType.DIMINISHED_7TH: [0, 3, 6, 9],
	ChordType.MINOR_MAJOR_7TH: [0, 3, 7, 11],
	ChordType.AUGMENTED_7TH: [0, 4, 8, 10],
}

CHORD_SUFFIX: typing.Dict[ChordType, str] = {
	ChordType.MAJOR: "",
	ChordType.MINOR: "m",
	ChordType.DIMINISHED: "°",
	ChordType.AUGMENTED: "+",
	ChordType.MAJOR_7TH: "maj7",
	ChordType.DOMINANT_7TH: "7",
	ChordType.MINOR_7TH: "m7",
	ChordType.HALF_DIMINISHED_7TH: "ø7",
	ChordType.DIMINISHED_7TH: "°7",
	ChordType.MINOR_MAJOR_7TH: "m(maj7)",
	ChordType.AUGMENTED_7TH: "aug7",
}

CHORD_TYPE_NAMES: typing.Dict[ChordType, str] = {
	ChordType.MAJOR: "Major",
	ChordType.MINOR: "Minor",
	ChordType.DIMINISHED: "Diminished",
	ChordType.AUGMENTED: "Augmented",
	ChordType.MAJOR_7TH: "Major 7th",
	ChordType.DOMINANT_7TH: "Dominant 7th",
	ChordType.MINOR_7TH: "Minor 7th",
	ChordType.HALF_DIMINISHED_7TH: "Half-Diminished 7th",
	ChordType.DIMINISHED_7TH: "Diminished 7th",
	ChordType.MINOR_MAJOR_7TH: "Minor-Major 7th",
	ChordType.AUGMENTED_7TH: "Augmented 7th",
}

INVERSION_NAMES: typing.Dict[ChordInversion, str] = {
	ChordInversion.ROOT: "",
	ChordInversion.FIRST: "1st inv",
	ChordInversion.SECOND: "2nd inv",
	ChordInversion.THIRD: "3rd inv",
}


def chord_intervals (chord_type: ChordType, inversion: ChordInversion = ChordInversion.ROOT) -> typing.List[int]:

	"""Return the ascending intervals of an inverted chord, relative to its root.

	Unlike `pianopractice.voicings.invert_chord`, the result is not re-zeroed
	at the bass: the offsets still count from the chord root, so adding the
	root's MIDI number gives the voiced chord directly.

	Raises:
		ValueError: If the inversion needs more tones than the chord has
			(a third inversion of a triad).

	Example:
		```python
		chord_intervals(ChordType.MAJOR)                         # → [0, 4, 7]
		chord_intervals(ChordType.MAJOR, ChordInversion.FIRST)   # → [4, 7, 12]
		chord_intervals(ChordType.MAJOR, ChordInversion.SECOND)  # → [7, 12, 16]
		```
	"""

	base = CHORD_INTERVALS[chord_type]
	inversion = ChordInversion(inversion)

	if inversion >= len(base):
		raise ValueError(f"{CHORD_TYPE_NAMES[chord_type]} has no {INVERSION_NAMES[inversion]}")

	bass = base[inversion]

	return [bass + i for i in pianopractice.voicings.invert_chord(base, int(inversion))]


def hand_voicing (right: typing.List[int], hand: pianopractice.notes.HandSelection) -> typing.List[int]:

	"""Spread a right-hand voicing across the selected hand(s).

	Example:
		```python
		hand_voicing([60, 64, 67], HandSelection.LEFT)  # → [48, 52, 55]
		hand_voicing([60, 64, 67], HandSelection.BOTH)  # → [48, 52, 55, 60, 64, 67]
		```
	"""

	left = [note - 12 for note in right]

	if hand is pianopractice.notes.HandSelection.RIGHT:
		return list(right)

	if hand is pianopractice.notes.HandSelection.LEFT:
		return left

	return left + list(right)


@dataclasses.dataclass(frozen=True)
class Chord:

	"""
	Represents a chord as a root, a quality and an inversion.
	"""

	root: pianopractice.notes.Note
	chord_type: ChordType
	inversion: ChordInversion = ChordInversion.ROOT

	def __post_init__ (self) -> None:

		"""Reject inversions the chord cannot take."""

		if not isinstance(self.chord_type, ChordType):
			raise ValueError(f"chord_type must be a ChordType, got {self.chord_type!r}")

		if int(self.inversion) >= len(CHORD_INTERVALS[self.chord_type]):
			raise ValueError(f"{CHORD_TYPE_NAMES[self.chord_type]} has no {INVERSION_NAMES[ChordInversion(self.inversion)]}")


	def intervals (self) -> typing.List[int]:

		"""
		Return the voiced intervals for this chord, relative to its root.
		"""

		return chord_intervals(self.chord_type, self.inversion)


	def tones (self, octave: int) -> typing.List[int]:

		"""Return MIDI note numbers for the chord built up from the root in ``octave``.

		Example:
			```python
			Chord(Note.C, ChordType.MAJOR).tones(4)                        # → [60, 64, 67]
			Chord(Note.C, ChordType.MAJOR, ChordInversion.FIRST).tones(4)  # → [64, 67, 72]
			Chord(Note.C, ChordType.MAJOR).tones(3)                        # → [48, 52, 55]
			```
		"""

		root_midi = pianopractice.notes.note_to_midi(self.root, octave)

		return [root_midi + interval for interval in self.intervals()]


	def tones_for_hand (self, octave: int, hand: pianopractice.notes.HandSelection) -> typing.List[int]:

		"""Return the chord tones for a hand selection.

		The right hand plays the chord in ``octave``, the left hand an octave
		lower. Both hands play the left-hand chord followed by the right-hand
		chord as one step.
		"""

		return hand_voicing(self.tones(octave), hand)


	def inversions (self) -> typing.List["Chord"]:

		"""Return this chord in every inversion its size allows, root position first."""

		count = len(CHORD_INTERVALS[self.chord_type])

		return [dataclasses.replace(self, inversion=ChordInversion(i)) for i in range(count)]


	def name (self) -> str:

		"""
		Return a human-friendly chord name such as ``"Dm (1st inv)"``.
		"""

		root_name = pianopractice.notes.Note(self.root).display_name
		suffix = CHORD_SUFFIX[self.chord_type]
		inversion_name = INVERSION_NAMES[ChordInversion(self.inversion)]

		if not inversion_name:
			return f"{root_name}{suffix}"

		return f"{root_name}{suffix} ({inversion_name})"


def identify_chord (notes: typing.Sequence[int]) -> typing.Optional[Chord]:

	"""Name a set of MIDI notes as a `Chord`, or return ``None`` if no quality matches.

	The lowest note decides the inversion.

	Example:
		```python
		identify_chord([67, 71, 74])  # → Chord(Note.G, ChordType.MAJOR)
		identify_chord([64, 67, 72])  # → Chord(Note.C, ChordType.MAJOR, ChordInversion.FIRST)
		```
	"""

	if not notes:
		return None

	pcs = {note % 12 for note in notes}
	bass_pc = min(notes) % 12

	for root_pc in sorted(pcs, key=lambda pc: (pc - bass_pc) % 12):
		for chord_type, intervals in CHORD_INTERVALS.items():
			chord_pcs = [(root_pc + i) % 12 for i in intervals]

			if set(chord_pcs) == pcs and len(chord_pcs) == len(pcs):
				inversion = ChordInversion(chord_pcs.index(bass_pc))
				return Chord(pianopractice.notes.Note(root_pc), chord_type, inversion)

	return None
