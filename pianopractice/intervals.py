import enum
import logging
import typing

import pianopractice.chords
import pianopractice.constants
import pianopractice.notes


logger = logging.getLogger(__name__)


class ScaleType (enum.Enum):

	"""The scale modes available for scale and chords-by-key practice."""

	MAJOR = "major"
	MINOR = "minor"
	DORIAN = "dorian"
	PHRYGIAN = "phrygian"
	LYDIAN = "lydian"
	MIXOLYDIAN = "mixolydian"
	AEOLIAN = "aeolian"
	LOCRIAN = "locrian"


# Semitone offsets from the tonic. The octave (12) is added by the builders.
SCALE_INTERVALS: typing.Dict[ScaleType, typing.List[int]] = {
	ScaleType.MAJOR:      [0, 2, 4, 5, 7, 9, 11],
	ScaleType.MINOR:      [0, 2, 3, 5, 7, 8, 10],
	ScaleType.DORIAN:     [0, 2, 3, 5, 7, 9, 10],
	ScaleType.PHRYGIAN:   [0, 1, 3, 5, 7, 8, 10],
	ScaleType.LYDIAN:     [0, 2, 4, 6, 7, 9, 11],
	ScaleType.MIXOLYDIAN: [0, 2, 4, 5, 7, 9, 10],
	ScaleType.AEOLIAN:    [0, 2, 3, 5, 7, 8, 10],
	ScaleType.LOCRIAN:    [0, 1, 3, 5, 6, 8, 10],
}

SCALE_NAMES: typing.Dict[ScaleType, str] = {
	ScaleType.MAJOR: "Major (Ionian)",
	ScaleType.MINOR: "Natural Minor",
	ScaleType.DORIAN: "Dorian",
	ScaleType.PHRYGIAN: "Phrygian",
	ScaleType.LYDIAN: "Lydian",
	ScaleType.MIXOLYDIAN: "Mixolydian",
	ScaleType.AEOLIAN: "Aeolian",
	ScaleType.LOCRIAN: "Locrian",
}


class ArpeggioType (enum.Enum):

	"""Chord qualities available for arpeggio practice."""

	MAJOR = "major"
	MINOR = "minor"
	DIMINISHED = "diminished"
	AUGMENTED = "augmented"
	DOMINANT_7TH = "dominant_7th"
	MINOR_7TH = "minor_7th"
	MAJOR_7TH = "major_7th"


class ArpeggioOctaves (enum.Enum):

	"""How many octaves an arpeggio spans."""

	ONE = 1
	TWO = 2


# Root up to and including the octave.
ARPEGGIO_INTERVALS: typing.Dict[ArpeggioType, typing.List[int]] = {
	ArpeggioType.MAJOR: [0, 4, 7, 12],
	ArpeggioType.MINOR: [0, 3, 7, 12],
	ArpeggioType.DIMINISHED: [0, 3, 6, 12],
	ArpeggioType.AUGMENTED: [0, 4, 8, 12],
	ArpeggioType.DOMINANT_7TH: [0, 4, 7, 10, 12],
	ArpeggioType.MINOR_7TH: [0, 3, 7, 10, 12],
	ArpeggioType.MAJOR_7TH: [0, 4, 7, 11, 12],
}

ARPEGGIO_NAMES: typing.Dict[ArpeggioType, str] = {
	ArpeggioType.MAJOR: "Major",
	ArpeggioType.MINOR: "Minor",
	ArpeggioType.DIMINISHED: "Diminished",
	ArpeggioType.AUGMENTED: "Augmented",
	ArpeggioType.DOMINANT_7TH: "Dominant 7th",
	ArpeggioType.MINOR_7TH: "Minor 7th",
	ArpeggioType.MAJOR_7TH: "Major 7th",
}


ROMAN_NUMERALS: typing.List[str] = ["I", "II", "III", "IV", "V", "VI", "VII"]

_UPPER_CASE_TYPES = {
	pianopractice.chords.ChordType.MAJOR,
	pianopractice.chords.ChordType.AUGMENTED,
	pianopractice.chords.ChordType.MAJOR_7TH,
	pianopractice.chords.ChordType.DOMINANT_7TH,
	pianopractice.chords.ChordType.AUGMENTED_7TH,
}

ROMAN_SUFFIX: typing.Dict[pianopractice.chords.ChordType, str] = {
	pianopractice.chords.ChordType.MAJOR: "",
	pianopractice.chords.ChordType.MINOR: "",
	pianopractice.chords.ChordType.DIMINISHED: "°",
	pianopractice.chords.ChordType.AUGMENTED: "+",
	pianopractice.chords.ChordType.MAJOR_7TH: "maj7",
	pianopractice.chords.ChordType.DOMINANT_7TH: "7",
	pianopractice.chords.ChordType.MINOR_7TH: "7",
	pianopractice.chords.ChordType.HALF_DIMINISHED_7TH: "ø7",
	pianopractice.chords.ChordType.DIMINISHED_7TH: "°7",
	pianopractice.chords.ChordType.MINOR_MAJOR_7TH: "(maj7)",
	pianopractice.chords.ChordType.AUGMENTED_7TH: "+7",
}


def scale_intervals (scale_type: ScaleType) -> typing.List[int]:

	"""Return the 7 semitone offsets of a scale type (a fresh list)."""

	if scale_type not in SCALE_INTERVALS:
		raise ValueError(f"Unknown scale type: {scale_type}")

	return list(SCALE_INTERVALS[scale_type])


def arpeggio_intervals (arpeggio_type: ArpeggioType) -> typing.List[int]:

	"""Return the arpeggio offsets from root to octave (a fresh list)."""

	if arpeggio_type not in ARPEGGIO_INTERVALS:
		raise ValueError(f"Unknown arpeggio type: {arpeggio_type}")

	return list(ARPEGGIO_INTERVALS[arpeggio_type])


def scale_pitch_classes (key: pianopractice.notes.Key, scale_type: ScaleType) -> typing.List[int]:

	"""
	Return the pitch classes (0–11) of a scale, in degree order.

	Example:
		```python
		scale_pitch_classes(Key.A, ScaleType.MINOR)  # → [9, 11, 0, 2, 4, 5, 7]
		```
	"""

	return [(int(key) + i) % 12 for i in scale_intervals(scale_type)]


def scale_notes (key: pianopractice.notes.Key, scale_type: ScaleType) -> typing.List[pianopractice.notes.Note]:

	"""Return the 7 scale degrees as `Note` values."""

	return [pianopractice.notes.Note(pc) for pc in scale_pitch_classes(key, scale_type)]


def scale_name (key: pianopractice.notes.Key, scale_type: ScaleType) -> str:

	"""Human-readable scale name, e.g. ``"E♭ Natural Minor"``."""

	return f"{key.display_name} {SCALE_NAMES[scale_type]}"


def _stacked_thirds (pcs: typing.List[int], degree: int, count: int) -> typing.List[int]:

	"""Return the ``count - 1`` interval sizes between thirds stacked on a degree."""

	n = len(pcs)
	tones = [pcs[(degree + 2 * i) % n] for i in range(count)]

	return [(upper - lower) % 12 for lower, upper in zip(tones, tones[1:])]


def diatonic_triad_types (key: pianopractice.notes.Key, scale_type: ScaleType) -> typing.List[pianopractice.chords.ChordType]:

	"""
	Return the triad quality on each of the 7 degrees of a scale.

	Each triad is built by stacking two thirds inside the scale and
	classifying the pair of interval sizes.

	Example:
		```python
		diatonic_triad_types(Key.C, ScaleType.MAJOR)
		# → [MAJOR, MINOR, MINOR, MAJOR, MAJOR, MINOR, DIMINISHED]
		```
	"""

	minor_third = pianopractice.constants.MINOR_THIRD
	major_third = pianopractice.constants.MAJOR_THIRD

	qualities = {
		(major_third, minor_third): pianopractice.chords.ChordType.MAJOR,
		(minor_third, major_third): pianopractice.chords.ChordType.MINOR,
		(minor_third, minor_third): pianopractice.chords.ChordType.DIMINISHED,
		(major_third, major_third): pianopractice.chords.ChordType.AUGMENTED,
	}

	pcs = scale_pitch_classes(key, scale_type)
	result: typing.List[pianopractice.chords.ChordType] = []

	for degree in range(len(pcs)):
		first, second = _stacked_thirds(pcs, degree, 3)
		quality = qualities.get((first, second))

		if quality is None:
			logger.debug(f"Unexpected triad intervals {first}/{second} on degree {degree} of {scale_name(key, scale_type)}")
			quality = pianopractice.chords.ChordType.MAJOR

		result.append(quality)

	return result


def diatonic_seventh_types (key: pianopractice.notes.Key, scale_type: ScaleType) -> typing.List[pianopractice.chords.ChordType]:

	"""
	Return the seventh-chord quality on each of the 7 degrees of a scale.

	The triad quality picks the family; the size of the third stacked on
	top of the fifth then decides the seventh (major third above the fifth
	gives a major seventh).

	Example:
		```python
		diatonic_seventh_types(Key.C, ScaleType.MAJOR)
		# → [MAJOR_7TH, MINOR_7TH, MINOR_7TH, MAJOR_7TH, DOMINANT_7TH, MINOR_7TH, HALF_DIMINISHED_7TH]
		```
	"""

	chord_type = pianopractice.chords.ChordType
	minor_third = pianopractice.constants.MINOR_THIRD
	major_third = pianopractice.constants.MAJOR_THIRD

	pcs = scale_pitch_classes(key, scale_type)
	result: typing.List[pianopractice.chords.ChordType] = []

	for degree in range(len(pcs)):
		first, second, third = _stacked_thirds(pcs, degree, 4)
		major_seventh = third == major_third

		if (first, second) == (major_third, minor_third):
			quality = chord_type.MAJOR_7TH if major_seventh else chord_type.DOMINANT_7TH

		elif (first, second) == (minor_third, major_third):
			quality = chord_type.MINOR_MAJOR_7TH if major_seventh else chord_type.MINOR_7TH

		elif (first, second) == (minor_third, minor_third):
			quality = chord_type.HALF_DIMINISHED_7TH if major_seventh else chord_type.DIMINISHED_7TH

		elif (first, second) == (major_third, major_third):
			quality = chord_type.AUGMENTED_7TH

		else:
			logger.debug(f"Unexpected seventh intervals {first}/{second}/{third} on degree {degree} of {scale_name(key, scale_type)}")
			quality = chord_type.DOMINANT_7TH

		result.append(quality)

	return result


def roman_numeral (degree: int, chord_type: pianopractice.chords.ChordType) -> str:

	"""
	Return the roman numeral for a chord on a 0-based scale degree.

	Major-family chords are upper case, minor and diminished ones lower case.

	Example:
		```python
		roman_numeral(0, ChordType.MAJOR)                 # → "I"
		roman_numeral(6, ChordType.DIMINISHED)            # → "vii°"
		roman_numeral(4, ChordType.DOMINANT_7TH)          # → "V7"
		roman_numeral(6, ChordType.HALF_DIMINISHED_7TH)   # → "viiø7"
		```
	"""

	numeral = ROMAN_NUMERALS[degree % len(ROMAN_NUMERALS)]

	if chord_type not in _UPPER_CASE_TYPES:
		numeral = numeral.lower()

	return numeral + ROMAN_SUFFIX[chord_type]
