"""Chord inversions and voice leading.

Provides functions for rotating chord intervals into different inversions and
choosing the smoothest voicing between consecutive chords. Voice leading
minimises the total semitone movement so that a chord exercise moves the hand
as little as possible instead of jumping up the keyboard with every root.

Example:
	```python
	from pianopractice.voicings import invert_chord, VoiceLeadingState

	first_inv = invert_chord([0, 4, 7], inversion=1)  # [0, 3, 8]

	state = VoiceLeadingState()
	state.next([0, 4, 7], 60)   # [60, 64, 67]  C major, root position
	state.next([0, 4, 7], 65)   # [60, 65, 69]  F major, second inversion
	```
"""

import typing


# Octave displacements tried for each inversion.
OCTAVE_SHIFTS: typing.Tuple[int, ...] = (0, -12)


def invert_chord (intervals: typing.List[int], inversion: int) -> typing.List[int]:

	"""Rotate chord intervals to produce an inversion.

	Inversion 0 is root position. Inversion 1 raises the bottom note by an
	octave (first inversion). Wraps around for inversions >= the number of
	notes.

	Parameters:
		intervals: Chord intervals in semitones from root (e.g., ``[0, 4, 7]``)
		inversion: Which inversion to produce (0 = root position)

	Returns:
		New interval list re-zeroed so the caller can add any bass note

	Example:
		```python
		invert_chord([0, 4, 7], 0)  # [0, 4, 7]  - root position
		invert_chord([0, 4, 7], 1)  # [0, 3, 8]  - first inversion
		invert_chord([0, 4, 7], 2)  # [0, 5, 9]  - second inversion
		```
	"""

	n = len(intervals)

	if n == 0:
		return []

	inversion = inversion % n

	if inversion == 0:
		return list(intervals)

	rotated = intervals[inversion:] + [i + 12 for i in intervals[:inversion]]
	base = rotated[0]

	return [i - base for i in rotated]


def inversion_voicing (intervals: typing.List[int], root_midi: int, inversion: int) -> typing.List[int]:

	"""Return MIDI notes for an inversion voiced upwards from the chord root.

	Example:
		```python
		inversion_voicing([0, 4, 7], 60, 1)  # [64, 67, 72]
		```
	"""

	n = len(intervals)

	if n == 0:
		return []

	bass = root_midi + intervals[inversion % n]

	return [bass + i for i in invert_chord(intervals, inversion)]


def choose_voicing (intervals: typing.List[int], root_midi: int, previous_voicing: typing.Optional[typing.List[int]]) -> typing.Tuple[int, int]:

	"""Find the inversion and octave shift closest to a previous voicing.

	Tries every inversion, in place and an octave down, and picks the one
	with the smallest total semitone movement from ``previous_voicing``.
	Ties keep the earlier candidate. If ``previous_voicing`` is ``None`` or
	the chord sizes differ, returns root position with no shift.

	Returns:
		``(inversion, octave_shift)`` where ``octave_shift`` is 0 or -12
	"""

	n = len(intervals)

	# No previous voicing or size mismatch - root position.
	if n == 0 or previous_voicing is None or len(previous_voicing) != n:
		return 0, 0

	best: typing.Tuple[int, int] = (0, 0)
	best_cost = float("inf")

	for inv in range(n):
		voicing = inversion_voicing(intervals, root_midi, inv)

		for shift in OCTAVE_SHIFTS:
			cost = sum(abs(voicing[i] + shift - previous_voicing[i]) for i in range(n))

			if cost < best_cost:
				best_cost = cost
				best = (inv, shift)

	return best


def voice_lead (intervals: typing.List[int], root_midi: int, previous_voicing: typing.Optional[typing.List[int]]) -> typing.List[int]:

	"""Return the voicing of a chord closest to a previous voicing.

	Parameters:
		intervals: Chord intervals in semitones from root (e.g., ``[0, 4, 7]``)
		root_midi: MIDI note number for the chord root
		previous_voicing: MIDI note numbers of the previous chord, or ``None``

	Returns:
		MIDI note numbers for the best voicing
	"""

	inversion, shift = choose_voicing(intervals, root_midi, previous_voicing)

	return [note + shift for note in inversion_voicing(intervals, root_midi, inversion)]


class VoiceLeadingState:

	"""Track the previous voicing across chord changes.

	Each exercise build gets its own instance. After every call the chosen
	inversion and octave shift are available for labelling the step.

	Example:
		```python
		state = VoiceLeadingState()
		voicing1 = state.next([0, 4, 7], 60)   # root position (no previous)
		voicing2 = state.next([0, 3, 7], 62)   # picks closest inversion to voicing1
		state.inversion                         # → inversion used for voicing2
		```
	"""

	def __init__ (self) -> None:

		"""Start with no previous voicing."""

		self.previous_voicing: typing.Optional[typing.List[int]] = None
		self.inversion: int = 0
		self.octave_shift: int = 0

	def next (self, intervals: typing.List[int], root_midi: int) -> typing.List[int]:

		"""Choose the smoothest voicing and update state.

		Parameters:
			intervals: Chord intervals in semitones from root
			root_midi: MIDI note number for the chord root

		Returns:
			MIDI note numbers for the chosen voicing
		"""

		self.inversion, self.octave_shift = choose_voicing(intervals, root_midi, self.previous_voicing)

		result = voice_lead(intervals, root_midi, self.previous_voicing)
		self.previous_voicing = result

		return result
