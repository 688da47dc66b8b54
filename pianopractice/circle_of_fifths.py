"""Circle-of-fifths navigation over the 12 keys.

Each step moves up a perfect fifth (7 semitones), so walking ``next_key``
twelve times from any key returns to it. Lookups never raise: a value that
is not in the table falls back to the first entry for ``next_key`` and the
last entry for ``previous_key``.
"""

import typing

import pianopractice.notes


Key = pianopractice.notes.Key

CIRCLE_OF_FIFTHS: typing.Tuple[pianopractice.notes.Key, ...] = (
	Key.C,
	Key.G,
	Key.D,
	Key.A,
	Key.E,
	Key.B,
	Key.F_SHARP,
	Key.C_SHARP,
	Key.G_SHARP,
	Key.D_SHARP,
	Key.A_SHARP,
	Key.F,
)


def _position (key: typing.Any) -> typing.Optional[int]:

	"""Index of ``key`` in the circle, or ``None`` if it is not a key."""

	if not isinstance(key, pianopractice.notes.Key):
		return None

	return CIRCLE_OF_FIFTHS.index(key)


def next_key (key: pianopractice.notes.Key) -> pianopractice.notes.Key:

	"""Return the key a fifth above.

	Example:
		```python
		next_key(Key.C)  # → Key.G
		next_key(Key.F)  # → Key.C
		```
	"""

	position = _position(key)

	if position is None:
		return CIRCLE_OF_FIFTHS[0]

	return CIRCLE_OF_FIFTHS[(position + 1) % len(CIRCLE_OF_FIFTHS)]


def previous_key (key: pianopractice.notes.Key) -> pianopractice.notes.Key:

	"""Return the key a fifth below (a fourth above).

	Example:
		```python
		previous_key(Key.C)  # → Key.F
		previous_key(Key.G)  # → Key.C
		```
	"""

	position = _position(key)

	if position is None:
		return CIRCLE_OF_FIFTHS[-1]

	return CIRCLE_OF_FIFTHS[(position - 1) % len(CIRCLE_OF_FIFTHS)]


def fifths_from (key: pianopractice.notes.Key, count: int = 12) -> typing.Iterator[pianopractice.notes.Key]:

	"""Yield ``count`` keys around the circle, starting with ``key`` itself."""

	current = key

	for _ in range(count):
		yield current
		current = next_key(current)


def key_distance (start: pianopractice.notes.Key, end: pianopractice.notes.Key) -> int:

	"""Number of ``next_key`` steps from ``start`` to ``end`` (0–11)."""

	return (CIRCLE_OF_FIFTHS.index(end) - CIRCLE_OF_FIFTHS.index(start)) % len(CIRCLE_OF_FIFTHS)
