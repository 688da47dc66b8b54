"""Connect a MIDI keyboard to a `PracticeTracker`.

mido delivers input messages on its own callback thread. The session never
touches the tracker from that thread: the callback hands each message to the
event loop with ``call_soon_threadsafe`` and the `run()` coroutine feeds them
to the tracker one at a time.

Example:
	```python
	tracker = PracticeTracker(PracticeSettings(mode=PracticeMode.CHORDS_BY_KEY))
	session = PracticeSession(tracker, input_device_name="Digital Piano")

	await session.start()

	try:
		await session.run()
	finally:
		await session.stop()
	```
"""

import asyncio
import logging
import typing

import pianopractice.midi_utils
import pianopractice.tracker


logger = logging.getLogger(__name__)


class PracticeSession:

	"""
	Single-consumer bridge from a MIDI input port to a tracker.

	Parameters:
		tracker: The tracker that receives note events.
		input_device_name: MIDI input to open. ``None`` picks the only
			available input, if there is exactly one.
		loop_exercises: Start the tracker again whenever it stops being
			active (after completion, or after auto-progression rebuilds
			the exercise in a new key).
	"""

	def __init__ (self, tracker: pianopractice.tracker.PracticeTracker, input_device_name: typing.Optional[str] = None, loop_exercises: bool = True) -> None:

		self.tracker = tracker
		self.input_device_name = input_device_name
		self.loop_exercises = loop_exercises

		self.midi_in: typing.Any = None
		self.running = False
		self.messages_handled = 0

		self._queue: typing.Optional[asyncio.Queue] = None
		self._loop: typing.Optional[asyncio.AbstractEventLoop] = None


	async def start (self) -> None:

		"""Open the MIDI input port and start the tracker.

		Raises:
			ConnectionError: If no MIDI input could be opened.
		"""

		if self.running:
			return

		# The queue and loop must exist before the port can call back.
		self._loop = asyncio.get_running_loop()
		self._queue = asyncio.Queue()

		device_name, midi_in = pianopractice.midi_utils.select_input_device(self.input_device_name, self._on_midi_input)

		if midi_in is None:
			self._queue = None
			self._loop = None
			raise ConnectionError(f"Could not open MIDI input {self.input_device_name!r}")

		self.input_device_name = device_name
		self.midi_in = midi_in
		self.running = True

		logger.info(f"Practice session listening on {device_name}")

		self.tracker.start()


	def _on_midi_input (self, message: typing.Any) -> None:

		"""Forward a message from mido's callback thread to the event loop."""

		if self._queue is None or self._loop is None:
			return

		self._loop.call_soon_threadsafe(self._queue.put_nowait, message)


	def feed (self, message: typing.Any) -> None:

		"""Queue a message from the event loop thread, as if it came from the port."""

		if self._queue is None:
			raise RuntimeError("PracticeSession.feed() called before start()")

		self._queue.put_nowait(message)


	async def run (self) -> None:

		"""Consume queued messages until `stop()` is called.

		Messages queued before the stop are still delivered.
		"""

		if self._queue is None:
			return

		while True:

			message = await self._queue.get()

			# stop() wakes the loop with None.
			if message is None:
				break

			self.handle_message(message)


	def handle_message (self, message: typing.Any) -> None:

		"""Apply one MIDI message to the tracker."""

		self.messages_handled += 1

		if message.type == "note_on" and message.velocity > 0:
			self.tracker.on_note_on(message.note)

		elif message.type == "note_off" or message.type == "note_on":
			# note_on with velocity 0 is a release.
			self.tracker.on_note_off(message.note)

		else:
			logger.debug(f"Ignoring MIDI message: {message}")
			return

		if self.loop_exercises and self.tracker.state is not pianopractice.tracker.TrackerState.ACTIVE and not self.tracker.exercise.is_empty:
			self.tracker.start()


	async def stop (self) -> None:

		"""
		Stop consuming messages and close the port.
		"""

		if not self.running and self.midi_in is None:
			return

		self.running = False

		if self._queue is not None:
			self._queue.put_nowait(None)

		if self.midi_in is not None:
			self.midi_in.close()
			self.midi_in = None

		self._loop = None

		logger.info(f"Practice session stopped after {self.messages_handled} messages")
