"""Walks a player through an exercise, one step at a time.

`PracticeTracker` owns the current settings and the exercise built from
them. It receives note-on/note-off events, decides when the current step is
satisfied, and publishes what to highlight next through an `EventEmitter`:

- ``highlighted_notes_changed(notes)``: a frozenset of MIDI notes to light up
- ``step_completed(index, step)``: a step was played correctly
- ``exercise_completed(exercise)``: the last step was played
- ``key_changed(key)``: auto-progression moved to the next key

How a step is judged depends on its `StepType`:

- ``SEQUENTIAL``: the expected note is played
- ``PAIRED``: both expected notes are held at once; other notes are ignored
- ``SIMULTANEOUS``: the set of held notes equals the chord exactly, so a wrong
  note must be released before the chord counts

The tracker is not thread-safe. Deliver note events from one thread (the
MIDI session does this by funnelling them through an asyncio queue).
"""

import dataclasses
import enum
import logging
import typing

import pianopractice.circle_of_fifths
import pianopractice.config
import pianopractice.event_emitter
import pianopractice.exercise
import pianopractice.notes


logger = logging.getLogger(__name__)


EVENTS: typing.Tuple[str, ...] = (
	"highlighted_notes_changed",
	"step_completed",
	"exercise_completed",
	"key_changed",
)


class TrackerState (enum.Enum):

	"""Where the tracker is in the exercise lifecycle."""

	IDLE = "idle"
	ACTIVE = "active"
	COMPLETED = "completed"


class PracticeTracker:

	"""
	Stateful progress through a practice exercise.

	Example:
		```python
		tracker = PracticeTracker(PracticeSettings(auto_progress_keys=True))
		tracker.events.on("key_changed", lambda key: print(key.display_name))
		tracker.start()

		for step in tracker.exercise:
			for note in step.notes:
				tracker.on_note_on(note)
			for note in step.notes:
				tracker.on_note_off(note)

		# prints "G"; the tracker is IDLE again with a G major exercise
		```
	"""

	def __init__ (self, settings: typing.Optional[pianopractice.config.PracticeSettings] = None) -> None:

		"""Build the initial exercise. Raises `ExerciseConfigError` for unusable settings."""

		self.events = pianopractice.event_emitter.EventEmitter(EVENTS)

		self._settings = settings if settings is not None else pianopractice.config.PracticeSettings()
		self._exercise = self._settings.build_exercise()
		self._state = TrackerState.IDLE
		self._step_index = 0
		self._held: typing.Set[int] = set()


	# Read surface.

	@property
	def state (self) -> TrackerState:
		return self._state

	@property
	def settings (self) -> pianopractice.config.PracticeSettings:
		return self._settings

	@property
	def exercise (self) -> pianopractice.exercise.PracticeExercise:
		return self._exercise

	@property
	def current_step_index (self) -> int:
		return self._step_index

	@property
	def key (self) -> pianopractice.notes.Key:
		return self._settings.key

	@property
	def auto_progress_keys (self) -> bool:
		return self._settings.auto_progress_keys

	@property
	def current_step (self) -> typing.Optional[pianopractice.exercise.PracticeStep]:

		"""The step being played, or ``None`` when nothing is in progress."""

		if self._state is not TrackerState.ACTIVE or self._step_index >= len(self._exercise):
			return None

		return self._exercise.steps[self._step_index]

	@property
	def highlighted_notes (self) -> typing.FrozenSet[int]:

		"""Notes of the current step, empty unless the tracker is active."""

		step = self.current_step

		return step.expected_notes if step is not None else frozenset()

	@property
	def progress (self) -> float:

		"""Fraction of the exercise completed, from 0.0 to 1.0."""

		if self._state is TrackerState.COMPLETED:
			return 1.0

		if self._exercise.is_empty:
			return 0.0

		return self._step_index / len(self._exercise)


	# Configuration.

	def set_configuration (self, **changes: typing.Any) -> None:

		"""
		Change settings, rebuild the exercise and return to IDLE at step 0.

		Accepts `PracticeSettings` field names (and the short aliases used in
		config files). Values may be enum members or their names.

		Raises:
			ExerciseConfigError: If a setting is unknown or the new settings
				cannot produce an exercise. The tracker is left unchanged.
		"""

		converted: typing.Dict[str, typing.Any] = {}

		for name, value in changes.items():
			try:
				field, parsed = pianopractice.config.parse_setting(name, value)
			except ValueError as exc:
				raise pianopractice.exercise.ExerciseConfigError(pianopractice.config.SETTING_ALIASES.get(name, name), str(exc)) from exc

			converted[field] = parsed

		settings = dataclasses.replace(self._settings, **converted)
		exercise = settings.build_exercise()

		self._apply(settings, exercise)

		logger.debug(f"Configuration changed: {exercise.title!r}, {len(exercise)} steps")


	def set_auto_key_progression (self, enabled: bool) -> None:

		"""Turn key auto-progression on or off without touching progress."""

		self._settings = dataclasses.replace(self._settings, auto_progress_keys=bool(enabled))


	def _apply (self, settings: pianopractice.config.PracticeSettings, exercise: pianopractice.exercise.PracticeExercise) -> None:

		self._settings = settings
		self._exercise = exercise
		self._state = TrackerState.IDLE
		self._step_index = 0
		self._held.clear()

		self.events.emit_sync("highlighted_notes_changed", frozenset())


	# Lifecycle.

	def start (self) -> None:

		"""
		Begin the exercise from step 0 and highlight the first step.

		Starting an empty exercise logs a warning and leaves the tracker IDLE.
		"""

		self._step_index = 0
		self._held.clear()

		if self._exercise.is_empty:
			logger.warning(f"Cannot start empty exercise {self._exercise.title!r}")
			self._state = TrackerState.IDLE
			self.events.emit_sync("highlighted_notes_changed", frozenset())
			return

		self._state = TrackerState.ACTIVE
		logger.info(f"Started {self._exercise.title!r} ({len(self._exercise)} steps)")

		self.events.emit_sync("highlighted_notes_changed", self.highlighted_notes)


	def reset (self) -> None:

		"""Return to IDLE at step 0, keeping the current configuration."""

		self._state = TrackerState.IDLE
		self._step_index = 0
		self._held.clear()

		self.events.emit_sync("highlighted_notes_changed", frozenset())


	# Note input.

	def on_note_on (self, midi_note: int) -> None:

		"""Handle a key press. Ignored unless the tracker is active."""

		step = self.current_step

		if step is None:
			return

		if step.step_type is pianopractice.exercise.StepType.SEQUENTIAL:
			if midi_note in step.expected_notes:
				self._advance()
			return

		if step.step_type is pianopractice.exercise.StepType.PAIRED:
			if midi_note in step.expected_notes:
				self._held.add(midi_note)

		else:
			# Wrong notes count too, so a chord only completes once they are released.
			self._held.add(midi_note)

		if self._held == step.expected_notes:
			self._advance()


	def on_note_off (self, midi_note: int) -> None:

		"""Handle a key release."""

		self._held.discard(midi_note)


	def _advance (self) -> None:

		step = self._exercise.steps[self._step_index]
		index = self._step_index

		self._held.clear()
		self._step_index += 1

		self.events.emit_sync("step_completed", index, step)

		if self._step_index >= len(self._exercise):
			self._complete()
			return

		self.events.emit_sync("highlighted_notes_changed", self.highlighted_notes)


	def _complete (self) -> None:

		finished = self._exercise

		self._state = TrackerState.COMPLETED
		self._step_index = 0

		logger.info(f"Completed {finished.title!r}")

		self.events.emit_sync("highlighted_notes_changed", frozenset())
		self.events.emit_sync("exercise_completed", finished)

		if self._settings.auto_progress_keys:
			self._progress_key()


	def _progress_key (self) -> None:

		"""Move to the next key around the circle of fifths and rebuild the exercise.

		If the next key cannot be built (its notes leave the MIDI range at a
		high start octave), the tracker stays COMPLETED in the current key.
		"""

		new_key = pianopractice.circle_of_fifths.next_key(self._settings.key)
		changes: typing.Dict[str, typing.Any] = {"key": new_key}

		# Arpeggios are built on the root note, which follows the key.
		if self._settings.mode is pianopractice.exercise.PracticeMode.ARPEGGIOS:
			changes["root_note"] = pianopractice.circle_of_fifths.next_key(pianopractice.notes.Key(int(self._settings.root_note))).tonic

		settings = dataclasses.replace(self._settings, **changes)

		try:
			exercise = settings.build_exercise()
		except pianopractice.exercise.ExerciseConfigError as exc:
			# Stay on the finished exercise; the player can restart it or reconfigure.
			logger.warning(f"Cannot advance to key of {new_key.display_name}: {exc}")
			return

		self._apply(settings, exercise)

		logger.info(f"Advanced to key of {new_key.display_name}")

		self.events.emit_sync("key_changed", new_key)
