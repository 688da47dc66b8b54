import asyncio

import mido
import pytest

import conftest
import pianopractice.config
import pianopractice.exercise
import pianopractice.session
import pianopractice.tracker


def _tracker (**settings: object) -> pianopractice.tracker.PracticeTracker:

	return pianopractice.tracker.PracticeTracker(pianopractice.config.PracticeSettings(**settings))


def _progression_tracker () -> pianopractice.tracker.PracticeTracker:

	return _tracker(mode=pianopractice.exercise.PracticeMode.CHORD_PROGRESSIONS)


@pytest.mark.asyncio
async def test_start_opens_the_only_input (patch_midi: None) -> None:

	"""With a single input available, the session picks it and starts the tracker."""

	tracker = _tracker()
	session = pianopractice.session.PracticeSession(tracker)

	await session.start()

	assert session.running
	assert session.input_device_name == "Dummy Piano"
	assert tracker.state is pianopractice.tracker.TrackerState.ACTIVE

	await session.stop()

	assert not session.running
	assert conftest.current_fake_input().closed


@pytest.mark.asyncio
async def test_no_input_raises_connection_error (patch_no_midi: None) -> None:

	session = pianopractice.session.PracticeSession(_tracker())

	with pytest.raises(ConnectionError):
		await session.start()

	assert not session.running


@pytest.mark.asyncio
async def test_messages_queued_before_stop_are_handled (patch_midi: None) -> None:

	tracker = _tracker()
	session = pianopractice.session.PracticeSession(tracker)

	await session.start()

	session.feed(mido.Message("note_on", note=60, velocity=80))
	session.feed(mido.Message("note_off", note=60))
	session.feed(mido.Message("note_on", note=62, velocity=80))

	await session.stop()
	await session.run()

	assert session.messages_handled == 3
	assert tracker.current_step_index == 2


@pytest.mark.asyncio
async def test_port_callback_reaches_the_tracker (patch_midi: None) -> None:

	"""Messages from mido's callback arrive through the event loop."""

	tracker = _tracker()
	session = pianopractice.session.PracticeSession(tracker)

	await session.start()

	conftest.current_fake_input().inject(mido.Message("note_on", note=60, velocity=100))
	await asyncio.sleep(0)

	await session.stop()
	await session.run()

	assert tracker.current_step_index == 1


@pytest.mark.asyncio
async def test_zero_velocity_note_on_is_a_release (patch_midi: None) -> None:

	"""Releasing a wrong note with velocity 0 lets the chord count."""

	tracker = _progression_tracker()
	session = pianopractice.session.PracticeSession(tracker)

	await session.start()

	for note in (60, 64, 61):
		session.handle_message(mido.Message("note_on", note=note, velocity=90))

	session.handle_message(mido.Message("note_on", note=61, velocity=0))
	session.handle_message(mido.Message("note_on", note=67, velocity=90))

	assert tracker.current_step_index == 1

	await session.stop()


@pytest.mark.asyncio
async def test_other_messages_are_ignored (patch_midi: None) -> None:

	tracker = _tracker()
	session = pianopractice.session.PracticeSession(tracker)

	await session.start()

	session.handle_message(mido.Message("control_change", control=64, value=127))

	assert session.messages_handled == 1
	assert tracker.current_step_index == 0

	await session.stop()


@pytest.mark.asyncio
async def test_completed_exercise_restarts (patch_midi: None) -> None:

	"""With looping on, finishing the exercise starts it again."""

	tracker = _progression_tracker()
	session = pianopractice.session.PracticeSession(tracker)
	completed = []
	tracker.events.on("exercise_completed", completed.append)

	await session.start()

	for step in tracker.exercise:
		for note in step.notes:
			session.handle_message(mido.Message("note_on", note=note, velocity=90))
		for note in step.notes:
			session.handle_message(mido.Message("note_off", note=note))

	assert len(completed) == 1
	assert tracker.state is pianopractice.tracker.TrackerState.ACTIVE
	assert tracker.current_step_index == 0

	await session.stop()


@pytest.mark.asyncio
async def test_completed_exercise_stays_completed_without_looping (patch_midi: None) -> None:

	tracker = _progression_tracker()
	session = pianopractice.session.PracticeSession(tracker, loop_exercises=False)

	await session.start()

	for step in tracker.exercise:
		for note in step.notes:
			session.handle_message(mido.Message("note_on", note=note, velocity=90))

	assert tracker.state is pianopractice.tracker.TrackerState.COMPLETED

	await session.stop()


def test_feed_before_start_raises () -> None:

	session = pianopractice.session.PracticeSession(_tracker())

	with pytest.raises(RuntimeError):
		session.feed(mido.Message("note_on", note=60))
