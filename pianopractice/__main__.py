import argparse
import asyncio
import dataclasses
import logging
import sys
import typing

import yaml

import pianopractice.circle_of_fifths
import pianopractice.config
import pianopractice.exercise
import pianopractice.notes
import pianopractice.progressions
import pianopractice.session
import pianopractice.tracker


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


EXIT_USAGE = 2

# Command-line flag -> practice setting.
FLAG_SETTINGS: typing.Dict[str, str] = {
	"mode": "mode",
	"key": "key",
	"scale": "scale_type",
	"root": "root_note",
	"arpeggio": "arpeggio_type",
	"octaves": "arpeggio_octaves",
	"chord": "chord_type",
	"order": "chord_order",
	"progression": "progression_name",
	"hand": "hand_selection",
	"octave": "start_octave",
}


def build_parser () -> argparse.ArgumentParser:

	"""
	Create the argument parser with its three subcommands.
	"""

	settings = argparse.ArgumentParser(add_help=False)
	settings.add_argument("--config", default="pianopractice.yaml", help="YAML configuration file (default: %(default)s)")
	settings.add_argument("--mode", help="scales, arpeggios, chords_by_key, chords_by_type or chord_progressions")
	settings.add_argument("--key", help="key for scales, chords by key and progressions, e.g. Eb")
	settings.add_argument("--scale", help="scale type, e.g. major, dorian")
	settings.add_argument("--root", help="arpeggio root note, e.g. F#")
	settings.add_argument("--arpeggio", help="arpeggio type, e.g. minor_7th")
	settings.add_argument("--octaves", help="arpeggio span: 1 or 2")
	settings.add_argument("--chord", help="chord type for chords by type, e.g. half_diminished_7th")
	settings.add_argument("--order", help="root order for chords by type: chromatic or circle_of_fifths")
	settings.add_argument("--progression", help="progression name, e.g. \"ii - V - I\"")
	settings.add_argument("--hand", help="left, right or both")
	settings.add_argument("--octave", help="start octave (right hand)")
	settings.add_argument("--no-inversions", dest="include_inversions", action="store_const", const=False, help="chords by type: root position only")
	settings.add_argument("--sevenths", dest="include_seventh_chords", action="store_const", const=True, help="chords by key: seventh chords instead of triads")
	settings.add_argument("--voice-leading", dest="voice_leading", action="store_const", const=True, help="voice-lead chord exercises")

	parser = argparse.ArgumentParser(prog="pianopractice", description="Piano practice exercises for a MIDI keyboard.")
	subparsers = parser.add_subparsers(dest="command", required=True)

	subparsers.add_parser("show", parents=[settings], help="print an exercise as YAML")
	subparsers.add_parser("progressions", help="list the chord progression library")

	practice = subparsers.add_parser("practice", parents=[settings], help="practise with a MIDI keyboard")
	practice.add_argument("--input", dest="input_device", help="MIDI input device name")
	practice.add_argument("--auto-progress", dest="auto_progress_keys", action="store_const", const=True, help="move to the next key around the circle of fifths after each exercise")

	return parser


def settings_from_args (args: argparse.Namespace, config: typing.Dict[str, typing.Any]) -> pianopractice.config.PracticeSettings:

	"""
	Combine the configuration file with command-line flags (flags win).
	"""

	settings = pianopractice.config.settings_from_dict(config)
	changes: typing.Dict[str, typing.Any] = {}

	for flag, setting in FLAG_SETTINGS.items():
		value = getattr(args, flag, None)

		if value is not None:
			field, parsed = pianopractice.config.parse_setting(setting, value)
			changes[field] = parsed

	for setting in ("include_inversions", "include_seventh_chords", "voice_leading", "auto_progress_keys"):
		value = getattr(args, setting, None)

		if value is not None:
			changes[setting] = value

	return dataclasses.replace(settings, **changes)


def show (settings: pianopractice.config.PracticeSettings) -> None:

	exercise = settings.build_exercise()

	print(yaml.safe_dump(exercise.to_dict(), sort_keys=False, allow_unicode=True), end="")


def list_progressions () -> None:

	for difficulty in pianopractice.progressions.ProgressionDifficulty:

		print(f"{difficulty.display_name}:")

		for progression in pianopractice.progressions.progressions_for_difficulty(difficulty):
			print(f"  {progression.name:<18} {progression.description}")


def key_change_message (start_key: pianopractice.notes.Key, key: pianopractice.notes.Key) -> str:

	"""Describe an auto-progressed key and how far round the circle it is."""

	distance = pianopractice.circle_of_fifths.key_distance(start_key, key)

	return f"Next key: {key.display_name} ({distance}/12 from {start_key.display_name})"


async def practice (settings: pianopractice.config.PracticeSettings, input_device: typing.Optional[str]) -> None:

	"""
	Run a practice session until interrupted.
	"""

	tracker = pianopractice.tracker.PracticeTracker(settings)

	def on_step (index: int, step: pianopractice.exercise.PracticeStep) -> None:
		label = step.label.display_name if step.label is not None else ""
		logger.info(f"Step {index + 1}/{len(tracker.exercise)} {label}")

	tracker.events.on("step_completed", on_step)
	tracker.events.on("exercise_completed", lambda exercise: logger.info(f"Well done - {exercise.title} complete"))
	start_key = settings.key
	tracker.events.on("key_changed", lambda key: logger.info(key_change_message(start_key, key)))

	session = pianopractice.session.PracticeSession(tracker, input_device_name=input_device)

	await session.start()

	try:
		await session.run()
	finally:
		await session.stop()


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point for the pianopractice command line.
	"""

	args = build_parser().parse_args(argv)

	if args.command == "progressions":
		list_progressions()
		return 0

	try:
		config = pianopractice.config.load_config(args.config)
		settings = settings_from_args(args, config)

		if args.command == "show":
			show(settings)
			return 0

		input_device = args.input_device or pianopractice.config.input_device_from_dict(config)
		asyncio.run(practice(settings, input_device))

	except ValueError as exc:
		logger.error(f"{exc}")
		return EXIT_USAGE

	except ConnectionError as exc:
		logger.error(f"{exc}")
		return 1

	except KeyboardInterrupt:
		logger.info("Stopping...")

	return 0


if __name__ == "__main__":
	sys.exit(main())
