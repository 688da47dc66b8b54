import logging
import typing
import mido

logger = logging.getLogger(__name__)


def input_names() -> typing.List[str]:
    """
    Return the names of the available MIDI inputs.

    Backend failures (no rtmidi installed, no MIDI subsystem) are logged and
    reported as an empty list.
    """
    try:
        return list(mido.get_input_names())
    except Exception as e:
        logger.error(f"Failed to list MIDI inputs: {e}")
        return []


def select_input_device(device_name: typing.Optional[str] = None, callback: typing.Optional[typing.Callable] = None) -> typing.Tuple[typing.Optional[str], typing.Optional[typing.Any]]:
    """
    Select and open a MIDI input device for a keyboard.

    If `device_name` is provided, attempts to open that specific device. If the
    precise name is not found, falls back to the first available input and logs
    a warning, since port names often carry a platform-specific suffix.
    If `device_name` is None:
    - If exactly one input exists, it is selected automatically.
    - Otherwise logs the available inputs and returns None.

    `callback` is called from mido's input thread for every message received.

    Returns:
        A tuple of (device_name, midi_in_object) or (None, None) on failure.
    """
    inputs = input_names()
    logger.info(f"Available MIDI inputs: {inputs}")

    if not inputs:
        logger.error("No MIDI input devices found.")
        return None, None

    target = device_name

    if target is None:
        if len(inputs) != 1:
            logger.error(f"Several MIDI inputs found, choose one with --input: {inputs}")
            return None, None

        target = inputs[0]
        logger.info(f"One MIDI input found - using '{target}'")

    elif target not in inputs:
        # Match on a prefix before falling back to the first input.
        matches = [name for name in inputs if name.startswith(target)]
        logger.warning(f"MIDI input device '{target}' not found.")
        target = matches[0] if matches else inputs[0]
        logger.warning(f"Fallback to: {target}")

    try:
        midi_in = mido.open_input(target, callback=callback)
    except Exception as e:
        logger.error(f"Failed to open MIDI input: {e}")
        return None, None

    logger.info(f"Opened MIDI input: {target}")
    return target, midi_in
