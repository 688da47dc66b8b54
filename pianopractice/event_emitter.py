import inspect
import typing


CallbackType = typing.Callable[..., typing.Any]


class EventEmitter:

	"""
	A simple event emitter with synchronous callbacks.

	When constructed with a set of event names, subscribing to any other
	name raises ``ValueError`` so a misspelt event fails loudly instead of
	never firing.
	"""

	def __init__ (self, events: typing.Optional[typing.Iterable[str]] = None) -> None:

		"""
		Initialize an empty event registry.
		"""

		self._events: typing.Optional[typing.FrozenSet[str]] = frozenset(events) if events is not None else None
		self._listeners: typing.Dict[str, typing.List[CallbackType]] = {}


	def _check_event (self, event_name: str) -> None:

		if self._events is not None and event_name not in self._events:
			raise ValueError(f"Unknown event {event_name!r}. Expected one of: {sorted(self._events)}")


	def on (self, event_name: str, callback: CallbackType) -> None:

		"""
		Register a callback for an event name.
		"""

		self._check_event(event_name)
		self._listeners.setdefault(event_name, []).append(callback)

	def off (self, event_name: str, callback: CallbackType) -> None:

		"""
		Unregister a previously registered callback.

		Raises ``ValueError`` if the callback is not registered for the event.
		"""

		if event_name not in self._listeners or callback not in self._listeners[event_name]:
			raise ValueError(f"Callback not registered for event {event_name!r}")

		self._listeners[event_name].remove(callback)


	def listener_count (self, event_name: str) -> int:

		return len(self._listeners.get(event_name, []))


	def emit_sync (self, event_name: str, *args: typing.Any, **kwargs: typing.Any) -> None:

		"""
		Emit an event and call non-async listeners immediately.

		Listeners are called in registration order from a snapshot, so a
		listener may unsubscribe itself while being called.
		"""

		self._check_event(event_name)

		for callback in list(self._listeners.get(event_name, [])):

			if inspect.iscoroutinefunction(callback):
				raise ValueError("Async callback encountered in emit_sync")

			callback(*args, **kwargs)
