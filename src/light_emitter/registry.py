from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from .errors import ListenerTypeError
from .settings import EmitterSettings

logger = logging.getLogger(__name__)


Listener = Callable[..., Any]


def _name(callback: Any) -> str:
    return getattr(callback, "__qualname__", None) or getattr(callback, "__name__", None) or repr(callback)


@dataclass(eq=False)
class ListenerRecord:
    """One subscription.

    Attributes:
        callback: The listener, invoked as-is on dispatch.
        event_name: Name the record was registered under (introspection only).
        once: Deactivate after the first invocation.
        active: Cleared on unregister or after a once-listener fires; never set again.
        serial: Registration counter value; a dispatch skips records newer than itself.
    """

    callback: Listener
    event_name: str
    once: bool = False
    active: bool = True
    serial: int = 0


class EventRegistry:
    """Synchronous publish/subscribe registry owned by a single host object.

    Listeners are kept per event name in registration order and invoked in that
    order. Removal by callback only deactivates records, so a dispatch that is
    in progress keeps stable indices while listeners mutate the registry.

    A listener returning exactly ``False`` stops the remaining listeners for
    that dispatch and makes :meth:`dispatch` return ``False``.
    """

    def __init__(self, owner: Any = None, settings: Optional[EmitterSettings] = None) -> None:
        self._owner = owner
        self.settings = settings or EmitterSettings()
        self._events: Optional[Dict[str, List[ListenerRecord]]] = None
        self._serial = 0

    @property
    def owner(self) -> Any:
        """The host object passed to listeners when ``pass_owner`` is enabled."""
        return self if self._owner is None else self._owner

    # ------------------------ Registration ------------------------
    def register(self, event_name: str, callback: Listener) -> "EventRegistry":
        """Register ``callback`` for every dispatch of ``event_name``.

        The same callback may be registered several times; it is then invoked
        once per registration.
        """
        self._add(event_name, callback, once=False)
        return self

    def register_once(self, event_name: str, callback: Listener) -> "EventRegistry":
        """Register ``callback`` for the next dispatch of ``event_name`` only."""
        self._add(event_name, callback, once=True)
        return self

    def _add(self, event_name: str, callback: Listener, once: bool) -> None:
        if self.settings.strict_callbacks and not callable(callback):
            raise ListenerTypeError(f"listener for '{event_name}' must be callable, got {type(callback).__name__}")
        if self._events is None:
            self._events = {}
        self._serial += 1
        record = ListenerRecord(callback, event_name, once=once, serial=self._serial)
        self._events.setdefault(event_name, []).append(record)
        logger.debug("Registered %s listener %s for '%s'", "once" if once else "recurring", _name(callback), event_name)

    # ------------------------ Removal ------------------------
    def unregister(self, event_name: Optional[str] = None, callback: Optional[Listener] = None) -> "EventRegistry":
        """Remove listeners.

        - No event name: drop every listener of every event.
        - Event name only: clear all listeners of that event.
        - Event name and callback: deactivate every registration of that exact
          callback object for the event.

        Unknown events or callbacks are ignored.
        """
        if not event_name:
            self._events = None
            logger.debug("Unregistered all listeners")
            return self

        records = self._records(event_name)
        if not records:
            return self

        if callback is None:
            records.clear()
            logger.debug("Unregistered all listeners for '%s'", event_name)
            return self

        removed = 0
        for record in reversed(records):
            if record.callback is callback and record.active:
                record.active = False
                removed += 1
        if removed:
            logger.debug("Unregistered %d registration(s) of %s from '%s'", removed, _name(callback), event_name)
        return self

    # ------------------------ Dispatch ------------------------
    def dispatch(self, event_name: str, *args: Any, **kwargs: Any) -> Optional[bool]:
        """Invoke the active listeners of ``event_name`` in registration order.

        Listeners registered while this call runs are not invoked by it.
        Exceptions raised by a listener propagate to the caller and abort the
        remaining listeners.

        Args:
            event_name: Event to trigger.
            *args: Positional arguments for every listener.
            **kwargs: Keyword arguments for every listener.

        Returns:
            ``False`` if a listener returned ``False``, otherwise ``None``.
        """
        records = self._records(event_name)
        if records is None:
            return None

        newest = self._serial
        logger.debug("Dispatching '%s' to up to %d listener(s)", event_name, len(records))
        if self.settings.pass_owner:
            args = (self.owner,) + args

        i = 0
        # The list can be cleared and refilled by a listener while we walk it.
        while i < len(records):
            record = records[i]
            i += 1
            if record.serial > newest:
                break
            if not record.active:
                continue
            if record.once:
                record.active = False
            if record.callback(*args, **kwargs) is False:
                logger.debug("Listener %s stopped propagation of '%s'", _name(record.callback), event_name)
                return False
        return None

    # Short names, as found on most emitters.
    on = register
    once = register_once
    off = unregister
    emit = dispatch

    # ------------------------ Introspection ------------------------
    def _records(self, event_name: str) -> Optional[List[ListenerRecord]]:
        if self._events is None:
            return None
        try:
            return self._events.get(event_name)
        except TypeError:
            # unhashable name: nothing can be registered under it
            return None

    def listeners(self, event_name: str) -> List[Listener]:
        """Return the callbacks still active for ``event_name``, in dispatch order."""
        return [r.callback for r in self._records(event_name) or () if r.active]

    def listener_count(self, event_name: str) -> int:
        return sum(1 for r in self._records(event_name) or () if r.active)

    def event_names(self) -> List[str]:
        if self._events is None:
            return []
        return [name for name, records in self._events.items() if any(r.active for r in records)]

    def __contains__(self, event_name: object) -> bool:
        return isinstance(event_name, str) and self.listener_count(event_name) > 0

    def __repr__(self) -> str:
        return f"<EventRegistry events={self.event_names()!r}>"
