from __future__ import annotations

from typing import Any, Optional

from .registry import EventRegistry, Listener
from .settings import EmitterSettings


class Emitter:
    """Host base that gives a class publish/subscribe behaviour.

    The registry is held in the ``events`` field and created on first use, so
    subclasses do not need to call ``Emitter.__init__``. Classes that prefer
    not to inherit can hold an :class:`EventRegistry` of their own instead.

    Example:
        class Chat(Emitter):
            def say(self, text):
                if self.emit("message", text) is not False:
                    print("delivered")
    """

    emitter_settings: Optional[EmitterSettings] = None

    def __init__(self, settings: Optional[EmitterSettings] = None) -> None:
        if settings is not None:
            self.emitter_settings = settings

    @property
    def events(self) -> EventRegistry:
        registry = self.__dict__.get("_event_registry")
        if registry is None:
            registry = EventRegistry(owner=self, settings=self.emitter_settings)
            self.__dict__["_event_registry"] = registry
        return registry

    def on(self, event_name: str, callback: Listener) -> "Emitter":
        self.events.register(event_name, callback)
        return self

    def once(self, event_name: str, callback: Listener) -> "Emitter":
        self.events.register_once(event_name, callback)
        return self

    def off(self, event_name: Optional[str] = None, callback: Optional[Listener] = None) -> "Emitter":
        self.events.unregister(event_name, callback)
        return self

    def emit(self, event_name: str, *args: Any, **kwargs: Any) -> Optional[bool]:
        return self.events.dispatch(event_name, *args, **kwargs)
