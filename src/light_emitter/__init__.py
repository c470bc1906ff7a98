"""
Lightweight synchronous event emitter.

Hosts either subclass :class:`Emitter` or hold an :class:`EventRegistry`
and delegate to it. Listeners run in registration order; one returning
``False`` stops the rest of that dispatch.
"""
from importlib.metadata import version, PackageNotFoundError

from .emitter import Emitter
from .errors import EmitterError, ListenerTypeError, SettingsError
from .registry import EventRegistry, ListenerRecord
from .settings import EmitterSettings, load_settings

try:
    __version__ = version("light-emitter")
except PackageNotFoundError:  # pragma: no cover - during tests without packaging
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "Emitter",
    "EventRegistry",
    "ListenerRecord",
    "EmitterSettings",
    "load_settings",
    "EmitterError",
    "ListenerTypeError",
    "SettingsError",
]
