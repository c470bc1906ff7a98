class EmitterError(Exception):
    """Base error for light-emitter exceptions."""


class ListenerTypeError(EmitterError, TypeError):
    """Raised in strict mode when a non-callable is registered as a listener."""


class SettingsError(EmitterError, ValueError):
    """Raised when a settings source cannot be read or has the wrong shape."""
