"""
Exceptions for the raising construction path.

The sentinel protocol (new() returning None plus error()) never raises;
these are only used when a caller opts into exceptions by instantiating a
class directly, e.g. Widget(name='foo').
"""

from typing import Any


class ClassBaseError(Exception):
    """Base exception for all class_base errors."""
    pass


class InitializationDeclined(ClassBaseError):
    """Raised when an init() hook declines the configuration.

    Attributes:
        cls: Class whose init() declined
        error: Error value recorded by the hook (string or structured object)
    """
    def __init__(self, cls: type, error: Any = ''):
        self.cls = cls
        self.error = error
        if error is None or (isinstance(error, str) and not error):
            message = "initialization declined"
        else:
            message = str(error)
        super().__init__(f"{cls.__qualname__}: {message}")
