"""
Common base class for deriving other classes.

ClassBase gives every derived class the same way to be constructed and the
same way to report failure:

    class Widget(ClassBase):
        def init(self, config):
            self.name = config.get('name')
            if not self.name:
                return self.error("No name!")
            return self

    widget = Widget.new(name='foo')
    if widget is None:
        print(Widget.error())       # "No name!"

new() folds its arguments into one mapping, allocates the instance and hands
both to init(). init() returns the instance to accept or None to decline,
recording the reason with error() first. A declined reason is mirrored onto
the class so it can still be read when no instance was returned.
"""

import logging
from typing import Any, Mapping, Optional

from class_base.config import FACTORY_KEY
from class_base.core.arguments import fold_config
from class_base.core.dispatch import dualmethod
from class_base.core.error_slots import error_slots
from class_base.core.exceptions import InitializationDeclined
from class_base.core.result import Ok, Err, Result

logger = logging.getLogger(__name__)

# Values that error() joins into a string instead of storing as-is
_PRIMITIVE_TYPES = (str, bytes, bytearray, int, float, complex, bool, type(None))


def _stringify(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode('utf-8', errors='replace')
    return str(value)


class ClassBase:
    """Base class with two-phase construction and error reporting."""

    def __init__(self, /, *args, **kwargs):
        """Construct eagerly, raising instead of returning None.

        Accepts the same arguments as new(). The object being initialised is
        always the result: if init() returns a replacement object, only new()
        and build() hand it back, here it is discarded.

        Raises:
            InitializationDeclined: If init() declines the configuration
        """
        config = fold_config(args, kwargs)
        if self._construct(config) is None:
            raise InitializationDeclined(type(self), self.error())

    @classmethod
    def new(cls, /, *args, **kwargs) -> Optional['ClassBase']:
        """Create an instance, or return None if init() declines.

        Args:
            *args: A configuration mapping, or alternating key/value pairs
            **kwargs: Extra configuration items

        Returns:
            Whatever init() returned (normally the new instance), or None.
            On None, cls.error() holds the reason.
        """
        config = fold_config(args, kwargs)
        self = cls.__new__(cls)
        return self._construct(config)

    @classmethod
    def build(cls, /, *args, **kwargs) -> Result:
        """Create an instance and wrap the outcome in a Result.

        Returns:
            Ok(instance) on success, Err(cls, error value) if init() declined
        """
        config = fold_config(args, kwargs)
        self = cls.__new__(cls)
        result = self._construct(config)
        if result is None:
            # Read the reason off the instance, the class slot may be rewritten by other threads
            return Err(cls, self.error())
        return Ok(result)

    def _construct(self, config: Mapping[str, Any]) -> Any:
        self._error = ''
        self._factory = config.get(FACTORY_KEY)

        result = self.init(config)
        if result is None:
            cls = type(self)
            reason = self.error()
            logger.debug(f"{cls.__qualname__}.init() declined: {reason!r}")
            cls.error(reason)
        return result

    def init(self, config: Mapping[str, Any]) -> Optional['ClassBase']:
        """Initialisation hook called with the normalized configuration.

        Override to validate config and set up the instance. Return self to
        accept, or the result of self.error(...) (None) to decline.
        """
        return self

    @dualmethod
    def error(target, *args) -> Any:
        """Get or set the error for an instance or a class.

        Called on an instance it reads/writes that instance's error; called
        on a class it reads/writes the class's own slot.

        With no arguments, returns the current error ('' if none). With
        arguments, stores a new error and returns None so that init() and
        other methods can `return self.error(...)`. A single non-primitive
        argument (an exception, a dict...) is stored unchanged, anything
        else is joined into one string.
        """
        if args:
            if len(args) == 1 and not isinstance(args[0], _PRIMITIVE_TYPES):
                value = args[0]
            else:
                value = ''.join(_stringify(arg) for arg in args)

            if isinstance(target, type):
                error_slots.set(target, value)
            else:
                target._error = value
            return None

        if isinstance(target, type):
            return error_slots.get(target)
        return getattr(target, '_error', '')

    @property
    def factory(self) -> Any:
        """Value passed under the 'factory' configuration key, if any."""
        return getattr(self, '_factory', None)
