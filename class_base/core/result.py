"""
Outcome of ClassBase.build().

Ok carries the constructed instance, Err carries the class that declined
together with the reason its init() recorded. Both are truthy/falsy like the
sentinel they replace, so `if result:` reads the same as `if obj is not None:`.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from class_base.core.exceptions import InitializationDeclined

T = TypeVar('T')  # Instance type


@dataclass
class Ok(Generic[T]):
    """Successful construction.

    Attributes:
        value: The constructed instance (whatever init() returned)
    """
    value: T

    def __bool__(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass
class Err:
    """Declined construction.

    Attributes:
        cls: Class whose init() declined
        error: Error value recorded by init(), string or structured object
    """
    cls: type
    error: Any

    def __bool__(self) -> bool:
        return False

    def unwrap(self) -> None:
        """Raises InitializationDeclined with the recorded reason."""
        raise InitializationDeclined(self.cls, self.error)


# Type alias for Result
Result = Union[Ok[T], Err]
