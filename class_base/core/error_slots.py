"""
Thread-safe class-level error storage.

When construction fails there is no instance left to ask why, so the reason
is mirrored into a slot owned by the class itself. Slots are keyed by the
exact class: a subclass never sees or overwrites its parent's slot. Classes
are held weakly, a class created at runtime is freed along with its slot.
"""

import logging
import threading
import weakref
from typing import Any, Optional

logger = logging.getLogger(__name__)


class ErrorSlots:
    """Registry of one error value per class, each guarded by its own lock."""

    def __init__(self):
        self._values: "weakref.WeakKeyDictionary[type, Any]" = weakref.WeakKeyDictionary()
        self._locks: "weakref.WeakKeyDictionary[type, threading.RLock]" = weakref.WeakKeyDictionary()
        self._registry_lock = threading.Lock()

    def _lock_for(self, cls: type) -> threading.RLock:
        with self._registry_lock:
            lock = self._locks.get(cls)
            if lock is None:
                lock = self._locks[cls] = threading.RLock()
            return lock

    def get(self, cls: type) -> Any:
        """Return the error stored for cls, or '' if none was ever set."""
        with self._lock_for(cls):
            return self._values.get(cls, '')

    def set(self, cls: type, value: Any) -> None:
        """Store value as the current error for cls."""
        with self._lock_for(cls):
            self._values[cls] = value
        logger.debug(f"Error slot for {cls.__qualname__} set to {value!r}")

    def __len__(self) -> int:
        with self._registry_lock:
            return len(self._values)

    def clear(self, cls: Optional[type] = None) -> None:
        """Reset the slot for cls, or every slot when cls is None."""
        if cls is not None:
            with self._lock_for(cls):
                self._values.pop(cls, None)
            return

        with self._registry_lock:
            locks = list(self._locks.values())
        for lock in locks:
            lock.acquire()
        try:
            self._values.clear()
        finally:
            for lock in locks:
                lock.release()


# Process-wide registry shared by every ClassBase subclass
error_slots = ErrorSlots()
