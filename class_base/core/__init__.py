"""
Core construction and error-reporting modules
"""
from .base import ClassBase
from .error_slots import ErrorSlots, error_slots
from .exceptions import ClassBaseError, InitializationDeclined
from .result import Ok, Err, Result

__all__ = [
    'ClassBase',
    'ErrorSlots',
    'error_slots',
    'ClassBaseError',
    'InitializationDeclined',
    'Ok',
    'Err',
    'Result',
]
