"""
class_base - useful base class for deriving other classes

    from class_base import ClassBase

    class Widget(ClassBase):
        def init(self, config):
            ...
            return self

    widget = Widget.new(foo='bar')
    if widget is None:
        raise SystemExit(Widget.error())
"""
from .core import (
    ClassBase,
    ClassBaseError,
    InitializationDeclined,
    Ok,
    Err,
    Result,
    error_slots,
)

__version__ = "0.1.0"

__all__ = [
    'ClassBase',
    'ClassBaseError',
    'InitializationDeclined',
    'Ok',
    'Err',
    'Result',
    'error_slots',
    '__version__',
]
