"""
Method binding that works on both a class and its instances.
"""

import functools
from types import MethodType


class dualmethod:
    """Bind the wrapped function to the instance, or to the class when
    accessed without one.

    Unlike classmethod, obj.method() receives obj; unlike a plain method,
    Cls.method() receives Cls instead of requiring an instance:

        class Widget:
            @dualmethod
            def describe(target):
                return target

        Widget.describe()    # -> Widget
        Widget().describe()  # -> the instance
    """

    def __init__(self, func):
        self.__func__ = func
        functools.update_wrapper(self, func)

    def __get__(self, instance, owner=None):
        if instance is None:
            return MethodType(self.__func__, owner)
        return MethodType(self.__func__, instance)
