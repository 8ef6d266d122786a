#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import inspect
import typing

from .Slot import Slot


class Method(Slot):
    """Method reflection - represents a method of a type.

    Methods are created either:
    1. By Type reflection, from routines in the class namespace
    2. By explicit registration via Type.am_()
    """

    def __init__(self, parent=None, name="", func=None, facets=None):
        """Create a Method reflection object.

        Args:
            parent: Declaring Type
            name: Method name
            func: The raw class attribute (function, staticmethod,
                  classmethod or builtin method descriptor)
            facets: List of facet instances in declaration order
        """
        super().__init__(parent, name, facets)
        self._func = func
        self._params = None  # Lazily built Param list
        self._returns = None

    def is_method(self):
        return True

    def is_static(self):
        return isinstance(self._func, staticmethod)

    def is_async(self):
        """Return True for coroutine functions (async def)."""
        return inspect.iscoroutinefunction(self._unwrapped())

    def _unwrapped(self):
        if isinstance(self._func, (staticmethod, classmethod)):
            return self._func.__func__
        return self._func

    def _hints(self):
        try:
            return typing.get_type_hints(self._unwrapped())
        except (NameError, TypeError, AttributeError):
            # Unresolvable forward references and builtins stay unannotated
            return {}

    def params(self):
        """Get parameter list (without self/cls), built on first access."""
        if self._params is None:
            from .Param import Param
            self._params = Param.from_signature(
                self._unwrapped(), self._hints(), skip_first=not self.is_static())
        return list(self._params)

    def returns(self):
        """Get the declared return hint (object when unannotated)."""
        if self._returns is None:
            self._returns = self._hints().get("return", object)
        return self._returns

    def call_on(self, target, args=None):
        """Call method on a specific target object.

        Args:
            target: Object to call method on
            args: List of arguments, applied positionally (None for none)

        Returns:
            Whatever the method returns
        """
        if args is None:
            args = []
        if not hasattr(self._func, "__get__"):
            return self._func(target, *args)
        bound = self._func.__get__(target, type(target))
        return bound(*args)

    def func(self):
        return self._func
