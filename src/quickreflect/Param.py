#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import inspect


class Param:
    """Method parameter metadata for reflection.

    Represents a single parameter of a method, including:
    - name: Parameter name
    - type: Declared type hint (object when unannotated)
    - has_default: Whether parameter has a default value
    """

    def __init__(self, name, param_type=object, has_default=False):
        self._name = name
        self._type = param_type
        self._has_default = has_default

    @staticmethod
    def from_signature(func, hints=None, skip_first=False):
        """Build the Param list of a function.

        skip_first drops the leading self/cls parameter of an unbound method.
        Returns an empty list when the callable has no introspectable
        signature (some builtins).
        """
        try:
            sig = inspect.signature(func)
        except (TypeError, ValueError):
            return []
        hints = hints or {}
        values = list(sig.parameters.values())
        if skip_first and values:
            values = values[1:]
        params = []
        for p in values:
            if p.kind in (p.VAR_POSITIONAL, p.VAR_KEYWORD):
                continue
            params.append(Param(p.name, hints.get(p.name, object), p.default is not p.empty))
        return params

    def name(self):
        return self._name

    def type(self):
        return self._type

    def has_default(self):
        return self._has_default

    def to_str(self):
        type_name = getattr(self._type, "__name__", repr(self._type))
        return f"{type_name} {self._name}"

    def __repr__(self):
        return f"Param({self._name}, {self._type!r})"
