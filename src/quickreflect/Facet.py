#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

FACETS_ATTR = "__facets__"


class Facet:
    """Base class for facets (markers attached to properties and methods).

    A facet instance is applied as a decorator to a method or to the getter
    of a property. Stacked facets keep top-down declaration order:

        class Foo:
            @property
            @Label("a")
            @Label("b")
            def name(self) -> str: ...

    Annotated class attributes carry facets as ``Annotated`` metadata instead:

        class Foo:
            name: Annotated[str, Label("a")] = None
    """

    def __call__(self, target):
        func = target.fget if isinstance(target, property) else target
        if isinstance(func, (staticmethod, classmethod)):
            func = func.__func__
        existing = getattr(func, FACETS_ATTR, ())
        setattr(func, FACETS_ATTR, (self,) + tuple(existing))
        return target

    def is_immutable(self):
        """Facets are treated as immutable once declared."""
        return True

    def __repr__(self):
        fields = ", ".join(f"{k}={v!r}" for k, v in vars(self).items() if not k.startswith("_"))
        return f"@{type(self).__name__}({fields})"


def facets_of(target):
    """Return the facets attached to a function, property or descriptor."""
    if target is None:
        return []
    if isinstance(target, property):
        target = target.fget
    if isinstance(target, (staticmethod, classmethod)):
        target = target.__func__
    return list(getattr(target, FACETS_ATTR, ()))
