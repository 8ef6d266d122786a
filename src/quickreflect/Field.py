#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Slot import Slot
from .ObjUtil import ObjUtil


class Field(Slot):
    """Field reflection - represents a property of a type.

    Fields are created either:
    1. By Type reflection, from class annotations and property objects
    2. By explicit registration via Type.af_()

    A field is backed by one of:
    - a property object (get/set go through its fget/fset)
    - explicit getter/setter callables (af_ registrations)
    - a plain instance attribute (annotated class attributes)
    """

    def __init__(self, parent=None, name="", type_=None, facets=None, prop=None, getter=None, setter=None):
        """Create a Field reflection object.

        Args:
            parent: Declaring Type
            name: Field name
            type_: Declared type hint (None means object)
            facets: List of facet instances in declaration order
            prop: Backing property object, if any
            getter: Callable(obj) returning the value, if any
            setter: Callable(obj, val), if any
        """
        super().__init__(parent, name, facets)
        self._hint = type_
        self._type = ObjUtil.declared_type(type_)
        self._prop = prop
        self._getter = getter
        self._setter = setter

    def is_field(self):
        return True

    def type(self):
        """Get declared type with Optional and Annotated wrappers removed."""
        return self._type

    def hint(self):
        """Get the raw type hint as written on the declaration."""
        return self._hint

    def is_nullable(self):
        return self._hint is None or ObjUtil.is_nullable(self._hint)

    def is_readonly(self):
        if self._prop is not None:
            return self._prop.fset is None
        if self._getter is not None:
            return self._setter is None
        return False

    def get(self, obj):
        """Get field value from object.

        Attribute backed fields which were never assigned read as None.
        Errors raised by a property getter propagate to the caller.
        """
        if self._prop is not None:
            return self._prop.__get__(obj, type(obj))
        if self._getter is not None:
            return self._getter(obj)
        return getattr(obj, self._name, None)

    def set_(self, obj, val):
        """Set field value on object.

        Raises:
            ReadonlyErr: If the field has no setter
        """
        if self.is_readonly():
            from .Err import ReadonlyErr
            raise ReadonlyErr.make(f"Cannot set read-only field {self.qname()}")
        if self._prop is not None:
            self._prop.__set__(obj, val)
        elif self._setter is not None:
            self._setter(obj, val)
        else:
            setattr(obj, self._name, val)
