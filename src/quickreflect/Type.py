#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import inspect
import sys
import threading
import typing
import weakref

from .Facet import Facet, facets_of
from .Field import Field
from .Method import Method
from .Log import Log


class Type:
    """Type reflection - the slot table of one Python class.

    A Type is created once per class and cached. Its slots are built lazily
    on first lookup by walking the class MRO from the root down:

    - annotated class attributes become Fields (facets via Annotated metadata)
    - property objects become Fields (facets attached to the getter)
    - public routines become Methods
    - explicit af_/am_ registrations are merged last

    A subclass slot replaces an inherited slot with the same name in place,
    so declared order is stable across overrides. Names starting with an
    underscore are never reflected.
    """

    # Cache of Type instances by Python class; classes stay collectable
    _cache = weakref.WeakKeyDictionary()
    _lock = threading.RLock()

    def __init__(self, cls):
        self._cls_ref = weakref.ref(cls)
        self._qname = f"{cls.__module__}::{cls.__qualname__}"
        self._name = cls.__name__
        # Reflection infrastructure
        self._slots_info = []  # Field/Method added via af_/am_
        self._own = None  # Slots declared directly on this class
        self._reflected = False
        self._slots_by_name = {}  # name -> Slot lookup
        self._slot_list = []  # All slots in order
        self._field_list = []
        self._method_list = []

    @staticmethod
    def of(obj):
        """Get type of object (None for None)"""
        if obj is None:
            return None
        return Type.find(type(obj))

    @staticmethod
    def find(cls):
        """Find the Type for a Python class - returns cached singleton"""
        with Type._lock:
            t = Type._cache.get(cls)
            if t is None:
                t = Type(cls)
                Type._cache[cls] = t
            return t

    def name(self):
        return self._name

    def qname(self):
        return self._qname

    def py_class(self):
        return self._cls_ref()

    #########################################################################
    # Slot Reflection - Metadata Registration
    #########################################################################

    def af_(self, name, type_=None, facets=None, getter=None, setter=None):
        """Add field metadata.

        Declares a field the class does not expose through annotations or
        properties, together with its facets:

          Type.find(Point).af_('x', int, [Label('horizontal')])

        Args:
            name: Field name
            type_: Declared type hint
            facets: Optional list of facet instances
            getter: Optional callable(obj) -> value (default: attribute read)
            setter: Optional callable(obj, value); omitted with a getter makes
                    the field read-only

        Returns:
            self for method chaining
        """
        f = Field(self, name, type_, facets or [], getter=getter, setter=setter)
        return self._register(f)

    def am_(self, name, func, facets=None):
        """Add method metadata.

          Type.find(Point).am_('norm', lambda p: abs(p.x) + abs(p.y))

        Args:
            name: Method name
            func: Function taking the target as its first argument
            facets: Optional list of facet instances

        Returns:
            self for method chaining
        """
        m = Method(self, name, func, facets or [])
        return self._register(m)

    def _register(self, slot):
        with Type._lock:
            self._slots_info.append(slot)
            self._own = None
            # Subclass slot tables include ours, so rebuild them too
            cls = self.py_class()
            for t in list(Type._cache.values()):
                sub = t.py_class()
                if sub is not None and cls in sub.__mro__:
                    t._reflected = False
        return self

    #########################################################################
    # Slot Reflection - Discovery
    #########################################################################

    def _own_slots(self):
        """Slots declared directly on this class, in declared order."""
        if self._own is not None:
            return self._own

        cls = self.py_class()
        ns = vars(cls)
        annotations = self._annotations(cls)
        hints = self._resolve_hints(cls, annotations)

        slots = []
        for name in dict.fromkeys([*annotations, *ns]):
            if name.startswith("_"):
                continue
            attr = ns.get(name)
            if isinstance(attr, property):
                slots.append(Field(self, name, self._returns_hint(attr.fget), facets_of(attr), prop=attr))
            elif isinstance(attr, (staticmethod, classmethod)) or inspect.isroutine(attr):
                slots.append(Method(self, name, attr, facets_of(attr)))
            elif name in annotations:
                hint = hints.get(name, annotations[name])
                if hint is typing.ClassVar or typing.get_origin(hint) is typing.ClassVar:
                    continue
                slots.append(Field(self, name, hint, self._annotated_facets(hint)))

        slots.extend(self._slots_info)
        self._own = slots
        return slots

    @staticmethod
    def _annotations(cls):
        try:
            return inspect.get_annotations(cls)
        except NameError:
            # Deferred annotations naming a type only imported for type checkers
            import annotationlib
            return annotationlib.get_annotations(cls, format=annotationlib.Format.STRING)

    @staticmethod
    def _resolve_hints(cls, annotations):
        """Resolve the class annotations to type hints.

        String annotations (postponed evaluation) are evaluated one by one
        against the module globals and the class namespace. An annotation
        which cannot be evaluated, such as a name only imported under
        TYPE_CHECKING, stays a string without affecting the others.
        """
        try:
            return typing.get_type_hints(cls, include_extras=True)
        except (NameError, TypeError, AttributeError, SyntaxError):
            pass

        module = sys.modules.get(cls.__module__)
        globalns = dict(vars(module)) if module is not None else {}
        localns = dict(vars(cls))
        hints = {}
        for name, hint in annotations.items():
            if isinstance(hint, str):
                try:
                    hint = eval(hint, globalns, localns)
                except Exception as e:
                    Log.get("quickreflect").debug(
                        f"Unresolved annotation {cls.__qualname__}.{name}: {hint!r}", e)
            hints[name] = hint
        return hints

    @staticmethod
    def _returns_hint(func):
        if func is None:
            return None
        try:
            return typing.get_type_hints(func, include_extras=True).get("return")
        except (NameError, TypeError):
            return None

    @staticmethod
    def _annotated_facets(hint):
        if typing.get_origin(hint) is not typing.Annotated:
            return []
        return [m for m in typing.get_args(hint)[1:] if isinstance(m, Facet)]

    def _reflect(self):
        """Build the slot lookup structures from the MRO.

        After calling, the type has populated:
        - _slot_list: All slots in order
        - _field_list: All fields
        - _method_list: All methods
        - _slots_by_name: name -> Slot lookup
        """
        if self._reflected:
            return self

        with Type._lock:
            if self._reflected:
                return self

            slots = []
            slots_by_name = {}
            name_to_index = {}

            cls = self.py_class()
            for klass in reversed(cls.__mro__):
                if klass is object:
                    continue
                t = self if klass is cls else Type.find(klass)
                for slot in t._own_slots():
                    self._merge_slot(slot, slots, slots_by_name, name_to_index)

            self._slot_list = slots
            self._field_list = [s for s in slots if s.is_field()]
            self._method_list = [s for s in slots if s.is_method()]
            self._slots_by_name = slots_by_name
            self._reflected = True

        Log.get("quickreflect").debug(
            f"Reflected {self._qname}: {len(self._field_list)} fields, {len(self._method_list)} methods")
        return self

    def _merge_slot(self, slot, slots, slots_by_name, name_to_index):
        """Merge a slot into the slot lists, handling overrides."""
        name = slot.name()
        existing_idx = name_to_index.get(name)

        if existing_idx is not None:
            slots_by_name[name] = slot
            slots[existing_idx] = slot
        else:
            slots_by_name[name] = slot
            slots.append(slot)
            name_to_index[name] = len(slots) - 1

    #########################################################################
    # Slot Reflection - Lookup Methods
    #########################################################################

    def slots(self):
        """Return all slots in declared order."""
        self._reflect()
        return list(self._slot_list)

    def slot(self, name, checked=True):
        """Find slot by name.

        Args:
            name: Slot name to find (case-sensitive)
            checked: If True, raise UnknownSlotErr if not found

        Returns:
            Slot instance or None (if checked=False and not found)
        """
        self._reflect()
        slot = self._slots_by_name.get(name)
        if slot is not None:
            return slot
        if checked:
            from .Err import UnknownSlotErr
            raise UnknownSlotErr.make(f"{self._qname}.{name}")
        return None

    def fields(self):
        """Return all fields in declared order."""
        self._reflect()
        return list(self._field_list)

    def field(self, name, checked=True):
        """Find field by name.

        Raises:
            UnknownSlotErr: If checked and there is no field with that name
        """
        slot = self.slot(name, checked)
        if slot is None:
            return None
        if slot.is_field():
            return slot
        if checked:
            from .Err import UnknownSlotErr
            raise UnknownSlotErr.make(f"{self._qname}.{name} is not a field")
        return None

    def methods(self):
        """Return all methods in declared order."""
        self._reflect()
        return list(self._method_list)

    def method(self, name, checked=True):
        """Find method by name.

        Raises:
            UnknownSlotErr: If checked and there is no method with that name
        """
        slot = self.slot(name, checked)
        if slot is None:
            return None
        if slot.is_method():
            return slot
        if checked:
            from .Err import UnknownSlotErr
            raise UnknownSlotErr.make(f"{self._qname}.{name} is not a method")
        return None

    def __eq__(self, other):
        if isinstance(other, Type):
            return self._cls_ref == other._cls_ref
        return False

    def __hash__(self):
        return hash(self._cls_ref)

    def __repr__(self):
        return f"Type({self._qname})"
