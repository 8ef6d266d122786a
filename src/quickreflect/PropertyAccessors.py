#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from concurrent.futures import ThreadPoolExecutor

from .Env import Env
from .Err import ArgErr, CastErr
from .Log import Log
from .MemberResolver import MemberResolver
from .ObjUtil import ObjUtil
from .PropertyFacetsPair import PropertyFacetsPair
from .PropertyValuePair import PropertyValuePair
from .Type import Type


class PropertyAccessors:
    """Shortcuts for accessing the properties of an object by name."""

    @staticmethod
    def get(instance, name):
        """Return the value of the named property.

        Args:
            instance: Object the value is read from
            name: Property whose value is read

        Returns:
            The current value (may be None)

        Raises:
            ArgErr: If instance or name is None
            UnknownSlotErr: If there is no such property on the object
        """
        field = MemberResolver.resolve(instance, name, MemberResolver.FIELD)
        return field.get(instance)

    @staticmethod
    def get_typed(instance, name, returns):
        """Return the value of the named property coerced to ``returns``.

        Raises:
            CastErr: If the value does not fit ``returns``
        """
        value = PropertyAccessors.get(instance, name)
        try:
            return ObjUtil.coerce(value, returns)
        except CastErr as e:
            expected = ObjUtil.type_name(returns)
            msg = (f"Property '{name}' of object of type '{ObjUtil.typeof_name(instance)}' "
                   f"is not a value of type '{expected}' (got '{e.actual}')")
            Log.get("quickreflect").warn(msg)
            raise CastErr.make_mismatch(msg, e, name=name, actual=e.actual, expected=expected) from e

    @staticmethod
    def set(instance, name, value):
        """Assign value to the named property.

        Raises:
            ArgErr: If instance or name is None
            UnknownSlotErr: If there is no such property on the object
            ReadonlyErr: If the property cannot be written
        """
        field = MemberResolver.resolve(instance, name, MemberResolver.FIELD)
        field.set_(instance, value)

    @staticmethod
    def get_all_non_empty(instance):
        """Read every property whose value is not None.

        Returns:
            List of PropertyValuePair in declared property order
        """
        if instance is None:
            raise ArgErr.make("Cannot read properties from a None object")

        pairs = (PropertyValuePair.from_field(instance, f) for f in Type.of(instance).fields())
        return [pair for pair in pairs if pair.value is not None]

    @staticmethod
    def set_all_by_type(instance, value):
        """Assign value to every property whose declared type is type(value).

        Existing values are overwritten. Assignments run concurrently on a
        thread pool sized by the 'max.threads' config; every matching
        property is attempted and the first failure in declared order is
        raised afterwards.

        Raises:
            ArgErr: If instance or value is None (checked before assigning)
            ReadonlyErr: If a matching property cannot be written
        """
        if instance is None:
            raise ArgErr.make("Cannot set properties of a None object")
        if value is None:
            raise ArgErr.make("Cannot set values to None via set_all_by_type")

        value_type = type(value)
        targets = [f for f in Type.of(instance).fields() if f.type() is value_type]
        if not targets:
            return

        log = Log.get("quickreflect")
        if log.is_debug():
            log.debug(f"Setting {len(targets)} {ObjUtil.type_name(value_type)} properties on "
                      f"{ObjUtil.typeof_name(instance)}")

        max_threads = max(1, Env.cur().config_int("max.threads", 8))
        with ThreadPoolExecutor(max_workers=min(max_threads, len(targets)),
                                thread_name_prefix="quickreflect") as executor:
            futures = [executor.submit(f.set_, instance, value) for f in targets]
        for future in futures:
            future.result()

    @staticmethod
    def get_marked(instance, facet_type):
        """Find the properties carrying facets of the given facet type.

        Args:
            instance: Object whose type is searched
            facet_type: Facet class to look for (subclasses match)

        Returns:
            List of PropertyFacetsPair in declared property order; facets in
            declaration order, duplicates kept
        """
        if instance is None:
            raise ArgErr.make("Cannot read properties from a None object")
        if facet_type is None:
            raise ArgErr.make("Cannot look up facets without a facet type")

        return PropertyFacetsPair.from_fields(Type.of(instance).fields(), facet_type)
