#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Err import ArgErr
from .Type import Type


class MemberResolver:
    """Resolves a member name on an object's runtime type to its Slot."""

    SLOT = "slot"
    FIELD = "field"
    METHOD = "method"

    @staticmethod
    def resolve(instance, name, kind=SLOT):
        """Find the slot named ``name`` on the runtime type of ``instance``.

        Args:
            instance: Object whose type is searched
            name: Exact (case-sensitive) member name
            kind: MemberResolver.SLOT, FIELD or METHOD

        Returns:
            The matching Slot (a Field or Method)

        Raises:
            ArgErr: If instance or name is None, or kind is unknown
            UnknownSlotErr: If the type has no member of that kind and name
        """
        if instance is None:
            raise ArgErr.make(f"Cannot resolve {kind} '{name}' on a None object")
        if name is None:
            raise ArgErr.make(f"Cannot resolve a {kind} without a name (name was None)")

        lookup = _LOOKUPS.get(kind)
        if lookup is None:
            raise ArgErr.make(f"Unknown slot kind: {kind}")
        return lookup(Type.of(instance), name)


_LOOKUPS = {
    MemberResolver.SLOT: Type.slot,
    MemberResolver.FIELD: Type.field,
    MemberResolver.METHOD: Type.method,
}
