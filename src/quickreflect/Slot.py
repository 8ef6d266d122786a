#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#


class Slot:
    """Base class for Field and Method reflection."""

    def __init__(self, parent=None, name="", facets=None):
        self._parent = parent
        self._name = name
        self._facets = list(facets) if facets is not None else []

    def parent(self):
        """Get declaring type."""
        return self._parent

    def name(self):
        """Get slot name."""
        return self._name

    def qname(self):
        """Get qualified name (module::Type.slotName)."""
        if self._parent:
            return f"{self._parent.qname()}.{self._name}"
        return self._name

    def is_field(self):
        return False

    def is_method(self):
        return False

    def facets(self, facet_type=None):
        """Return the facets declared on this slot, in declaration order.

        Args:
            facet_type: If given, only facets which are instances of this type

        Returns:
            List of facet instances (may contain duplicates)
        """
        if facet_type is None:
            return list(self._facets)
        return [f for f in self._facets if isinstance(f, facet_type)]

    def has_facet(self, facet_type):
        return any(isinstance(f, facet_type) for f in self._facets)

    def to_str(self):
        return self.qname()

    def __repr__(self):
        return self.to_str()
