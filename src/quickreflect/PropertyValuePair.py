#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#


class PropertyValuePair:
    """Pair of a Field and its corresponding value on one object."""

    def __init__(self, prop, value):
        """Create a new PropertyValuePair.

        Args:
            prop: A Field of the object's type
            value: The value of this field on a certain object
        """
        self.property = prop
        self.value = value

    @staticmethod
    def from_field(obj, field):
        """Read field's current value from obj into a new pair."""
        return PropertyValuePair(field, field.get(obj))

    def __iter__(self):
        yield self.property
        yield self.value

    def __eq__(self, other):
        if not isinstance(other, PropertyValuePair):
            return NotImplemented
        return self.property is other.property and self.value == other.value

    def __repr__(self):
        return f"PropertyValuePair({self.property.name()}, {self.value!r})"
