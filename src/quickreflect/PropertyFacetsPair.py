#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#


class PropertyFacetsPair:
    """Pair of a Field and the facets of one facet type declared on it."""

    def __init__(self, prop, facets):
        self.property = prop
        self.facets = list(facets)

    @staticmethod
    def from_fields(fields, facet_type):
        """Pair each field with its facets of facet_type.

        Fields without a matching facet are left out; declared field order
        and facet declaration order are kept.
        """
        pairs = []
        for field in fields:
            facets = field.facets(facet_type)
            if facets:
                pairs.append(PropertyFacetsPair(field, facets))
        return pairs

    def __iter__(self):
        yield self.property
        yield self.facets

    def __repr__(self):
        return f"PropertyFacetsPair({self.property.name()}, {self.facets!r})"
