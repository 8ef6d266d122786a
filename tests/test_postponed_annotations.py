"""
Reflection of classes declared under postponed annotation evaluation,
where some annotations name types that only exist for type checkers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Optional

from quickreflect import Facet, PropertyAccessors, Type

if TYPE_CHECKING:
    from decimal import Decimal


class Marker(Facet):
    def __init__(self, value):
        self.value = value


class Order:
    title: Optional[str] = None
    label: Annotated[str, Marker(1)] = "l"
    price: Optional[Decimal] = None
    quantity: int = 1

    @property
    def total(self) -> int:
        return self.quantity * 2


class TestPostponedAnnotations:

    def test_resolvable_annotations_are_evaluated(self):
        t = Type.find(Order)
        assert t.field("title").type() is str
        assert t.field("title").is_nullable()
        assert t.field("label").type() is str
        assert t.field("quantity").type() is int
        assert t.field("total").type() is int

    def test_unresolvable_annotation_stays_a_string(self):
        assert Type.find(Order).field("price").type() == "Optional[Decimal]"

    def test_set_all_by_type(self):
        obj = Order()
        PropertyAccessors.set_all_by_type(obj, "z")
        assert obj.title == "z"
        assert obj.label == "z"
        assert obj.price is None
        assert obj.quantity == 1

    def test_get_marked(self):
        pairs = PropertyAccessors.get_marked(Order(), Marker)
        assert [(p.property.name(), [m.value for m in p.facets]) for p in pairs] == [("label", [1])]
