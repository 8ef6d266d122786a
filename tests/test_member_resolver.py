"""
Unit tests for MemberResolver

Name lookup of fields and methods on an object's runtime type.
"""

from typing import Optional

import pytest

from quickreflect import ArgErr, Field, MemberResolver, Method, UnknownSlotErr


class Resolvable:
    label: Optional[str] = "x"

    def run(self):
        return "ran"


class TestResolve:

    def test_none_instance(self):
        """Should reject a None instance before any lookup"""
        with pytest.raises(ArgErr):
            MemberResolver.resolve(None, "label")

    def test_none_name(self):
        """Should reject a None name"""
        with pytest.raises(ArgErr):
            MemberResolver.resolve(Resolvable(), None)

    def test_unknown_kind(self):
        with pytest.raises(ArgErr):
            MemberResolver.resolve(Resolvable(), "label", "constructor")

    def test_resolves_field(self):
        slot = MemberResolver.resolve(Resolvable(), "label", MemberResolver.FIELD)
        assert isinstance(slot, Field)
        assert slot.name() == "label"

    def test_resolves_method(self):
        slot = MemberResolver.resolve(Resolvable(), "run", MemberResolver.METHOD)
        assert isinstance(slot, Method)
        assert slot.call_on(Resolvable()) == "ran"

    def test_any_kind(self):
        assert MemberResolver.resolve(Resolvable(), "run").is_method()
        assert MemberResolver.resolve(Resolvable(), "label").is_field()

    def test_not_found_names_type_and_member(self):
        """Should name both the member and the type when nothing matches"""
        with pytest.raises(UnknownSlotErr) as exc:
            MemberResolver.resolve(Resolvable(), "missing")
        assert "Resolvable" in str(exc.value)
        assert "missing" in str(exc.value)

    def test_case_sensitive(self):
        with pytest.raises(UnknownSlotErr):
            MemberResolver.resolve(Resolvable(), "Run")

    def test_wrong_kind_is_not_found(self):
        with pytest.raises(UnknownSlotErr):
            MemberResolver.resolve(Resolvable(), "run", MemberResolver.FIELD)
        with pytest.raises(UnknownSlotErr):
            MemberResolver.resolve(Resolvable(), "label", MemberResolver.METHOD)

    def test_private_members_are_hidden(self):
        with pytest.raises(UnknownSlotErr):
            MemberResolver.resolve(Resolvable(), "__init__")

    def test_builtin_instance(self):
        """Should resolve methods of builtin types too"""
        method = MemberResolver.resolve("abc", "upper", MemberResolver.METHOD)
        assert method.call_on("abc") == "ABC"
