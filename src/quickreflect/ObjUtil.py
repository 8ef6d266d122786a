#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import types
import typing


_NONE_TYPE = type(None)


class ObjUtil:
    """Type naming, fit checks and explicit coercion for reflected values."""

    @staticmethod
    def type_name(type_):
        """Render a class or type hint as a readable name.

        Builtins render bare ('int'), other classes as 'module.Qualname',
        typing constructs as their repr.
        """
        if type_ is None:
            return "None"
        if isinstance(type_, type) and not typing.get_args(type_):
            if type_.__module__ == "builtins":
                return type_.__qualname__
            return f"{type_.__module__}.{type_.__qualname__}"
        return repr(type_)

    @staticmethod
    def typeof_name(obj):
        """Readable name of an object's runtime type."""
        return ObjUtil.type_name(type(obj))

    @staticmethod
    def is_union(type_):
        origin = typing.get_origin(type_)
        return origin is typing.Union or origin is types.UnionType

    @staticmethod
    def is_nullable(type_):
        """Return True if None fits the given hint."""
        if type_ is None or type_ is _NONE_TYPE or type_ is object or type_ is typing.Any:
            return True
        if typing.get_origin(type_) is typing.Annotated:
            return ObjUtil.is_nullable(typing.get_args(type_)[0])
        if ObjUtil.is_union(type_):
            return any(ObjUtil.is_nullable(a) for a in typing.get_args(type_))
        return False

    @staticmethod
    def declared_type(hint):
        """Strip Annotated and Optional wrappers from a declared type hint.

        Optional[str], str | None and Annotated[str | None, ...] all declare
        str. Unions of several non-None types are returned unchanged.
        """
        if hint is None:
            return object
        if typing.get_origin(hint) is typing.Annotated:
            hint = typing.get_args(hint)[0]
        if ObjUtil.is_union(hint):
            args = [a for a in typing.get_args(hint) if a is not _NONE_TYPE]
            if len(args) == 1:
                return ObjUtil.declared_type(args[0])
        return hint

    @staticmethod
    def fits(obj, type_):
        """Return True if obj is a value of the given class or type hint.

        Mirrors strict cast rules: bool does not fit int, int does not fit
        float, and None only fits nullable hints.
        """
        if type_ is object or type_ is typing.Any:
            return True
        if obj is None:
            return ObjUtil.is_nullable(type_)
        if type_ is None or type_ is _NONE_TYPE:
            return False

        origin = typing.get_origin(type_)
        if origin is typing.Annotated:
            return ObjUtil.fits(obj, typing.get_args(type_)[0])
        if ObjUtil.is_union(type_):
            return any(ObjUtil.fits(obj, a) for a in typing.get_args(type_))
        if origin is typing.Literal:
            return obj in typing.get_args(type_)
        if origin is not None:
            # Parameterized generic such as list[int] - check the container only
            type_ = origin

        if type_ is int and isinstance(obj, bool):
            return False
        try:
            return isinstance(obj, type_)
        except TypeError as e:
            from .Err import ArgErr
            raise ArgErr.make(f"Cannot check values against {ObjUtil.type_name(type_)}", e)

    @staticmethod
    def coerce(obj, type_):
        """Runtime coercion with error - raises CastErr if obj doesn't fit type_.

        Returns obj unchanged when it fits.
        """
        if ObjUtil.fits(obj, type_):
            return obj

        from .Err import CastErr
        actual = ObjUtil.typeof_name(obj)
        expected = ObjUtil.type_name(type_)
        raise CastErr.make_mismatch(f"{actual} cannot be cast to {expected}",
                                    actual=actual, expected=expected)
