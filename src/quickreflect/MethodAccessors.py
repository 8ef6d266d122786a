#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Err import CastErr
from .Log import Log
from .MemberResolver import MemberResolver
from .ObjUtil import ObjUtil


class MethodAccessors:
    """Shortcuts for invoking methods of an object by name."""

    @staticmethod
    def invoke_action(instance, name, args=None):
        """Invoke the named method and discard its return value.

        Raises:
            ArgErr: If instance or name is None
            UnknownSlotErr: If the object has no method with the given name
        """
        MethodAccessors.invoke(instance, name, args)

    @staticmethod
    def invoke(instance, name, args=None):
        """Invoke the named method and return exactly what it returns.

        Args:
            instance: Object whose method is invoked
            name: Name of the method
            args: Positional arguments passed to the method (None for none)

        Returns:
            Return value of the method

        Raises:
            ArgErr: If instance or name is None
            UnknownSlotErr: If the object has no method with the given name

        Anything raised by the method itself propagates unchanged, including
        the TypeError of a mismatched argument list.
        """
        method = MemberResolver.resolve(instance, name, MemberResolver.METHOD)
        log = Log.get("quickreflect")
        if log.is_debug():
            log.debug(f"Invoking {method.qname()} with {0 if args is None else len(args)} args")
        return method.call_on(instance, args)

    @staticmethod
    def invoke_typed(instance, name, args, returns):
        """Invoke the named method and coerce its return value.

        Args:
            instance: Object whose method is invoked
            name: Name of the method
            args: Positional arguments passed to the method (None for none)
            returns: Class or type hint the return value must fit

        Returns:
            The return value, unchanged, once it is known to fit ``returns``

        Raises:
            ArgErr: If instance or name is None
            UnknownSlotErr: If the object has no method with the given name
            CastErr: If the return value does not fit ``returns``
        """
        result = MethodAccessors.invoke(instance, name, args)
        try:
            return ObjUtil.coerce(result, returns)
        except CastErr as e:
            expected = ObjUtil.type_name(returns)
            msg = (f"Method '{name}' of object of type '{ObjUtil.typeof_name(instance)}' "
                   f"does not return a value of type '{expected}' (got '{e.actual}')")
            Log.get("quickreflect").warn(msg)
            raise CastErr.make_mismatch(msg, e, name=name, actual=e.actual, expected=expected) from e
