#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import concurrent.futures
import inspect

from .Err import ArgErr, CastErr
from .Future import Future, ValueFuture
from .Log import Log
from .MethodAccessors import MethodAccessors
from .ObjUtil import ObjUtil
from .PropertyAccessors import PropertyAccessors


class AsyncReflection:
    """Shortcuts for invoking asynchronous methods by name and unwrapping
    their results.

    An asynchronous method returns one of:
    - a Future or ValueFuture
    - an awaitable, e.g. the coroutine of an ``async def`` method
    - a concurrent.futures.Future

    Every call blocks the calling thread until the handle is complete.
    There is no timeout: a handle which never completes blocks forever.
    """

    @staticmethod
    def invoke_async_action(instance, name, args=None):
        """Invoke the named method and wait for its future to complete.

        Raises:
            ArgErr: If instance or name is None
            UnknownSlotErr: If the object has no method with the given name
            CastErr: If the method does not return a future or awaitable
            CancelledErr: If the future was cancelled

        The exception of a failed computation is raised unchanged.
        """
        handle = AsyncReflection._invoke(instance, name, args)
        handle.join()

    @staticmethod
    def invoke_async_func(instance, name, args=None):
        """Invoke the named method, wait for its future and return its result.

        Raises:
            ArgErr: If instance or name is None
            UnknownSlotErr: If the object has no method with the given name,
                or its future produces no result
            CastErr: If the method does not return a future or awaitable
        """
        handle = AsyncReflection._invoke(instance, name, args)
        handle.wait_for()
        return AsyncReflection.unwrap(handle)

    @staticmethod
    def invoke_async_func_typed(instance, name, args, returns):
        """Like invoke_async_func, then coerce the result to ``returns``.

        Raises:
            CastErr: If the result does not fit ``returns``
        """
        result = AsyncReflection.invoke_async_func(instance, name, args)
        return AsyncReflection._coerce_result(result, returns)

    @staticmethod
    def unwrap(handle):
        """Wait for an already obtained future and read its ``result``.

        Raises:
            ArgErr: If handle is None
            UnknownSlotErr: If the handle has no result slot (a void Future)

        Reading the result of a failed future raises its exception.
        """
        if handle is None:
            raise ArgErr.make("Cannot read the result of a None future")
        if isinstance(handle, concurrent.futures.Future) or inspect.isawaitable(handle):
            handle = AsyncReflection.to_future(handle, "unwrap")
        if isinstance(handle, Future):
            handle.wait_for()
        return PropertyAccessors.get(handle, "result")

    @staticmethod
    def unwrap_typed(handle, returns):
        """Like unwrap, then coerce the result to ``returns``."""
        result = AsyncReflection.unwrap(handle)
        return AsyncReflection._coerce_result(result, returns)

    @staticmethod
    def _coerce_result(result, returns):
        try:
            return ObjUtil.coerce(result, returns)
        except CastErr as e:
            expected = ObjUtil.type_name(returns)
            msg = f"The future's result is not of type '{expected}' (got '{e.actual}')"
            Log.get("quickreflect").warn(msg)
            raise CastErr.make_mismatch(msg, e, name="result", actual=e.actual, expected=expected) from e

    @staticmethod
    def _invoke(instance, name, args):
        returned = MethodAccessors.invoke(instance, name, args)
        return AsyncReflection.to_future(returned, name)

    @staticmethod
    def to_future(returned, name):
        """Adapt the return value of an asynchronous method to a Future.

        Raises:
            CastErr: If the value is not a future or awaitable
        """
        if isinstance(returned, Future):
            return returned
        if isinstance(returned, concurrent.futures.Future):
            return ValueFuture.from_concurrent(returned)
        if inspect.isawaitable(returned):
            return ValueFuture.from_awaitable(returned)

        actual = ObjUtil.typeof_name(returned)
        expected = ObjUtil.type_name(Future)
        raise CastErr.make_mismatch(
            f"Method '{name}' returned {actual}, not a future or awaitable",
            name=name, actual=actual, expected=expected)
