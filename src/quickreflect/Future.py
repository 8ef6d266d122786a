#
# quickreflect::Future
# Handle on the result of an asynchronous computation
#

import asyncio
import threading
import time

from .Err import Err, ArgErr, CancelledErr, NotCompleteErr, TimeoutErr
from .FutureStatus import FutureStatus


class Future:
    """
    Future is a handle on an asynchronous computation which produces no
    value. It moves from pending to exactly one of ok, err or cancelled.
    Waiting is blocking; a None timeout blocks forever.

    Use ValueFuture for computations which produce a value.
    """

    # State constants
    PENDING = 0x00
    DONE = 0x0F
    DONE_CANCEL = 0x1F
    DONE_OK = 0x2F
    DONE_ERR = 0x4F

    def __init__(self):
        self._state = Future.PENDING
        self._result = None  # Result or exception of processing
        self._lock = threading.Lock()
        self._condition = threading.Condition(self._lock)

    def status(self):
        """Return current status of this future"""
        name = _STATUS_NAMES.get(self._state)
        if name is None:
            raise Err.make(f"Internal error: unknown state {self._state}")
        return FutureStatus.from_str(name)

    def is_done(self):
        return self.status().is_complete()

    def is_cancelled(self):
        return self.status().is_cancelled()

    def wait_for(self, timeout=None):
        """
        Block until this future transitions to a completed state.
        If timeout is None then block forever, otherwise raise TimeoutErr
        if timeout (seconds) elapses. Return this.
        """
        with self._condition:
            if timeout is None:
                while (self._state & Future.DONE) == 0:
                    self._condition.wait()
            else:
                deadline = time.monotonic() + timeout
                while (self._state & Future.DONE) == 0:
                    left = deadline - time.monotonic()
                    if left <= 0:
                        raise TimeoutErr.make("Future.wait_for timed out")
                    self._condition.wait(timeout=left)
        return self

    def join(self, timeout=None):
        """
        Block until complete, then raise the computation's exception if it
        failed or CancelledErr if it was cancelled. Return this.
        """
        self.wait_for(timeout)
        if self._state == Future.DONE_ERR:
            raise self._result
        if self._state == Future.DONE_CANCEL:
            raise CancelledErr.make("Future cancelled")
        return self

    def err(self):
        """
        Return the exception raised by the asynchronous computation or None
        if the future completed successfully. This method can only be used
        after completion, otherwise raise NotCompleteErr.
        """
        state = self._state
        if state == Future.DONE_OK:
            return None
        elif state == Future.DONE_ERR:
            return self._result
        elif state == Future.DONE_CANCEL:
            return CancelledErr.make("Future cancelled")
        raise NotCompleteErr.make("Future is pending")

    def cancel(self):
        """Cancel this computation if it has not completed yet."""
        with self._condition:
            if (self._state & Future.DONE) == 0:
                self._state = Future.DONE_CANCEL
                self._result = None
            self._condition.notify_all()

    def complete(self):
        """
        Complete the future successfully. Raise Err if the future is
        already complete (ignore this call if cancelled). Return this.
        """
        return self._complete(Future.DONE_OK, None)

    def complete_err(self, err):
        """
        Complete the future with a failure condition using given exception.
        Raise Err if the future is already complete (ignore this call if
        cancelled). Return this.
        """
        if not isinstance(err, BaseException):
            raise ArgErr.make(f"Future can only fail with an exception, not {type(err).__name__}")
        return self._complete(Future.DONE_ERR, err)

    def _complete(self, state, result):
        with self._condition:
            if self._state == Future.DONE_CANCEL:
                return self
            if self._state != Future.PENDING:
                raise Err.make("Future already complete")
            self._state = state
            self._result = result
            self._condition.notify_all()
        return self

    def __repr__(self):
        return f"{type(self).__name__}({self.status()})"


class ValueFuture(Future):
    """
    Future for a computation which produces a value. The produced value is
    exposed through the read-only ``result`` property once complete.
    """

    @property
    def result(self) -> object:
        """
        The produced value. Raise NotCompleteErr while pending, the
        computation's exception if it failed, CancelledErr if cancelled.
        """
        state = self._state
        if state == Future.DONE_OK:
            return self._result
        if state == Future.DONE_ERR:
            raise self._result
        if state == Future.DONE_CANCEL:
            raise CancelledErr.make("Future cancelled")
        raise NotCompleteErr.make("Future is pending")

    def complete(self, result=None):
        """
        Complete the future successfully with given value. Raise Err if the
        future is already complete (ignore this call if cancelled).
        Return this.
        """
        return self._complete(Future.DONE_OK, result)

    def get(self, timeout=None):
        """
        Block current thread until result is ready. If the computation
        failed its exception is raised to the caller.
        """
        self.wait_for(timeout)
        return self.result

    @staticmethod
    def spawn(func, *args):
        """Run func(*args) on a daemon thread and return its future."""
        future = ValueFuture()

        def run():
            try:
                future.complete(func(*args))
            except BaseException as e:
                future.complete_err(e)

        name = getattr(func, "__name__", "func")
        threading.Thread(target=run, name=f"quickreflect-{name}", daemon=True).start()
        return future

    @staticmethod
    def from_awaitable(awaitable):
        """
        Drive an awaitable (typically the coroutine returned by an async
        method) to completion on a private event loop in a daemon thread.
        """
        future = ValueFuture()

        async def drive():
            return await awaitable

        def run():
            try:
                future.complete(asyncio.run(drive()))
            except asyncio.CancelledError:
                future.cancel()
            except BaseException as e:
                future.complete_err(e)

        threading.Thread(target=run, name="quickreflect-await", daemon=True).start()
        return future

    @staticmethod
    def from_concurrent(cf):
        """Bridge a concurrent.futures.Future into a ValueFuture."""
        future = ValueFuture()

        def done(f):
            if f.cancelled():
                future.cancel()
            elif f.exception() is not None:
                future.complete_err(f.exception())
            else:
                future.complete(f.result())

        cf.add_done_callback(done)
        return future


_STATUS_NAMES = {
    Future.PENDING: "pending",
    Future.DONE_OK: "ok",
    Future.DONE_ERR: "err",
    Future.DONE_CANCEL: "cancelled",
}
