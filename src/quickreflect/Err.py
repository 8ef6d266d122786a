#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#


class Err(Exception):
    """Base error class"""

    def __init__(self, msg=None, cause=None):
        Exception.__init__(self, msg)
        self._msg = msg
        self._cause = cause
        if cause is not None:
            self.__cause__ = cause

    @classmethod
    def make(cls, msg=None, cause=None):
        """Factory method - creates instance of the calling class"""
        return cls(msg, cause)

    def msg(self):
        return self._msg if self._msg is not None else ""

    def cause(self):
        return self._cause

    def to_str(self):
        name = type(self).__name__
        if self._msg:
            return f"{name}: {self._msg}"
        return name

    def trace_to_str(self):
        """Return stack trace as string"""
        import traceback

        s = self.to_str()

        tb = getattr(self, '__traceback__', None)
        if tb:
            lines = traceback.format_tb(tb)
            s += "\n" + "".join(lines)

        if self._cause:
            if hasattr(self._cause, 'trace_to_str'):
                s += "\n  Caused by: " + self._cause.trace_to_str()
            else:
                s += f"\n  Caused by: {self._cause!r}"

        return s

    def __str__(self):
        return self.to_str()


class ArgErr(Err):
    """Argument error - a required argument was missing or invalid"""
    pass


class CastErr(Err):
    """Cast error - thrown when a value cannot be coerced to a requested type.

    The optional ``name``, ``actual`` and ``expected`` attributes describe the
    member whose value failed to coerce and both type names involved.
    """

    def __init__(self, msg=None, cause=None, name=None, actual=None, expected=None):
        super().__init__(msg, cause)
        self.name = name
        self.actual = actual
        self.expected = expected

    @classmethod
    def make_mismatch(cls, msg, cause=None, name=None, actual=None, expected=None):
        """Create a CastErr carrying the member name and both type names."""
        return cls(msg, cause, name=name, actual=actual, expected=expected)


class UnknownSlotErr(Err):
    """Unknown slot error - thrown when slot lookup fails"""
    pass


class ReadonlyErr(Err):
    """Modification of read-only data error"""
    pass


class CancelledErr(Err):
    """Cancelled operation error"""
    pass


class TimeoutErr(Err):
    """Timeout error"""
    pass


class NotCompleteErr(Err):
    """Not complete error - thrown when Future is still pending"""
    pass
