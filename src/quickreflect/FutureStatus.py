#
# quickreflect::FutureStatus
# State of a Future's asynchronous computation
#


class FutureStatus:
    """
    Status of a Future: pending until it settles into exactly one of
    ok, err or cancelled. Each status is a singleton, compare with ``is``.
    """

    _names = ("pending", "ok", "err", "cancelled")
    _by_name = {}

    def __init__(self, name):
        self._name = name
        self._ordinal = FutureStatus._names.index(name)

    def name(self):
        return self._name

    def ordinal(self):
        return self._ordinal

    def is_pending(self):
        return self is FutureStatus._by_name["pending"]

    def is_complete(self):
        """True for ok, err and cancelled"""
        return not self.is_pending()

    def is_ok(self):
        return self is FutureStatus._by_name["ok"]

    def is_err(self):
        return self is FutureStatus._by_name["err"]

    def is_cancelled(self):
        return self is FutureStatus._by_name["cancelled"]

    @staticmethod
    def from_str(name):
        return FutureStatus._by_name[name]

    @staticmethod
    def pending():
        return FutureStatus._by_name["pending"]

    @staticmethod
    def ok():
        return FutureStatus._by_name["ok"]

    @staticmethod
    def err():
        return FutureStatus._by_name["err"]

    @staticmethod
    def cancelled():
        return FutureStatus._by_name["cancelled"]

    @staticmethod
    def vals():
        return [FutureStatus._by_name[n] for n in FutureStatus._names]

    def __str__(self):
        return self._name

    def __repr__(self):
        return f"FutureStatus.{self._name}"


for _name in FutureStatus._names:
    FutureStatus._by_name[_name] = FutureStatus(_name)
