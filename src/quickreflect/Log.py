#
# Log - Logging support for quickreflect
#
import logging
import time
import threading


class LogLevel:
    """
    LogLevel represents the severity of a log message.
    """

    _levels = {}

    def __init__(self, name, ordinal, py_level):
        self._name = name
        self._ordinal = ordinal
        self._py_level = py_level

    @staticmethod
    def from_str(name, checked=True):
        """Parse LogLevel from string"""
        name_lower = name.lower()
        if name_lower in LogLevel._levels:
            return LogLevel._levels[name_lower]
        if checked:
            from .Err import ArgErr
            raise ArgErr.make(f"Unknown log level: {name}")
        return None

    @staticmethod
    def vals():
        """Get all log level values"""
        return [LogLevel.debug, LogLevel.info, LogLevel.warn, LogLevel.err, LogLevel.silent]

    def name(self):
        return self._name

    def ordinal(self):
        return self._ordinal

    def py_level(self):
        """Matching level of the standard logging module"""
        return self._py_level

    def __lt__(self, other):
        return self._ordinal < other._ordinal

    def __le__(self, other):
        return self._ordinal <= other._ordinal

    def __eq__(self, other):
        if not isinstance(other, LogLevel):
            return False
        return self._ordinal == other._ordinal

    def __hash__(self):
        return hash(self._ordinal)

    def __repr__(self):
        return f"LogLevel.{self._name}"


LogLevel.debug = LogLevel("debug", 0, logging.DEBUG)
LogLevel.info = LogLevel("info", 1, logging.INFO)
LogLevel.warn = LogLevel("warn", 2, logging.WARNING)
LogLevel.err = LogLevel("err", 3, logging.ERROR)
LogLevel.silent = LogLevel("silent", 4, logging.CRITICAL + 10)

for _level in LogLevel.vals():
    LogLevel._levels[_level.name()] = _level


class LogRec:
    """
    LogRec represents a single log record.
    """

    def __init__(self, time, level, log_name, msg, err=None):
        self._time = time
        self._level = level
        self._log_name = log_name
        self._msg = msg
        self._err = err

    def time(self):
        return self._time

    def level(self):
        return self._level

    def log_name(self):
        return self._log_name

    def msg(self):
        return self._msg

    def err(self):
        return self._err

    def to_str(self):
        return f"[{self._level.name()}] {self._log_name}: {self._msg}"

    def __repr__(self):
        return self.to_str()


class Log:
    """
    Named log which forwards to the standard logging module and to any
    registered record handlers.
    """

    _logs = {}
    _handlers = []
    _lock = threading.Lock()

    def __init__(self, name, level=None):
        self._name = name
        self._level = level if level is not None else Log._default_level()
        self._py_logger = logging.getLogger(name)

    @staticmethod
    def _default_level():
        from .Env import Env
        return LogLevel.from_str(Env.cur().config("log.level", "info"), False) or LogLevel.info

    @staticmethod
    def get(name):
        """Get or create a log by name"""
        with Log._lock:
            log = Log._logs.get(name)
            if log is None:
                log = Log(name)
                Log._logs[name] = log
            return log

    def name(self):
        return self._name

    def level(self, value=None):
        """Get or set log level - called as log.level() or log.level(new_level)"""
        if value is None:
            return self._level
        self._level = value
        return None

    def is_enabled(self, level):
        return level is not LogLevel.silent and level._ordinal >= self._level._ordinal

    def is_debug(self):
        return self.is_enabled(LogLevel.debug)

    def debug(self, msg, err=None):
        if self.is_enabled(LogLevel.debug):
            self._log(LogLevel.debug, msg, err)

    def info(self, msg, err=None):
        if self.is_enabled(LogLevel.info):
            self._log(LogLevel.info, msg, err)

    def warn(self, msg, err=None):
        if self.is_enabled(LogLevel.warn):
            self._log(LogLevel.warn, msg, err)

    def err(self, msg, err=None):
        if self.is_enabled(LogLevel.err):
            self._log(LogLevel.err, msg, err)

    def _log(self, level, msg, err):
        self.log(LogRec(time.time(), level, self._name, msg, err))

    def log(self, rec):
        """Log a record - can be overridden by subclasses"""
        for handler in list(Log._handlers):
            handler(rec)

        exc_info = rec._err if isinstance(rec._err, BaseException) else None
        self._py_logger.log(rec._level.py_level(), rec._msg, exc_info=exc_info)

    @staticmethod
    def handlers():
        """Get global log handlers"""
        return list(Log._handlers)

    @staticmethod
    def add_handler(handler):
        """Add a global log handler"""
        if not callable(handler):
            from .Err import ArgErr
            raise ArgErr.make("Log handler must be callable")
        Log._handlers.append(handler)

    @staticmethod
    def remove_handler(handler):
        """Remove a global log handler"""
        if handler in Log._handlers:
            Log._handlers.remove(handler)

    def __repr__(self):
        return f"Log({self._name})"
