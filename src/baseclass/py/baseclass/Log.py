#
# Log - Logging support for the baseclass runtime
#
import logging
from datetime import datetime

from .Obj import Obj
from .LogRec import LogRec


class LogLevel(Obj):
    """
    LogLevel represents the severity of a log message.
    """

    _levels = {}

    def __init__(self, name, ordinal):
        self._name = name
        self._ordinal = ordinal

    @staticmethod
    def fromStr(name, checked=True):
        """Parse LogLevel from string"""
        name_lower = name.lower()
        if name_lower in LogLevel._levels:
            return LogLevel._levels[name_lower]
        if checked:
            from .Err import ArgErr
            raise ArgErr(f"Unknown log level: {name}")
        return None

    @staticmethod
    def vals():
        """Get all log level values"""
        return [LogLevel._debug, LogLevel._info, LogLevel._warn, LogLevel._err, LogLevel._silent]

    @staticmethod
    def debug():
        return LogLevel._debug

    @staticmethod
    def info():
        return LogLevel._info

    @staticmethod
    def warn():
        return LogLevel._warn

    @staticmethod
    def err():
        return LogLevel._err

    @staticmethod
    def silent():
        return LogLevel._silent

    def name(self):
        return self._name

    def ordinal(self):
        return self._ordinal

    def toStr(self):
        return self._name

    def __lt__(self, other):
        return self._ordinal < other._ordinal

    def __le__(self, other):
        return self._ordinal <= other._ordinal

    def __gt__(self, other):
        return self._ordinal > other._ordinal

    def __ge__(self, other):
        return self._ordinal >= other._ordinal

    def __eq__(self, other):
        if not isinstance(other, LogLevel):
            return False
        return self._ordinal == other._ordinal

    def __hash__(self):
        return hash(self._ordinal)

    def hash(self):
        return hash(self._ordinal)


LogLevel._debug = LogLevel("debug", 0)
LogLevel._info = LogLevel("info", 1)
LogLevel._warn = LogLevel("warn", 2)
LogLevel._err = LogLevel("err", 3)
LogLevel._silent = LogLevel("silent", 4)

for _level in LogLevel.vals():
    LogLevel._levels[_level.name()] = _level


class Log(Obj):
    """
    Log provides named logging on top of the standard logging module.
    """

    _logs = {}
    _handlers = []  # Global handlers (static)

    _PY_LEVELS = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warn": logging.WARNING,
        "err": logging.ERROR,
    }

    def __init__(self, name, register=True):
        """Create a new log. If register=True, adds to global registry."""
        if not Log._isValidName(name):
            from .Err import NameErr
            raise NameErr(f"Invalid log name: {name}")

        if register and name in Log._logs:
            from .Err import ArgErr
            raise ArgErr(f"Log already registered: {name}")

        super().__init__()
        self._name = name
        self._level = LogLevel._info
        self._pyLogger = logging.getLogger(name)

        if register:
            Log._logs[name] = self

    @staticmethod
    def _isValidName(name):
        """Validate log name - must be valid identifier characters"""
        if not name:
            return False
        for c in name:
            if not (c.isalnum() or c == '.' or c == '_'):
                return False
        return True

    @staticmethod
    def get(name):
        """Get or create a log by name"""
        if name in Log._logs:
            return Log._logs[name]
        return Log(name, True)

    @staticmethod
    def find(name, checked=True):
        """Find a log by name"""
        if name in Log._logs:
            return Log._logs[name]
        if checked:
            from .Err import ArgErr
            raise ArgErr(f"Unknown log: {name}")
        return None

    def name(self):
        return self._name

    def level(self, value=None):
        """Get or set log level - called as log.level() or log.level(newLevel)"""
        if value is None:
            return self._level
        self._level = value
        return None

    def isEnabled(self, level):
        return level._ordinal >= self._level._ordinal

    def isDebug(self):
        return self.isEnabled(LogLevel._debug)

    def debug(self, msg, err=None):
        if self.isEnabled(LogLevel._debug):
            self._log(LogLevel._debug, msg, err)

    def info(self, msg, err=None):
        if self.isEnabled(LogLevel._info):
            self._log(LogLevel._info, msg, err)

    def warn(self, msg, err=None):
        if self.isEnabled(LogLevel._warn):
            self._log(LogLevel._warn, msg, err)

    def err(self, msg, err=None):
        if self.isEnabled(LogLevel._err):
            self._log(LogLevel._err, msg, err)

    def _log(self, level, msg, err):
        rec = LogRec(datetime.now(), level, self._name, msg, err)
        self.log(rec)

    def log(self, rec):
        """Log a record - can be overridden by subclasses"""
        for handler in list(Log._handlers):
            try:
                handler(rec)
            except Exception:
                self._pyLogger.exception("log handler failed: %r", handler)

        py_level = Log._PY_LEVELS.get(rec.level().name(), logging.INFO)
        self._pyLogger.log(py_level, rec.msg(), exc_info=rec.err())

    def toStr(self):
        return self._name

    @staticmethod
    def handlers():
        return list(Log._handlers)

    @staticmethod
    def addHandler(handler):
        """Add a global log handler, called with each LogRec"""
        if not callable(handler):
            from .Err import ArgErr
            raise ArgErr("Log handler must be callable")
        Log._handlers.append(handler)

    @staticmethod
    def removeHandler(handler):
        if handler in Log._handlers:
            Log._handlers.remove(handler)
