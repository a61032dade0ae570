#
# LogRec - Log record for the baseclass runtime
#
from .Obj import Obj


class LogRec(Obj):
    """
    LogRec represents a single log record.
    """

    def __init__(self, time, level, log_name, message, err=None):
        super().__init__()
        self._time = time
        self._level = level
        self._log_name = log_name
        self._msg = message
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

    def toStr(self):
        return f"[{self._level.name()}] [{self._log_name}] {self._msg}"
