#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Obj import Obj


class Err(Exception, Obj):
    """Base error class"""

    def __init__(self, msg=None, cause=None):
        Exception.__init__(self, msg)
        Obj.__init__(self)
        self._msg = msg
        self._cause = cause

    @classmethod
    def make(cls, msg=None, cause=None):
        """Factory method - creates instance of the calling class"""
        return cls(msg, cause)

    def msg(self):
        # Empty string when no message provided, never None
        return self._msg if self._msg is not None else ""

    def cause(self):
        return self._cause

    def toStr(self):
        if self._msg:
            return f"{self.qname()}: {self._msg}"
        return self.qname()

    def traceToStr(self):
        """Return stack trace as string"""
        import traceback

        s = self.toStr()

        tb = getattr(self, '__traceback__', None)
        if tb:
            lines = traceback.format_tb(tb)
            s += "\n" + "".join(lines)

        if self._cause:
            if hasattr(self._cause, 'traceToStr'):
                s += "\n  Caused by: " + self._cause.traceToStr()
            else:
                s += f"\n  Caused by: {self._cause}"

        return s

    def __str__(self):
        return self.toStr()


class ArgErr(Err):
    """Argument error - bad class name, second argument or member key"""
    pass


class NameErr(Err):
    """Invalid name error"""
    pass


class DuplicateDefinitionErr(Err):
    """Registered class name redefined with a base or members argument"""
    pass


class UnknownClassErr(Err):
    """Unknown class error - thrown when a checked registry lookup fails"""
    pass


class ReadonlyErr(Err):
    """Modification of read-only data error"""
    pass


class ImmutableRelationErr(ReadonlyErr):
    """Write or delete of the reserved 'super' relation"""
    pass
