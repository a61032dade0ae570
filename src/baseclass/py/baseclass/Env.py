#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import os

from .Obj import Obj


class Env(Obj):
    """Runtime configuration read from environment variables.

    Recognised variables:
        BASECLASS_PRINT_INSTANCE_IDS  - enable Instance<Name#N> display
        BASECLASS_LOG_LEVEL           - initial level of the runtime log
    """

    _instance = None

    _TRUE_STRS = {"true", "1", "yes", "on"}

    def __init__(self, vars=None):
        super().__init__()
        self._vars = dict(os.environ if vars is None else vars)
        self._printInstanceIds = self._bool("BASECLASS_PRINT_INSTANCE_IDS")

    @staticmethod
    def cur():
        if Env._instance is None:
            Env._instance = Env()
        return Env._instance

    def vars(self):
        """Get a copy of the variables this Env was created from"""
        return dict(self._vars)

    def get(self, name, def_=None):
        return self._vars.get(name, def_)

    def _bool(self, name):
        val = self._vars.get(name)
        if val is None:
            return False
        return val.strip().lower() in Env._TRUE_STRS

    def printInstanceIds(self, val=None):
        """Get or set identity display - env.printInstanceIds() or env.printInstanceIds(True)"""
        if val is None:
            return self._printInstanceIds
        self._printInstanceIds = bool(val)
        return None

    def logLevel(self):
        """Initial LogLevel for the runtime log; unknown names fall back to info"""
        from .Log import LogLevel
        name = self._vars.get("BASECLASS_LOG_LEVEL")
        if not name:
            return LogLevel.info()
        return LogLevel.fromStr(name.strip(), False) or LogLevel.info()

    def toStr(self):
        return f"Env(printInstanceIds={self._printInstanceIds})"
