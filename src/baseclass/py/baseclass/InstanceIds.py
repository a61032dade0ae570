#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import weakref

from .Obj import Obj


class InstanceIds(Obj):
    """Identity-keyed side table of per-class instance sequence numbers.

    Entries are keyed by id() rather than by the instance itself, so user
    defined __eq__/__hash__ on instances never affect lookup, and the table
    holds no strong reference: a weakref.finalize drops the entry when the
    instance is collected.
    """

    _instance = None

    def __init__(self):
        super().__init__()
        self._ids = {}

    @staticmethod
    def cur():
        if InstanceIds._instance is None:
            InstanceIds._instance = InstanceIds()
        return InstanceIds._instance

    def set(self, inst, n):
        key = id(inst)
        if key not in self._ids:
            weakref.finalize(inst, self._ids.pop, key, None)
        self._ids[key] = n

    def get(self, inst):
        """Sequence number for inst, or None if none was assigned"""
        return self._ids.get(id(inst))

    def size(self):
        return len(self._ids)
