#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Obj import Obj


class ClassRegistry(Obj):
    """Name -> class handle table.

    Append-only: a name once added maps to the same handle for the lifetime
    of the registry. ClassRegistry.cur() is the process-wide default; pass a
    fresh registry to BaseClass for an isolated namespace.
    """

    _instance = None

    def __init__(self):
        super().__init__()
        self._classes = {}

    @staticmethod
    def cur():
        if ClassRegistry._instance is None:
            ClassRegistry._instance = ClassRegistry()
        return ClassRegistry._instance

    def find(self, name, checked=True):
        """Find class handle by name"""
        handle = self._classes.get(name)
        if handle is not None:
            return handle
        if checked:
            from .Err import UnknownClassErr
            raise UnknownClassErr(f"Unknown class: {name}")
        return None

    def has(self, name):
        return name in self._classes

    def add(self, name, handle):
        if name in self._classes:
            from .Err import DuplicateDefinitionErr
            raise DuplicateDefinitionErr(f"Class '{name}' already exists; duplicate definition not allowed")
        self._classes[name] = handle
        return handle

    def names(self):
        return sorted(self._classes.keys())

    def size(self):
        return len(self._classes)

    def __contains__(self, name):
        return name in self._classes

    def __len__(self):
        return len(self._classes)

    def toStr(self):
        return f"ClassRegistry({', '.join(self.names())})"
