#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Obj import Obj


class ClassKind(Obj):
    """ClassKind distinguishes root classes from derived subclasses.

    The kind name doubles as the display prefix: Class<A>, Subclass<B, A>.
    """

    _root = None
    _derived = None

    def __init__(self, name, ordinal):
        self._name = name
        self._ordinal = ordinal

    @staticmethod
    def root():
        """Class defined from a members mapping (or nothing)."""
        if ClassKind._root is None:
            ClassKind._root = ClassKind("Class", 0)
        return ClassKind._root

    @staticmethod
    def derived():
        """Class defined with a base class."""
        if ClassKind._derived is None:
            ClassKind._derived = ClassKind("Subclass", 1)
        return ClassKind._derived

    @staticmethod
    def vals():
        return [ClassKind.root(), ClassKind.derived()]

    def name(self):
        return self._name

    def ordinal(self):
        return self._ordinal

    def isRoot(self):
        return self is ClassKind.root()

    def toStr(self):
        return self._name

    def equals(self, other):
        return self is other

    def hash(self):
        return hash(self._name)
