#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

class Obj:
    """Base class for runtime support objects.

    Class handles and instances produced by the object model do NOT extend
    Obj: their attribute namespace belongs to user members only.
    """

    _hash_counter = 0

    def __init__(self):
        Obj._hash_counter += 1
        self._hash = Obj._hash_counter

    def equals(self, that):
        return self is that

    def hash(self):
        # Lazily initialize _hash if not set (subclasses may not call super().__init__())
        if not hasattr(self, '_hash'):
            Obj._hash_counter += 1
            self._hash = Obj._hash_counter
        return self._hash

    def qname(self):
        """Qualified runtime name, e.g. 'baseclass::Env'"""
        return f"baseclass::{type(self).__name__}"

    def toStr(self):
        return f"{type(self).__name__}@{self.hash()}"

    def __str__(self):
        return self.toStr()

    def __repr__(self):
        return self.toStr()

    def __eq__(self, other):
        return self.equals(other)

    def __hash__(self):
        return self.hash()
