#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Err import ImmutableRelationErr


def _isDunder(key):
    return len(key) > 4 and key.startswith("__") and key.endswith("__")


class Instance:
    """Base type of every instance view.

    Each class gets one subtype of Instance (see makeView), shared by all of
    its instances. The instance __dict__ is the backing store and holds only
    the fields constructors or later writes put there. Reads that miss the
    backing store fall through to __getattr__, which resolves the name up
    the class chain; functions found there are bound to the instance.
    """

    __descriptor__ = None

    def __getattr__(self, key):
        desc = type(self).__descriptor__
        if key == "super":
            return desc.parent()
        found, val = desc.lookup(key)
        if found:
            getter = getattr(type(val), "__get__", None)
            if getter is not None:
                return getter(val, self, type(self))
            return val
        if _isDunder(key):
            raise AttributeError(key)
        return None

    def __setattr__(self, key, val):
        if key == "super":
            raise ImmutableRelationErr("Cannot set 'super' on an instance")
        self.__dict__[key] = val

    def __delattr__(self, key):
        if key == "super":
            raise ImmutableRelationErr("Cannot set 'super' on an instance")
        try:
            del self.__dict__[key]
        except KeyError:
            raise AttributeError(key) from None

    def __str__(self):
        return type(self).__descriptor__.instanceStr(self)

    def __repr__(self):
        return type(self).__descriptor__.instanceStr(self)


def makeView(desc):
    """Build the shared instance view type for a class descriptor.

    Kept off the Instance namespace so it can never shadow a member.
    """
    return type(f"Instance<{desc.name()}>", (Instance,), {
        "__descriptor__": desc,
        "__module__": Instance.__module__,
    })
