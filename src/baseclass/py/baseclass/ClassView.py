#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Err import ImmutableRelationErr
from .MetaForward import MetaForward
from .Instance import _isDunder


class ClassView:
    """Base type of every class handle.

    A handle is both a namespace of members and a constructor. Its own
    __dict__ is the member table, so Python's normal lookup finds own
    members first; __getattr__ only runs on a miss and continues the walk
    from the parent. Calling the handle constructs an instance.
    """

    __descriptor__ = None

    def __getattr__(self, key):
        desc = type(self).__descriptor__
        if key == "super":
            return desc.parent()
        if desc.parent() is not None:
            found, val = desc.lookup(key, desc.parent())
            if found:
                return val
        if _isDunder(key):
            raise AttributeError(key)
        return None

    def __setattr__(self, key, val):
        if key == "super":
            raise ImmutableRelationErr("Cannot set 'super' on a class")
        self.__dict__[key] = val
        MetaForward.sync(type(self).__descriptor__, key, val)

    def __delattr__(self, key):
        if key == "super":
            raise ImmutableRelationErr("Cannot set 'super' on a class")
        try:
            del self.__dict__[key]
        except KeyError:
            raise AttributeError(key) from None
        MetaForward.drop(type(self).__descriptor__, key)

    def __call__(self, *args, **kwargs):
        return type(self).__descriptor__.make(args, kwargs)

    def __str__(self):
        return type(self).__descriptor__.toStr()

    def __repr__(self):
        return type(self).__descriptor__.toStr()


def make(desc):
    """Create the handle for desc, typed by its own ClassView subtype"""
    view = type(f"ClassView<{desc.name()}>", (ClassView,), {
        "__descriptor__": desc,
        "__module__": ClassView.__module__,
    })
    handle = object.__new__(view)
    desc._handle = handle
    return handle
