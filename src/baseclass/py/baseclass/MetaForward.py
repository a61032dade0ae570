#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Log import Log


class MetaForward:
    """Operator slots mirrored from a class onto its shared instance view.

    Python dispatches operators through special methods looked up on the
    instance's type, so forwarding a member means writing it onto the
    instance view type. Only the names below are ever forwarded.
    """

    # Equality / ordering
    _COMPARE = ("__eq__", "__ne__", "__lt__", "__le__", "__gt__", "__ge__", "__hash__")

    # Arithmetic; + also serves as concatenation
    _ARITH = ("add", "sub", "mul", "truediv", "floordiv", "mod", "pow", "matmul")

    # Bitwise family
    _BITWISE = ("and", "or", "xor", "lshift", "rshift")

    # Unary, length and iteration hooks
    _UNARY = ("__neg__", "__pos__", "__abs__", "__invert__", "__len__",
              "__iter__", "__reversed__", "__contains__")

    _keys = None

    @staticmethod
    def keys():
        """Frozen set of every forwardable member name"""
        if MetaForward._keys is None:
            keys = set(MetaForward._COMPARE) | set(MetaForward._UNARY)
            for op in MetaForward._ARITH + MetaForward._BITWISE:
                keys.add(f"__{op}__")
                keys.add(f"__r{op}__")
            MetaForward._keys = frozenset(keys)
        return MetaForward._keys

    @staticmethod
    def isForwarded(key):
        return key in MetaForward.keys()

    @staticmethod
    def seed(view, members):
        """Copy every forwardable entry of members onto a fresh view type"""
        for key, val in list(members.items()):
            if MetaForward.isForwarded(key):
                setattr(view, key, val)

    @staticmethod
    def sync(desc, key, val):
        """Mirror a class write into the class's instance view, if built"""
        if not MetaForward.isForwarded(key):
            return
        view = desc.instanceView(False)
        if view is None:
            return
        setattr(view, key, val)
        Log.get("baseclass").debug(f"forwarded {key} into {view.__name__}")

    @staticmethod
    def drop(desc, key):
        """Remove a forwarded slot after the class member was deleted"""
        if not MetaForward.isForwarded(key):
            return
        view = desc.instanceView(False)
        if view is not None and key in view.__dict__:
            delattr(view, key)
