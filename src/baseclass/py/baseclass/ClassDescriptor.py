#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Obj import Obj
from .ClassKind import ClassKind
from .Env import Env
from .InstanceIds import InstanceIds
from .Log import Log
from .MetaForward import MetaForward


class ClassDescriptor(Obj):
    """Metadata behind one class handle.

    The handle's own __dict__ is the member table; everything else lives
    here: name, kind, the immutable parent handle, the lazily built shared
    instance view, the cached constructor chain and the instance counter.
    """

    def __init__(self, name, kind, parent=None, env=None):
        super().__init__()
        self._name = name or "Anonymous"
        self._kind = kind
        self._parent = parent
        self._env = env if env is not None else Env.cur()
        self._handle = None
        self._ctorChain = None   # leaf -> root handles, built once
        self._instView = None    # shared Instance subtype, built once
        self._nextId = 0

    @staticmethod
    def of(x):
        """Descriptor for a class handle or instance, else None"""
        return getattr(type(x), "__descriptor__", None)

    def name(self):
        return self._name

    def kind(self):
        return self._kind

    def isRoot(self):
        return self._kind.isRoot()

    def parent(self):
        """Parent class handle, None for a root class"""
        return self._parent

    def handle(self):
        return self._handle

    def members(self):
        """The handle's own members (live mapping)"""
        return vars(self._handle)

    def ancestry(self):
        """Handles from this class up to the root, leaf first"""
        result = []
        c = self._handle
        while c is not None:
            result.append(c)
            c = ClassDescriptor.of(c).parent()
        return result

    def lookup(self, key, start=None):
        """Walk own members from start (default this class) up the parent chain.

        Returns (True, val) on the first hit, (False, None) on a full miss.
        """
        c = self._handle if start is None else start
        while c is not None:
            members = vars(c)
            if key in members:
                return True, members[key]
            c = ClassDescriptor.of(c).parent()
        return False, None

    def isSubclassOf(self, base):
        for c in self.ancestry():
            if c is base:
                return True
        return False

    # Constructor chain

    def ctorChain(self):
        """Cached leaf -> root handle list driving construction"""
        if self._ctorChain is None:
            self._ctorChain = tuple(self.ancestry())
            log = Log.get("baseclass")
            if log.isDebug():
                names = [ClassDescriptor.of(c).name() for c in reversed(self._ctorChain)]
                log.debug(f"built constructor chain for {self._name}: {' -> '.join(names)}")
        return self._ctorChain

    def chainNew(self):
        """False only when chainNew is explicitly False on this class or,
        absent an override, on an ancestor"""
        found, val = self.lookup("chainNew")
        return not (found and val is False)

    # Instance view

    def instanceView(self, build=True):
        """Shared instance type for this class; built and seeded on first use"""
        if self._instView is None and build:
            from .Instance import makeView
            view = makeView(self)
            MetaForward.seed(view, self.members())
            self._instView = view
            Log.get("baseclass").debug(f"built instance view {view.__name__}")
        return self._instView

    def nextId(self):
        self._nextId += 1
        return self._nextId

    def make(self, args=(), kwargs=None):
        """Construct a new instance: root -> leaf constructors unless opted out"""
        if kwargs is None:
            kwargs = {}
        view = self.instanceView()
        inst = object.__new__(view)

        if self._env.printInstanceIds():
            InstanceIds.cur().set(inst, self.nextId())

        chain = self.ctorChain()
        if not self.chainNew():
            Log.get("baseclass").debug(f"chainNew disabled for {self._name}; leaf constructor only")
            ctor = vars(chain[0]).get("new")
            if ctor is not None:
                ctor(inst, *args, **kwargs)
        else:
            for c in reversed(chain):
                ctor = vars(c).get("new")
                if ctor is not None:
                    ctor(inst, *args, **kwargs)
        return inst

    # Display

    def toStr(self):
        if self.isRoot():
            return f"Class<{self._name}>"
        names = [ClassDescriptor.of(c).name() for c in self.ancestry()]
        return f"Subclass<{', '.join(names)}>"

    def instanceStr(self, inst):
        if self._env.printInstanceIds():
            n = InstanceIds.cur().get(inst)
            if n is not None:
                return f"Instance<{self._name}#{n}>"
        return f"Instance<{self._name}>"
