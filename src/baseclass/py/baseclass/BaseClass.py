#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from collections.abc import Mapping

from .Obj import Obj
from .ClassDescriptor import ClassDescriptor
from .ClassKind import ClassKind
from .ClassRegistry import ClassRegistry
from .ClassView import ClassView, make as makeHandle
from .Instance import Instance
from .Env import Env
from .Err import ArgErr, DuplicateDefinitionErr, ImmutableRelationErr
from .Log import Log


class BaseClass(Obj):
    """Entry point of the object model: class definition and introspection.

    Root class from a mapping of members, subclass from a base handle:

        A = Class("A")({"message": "A: Hello", "new": a_new})
        B = Class("B")(A)
        b = B("beta")

    A registered name is bound for the life of the registry; defining it
    again with a second argument raises DuplicateDefinitionErr, while
    Class("A")() / create("A") returns the existing handle.
    """

    _cur = None

    def __init__(self, registry=None, env=None):
        super().__init__()
        self._registry = registry if registry is not None else ClassRegistry.cur()
        self._env = env if env is not None else Env.cur()

    @staticmethod
    def cur():
        """Process default bound to ClassRegistry.cur() and Env.cur()"""
        if BaseClass._cur is None:
            BaseClass._cur = BaseClass()
        return BaseClass._cur

    def knownClasses(self):
        return self._registry

    def printInstanceIds(self, val=None):
        """Get or set identity display for instances"""
        return self._env.printInstanceIds(val)

    # Definition

    def __call__(self, name):
        """Curried definition: Class("A")({...}) or Class("B")(A)

        The returned callable checks its argument type before the
        duplicate check, so Class("A")(42) is an ArgErr even when A exists.
        """
        BaseClass._checkName(name)

        def define(baseOrMembers=None):
            BaseClass._checkBaseOrMembers(baseOrMembers)
            return self.define(name, baseOrMembers)
        return define

    def define(self, name, baseOrMembers=None):
        """Define (or with no second argument, fetch) a named class"""
        BaseClass._checkName(name)
        return self.create(name, baseOrMembers)

    def create(self, name=None, baseOrMembers=None):
        """Define or fetch; a None or empty name makes an anonymous class"""
        if name is not None and not isinstance(name, str):
            raise ArgErr("First argument must be a class name (string)")
        log = Log.get("baseclass")
        if name:
            existing = self._registry.find(name, False)
            if existing is not None and baseOrMembers is not None:
                raise DuplicateDefinitionErr(f"Class '{name}' already exists; duplicate definition not allowed")
            if existing is not None:
                log.debug(f"fetched existing {existing}")
                return existing

        parent, members = None, None
        if self.isClass(baseOrMembers):
            parent = baseOrMembers
        elif isinstance(baseOrMembers, Mapping):
            members = baseOrMembers
        elif baseOrMembers is not None:
            raise ArgErr("Second argument must be a class or a mapping of members")

        if members:
            for key in members:
                if not isinstance(key, str):
                    raise ArgErr(f"Member names must be strings, not {type(key).__name__}")
                if key == "super":
                    raise ImmutableRelationErr("Cannot set 'super' on a class")

        kind = ClassKind.derived() if parent is not None else ClassKind.root()
        desc = ClassDescriptor(name, kind, parent, self._env)
        cls = makeHandle(desc)
        if members:
            # Raw copy: no instance view exists yet, so nothing to forward
            cls.__dict__.update(members)

        if name:
            self._registry.add(name, cls)
        log.debug(f"defined {cls}")
        return cls

    def find(self, name, checked=True):
        return self._registry.find(name, checked)

    @staticmethod
    def _checkBaseOrMembers(arg):
        if arg is not None and not isinstance(arg, (ClassView, Mapping)):
            raise ArgErr("Second argument must be a class or a mapping of members")

    @staticmethod
    def _checkName(name):
        if not isinstance(name, str):
            raise ArgErr("First argument must be a class name (string)")
        if not name:
            raise ArgErr("Class name must not be empty")

    # Introspection

    def isClass(self, x):
        """True for classes and subclasses"""
        return isinstance(x, ClassView)

    def isInstance(self, x):
        return isinstance(x, Instance)

    def isSubclassOf(self, x, base):
        """True if base is x or one of its ancestors"""
        if not self.isClass(x) or not self.isClass(base):
            return False
        return ClassDescriptor.of(x).isSubclassOf(base)

    def classOf(self, x):
        """Class handle of an instance, None for anything else"""
        if not self.isInstance(x):
            return None
        return ClassDescriptor.of(x).handle()

    def isInstanceOf(self, x, cls):
        c = self.classOf(x)
        if c is None:
            return False
        return ClassDescriptor.of(c).isSubclassOf(cls)

    def of(self, x):
        return self.classOf(x)

    def nameOf(self, x):
        if self.isClass(x) or self.isInstance(x):
            return ClassDescriptor.of(x).name()
        return None

    def superOf(self, x):
        """Parent handle of a class, or of an instance's class"""
        if self.isClass(x) or self.isInstance(x):
            return ClassDescriptor.of(x).parent()
        return None

    def ancestry(self, x):
        """Leaf -> root handles for a class or an instance's class"""
        if self.isClass(x) or self.isInstance(x):
            return ClassDescriptor.of(x).ancestry()
        return []

    def toStr(self):
        return f"BaseClass({self._registry.size()} classes)"
