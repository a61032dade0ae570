#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

# baseclass - single-inheritance classes with virtual super,
# constructor chaining and operator forwarding

# Base types
from .Obj import Obj

# Configuration and logging
from .Env import Env
from .Log import Log, LogLevel
from .LogRec import LogRec

# Object model
from .ClassKind import ClassKind
from .ClassDescriptor import ClassDescriptor
from .ClassRegistry import ClassRegistry
from .ClassView import ClassView
from .Instance import Instance
from .InstanceIds import InstanceIds
from .MetaForward import MetaForward
from .BaseClass import BaseClass

# Errors
from .Err import (Err, ArgErr, NameErr, DuplicateDefinitionErr, UnknownClassErr,
                  ReadonlyErr, ImmutableRelationErr)

Log.get("baseclass").level(Env.cur().logLevel())

# Process default: Class("A")({...}), Class.isClass(x), ...
Class = BaseClass.cur()
