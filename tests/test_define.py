# tests/test_define.py
import pytest

import baseclass
from baseclass import (ArgErr, BaseClass, ClassRegistry, DuplicateDefinitionErr,
                       ImmutableRelationErr, UnknownClassErr)


def test_define_registers_root_class(Class):
    A = Class.define("A", {"message": "A: Hello"})
    assert Class.isClass(A)
    assert Class.find("A") is A
    assert Class.knownClasses().names() == ["A"]
    assert A.message == "A: Hello"


def test_redefine_with_second_argument_fails(Class):
    A = Class.define("A", {})
    with pytest.raises(DuplicateDefinitionErr) as ex:
        Class.define("A", {})
    assert "duplicate definition not allowed" in ex.value.msg()
    with pytest.raises(DuplicateDefinitionErr):
        Class.define("A", A)
    assert Class.find("A") is A


def test_redefine_without_second_argument_returns_existing(Class):
    A = Class.define("A", {"x": 1})
    assert Class.define("A") is A
    assert Class.create("A") is A
    assert Class("A")() is A


def test_curried_definition(Class):
    A = Class("A")({"message": "hi"})
    B = Class("B")(A)
    assert str(A) == "Class<A>"
    assert str(B) == "Subclass<B, A>"
    assert Class.superOf(B) is A


def test_unknown_name_without_second_argument_defines_empty_root(Class):
    Fresh = Class.define("Fresh")
    assert str(Fresh) == "Class<Fresh>"
    assert vars(Fresh) == {}
    assert Class.find("Fresh") is Fresh


def test_anonymous_class_is_not_registered(Class):
    anon = Class.create(None, {"x": 1})
    assert str(anon) == "Class<Anonymous>"
    assert Class.nameOf(anon) == "Anonymous"
    assert Class.knownClasses().size() == 0
    assert Class.create("", {}) is not anon
    assert Class.knownClasses().size() == 0


@pytest.mark.parametrize("name", [None, 42, b"A", ""])
def test_define_rejects_bad_names(Class, name):
    with pytest.raises(ArgErr):
        Class.define(name, {})
    with pytest.raises(ArgErr):
        Class(name)


@pytest.mark.parametrize("name", [42, b"A", 3.5, ("A",)])
def test_create_rejects_non_string_names(Class, name):
    with pytest.raises(ArgErr):
        Class.create(name, {})
    assert Class.knownClasses().size() == 0


def test_registry_names_stay_sortable_after_bad_create(Class):
    Class.define("A", {})
    with pytest.raises(ArgErr):
        Class.create(42, {})
    assert Class.knownClasses().names() == ["A"]


def test_curried_form_checks_argument_before_duplicate(Class):
    Class.define("A", {})
    with pytest.raises(ArgErr):
        Class("A")(42)
    with pytest.raises(DuplicateDefinitionErr):
        Class.define("A", {})
    assert Class("A")() is Class.find("A")


@pytest.mark.parametrize("arg", [42, "A", [1, 2], (1,), 3.5])
def test_define_rejects_bad_second_argument(Class, arg):
    with pytest.raises(ArgErr):
        Class.define("Bad", arg)
    assert not Class.knownClasses().has("Bad")


def test_instance_is_not_a_valid_base(Class):
    A = Class.define("A", {})
    with pytest.raises(ArgErr):
        Class.define("B", A())


def test_members_are_shallow_copied(Class):
    tags = ["a"]
    members = {"tags": tags, "n": 1}
    A = Class.define("A", members)
    members["n"] = 2
    members["extra"] = True
    assert A.n == 1
    assert A.extra is None
    assert A.tags is tags


def test_member_keys_must_be_strings(Class):
    with pytest.raises(ArgErr):
        Class.define("A", {1: "one"})
    assert not Class.knownClasses().has("A")


def test_members_may_not_define_super(Class):
    with pytest.raises(ImmutableRelationErr):
        Class.define("A", {"super": object()})


def test_subclass_copies_no_members(Class):
    A = Class.define("A", {"x": 1})
    B = Class.define("B", A)
    assert vars(B) == {}
    assert B.x == 1


def test_find_unknown(Class):
    with pytest.raises(UnknownClassErr):
        Class.find("Nope")
    assert Class.find("Nope", False) is None


def test_registries_are_isolated():
    r1, r2 = ClassRegistry(), ClassRegistry()
    a1 = BaseClass(r1).define("Same", {})
    a2 = BaseClass(r2).define("Same", {})
    assert a1 is not a2
    assert r1.find("Same") is a1
    assert r2.find("Same") is a2


def test_registry_add_rejects_duplicates():
    r = ClassRegistry()
    r.add("A", object())
    with pytest.raises(DuplicateDefinitionErr):
        r.add("A", object())
    assert "A" in r
    assert len(r) == 1


def test_process_default():
    assert isinstance(baseclass.Class, BaseClass)
    assert BaseClass.cur() is baseclass.Class
    assert baseclass.Class.knownClasses() is ClassRegistry.cur()
