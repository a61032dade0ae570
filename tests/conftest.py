# tests/conftest.py
# Every test gets its own registry and Env so class names never collide
# across tests and identity display starts off.

import pytest

from baseclass import BaseClass, ClassRegistry, Env, Log, LogLevel


@pytest.fixture
def Class():
    return BaseClass(ClassRegistry(), Env({}))


@pytest.fixture
def debugLog():
    log = Log.get("baseclass")
    old = log.level()
    log.level(LogLevel.debug())
    yield log
    log.level(old)
