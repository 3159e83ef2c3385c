import pytest

from definemgr.core.logging import logger
from definemgr.targets import Target


class MemoryPrefs:
    def __init__(self, values=None, fail=False):
        self.values = dict(values or {})
        self.fail = fail
        self.writes = 0

    def get_string(self, key):
        if self.fail:
            raise OSError("prefs offline")
        return self.values.get(key)

    def set_string(self, key, value):
        if self.fail:
            raise OSError("prefs offline")
        self.writes += 1
        self.values[key] = value


class MemoryFlags:
    def __init__(self, defines=None, active=Target.STANDALONE, broken=()):
        self.defines = dict(defines or {})
        self.active = active
        self.broken = set(broken)

    def get_flags(self, target):
        return self.defines.get(target, "")

    def set_flags(self, target, value):
        if target in self.broken:
            raise OSError(f"{target.value} is read-only")
        self.defines[target] = value

    def active_target(self):
        return self.active


@pytest.fixture(autouse=True)
def quiet_logger():
    logger.set_level("ERROR")
    yield
    logger.set_level("INFO")


@pytest.fixture
def prefs():
    return MemoryPrefs()


@pytest.fixture
def flags():
    return MemoryFlags()


@pytest.fixture
def make_prefs():
    return MemoryPrefs


@pytest.fixture
def make_flags():
    return MemoryFlags
