"""
Tests for environment overrides of the tunables
"""
import importlib

import pytest

import static_perfect_hash.const as const


@pytest.fixture
def reload_const(monkeypatch):
    yield lambda: importlib.reload(const)
    monkeypatch.undo()
    importlib.reload(const)


class TestEnvOverrides:

    def test_defaults(self, monkeypatch, reload_const):
        for name in ("SPH_SEED", "SPH_FIRST_LEVEL_ATTEMPTS",
                     "SPH_SECOND_LEVEL_ATTEMPTS", "SPH_MAX_RESEEDS"):
            monkeypatch.delenv(name, raising=False)
        c = reload_const()
        assert c.DEFAULT_SEED == 42
        assert c.FIRST_LEVEL_ATTEMPTS == 1000
        assert c.SECOND_LEVEL_ATTEMPTS == 10000
        assert c.MAX_RESEEDS == 8

    def test_overrides(self, monkeypatch, reload_const):
        monkeypatch.setenv("SPH_SEED", "7")
        monkeypatch.setenv("SPH_FIRST_LEVEL_ATTEMPTS", "25")
        monkeypatch.setenv("SPH_SECOND_LEVEL_ATTEMPTS", "300")
        monkeypatch.setenv("SPH_MAX_RESEEDS", "2")
        c = reload_const()
        assert c.DEFAULT_SEED == 7
        assert c.FIRST_LEVEL_ATTEMPTS == 25
        assert c.SECOND_LEVEL_ATTEMPTS == 300
        assert c.MAX_RESEEDS == 2

    def test_bad_value(self, monkeypatch, reload_const):
        monkeypatch.setenv("SPH_SEED", "not-a-number")
        with pytest.raises(ValueError):
            reload_const()
