from __future__ import annotations

import importlib

import pytest

import pdist.settings as settings_mod


@pytest.fixture
def reload_settings(monkeypatch):
    yield lambda: importlib.reload(settings_mod)
    monkeypatch.undo()
    importlib.reload(settings_mod)


def test_defaults(monkeypatch, reload_settings):
    for name in ("PDIST_SEED", "PDIST_PPF_MAX_ITER", "PDIST_INCLUSIVE_SF", "PDIST_LEGACY_PDF", "PDIST_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    mod = reload_settings()
    assert mod.SEED is None
    assert mod.PPF_MAX_ITER == 100_000
    assert mod.INCLUSIVE_SF is False
    assert mod.LEGACY_PDF is False
    assert mod.LOG_LEVEL == "INFO"


def test_env_overrides(monkeypatch, reload_settings):
    monkeypatch.setenv("PDIST_SEED", "42")
    monkeypatch.setenv("PDIST_PPF_MAX_ITER", "10")
    monkeypatch.setenv("PDIST_INCLUSIVE_SF", "yes")
    monkeypatch.setenv("PDIST_LEGACY_PDF", "1")
    monkeypatch.setenv("PDIST_LOG_LEVEL", "debug")
    mod = reload_settings()
    assert mod.SEED == 42
    assert mod.PPF_MAX_ITER == 10
    assert mod.INCLUSIVE_SF is True
    assert mod.LEGACY_PDF is True
    assert mod.LOG_LEVEL == "debug"


def test_invalid_env_does_not_crash(monkeypatch, reload_settings):
    monkeypatch.setenv("PDIST_SEED", "not-a-number")
    monkeypatch.setenv("PDIST_PPF_MAX_ITER", "nope")
    mod = reload_settings()
    assert mod.SEED is None
    assert mod.PPF_MAX_ITER == 100_000


def test_calculator_defaults_follow_settings(monkeypatch):
    from pdist.calculators.poisson import PoissonCalculator

    monkeypatch.setattr(settings_mod, "INCLUSIVE_SF", True)
    monkeypatch.setattr(settings_mod, "PPF_MAX_ITER", 5)
    monkeypatch.setattr(settings_mod, "SEED", 3)
    c = PoissonCalculator()
    assert c.inclusive_sf is True
    assert c.max_iter == 5
    assert c.seed == 3
