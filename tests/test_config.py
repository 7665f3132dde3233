import pytest

import geolisp.config as config
from geolisp import run_script
from geolisp.config import DEFAULT_MAX_ATTEMPTS, EvaluateOptions, get_default_options, set_default_options
from geolisp.errors import ConstraintError


def test_defaults():
    options = EvaluateOptions()

    assert options.random_seed is None
    assert options.max_attempts == DEFAULT_MAX_ATTEMPTS


def test_max_attempts_must_be_positive():
    with pytest.raises(ValueError):
        EvaluateOptions(max_attempts=0)


def test_default_options_are_copied(monkeypatch):
    monkeypatch.setattr(config, "_DEFAULT_OPTIONS", EvaluateOptions())

    options = get_default_options()
    options.random_seed = 99

    assert get_default_options().random_seed is None


def test_set_default_options_applies_to_run_script(monkeypatch):
    monkeypatch.setattr(config, "_DEFAULT_OPTIONS", EvaluateOptions())

    set_default_options(EvaluateOptions(random_seed=5, max_attempts=2))

    assert get_default_options().random_seed == 5
    assert run_script("(point (circle))") == run_script("(point (circle))")
    with pytest.raises(ConstraintError):
        run_script("(iangle (circle) 180)")
