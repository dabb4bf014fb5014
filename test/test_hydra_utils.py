import pytest
from omegaconf import OmegaConf

import boolsolve  # noqa: F401  registers the resolvers
from boolsolve.hydra_utils.utils import assignment_from_config, to_bool
from boolsolve.logic.assignment import Assignment


def test_to_bool():
    for value in [True, 1, "1", "true", "Yes", " on "]:
        assert to_bool(value) is True
    for value in [False, 0, "0", "FALSE", "no", "off"]:
        assert to_bool(value) is False
    with pytest.raises(ValueError):
        to_bool("maybe")
    with pytest.raises(ValueError):
        to_bool(2)


def test_bool_resolver():
    cfg = OmegaConf.create({"a": "${bool:yes}", "b": "${bool:0}"})
    assert cfg.a is True
    assert cfg.b is False


def test_assignment_from_config():
    cfg = OmegaConf.create({"assignment": {"A": 0, "B": "true", "C": True}})
    assert assignment_from_config(cfg) == Assignment(
        frozenset({"B", "C"}), frozenset({"A"})
    )
    assert assignment_from_config(OmegaConf.create({"assignment": None})) == Assignment()
    assert assignment_from_config(OmegaConf.create({})) == Assignment()
    with pytest.raises(ValueError):
        assignment_from_config(OmegaConf.create({"assignment": [1, 0]}))
