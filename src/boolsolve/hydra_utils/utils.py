from typing import Any

from omegaconf import DictConfig, OmegaConf

from boolsolve.logic.assignment import Assignment

TRUE_STRINGS = {"1", "true", "t", "yes", "y", "on"}
FALSE_STRINGS = {"0", "false", "f", "no", "n", "off"}


def to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    text = str(value).strip().lower()
    if text in TRUE_STRINGS:
        return True
    if text in FALSE_STRINGS:
        return False
    raise ValueError(f"Cannot interpret {value!r} as a truth value.")


def register_custom_resolvers():
    if not OmegaConf.has_resolver("bool"):
        OmegaConf.register_new_resolver("bool", to_bool)


def assignment_from_config(cfg: DictConfig) -> Assignment:
    """Builds the assignment given under `cfg.assignment`, e.g. `{A: 0, B: true}`.
    Returns an empty assignment if the key is missing or null."""
    if cfg.get("assignment") is None:
        return Assignment()
    mapping = OmegaConf.to_container(cfg.assignment, resolve=True)
    if not isinstance(mapping, dict):
        raise ValueError("`assignment` must be a mapping from variable to truth value.")
    return Assignment.from_mapping(
        {str(name): to_bool(value) for name, value in mapping.items()}
    )
