import functools
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Assignment:
    """An assignment of variables to truth values. Represented as a set of true and a set of
    false variables; variables in neither set resolve to the default given at lookup time."""

    true_propositions: frozenset[str] = frozenset()
    false_propositions: frozenset[str] = frozenset()

    def __post_init__(self):
        conflicts = self.true_propositions & self.false_propositions
        if conflicts:
            raise ValueError(
                f"Variables cannot be both true and false: {', '.join(sorted(conflicts))}."
            )

    @staticmethod
    def from_mapping(mapping: Mapping[str, bool]) -> "Assignment":
        return Assignment(
            frozenset(name for name, value in mapping.items() if value),
            frozenset(name for name, value in mapping.items() if not value),
        )

    @staticmethod
    def from_bits(variables: tuple[str, ...], bits: Iterable[int]) -> "Assignment":
        """Builds the assignment of one truth-table row: the j-th variable takes the j-th bit."""
        pairs = list(zip(variables, bits))
        return Assignment(
            frozenset(v for v, bit in pairs if bit),
            frozenset(v for v, bit in pairs if not bit),
        )

    @staticmethod
    @functools.lru_cache(maxsize=4)
    def bit_matrix(num_variables: int) -> np.ndarray:
        """Rows of a truth table as 0/1 values, in binary counting order with the
        first column as the most significant bit. Takes num_variables * 2^num_variables bytes."""
        rows = np.arange(2**num_variables, dtype=np.int64)
        matrix = np.empty((len(rows), num_variables), dtype=np.uint8)
        for j in range(num_variables):
            matrix[:, j] = (rows >> (num_variables - 1 - j)) & 1
        matrix.setflags(write=False)
        return matrix

    def value(self, name: str, default: bool = True) -> bool:
        if name in self.true_propositions:
            return True
        if name in self.false_propositions:
            return False
        return default

    def as_dict(self) -> dict[str, bool]:
        return {name: self.value(name) for name in sorted(self)}

    def __repr__(self) -> str:
        return "{" + ", ".join(
            f"{name}={int(value)}" for name, value in self.as_dict().items()
        ) + "}"

    def __len__(self):
        return len(self.true_propositions) + len(self.false_propositions)

    def __iter__(self):
        return iter(self.true_propositions | self.false_propositions)

    def __contains__(self, name: object) -> bool:
        return name in self.true_propositions or name in self.false_propositions
