"""Bounded numeric genes.

A gene is one tagged numeric value with inclusive bounds.  The tag decides how
values are represented: integers, single precision floats or double precision
floats.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

import numpy as np

Number = Union[int, float]


class GeneKind(Enum):
    """Numeric representation of a gene slot."""

    INTEGER = "integer"
    FLOAT = "float"
    DOUBLE = "double"


def coerce(kind: GeneKind, value: Number) -> Number:
    """Cast ``value`` to the representation used by ``kind``."""

    if kind is GeneKind.INTEGER:
        return int(value)
    if kind is GeneKind.FLOAT:
        return float(np.float32(value))
    return float(value)


@dataclass
class Gene:
    """A bounded numeric gene.

    Parameters
    ----------
    kind:
        Representation of ``current``, ``min`` and ``max``.
    current:
        Active value.
    min, max:
        Inclusive bounds.  ``min <= max`` is expected from the caller and is
        not checked here.
    """

    kind: GeneKind
    current: Number
    min: Number
    max: Number

    def __post_init__(self) -> None:
        self.current = coerce(self.kind, self.current)
        self.min = coerce(self.kind, self.min)
        self.max = coerce(self.kind, self.max)

    @classmethod
    def integer(cls, current: int, low: int, high: int) -> "Gene":
        return cls(GeneKind.INTEGER, current, low, high)

    @classmethod
    def float32(cls, current: float, low: float, high: float) -> "Gene":
        return cls(GeneKind.FLOAT, current, low, high)

    @classmethod
    def double(cls, current: float, low: float, high: float) -> "Gene":
        return cls(GeneKind.DOUBLE, current, low, high)

    def copy(self) -> "Gene":
        return Gene(self.kind, self.current, self.min, self.max)

    def in_bounds(self) -> bool:
        return self.min <= self.current <= self.max


__all__ = ["Gene", "GeneKind", "Number", "coerce"]
