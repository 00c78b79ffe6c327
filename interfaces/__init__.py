# interfaces/__init__.py
from __future__ import annotations
from typing import Protocol, Sequence

from linalg import ColumnVector, Matrix


class NumberGenerator(Protocol):
    """Produces one value per call; the argument is the element's flat index."""
    def __call__(self, index: int) -> float: ...


class NetworkLike(Protocol):
    """What views and evaluators read off a network."""
    weights: Sequence[Matrix]
    biases: Sequence[ColumnVector]
    activation_values: Sequence[ColumnVector]

    @property
    def layer_sizes(self) -> list[int]: ...
    def calculate_all_activation_values(self, input: ColumnVector) -> ColumnVector: ...
