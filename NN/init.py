# NN/init.py
from __future__ import annotations
from typing import Literal, Optional
import numpy as np

from interfaces import NumberGenerator

InitScheme = Literal["uniform", "normal", "xavier"]


def uniform_generator(seed: Optional[int] = None, low: float = 0.0, high: float = 1.0) -> NumberGenerator:
    rng = np.random.default_rng(seed)

    def _gen(_index: int) -> float:
        return float(rng.uniform(low, high))
    return _gen


def normal_generator(seed: Optional[int] = None, mean: float = 0.0, std: float = 1.0) -> NumberGenerator:
    rng = np.random.default_rng(seed)

    def _gen(_index: int) -> float:
        return float(rng.normal(mean, std))
    return _gen


def xavier_generator(fan_in: int, fan_out: int, seed: Optional[int] = None) -> NumberGenerator:
    """Glorot uniform: U(-limit, limit) with limit = sqrt(6 / (fan_in + fan_out))."""
    limit = float(np.sqrt(6 / (fan_in + fan_out)))
    return uniform_generator(seed, -limit, limit)


def make_generator(scheme: str, seed: Optional[int] = None) -> NumberGenerator:
    """Layer-independent schemes only; xavier needs fan sizes (see xavier_generator)."""
    if scheme == "uniform":
        return uniform_generator(seed)
    if scheme == "normal":
        return normal_generator(seed)
    raise ValueError(f"unknown init scheme: {scheme!r}")
