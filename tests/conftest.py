# tests/conftest.py
import os
import sys

# Headless SDL so view tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so NN.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def vec():
    from linalg import ColumnVector
    def make(*values):
        return ColumnVector.from_values(values)
    return make

@pytest.fixture
def network_factory():
    from NN.network import NeuralNetwork
    def make(layer_sizes=(3, 4, 2), **kwargs):
        # kwargs lets you pass default_value=..., seed=..., generator=...
        return NeuralNetwork.new(list(layer_sizes), **kwargs)
    return make
