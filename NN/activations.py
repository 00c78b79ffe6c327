import numpy as np

from linalg import ColumnVector


def sigmoid(z):
    return 1.0 / (1.0 + np.exp(-z))


def relu(z):
    return np.maximum(0, z)


def softmax(z: ColumnVector, index: int) -> float:
    """
    Component `index` divided by the mean of all components.
    Not an exponential softmax; the name is kept for existing callers.
    A zero mean gives inf (or nan when the component is also zero).
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(z.data[index] / np.float32(z.average()))
