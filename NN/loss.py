# NN/loss.py
from __future__ import annotations
from typing import Sequence

from linalg import ColumnVector


def mean_square_error(
    output_vectors: Sequence[ColumnVector],
    desired_output_vectors: Sequence[ColumnVector],
) -> float:
    """
    sum(|output - desired|^2) / (2 * n_samples)

    One scratch buffer is reused for every difference.
    """
    if not output_vectors:
        raise ValueError("mean_square_error needs at least one sample")
    if len(output_vectors) != len(desired_output_vectors):
        raise ValueError(
            f"got {len(output_vectors)} outputs but {len(desired_output_vectors)} desired outputs"
        )

    acc = 0.0
    result = ColumnVector.new_with_elements(len(output_vectors[0]), 0.0)
    for output, desired in zip(output_vectors, desired_output_vectors):
        output.sub_into(desired, result)
        acc += result.magnitude_squared()

    return acc / (2.0 * len(output_vectors))
