# linalg/matrix.py
from __future__ import annotations
from typing import Callable, Iterable, Iterator, Sequence
import numpy as np

DTYPE = np.float32

Generator = Callable[[int], float]


def _check_same_shape(a: np.ndarray, b: np.ndarray, what: str) -> None:
    if a.shape != b.shape:
        raise ValueError(f"{what}: shape {a.shape} does not match {b.shape}")


class Matrix:
    """Dense 2-D grid of float32, shape fixed at construction."""

    def __init__(self, data: np.ndarray):
        data = np.asarray(data, dtype=DTYPE)
        if data.ndim != 2:
            raise ValueError(f"Matrix needs 2-D data, got {data.ndim}-D")
        self.data = data

    # ---------- Constructors ----------
    @classmethod
    def new_with_elements(cls, rows: int, columns: int, fill: float) -> "Matrix":
        return cls(np.full((rows, columns), fill, dtype=DTYPE))

    @classmethod
    def new_with_number_generator(cls, rows: int, columns: int, generator: Generator) -> "Matrix":
        """Fill row-major, calling generator(flat_index) once per element."""
        values = [generator(i) for i in range(rows * columns)]
        return cls(np.asarray(values, dtype=DTYPE).reshape(rows, columns))

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        return cls(np.eye(n, dtype=DTYPE))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        return cls(np.array(rows, dtype=DTYPE))

    # ---------- Shape / access ----------
    @property
    def rows(self) -> int:
        return self.data.shape[0]

    @property
    def columns(self) -> int:
        return self.data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.columns)

    def __getitem__(self, key: tuple[int, int]) -> float:
        return float(self.data[key])

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self.data[key] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.data, other.data))

    def __repr__(self) -> str:
        return f"Matrix({self.rows}x{self.columns})"


class ColumnVector:
    """Dense 1-D grid of float32.

    Binary operations write into a caller-supplied buffer (`*_into`) or update
    in place, so hot loops never allocate.
    """

    def __init__(self, data: np.ndarray):
        data = np.asarray(data, dtype=DTYPE)
        if data.ndim != 1:
            raise ValueError(f"ColumnVector needs 1-D data, got {data.ndim}-D")
        self.data = data

    # ---------- Constructors ----------
    @classmethod
    def new_with_elements(cls, length: int, fill: float) -> "ColumnVector":
        return cls(np.full(length, fill, dtype=DTYPE))

    @classmethod
    def new_with_number_generator(cls, length: int, generator: Generator) -> "ColumnVector":
        return cls(np.asarray([generator(i) for i in range(length)], dtype=DTYPE))

    @classmethod
    def from_values(cls, values: Iterable[float]) -> "ColumnVector":
        return cls(np.array(list(values), dtype=DTYPE))

    # ---------- Access ----------
    def __len__(self) -> int:
        return self.data.shape[0]

    def __getitem__(self, index: int) -> float:
        return float(self.data[index])

    def __setitem__(self, index: int, value: float) -> None:
        self.data[index] = value

    def __iter__(self) -> Iterator[float]:
        return (float(x) for x in self.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColumnVector):
            return NotImplemented
        return bool(np.array_equal(self.data, other.data))

    def __repr__(self) -> str:
        return f"ColumnVector({self.to_list()})"

    def copy(self) -> "ColumnVector":
        return ColumnVector(self.data.copy())

    def to_list(self) -> list[float]:
        return [float(x) for x in self.data]

    # ---------- Arithmetic ----------
    def assign(self, other: "ColumnVector") -> None:
        _check_same_shape(self.data, other.data, "assign")
        np.copyto(self.data, other.data)

    def sub_into(self, other: "ColumnVector", out: "ColumnVector") -> None:
        """out = self - other"""
        _check_same_shape(self.data, other.data, "sub_into")
        _check_same_shape(self.data, out.data, "sub_into output")
        np.subtract(self.data, other.data, out=out.data)

    def __iadd__(self, other: "ColumnVector") -> "ColumnVector":
        _check_same_shape(self.data, other.data, "add")
        np.add(self.data, other.data, out=self.data)
        return self

    def mul_matrix_into(self, matrix: Matrix, out: "ColumnVector") -> None:
        """out = matrix . self, where matrix is (len(out) x len(self))."""
        if matrix.columns != len(self) or matrix.rows != len(out):
            raise ValueError(
                f"mul_matrix_into: matrix {matrix.shape} cannot map length {len(self)} "
                f"into length {len(out)}"
            )
        np.matmul(matrix.data, self.data, out=out.data)

    def magnitude_squared(self) -> float:
        return float(np.dot(self.data, self.data))

    def average(self) -> float:
        return float(self.data.mean())
