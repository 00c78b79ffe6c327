from linalg.matrix import ColumnVector, Matrix, DTYPE

__all__ = ["ColumnVector", "Matrix", "DTYPE"]
