"""Parity-check matrices for the LPN assumption and F2 / Field128 products with them."""

from __future__ import annotations

import secrets
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from .errors import LpnError
from .field import F2, Field128

__all__ = [
    "CodeType",
    "LpnParameters",
    "LpnMatrix",
    "DenseMatrix",
    "SparseMatrix",
    "EmptyMatrix",
    "matrix_vector_multiply_f2",
    "matrix_transpose_vector_multiply_fq",
    "matrix_vector_multiply_fq",
]


class CodeType(Enum):
    """Family of codes the matrix H is drawn from."""

    RANDOM_LINEAR = "random_linear"
    QUASI_CYCLIC = "quasi_cyclic"
    LDPC = "ldpc"


class LpnMatrix(ABC):
    """A k x n matrix over F2."""

    @abstractmethod
    def nrows(self) -> int:
        """Number of rows."""

    @abstractmethod
    def ncols(self) -> int:
        """Number of columns."""

    @abstractmethod
    def transpose(self) -> LpnMatrix:
        """The transposed matrix."""

    @abstractmethod
    def _row_items(self) -> list[list[tuple[int, int]]]:
        """For each row, its stored (column, value) pairs with non-zero value."""


@dataclass
class DenseMatrix(LpnMatrix):
    """A matrix stored as a list of rows of 0/1 entries."""

    entries: list[list[int]]
    width: int | None = None

    def __post_init__(self) -> None:
        self.entries = [list(row) for row in self.entries]
        if self.width is None:
            self.width = len(self.entries[0]) if self.entries else 0
        if any(len(row) != self.width for row in self.entries):
            raise LpnError("All rows of a dense matrix must have the same length")

    def nrows(self) -> int:
        return len(self.entries)

    def ncols(self) -> int:
        return self.width

    def transpose(self) -> DenseMatrix:
        transposed = [[row[col] for row in self.entries] for col in range(self.width)]
        return DenseMatrix(transposed, len(self.entries))

    def _row_items(self) -> list[list[tuple[int, int]]]:
        return [[(col, val) for col, val in enumerate(row) if val] for row in self.entries]


@dataclass
class SparseMatrix(LpnMatrix):
    """A matrix storing only its non-zero entries, row by row."""

    height: int
    width: int
    rows: list[dict[int, int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.rows:
            self.rows = [{} for _ in range(self.height)]
        elif len(self.rows) != self.height:
            raise LpnError("Sparse matrix row count does not match its height")

    def nrows(self) -> int:
        return self.height

    def ncols(self) -> int:
        return self.width

    def nnz(self) -> int:
        """Number of stored non-zero entries."""
        return sum(len(row) for row in self.rows)

    def toggle(self, row: int, col: int, value: int = 1) -> None:
        """XOR ``value`` into the entry at (row, col), inserting it if absent."""
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise LpnError("Sparse matrix index out of bounds")
        current = self.rows[row].get(col, 0)
        updated = current ^ value if current else value
        if updated:
            self.rows[row][col] = updated
        else:
            self.rows[row].pop(col, None)

    def transpose(self) -> DenseMatrix:
        transposed = [
            [row.get(col, 0) for row in self.rows] for col in range(self.width)
        ]
        return DenseMatrix(transposed, self.height)

    def _row_items(self) -> list[list[tuple[int, int]]]:
        return [sorted(row.items()) for row in self.rows]


class EmptyMatrix(LpnMatrix):
    """A matrix with no rows and no columns; products with it are errors."""

    def nrows(self) -> int:
        return 0

    def ncols(self) -> int:
        return 0

    def transpose(self) -> EmptyMatrix:
        return EmptyMatrix()

    def _row_items(self) -> list[list[tuple[int, int]]]:
        return []

    def __eq__(self, other: object) -> bool:
        return isinstance(other, EmptyMatrix)

    def __hash__(self) -> int:
        return hash(EmptyMatrix)

    def __repr__(self) -> str:
        return "EmptyMatrix()"


@dataclass
class LpnParameters:
    """Code length ``n``, message length ``k``, noise weight ``t`` and code family."""

    n: int
    k: int
    t: int
    code_type: CodeType = CodeType.RANDOM_LINEAR
    sparsity: int = 0

    def generate_matrix(self) -> LpnMatrix:
        """Draw a fresh k x n matrix H of the configured code family."""
        if self.code_type is CodeType.RANDOM_LINEAR:
            entries = [
                [secrets.randbits(1) for _ in range(self.n)] for _ in range(self.k)
            ]
            return DenseMatrix(entries, self.n)
        if self.code_type is CodeType.QUASI_CYCLIC:
            raise LpnError("Quasi-Cyclic code generation not implemented")
        if self.code_type is CodeType.LDPC:
            if self.n == 0 and self.sparsity > 0:
                raise LpnError("Cannot place entries in a matrix with no columns")
            matrix = SparseMatrix(self.k, self.n)
            for row in range(self.k):
                for _ in range(self.sparsity):
                    matrix.toggle(row, secrets.randbelow(self.n), 1)
            return matrix
        raise LpnError(f"Unknown code type: {self.code_type!r}")


def matrix_vector_multiply_f2(matrix: LpnMatrix, vector: Sequence[F2]) -> list[F2]:
    """Compute H x over F2 for a k x n matrix H and a length-n vector x."""
    if isinstance(matrix, EmptyMatrix):
        raise LpnError("Empty matrix encountered in matrix_vector_multiply_f2")
    if matrix.ncols() != len(vector):
        raise LpnError("Matrix(F2) and vector dimensions mismatch")
    bits = [int(value) & 1 for value in vector]
    return [
        F2(sum(val * bits[col] for col, val in row))
        for row in matrix._row_items()
    ]


def matrix_transpose_vector_multiply_fq(
    matrix: LpnMatrix, vector: Sequence[Field128]
) -> list[Field128]:
    """Compute H^T x for a k x n matrix H and a length-k vector x over Field128."""
    if matrix.nrows() != len(vector):
        raise LpnError("Matrix(H^T) and vector(Fq) dimensions mismatch")
    if isinstance(matrix, EmptyMatrix):
        raise LpnError("Empty matrix encountered in matrix_transpose_vector_multiply_fq")
    result = [Field128.zero() for _ in range(matrix.ncols())]
    for x_i, row in zip(vector, matrix._row_items()):
        for col, val in row:
            if val == 1:
                result[col] = result[col] + x_i
    return result


def matrix_vector_multiply_fq(
    matrix: LpnMatrix, vector: Sequence[Field128]
) -> list[Field128]:
    """Compute H x over Field128 for a k x n matrix H and a length-n vector x."""
    if matrix.ncols() != len(vector):
        raise LpnError("Matrix(Fq H) and vector(Fq) dimensions mismatch")
    if isinstance(matrix, EmptyMatrix):
        raise LpnError("Empty matrix in matrix_vector_multiply_fq")
    return [
        sum((val * vector[col] for col, val in row), Field128.zero())
        for row in matrix._row_items()
    ]