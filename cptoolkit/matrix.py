"""Square and rectangular matrices over integers modulo a prime."""

from __future__ import annotations

from cptoolkit.modmath import MOD, modinv


class Matrix:
    """A ``rows`` x ``cols`` matrix of residues modulo ``mod``, initially zero."""

    def __init__(self, rows: int, cols: int | None = None, mod: int = MOD) -> None:
        if cols is None:
            cols = rows
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must be non-negative")
        self.rows = rows
        self.cols = cols
        self.mod = mod
        self.data = [[0] * cols for _ in range(rows)]

    @classmethod
    def identity(cls, n: int, mod: int = MOD) -> Matrix:
        """The ``n`` x ``n`` identity matrix."""
        result = cls(n, n, mod)
        for i, row in enumerate(result.data):
            row[i] = 1 % mod
        return result

    def __getitem__(self, i: int) -> list[int]:
        return self.data[i]

    def __mul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.cols != other.rows:
            raise ValueError(
                f"cannot multiply {self.rows}x{self.cols} by {other.rows}x{other.cols}"
            )
        mod = self.mod
        columns = [[row[j] for row in other.data] for j in range(other.cols)]
        result = Matrix(self.rows, other.cols, mod)
        result.data = [
            [sum(a * b for a, b in zip(row, col)) % mod for col in columns]
            for row in self.data
        ]
        return result

    def power(self, n: int) -> Matrix:
        """This matrix raised to the non-negative power ``n``."""
        if self.rows != self.cols:
            raise ValueError("only square matrices can be raised to a power")
        if n < 0:
            raise ValueError("exponent must be non-negative")
        result = Matrix.identity(self.rows, self.mod)
        base = self
        while n:
            if n & 1:
                result = result * base
            base = base * base
            n >>= 1
        return result

    def determinant(self) -> int:
        """Determinant modulo ``mod`` by Gaussian elimination."""
        if self.rows != self.cols:
            raise ValueError("determinant needs a square matrix")
        mod = self.mod
        n = self.rows
        a = [[x % mod for x in row] for row in self.data]
        det = 1 % mod
        for i in range(n):
            pivot = next((k for k in range(i, n) if a[k][i]), None)
            if pivot is None:
                return 0
            if pivot != i:
                a[i], a[pivot] = a[pivot], a[i]
                det = -det % mod
            det = det * a[i][i] % mod
            inv = modinv(a[i][i], mod)
            row_i = a[i]
            for j in range(i + 1, n):
                row_i[j] = row_i[j] * inv % mod
            for j, row in enumerate(a):
                factor = row[i]
                if j != i and factor:
                    for k in range(i + 1, n):
                        row[k] = (row[k] - row_i[k] * factor) % mod
        return det

    def __str__(self) -> str:
        return "\n".join(" ".join(map(str, row)) for row in self.data)