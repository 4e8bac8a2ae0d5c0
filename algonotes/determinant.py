"""Determinants by cofactor expansion and by Gaussian elimination."""

from collections.abc import Sequence

EPSILON = 1e-12

Matrix = Sequence[Sequence[float]]


def _square_rows(matrix: Matrix) -> list[list[float]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("determinant needs a square matrix")
    return rows


def det(matrix: Matrix) -> float:
    """Return the determinant by Laplace expansion along successive rows.

    The matrix must be square and at least 2 x 2. The work grows factorially
    with the size, so this suits small matrices only.
    """
    rows = _square_rows(matrix)
    n = len(rows)
    if n < 2:
        raise ValueError("cofactor expansion needs a matrix of at least 2 x 2")

    def expand(row: int, cols: tuple[int, ...]) -> float:
        if len(cols) == 2:
            a, b = cols
            upper, lower = rows[row], rows[row + 1]
            return upper[a] * lower[b] - upper[b] * lower[a]
        total = 0.0
        sign = 1.0
        for pos, col in enumerate(cols):
            rest = cols[:pos] + cols[pos + 1:]
            total += sign * rows[row][col] * expand(row + 1, rest)
            sign = -sign
        return total

    return expand(0, tuple(range(n)))


def determinant(matrix: Matrix) -> float:
    """Return the determinant by elimination with partial pivoting.

    The input is left untouched. A pivot smaller than 1e-12 in magnitude
    makes the matrix count as singular and 0.0 is returned.
    """
    rows = [[float(v) for v in row] for row in _square_rows(matrix)]
    n = len(rows)
    result = 1.0
    for r in range(n):
        pivot_row = max(range(r, n), key=lambda i: abs(rows[i][r]))
        if abs(rows[pivot_row][r]) <= abs(rows[r][r]):
            pivot_row = r
        if abs(rows[pivot_row][r]) < EPSILON:
            return 0.0
        if pivot_row != r:
            rows[r], rows[pivot_row] = rows[pivot_row], rows[r]
            result = -result
        pivot = rows[r]
        result *= pivot[r]
        for j in range(r + 1, n):
            pivot[j] /= pivot[r]
        for i, other in enumerate(rows):
            factor = other[r]
            if i != r and abs(factor) > EPSILON:
                for j in range(r + 1, n):
                    other[j] -= pivot[j] * factor
    return result