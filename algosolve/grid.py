"""Classic problems over two-dimensional grids and points."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations

_NEIGHBOURHOOD = [(di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1)]


def count_battleships(board: Sequence[Sequence[str]]) -> int:
    """Number of ships, counting each ship by its top-left 'X' cell."""
    count = 0
    for i, row in enumerate(board):
        for j, cell in enumerate(row):
            if cell != "X":
                continue
            if i > 0 and board[i - 1][j] == "X":
                continue
            if j > 0 and row[j - 1] == "X":
                continue
            count += 1
    return count


def _truncating_div(total: int, count: int) -> int:
    quotient = abs(total) // count
    return quotient if total >= 0 else -quotient


def image_smoother(img: Sequence[Sequence[int]]) -> list[list[int]]:
    """Replace each cell by the truncated mean of its 3x3 neighbourhood."""
    if not img or not img[0]:
        raise ValueError("image_smoother() needs a non-empty image")
    m, n = len(img), len(img[0])
    result: list[list[int]] = []
    for i in range(m):
        row: list[int] = []
        for j in range(n):
            values = [
                img[i + di][j + dj]
                for di, dj in _NEIGHBOURHOOD
                if 0 <= i + di < m and 0 <= j + dj < n
            ]
            row.append(_truncating_div(sum(values), len(values)))
        result.append(row)
    return result


def matrix_reshape(
    mat: list[list[int]], r: int, c: int
) -> list[list[int]]:
    """Reshape ``mat`` row-major into ``r`` by ``c``; return it unchanged if impossible."""
    values = [value for row in mat for value in row]
    if len(values) != r * c:
        return mat
    return [values[i * c : (i + 1) * c] for i in range(r)]


def _squared_distance(a: Sequence[int], b: Sequence[int]) -> int:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def valid_square(
    p1: Sequence[int], p2: Sequence[int], p3: Sequence[int], p4: Sequence[int]
) -> bool:
    """Whether four points in any order form a square of positive size."""
    d = sorted(_squared_distance(a, b) for a, b in combinations((p1, p2, p3, p4), 2))
    if d[0] == 0:
        return False
    return d[0] == d[1] == d[2] == d[3] and d[4] == d[5] and d[4] > d[3]