from __future__ import annotations
from typing import NamedTuple, Tuple

# Blank moves in a fixed order: +x, +y, -x, -y
OFFSETS: Tuple[Tuple[int, int], ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))


class Position(NamedTuple):
    """Grid coordinate: x is the column, y the row."""
    x: int
    y: int

    @classmethod
    def from_index(cls, index: int, n: int) -> "Position":
        return cls(index % n, index // n)

    def to_index(self, n: int) -> int:
        return self.y * n + self.x

    def offset(self, dx: int, dy: int) -> "Position":
        return Position(self.x + dx, self.y + dy)

    def in_bounds(self, n: int) -> bool:
        return 0 <= self.x < n and 0 <= self.y < n

    def manhattan(self, other: "Position") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def __str__(self) -> str:
        return f"{self.x}-{self.y}"
