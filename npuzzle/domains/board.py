from __future__ import annotations
from functools import lru_cache
from typing import Iterator, List, Optional, Sequence, Tuple

from npuzzle.domains.position import Position
from npuzzle.errors import StateError

State = Tuple[int, ...]

LAYOUTS = ("classic", "snail")


class GoalPositions:
    """
    Read-only label -> goal coordinate table for one (size, layout).
    Built once per pair via GoalPositions.for_size and shared by every board.
    """
    __slots__ = ("n", "layout", "_pos", "_rank", "tiles")

    def __init__(self, n: int, layout: str = "classic"):
        if n < 2:
            raise StateError(f"board size must be at least 2, got {n}")
        if layout not in LAYOUTS:
            raise ValueError(f"unknown goal layout {layout!r} (expected one of {', '.join(LAYOUTS)})")
        self.n = n
        self.layout = layout
        cells = _spiral_cells(n) if layout == "snail" else [Position.from_index(i, n) for i in range(n * n)]
        # labels 1..n²-1 take the cells in walk order, the blank gets the leftover one
        pos: List[Position] = [cells[-1]] + cells[:-1]
        self._pos: Tuple[Position, ...] = tuple(pos)
        self._rank: Tuple[int, ...] = tuple(p.to_index(n) for p in pos)
        tiles = [0] * (n * n)
        for label, idx in enumerate(self._rank):
            tiles[idx] = label
        self.tiles: State = tuple(tiles)

    @staticmethod
    def for_size(n: int, layout: str = "classic") -> "GoalPositions":
        return _goal_positions(n, layout)

    def __getitem__(self, label: int) -> Position:
        return self._pos[label]

    def __len__(self) -> int:
        return len(self._pos)

    def rank(self, label: int) -> int:
        """Goal linear index of a label."""
        return self._rank[label]

    def __repr__(self) -> str:
        return f"GoalPositions(n={self.n}, layout={self.layout!r})"


@lru_cache(maxsize=None)
def _goal_positions(n: int, layout: str) -> GoalPositions:
    return GoalPositions(n, layout)


def _spiral_cells(n: int) -> List[Position]:
    """Inward spiral from (0,0): right, down, left, up; turn on wall or visited cell."""
    dirs = ((1, 0), (0, 1), (-1, 0), (0, -1))
    seen = set()
    out: List[Position] = []
    p = Position(0, 0)
    d = 0
    for _ in range(n * n):
        out.append(p)
        seen.add(p)
        nxt = p.offset(*dirs[d])
        if not nxt.in_bounds(n) or nxt in seen:
            d = (d + 1) % 4
            nxt = p.offset(*dirs[d])
        p = nxt
    return out


class Board:
    """Immutable n×n tile layout (row-major, 0 is the blank)."""
    __slots__ = ("n", "tiles", "goal", "_hash")

    def __init__(self, n: int, tiles: Sequence[int],
                 goal: Optional[GoalPositions] = None, layout: str = "classic"):
        tiles = tuple(tiles)
        if n < 2:
            raise StateError(f"board size must be at least 2, got {n}")
        if len(tiles) != n * n:
            raise StateError(f"expected {n * n} tiles for a {n}x{n} board, got {len(tiles)}")
        seen = set()
        for t in tiles:
            if not 0 <= t < n * n:
                raise StateError(f"tile {t} out of range 0..{n * n - 1}")
            if t in seen:
                raise StateError(f"duplicate tile {t}")
            seen.add(t)
        if goal is None:
            goal = GoalPositions.for_size(n, layout)
        elif goal.n != n:
            raise StateError(f"goal table is for size {goal.n}, board is {n}")
        self._init(n, tiles, goal)

    def _init(self, n: int, tiles: State, goal: GoalPositions) -> None:
        self.n = n
        self.tiles = tiles
        self.goal = goal
        self._hash = hash(tiles)

    @classmethod
    def _derived(cls, n: int, tiles: State, goal: GoalPositions) -> "Board":
        # successor boards come from an already validated one
        b = cls.__new__(cls)
        b._init(n, tiles, goal)
        return b

    @classmethod
    def solved(cls, n: int, layout: str = "classic") -> "Board":
        goal = GoalPositions.for_size(n, layout)
        return cls._derived(n, goal.tiles, goal)

    # ---------- access ----------
    def __getitem__(self, position: Position) -> int:
        return self.tiles[position.y * self.n + position.x]

    index = __getitem__

    def __iter__(self) -> Iterator[Tuple[Position, int]]:
        n = self.n
        for i, t in enumerate(self.tiles):
            yield Position(i % n, i // n), t

    def blank_index(self) -> int:
        return self.tiles.index(0)

    def blank_position(self) -> Position:
        return Position.from_index(self.blank_index(), self.n)

    def rows(self) -> List[State]:
        n = self.n
        return [self.tiles[r * n:(r + 1) * n] for r in range(n)]

    def is_goal(self) -> bool:
        return self.tiles == self.goal.tiles

    # ---------- successor construction ----------
    def with_swap(self, a: int, b: int) -> "Board":
        """New board with linear cells a and b exchanged; self is untouched."""
        cells = list(self.tiles)
        cells[a], cells[b] = cells[b], cells[a]
        return Board._derived(self.n, tuple(cells), self.goal)

    # ---------- identity ----------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.tiles == other.tiles

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        return f"Board({self.n}, {self.tiles!r})"

    def __str__(self) -> str:
        width = len(str(self.n * self.n - 1))
        return "\n".join(" ".join(str(t).rjust(width) for t in row) for row in self.rows())


# ---------- solvability ----------
def inversions(board: Board) -> int:
    """Pairs i<j of non-blank tiles whose goal ranks are out of order."""
    ranks = [board.goal.rank(t) for t in board.tiles if t != 0]
    inv = 0
    for i in range(len(ranks)):
        for j in range(i + 1, len(ranks)):
            if ranks[i] > ranks[j]:
                inv += 1
    return inv


def is_solvable(board: Board) -> bool:
    """
    Solvability rules (ranks make the goal itself inversion-free):
       - n odd:  inversions must be even
       - n even: inversions + |blank row - goal blank row| must be even
    With the classic layout rank order is label order.
    """
    inv = inversions(board)
    if board.n % 2 == 1:
        return inv % 2 == 0
    blank_row = board.blank_index() // board.n
    goal_blank_row = board.goal[0].y
    return (inv + abs(blank_row - goal_blank_row)) % 2 == 0
