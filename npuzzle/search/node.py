from __future__ import annotations
import sys
from typing import Callable, List, Optional

from npuzzle.domains.board import Board
from npuzzle.domains.position import OFFSETS, Position

# Bootstrap priority of the synthetic root; never part of a path cost.
ROOT_F = sys.maxsize


class Node:
    """
    One search state. f is fixed at creation; the only later change is the
    frontier setting `deleted` when a cheaper duplicate supersedes it.
    """
    __slots__ = ("board", "g", "h", "f", "identity", "parent", "deleted")

    def __init__(self, board: Board, g: int, h: int, identity: int,
                 parent: Optional["Node"] = None, f: Optional[int] = None):
        self.board = board
        self.g = g
        self.h = h
        self.f = g + h if f is None else f
        self.identity = identity
        self.parent = parent
        self.deleted = False

    @classmethod
    def root(cls, board: Board, next_id: Callable[[], int]) -> "Node":
        return cls(board, 0, 0, next_id(), parent=None, f=ROOT_F)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    # membership identity is the board alone
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.board == other.board

    def __hash__(self) -> int:
        return hash(self.board)

    def __repr__(self) -> str:
        f = "root" if self.f == ROOT_F else self.f
        return f"Node(id={self.identity}, g={self.g}, h={self.h}, f={f}, tiles={self.board.tiles})"


def get_successors(node: Node, heuristic: Callable[[Board], int],
                   next_id: Callable[[], int]) -> List[Node]:
    """Children of node in fixed blank-move order (+x, +y, -x, -y)."""
    board = node.board
    n = board.n
    z = board.blank_index()
    blank = Position.from_index(z, n)
    out: List[Node] = []
    for dx, dy in OFFSETS:
        target = blank.offset(dx, dy)
        if not target.in_bounds(n):
            continue
        child_board = board.with_swap(z, target.to_index(n))
        out.append(Node(child_board, node.g + 1, heuristic(child_board), next_id(), parent=node))
    return out


def reconstruct_path(node: Node) -> List[Board]:
    path: List[Board] = []
    cur: Optional[Node] = node
    while cur is not None:
        path.append(cur.board)
        cur = cur.parent
    path.reverse()
    return path
