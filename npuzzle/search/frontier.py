from __future__ import annotations
import heapq
import itertools
from typing import Dict, Iterator, List, Optional, Tuple

from npuzzle.domains.board import Board
from npuzzle.search.node import Node

TIE_BREAKS = ("h", "g", "fifo", "lifo")

Priority = Tuple[int, int, int]


def priority_tuple(f: int, g: int, h: int, ctr: int, tie_break: str = "h") -> Priority:
    if tie_break == "h":    return (f, h, ctr)
    if tie_break == "g":    return (f, -g, ctr)
    if tie_break == "fifo": return (f, 0, ctr)
    if tie_break == "lifo": return (f, 0, -ctr)
    raise ValueError(f"unknown tie_break {tie_break!r}")


class Frontier:
    """
    Open set: a min-f binary heap plus a board -> live node table.

    Decrease-key is emulated: the superseded node is tombstoned through
    remove() and a fresh node is inserted. Tombstoned entries stay in the heap
    until pop() reaches them. The lookup table only ever holds live nodes.
    """

    def __init__(self, tie_break: str = "h"):
        if tie_break not in TIE_BREAKS:
            raise ValueError(f"unknown tie_break {tie_break!r} (expected one of {', '.join(TIE_BREAKS)})")
        self.tie_break = tie_break
        self._heap: List[Tuple[Priority, int, Node]] = []
        self._live: Dict[Board, Node] = {}
        self._queued: Dict[int, Node] = {}  # identity -> node physically in the heap
        self._counter = itertools.count()

    def insert(self, node: Node) -> None:
        if node.board in self._live:
            raise ValueError(f"board already queued as node {self._live[node.board].identity}; remove it first")
        ctr = next(self._counter)
        heapq.heappush(self._heap, (priority_tuple(node.f, node.g, node.h, ctr, self.tie_break), ctr, node))
        self._live[node.board] = node
        self._queued[node.identity] = node

    def pop(self) -> Node:
        while self._heap:
            _, _, node = heapq.heappop(self._heap)
            del self._queued[node.identity]
            if node.deleted:
                continue
            del self._live[node.board]
            return node
        raise IndexError("pop from empty frontier")

    def find(self, board: Board) -> Optional[Node]:
        return self._live.get(board)

    def remove(self, identity: int) -> None:
        """Tombstone a queued node; the heap entry is purged by a later pop()."""
        node = self._queued.get(identity)
        if node is None or node.deleted:
            return
        node.deleted = True
        if self._live.get(node.board) is node:
            del self._live[node.board]

    def __len__(self) -> int:
        return len(self._live)

    def __bool__(self) -> bool:
        return bool(self._live)

    def __contains__(self, board: Board) -> bool:
        return board in self._live

    def __iter__(self) -> Iterator[Node]:
        return iter(self._live.values())

    @property
    def stale(self) -> int:
        """Tombstoned entries still physically in the heap."""
        return len(self._heap) - len(self._live)
