from __future__ import annotations
from typing import Dict, Optional

from npuzzle.domains.board import Board
from npuzzle.search.node import Node


class ClosedSet:
    """Settled states. A state is evicted when a cheaper path to it shows up (reopening)."""

    def __init__(self):
        self._nodes: Dict[Board, Node] = {}

    def add(self, node: Node) -> None:
        self._nodes[node.board] = node

    def get(self, board: Board) -> Optional[Node]:
        return self._nodes.get(board)

    def evict(self, board: Board) -> Node:
        return self._nodes.pop(board)

    def __contains__(self, board: Board) -> bool:
        return board in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)
