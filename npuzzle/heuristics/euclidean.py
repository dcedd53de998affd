from __future__ import annotations
import math

from npuzzle.domains.board import Board


def euclidean(board: Board) -> int:
    """Sum of straight-line distances to goal positions, truncated to an int."""
    n = board.n
    goal = board.goal
    total = 0.0
    for idx, tile in enumerate(board.tiles):
        if tile == 0:
            continue
        gx, gy = goal[tile]
        total += math.hypot(idx % n - gx, idx // n - gy)
    return int(total)
