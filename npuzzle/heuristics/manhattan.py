from __future__ import annotations

from npuzzle.domains.board import Board


def manhattan(board: Board) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    n = board.n
    goal = board.goal
    dist = 0
    for idx, tile in enumerate(board.tiles):
        if tile == 0:
            continue
        gx, gy = goal[tile]
        dist += abs(idx % n - gx) + abs(idx // n - gy)
    return dist
