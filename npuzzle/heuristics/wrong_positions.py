from __future__ import annotations

from npuzzle.domains.board import Board


def wrong_positions(board: Board) -> int:
    """Number of non-blank tiles off their goal cell."""
    rank = board.goal.rank
    return sum(1 for idx, tile in enumerate(board.tiles) if tile != 0 and rank(tile) != idx)
