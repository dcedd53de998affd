from __future__ import annotations

from npuzzle.domains.board import Board


def roundtrip_manhattan(board: Board) -> int:
    """
    Manhattan distance plus, for every misplaced tile, the walk the blank
    needs from its current cell to that tile. Overestimates; not admissible.
    """
    goal = board.goal
    blank = board.blank_position()
    h = 0
    for pos, tile in board:
        if tile == 0:
            continue
        d = pos.manhattan(goal[tile])
        if d:
            h += d + pos.manhattan(blank)
    return h
