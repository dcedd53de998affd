from __future__ import annotations
from enum import Enum
from typing import Callable, Dict, Union

from npuzzle.domains.board import Board
from npuzzle.heuristics.euclidean import euclidean
from npuzzle.heuristics.manhattan import manhattan
from npuzzle.heuristics.roundtrip_manhattan import roundtrip_manhattan
from npuzzle.heuristics.wrong_positions import wrong_positions


class Heuristic(Enum):
    """The fixed set of estimators; a member is called like the function it names."""
    MANHATTAN = "manhattan"
    EUCLIDEAN = "euclidean"
    WRONG_POSITIONS = "wrong-positions"
    ROUNDTRIP_MANHATTAN = "roundtrip-manhattan"

    def __call__(self, board: Board) -> int:
        return _FUNCS[self](board)

    @property
    def admissible(self) -> bool:
        return self is not Heuristic.ROUNDTRIP_MANHATTAN

    def __str__(self) -> str:
        return self.value


_FUNCS: Dict[Heuristic, Callable[[Board], int]] = {
    Heuristic.MANHATTAN: manhattan,
    Heuristic.EUCLIDEAN: euclidean,
    Heuristic.WRONG_POSITIONS: wrong_positions,
    Heuristic.ROUNDTRIP_MANHATTAN: roundtrip_manhattan,
}

_ALIASES: Dict[str, Heuristic] = {
    "m": Heuristic.MANHATTAN,
    "e": Heuristic.EUCLIDEAN,
    "w": Heuristic.WRONG_POSITIONS,
    "wrong": Heuristic.WRONG_POSITIONS,
    "misplaced": Heuristic.WRONG_POSITIONS,
    "r": Heuristic.ROUNDTRIP_MANHATTAN,
    "roundtrip": Heuristic.ROUNDTRIP_MANHATTAN,
}

NAMES = tuple(h.value for h in Heuristic)


def choose_heuristic(name: Union[str, Heuristic, None] = None) -> Heuristic:
    """Resolve a heuristic by name; None means Manhattan."""
    if name is None:
        return Heuristic.MANHATTAN
    if isinstance(name, Heuristic):
        return name
    key = name.strip().lower().replace("_", "-")
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return Heuristic(key)
    except ValueError:
        raise ValueError(f"unknown heuristic {name!r} (expected one of {', '.join(NAMES)})") from None
