from __future__ import annotations
from collections import deque
from time import perf_counter
from typing import Dict, Optional

from npuzzle.domains.board import Board, State
from npuzzle.domains.position import OFFSETS, Position
from npuzzle.search.a_star import SearchResult


def _neighbors(b: Board):
    n = b.n
    z = b.blank_index()
    blank = Position.from_index(z, n)
    for dx, dy in OFFSETS:
        t = blank.offset(dx, dy)
        if t.in_bounds(n):
            yield b.with_swap(z, t.to_index(n))


def bfs(start: Board, timeout_sec: float | None = None) -> SearchResult:
    """Uninformed breadth-first search to the goal; optimal but memory hungry."""
    t0 = perf_counter()
    q = deque([start])
    parent: Dict[Board, Optional[Board]] = {start: None}
    expanded = generated = 0
    peak = 1

    def result(term, path=None):
        return SearchResult(termination=term, heuristic="", tie_break="fifo", path=path,
                            g=None if path is None else len(path) - 1,
                            evaluated=expanded, generated=generated, peak_states=peak,
                            time=perf_counter() - t0, algorithm="BFS")

    while q:
        if timeout_sec is not None and (perf_counter() - t0) > timeout_sec:
            return result("timeout")
        peak = max(peak, len(q) + expanded)
        s = q.popleft()
        expanded += 1
        if s.is_goal():
            path = []
            cur: Optional[Board] = s
            while cur is not None:
                path.append(cur); cur = parent[cur]
            path.reverse()
            return result("ok", path)
        for s2 in _neighbors(s):
            generated += 1
            if s2 in parent: continue
            parent[s2] = s; q.append(s2)
    return result("exhausted")


def distance_table(n: int, layout: str = "classic") -> Dict[State, int]:
    """Exact move count to the goal for every state reachable from it (small n only)."""
    goal = Board.solved(n, layout)
    dist: Dict[State, int] = {goal.tiles: 0}
    q = deque([goal])
    while q:
        s = q.popleft()
        d = dist[s.tiles] + 1
        for s2 in _neighbors(s):
            if s2.tiles not in dist:
                dist[s2.tiles] = d
                q.append(s2)
    return dist
