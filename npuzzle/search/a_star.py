from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Union
from time import perf_counter
import itertools
import logging

from npuzzle.domains.board import Board, is_solvable
from npuzzle.errors import BudgetExceeded, ExhaustedError, UnsolvableError
from npuzzle.heuristics.select import Heuristic, choose_heuristic
from npuzzle.search.closed_set import ClosedSet
from npuzzle.search.frontier import Frontier
from npuzzle.search.node import Node, get_successors, reconstruct_path

log = logging.getLogger(__name__)


@dataclass
class SearchResult:
    termination: str
    heuristic: str
    tie_break: str
    path: Optional[List[Board]] = None
    g: Optional[int] = None
    evaluated: int = 0
    generated: int = 0
    reopened: int = 0
    peak_states: int = 0
    time: float = 0.0
    algorithm: str = "A*"

    @property
    def ok(self) -> bool:
        return self.termination == "ok"

    def raise_for_status(self) -> "SearchResult":
        if self.termination == "unsolvable":
            raise UnsolvableError("puzzle is not solvable")
        if self.termination == "exhausted":
            raise ExhaustedError(f"open set exhausted after {self.evaluated} states without reaching the goal")
        if self.termination in ("timeout", "budget"):
            raise BudgetExceeded(f"search stopped ({self.termination}) after {self.evaluated} states")
        return self

    def as_row(self) -> Dict[str, object]:
        return {
            "algorithm": self.algorithm,
            "heuristic": self.heuristic,
            "tie_break": self.tie_break,
            "termination": self.termination,
            "g": "" if self.g is None else self.g,
            "evaluated": self.evaluated,
            "generated": self.generated,
            "reopened": self.reopened,
            "peak_states": self.peak_states,
            "time_sec": f"{self.time:.6f}",
        }


class Solver:
    """
    A* over sliding-tile boards: solvability precheck, then best-first search
    with duplicate detection, lazy decrease-key and closed-set reopening.

    timeout_sec / max_evaluated are optional caller budgets checked between
    pops; the search itself has none.
    """

    def __init__(
        self,
        board: Board,
        heuristic: Union[str, Heuristic, None] = None,
        tie_break: str = "h",
        timeout_sec: Optional[float] = None,
        max_evaluated: Optional[int] = None,
        progress_every: int = 0,
    ):
        self.board = board
        self.heuristic = choose_heuristic(heuristic)
        self.tie_break = tie_break
        self.timeout_sec = timeout_sec
        self.max_evaluated = max_evaluated
        self.progress_every = progress_every

        self.frontier = Frontier(tie_break)
        self.closed = ClosedSet()
        self.evaluated = 0
        self.generated = 0
        self.reopened = 0
        self.peak_states = 0
        self._ids = itertools.count()

    def _next_id(self) -> int:
        return next(self._ids)

    def _result(self, termination: str, t0: float, node: Optional[Node] = None) -> SearchResult:
        return SearchResult(
            termination=termination,
            heuristic=str(self.heuristic),
            tie_break=self.tie_break,
            path=reconstruct_path(node) if node is not None else None,
            g=node.g if node is not None else None,
            evaluated=self.evaluated,
            generated=self.generated,
            reopened=self.reopened,
            peak_states=self.peak_states,
            time=perf_counter() - t0,
        )

    def _over_budget(self, t0: float) -> Optional[str]:
        if self.timeout_sec is not None and (perf_counter() - t0) > self.timeout_sec:
            return "timeout"
        if self.max_evaluated is not None and self.evaluated >= self.max_evaluated:
            return "budget"
        return None

    def reconcile(self, child: Node) -> bool:
        """
        Decide whether a freshly generated node goes into the frontier.
        A cheaper rediscovery of a closed state reopens it; a cheaper
        rediscovery of a queued state tombstones the queued node.
        """
        # same board => same h, so comparing g is comparing f
        old = self.closed.get(child.board)
        if old is not None:
            if child.g < old.g:
                self.closed.evict(child.board)
                self.reopened += 1
                return True
            return False
        old = self.frontier.find(child.board)
        if old is not None:
            if child.g < old.g:
                self.frontier.remove(old.identity)
                return True
            return False
        return True

    def expand(self, node: Node) -> None:
        """Generate node's successors, queue the ones reconcile keeps, close node."""
        children = get_successors(node, self.heuristic, self._next_id)
        self.generated += len(children)
        marked = [child for child in children if self.reconcile(child)]
        for child in marked:
            self.frontier.insert(child)
        self.closed.add(node)
        self.peak_states = max(self.peak_states, len(self.frontier) + len(self.closed))

    def solve(self) -> SearchResult:
        if self.evaluated or self.frontier or self.closed:
            raise RuntimeError("a Solver runs once; create a new one for another search")
        t0 = perf_counter()
        if not is_solvable(self.board):
            log.info("%dx%d puzzle is unsolvable; search skipped", self.board.n, self.board.n)
            return self._result("unsolvable", t0)

        hfun = self.heuristic
        frontier, closed = self.frontier, self.closed
        log.info("A* start: n=%d heuristic=%s tie_break=%s", self.board.n, hfun, self.tie_break)

        frontier.insert(Node.root(self.board, self._next_id))
        self.peak_states = max(self.peak_states, len(frontier) + len(closed))

        while frontier:
            stop = self._over_budget(t0)
            if stop is not None:
                log.info("A* stopped (%s) after %d states", stop, self.evaluated)
                return self._result(stop, t0)

            node = frontier.pop()
            self.evaluated += 1
            if self.progress_every and self.evaluated % self.progress_every == 0:
                log.debug("evaluated=%d open=%d closed=%d stale=%d g=%d f=%d",
                          self.evaluated, len(frontier), len(closed), frontier.stale, node.g, node.f)

            if hfun(node.board) == 0:
                result = self._result("ok", t0, node)
                log.info("A* solved in %d moves (%d states evaluated, peak %d)",
                         node.g, self.evaluated, self.peak_states)
                return result

            self.expand(node)

        log.warning("A* exhausted the open set after %d states", self.evaluated)
        return self._result("exhausted", t0)


def a_star(
    start: Board,
    heuristic: Union[str, Heuristic, None] = None,
    tie_break: str = "h",
    timeout_sec: Optional[float] = None,
    max_evaluated: Optional[int] = None,
    progress_every: int = 0,
) -> SearchResult:
    """One-shot A* run; see Solver."""
    return Solver(start, heuristic, tie_break=tie_break, timeout_sec=timeout_sec,
                  max_evaluated=max_evaluated, progress_every=progress_every).solve()
