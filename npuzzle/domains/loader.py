from __future__ import annotations
from pathlib import Path
from typing import List, Optional, Tuple

from npuzzle.domains.board import Board
from npuzzle.errors import FormatError, StateError


def _strip(line: str) -> str:
    return line.split("#", 1)[0].strip()


def _ints(text: str, lineno: int) -> List[int]:
    out: List[int] = []
    for tok in text.split():
        try:
            out.append(int(tok))
        except ValueError:
            raise FormatError(f"not an integer: {tok!r}", line=lineno) from None
    return out


def parse_puzzle(text: str, layout: str = "classic") -> Board:
    """
    Puzzle text format:
        # comment lines (and trailing '# ...' comments) are ignored
        3          <- size n
        1 2 3      <- n rows of n labels, 0 is the blank
        4 0 6
        7 5 8
    """
    n: Optional[int] = None
    rows: List[Tuple[int, List[int]]] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = _strip(raw)
        if not line:
            continue
        nums = _ints(line, lineno)
        if n is None:
            if len(nums) != 1:
                raise FormatError("first line must hold only the puzzle size", line=lineno)
            n = nums[0]
            if n < 2:
                raise FormatError(f"puzzle size must be at least 2, got {n}", line=lineno)
            continue
        if len(nums) != n:
            raise FormatError(f"line length mismatch {len(nums)} vs {n}", line=lineno)
        if len(rows) == n:
            raise FormatError(f"more than {n} rows", line=lineno)
        rows.append((lineno, nums))

    if n is None:
        raise FormatError("empty puzzle description")
    if len(rows) != n:
        raise FormatError(f"expected {n} rows, got {len(rows)}")

    tiles = [t for _, row in rows for t in row]
    try:
        return Board(n, tiles, layout=layout)
    except StateError as e:
        raise FormatError(str(e)) from e


def load_puzzle(path, layout: str = "classic") -> Board:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise FormatError(f"could not open {p}: {e.strerror}") from e
    except UnicodeDecodeError as e:
        raise FormatError(f"could not decode {p}: {e.reason} at byte {e.start}") from e
    return parse_puzzle(text, layout=layout)
