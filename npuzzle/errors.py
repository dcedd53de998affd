from __future__ import annotations


class PuzzleError(Exception):
    """Base class for everything the solver reports as a failure."""


class FormatError(PuzzleError, ValueError):
    """Malformed puzzle description (bad file text, bad numbers, bad shape)."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class StateError(FormatError):
    """A board handed to the core is structurally impossible."""


class UnsolvableError(PuzzleError):
    """The inversion / blank-row parity rules out any solution."""


class ExhaustedError(PuzzleError):
    """Open set ran dry without reaching a goal state."""


class BudgetExceeded(PuzzleError):
    """A caller-imposed time or evaluation budget stopped the search."""
