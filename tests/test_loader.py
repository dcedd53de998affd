import pytest

from npuzzle.domains.loader import load_puzzle, parse_puzzle
from npuzzle.errors import FormatError

GOOD = """\
# This puzzle is solvable
3
1 2 3   # first row
4 0 6
7 5 8
"""


def test_parse_with_comments():
    b = parse_puzzle(GOOD)
    assert b.n == 3
    assert b.tiles == (1, 2, 3, 4, 0, 6, 7, 5, 8)
    assert b.goal.layout == "classic"


def test_parse_snail_layout():
    b = parse_puzzle(GOOD, layout="snail")
    assert b.goal.layout == "snail"


def test_blank_lines_and_extra_spaces_are_ignored():
    b = parse_puzzle("\n2\n\n  1   0 \n3 2\n\n")
    assert b.tiles == (1, 0, 3, 2)


@pytest.mark.parametrize("text,needle", [
    ("", "empty"),
    ("# only comments\n", "empty"),
    ("3 3\n1 2 3\n", "size"),
    ("1\n0\n", "at least 2"),
    ("2\n1 0\n3\n", "mismatch"),
    ("2\n1 x\n3 2\n", "not an integer"),
    ("2\n1 0\n", "expected 2 rows"),
    ("2\n1 0\n3 2\n3 2\n", "more than 2 rows"),
    ("2\n1 1\n3 2\n", "duplicate"),
    ("2\n1 0\n3 9\n", "out of range"),
])
def test_malformed_inputs(text, needle):
    with pytest.raises(FormatError) as ei:
        parse_puzzle(text)
    assert needle in str(ei.value)


def test_error_names_the_line():
    with pytest.raises(FormatError) as ei:
        parse_puzzle("# header\n2\n1 0\n3 2 4\n")
    assert ei.value.line == 4
    assert str(ei.value).startswith("line 4:")


def test_load_from_file(tmp_path):
    p = tmp_path / "p.txt"
    p.write_text(GOOD)
    assert load_puzzle(p).tiles[4] == 0


def test_missing_file(tmp_path):
    with pytest.raises(FormatError):
        load_puzzle(tmp_path / "nope.txt")


def test_undecodable_file(tmp_path):
    p = tmp_path / "p.txt"
    p.write_bytes(b"3\n1 2 3\n4 \xff 6\n7 5 8\n")
    with pytest.raises(FormatError, match="could not decode"):
        load_puzzle(p)
