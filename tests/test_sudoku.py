import pytest

from blocksudoku.common import (
    ConfigurationError,
    EMPTY,
    EXIT_FAILURE,
    EXIT_SUCCESS,
    IllegalSymbolError,
    UNKNOWN,
)
from blocksudoku.sudoku import (
    DEMO_SUDOKU_1,
    DEMO_SUDOKU_6X6,
    DEMOS,
    format_values,
    main,
    parse_values,
    Sudoku,
    validation_report,
)

CANONICAL_TEXT = """
# The puzzle used throughout the tests
... ..1 .9.
..9 3.. 7.4
... ... ..5

... ..6 ..1
1.. ..7 468
... ... 5..

57. ..8 3..
.93 6.5 .17
8.6 1.. 9..
"""


# -----------------------------------------------------------------------------
# Text format
# -----------------------------------------------------------------------------

def test_parse(canonical_puzzle):
    values = parse_values(CANONICAL_TEXT, 9)
    assert values == [EMPTY if v == 0 else str(v) for v in canonical_puzzle]


def test_format_parse_is_stable():
    values = parse_values(DEMO_SUDOKU_6X6, 6)
    text = format_values(values, block_width=3, block_height=2)
    assert text.splitlines()[:3] == ["1.. 4..", "..6 ..3", ""]
    assert parse_values(text, 6) == values
    assert format_values(parse_values(text, 6), 3, 2) == text


def test_parse_wrong_shape():
    with pytest.raises(ConfigurationError):
        parse_values("...\n...", 9)
    with pytest.raises(ConfigurationError):
        parse_values("\n".join(["........"] * 9), 9)


def test_bad_symbol():
    text = CANONICAL_TEXT.replace("468", "46X")
    with pytest.raises(IllegalSymbolError):
        Sudoku(text)


# -----------------------------------------------------------------------------
# Sudoku
# -----------------------------------------------------------------------------

def test_solve_logic():
    problem = Sudoku(CANONICAL_TEXT)
    assert str(problem) == problem.problem_str()
    assert problem.solve_logic()
    assert problem.solved
    assert UNKNOWN not in str(problem)
    assert problem.working
    # Second time round is a no-op.
    assert problem.solve_logic()


def test_solve_both_ways():
    by_ip = Sudoku(DEMO_SUDOKU_6X6, block_width=3, block_height=2)
    by_logic = Sudoku(DEMO_SUDOKU_6X6, block_width=3, block_height=2)
    assert by_ip.solve()
    assert by_logic.solve_logic()
    for text in (by_ip.solution_str(), by_logic.solution_str()):
        assert UNKNOWN not in text
    assert by_ip.solution_data == by_logic.solution_data
    assert by_ip.working == ["Solved via integer programming method"]


def test_demo_puzzle_agrees_both_ways():
    by_ip = Sudoku(DEMO_SUDOKU_1)
    by_logic = Sudoku(DEMO_SUDOKU_1)
    assert by_ip.solve()
    assert by_logic.solve_logic()
    assert by_ip.solution_data == by_logic.solution_data


def test_demo_puzzle_solves():
    problem = Sudoku(DEMO_SUDOKU_1)
    assert problem.validate().valid
    assert problem.solve_logic()


def test_validate_report():
    text = CANONICAL_TEXT.replace("... ..6 ..1", "... 3.6 ..1")
    problem = Sudoku(text)
    result = problem.validate()
    assert not result.valid
    report = validation_report(result, problem.problem)
    assert report.splitlines() == [
        "Column 4 contains a duplicate",
        "Duplicate 3 at (row=2, col=4)",
        "Duplicate 3 at (row=4, col=4)",
    ]
    assert validation_report(Sudoku(CANONICAL_TEXT).validate(),
                             problem.problem) == "Valid"


# -----------------------------------------------------------------------------
# Command line
# -----------------------------------------------------------------------------


def run_main(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    return excinfo.value.code


def test_cli_solve(tmp_path):
    filename = tmp_path / "puzzle.txt"
    filename.write_text(CANONICAL_TEXT)
    assert run_main(["solve", str(filename)]) == EXIT_SUCCESS
    assert run_main(["solve", str(filename), "--method", "ip"]) == \
        EXIT_SUCCESS


def test_cli_solve_6x6(tmp_path):
    filename = tmp_path / "puzzle.txt"
    filename.write_text(DEMO_SUDOKU_6X6)
    assert run_main(["--block_width", "3", "--block_height", "2",
                     "solve", str(filename)]) == EXIT_SUCCESS


def test_cli_validate(tmp_path, capsys):
    good = tmp_path / "good.txt"
    good.write_text(CANONICAL_TEXT)
    bad = tmp_path / "bad.txt"
    bad.write_text(CANONICAL_TEXT.replace("... ..6 ..1", "... 3.6 ..1"))
    assert run_main(["validate", str(good)]) == EXIT_SUCCESS
    assert "Valid" in capsys.readouterr().out
    assert run_main(["validate", str(bad)]) == EXIT_FAILURE
    assert "Column 4 contains a duplicate" in capsys.readouterr().out


def test_cli_no_command():
    assert run_main([]) == EXIT_FAILURE


def test_cli_demo():
    assert run_main(["demo"]) == EXIT_SUCCESS


def test_cli_demo_6x6():
    assert run_main(["--block_width", "3", "--block_height", "2",
                     "demo"]) == EXIT_SUCCESS


def test_demo_for_each_size():
    for (block_width, block_height), text in DEMOS.items():
        problem = Sudoku(text, block_width=block_width,
                         block_height=block_height)
        assert problem.solve_logic()


def test_cli_demo_unknown_size():
    with pytest.raises(ConfigurationError):
        main(["--block_width", "2", "--block_height", "2", "demo"])
