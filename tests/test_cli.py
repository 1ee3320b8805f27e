import pytest

from pushswap.algorithms import Strategy
from pushswap.cli import main, run, select_strategy
from pushswap.stacks import Stacks


def _replay(values, moves):
    stacks = Stacks(values)
    for move in moves:
        getattr(stacks, move)()
    return stacks


def test_select_strategy_default_is_adaptive():
    assert select_strategy(["3", "1", "2"]) is Strategy.ADAPTIVE


def test_select_strategy_named_flag():
    assert select_strategy(["--simple", "1", "2"]) is Strategy.SIMPLE


def test_select_strategy_last_flag_wins():
    assert select_strategy(["--simple", "5", "--complex"]) is Strategy.COMPLEX


def test_run_sorted_input_needs_no_moves():
    tokens = ["1", "2", "3", "4"]
    assert run(tokens, [1, 2, 3, 4]) == ([], None)


def test_run_empty_values():
    assert run(["--bench"], []) == ([], None)


@pytest.mark.parametrize("flag", ["--adaptive", "--simple", "--medium", "--complex"])
@pytest.mark.parametrize(
    "values",
    [
        [2, 1],
        [3, 1, 2],
        [5, 4, 3, 2, 1],
        [9, -3, 7, 0, 12, 4, -8, 1, 6, 2, 15, -1],
        list(range(30, 0, -1)),
        [1, 2, 3, 5, 4, 6, 7, 8, 10, 9],
    ],
)
def test_run_moves_sort_the_stack(flag, values):
    tokens = [flag] + [str(value) for value in values]
    moves, report = run(tokens, values)
    stacks = _replay(values, moves)
    assert stacks.values("a") == sorted(values)
    assert stacks.values("b") == []
    assert report is None


def test_run_bench_named_strategy():
    values = [4, 9, 1, 7, 3, 8, 2]
    tokens = ["--bench", "--simple"] + [str(value) for value in values]
    moves, report = run(tokens, values)
    assert "[bench] strategy:\tSimple / O(n^2)\n" in report
    assert f"[bench] total_ops:\t{len(moves)}\n" in report


def test_run_bench_adaptive_reversed_picks_complex():
    values = list(range(10, 0, -1))
    tokens = ["--bench"] + [str(value) for value in values]
    _, report = run(tokens, values)
    assert report.startswith("[bench] disorder:\t100.00%\n")
    assert "Adaptive / O(nlogn)" in report


def test_run_bench_sorted_adaptive():
    values = [1, 2, 3]
    moves, report = run(["--bench", "1", "2", "3"], values)
    assert moves == []
    assert "[bench] strategy:\tAdaptive / O(n^2)\n" in report


def test_main_prints_sorting_moves(capsys):
    assert main(["3 2", "1"]) == 0
    captured = capsys.readouterr()
    moves = captured.out.split()
    assert _replay([3, 2, 1], moves).values("a") == [1, 2, 3]
    assert captured.err == ""


@pytest.mark.parametrize(
    "args",
    [["1", "1"], ["abc"], ["2147483648"], ["--simple"], ["1", "--fast"]],
)
def test_main_rejects_bad_input(args, capsys):
    assert main(args) == 0
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_without_arguments(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert (captured.out, captured.err) == ("", "")


def test_main_bench_goes_to_stderr(capsys):
    assert main(["--bench", "--complex", "2", "1"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "sa\n"
    assert "[bench] strategy:\tComplex / O(nlogn)\n" in captured.err