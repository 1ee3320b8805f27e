import pytest

from pushswap.algorithms import Strategy
from pushswap.benchmark import (
    benchmark_report,
    count_actions,
    format_percent,
    strategy_label,
)


def test_format_percent_zero():
    assert format_percent(0.0) == "0.00"


def test_format_percent_hundred():
    assert format_percent(100.0) == "100.00"


def test_format_percent_half():
    assert format_percent(33.5) == "33.50"


@pytest.mark.parametrize("value", [1.0, 7.25, 42.75, 99.5])
def test_format_percent_starts_with_whole_part(value):
    assert format_percent(value).startswith(f"{int(value)}.")


def test_count_actions_counts_only_matching_names():
    actions = ["sa", "pb", "sa", "ra", "rra"]
    assert count_actions(actions, "sa") == 2
    assert count_actions(actions, "rra") == 1
    assert count_actions(actions, "rrr") == 0


def test_count_actions_empty_name():
    assert count_actions(["sa"], "") == 0


@pytest.mark.parametrize(
    "strategy, expected",
    [
        (Strategy.SIMPLE, "Simple / O(n^2)"),
        (Strategy.MEDIUM, "Medium / O(n\u221an)"),
        (Strategy.COMPLEX, "Complex / O(nlogn)"),
    ],
)
def test_strategy_label_fixed(strategy, expected):
    assert strategy_label(strategy, False) == expected


@pytest.mark.parametrize(
    "strategy, expected",
    [
        (Strategy.ADAPTIVE, "Adaptive / O(n^2)"),
        (Strategy.SIMPLE, "Adaptive / O(n^2)"),
        (Strategy.MEDIUM, "Adaptive / O(n\u221an)"),
        (Strategy.COMPLEX, "Adaptive / O(nlogn)"),
    ],
)
def test_strategy_label_adaptive(strategy, expected):
    assert strategy_label(strategy, True) == expected


def test_strategy_label_accepts_names():
    assert strategy_label("complex", False) == "Complex / O(nlogn)"


def test_strategy_label_unknown_name():
    with pytest.raises(ValueError):
        strategy_label("bogus", False)


def test_benchmark_report_layout():
    actions = ["pb", "ra", "pa", "sa", "rra"]
    report = benchmark_report(0.0, actions, Strategy.SIMPLE, False)
    lines = report.split("\n")
    assert report.endswith("\n")
    assert lines[0] == "[bench] disorder:\t0.00%"
    assert lines[1] == "[bench] strategy:\tSimple / O(n^2)"
    assert lines[2] == f"[bench] total_ops:\t{len(actions)}"
    assert lines[3] == "[bench] sa:\t1\tsb:\t0\tpa:\t1\tss:\t0\tpb:\t1"
    assert lines[4] == "[bench] ra:\t1\trb:\t0\trr:\t0\trra:\t1\trrb:\t0\trrr:\t0"


def test_benchmark_report_full_disorder():
    report = benchmark_report(1.0, [], Strategy.COMPLEX, True)
    assert report.startswith("[bench] disorder:\t100.00%\n")
    assert "[bench] strategy:\tAdaptive / O(nlogn)\n" in report