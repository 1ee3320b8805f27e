"""The push_swap command: read numbers and flags, print the moves that sort them."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.algorithms import (
    Strategy,
    disorder_metric,
    sort_adaptive,
    sort_complex,
    sort_medium,
    sort_simple,
)
from pushswap.benchmark import benchmark_report
from pushswap.parsing import (
    InputError,
    has_bench_flag,
    is_complexity_flag,
    parse_arguments,
)
from pushswap.stacks import Stacks

_SORTED_THRESHOLD = 1e-6

_SORTERS = {
    Strategy.SIMPLE: sort_simple,
    Strategy.MEDIUM: sort_medium,
    Strategy.COMPLEX: sort_complex,
}


def select_strategy(tokens: Sequence[str]) -> Strategy:
    """The strategy named by the last strategy flag; adaptive when there is none."""
    chosen = Strategy.ADAPTIVE
    for token in tokens:
        if is_complexity_flag(token):
            chosen = Strategy(token[2:])
    return chosen


def run(tokens: Sequence[str], values: Sequence[int]) -> tuple[list[str], str | None]:
    """Sort ``values`` as the flags in ``tokens`` ask.

    Returns the moves made and, when ``--bench`` is among the tokens, the
    benchmark report. An already sorted input needs no moves.
    """
    if not values or not tokens:
        return [], None
    stacks = Stacks(values)
    disorder = disorder_metric(list(values))
    strategy = select_strategy(tokens)
    is_adaptive = strategy is Strategy.ADAPTIVE
    if disorder >= _SORTED_THRESHOLD:
        if is_adaptive:
            strategy = sort_adaptive(stacks)
        else:
            _SORTERS[strategy](stacks)
    report = None
    if has_bench_flag(tokens):
        report = benchmark_report(disorder, stacks.actions, strategy, is_adaptive)
    return list(stacks.actions), report


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; moves go to standard output, errors and reports to standard error."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        tokens, values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    moves, report = run(tokens, values)
    if report is not None:
        sys.stderr.write(report)
    for move in moves:
        sys.stdout.write(move + "\n")
    return 0