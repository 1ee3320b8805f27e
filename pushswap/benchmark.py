"""The benchmark report written to standard error when ``--bench`` is given."""

from __future__ import annotations

import math
import struct
from collections.abc import Iterable, Sequence

from pushswap.algorithms import Strategy

_COMPLEXITY = {
    Strategy.SIMPLE: "O(n^2)",
    Strategy.MEDIUM: "O(n\u221an)",
    Strategy.COMPLEX: "O(nlogn)",
}

_FIRST_ROW = ("sa", "sb", "pa", "ss", "pb")
_SECOND_ROW = ("ra", "rb", "rr", "rra", "rrb", "rrr")


def _f32(number: float) -> float:
    """Round ``number`` to single precision."""
    return struct.unpack("f", struct.pack("f", number))[0]


def format_percent(value: float) -> str:
    """Write ``value`` with its whole part, a dot and two hundredths digits.

    The hundredths are written as a number; below ten a trailing ``0`` is
    added, so 0.05 is written ``0.50``.
    """
    number = _f32(value)
    whole = int(number)
    hundredths = int(_f32(number * 100))
    fraction = int(math.fmod(hundredths, 100))
    text = f"{whole}.{fraction}"
    if fraction < 10:
        text += "0"
    return text


def count_actions(actions: Iterable[str], name: str) -> int:
    """How many times the move ``name`` appears in ``actions``."""
    if not name:
        return 0
    return sum(1 for action in actions if action == name)


def strategy_label(strategy: Strategy | str, is_adaptive: bool) -> str:
    """The strategy line of the report, such as ``Medium / O(n√n)``.

    An adaptive run that sorted nothing still reports ``O(n^2)``.
    """
    chosen = Strategy(strategy)
    if is_adaptive:
        complexity = _COMPLEXITY.get(chosen, "O(n^2)")
        return f"Adaptive / {complexity}"
    if chosen is Strategy.ADAPTIVE:
        return ""
    return f"{chosen.value.capitalize()} / {_COMPLEXITY[chosen]}"


def _row(actions: Sequence[str], names: Sequence[str]) -> str:
    return "\t".join(f"{name}:\t{count_actions(actions, name)}" for name in names)


def benchmark_report(
    disorder: float,
    actions: Sequence[str],
    strategy: Strategy | str,
    is_adaptive: bool,
) -> str:
    """The full benchmark text for a run, ending with a newline."""
    label = strategy_label(strategy, is_adaptive)
    percent = format_percent(_f32(_f32(disorder) * 100))
    lines = [
        f"[bench] disorder:\t{percent}%\n",
        f"[bench] strategy:\t{label}" + ("\n" if label else ""),
        f"[bench] total_ops:\t{len(actions)}\n",
        f"[bench] {_row(actions, _FIRST_ROW)}\n",
        f"[bench] {_row(actions, _SECOND_ROW)}\n",
    ]
    return "".join(lines)