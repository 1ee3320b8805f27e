"""Sorting strategies for the push_swap stacks and the measures they rely on."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Sequence
from itertools import combinations

from pushswap.stacks import Element, Stacks

_SQRT_CAP = 46341


class Strategy(str, enum.Enum):
    """The sorting strategies, named as on the command line."""

    ADAPTIVE = "adaptive"
    SIMPLE = "simple"
    MEDIUM = "medium"
    COMPLEX = "complex"


def disorder_metric(values: Sequence[int]) -> float:
    """Share of pairs (i < j) with values[i] > values[j]; 0.0 when there are no pairs."""
    pairs = 0
    mistakes = 0
    for first, second in combinations(values, 2):
        pairs += 1
        if first > second:
            mistakes += 1
    if not pairs:
        return 0.0
    return mistakes / pairs


def integer_sqrt(n: int) -> int:
    """Floor of the square root of ``n``, never more than 46341."""
    return min(math.isqrt(n), _SQRT_CAP)


def assign_indices(elements: Iterable[Element]) -> None:
    """Give each unranked element its rank by value, starting at 0.

    Elements already holding a rank are left alone. Among equal values the
    one further down is ranked first.
    """
    unranked = [
        (element.value, -position, element)
        for position, element in enumerate(elements)
        if element.index == -1
    ]
    unranked.sort(key=lambda item: (item[0], item[1]))
    for rank, (_, _, element) in enumerate(unranked):
        element.index = rank


def _max_index_position(elements: Sequence[Element]) -> int:
    best = 0
    for position, element in enumerate(elements):
        if elements[best].index <= element.index:
            best = position
    return best


def _min_index(elements: Iterable[Element]) -> int:
    return min(element.index for element in elements)


def _max_index(elements: Iterable[Element]) -> int:
    return max(element.index for element in elements)


def range_block(elements: Sequence[Element], n_block: int) -> int:
    """Width of one block when the rank span is cut into ``n_block`` blocks."""
    if not elements or not n_block:
        return 0
    return (_max_index(elements) - _min_index(elements)) // n_block


def max_bit(elements: Iterable[Element]) -> int:
    """Number of bits needed to write the largest rank."""
    return max(0, _max_index(elements)).bit_length()


def _min_value_position(elements: Sequence[Element]) -> int:
    values = [element.value for element in elements]
    return values.index(min(values))


def _max_value_position(elements: Sequence[Element]) -> int:
    values = [element.value for element in elements]
    return values.index(max(values))


def _block_members(elements: Iterable[Element], low: int, width: int) -> int:
    return sum(1 for element in elements if low <= element.index <= low + width)


def _place_max(stacks: Stacks) -> None:
    position = _max_value_position(stacks.a)
    if position == 0:
        stacks.ra()
    elif position == 1:
        stacks.rra()


def sort_few(stacks: Stacks) -> None:
    """Sort a small stack a, parking all but three elements on b."""
    if not stacks.a:
        return
    size = len(stacks.a)
    while size > 3:
        position = _min_value_position(stacks.a)
        if 1 <= position <= 2:
            stacks.rotate_up("a", position)
        elif position > 2:
            stacks.rotate_down("a", size - position)
        stacks.pb()
        size -= 1
    if size == 3:
        _place_max(stacks)
    if len(stacks.a) >= 2 and stacks.a[0].value > stacks.a[1].value:
        stacks.sa()
    while stacks.b:
        stacks.pa()


def sort_simple(stacks: Stacks) -> None:
    """Selection sort: push the minimum to b by the shorter way round, repeatedly."""
    size = len(stacks.a)
    if size <= 5:
        sort_few(stacks)
        return
    while size > 2:
        position = _min_value_position(stacks.a)
        if position and position <= size // 2:
            stacks.rotate_up("a", position)
        elif position > size // 2:
            stacks.rotate_down("a", size - position)
        stacks.pb()
        size -= 1
    sort_few(stacks)


def _push_back(stacks: Stacks) -> None:
    while stacks.b:
        position = _max_index_position(stacks.b)
        size = len(stacks.b)
        if position <= size // 2:
            stacks.rotate_up("b", position)
        else:
            stacks.rotate_down("b", size - position)
        stacks.pa()


def sort_medium(stacks: Stacks) -> None:
    """Chunk sort: move rank blocks of about sqrt(n) to b, then bring back the maxima."""
    if not stacks.a:
        return
    assign_indices(stacks.a)
    low = _min_index(stacks.a)
    width = range_block(stacks.a, integer_sqrt(len(stacks.a)))
    if len(stacks.a) <= 5:
        sort_few(stacks)
        return
    while stacks.a:
        if not _block_members(stacks.a, low, width):
            low += width + 1
        while stacks.a and not low <= stacks.a[0].index <= low + width:
            stacks.ra()
        if not stacks.a:
            break
        stacks.pb()
        if len(stacks.b) >= 2 and stacks.b[0].index < stacks.b[1].index:
            stacks.sb()
    _push_back(stacks)


def sort_complex(stacks: Stacks) -> None:
    """Binary radix sort on the ranks of stack a."""
    if len(stacks.a) <= 5:
        sort_few(stacks)
        return
    assign_indices(stacks.a)
    for bit in range(max_bit(stacks.a)):
        for _ in range(len(stacks.a)):
            if (stacks.a[0].index >> bit) & 1:
                stacks.ra()
            else:
                stacks.pb()
        while stacks.b:
            stacks.pa()


def sort_adaptive(stacks: Stacks) -> Strategy:
    """Pick a strategy from the disorder of stack a, run it and return it."""
    disorder = disorder_metric(stacks.values("a"))
    if disorder < 0.2:
        sort_simple(stacks)
        return Strategy.SIMPLE
    if disorder <= 0.5:
        sort_medium(stacks)
        return Strategy.MEDIUM
    sort_complex(stacks)
    return Strategy.COMPLEX