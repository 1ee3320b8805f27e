# pushswap

Sorts a list of integers using two stacks, `a` and `b`, and a fixed set of
operations, then prints the operations it used, one per line.

## Operations

| Name  | Effect                                        |
|-------|-----------------------------------------------|
| `sa`  | swap the top two elements of `a`              |
| `sb`  | swap the top two elements of `b`              |
| `ss`  | `sa` and `sb` together                        |
| `pa`  | move the top of `b` onto `a`                  |
| `pb`  | move the top of `a` onto `b`                  |
| `ra`  | rotate `a` upwards (top goes to the bottom)   |
| `rb`  | rotate `b` upwards                            |
| `rr`  | `ra` and `rb` together                        |
| `rra` | rotate `a` downwards (bottom goes to the top) |
| `rrb` | rotate `b` downwards                          |
| `rrr` | `rra` and `rrb` together                      |

A single-stack operation with nothing to act on (for example `sa` on a stack
of one element) does nothing and is not recorded.

## Installation

```
pip install .
```

## Usage

```
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
push-swap --complex 42 -7 13 0 8 99 -1
push-swap --bench 5 4 3 2 1 6
```

Numbers may be given as separate arguments or inside quoted strings; all
arguments are joined and split on spaces. Each number must fit in a 32-bit
signed integer and appear only once. The moves are written to standard
output; the exit status is always 0.

### Strategies

- `--simple` – selection-style sort, O(n²)
- `--medium` – block (chunk) sort, O(n√n)
- `--complex` – binary radix sort on the ranks, O(n log n)
- `--adaptive` – chooses one of the above from the input's disorder, the
  share of out-of-order pairs (below 0.2: simple, up to 0.5: medium, above:
  complex). This is the default.

If several strategy flags are given, the last one wins. Five elements or fewer
are always handled by a dedicated short sort.

### Benchmark

`--bench` writes a report to standard error: the initial disorder as a
percentage, the strategy used, the total number of operations and a count
for each operation.

### Errors

Anything that is not an integer or a known flag, a duplicate number, a number
out of the 32-bit range, or a strategy flag without any number, makes the
command print `Error` to standard error and stop. An input that is already
sorted produces no operations.

## Library use

```python
from pushswap.stacks import Stacks
from pushswap.algorithms import sort_adaptive, disorder_metric
from pushswap.cli import run

stacks = Stacks([3, 2, 5, 1, 4])
strategy = sort_adaptive(stacks)
print(strategy.value, stacks.actions, stacks.values("a"))
print(disorder_metric([3, 2, 5, 1, 4]))

moves, report = run(["--bench", "3", "1", "2"], [3, 1, 2])
```

- `pushswap.stacks` – `Stacks` with the eleven operations, `rotate_up`,
  `rotate_down`, `values` and the `actions` log; `Element`.
- `pushswap.algorithms` – `Strategy`, `sort_few`, `sort_simple`,
  `sort_medium`, `sort_complex`, `sort_adaptive`, `disorder_metric` and helpers.
- `pushswap.parsing` – `parse_arguments`, `verify_tokens` (raises
  `InputError`) and token checks.
- `pushswap.benchmark` – `benchmark_report`, `strategy_label`,
  `count_actions`, `format_percent`.
- `pushswap.cli` – `select_strategy`, `run` and the `main` entry point.

## Tests

```
pip install .[test]
pytest
```