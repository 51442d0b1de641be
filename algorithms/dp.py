"""
dp.py — Bottom-up Dynamic Programming
======================================
Fibonacci, factorial, 0/1 knapsack and LCS, each filled strictly
bottom-up into a 1-D or 2-D table.  One FILL step per cell filled; each
step's overlay carries the recurrence inputs and the resulting value so
the log line can be reproduced without re-deriving it:

    overlay = {"cell": [i] or [i, j], "inputs": {...}, "value": v}

Cells of a 2-D table are keyed "(i, j)" in `changes`.
"""

from dataclasses import dataclass
from typing import Generator, List, Sequence

from algorithms.step import StepBuilder, StepEvent, StepKind


@dataclass(frozen=True)
class KnapsackItem:
    name:   str
    weight: int
    value:  int


DEFAULT_ITEMS: List[KnapsackItem] = [
    KnapsackItem("A", 1, 1),
    KnapsackItem("B", 3, 4),
    KnapsackItem("C", 4, 5),
    KnapsackItem("D", 5, 7),
]

FIBONACCI_PSEUDOCODE: List[str] = [
    "dp[0] ← 0;  dp[1] ← 1",                               # 0
    "for i in 2 .. n:",                                    # 1
    "    dp[i] ← dp[i-1] + dp[i-2]",                       # 2
]

FACTORIAL_PSEUDOCODE: List[str] = [
    "dp[0] ← 1",                                           # 0
    "for i in 1 .. n:",                                    # 1
    "    dp[i] ← i × dp[i-1]",                             # 2
]

KNAPSACK_PSEUDOCODE: List[str] = [
    "dp[0][*] ← 0",                                        # 0
    "for i in 1 .. n:  for w in 0 .. W:",                  # 1
    "    if weight[i] <= w:",                              # 2
    "        dp[i][w] ← max(dp[i-1][w], dp[i-1][w-wt] + val)",  # 3
    "    else: dp[i][w] ← dp[i-1][w]",                     # 4
]

LCS_PSEUDOCODE: List[str] = [
    "dp[0][*] ← dp[*][0] ← 0",                             # 0
    "for i in 1 .. m:  for j in 1 .. n:",                  # 1
    "    if s1[i-1] = s2[j-1]: dp[i][j] ← dp[i-1][j-1] + 1",  # 2
    "    else: dp[i][j] ← max(dp[i-1][j], dp[i][j-1])",    # 3
]


def _fill(sb: StepBuilder, cell, value, inputs: dict, text: str, line: int,
          table_key: str) -> StepEvent:
    sb.counters.writes += 1
    key = cell[0] if len(cell) == 1 else f"({cell[0]}, {cell[1]})"
    return sb.build(
        StepKind.FILL, text,
        indices=tuple(cell), changes={key: value}, line=line,
        overlay={"table": table_key, "cell": list(cell), "inputs": inputs, "value": value},
    )


# ---------------------------------------------------------------------------
# 1-D tables
# ---------------------------------------------------------------------------
def fibonacci(n: int) -> Generator[StepEvent, None, None]:
    sb = StepBuilder()
    dp = [0] * (n + 1)

    yield _fill(sb, (0,), 0, {}, "Base case: fib(0) = 0", 0, "dp")
    if n >= 1:
        dp[1] = 1
        yield _fill(sb, (1,), 1, {}, "Base case: fib(1) = 1", 0, "dp")

    for i in range(2, n + 1):
        dp[i] = dp[i - 1] + dp[i - 2]
        yield _fill(
            sb, (i,), dp[i], {f"fib({i - 1})": dp[i - 1], f"fib({i - 2})": dp[i - 2]},
            f"fib({i}) = fib({i - 1}) + fib({i - 2}) = {dp[i - 1]} + {dp[i - 2]} = {dp[i]}",
            2, "dp",
        )

    yield sb.done(f"fib({n}) = {dp[n]}", result=dp[n], overlay={"table": list(dp)})


def factorial(n: int) -> Generator[StepEvent, None, None]:
    sb = StepBuilder()
    dp = [0] * (n + 1)
    dp[0] = 1
    yield _fill(sb, (0,), 1, {}, "Base case: 0! = 1", 0, "dp")

    for i in range(1, n + 1):
        dp[i] = i * dp[i - 1]
        yield _fill(
            sb, (i,), dp[i], {"i": i, f"{i - 1}!": dp[i - 1]},
            f"{i}! = {i} × {i - 1}! = {i} × {dp[i - 1]} = {dp[i]}",
            2, "dp",
        )

    yield sb.done(f"{n}! = {dp[n]}", result=dp[n], overlay={"table": list(dp)})


# ---------------------------------------------------------------------------
# 2-D tables
# ---------------------------------------------------------------------------
def knapsack(capacity: int, items: Sequence[KnapsackItem] = DEFAULT_ITEMS) -> Generator[StepEvent, None, None]:
    sb = StepBuilder()
    n = len(items)
    grid = [[0] * (capacity + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        item = items[i - 1]
        for w in range(capacity + 1):
            skip = grid[i - 1][w]
            if item.weight <= w:
                take = grid[i - 1][w - item.weight] + item.value
                grid[i][w] = max(skip, take)
                sb.counters.comparisons += 1
                inputs = {"skip": skip, "take": take, "item": item.name}
                text = (f"Item {item.name}(w={item.weight},v={item.value}), cap={w}: "
                        f"max({skip}, {grid[i - 1][w - item.weight]}+{item.value}) = {grid[i][w]}")
                line = 3
            else:
                grid[i][w] = skip
                inputs = {"skip": skip, "item": item.name}
                text = (f"Item {item.name}(w={item.weight}) does not fit cap={w}: "
                        f"dp[{i}][{w}] = dp[{i - 1}][{w}] = {skip}")
                line = 4
            yield _fill(sb, (i, w), grid[i][w], inputs, text, line, "grid")

    yield sb.done(
        f"Knapsack max value = {grid[n][capacity]}", result=grid[n][capacity],
        overlay={"grid": [list(r) for r in grid]},
    )


def lcs(first: str, second: str) -> Generator[StepEvent, None, None]:
    sb = StepBuilder()
    m, n = len(first), len(second)
    grid = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            sb.counters.comparisons += 1
            if first[i - 1] == second[j - 1]:
                grid[i][j] = grid[i - 1][j - 1] + 1
                inputs = {"diagonal": grid[i - 1][j - 1], "char": first[i - 1]}
                text = (f"Match '{first[i - 1]}': dp[{i}][{j}] = "
                        f"dp[{i - 1}][{j - 1}] + 1 = {grid[i][j]}")
                line = 2
            else:
                grid[i][j] = max(grid[i - 1][j], grid[i][j - 1])
                inputs = {"up": grid[i - 1][j], "left": grid[i][j - 1]}
                text = (f"No match: dp[{i}][{j}] = max({grid[i - 1][j]}, "
                        f"{grid[i][j - 1]}) = {grid[i][j]}")
                line = 3
            yield _fill(sb, (i, j), grid[i][j], inputs, text, line, "grid")

    yield sb.done(
        f'LCS("{first}", "{second}") = {grid[m][n]}', result=grid[m][n],
        overlay={"grid": [list(r) for r in grid], "subsequence": _backtrack(grid, first, second)},
    )


def _backtrack(grid: List[List[int]], first: str, second: str) -> str:
    i, j = len(first), len(second)
    out: List[str] = []
    while i and j:
        if first[i - 1] == second[j - 1]:
            out.append(first[i - 1])
            i, j = i - 1, j - 1
        elif grid[i - 1][j] >= grid[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(out))
