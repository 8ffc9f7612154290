"""Dynamic programming: subset sums, matrix chains, meet-in-the-middle and sliding windows."""

from collections import Counter, deque
from functools import lru_cache
from itertools import product
from math import factorial

__all__ = [
    "count_subsets_with_sum",
    "has_subset_sum",
    "matrix_chain_cost",
    "optimal_parenthesization",
    "count_factorial_choices",
    "max_festival_happiness",
]

_FACTORIAL_LIMIT = 20


def _check_non_negative(values, target):
    if target < 0:
        raise ValueError(f"target must be non-negative, got {target}")
    if any(value < 0 for value in values):
        raise ValueError("values must be non-negative")


def count_subsets_with_sum(values, target):
    """Count the subsets of ``values`` (by position) whose sum is ``target``.

    The empty subset always counts for a target of zero.
    """
    values = list(values)
    _check_non_negative(values, target)
    ways = [1] + [0] * target
    for value in values:
        for j in range(target, 0, -1):
            if value <= j:
                ways[j] += ways[j - value]
    return ways[target]


def has_subset_sum(values, target):
    """Return whether some subset of ``values`` sums to ``target``."""
    values = list(values)
    _check_non_negative(values, target)
    window = (1 << (target + 1)) - 1
    reachable = 1
    for value in values:
        reachable = (reachable | reachable << value) & window
    return bool(reachable >> target & 1)


def _check_dims(dims):
    dims = list(dims)
    if len(dims) < 2:
        raise ValueError("at least one matrix (two dimensions) is required")
    return dims


def matrix_chain_cost(dims):
    """Return the fewest scalar multiplications to multiply a matrix chain.

    Matrix ``i`` (1-based) has shape ``dims[i-1] x dims[i]``.
    """
    dims = _check_dims(dims)

    @lru_cache(maxsize=None)
    def cost(i, j):
        if i == j:
            return 0
        return min(
            cost(i, k) + cost(k + 1, j) + dims[i - 1] * dims[k] * dims[j]
            for k in range(i, j)
        )

    return cost(1, len(dims) - 1)


def optimal_parenthesization(dims):
    """Return ``(expression, cost)`` for the cheapest order of a matrix chain.

    Matrices are named ``A``, ``B``, ``C`` and so on in chain order.
    """
    dims = _check_dims(dims)
    n = len(dims)
    cost = [[0] * n for _ in range(n)]
    split = [[0] * n for _ in range(n)]
    for length in range(2, n):
        for i in range(1, n - length + 1):
            j = i + length - 1
            best = None
            for k in range(i, j):
                q = cost[i][k] + cost[k + 1][j] + dims[i - 1] * dims[k] * dims[j]
                if best is None or q < best:
                    best = q
                    split[i][j] = k
            cost[i][j] = best

    def render(i, j):
        if i == j:
            return chr(ord("A") + i - 1)
        k = split[i][j]
        return f"({render(i, k)}{render(k + 1, j)})"

    return render(1, n - 1), cost[1][n - 1]


def _half_outcomes(half):
    """Yield ``(stickers_used, total)`` for every way of choosing within ``half``."""
    for choice in product((0, 1, 2), repeat=len(half)):
        used = total = 0
        for pick, value in zip(choice, half):
            if pick == 1:
                total += value
            elif pick == 2:
                if value >= _FACTORIAL_LIMIT:
                    break
                total += factorial(value)
                used += 1
        else:
            yield used, total


def count_factorial_choices(values, k, s):
    """Count ways to pick cubes, with at most ``k`` turned into factorials, summing to ``s``.

    Each value may be skipped, taken as is, or taken as its factorial using
    one of ``k`` stickers. Values must be positive.
    """
    values = list(values)
    if any(value < 1 for value in values):
        raise ValueError("values must be positive")
    middle = len(values) // 2
    left_counts = Counter(_half_outcomes(values[:middle]))
    total = 0
    for used, partial in _half_outcomes(values[middle:]):
        need = s - partial
        if need < 0:
            continue
        for remaining in range(k - used, -1, -1):
            total += left_counts.get((remaining, need), 0)
    return total


def max_festival_happiness(n, d, fireworks):
    """Return the best total happiness from watching every firework.

    The street has sections ``1 .. n``; walking speed is ``d`` sections per
    time unit. Each firework is ``(section, happiness, time)`` and gives
    ``happiness - |section - x|`` when watched from ``x``. Fireworks must be
    given in non-decreasing time order.
    """
    shows = list(fireworks)
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    if not shows:
        raise ValueError("at least one firework is required")
    section, happiness, _ = shows[-1]
    best = [happiness - abs(section - x) for x in range(1, n + 1)]
    for (section, happiness, time), (_, _, next_time) in zip(
        reversed(shows[:-1]), reversed(shows[1:])
    ):
        if next_time < time:
            raise ValueError("fireworks must be ordered by time")
        reach = min(n - 1, (next_time - time) * d)
        window = deque()
        pending = 0
        current = []
        for j in range(n):
            while pending <= min(n - 1, j + reach):
                while window and best[window[-1]] <= best[pending]:
                    window.pop()
                window.append(pending)
                pending += 1
            while window[0] < j - reach:
                window.popleft()
            current.append(happiness - abs(section - (j + 1)) + best[window[0]])
        best = current
    return max(best)