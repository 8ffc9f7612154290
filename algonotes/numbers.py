"""Number sequences, combinatorics and bit tricks."""

from math import factorial

__all__ = [
    "nth_ugly_number",
    "binomial_coefficient",
    "pascal_triangle",
    "permutation_sequence",
    "count_odd_even_splits",
    "is_power_of_four",
]


def nth_ugly_number(n):
    """Return the ``n``-th number whose only prime factors are 2, 3 and 5."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    ugly = [1]
    i2 = i3 = i5 = 0
    next2, next3, next5 = 2, 3, 5
    while len(ugly) < n:
        nxt = min(next2, next3, next5)
        ugly.append(nxt)
        if nxt == next2:
            i2 += 1
            next2 = ugly[i2] * 2
        if nxt == next3:
            i3 += 1
            next3 = ugly[i3] * 3
        if nxt == next5:
            i5 += 1
            next5 = ugly[i5] * 5
    return ugly[-1]


def binomial_coefficient(n, k):
    """Return ``n`` choose ``k``."""
    if n < 0 or not 0 <= k <= n:
        raise ValueError(f"invalid binomial arguments n={n}, k={k}")
    k = min(k, n - k)
    result = 1
    for i in range(k):
        result = result * (n - i) // (i + 1)
    return result


def pascal_triangle(rows):
    """Return the first ``rows`` rows of Pascal's triangle as lists."""
    if rows < 0:
        raise ValueError(f"rows must be non-negative, got {rows}")
    return [[binomial_coefficient(line, i) for i in range(line + 1)] for line in range(rows)]


def permutation_sequence(n, k):
    """Return the ``k``-th (1-based) lexicographic permutation of digits 1..n."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    if not 1 <= k <= factorial(n):
        raise ValueError(f"k must be between 1 and {factorial(n)}, got {k}")
    digits = list(range(1, n + 1))
    fact = factorial(n - 1)
    k -= 1
    parts = []
    while digits:
        idx, k = divmod(k, fact)
        parts.append(str(digits.pop(idx)))
        if digits:
            fact //= len(digits)
    return "".join(parts)


def count_odd_even_splits(ts):
    """Count the ``js`` in 1..ts for which the odd-even game favours the player.

    This is the number of values up to ``ts`` divisible by a higher power of
    two than ``ts`` itself.
    """
    if ts < 1:
        raise ValueError(f"ts must be positive, got {ts}")
    odd_part, twos = ts, 0
    while odd_part % 2 == 0:
        odd_part //= 2
        twos += 1
    k = twos + 1
    bound = odd_part + 1
    total = 0
    while (limit := 1 << k) <= ts:
        first_over = ts // limit + 1
        if first_over > bound:
            first_over = 0
        total += first_over // 2
        k += 1
        bound = bound // 2 + 1
    return total


def is_power_of_four(n):
    """Return whether ``n`` is a power of four that fits in 32 bits."""
    return n & (n - 1) == 0 and n & 0x55555555 != 0