"""Array algorithms: searching, sorting and counting over sequences."""

from bisect import bisect_right
from collections import Counter
from functools import reduce
from itertools import combinations
from operator import xor

__all__ = [
    "three_sum",
    "bubble_sort",
    "wave_sort",
    "min_jumps",
    "ternary_search",
    "find_two_unique",
    "spiral_order",
    "count_non_triangles",
    "count_zero_sum_quadruples",
    "top_k_frequent",
    "count_good_subarrays",
]


def three_sum(nums):
    """Return every distinct triplet of values from ``nums`` that sums to zero.

    Triplets are in ascending order internally and listed in ascending order
    of their first element.
    """
    ordered = sorted(nums)
    n = len(ordered)
    triplets = []
    i = 0
    while i < n - 2:
        left, right = i + 1, n - 1
        while left < right:
            total = ordered[i] + ordered[left] + ordered[right]
            if total < 0:
                left += 1
            elif total > 0:
                right -= 1
            else:
                triplets.append([ordered[i], ordered[left], ordered[right]])
                value = ordered[left]
                while left < right and ordered[left] == value:
                    left += 1
                value = ordered[right]
                while right > left and ordered[right] == value:
                    right -= 1
        value = ordered[i]
        while i < n - 2 and ordered[i] == value:
            i += 1
    return triplets


def bubble_sort(values):
    """Return a sorted copy of ``values`` using bubble sort with early exit."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def wave_sort(values):
    """Return a copy of ``values`` arranged so odd positions are valleys.

    Every element at an odd index is no greater than its neighbours.
    """
    items = list(values)
    n = len(items)
    for i in range(1, n, 2):
        if items[i] > items[i - 1]:
            items[i], items[i - 1] = items[i - 1], items[i]
        if i + 1 < n and items[i] > items[i + 1]:
            items[i], items[i + 1] = items[i + 1], items[i]
    return items


def min_jumps(nums):
    """Return the fewest jumps needed to reach the last index.

    ``nums[i]`` is the longest jump allowed from position ``i``; the last
    index is assumed to be reachable.
    """
    if len(nums) < 2:
        return 0
    farthest = nums[0]
    jumps, limit = 1, nums[0]
    for i, reach in enumerate(nums[1:], start=1):
        if i > limit:
            jumps += 1
            limit = farthest
        farthest = max(farthest, i + reach)
    return jumps


def ternary_search(values, key):
    """Return an index of ``key`` in the sorted sequence ``values``, or -1."""
    lo, hi = 0, len(values) - 1
    while hi >= lo:
        third = (hi - lo) // 3
        mid1, mid2 = lo + third, hi - third
        if values[mid1] == key:
            return mid1
        if values[mid2] == key:
            return mid2
        if key < values[mid1]:
            hi = mid1 - 1
        elif key > values[mid2]:
            lo = mid2 + 1
        else:
            lo, hi = mid1 + 1, mid2 - 1
    return -1


def find_two_unique(values):
    """Return the two values that occur once when all others occur twice.

    The first value returned is the one with the lowest differing bit clear.
    Raises ValueError when the two values cannot be told apart.
    """
    combined = reduce(xor, values, 0)
    if combined == 0:
        raise ValueError("no two distinct unpaired values")
    bit = combined & -combined
    groups = [0, 0]
    for value in values:
        groups[bool(value & bit)] ^= value
    return groups[0], groups[1]


def spiral_order(matrix):
    """Return the elements of a rectangular matrix in clockwise spiral order."""
    if not matrix:
        return []
    rows, cols = len(matrix), len(matrix[0])
    directions = ((0, 1), (1, 0), (0, -1), (-1, 0))
    seen = set()
    order = []
    r = c = d = 0
    for _ in range(rows * cols):
        order.append(matrix[r][c])
        seen.add((r, c))
        dr, dc = directions[d]
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols and (nr, nc) not in seen:
            r, c = nr, nc
        else:
            d = (d + 1) % 4
            dr, dc = directions[d]
            r, c = r + dr, c + dc
    return order


def count_non_triangles(lengths):
    """Count triples of sticks where the two shorter ones sum below the longest."""
    ordered = sorted(lengths)
    n = len(ordered)
    return sum(
        n - bisect_right(ordered, ordered[i] + ordered[j], j + 1)
        for i, j in combinations(range(n), 2)
    )


def count_zero_sum_quadruples(a, b, c, d):
    """Count index quadruples with ``a[i] + b[j] + c[k] + d[l] == 0``."""
    pair_sums = Counter(x + y for x in c for y in d)
    return sum(pair_sums[-(x + y)] for x in a for y in b)


def top_k_frequent(nums, k):
    """Return the ``k`` most frequent values, most frequent first.

    Values with equal frequency are ordered by value.
    """
    counts = Counter(nums)
    if not 0 <= k <= len(counts):
        raise ValueError(f"k must be between 0 and {len(counts)}, got {k}")
    return sorted(counts, key=lambda value: (-counts[value], value))[:k]


def count_good_subarrays(values):
    """Count contiguous subarrays whose product is a difference of two squares.

    A product fails exactly when it is congruent to 2 modulo 4.
    """
    last = second_last = 0
    bad = 0
    for position, value in enumerate(values, start=1):
        if value & 1:
            bad += last - second_last
        elif value != 0 and abs(value) % 4 == 2:
            second_last, last = last, position
            bad += last - second_last
        else:
            second_last = last = position
    n = len(values)
    return n * (n + 1) // 2 - bad