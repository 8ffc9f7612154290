"""Range-query data structures: Fenwick tree, bit set, sqrt decomposition, Mo's algorithm."""

from bisect import bisect_left, insort
from collections import Counter
from math import isqrt

__all__ = [
    "FenwickTree",
    "count_inversions",
    "BitSet",
    "SqrtDecomposition",
    "count_distinct_in_ranges",
]

_WORD_BITS = 64
_ALL_ONES = (1 << _WORD_BITS) - 1
_MO_BLOCK_SIZE = 150


class FenwickTree:
    """Binary indexed tree over positions ``0 .. size - 1``."""

    def __init__(self, size):
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self.size = size
        self._tree = [0] * (size + 1)

    def add(self, idx, val):
        """Add ``val`` to the value at position ``idx``."""
        if not 0 <= idx < self.size:
            raise IndexError(f"index {idx} out of range for size {self.size}")
        i = idx + 1
        while i <= self.size:
            self._tree[i] += val
            i += i & -i

    def prefix_sum(self, idx):
        """Return the sum of positions ``0 .. idx``; ``idx == -1`` gives 0."""
        if not -1 <= idx < self.size:
            raise IndexError(f"index {idx} out of range for size {self.size}")
        total = 0
        i = idx + 1
        while i > 0:
            total += self._tree[i]
            i -= i & -i
        return total

    def range_sum(self, left, right):
        """Return the sum of positions ``left .. right`` inclusive."""
        return self.prefix_sum(right) - self.prefix_sum(left - 1)


def count_inversions(values):
    """Count pairs ``i < j`` with ``values[i] > values[j]`` for non-negative ints."""
    if not values:
        return 0
    if min(values) < 0:
        raise ValueError("values must be non-negative")
    tree = FenwickTree(max(values) + 1)
    count = 0
    for value in reversed(values):
        count += tree.prefix_sum(value - 1)
        tree.add(value, 1)
    return count


class BitSet:
    """Fixed-size set of bits addressed by 1-based positions, stored in 64-bit blocks."""

    def __init__(self, n):
        if n < 0:
            raise ValueError(f"size must be non-negative, got {n}")
        self.n = n
        self._blocks = [0] * ((n + _WORD_BITS - 1) // _WORD_BITS)
        self._extra = n % _WORD_BITS or _WORD_BITS

    def __len__(self):
        return self.n

    def _locate(self, pos):
        if not 1 <= pos <= self.n:
            raise IndexError(f"position {pos} out of range 1..{self.n}")
        return divmod(pos - 1, _WORD_BITS)

    def set(self, pos):
        """Turn bit ``pos`` on; return True if it was off before."""
        idx, bit = self._locate(pos)
        was_off = not self._blocks[idx] >> bit & 1
        self._blocks[idx] |= 1 << bit
        return was_off

    def unset(self, pos):
        """Turn bit ``pos`` off; return True if it was on before."""
        idx, bit = self._locate(pos)
        was_on = bool(self._blocks[idx] >> bit & 1)
        self._blocks[idx] &= _ALL_ONES ^ (1 << bit)
        return was_on

    def complement_block(self, idx):
        """Flip every bit in block ``idx``, keeping bits past the end clear."""
        if not 0 <= idx < len(self._blocks):
            raise IndexError(f"block {idx} out of range")
        if idx == len(self._blocks) - 1:
            self._blocks[idx] ^= (1 << self._extra) - 1
        else:
            self._blocks[idx] ^= _ALL_ONES

    def complement_all(self):
        """Flip every bit."""
        for idx in range(len(self._blocks)):
            self.complement_block(idx)

    def count(self):
        """Return how many bits are on."""
        return sum(bin(block).count("1") for block in self._blocks)


class SqrtDecomposition:
    """Counts values at least a threshold over 1-based ranges, with point updates."""

    def __init__(self, values):
        self._values = list(values)
        self._block_len = isqrt(len(self._values)) + 1
        size = self._block_len
        self._blocks = [
            sorted(self._values[start:start + size])
            for start in range(0, len(self._values), size)
        ]

    def __len__(self):
        return len(self._values)

    def count_at_least(self, left, right, c):
        """Return how many values in positions ``left .. right`` are ``>= c``."""
        if not 1 <= left <= right <= len(self._values):
            raise IndexError(f"range {left}..{right} out of bounds")
        lo, hi = left - 1, right - 1
        size = self._block_len
        first, last = lo // size, hi // size
        if first == last:
            return sum(value >= c for value in self._values[lo:hi + 1])
        total = sum(value >= c for value in self._values[lo:(first + 1) * size])
        for block in self._blocks[first + 1:last]:
            total += len(block) - bisect_left(block, c)
        total += sum(value >= c for value in self._values[last * size:hi + 1])
        return total

    def update(self, pos, value):
        """Replace the value at 1-based position ``pos``."""
        if not 1 <= pos <= len(self._values):
            raise IndexError(f"position {pos} out of range")
        idx = pos - 1
        block = self._blocks[idx // self._block_len]
        block.pop(bisect_left(block, self._values[idx]))
        insort(block, value)
        self._values[idx] = value


def count_distinct_in_ranges(values, queries):
    """Answer each 1-based inclusive ``(left, right)`` query with its distinct count.

    Queries are processed offline in Mo's order; answers come back in input order.
    """
    n = len(values)
    ranges = []
    for left, right in queries:
        if not 1 <= left <= right <= n:
            raise IndexError(f"range {left}..{right} out of bounds")
        ranges.append((left - 1, right - 1))

    def order(item):
        (lo, hi) = item[1]
        block = lo // _MO_BLOCK_SIZE
        return (block, hi if block % 2 == 0 else -hi)

    answers = [0] * len(ranges)
    counts = Counter()
    distinct = 0
    cur_lo, cur_hi = 0, -1

    def add(pos):
        nonlocal distinct
        counts[values[pos]] += 1
        if counts[values[pos]] == 1:
            distinct += 1

    def remove(pos):
        nonlocal distinct
        counts[values[pos]] -= 1
        if counts[values[pos]] == 0:
            distinct -= 1

    for index, (lo, hi) in sorted(enumerate(ranges), key=order):
        while cur_hi < hi:
            cur_hi += 1
            add(cur_hi)
        while cur_lo > lo:
            cur_lo -= 1
            add(cur_lo)
        while cur_lo < lo:
            remove(cur_lo)
            cur_lo += 1
        while cur_hi > hi:
            remove(cur_hi)
            cur_hi -= 1
        answers[index] = distinct
    return answers