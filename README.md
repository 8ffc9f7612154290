# algonotes

A compact library of well-known algorithms and data structures, each as a
plain Python function or class. It has no dependencies outside the standard
library.

## Install

```
pip install .
pip install ".[test]"   # with the test dependencies
```

## What is inside

- `algonotes.arrays`: `three_sum`, `bubble_sort`, `wave_sort`, `min_jumps`,
  `ternary_search`, `find_two_unique`, `spiral_order`,
  `count_non_triangles`, `count_zero_sum_quadruples`, `top_k_frequent`,
  `count_good_subarrays`.
- `algonotes.numbers`: `nth_ugly_number`, `binomial_coefficient`,
  `pascal_triangle`, `permutation_sequence`, `count_odd_even_splits`,
  `is_power_of_four`.
- `algonotes.structures`: `FenwickTree` (point add, prefix and range sums),
  `count_inversions`, `BitSet` (1-based positions in 64-bit blocks),
  `SqrtDecomposition` (count values at least a threshold over a range, with
  point updates), `count_distinct_in_ranges` (offline, Mo's ordering).
- `algonotes.linked`: `ListNode`, `get_intersection_node`, `TreeNode`,
  `inorder_values`, `score_of_parentheses`.
- `algonotes.graphs`: `count_components`, `DisjointSet`,
  `minimum_spanning_weight`, `floyd_warshall`, `format_distances`,
  `count_islands`, and the `INF` constant used for missing edges.
- `algonotes.dp`: `count_subsets_with_sum`, `has_subset_sum`,
  `matrix_chain_cost`, `optimal_parenthesization`,
  `count_factorial_choices`, `max_festival_happiness`.
- `algonotes.scheduling`: `max_concurrent_meeting_slot`, `max_meetings`.
- `algonotes.calculator`: `calculate` and the interactive `main` command.

Invalid input is reported with `ValueError` or `IndexError` rather than
sentinel return values; `ternary_search` returns `-1` when the key is absent.

## Examples

```python
from algonotes.arrays import three_sum, spiral_order
from algonotes.numbers import nth_ugly_number
from algonotes.dp import matrix_chain_cost, optimal_parenthesization
from algonotes.graphs import INF, floyd_warshall

three_sum([-1, 0, 1, 2, -1, -4])        # [[-1, -1, 2], [-1, 0, 1]]
spiral_order([[1, 2], [3, 4]])          # [1, 2, 4, 3]
nth_ugly_number(150)                    # 5832
matrix_chain_cost([1, 2, 3, 4, 3])      # 30
optimal_parenthesization([40, 20, 30, 10, 30])  # ('((A(BC))D)', 26000)

floyd_warshall([[0, 5, INF, 10],
                [INF, 0, 3, INF],
                [INF, INF, 0, 1],
                [INF, INF, INF, 0]])
# [[0, 5, 8, 9], [INF, 0, 3, 4], [INF, INF, 0, 1], [INF, INF, INF, 0]]
```

```python
from algonotes.calculator import calculate

calculate(7, -2, "4")   # ' Quotient = -3 Remainder = 1'
```

## Command line

The package installs a small interactive integer calculator:

```
algonotes-calculator
```

It asks for two numbers and an operation (1 add, 2 subtract, 3 multiply,
4 divide with remainder, truncating toward zero), prints the result and asks
whether to continue. It stops on any answer other than `Y` or `y`, or at end
of input.

## What it does not do

Apart from the calculator, the package offers no command-line tools: the
algorithms are library functions only, and nothing reads problem input from
files or standard input or keeps state between runs.

## Tests

```
pytest
```