# algodrills

A collection of classic algorithm exercises written as plain Python functions.
It covers divide and conquer, sorting, greedy choices, dynamic programming,
hashing and search. Every function takes ordinary Python values and returns
its answer. Where input cannot be handled, it raises an exception, usually
`ValueError`.

## Installation

```
pip install algodrills
```

To run the tests as well:

```
pip install "algodrills[test]"
pytest
```

## Examples

```python
from algodrills.inversions import count_inversions
from algodrills.quicksort import PivotRule, count_comparisons
from algodrills.dynamic import edit_distance, primitive_calculator
from algodrills.brackets import check_brackets
from algodrills.fibonacci import fibonacci_mod

values = [2, 1, 3, 1, 2]
count_inversions(values)                 # 4, and values is now [1, 1, 2, 2, 3]
count_comparisons([3, 1, 2], PivotRule.FIRST)   # 3
edit_distance("kitten", "sitting")       # 3
primitive_calculator(5)                  # [1, 3, 4, 5]
check_brackets("([](){([])})")           # None: the brackets balance
check_brackets("{[}")                    # 3: one-based position of the error
fibonacci_mod(10, 1000)                  # 55
```

The randomised minimum cut takes its random generator as an argument. A seeded
generator makes the result repeatable:

```python
import random
from algodrills.min_cut import parse_adjacency, default_iterations, minimum_cut

graph = parse_adjacency(["1 2 3", "2 1 3", "3 1 2"])
minimum_cut(graph, default_iterations(graph), random.Random(0))   # 2
```

The max-heap can be used directly or driven by text commands:

```python
from algodrills.priority_queue import MaxHeap, process_commands

heap = MaxHeap([3, 7, 5])
heap.pop()                               # 7
process_commands(["Insert 200", "Insert 10", "ExtractMax",
                  "Insert 5", "Insert 500", "ExtractMax"])   # [200, 500]
```

## Modules

| Module | Contents |
| --- | --- |
| `inversions` | `count_inversions`: sorts a list in place and returns its inversion count |
| `quicksort` | `count_comparisons` under a `PivotRule`: `FIRST`, `LAST` or `MEDIAN_OF_THREE` |
| `sorting` | `counting_sort`, `bubble_sort_swaps`, `maximum_toys`, `activity_notifications` |
| `min_cut` | `Graph`, `parse_adjacency`, `default_iterations`, `minimum_cut` (Karger's contraction) |
| `fibonacci` | `fibonacci_mod`: Fibonacci numbers modulo m by matrix power |
| `binary_search` | `binary_search`: one-based position in a sorted sequence, or -1 |
| `priority_queue` | `MaxHeap` and `process_commands` for `Insert x` / `ExtractMax` |
| `greedy` | `set_cover_points`, `fractional_knapsack`, `count_covering_segments` |
| `dynamic` | `longest_dividing_subsequence`, `longest_non_increasing_subsequence`, `edit_distance`, `knapsack_max_weight`, `stairs_max_sum`, `primitive_calculator` |
| `brackets` | `check_brackets`: `None` if balanced, else a one-based error position |
| `warmup` | `sock_merchant`, `counting_valleys`, `jumping_on_clouds` |
| `strings` | `alternating_characters`, `make_anagram`, `is_valid`, `special_substring_count`, `common_child` |
| `hashmaps` | `check_magazine`, `two_strings`, `count_triplets`, `frequency_queries`, `sherlock_and_anagrams` |
| `selection` | `minimum_absolute_difference`, `luck_balance`, `minimum_flower_cost`, `max_min`, `reverse_shuffle_merge` |
| `search` | `what_flavors`, `swap_nodes`, `pairs`, `triplets`, `minimum_time`, `maximum_subarray_mod`, `minimum_passes` |
| `dp` | `max_subset_sum`, `abbreviation`, `candies` |

Yes/no answers come back as `bool` (`is_valid`, `check_magazine`,
`two_strings`, `abbreviation`). `what_flavors` returns a pair of one-based
positions, or `None` when no two costs add up to the money.

## What the package does not do

The package is a library only. It has no command-line programs and reads no
input files or standard input; callers parse their data and pass Python values
to the functions. It offers no arbitrary-precision multiplication of decimal
strings, no Huffman decoding, and none of the array exercises such as
hourglass sums or left rotation.