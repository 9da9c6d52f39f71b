# algopractice

A collection of classic practice exercises in arrays, matrices, strings,
recursion, searching, sorting, linked lists, bit manipulation, inheritance and
text patterns. Each one is a small, plain function that takes its input and
returns a result; nothing is printed and input sequences are never modified.

## Modules

| Module | What it holds |
| --- | --- |
| `algopractice.patterns` | `hollow_square`, `hollow_inverted_square`, `hollow_pyramid`, `hollow_diamond`, each returning a list of text rows |
| `algopractice.bitwise` | `left_shift`, `right_shift`, `xor` |
| `algopractice.strings` | `subsequences`, `group_anagrams`, `is_anagram`, `is_letter`, `reverse_only_letters`, `remove_adjacent_duplicates` |
| `algopractice.recursion` | `fibonacci`, `fibonacci_sequence`, `join_values`, `search`, `is_sorted`, and the house-robber `rob` |
| `algopractice.linked_list` | `Node` and a singly linked `LinkedList` |
| `algopractice.inheritance` | Single, multiple, multilevel, hierarchical and hybrid inheritance examples, and `demo()` listing their messages |
| `algopractice.arrays` | `count_zeros_and_ones`, `min_max`, `find_unique`, `array_sum`, `reverse`, `rotate_by_one`, `extreme_order`, `all_pairs`, `sort_zero_one`, `partition_negatives`, `three_way_partition` |
| `algopractice.matrix` | `rows`, `columns`, `row_sums`, `diagonal`, `diagonal_sum`, `transpose` for matrices given as lists of rows |
| `algopractice.searching` | `linear_search`, `binary_search`, `binary_search_recursive`, `first_occurrence`, `find_missing`, `find_peak`, `closest_elements`, `count_k_diff_pairs` |
| `algopractice.sorting` | Dutch national flag `sort_colors`, `quick_sort`, `bubble_sort` |

## Examples

```python
from algopractice.bitwise import left_shift, right_shift, xor
from algopractice.searching import binary_search, first_occurrence
from algopractice.strings import is_anagram, remove_adjacent_duplicates

left_shift(5, 4)      # 80
right_shift(200, 4)   # 12
xor(6, 6)             # 0

binary_search([10, 20, 25, 30, 65, 175, 460, 950], 460)   # 6
first_occurrence([1, 2, 2, 3, 4, 4, 4, 5], 4)             # 4

is_anagram("anagram", "nagaram")        # True
remove_adjacent_duplicates("abbaca")    # "ca"
```

Searches return `-1` when the target is absent. `min_max` and `find_peak`
raise `ValueError` on an empty sequence, and `fibonacci_sequence` raises
`ValueError` for a negative count.

Linked lists behave like ordinary Python containers:

```python
from algopractice.linked_list import LinkedList

items = LinkedList([10, 20, 30, 40])
30 in items          # True
items.remove(30)
list(items)          # [10, 20, 40]
len(items)           # 3
str(items)           # "10 20 40"
```

`LinkedList.remove` raises `ValueError` when the value is not in the list.

Star patterns come back as lists of rows, ready to print:

```python
from algopractice.patterns import hollow_diamond

print("\n".join(hollow_diamond(5)))
```

## What it does not do

The package is a library only: it installs no command-line program and reads
no input. To see results, call the functions and print what they return.

## Running the tests

The test suite uses pytest, available through the `test` extra:

```
pip install -e .[test]
pytest
```