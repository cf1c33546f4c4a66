# algosuite

A small library of well-known algorithms on linked lists, binary trees, integer
sequences, strings and graphs, plus a few counting routines and two small
stateful data structures. It uses only the standard library and needs
Python 3.10 or later.

## Installation

```
pip install algosuite
```

To run the tests from a checkout:

```
pip install -e ".[test]"
pytest
```

## Modules

### `algosuite.linked_list`

- `ListNode(val=0, next=None)`: a list node. Nodes compare by identity;
  iterating a node yields the values from it to the end of the list.
- `build_list(values)` / `list_values(head)`: convert between Python sequences
  and linked lists (an empty sequence gives `None`).
- `merge_two_lists(list1, list2)`: splice two sorted lists into one; on equal
  values the node from `list2` comes first.
- `swap_pairs(head)`, `delete_duplicates(head)`, `sort_list(head)` (merge sort),
  `reverse_list(head)`: rearrange a list in place and return its head.
- `get_intersection_node(head_a, head_b)`: the first node of `head_a` that is
  also a node of `head_b`, or `None`.
- `delete_node(node)`: remove a node given only the node; raises `ValueError`
  for the tail node.

### `algosuite.binary_tree`

- `TreeNode(val=0, left=None, right=None)`: a tree node, compared by identity.
- `inorder_traversal(root)`, `level_order(root)`: traversals as lists.
- `is_same_tree(p, q)`, `is_symmetric(root)`: structural comparisons.
- `build_tree(preorder, inorder)`, `construct_from_pre_post(pre, post)`:
  rebuild a tree from two traversals; `ValueError` when the traversals differ
  in length or a value is missing from the inorder traversal.
- `recover_from_preorder(traversal)`: rebuild a tree from a string such as
  `"1-2--3--4-5--6--7"`, where dashes give each node's depth; `ValueError` on a
  malformed string.
- `FindElements(root)`: rewrites the tree so the root is 0 and children of `v`
  are `2*v + 1` and `2*v + 2`, then answers `find(target)` and `target in ...`.

### `algosuite.arrays`

`max_area`, `search_matrix`, `merge_sorted_into` (merges in place into
`nums1`), `tuple_same_product`, `num_odd_sum_subarrays` (modulo 1e9+7),
`max_absolute_sum`, `is_sorted_and_rotated`, `max_ascending_sum`,
`count_bad_pairs`, `max_equal_digit_sum_pair` (-1 when no pair exists),
`longest_monotonic_subarray`, `is_array_special`, `query_results`,
`sum_of_good_numbers`.

### `algosuite.strings`

`is_valid_parentheses`, `add_binary`, `decode_string`, `score_of_parentheses`,
`num_tile_possibilities`, `get_happy_string` (`""` when there are fewer than
`k` strings), `find_different_binary_string`.

### `algosuite.graphs`

`find_redundant_connection` (`[]` when no edge closes a cycle),
`check_if_prerequisite`, `maximum_invitations`, `magnificent_sets` (-1 when the
graph is not bipartite), `find_max_fish` (leaves the grid unchanged).

### `algosuite.counting`

`climb_stairs`, `num_trees` (Catalan numbers), `construct_distanced_sequence`,
`punishment_number`.

### `algosuite.design`

- `ProductOfNumbers`: `add(num)` and `get_product(k)`, the product of the last
  `k` numbers added.
- `NumberContainers`: `change(index, number)` and `find(number)`, the smallest
  index holding `number` or -1.

## Examples

```python
from algosuite.linked_list import build_list, list_values, sort_list
from algosuite.strings import decode_string, add_binary
from algosuite.design import ProductOfNumbers

list_values(sort_list(build_list([4, 2, 1, 3])))   # [1, 2, 3, 4]
decode_string("3[a2[c]]")                           # "accaccacc"
add_binary("11", "1")                               # "100"

products = ProductOfNumbers()
for n in (3, 0, 2, 5, 4):
    products.add(n)
products.get_product(2)                             # 20
```

## What it does not do

algosuite is a library only: it installs no command-line program, and it
keeps no state beyond the objects you create.