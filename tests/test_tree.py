from collections import deque

import pytest

from algosolve.tree import (
    NaryNode,
    TreeNode,
    average_of_levels,
    count_nodes,
    diameter_of_binary_tree,
    find_second_minimum_value,
    find_target,
    find_tilt,
    from_level_order,
    get_minimum_difference,
    has_path_sum,
    is_balanced,
    is_same_tree,
    is_subtree,
    max_depth,
    min_depth,
    preorder,
    search_bst,
    sorted_array_to_bst,
)

PATH_TREE = [5, 4, 8, 11, None, 13, 4, 7, 2, None, None, None, 1]


def _level_order(root):
    out = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            out.append(None)
            continue
        out.append(node.val)
        queue.append(node.left)
        queue.append(node.right)
    while out and out[-1] is None:
        out.pop()
    return out


def _inorder_values(node):
    if node is None:
        return []
    return _inorder_values(node.left) + [node.val] + _inorder_values(node.right)


def _mirror(node):
    if node is None:
        return None
    return TreeNode(node.val, _mirror(node.right), _mirror(node.left))


@pytest.mark.parametrize(
    "values",
    [[1], [1, 2, 3], [1, None, 2, 3], PATH_TREE, [3, 9, 20, None, None, 15, 7]],
)
def test_level_order_round_trip(values):
    assert _level_order(from_level_order(values)) == values


def test_level_order_empty():
    assert from_level_order([]) is None
    assert from_level_order([None]) is None


def test_preorder_nary():
    root = NaryNode(1, [NaryNode(2, [NaryNode(3), NaryNode(4)]), NaryNode(5), NaryNode(6, [NaryNode(7)])])
    assert preorder(root) == [1, 2, 3, 4, 5, 6, 7]
    assert preorder(None) == []


def test_average_of_levels_uniform_levels():
    root = from_level_order([5, 2, 2, 7, 7, 7, 7])
    assert average_of_levels(root) == [5.0, 2.0, 7.0]
    assert average_of_levels(None) == []


def test_average_of_levels_length_is_depth():
    root = from_level_order(PATH_TREE)
    assert len(average_of_levels(root)) == max_depth(root)


def test_is_balanced():
    assert is_balanced(from_level_order(list(range(1, 8))))
    assert is_balanced(None)
    assert not is_balanced(from_level_order([1, None, 2, None, 3]))
    assert not is_balanced(from_level_order([1, 2, 2, 3, 3, None, None, 4, 4]))


def test_find_tilt_symmetric_values_zero():
    assert find_tilt(from_level_order([4, 2, 2, 1, 1, 1, 1])) == 0
    assert find_tilt(None) == 0


def test_find_tilt_mirror_invariant():
    root = from_level_order(PATH_TREE)
    assert find_tilt(_mirror(root)) == find_tilt(root)


@pytest.mark.parametrize("nums", [[], [0], [-10, -3, 0, 5, 9], list(range(20))])
def test_sorted_array_to_bst(nums):
    root = sorted_array_to_bst(nums)
    assert _inorder_values(root) == nums
    assert is_balanced(root)
    assert count_nodes(root) == len(nums) or not _is_complete(root)
    if nums:
        assert root.val == nums[(len(nums) - 1) // 2]


def _is_complete(root):
    values = _level_order(root)
    return None not in values


@pytest.mark.parametrize("n", range(0, 21))
def test_count_nodes_complete(n):
    assert count_nodes(from_level_order(list(range(1, n + 1)))) == n


def test_diameter():
    assert diameter_of_binary_tree(from_level_order([1, 2, 3, 4, 5])) == 3
    assert diameter_of_binary_tree(None) == 0
    assert diameter_of_binary_tree(TreeNode(1)) == 0


def test_diameter_at_least_depth_minus_one():
    root = from_level_order(PATH_TREE)
    assert diameter_of_binary_tree(root) >= max_depth(root) - 1


@pytest.mark.parametrize("k", range(1, 6))
def test_max_and_min_depth_perfect(k):
    root = from_level_order(list(range(1, 2**k)))
    assert max_depth(root) == k
    assert min_depth(root) == k


def test_min_depth_chain():
    assert min_depth(from_level_order([2, None, 3, None, 4, None, 5, None, 6])) == 5
    assert min_depth(None) == 0
    assert max_depth(None) == 0


def test_min_depth_not_above_max():
    root = from_level_order(PATH_TREE)
    assert min_depth(root) <= max_depth(root)


def test_minimum_difference_even_spacing():
    root = sorted_array_to_bst(list(range(0, 50, 7)))
    assert get_minimum_difference(root) == 7


def test_minimum_difference_single_node():
    assert get_minimum_difference(TreeNode(4)) == 2**31 - 1


@pytest.mark.parametrize("target, expected", [(22, True), (27, True), (26, True), (18, True), (5, False), (20, False)])
def test_has_path_sum(target, expected):
    assert has_path_sum(from_level_order(PATH_TREE), target) is expected


def test_has_path_sum_empty():
    assert has_path_sum(None, 0) is False


def test_is_same_tree():
    assert is_same_tree(from_level_order(PATH_TREE), from_level_order(PATH_TREE))
    assert not is_same_tree(from_level_order([1, 2]), from_level_order([1, None, 2]))
    assert not is_same_tree(from_level_order([1, 2, 1]), from_level_order([1, 1, 2]))
    assert is_same_tree(None, None)


def test_search_bst():
    nums = [1, 2, 3, 4, 7, 9]
    root = sorted_array_to_bst(nums)
    for v in nums:
        found = search_bst(root, v)
        assert found.val == v
    assert search_bst(root, 5) is None


def test_second_minimum():
    assert find_second_minimum_value(from_level_order([2, 2, 5, None, None, 5, 7])) == 5
    assert find_second_minimum_value(from_level_order([2, 2, 2])) == -1
    assert find_second_minimum_value(None) == -1


def test_is_subtree():
    root = from_level_order([3, 4, 5, 1, 2])
    assert is_subtree(root, from_level_order([4, 1, 2]))
    assert is_subtree(root, root.left)
    assert not is_subtree(root, from_level_order([4, 1, 2, None, None, 0]))
    assert not is_subtree(None, TreeNode(1))
    assert not is_subtree(root, None)


def test_find_target_pairs():
    nums = [2, 3, 4, 5, 6, 7]
    root = sorted_array_to_bst(nums)
    for i, a in enumerate(nums):
        for b in nums[i + 1:]:
            assert find_target(root, a + b)
    assert not find_target(root, max(nums) * 2 + 1)


def test_find_target_needs_two_nodes():
    assert not find_target(TreeNode(4), 8)