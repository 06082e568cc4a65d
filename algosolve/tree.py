"""Binary and n-ary trees and the classic operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import pairwise

_INT_MAX = 2**31 - 1
_MISSING = object()


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


@dataclass(eq=False)
class NaryNode:
    """A node of a tree whose nodes may have any number of children."""

    val: int = 0
    children: list[NaryNode] = field(default_factory=list)


def from_level_order(values: Iterable[int | None]) -> TreeNode | None:
    """Build a binary tree from a level-order list where None marks a gap."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(items, _MISSING)
        if left is _MISSING:
            break
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(items, _MISSING)
        if right is _MISSING:
            break
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def _nodes(root: TreeNode | None) -> Iterator[TreeNode]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _inorder(root: TreeNode | None) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def preorder(root: NaryNode | None) -> list[int]:
    """Values of an n-ary tree in preorder."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        stack.extend(reversed(node.children))
    return result


def average_of_levels(root: TreeNode | None) -> list[float]:
    """Mean value of the nodes on each level, top to bottom."""
    result: list[float] = []
    level = [root] if root is not None else []
    while level:
        result.append(sum(node.val for node in level) / len(level))
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return result


def is_balanced(root: TreeNode | None) -> bool:
    """Whether every node's subtrees differ in height by at most one."""

    def height(node: TreeNode | None) -> int:
        if node is None:
            return 0
        left = height(node.left)
        if left < 0:
            return -1
        right = height(node.right)
        if right < 0 or abs(left - right) > 1:
            return -1
        return 1 + max(left, right)

    return height(root) >= 0


def find_tilt(root: TreeNode | None) -> int:
    """Sum over all nodes of the absolute difference of their subtree sums."""
    total_tilt = 0

    def subtree_sum(node: TreeNode | None) -> int:
        nonlocal total_tilt
        if node is None:
            return 0
        left = subtree_sum(node.left)
        right = subtree_sum(node.right)
        total_tilt += abs(left - right)
        return node.val + left + right

    subtree_sum(root)
    return total_tilt


def sorted_array_to_bst(nums: list[int]) -> TreeNode | None:
    """Build a height-balanced search tree from a sorted sequence."""

    def build(left: int, right: int) -> TreeNode | None:
        if left > right:
            return None
        mid = left + (right - left) // 2
        return TreeNode(nums[mid], build(left, mid - 1), build(mid + 1, right))

    return build(0, len(nums) - 1)


def count_nodes(root: TreeNode | None) -> int:
    """Number of nodes in a complete binary tree."""
    if root is None:
        return 0
    left_height = 0
    node = root
    while node is not None:
        left_height += 1
        node = node.left
    right_height = 0
    node = root
    while node is not None:
        right_height += 1
        node = node.right
    if left_height == right_height:
        return (1 << left_height) - 1
    return 1 + count_nodes(root.left) + count_nodes(root.right)


def diameter_of_binary_tree(root: TreeNode | None) -> int:
    """Number of edges on the longest path between any two nodes."""
    diameter = 0

    def height(node: TreeNode | None) -> int:
        nonlocal diameter
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        diameter = max(diameter, left + right)
        return 1 + max(left, right)

    height(root)
    return diameter


def max_depth(root: TreeNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    deepest = 0
    stack = [(root, 1)] if root is not None else []
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        if node.left is not None:
            stack.append((node.left, depth + 1))
        if node.right is not None:
            stack.append((node.right, depth + 1))
    return deepest


def get_minimum_difference(root: TreeNode | None) -> int:
    """Smallest difference between in-order neighbours of a search tree.

    A tree with fewer than two nodes gives 2**31 - 1.
    """
    return min(
        (b.val - a.val for a, b in pairwise(_inorder(root))),
        default=_INT_MAX,
    )


def min_depth(root: TreeNode | None) -> int:
    """Number of nodes on the shortest root-to-leaf path."""
    if root is None:
        return 0
    if root.left is None:
        return 1 + min_depth(root.right)
    if root.right is None:
        return 1 + min_depth(root.left)
    return 1 + min(min_depth(root.left), min_depth(root.right))


def has_path_sum(root: TreeNode | None, target_sum: int) -> bool:
    """Whether some root-to-leaf path adds up to ``target_sum``."""
    stack = [(root, target_sum - root.val)] if root is not None else []
    while stack:
        node, remaining = stack.pop()
        if node.left is None and node.right is None and remaining == 0:
            return True
        if node.left is not None:
            stack.append((node.left, remaining - node.left.val))
        if node.right is not None:
            stack.append((node.right, remaining - node.right.val))
    return False


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Whether two trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None or p.val != q.val:
        return False
    return is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)


def search_bst(root: TreeNode | None, val: int) -> TreeNode | None:
    """Return the node of a search tree holding ``val``, or None."""
    node = root
    while node is not None and node.val != val:
        node = node.left if val < node.val else node.right
    return node


def find_second_minimum_value(root: TreeNode | None) -> int:
    """Second smallest value in a tree where each parent is its children's minimum.

    Returns -1 when there is no such value.
    """
    if root is None:
        return -1
    smallest = root.val
    second: int | None = None
    stack = [root]
    while stack:
        node = stack.pop()
        if node.val > smallest and (second is None or node.val < second):
            second = node.val
        if node.val == smallest:
            stack.extend(c for c in (node.right, node.left) if c is not None)
    return -1 if second is None else second


def is_subtree(root: TreeNode | None, sub_root: TreeNode | None) -> bool:
    """Whether ``sub_root`` equals some subtree of ``root``."""
    return any(is_same_tree(node, sub_root) for node in _nodes(root))


def find_target(root: TreeNode | None, k: int) -> bool:
    """Whether two distinct nodes of the tree add up to ``k``."""
    seen: set[int] = set()
    for node in _nodes(root):
        if k - node.val in seen:
            return True
        seen.add(node.val)
    return False