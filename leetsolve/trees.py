"""Binary tree problems: greater-sum trees, subtree averages, range sums, level reversal."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

_MISSING = object()


@dataclass(eq=True)
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def from_level_order(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from a level-order listing where ``None`` marks an absent child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None

    root = TreeNode(first)
    queue: deque[TreeNode] = deque([root])
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


def _reverse_inorder(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Yield nodes right subtree first, then the node, then the left subtree."""
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.right
        node = stack.pop()
        yield node
        node = node.left


def _all_nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)


def bst_to_gst(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Replace every value in a BST with the sum of all values greater than or equal to it.

    The tree is modified in place and returned.
    """
    running = 0
    for node in _reverse_inorder(root):
        running += node.val
        node.val = running
    return root


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def average_of_subtree(root: Optional[TreeNode]) -> int:
    """Count nodes whose value equals the truncated average of their subtree."""

    def visit(node: Optional[TreeNode]) -> tuple[int, int, int]:
        if node is None:
            return 0, 0, 0
        left_equal, left_sum, left_count = visit(node.left)
        right_equal, right_sum, right_count = visit(node.right)
        total = left_sum + right_sum + node.val
        count = left_count + right_count + 1
        equal = left_equal + right_equal
        if node.val == _trunc_div(total, count):
            equal += 1
        return equal, total, count

    return visit(root)[0]


def range_sum_bst(root: Optional[TreeNode], low: int, high: int) -> int:
    """Sum the values of all nodes lying within ``[low, high]``."""
    return sum(node.val for node in _all_nodes(root) if low <= node.val <= high)


def reverse_odd_levels(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Reverse the node values on every odd level of a perfect binary tree, in place."""
    if root is None:
        return None

    stack: list[tuple[Optional[TreeNode], Optional[TreeNode], int]] = [
        (root.left, root.right, 0)
    ]
    while stack:
        left, right, level = stack.pop()
        if left is None or right is None:
            continue
        if level % 2 == 0:
            left.val, right.val = right.val, left.val
        stack.append((left.right, right.left, level + 1))
        stack.append((left.left, right.right, level + 1))

    return root