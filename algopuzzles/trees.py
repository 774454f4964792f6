"""Puzzles over binary trees."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values, with ``None`` marking a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                pending.append(child)
    return root


def _balanced_height(node: Optional[TreeNode]) -> Optional[int]:
    """Height of ``node``, or ``None`` when some subtree is unbalanced."""
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None:
        return None
    if abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_balanced(root: Optional[TreeNode]) -> bool:
    """True when the heights of every node's subtrees differ by at most one."""
    return _balanced_height(root) is not None


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place and return its root."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        node.left, node.right = node.right, node.left
        stack.extend((node.left, node.right))
    return root


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    depth = 0
    level = [root] if root else []
    while level:
        depth += 1
        level = [child for node in level for child in (node.left, node.right) if child]
    return depth


def min_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the shortest root-to-leaf path."""
    depth = 0
    level = [root] if root else []
    while level:
        depth += 1
        if any(node.left is None and node.right is None for node in level):
            return depth
        level = [child for node in level for child in (node.left, node.right) if child]
    return depth


def has_path_sum(root: Optional[TreeNode], target_sum: int) -> bool:
    """True when some root-to-leaf path adds up to ``target_sum``."""
    stack = [(root, target_sum)] if root else []
    while stack:
        node, remaining = stack.pop()
        if node.left is None and node.right is None:
            if remaining == node.val:
                return True
            continue
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, remaining - node.val))
    return False


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """True when both trees have the same shape and values."""
    stack = [(p, q)]
    while stack:
        a, b = stack.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.val != b.val:
            return False
        stack.append((a.left, b.left))
        stack.append((a.right, b.right))
    return True


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """True when the tree is a mirror image of itself."""
    if root is None:
        return True
    stack = [(root.left, root.right)]
    while stack:
        a, b = stack.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.val != b.val:
            return False
        stack.append((a.right, b.left))
        stack.append((a.left, b.right))
    return True