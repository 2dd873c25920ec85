"""Binary tree node and classic binary tree algorithms."""

from __future__ import annotations

import math
from collections import defaultdict
from dataclasses import dataclass
from typing import Iterator, List, Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _inorder(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack: List[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _preorder(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _children(node: TreeNode) -> Iterator[TreeNode]:
    for child in (node.left, node.right):
        if child is not None:
            yield child


def _levels(root: Optional[TreeNode]) -> Iterator[List[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [child for node in level for child in _children(node)]


def balance_bst(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Return a height-balanced tree holding the in-order values of ``root``."""
    values = [node.val for node in _inorder(root)]

    def build(lo: int, hi: int) -> Optional[TreeNode]:
        if lo > hi:
            return None
        mid = lo + (hi - lo) // 2
        return TreeNode(values[mid], build(lo, mid - 1), build(mid + 1, hi))

    return build(0, len(values) - 1)


def bst_from_preorder(preorder) -> Optional[TreeNode]:
    """Build a binary search tree from its preorder traversal."""
    sentinel = TreeNode(math.inf)
    stack = [sentinel]
    for value in preorder:
        node = TreeNode(value)
        parent = None
        while stack[-1].val < value:
            parent = stack.pop()
        if parent is not None:
            parent.right = node
        else:
            stack[-1].left = node
        stack.append(node)
    return sentinel.left


def build_tree(preorder, inorder) -> Optional[TreeNode]:
    """Rebuild a tree from its preorder and inorder traversals."""
    order = iter(preorder)

    def build(segment: list) -> Optional[TreeNode]:
        if not segment:
            return None
        try:
            value = next(order)
        except StopIteration:
            raise ValueError("preorder has fewer values than inorder") from None
        index = segment.index(value)
        node = TreeNode(segment[index])
        node.left = build(segment[:index])
        node.right = build(segment[index + 1:])
        return node

    return build(list(inorder))


def diameter(root: Optional[TreeNode]) -> int:
    """Number of edges on the longest path between any two nodes."""
    best = 0

    def height(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left, right = height(node.left), height(node.right)
        best = max(best, left + right)
        return max(left, right) + 1

    height(root)
    return best


def distance_k(root: Optional[TreeNode], target: TreeNode, k: int) -> List[int]:
    """Values of the nodes exactly ``k`` edges away from ``target``."""
    graph = defaultdict(list)
    for level in _levels(root):
        for node in level:
            for child in _children(node):
                graph[node.val].append(child.val)
                graph[child.val].append(node.val)

    frontier = [target.val]
    seen = {target.val}
    while frontier and k > 0:
        following = []
        for value in frontier:
            for neighbour in graph[value]:
                if neighbour not in seen:
                    seen.add(neighbour)
                    following.append(neighbour)
        frontier = following
        k -= 1
    return frontier


def flatten(root: Optional[TreeNode]) -> None:
    """Turn the tree in place into a right-leaning chain in preorder."""
    if root is None:
        return
    values = [node.val for node in _preorder(root)]
    root.left = root.right = None
    tail = root
    for value in values[1:]:
        tail.right = TreeNode(value)
        tail = tail.right


def good_nodes(root: Optional[TreeNode]) -> int:
    """Edges on the longest non-decreasing downward path starting at the root."""
    best = 0
    stack = [(root, 0)] if root is not None else []
    while stack:
        node, length = stack.pop()
        best = max(best, length)
        for child in _children(node):
            if child.val >= node.val:
                stack.append((child, length + 1))
    return best


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place and return its root."""
    for node in _preorder(root):
        node.left, node.right = node.right, node.left
    return root


def is_cousins(root: Optional[TreeNode], x: int, y: int) -> bool:
    """True if ``x`` and ``y`` are on the same level with different parents."""
    level: dict = {}
    parent: dict = {}

    def walk(node: Optional[TreeNode], depth: int, above: int) -> None:
        if node is None:
            return
        walk(node.left, depth + 1, node.val)
        level[node.val] = depth
        parent[node.val] = above
        walk(node.right, depth + 1, node.val)

    walk(root, 0, -1)
    return level.get(x, 0) == level.get(y, 0) and parent.get(x, 0) != parent.get(y, 0)


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """True if the tree is a mirror of itself."""
    if root is None:
        return True
    pairs = [(root.left, root.right)]
    while pairs:
        a, b = pairs.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.val != b.val:
            return False
        pairs.append((a.left, b.right))
        pairs.append((a.right, b.left))
    return True


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """True if every node lies strictly between its ancestors' bounds."""

    def check(node: Optional[TreeNode], low, high) -> bool:
        if node is None:
            return True
        if node.val <= low or node.val >= high:
            return False
        return check(node.left, low, node.val) and check(node.right, node.val, high)

    return check(root, -math.inf, math.inf)


def level_order(root: Optional[TreeNode]) -> List[List[int]]:
    """Values level by level, left to right."""
    return [[node.val for node in level] for level in _levels(root)]


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Deepest node having both ``p`` and ``q`` as descendants."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is None:
        return right
    if right is None:
        return left
    return root


def max_path_sum(root: Optional[TreeNode]) -> int:
    """Largest sum over any path between two nodes."""
    if root is None:
        raise ValueError("max_path_sum of an empty tree")
    best = -math.inf

    def gain(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(gain(node.left), 0)
        right = max(gain(node.right), 0)
        best = max(best, left + node.val + right)
        return node.val + max(left, right)

    gain(root)
    return best


def num_trees(n: int) -> int:
    """Number of structurally distinct BSTs on ``n`` keys."""
    if n <= 1:
        return 1
    counts = [1, 1]
    for size in range(2, n + 1):
        counts.append(
            sum(counts[root - 1] * counts[size - root] for root in range(1, size + 1))
        )
    return counts[n]


def right_side_view(root: Optional[TreeNode]) -> List[int]:
    """The rightmost value on each level."""
    return [level[-1].val for level in _levels(root)]


def zigzag_level_order(root: Optional[TreeNode]) -> List[List[int]]:
    """Level order with every odd level reversed."""
    return [
        values[::-1] if depth % 2 else values
        for depth, values in enumerate(level_order(root))
    ]