"""Text encoding of binary trees in breadth-first order."""

from __future__ import annotations

from collections import deque
from typing import Optional

from .tree import TreeNode

_EMPTY = "#"


def serialize(root: Optional[TreeNode]) -> str:
    """Encode a tree as comma-terminated values, ``#`` for a missing child."""
    parts = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            parts.append(_EMPTY + ",")
        else:
            queue.append(node.left)
            queue.append(node.right)
            parts.append(f"{node.val},")
    return "".join(parts)


def deserialize(data: str) -> Optional[TreeNode]:
    """Decode a string produced by :func:`serialize`."""
    tokens = data.split(",")
    if tokens and tokens[-1] == "":
        tokens.pop()
    holder = TreeNode()
    slots = deque([(holder, "left")])
    for token in tokens:
        if not slots:
            raise ValueError("more entries than open child slots")
        parent, side = slots.popleft()
        if token == _EMPTY:
            continue
        node = TreeNode(int(token))
        setattr(parent, side, node)
        slots.append((node, "left"))
        slots.append((node, "right"))
    return holder.left