"""Binary tree nodes with heights and depth-first traversals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass
class Node:
    """A binary tree node that records its height."""

    data: Any
    lchild: Optional["Node"] = None
    rchild: Optional["Node"] = None
    height: int = 0


def node_height(p: Optional[Node], q: Optional[Node]) -> int:
    """Return the height of a node whose children are p and q (empty counts as -1)."""
    left = p.height if p is not None else -1
    right = q.height if q is not None else -1
    return max(left, right) + 1


def _preorder(node: Optional[Node]) -> Iterator[Any]:
    if node is not None:
        yield node.data
        yield from _preorder(node.lchild)
        yield from _preorder(node.rchild)


def _postorder(node: Optional[Node]) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.lchild)
        yield from _postorder(node.rchild)
        yield node.data


def preorder(node: Optional[Node]) -> list[Any]:
    """Return the data of the tree in root, left, right order."""
    return list(_preorder(node))


def postorder(node: Optional[Node]) -> list[Any]:
    """Return the data of the tree in left, right, root order."""
    return list(_postorder(node))