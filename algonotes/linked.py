"""Linked lists, binary trees and bracket scoring."""

from dataclasses import dataclass
from typing import Optional

__all__ = [
    "ListNode",
    "get_intersection_node",
    "TreeNode",
    "inorder_values",
    "score_of_parentheses",
]


@dataclass(eq=False)
class ListNode:
    """Node of a singly linked list."""

    val: int
    next: Optional["ListNode"] = None


def get_intersection_node(head_a, head_b):
    """Return the first node shared by two lists, or None if they never meet."""
    a, b = head_a, head_b
    while a is not b:
        a = head_b if a is None else a.next
        b = head_a if b is None else b.next
    return a


@dataclass(eq=False)
class TreeNode:
    """Node of a binary tree."""

    val: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def inorder_values(root):
    """Return the in-order values of a tree using an explicit stack."""
    values = []
    stack = [[root, 0]]
    while stack:
        entry = stack[-1]
        node, stage = entry
        if node is None:
            stack.pop()
            continue
        entry[1] += 1
        if stage == 0:
            stack.append([node.left, 0])
        elif stage == 1:
            values.append(node.val)
        elif stage == 2:
            stack.append([node.right, 0])
        else:
            stack.pop()
    return values


def score_of_parentheses(s):
    """Score a balanced bracket string: ``()`` is 1, ``AB`` is A+B, ``(A)`` is 2A."""
    if not s:
        raise ValueError("empty bracket string")
    scores = [0]
    for ch in s:
        if ch == "(":
            scores.append(0)
        elif ch == ")":
            if len(scores) == 1:
                raise ValueError(f"unbalanced bracket string: {s!r}")
            inner = scores.pop()
            scores[-1] += 2 * inner if inner else 1
        else:
            raise ValueError(f"unexpected character {ch!r}")
    if len(scores) != 1:
        raise ValueError(f"unbalanced bracket string: {s!r}")
    return scores[0]