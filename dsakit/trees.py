"""Binary search tree and prefix trie."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional


@dataclass
class _Node:
    key: object
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def _leftmost(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


class BinarySearchTree:
    """Unbalanced binary search tree; equal keys go to the right subtree."""

    def __init__(self, keys: Iterable = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key) -> None:
        """Add ``key`` to the tree."""
        new = _Node(key)
        self._size += 1
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def delete(self, key) -> bool:
        """Remove one occurrence of ``key``; return whether it was present."""
        self._root, removed = self._delete(self._root, key)
        if removed:
            self._size -= 1
        return removed

    @classmethod
    def _delete(cls, node: Optional[_Node], key) -> tuple:
        if node is None:
            return None, False
        if key < node.key:
            node.left, removed = cls._delete(node.left, key)
            return node, removed
        if key > node.key:
            node.right, removed = cls._delete(node.right, key)
            return node, removed
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        successor = _leftmost(node.right)
        node.key = successor.key
        node.right, _ = cls._delete(node.right, successor.key)
        return node, True

    def __iter__(self) -> Iterator:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def inorder(self) -> list:
        """Return the keys in ascending order."""
        return list(self)

    def min(self):
        """Return the smallest key."""
        if self._root is None:
            raise ValueError("tree is empty")
        return _leftmost(self._root).key

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key) -> bool:
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right
        return False


@dataclass
class _TrieNode:
    children: dict = field(default_factory=dict)
    is_end: bool = False


class Trie:
    """Prefix tree of words."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        node.is_end = True

    def _walk(self, text: str) -> Optional[_TrieNode]:
        node = self._root
        for char in text:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def search(self, word: str) -> bool:
        """Tell whether ``word`` was inserted."""
        node = self._walk(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """Tell whether any inserted word begins with ``prefix``."""
        return self._walk(prefix) is not None