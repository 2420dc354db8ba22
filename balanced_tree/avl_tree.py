"""
AVL tree -- a self-balancing binary search tree.

Every node stores its own height and balance factor. Mutating calls descend
recursively along a single search path, make the leaf-level edit, and then
repair each ancestor on the way back up: recompute height and balance factor,
and apply at most one single or double rotation. Heights follow the convention
that an empty subtree has height -1 and a leaf has height 0, so the tree height
is available in O(1) from the root.

Duplicate keys are ignored. Removing a node with two children copies in the
key of its in-order successor (leftmost node of the right subtree) and splices
the successor out.
"""

from collections import deque
from typing import Deque, Generic, Iterable, List, Optional, Tuple, TypeVar

from balanced_tree.errors import InvalidArgumentError, NotFoundError

T = TypeVar('T')


class AVLTree(Generic[T]):
    class Node:
        def __init__(self, key: T) -> None:
            self.key: T = key
            self.left: Optional['AVLTree.Node'] = None
            self.right: Optional['AVLTree.Node'] = None
            self.height: int = 0
            self.balance_factor: int = 0

        def __repr__(self) -> str:
            return f"Node({self.key!r}, height={self.height}, bf={self.balance_factor})"

    def __init__(self, keys: Iterable[T] = ()) -> None:
        if keys is None:
            raise InvalidArgumentError("keys must not be None")
        self._root: Optional[AVLTree.Node] = None
        self._size: int = 0
        for key in keys:
            self.insert(key)

    @property
    def root(self) -> Optional['AVLTree.Node']:
        return self._root

    @staticmethod
    def _check_key(key: Optional[T]) -> None:
        if key is None:
            raise InvalidArgumentError("key must not be None")

    # -- invariant maintenance ------------------------------------------------

    @staticmethod
    def _get_height(node: Optional[Node]) -> int:
        if node is None:
            return -1
        return node.height

    def _update(self, node: Node) -> None:
        left = self._get_height(node.left)
        right = self._get_height(node.right)
        node.height = 1 + max(left, right)
        node.balance_factor = left - right

    def _right_rotate(self, c: Node) -> Node:
        b = c.left
        assert b is not None
        c.left = b.right
        b.right = c

        # c is now below b, so it is recomputed first
        self._update(c)
        self._update(b)
        return b

    def _left_rotate(self, a: Node) -> Node:
        b = a.right
        assert b is not None
        a.right = b.left
        b.left = a

        self._update(a)
        self._update(b)
        return b

    def _rebalance(self, node: Node) -> Node:
        """Refresh ``node`` and return the root of its (possibly rotated) subtree."""
        self._update(node)

        if node.balance_factor > 1 and node.left.balance_factor >= 0:
            return self._right_rotate(node)

        if node.balance_factor < -1 and node.right.balance_factor <= 0:
            return self._left_rotate(node)

        # left-right
        if node.balance_factor > 1:
            node.left = self._left_rotate(node.left)
            return self._right_rotate(node)

        # right-left
        if node.balance_factor < -1:
            node.right = self._right_rotate(node.right)
            return self._left_rotate(node)

        return node

    # -- insertion --------------------------------------------------------------

    def _insert(self, node: Optional[Node], key: T) -> Node:
        if node is None:
            self._size += 1
            return AVLTree.Node(key)

        if key < node.key:
            node.left = self._insert(node.left, key)
        elif key > node.key:
            node.right = self._insert(node.right, key)
        else:
            return node

        return self._rebalance(node)

    def insert(self, key: T) -> None:
        """Add ``key`` to the tree. Inserting a key already present does nothing.

        Raises:
            InvalidArgumentError: if ``key`` is None.
        """
        self._check_key(key)
        self._root = self._insert(self._root, key)

    # -- removal ----------------------------------------------------------------

    def _remove(self, node: Optional[Node], key: T) -> Tuple[Optional[Node], T]:
        if node is None:
            raise NotFoundError(key)

        if key < node.key:
            node.left, removed = self._remove(node.left, key)
        elif key > node.key:
            node.right, removed = self._remove(node.right, key)
        else:
            removed = node.key
            self._size -= 1
            if node.left is None:
                return node.right, removed
            if node.right is None:
                return node.left, removed
            node.right, node.key = self._remove_successor(node.right)

        return self._rebalance(node), removed

    def _remove_successor(self, node: Node) -> Tuple[Optional[Node], T]:
        """Splice out the leftmost node under ``node``, returning its key."""
        if node.left is None:
            return node.right, node.key
        node.left, successor = self._remove_successor(node.left)
        return self._rebalance(node), successor

    def remove(self, key: T) -> T:
        """Remove the key equal to ``key`` and return the instance that was stored.

        The stored key is returned rather than the argument, which matters for
        keys whose ordering ignores some of their fields.

        Raises:
            InvalidArgumentError: if ``key`` is None.
            NotFoundError: if no equal key is in the tree. The tree is unchanged.
        """
        self._check_key(key)
        self._root, removed = self._remove(self._root, key)
        return removed

    # -- queries ----------------------------------------------------------------

    def _find(self, node: Optional[Node], key: T) -> Optional[Node]:
        if node is None:
            return None
        if key < node.key:
            return self._find(node.left, key)
        if key > node.key:
            return self._find(node.right, key)
        return node

    def get(self, key: T) -> T:
        """Return the stored key equal to ``key``.

        Raises:
            InvalidArgumentError: if ``key`` is None.
            NotFoundError: if no equal key is in the tree.
        """
        self._check_key(key)
        node = self._find(self._root, key)
        if node is None:
            raise NotFoundError(key)
        return node.key

    def contains(self, key: T) -> bool:
        self._check_key(key)
        return self._find(self._root, key) is not None

    def min(self) -> T:
        if self._root is None:
            raise ValueError("min from empty tree")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.key

    def max(self) -> T:
        if self._root is None:
            raise ValueError("max from empty tree")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.key

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def height(self) -> int:
        """Height of the root, -1 for an empty tree. O(1)."""
        return self._get_height(self._root)

    # -- traversals -------------------------------------------------------------

    def in_order(self) -> List[T]:
        keys: List[T] = []
        pending: List[AVLTree.Node] = []
        node = self._root
        while pending or node is not None:
            if node is not None:
                pending.append(node)
                node = node.left
            else:
                node = pending.pop()
                keys.append(node.key)
                node = node.right
        return keys

    def pre_order(self) -> List[T]:
        keys: List[T] = []
        pending = [self._root] if self._root is not None else []
        while pending:
            node = pending.pop()
            keys.append(node.key)
            for child in (node.right, node.left):
                if child is not None:
                    pending.append(child)
        return keys

    def post_order(self) -> List[T]:
        # reversed (node, right, left) order
        keys: List[T] = []
        pending = [self._root] if self._root is not None else []
        while pending:
            node = pending.pop()
            keys.append(node.key)
            for child in (node.left, node.right):
                if child is not None:
                    pending.append(child)
        keys.reverse()
        return keys

    def level_order(self) -> List[T]:
        keys: List[T] = []
        queue: Deque[AVLTree.Node] = deque()
        if self._root is not None:
            queue.append(self._root)
        while queue:
            node = queue.popleft()
            keys.append(node.key)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return keys

    # -- structure --------------------------------------------------------------

    def _clone(self, node: Optional[Node]) -> Optional[Node]:
        if node is None:
            return None
        twin = AVLTree.Node(node.key)
        twin.left = self._clone(node.left)
        twin.right = self._clone(node.right)
        twin.height = node.height
        twin.balance_factor = node.balance_factor
        return twin

    def copy(self) -> 'AVLTree[T]':
        """Return an independent tree with the same shape and keys."""
        clone: AVLTree[T] = AVLTree()
        clone._root = self._clone(self._root)
        clone._size = self._size
        return clone

    def _is_balanced(self, node: Optional[Node]) -> bool:
        if node is None:
            return True
        left = self._get_height(node.left)
        right = self._get_height(node.right)
        if node.height != 1 + max(left, right) or node.balance_factor != left - right:
            return False
        if abs(node.balance_factor) > 1:
            return False
        return self._is_balanced(node.left) and self._is_balanced(node.right)

    def is_balanced(self) -> bool:
        """True if every stored height and balance factor is accurate and in range."""
        return self._is_balanced(self._root)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: T) -> bool:
        return self.contains(key)

    def __repr__(self) -> str:
        return f"AVLTree({self.in_order()})"

    def __str__(self) -> str:
        return f"AVLTree(size={self._size}, height={self.height()})"
