"""Plain (unbalanced) binary search tree.

Shares the ordering model of :class:`balanced_tree.avl_tree.AVLTree` but does
no rebalancing, so its height is computed on demand. Removing a node with two
children uses the in-order predecessor (rightmost node of the left subtree).
"""

from collections import deque
from typing import Deque, Generic, Iterable, List, Optional, TypeVar

from balanced_tree.errors import InvalidArgumentError, NotFoundError

T = TypeVar('T')


class BinarySearchTree(Generic[T]):
    class Node:
        def __init__(self, key: T) -> None:
            self.key: T = key
            self.left: Optional['BinarySearchTree.Node'] = None
            self.right: Optional['BinarySearchTree.Node'] = None

    def __init__(self, keys: Iterable[T] = ()) -> None:
        if keys is None:
            raise InvalidArgumentError("keys must not be None")
        self._root: Optional[BinarySearchTree.Node] = None
        self._size: int = 0
        for key in keys:
            self.insert(key)

    @property
    def root(self) -> Optional['BinarySearchTree.Node']:
        return self._root

    @staticmethod
    def _check_key(key: Optional[T]) -> None:
        if key is None:
            raise InvalidArgumentError("key must not be None")

    def insert(self, key: T) -> None:
        self._check_key(key)
        if self._root is None:
            self._root = BinarySearchTree.Node(key)
            self._size += 1
            return

        node = self._root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = BinarySearchTree.Node(key)
                    self._size += 1
                    return
                node = node.left
            elif key > node.key:
                if node.right is None:
                    node.right = BinarySearchTree.Node(key)
                    self._size += 1
                    return
                node = node.right
            else:
                return

    def remove(self, key: T) -> T:
        """Remove and return the stored key equal to ``key``.

        Raises:
            InvalidArgumentError: if ``key`` is None.
            NotFoundError: if no equal key is in the tree. The tree is unchanged.
        """
        self._check_key(key)
        parent: Optional[BinarySearchTree.Node] = None
        node = self._root
        while node is not None and (key < node.key or key > node.key):
            parent = node
            node = node.left if key < node.key else node.right

        if node is None:
            raise NotFoundError(key)

        removed = node.key
        self._size -= 1

        if node.left is not None and node.right is not None:
            # splice out the in-order predecessor and move its key up
            pred_parent = node
            pred = node.left
            while pred.right is not None:
                pred_parent = pred
                pred = pred.right
            node.key = pred.key
            if pred_parent is node:
                pred_parent.left = pred.left
            else:
                pred_parent.right = pred.left
            return removed

        replacement = node.left if node.left is not None else node.right
        if parent is None:
            self._root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        return removed

    def get(self, key: T) -> T:
        self._check_key(key)
        node = self._find_node(self._root, key)
        if node is None:
            raise NotFoundError(key)
        return node.key

    def contains(self, key: T) -> bool:
        self._check_key(key)
        return self._find_node(self._root, key) is not None

    def min(self) -> T:
        if self._root is None:
            raise ValueError("min from empty tree")
        return self._find_min(self._root).key

    def max(self) -> T:
        if self._root is None:
            raise ValueError("max from empty tree")
        return self._find_max(self._root).key

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def height(self) -> int:
        """Height of the root, -1 for an empty tree. Walks the whole tree.

        Counted level by level so that degenerate (list-shaped) trees do not
        hit the recursion limit.
        """
        height = -1
        level = [self._root] if self._root is not None else []
        while level:
            height += 1
            level = [child for node in level
                     for child in (node.left, node.right) if child is not None]
        return height

    def pre_order(self) -> List[T]:
        keys: List[T] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            keys.append(node.key)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return keys

    def in_order(self) -> List[T]:
        keys: List[T] = []
        stack: List[BinarySearchTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            keys.append(node.key)
            node = node.right
        return keys

    def post_order(self) -> List[T]:
        # two stacks: the second receives nodes in reverse post-order
        keys: List[T] = []
        stack = [self._root] if self._root is not None else []
        visited: List[BinarySearchTree.Node] = []
        while stack:
            node = stack.pop()
            visited.append(node)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        while visited:
            keys.append(visited.pop().key)
        return keys

    def level_order(self) -> List[T]:
        keys: List[T] = []
        queue: Deque[BinarySearchTree.Node] = deque()
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

    def copy(self) -> 'BinarySearchTree[T]':
        # pre-order reinsertion reproduces the shape exactly
        return BinarySearchTree(self.pre_order())

    def _find_node(self, node: Optional[Node], key: T) -> Optional[Node]:
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node
        return None

    def _find_min(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _find_max(self, node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: T) -> bool:
        return self.contains(key)

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.in_order()})"

    def __str__(self) -> str:
        return f"BinarySearchTree(size={self._size}, height={self.height()})"
