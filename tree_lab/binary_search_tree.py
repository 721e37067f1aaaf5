"""Instrumented binary search tree.

This module holds the algorithmic core of the tree explorer.  It exposes a
``BinarySearchTree`` that accepts integer payloads, rejects duplicates and
never rebalances, together with the structural metrics, depth-first
traversals and search helpers used to compare traversal strategies.

The public API covers the following capabilities:

* ``TreeNode`` – a ``@dataclass`` with optional left/right children.
* ``SearchResult`` – immutable record describing a single search: whether the
  target was found, the values compared along the way and the comparison
  count.
* ``BinarySearchTree`` – insertion, height/degree/order metrics, level
  histograms, preorder/inorder/postorder traversals, four instrumented
  searches and a sideways text rendering.

Every walk uses an explicit stack or queue so trees built from monotonic
insertion sequences (which degrade into linear chains) never exceed the
interpreter recursion limit.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
import logging
from typing import Callable, Deque, Dict, Iterable, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)

STRATEGY_PREORDER = "Preorder"
STRATEGY_INORDER = "Inorder"
STRATEGY_POSTORDER = "Postorder"
STRATEGY_BST = "BST optimized"

SEARCH_STRATEGIES: Tuple[str, ...] = (
    STRATEGY_PREORDER,
    STRATEGY_INORDER,
    STRATEGY_POSTORDER,
    STRATEGY_BST,
)

EMPTY_TREE_NOTICE = "The tree is empty"
INDENT = "    "
CONNECTOR = "└── "


@dataclass(slots=True)
class TreeNode:
    """Node representation used by :class:`BinarySearchTree`."""

    value: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError("TreeNode value must be an integer")

    @property
    def child_count(self) -> int:
        return (self.left is not None) + (self.right is not None)


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Outcome of a single instrumented search.

    Attributes
    ----------
    strategy:
        Label of the strategy that produced the result.
    target:
        Value that was searched for.
    found:
        ``True`` when a node holding *target* was reached.
    path:
        Values in the order they were compared against *target*.
    comparisons:
        Number of nodes whose value was compared against *target*.
    """

    strategy: str
    target: int
    found: bool
    path: Tuple[int, ...]
    comparisons: int

    def format_path(self, separator: str = " → ") -> str:
        """Return the visited values joined by *separator*."""

        return separator.join(str(value) for value in self.path)


class BinarySearchTree:
    """Unbalanced binary search tree holding distinct integers."""

    __slots__ = ("_root",)

    def __init__(self, values: Optional[Iterable[int]] = None) -> None:
        self._root: Optional[TreeNode] = None
        if values is not None:
            self.bulk_insert(values)

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------
    def insert(self, value: int) -> bool:
        """Insert *value* and return ``True`` when a new node was created.

        Inserting a value that is already present is a no-op and returns
        ``False``; the tree never holds duplicates and is never rebalanced.
        """

        if self._root is None:
            self._root = TreeNode(value)
            logger.debug("Inserted %d as root", value)
            return True

        node = self._root
        while True:
            if value == node.value:
                logger.debug("Rejected duplicate value %d", value)
                return False
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(value)
                    break
                node = node.right
        logger.debug("Inserted %d under %d", value, node.value)
        return True

    def bulk_insert(self, values: Iterable[int]) -> int:
        """Insert every item of *values* in order and return how many were new."""

        return sum(1 for value in list(values) if self.insert(value))

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------
    @property
    def root(self) -> Optional[TreeNode]:
        return self._root

    def is_empty(self) -> bool:
        return self._root is None

    def __len__(self) -> int:
        return self.node_count()

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int) or isinstance(value, bool):
            return False
        return self.search_bst(value).found

    def __iter__(self) -> Iterator[int]:
        return self.iter_inorder()

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"BinarySearchTree({self.preorder()!r})"

    # ------------------------------------------------------------------
    # Structural metrics
    # ------------------------------------------------------------------
    def height(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path.

        An empty tree has height ``0`` and a single node has height ``1``.
        """

        if self._root is None:
            return 0
        height = 0
        queue: Deque[TreeNode] = deque([self._root])
        while queue:
            height += 1
            for _ in range(len(queue)):
                node = queue.popleft()
                if node.left is not None:
                    queue.append(node.left)
                if node.right is not None:
                    queue.append(node.right)
        return height

    def degree(self) -> int:
        """Return the largest number of children held by any single node."""

        return max((node.child_count for node in self._iter_nodes()), default=0)

    def node_count(self) -> int:
        return sum(1 for _ in self._iter_nodes())

    def order(self) -> float:
        """Return ``node_count() / height()`` or ``0.0`` for an empty tree.

        This is an average "nodes per level" figure rather than the graph
        theoretical order of the tree.  Every level between the root and the
        deepest leaf holds at least one node, so dividing by the height equals
        averaging the per-level counts.
        """

        height = self.height()
        if height == 0:
            return 0.0
        return self.node_count() / height

    def nodes_per_level(self) -> Dict[int, int]:
        """Return a mapping of level (root is ``1``) to node count.

        Keys are produced in ascending order because a depth-first walk always
        reaches level ``n`` before any node on level ``n + 1``.
        """

        counts: Dict[int, int] = {}
        if self._root is None:
            return counts
        stack: List[Tuple[TreeNode, int]] = [(self._root, 1)]
        while stack:
            node, level = stack.pop()
            counts[level] = counts.get(level, 0) + 1
            if node.right is not None:
                stack.append((node.right, level + 1))
            if node.left is not None:
                stack.append((node.left, level + 1))
        return counts

    # ------------------------------------------------------------------
    # Traversals
    # ------------------------------------------------------------------
    def iter_preorder(self) -> Iterator[int]:
        """Yield values node-left-right."""

        stack: List[TreeNode] = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def iter_inorder(self) -> Iterator[int]:
        """Yield values left-node-right, i.e. in ascending order."""

        stack: List[TreeNode] = []
        cursor = self._root
        while stack or cursor is not None:
            while cursor is not None:
                stack.append(cursor)
                cursor = cursor.left
            node = stack.pop()
            yield node.value
            cursor = node.right

    def iter_postorder(self) -> Iterator[int]:
        """Yield values left-right-node."""

        stack: List[TreeNode] = []
        cursor = self._root
        last_visited: Optional[TreeNode] = None
        while stack or cursor is not None:
            while cursor is not None:
                stack.append(cursor)
                cursor = cursor.left
            node = stack[-1]
            if node.right is not None and node.right is not last_visited:
                cursor = node.right
                continue
            stack.pop()
            yield node.value
            last_visited = node

    def preorder(self) -> List[int]:
        return list(self.iter_preorder())

    def inorder(self) -> List[int]:
        return list(self.iter_inorder())

    def postorder(self) -> List[int]:
        return list(self.iter_postorder())

    # ------------------------------------------------------------------
    # Instrumented searches
    # ------------------------------------------------------------------
    def search_preorder(self, target: int) -> SearchResult:
        """Search *target* by comparing nodes in preorder.

        A match in the right subtree is only reached after the whole left
        subtree has been compared.
        """

        return self._scan(STRATEGY_PREORDER, target, self.iter_preorder())

    def search_inorder(self, target: int) -> SearchResult:
        """Search *target* by comparing nodes in inorder."""

        return self._scan(STRATEGY_INORDER, target, self.iter_inorder())

    def search_postorder(self, target: int) -> SearchResult:
        """Search *target* by comparing nodes in postorder.

        A node is compared only after both of its subtrees, so matching an
        inner node costs the comparisons of everything beneath it.
        """

        return self._scan(STRATEGY_POSTORDER, target, self.iter_postorder())

    def search_bst(self, target: int) -> SearchResult:
        """Search *target* along the single root-to-leaf path it belongs to.

        The number of comparisons never exceeds :meth:`height`.
        """

        path: List[int] = []
        node = self._root
        found = False
        while node is not None:
            path.append(node.value)
            if node.value == target:
                found = True
                break
            node = node.left if target < node.value else node.right
        return self._result(STRATEGY_BST, target, found, path)

    def search(self, strategy: str, target: int) -> SearchResult:
        """Dispatch to the search implementation registered for *strategy*."""

        searches: Dict[str, Callable[[int], SearchResult]] = {
            STRATEGY_PREORDER: self.search_preorder,
            STRATEGY_INORDER: self.search_inorder,
            STRATEGY_POSTORDER: self.search_postorder,
            STRATEGY_BST: self.search_bst,
        }
        try:
            search = searches[strategy]
        except KeyError as exc:
            raise ValueError(f"Unknown search strategy: {strategy!r}") from exc
        return search(target)

    def _scan(self, strategy: str, target: int, values: Iterator[int]) -> SearchResult:
        path: List[int] = []
        found = False
        for value in values:
            path.append(value)
            if value == target:
                found = True
                break
        return self._result(strategy, target, found, path)

    @staticmethod
    def _result(strategy: str, target: int, found: bool, path: List[int]) -> SearchResult:
        logger.debug(
            "%s search for %d: found=%s comparisons=%d",
            strategy,
            target,
            found,
            len(path),
        )
        return SearchResult(
            strategy=strategy,
            target=target,
            found=found,
            path=tuple(path),
            comparisons=len(path),
        )

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render_lines(self) -> Iterator[str]:
        """Yield the sideways rendering line by line.

        The right subtree is printed above its parent and the left subtree
        below it, each level indented by four spaces.
        """

        if self._root is None:
            yield EMPTY_TREE_NOTICE
            return

        stack: List[Tuple[TreeNode, int]] = []
        cursor: Optional[TreeNode] = self._root
        depth = 0
        while stack or cursor is not None:
            while cursor is not None:
                stack.append((cursor, depth))
                cursor = cursor.right
                depth += 1
            node, level = stack.pop()
            prefix = INDENT * level + CONNECTOR if level > 0 else ""
            yield f"{prefix}{node.value}"
            cursor = node.left
            depth = level + 1

    def render(self) -> str:
        return "\n".join(self.render_lines())

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _iter_nodes(self) -> Iterator[TreeNode]:
        stack: List[TreeNode] = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)


__all__ = [
    "BinarySearchTree",
    "EMPTY_TREE_NOTICE",
    "SEARCH_STRATEGIES",
    "STRATEGY_BST",
    "STRATEGY_INORDER",
    "STRATEGY_POSTORDER",
    "STRATEGY_PREORDER",
    "SearchResult",
    "TreeNode",
]
