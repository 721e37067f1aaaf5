"""Interactive menu around :class:`~tree_lab.binary_search_tree.BinarySearchTree`.

The shell only parses console input and formats results; every tree
operation is delegated to the core.  Invalid menu choices and non-integer
values are rejected here and the menu is shown again, so nothing malformed
ever reaches the tree.

The ``*_lines`` helpers are shared with the non-interactive report printed by
``tree_explorer.py``.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, Optional, Sequence

from .binary_search_tree import BinarySearchTree, SearchResult
from .search_comparison import compare_search_strategies, format_report, run_all_searches

logger = logging.getLogger(__name__)

BANNER = "=== Binary Tree Explorer ==="
MENU_LINES = (
    "Menu:",
    "1. Insert a value",
    "2. Show tree properties (height, degree, order)",
    "3. Render tree",
    "4. Traverse tree (preorder, inorder, postorder)",
    "5. Search a value and compare strategies",
    "6. Exit",
)
EMPTY_TRAVERSAL = "(empty tree)"
FAREWELL = "Goodbye!"

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]


def _parse_int(raw: str) -> Optional[int]:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def property_lines(tree: BinarySearchTree) -> Iterator[str]:
    """Yield the structural metrics of *tree*."""

    yield f"Height: {tree.height()}"
    yield f"Degree: {tree.degree()}"
    yield f"Order (average nodes per level): {tree.order():.2f}"
    yield f"Node count: {tree.node_count()}"
    yield ""
    yield "Nodes per level:"
    for level, count in tree.nodes_per_level().items():
        yield f"Level {level}: {count} nodes"


def _format_values(values: Sequence[int]) -> str:
    if not values:
        return EMPTY_TRAVERSAL
    return " ".join(str(value) for value in values)


def traversal_lines(tree: BinarySearchTree) -> Iterator[str]:
    """Yield the three depth-first traversals of *tree*."""

    yield "Preorder (node-left-right):"
    yield _format_values(tree.preorder())
    yield ""
    yield "Inorder (left-node-right):"
    yield _format_values(tree.inorder())
    yield ""
    yield "Postorder (left-right-node):"
    yield _format_values(tree.postorder())


def search_result_lines(result: SearchResult) -> Iterator[str]:
    """Yield the description of a single search outcome."""

    yield f"{result.strategy} search:"
    if result.found:
        yield f"  ✓ Value {result.target} found"
    else:
        yield f"  ✗ Value {result.target} not found"
    yield f"  → Path: {result.format_path()}"
    yield f"  → Comparisons: {result.comparisons}"
    yield ""


def search_lines(tree: BinarySearchTree, target: int) -> Iterator[str]:
    """Search *target* with every strategy and yield the comparison."""

    yield f"Searching for {target} with every strategy..."
    results = run_all_searches(tree, target)
    for result in results:
        yield from search_result_lines(result)
    yield from format_report(compare_search_strategies(results))


class TreeShell:
    """Menu loop dispatching console commands to a tree."""

    def __init__(
        self,
        tree: Optional[BinarySearchTree] = None,
        *,
        input_func: Optional[InputFunc] = None,
        output: Optional[OutputFunc] = None,
    ) -> None:
        self.tree = tree if tree is not None else BinarySearchTree()
        self._input = input_func if input_func is not None else input
        self._output = output if output is not None else print
        self._actions: dict[int, Callable[[], bool]] = {
            1: self._insert_value,
            2: self._show_properties,
            3: self._show_rendering,
            4: self._show_traversals,
            5: self._search_and_compare,
            6: self._exit,
        }

    def run(self) -> None:
        """Run the menu until the user exits or input is exhausted."""

        self._emit([BANNER])
        while True:
            self._emit(["", *MENU_LINES])
            raw = self._read("\nSelect an option: ")
            if raw is None:
                break
            choice = _parse_int(raw)
            if choice is None:
                self._emit(["Invalid input. Please enter a number."])
                continue
            action = self._actions.get(choice)
            if action is None:
                self._emit(["Invalid option. Please try again."])
                continue
            self._emit([""])
            if not action():
                break

    # ------------------------------------------------------------------
    # Actions; each returns ``False`` to leave the loop
    # ------------------------------------------------------------------
    def _insert_value(self) -> bool:
        value = self._read_int("Enter the value to insert: ")
        if value is None:
            return True
        if self.tree.insert(value):
            self._emit([f"Value {value} inserted."])
        else:
            self._emit([f"Value {value} is already in the tree."])
        return True

    def _show_properties(self) -> bool:
        self._emit(property_lines(self.tree))
        return True

    def _show_rendering(self) -> bool:
        self._emit(["Tree rendering:", *self.tree.render_lines()])
        return True

    def _show_traversals(self) -> bool:
        self._emit(traversal_lines(self.tree))
        return True

    def _search_and_compare(self) -> bool:
        target = self._read_int("Enter the value to search: ")
        if target is None:
            return True
        self._emit(search_lines(self.tree, target))
        return True

    def _exit(self) -> bool:
        self._emit([FAREWELL])
        return False

    # ------------------------------------------------------------------
    # I/O helpers
    # ------------------------------------------------------------------
    def _read(self, prompt: str) -> Optional[str]:
        try:
            return self._input(prompt)
        except EOFError:
            logger.debug("Input exhausted; leaving the menu")
            return None

    def _read_int(self, prompt: str) -> Optional[int]:
        raw = self._read(prompt)
        if raw is None:
            return None
        value = _parse_int(raw)
        if value is None:
            self._emit(["Invalid value. Please enter an integer."])
        return value

    def _emit(self, lines: Iterable[str]) -> None:
        for line in lines:
            self._output(line)


__all__ = [
    "BANNER",
    "MENU_LINES",
    "TreeShell",
    "property_lines",
    "search_lines",
    "search_result_lines",
    "traversal_lines",
]
