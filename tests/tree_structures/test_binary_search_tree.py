from __future__ import annotations

import pytest

from tree_lab.binary_search_tree import (
    EMPTY_TREE_NOTICE,
    STRATEGY_BST,
    STRATEGY_POSTORDER,
    BinarySearchTree,
    TreeNode,
)

SAMPLE_VALUES = [50, 30, 70, 20, 40, 60, 80]


@pytest.fixture()
def sample_tree() -> BinarySearchTree:
    return BinarySearchTree(SAMPLE_VALUES)


def test_sample_tree_metrics(sample_tree: BinarySearchTree) -> None:
    assert sample_tree.height() == 3
    assert sample_tree.node_count() == 7
    assert len(sample_tree) == 7
    assert sample_tree.degree() == 2
    assert sample_tree.nodes_per_level() == {1: 1, 2: 2, 3: 4}
    assert sample_tree.order() == pytest.approx(7 / 3)


def test_sample_tree_traversals(sample_tree: BinarySearchTree) -> None:
    assert sample_tree.inorder() == [20, 30, 40, 50, 60, 70, 80]
    assert sample_tree.preorder() == [50, 30, 20, 40, 70, 60, 80]
    assert sample_tree.postorder() == [20, 40, 30, 60, 80, 70, 50]
    assert list(sample_tree) == sample_tree.inorder()


def test_empty_tree_is_total() -> None:
    tree = BinarySearchTree()
    assert tree.is_empty()
    assert tree.root is None
    assert tree.height() == 0
    assert tree.degree() == 0
    assert tree.node_count() == 0
    assert tree.order() == 0.0
    assert tree.nodes_per_level() == {}
    assert tree.preorder() == tree.inorder() == tree.postorder() == []
    for strategy in ("Preorder", "Inorder", "Postorder", STRATEGY_BST):
        result = tree.search(strategy, 10)
        assert result.found is False
        assert result.path == ()
        assert result.comparisons == 0


def test_single_node_tree() -> None:
    tree = BinarySearchTree([7])
    assert tree.height() == 1
    assert tree.degree() == 0
    assert tree.order() == 1.0
    assert tree.nodes_per_level() == {1: 1}


def test_insert_reports_new_nodes_and_rejects_duplicates() -> None:
    tree = BinarySearchTree()
    assert tree.insert(5) is True
    assert tree.insert(3) is True
    assert tree.insert(5) is False
    assert tree.node_count() == 2
    assert tree.bulk_insert([3, 8, 8, 1]) == 2
    assert tree.inorder() == [1, 3, 5, 8]


def test_duplicate_insert_is_idempotent(sample_tree: BinarySearchTree) -> None:
    before = (sample_tree.node_count(), sample_tree.inorder(), sample_tree.height())
    sample_tree.insert(40)
    assert (sample_tree.node_count(), sample_tree.inorder(), sample_tree.height()) == before


def test_degree_of_single_child_chain() -> None:
    tree = BinarySearchTree([1, 2, 3])
    assert tree.degree() == 1
    assert BinarySearchTree([5, 3, 8]).degree() == 2


def test_order_divides_node_count_by_height() -> None:
    tree = BinarySearchTree([10, 5, 15, 20, 25])
    assert tree.height() == 4
    assert tree.order() == pytest.approx(5 / 4)


def test_bst_search_follows_single_path(sample_tree: BinarySearchTree) -> None:
    result = sample_tree.search_bst(40)
    assert result.found is True
    assert result.path == (50, 30, 40)
    assert result.comparisons == 3
    assert result.strategy == STRATEGY_BST


def test_preorder_search_explores_left_subtree_first(sample_tree: BinarySearchTree) -> None:
    result = sample_tree.search_preorder(40)
    assert result.found is True
    assert result.path == (50, 30, 20, 40)
    assert result.comparisons == 4


def test_inorder_search_visits_ascending_prefix(sample_tree: BinarySearchTree) -> None:
    result = sample_tree.search_inorder(40)
    assert result.path == (20, 30, 40)
    assert result.comparisons == 3


def test_postorder_search_compares_node_after_both_subtrees(
    sample_tree: BinarySearchTree,
) -> None:
    result = sample_tree.search_postorder(30)
    assert result.found is True
    assert result.path == (20, 40, 30)
    assert result.strategy == STRATEGY_POSTORDER

    root_hit = sample_tree.search_postorder(50)
    assert root_hit.comparisons == 7


def test_absent_target_reports_not_found(sample_tree: BinarySearchTree) -> None:
    bst = sample_tree.search_bst(65)
    assert bst.found is False
    assert bst.path == (50, 70, 60)

    for result in (
        sample_tree.search_preorder(65),
        sample_tree.search_inorder(65),
        sample_tree.search_postorder(65),
    ):
        assert result.found is False
        assert result.comparisons == 7


def test_search_rejects_unknown_strategy(sample_tree: BinarySearchTree) -> None:
    with pytest.raises(ValueError):
        sample_tree.search("Level order", 40)


def test_contains_uses_bst_search(sample_tree: BinarySearchTree) -> None:
    assert 60 in sample_tree
    assert 65 not in sample_tree
    assert "60" not in sample_tree


def test_format_path(sample_tree: BinarySearchTree) -> None:
    assert sample_tree.search_bst(80).format_path() == "50 → 70 → 80"
    assert sample_tree.search_bst(80).format_path(", ") == "50, 70, 80"


def test_render_prints_right_subtree_first(sample_tree: BinarySearchTree) -> None:
    expected = "\n".join(
        [
            "        └── 80",
            "    └── 70",
            "        └── 60",
            "50",
            "        └── 40",
            "    └── 30",
            "        └── 20",
        ]
    )
    assert sample_tree.render() == expected


def test_render_uneven_tree() -> None:
    tree = BinarySearchTree([10, 5, 7])
    assert list(tree.render_lines()) == ["10", "        └── 7", "    └── 5"]


def test_render_empty_tree() -> None:
    assert BinarySearchTree().render() == EMPTY_TREE_NOTICE


def test_monotonic_insertions_do_not_hit_recursion_limit() -> None:
    values = list(range(2_000))
    tree = BinarySearchTree(values)
    assert tree.height() == 2_000
    assert tree.degree() == 1
    assert tree.inorder() == values
    assert tree.postorder() == values[::-1]
    assert tree.search_bst(1_999).comparisons == 2_000
    assert len(list(tree.render_lines())) == 2_000


def test_tree_node_rejects_non_integer_values() -> None:
    with pytest.raises(TypeError):
        TreeNode("invalid")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        TreeNode(True)


def test_insert_rejects_non_integer_into_empty_tree() -> None:
    with pytest.raises(TypeError):
        BinarySearchTree().insert(1.5)  # type: ignore[arg-type]
