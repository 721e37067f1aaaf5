"""Instrumented binary search tree with search-strategy comparisons."""

from .binary_search_tree import (
    EMPTY_TREE_NOTICE,
    SEARCH_STRATEGIES,
    STRATEGY_BST,
    STRATEGY_INORDER,
    STRATEGY_POSTORDER,
    STRATEGY_PREORDER,
    BinarySearchTree,
    SearchResult,
    TreeNode,
)
from .config import ConfigError, ExplorerConfig, load_config
from .search_comparison import (
    EfficiencyReport,
    StrategyRanking,
    compare_search_strategies,
    format_report,
    run_all_searches,
    write_rankings_to_csv,
)
from .shell import TreeShell

__all__ = [
    "BinarySearchTree",
    "ConfigError",
    "EMPTY_TREE_NOTICE",
    "EfficiencyReport",
    "ExplorerConfig",
    "SEARCH_STRATEGIES",
    "STRATEGY_BST",
    "STRATEGY_INORDER",
    "STRATEGY_POSTORDER",
    "STRATEGY_PREORDER",
    "SearchResult",
    "StrategyRanking",
    "TreeNode",
    "TreeShell",
    "compare_search_strategies",
    "format_report",
    "load_config",
    "run_all_searches",
    "write_rankings_to_csv",
]
