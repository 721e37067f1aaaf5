"""Efficiency ranking for the instrumented tree searches.

The helpers in this module run every search strategy offered by
:class:`~tree_lab.binary_search_tree.BinarySearchTree` against the same
target, rank the outcomes by comparison count and express the winner relative
to the BST-optimised descent.

The ratio reported by :class:`EfficiencyReport` is ``winner / bst`` and is
only meaningful as a relative figure: a traversal can legitimately beat the
BST descent (for example when the target sits early in preorder but deep on
the BST path), which yields a ratio below ``1.0``.
"""

from __future__ import annotations

from dataclasses import dataclass
import csv
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .binary_search_tree import (
    SEARCH_STRATEGIES,
    STRATEGY_BST,
    BinarySearchTree,
    SearchResult,
)

logger = logging.getLogger(__name__)

CSV_HEADER = ["target", "position", "strategy", "comparisons"]


@dataclass(frozen=True)
class StrategyRanking:
    """Position of a single strategy within an efficiency ranking."""

    position: int
    strategy: str
    comparisons: int

    def to_row(self, target: int) -> List[str]:
        """Serialise the ranking for CSV persistence."""

        return [str(target), str(self.position), self.strategy, str(self.comparisons)]


@dataclass(frozen=True)
class EfficiencyReport:
    """Ranking of all search strategies for one target."""

    target: int
    rankings: Tuple[StrategyRanking, ...]
    bst_comparisons: int

    @property
    def winner(self) -> StrategyRanking:
        return self.rankings[0]

    @property
    def bst_is_most_efficient(self) -> bool:
        return self.winner.strategy == STRATEGY_BST

    @property
    def ratio_to_bst(self) -> Optional[float]:
        """Return winner comparisons divided by BST comparisons.

        ``None`` is returned when the BST search itself won or when it made no
        comparisons (empty tree).
        """

        if self.bst_is_most_efficient or self.bst_comparisons == 0:
            return None
        return self.winner.comparisons / self.bst_comparisons


def run_all_searches(tree: BinarySearchTree, target: int) -> Tuple[SearchResult, ...]:
    """Search *target* with every strategy, in canonical strategy order."""

    return tuple(tree.search(strategy, target) for strategy in SEARCH_STRATEGIES)


def compare_search_strategies(results: Sequence[SearchResult]) -> EfficiencyReport:
    """Rank *results* ascending by comparison count.

    Ties keep the canonical strategy order (preorder, inorder, postorder,
    BST).  Exactly one result per strategy is required and all of them must
    share the same target.
    """

    by_strategy = {result.strategy: result for result in results}
    if len(by_strategy) != len(results) or set(by_strategy) != set(SEARCH_STRATEGIES):
        raise ValueError(
            "Expected exactly one search result per strategy: "
            + ", ".join(SEARCH_STRATEGIES)
        )
    targets = {result.target for result in results}
    if len(targets) != 1:
        raise ValueError(f"Search results refer to different targets: {sorted(targets)}")

    ordered = sorted(
        (by_strategy[strategy] for strategy in SEARCH_STRATEGIES),
        key=lambda result: result.comparisons,
    )
    rankings = tuple(
        StrategyRanking(position=index, strategy=result.strategy, comparisons=result.comparisons)
        for index, result in enumerate(ordered, start=1)
    )
    report = EfficiencyReport(
        target=targets.pop(),
        rankings=rankings,
        bst_comparisons=by_strategy[STRATEGY_BST].comparisons,
    )
    logger.debug(
        "Most efficient search for %d: %s (%d comparisons)",
        report.target,
        report.winner.strategy,
        report.winner.comparisons,
    )
    return report


def format_report(report: EfficiencyReport) -> Iterator[str]:
    """Yield the human readable lines describing *report*."""

    yield "Efficiency ranking (fewer comparisons is better):"
    for ranking in report.rankings:
        yield f"{ranking.position}. {ranking.strategy}: {ranking.comparisons} comparisons"
    yield ""
    yield f"Most efficient search: {report.winner.strategy}"
    ratio = report.ratio_to_bst
    if ratio is not None:
        yield (
            f"{report.winner.strategy} used {ratio:.2f}x the comparisons"
            f" of the {STRATEGY_BST} search."
        )


def write_rankings_to_csv(
    path: Path, reports: Iterable[EfficiencyReport], *, newline: str = ""
) -> None:
    """Persist the rankings of *reports* to ``path`` using a fixed header."""

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline=newline) as handle:
        writer = csv.writer(handle)
        writer.writerow(CSV_HEADER)
        for report in reports:
            for ranking in report.rankings:
                writer.writerow(ranking.to_row(report.target))


__all__ = [
    "CSV_HEADER",
    "EfficiencyReport",
    "StrategyRanking",
    "compare_search_strategies",
    "format_report",
    "run_all_searches",
    "write_rankings_to_csv",
]
