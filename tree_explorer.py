"""Command line front end for the instrumented binary search tree.

The script seeds a ``tree_lab.BinarySearchTree`` from a configuration file
and/or command line flags, then prints the tree's structural metrics, its
three depth-first traversals, the sideways rendering and an efficiency
comparison of every search strategy for each requested target.  With
``--interactive`` it starts the menu driven shell instead.

Without any input the built-in demonstration tree
``50, 30, 70, 20, 40, 60, 80`` is used together with the targets ``40`` and
``65``.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Iterator, List, Sequence

from tree_lab.binary_search_tree import BinarySearchTree
from tree_lab.config import LOG_LEVELS, ConfigError, ExplorerConfig, load_config
from tree_lab.search_comparison import (
    EfficiencyReport,
    compare_search_strategies,
    run_all_searches,
    write_rankings_to_csv,
)
from tree_lab.shell import TreeShell, property_lines, search_lines, traversal_lines

logger = logging.getLogger(__name__)

DEMO_CONFIG = ExplorerConfig(values=(50, 30, 70, 20, 40, 60, 80), search_targets=(40, 65))


def _parse_int_list(raw: str) -> List[int]:
    """Parse a comma separated list of integers for argparse."""

    try:
        return [int(item) for item in raw.split(",") if item.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected comma separated integers: {raw!r}") from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Binary search tree explorer")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML or JSON file providing values, search_targets and log_level",
    )
    parser.add_argument(
        "--values",
        type=_parse_int_list,
        default=None,
        help="Comma separated values inserted in order (overrides the config file)",
    )
    parser.add_argument(
        "--search",
        type=_parse_int_list,
        default=None,
        help="Comma separated targets searched with every strategy",
    )
    parser.add_argument(
        "--rankings-csv",
        type=Path,
        default=None,
        help="Optional CSV destination for the efficiency rankings",
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Start the interactive menu after seeding the tree",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=list(LOG_LEVELS),
        help="Logging verbosity for diagnostic output (default: WARNING)",
    )
    return parser


def _resolve_config(args: argparse.Namespace) -> ExplorerConfig:
    if args.config is not None:
        base = load_config(args.config)
    elif args.values is None and args.search is None:
        base = DEMO_CONFIG
    else:
        base = ExplorerConfig()
    return base.merged(values=args.values, search_targets=args.search, log_level=args.log_level)


def _report_lines(tree: BinarySearchTree, targets: Sequence[int]) -> Iterator[str]:
    yield "Tree properties:"
    yield from property_lines(tree)
    yield ""
    yield from traversal_lines(tree)
    yield ""
    yield "Tree rendering:"
    yield from tree.render_lines()
    for target in targets:
        yield ""
        yield from search_lines(tree, target)


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point; returns the process exit code."""

    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level or "WARNING"))

    try:
        config = _resolve_config(args)
    except (ConfigError, OSError) as exc:
        logger.error("Failed to load configuration: %s", exc)
        return 1
    logging.getLogger().setLevel(getattr(logging, config.log_level))

    tree = BinarySearchTree()
    inserted = tree.bulk_insert(config.values)
    logger.info(
        "Seeded tree with %d of %d values (duplicates ignored)",
        inserted,
        len(config.values),
    )

    if args.interactive:
        TreeShell(tree).run()
        return 0

    for line in _report_lines(tree, config.search_targets):
        print(line)

    if args.rankings_csv is not None:
        reports: List[EfficiencyReport] = [
            compare_search_strategies(run_all_searches(tree, target))
            for target in config.search_targets
        ]
        write_rankings_to_csv(args.rankings_csv, reports)
        logger.info("Rankings written to %s", args.rankings_csv)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
