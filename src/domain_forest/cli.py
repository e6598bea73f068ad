"""domain-forest CLI entry point.

Usage: domain-forest [--log-level LEVEL] [--config PATH] <command> ...

    report SOURCE...   names with sub-names contributed by other sources
    tree SOURCE...     the merged forest, one level of children by default
    check SOURCE...    build, validate the forest, print counts
    compare            time indexed vs linear merging on generated labels
"""
import argparse
import logging
import sys
from pathlib import Path

from domain_forest.config import LOG_LEVELS, Config, load_config
from domain_forest.forest.forest import STRATEGIES, Forest, ForestInvariantError
from domain_forest.service import SourceReadError, build_forest
from domain_forest.sources.reader import sources_of

log = logging.getLogger(__name__)


def _add_source_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "sources", nargs="+", metavar="SOURCE",
        help="Text files with one domain name per line, merged in the given order.",
    )
    p.add_argument(
        "--strategy", choices=sorted(STRATEGIES), default=None,
        help="Collection used for each forest level (default: indexed)",
    )
    p.add_argument(
        "--strict", action="store_true", default=None,
        help="Fail on an unreadable source instead of skipping it.",
    )


def _add_tree_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser("tree", help="Print the merged forest.")
    _add_source_args(p)
    group = p.add_mutually_exclusive_group()
    group.add_argument(
        "--depth", type=int, default=None,
        help="Levels below the top-level names to print (default: 1)",
    )
    group.add_argument(
        "--full", action="store_true",
        help="Print every level.",
    )


def _add_compare_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "compare",
        help="Time indexed and linear merging on generated labels.",
    )
    p.add_argument(
        "--labels", type=int, default=2_000,
        help="Labels to generate (default: 2000)",
    )
    p.add_argument(
        "--max-depth", type=int, default=5,
        help="Maximum segments per label (default: 5)",
    )
    p.add_argument(
        "--orgs", type=int, default=500,
        help="Distinct organisations under the TLDs (default: 500)",
    )
    p.add_argument(
        "--seed", type=int, default=42,
        help="RNG seed for reproducible runs (default: 42)",
    )
    p.add_argument(
        "--cprofile", action="store_true",
        help="Profile the indexed build and print top functions by cumulative time.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="domain-forest",
        description="Group domain names under their parent domains across sources.",
    )
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default=None,
        help="Logging level on stderr (default: WARNING)",
    )
    parser.add_argument(
        "--config", type=Path, default=None,
        help="Path to a config.toml (default: $XDG_CONFIG_HOME/domain-forest/config.toml)",
    )
    subparsers = parser.add_subparsers(dest="command")

    report = subparsers.add_parser(
        "report",
        help="Print names that have sub-names from a different source.",
    )
    _add_source_args(report)
    _add_tree_parser(subparsers)
    check = subparsers.add_parser("check", help="Build the forest and validate it.")
    _add_source_args(check)
    _add_compare_parser(subparsers)
    return parser


def _build(args: argparse.Namespace, config: Config) -> Forest:
    strategy = args.strategy or config.strategy
    strict = config.strict if args.strict is None else args.strict
    return build_forest(
        sources_of(args.sources, encoding=config.encoding),
        strategy,
        strict=strict,
    )


def _run_report(args: argparse.Namespace, config: Config) -> int:
    from domain_forest.report.printer import format_summary
    from domain_forest.report.summary import cross_origin_summary

    output = format_summary(cross_origin_summary(_build(args, config)))
    if output:
        print(output)
    return 0


def _run_tree(args: argparse.Namespace, config: Config) -> int:
    from domain_forest.report.printer import format_forest

    if args.full:
        depth = None
    elif args.depth is not None:
        depth = args.depth
    else:
        depth = config.tree_depth
    output = format_forest(_build(args, config), depth=depth)
    if output:
        print(output)
    return 0


def _run_check(args: argparse.Namespace, config: Config) -> int:
    from domain_forest.report.printer import format_counts

    forest = _build(args, config)
    forest.check_invariants()
    print(format_counts(forest))
    return 0


def _run_compare(args: argparse.Namespace) -> int:
    from domain_forest.profiling.harness import run_build, run_comparison
    from domain_forest.profiling.load_generator import LabelGenerator
    from domain_forest.profiling.report import format_comparison, format_report

    comparison = run_comparison(
        num_labels=args.labels, max_depth=args.max_depth, seed=args.seed,
        num_orgs=args.orgs,
    )
    print(format_report(comparison.linear, label="Linear scan"))
    print()
    print(format_report(comparison.indexed, label="Suffix index"))
    print()
    print(format_comparison(comparison))
    if args.cprofile:
        labels = LabelGenerator(
            num_labels=args.labels, max_depth=args.max_depth, seed=args.seed,
            num_orgs=args.orgs,
        ).generate()
        result, _ = run_build(labels, "indexed", profile=True)
        print()
        print("--- cProfile top functions ---")
        print(result.cprofile_stats)
    return 0 if comparison.shapes_match else 1


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config)
    logging.basicConfig(
        level=args.log_level or config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command is None:
        parser.print_help()
        return 0

    try:
        if args.command == "report":
            return _run_report(args, config)
        if args.command == "tree":
            return _run_tree(args, config)
        if args.command == "check":
            return _run_check(args, config)
        if args.command == "compare":
            return _run_compare(args)
    except (SourceReadError, ForestInvariantError) as exc:
        print(f"domain-forest: {exc}", file=sys.stderr)
        return 1
    parser.error(f"unknown command {args.command!r}")
    return 2
