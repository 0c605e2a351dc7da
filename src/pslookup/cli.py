"""pslookup CLI entry point.

Usage: pslookup [--psl PATH] [--log-level LEVEL] command ...

    pslookup lookup www.kevin.co.uk x.y.sch.uk
    pslookup stats
    pslookup dump
"""
import argparse
import sys

from pslookup.config import ConfigError, Settings, load_settings
from pslookup.logging_config import setup_logging
from pslookup.source.reader import ReadError, load_suffix_tree
from pslookup.tree.suffix_tree import SuffixTree


NO_SUFFIX = "-"


def _add_lookup_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "lookup",
        help="Print the effective TLD of each FQDN.",
    )
    p.add_argument(
        "fqdns", nargs="+", metavar="FQDN",
        help="Domain names to look up.",
    )


def _add_stats_parser(subparsers: argparse._SubParsersAction) -> None:
    subparsers.add_parser(
        "stats",
        help="Print counters from building the suffix tree.",
    )


def _add_dump_parser(subparsers: argparse._SubParsersAction) -> None:
    subparsers.add_parser(
        "dump",
        help="Print the suffix tree, one label per line.",
    )


def _run_lookup(tree: SuffixTree, args: argparse.Namespace) -> None:
    for fqdn in args.fqdns:
        etld = tree.lookup_etld(fqdn)
        print(f"{fqdn}\t{etld or NO_SUFFIX}")


def _run_stats(tree: SuffixTree, args: argparse.Namespace) -> None:
    stats = tree.stats
    print(f"lines        : {stats.lines}")
    print(f"rules        : {stats.rules}")
    print(f"comments     : {stats.comments}")
    print(f"bare labels  : {stats.bare_labels}")
    print(f"nodes        : {tree.node_count()}")
    print(f"top level    : {tree.root.count_children()}")


def _run_dump(tree: SuffixTree, args: argparse.Namespace) -> None:
    print(tree.render())


_COMMANDS = {
    "lookup": _run_lookup,
    "stats": _run_stats,
    "dump": _run_dump,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pslookup",
        description="Effective TLD lookup against the Public Suffix List.",
    )
    parser.add_argument(
        "--psl", dest="psl_path", default=None,
        help="Path to public_suffix_list.dat (default: $PSLOOKUP_PSL_FILE "
             "or ./public_suffix_list.dat)",
    )
    parser.add_argument(
        "--encoding", default=None,
        help="Encoding of the list file (default: utf-8)",
    )
    parser.add_argument(
        "--log-level", default=None,
        help="Logging level written to stderr (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_lookup_parser(subparsers)
    _add_stats_parser(subparsers)
    _add_dump_parser(subparsers)
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        settings: Settings = load_settings(
            psl_path=args.psl_path,
            encoding=args.encoding,
            log_level=args.log_level,
        )
        setup_logging(settings.log_level)
        tree = load_suffix_tree(settings.psl_path, settings.encoding)
    except (ConfigError, ReadError) as e:
        print(f"pslookup: error: {e}", file=sys.stderr)
        sys.exit(2)

    _COMMANDS[args.command](tree, args)
