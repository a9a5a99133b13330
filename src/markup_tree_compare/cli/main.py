"""Main CLI entry point for the markup-compare command-line tool.

Provides commands to check that one HTML document is included in or identical
to another, to search tags, to extract or check text and to explore trees.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from markup_tree_compare import __version__
from markup_tree_compare.api.validation import compare_texts, is_text_tag
from markup_tree_compare.compare import (
    find_tag,
    find_tags,
    get_text,
    identical_nodes,
    included_node,
    included_node_typed,
)
from markup_tree_compare.shared.config import NODE_TYPE_CHOICES, AppConfig, ConfigError
from markup_tree_compare.shared.errors import ComparisonError
from markup_tree_compare.shared.logging import configure_logging, get_logger
from markup_tree_compare.tools.debugging import explore_node
from markup_tree_compare.tree.builder import parse_file
from markup_tree_compare.tree.node import Node, NodeType, format_node

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_ERROR = 2


class CLIConfig:
    """Configuration management for CLI operations."""

    def __init__(self, app_config: Optional[AppConfig] = None):
        self.app_config = app_config or AppConfig()
        self.verbose = False
        self.quiet = False

    @classmethod
    def from_file(cls, config_path: Path) -> "CLIConfig":
        """Load CLI configuration from a JSON file.

        A missing or invalid file leaves the defaults in place with a warning.
        """
        config = cls()
        if config_path.exists():
            try:
                config.app_config = AppConfig.from_json(config_path.read_text())
            except (OSError, ConfigError, ValueError) as e:
                print(f"Warning: Could not load config file: {e}", file=sys.stderr)
        else:
            print(f"Warning: Config file not found: {config_path}", file=sys.stderr)
        return config

    @property
    def logging_level(self) -> str:
        """Effective logging level after verbosity flags."""
        if self.verbose:
            return "DEBUG"
        if self.quiet:
            return "ERROR"
        return self.app_config.logging_level


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="markup-compare",
        description="Compare, search and check the structure of HTML documents"
    )

    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet output"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Configuration file path (JSON)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Include command
    include_parser = subparsers.add_parser(
        "include", help="Check that a reference document is included in a candidate"
    )
    include_parser.add_argument("reference", type=Path, help="Reference HTML file")
    include_parser.add_argument("candidate", type=Path, help="Candidate HTML file")
    include_parser.add_argument(
        "--type", "-t",
        choices=NODE_TYPE_CHOICES,
        help="Only report divergences between nodes of this type"
    )
    include_parser.add_argument(
        "--identical", "-i",
        action="store_true",
        help="Also require the same number of siblings"
    )

    # Find command
    find_parser = subparsers.add_parser("find", help="Find tags by name")
    find_parser.add_argument("file", type=Path, help="HTML file to search")
    find_parser.add_argument("tag", help="Tag name")
    find_parser.add_argument(
        "--all", "-a",
        action="store_true",
        help="Print every match instead of the first one"
    )
    find_parser.add_argument(
        "--type", "-t",
        choices=NODE_TYPE_CHOICES,
        default="element",
        help="Node type to search (default: element)"
    )

    # Text command
    text_parser = subparsers.add_parser("text", help="Extract or check text content")
    text_parser.add_argument("file", type=Path, help="HTML file")
    text_parser.add_argument("--tag", help="Element whose text is used (default: document)")
    text_parser.add_argument("--expect", help="Expected text, markup allowed")

    # Explore command
    explore_parser = subparsers.add_parser("explore", help="Print the node tree")
    explore_parser.add_argument("file", type=Path, help="HTML file")
    explore_parser.add_argument("--name", default="", help="Only show nodes with this name")
    explore_parser.add_argument(
        "--type", "-t",
        choices=NODE_TYPE_CHOICES,
        default="any",
        help="Only show nodes of this type"
    )

    return parser


def cmd_include(args: argparse.Namespace, config: CLIConfig) -> int:
    """Handle include command."""
    compare_config = config.app_config.compare
    node_type = NodeType.from_name(args.type or compare_config.node_type)
    identical = args.identical or compare_config.identical

    reference = parse_file(args.reference, config.app_config.parser)
    candidate = parse_file(args.candidate, config.app_config.parser)

    if identical:
        diverging = identical_nodes(reference, candidate, node_type)
    elif node_type == NodeType.ANY:
        diverging = included_node(reference, candidate)
    else:
        diverging = included_node_typed(reference, candidate, node_type)

    if diverging is None:
        if not config.quiet:
            relation = "identical to" if identical else "included in"
            print(f"{args.reference} is {relation} {args.candidate}")
        return EXIT_OK

    print(f"trees diverge at: {format_node(diverging)}")
    return EXIT_MISMATCH


def cmd_find(args: argparse.Namespace, config: CLIConfig) -> int:
    """Handle find command."""
    root = parse_file(args.file, config.app_config.parser)
    node_type = NodeType.from_name(args.type)

    matches: List[Node]
    if args.all:
        matches = find_tags(root, args.tag, node_type)
    else:
        found = find_tag(root, args.tag, node_type)
        matches = [found] if found is not None else []

    if not matches:
        print(f"findtag: tag {args.tag} not found", file=sys.stderr)
        return EXIT_MISMATCH

    for node in matches:
        print(format_node(node))
    return EXIT_OK


def cmd_text(args: argparse.Namespace, config: CLIConfig) -> int:
    """Handle text command."""
    parser_config = config.app_config.parser

    if args.expect is not None:
        try:
            if args.tag:
                is_text_tag(args.file, args.tag, args.expect, parser_config)
            else:
                compare_texts(parse_file(args.file, parser_config), args.expect, parser_config)
        except ComparisonError as e:
            print(str(e), file=sys.stderr)
            return EXIT_MISMATCH
        if not config.quiet:
            print("texts match")
        return EXIT_OK

    root = parse_file(args.file, parser_config)
    node: Optional[Node] = root
    if args.tag:
        node = find_tag(root, args.tag, NodeType.ELEMENT)
        if node is None:
            print(f"findtag: tag {args.tag} not found", file=sys.stderr)
            return EXIT_MISMATCH
    print(get_text(node))
    return EXIT_OK


def cmd_explore(args: argparse.Namespace, config: CLIConfig) -> int:
    """Handle explore command."""
    root = parse_file(args.file, config.app_config.parser)
    explore_node(root, args.name, NodeType.from_name(args.type), sys.stdout)
    print()
    return EXIT_OK


COMMANDS = {
    "include": cmd_include,
    "find": cmd_find,
    "text": cmd_text,
    "explore": cmd_explore,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_ERROR

    config = CLIConfig.from_file(args.config) if args.config else CLIConfig()
    config.verbose = args.verbose
    config.quiet = args.quiet
    configure_logging(config.logging_level)
    logger = get_logger(__name__, None, "cli")

    try:
        return COMMANDS[args.command](args, config)
    except OSError as e:
        logger.error(
            "Input file could not be read",
            extra={"command": args.command, "path": e.filename},
            exc_info=False,
        )
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except ComparisonError as e:
        print(str(e), file=sys.stderr)
        return EXIT_ERROR
    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
