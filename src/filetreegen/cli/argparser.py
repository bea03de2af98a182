"""Command-line argument parsing for filetreegen.

This module defines the command-line interface for filetreegen and turns parsed
arguments, together with the settings file, into TreeOptions.
"""

import argparse
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from filetreegen import __version__
from filetreegen.config import UNLIMITED_DEPTH, TreeOptions
from filetreegen.types import TreeFormat


def depth_type(value: str) -> int:
    """Parse a --max-depth value: -1 or a non-negative integer."""
    try:
        depth = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: {value!r}")
    if depth < UNLIMITED_DEPTH:
        raise argparse.ArgumentTypeError(f"depth must be -1 (unlimited) or a non-negative integer, got {depth}")
    return depth


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with filetreegen's options.
    """
    description = """
    filetreegen: Generate a file tree of a directory as text, Markdown, or JSON.

    The directory is walked depth-first. Entries matching the nearest .gitignore
    (searched from the directory upwards) or any -i/--ignore pattern are left out,
    and directories left with nothing to show are dropped. Directories are listed
    before files, both in name order.

    Settings (maxDepth, excludePatterns, useGitignore, defaultFormat) are read from
    a JSON settings file; command-line options override them.
    """

    epilog = """
    Examples:
      # Text tree of the current project
      filetreegen .

      # Markdown outline, two levels deep
      filetreegen -f markdown -d 2 /path/to/project

      # Add ignore patterns on top of .gitignore
      filetreegen -i "*.log" -i "!important.log" -i "dist/" /path/to/project

      # Ignore .gitignore and save JSON to a file
      filetreegen -G -f json -o tree.json /path/to/project

      # Use a specific settings file
      filetreegen -c settings.json /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="filetreegen",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"filetreegen {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        type=Path,
        help="The directory to generate the tree for.",
    )
    parser.add_argument(
        "-d",
        "--max-depth",
        type=depth_type,
        metavar="N",
        help="Number of directory levels to descend below the root (-1 for unlimited).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action="append",
        help=(
            "Gitignore-style pattern to exclude files and directories. Can be specified multiple "
            "times; patterns are applied in order after .gitignore and settings-file patterns."
        ),
    )
    parser.add_argument(
        "-G",
        "--no-gitignore",
        action="store_true",
        help="Do not load rules from the nearest .gitignore.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=[fmt.value for fmt in TreeFormat],
        help="Output format (default: text, or defaultFormat from the settings file).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        metavar="FILE",
        help="JSON settings file to read instead of the default one.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-v for info, -vv for debug).",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments beyond what argparse checks.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.output is not None and args.output.is_dir():
        raise ValueError(f"Output path is a directory: {args.output}")


def options_from_args(args: argparse.Namespace, settings: Optional[Mapping[str, Any]] = None) -> TreeOptions:
    """Combine settings-file values with command-line overrides.

    Patterns given with -i/--ignore are appended to those from the settings file.

    Args:
        args: Parsed command-line arguments.
        settings: Decoded settings file contents.

    Returns:
        The options for the build.
    """
    options = TreeOptions.from_mapping(settings or {})
    overrides: Dict[str, Any] = {}
    if args.max_depth is not None:
        overrides["max_depth"] = args.max_depth
    if args.ignore:
        overrides["exclude_patterns"] = options.exclude_patterns + tuple(args.ignore)
    if args.no_gitignore:
        overrides["use_gitignore"] = False
    if args.format is not None:
        overrides["format"] = args.format
    return options.replace(**overrides) if overrides else options
