"""Command-line interface for filetreegen.

This module provides the command-line entry point: it parses arguments, reads
the settings file, builds and renders the tree, and writes the result to
stdout or to a file.

Signal Handling Notes:
    - SIGPIPE: Handled when the output pipe is closed (e.g., when piping to `head`)
    - SIGINT: Handled for clean exit on Ctrl+C

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    126: Permission denied while reading a directory
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    $ filetreegen /path/to/dir
    $ filetreegen -f markdown -o tree.md /path/to/dir
"""

import logging
import sys

from filetreegen.cli.argparser import create_parser, options_from_args, validate_args
from filetreegen.cli.safe_writer import SafeWriter
from filetreegen.cli.signal_handler import setup_signal_handling, signal_handler
from filetreegen.config import load_settings
from filetreegen.exceptions import DirectoryReadError
from filetreegen.filetreegen import FileTreeGenerator

EXIT_ERROR = 1
EXIT_PERMISSION_DENIED = 126

logger = logging.getLogger(__name__)

LOG_LEVELS = {0: logging.WARNING, 1: logging.INFO}


def configure_logging(verbosity: int) -> None:
    """Send log records to stderr at a level chosen by the -v count."""
    logging.basicConfig(
        level=LOG_LEVELS.get(verbosity, logging.DEBUG),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main() -> None:
    """Main entry point for the filetreegen command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: Permission denied while reading a directory
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    parser = create_parser()
    # argparse exits with 2 on syntax errors and 0 for --version
    args = parser.parse_args()
    configure_logging(args.verbose)

    try:
        validate_args(args)
        options = options_from_args(args, load_settings(args.config))
        generator = FileTreeGenerator(options)

        # The tree is built completely before anything is written
        root = generator.generate_tree(args.directory)
        content = generator.format_tree(root)

        output_file = args.output if args.output else sys.stdout.fileno()
        with SafeWriter(output_file) as safe_writer:
            try:
                safe_writer.write(content)
            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager
        logger.debug("Wrote %d bytes", safe_writer.bytes_written)

        if args.output and not signal_handler.interrupted():
            print(f"File tree saved to {args.output}", file=sys.stderr)

    except DirectoryReadError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_PERMISSION_DENIED if isinstance(e.__cause__, PermissionError) else EXIT_ERROR)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
