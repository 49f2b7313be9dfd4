#!/usr/bin/env python3
"""
Main entry point for ginger, the ninja build file generator
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Union

from .config import ConfigLoader
from .constants import constants
from .emitter import write_build_graph
from .ginger_types.context import BuildContext
from .ginger_types.exceptions import GingerError
from .parser import parse_ginger_file
from .utils import Logger
from .validation import validate_context
from .walker import classify_tree


class Ginger:
    """Turns a ginger file and a source tree into a build.ninja file"""

    def __init__(self,
                 root_dir: Optional[Union[str, Path]] = None,
                 config: Optional[ConfigLoader] = None,
                 verbose: bool = False,
                 log_file: Optional[str] = None):
        """
        Initialize ginger

        Args:
            root_dir: Directory walked for sources, defaults to walk.root
            config: Configuration loader, defaults to the packaged defaults
            verbose: Enable verbose output
            log_file: Optional log file path
        """
        self.config = config or ConfigLoader()
        self.verbose = verbose or bool(self.config.get_option("logging", "verbose", False))
        self.logger = Logger(verbose=self.verbose,
                             log_file=log_file or self.config.get_option("logging", "log_file"))

        self.walk_options = self.config.get_walk_options()
        self.root_dir = str(root_dir) if root_dir is not None else self.walk_options.root

    def load(self, ginger_file: Union[str, Path]) -> BuildContext:
        """
        Parse the ginger file, then classify the source tree

        Args:
            ginger_file: Project description to read

        Returns:
            The populated, unvalidated context
        """
        self.logger.debug(f"Parsing {ginger_file}")
        context = parse_ginger_file(ginger_file, BuildContext())

        self.logger.debug(f"Walking {self.root_dir}")
        return classify_tree(self.root_dir, context, self.walk_options)

    def generate(self, ginger_file: Union[str, Path], ninja_file: Union[str, Path]) -> BuildContext:
        """
        Run the whole pipeline and write ``ninja_file``

        Args:
            ginger_file: Project description to read
            ninja_file: Build graph to write

        Returns:
            The context the build graph was written from

        Raises:
            OSError: A file or directory could not be read or written
            ConfigurationError: The project is missing something mandatory
        """
        context = self.load(ginger_file)
        validate_context(context)
        write_build_graph(ninja_file, context)

        self.logger.success(f"Wrote {ninja_file} ({len(context.source_files)} sources, "
                            f"{len(context.include_paths)} include paths)")
        return context


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser"""
    parser = argparse.ArgumentParser(
        prog="ginger",
        description="OVERVIEW: ginger ninja build file generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                          # build.ginger -> build.ninja
  %(prog)s -i app.ginger -o app.ninja
  %(prog)s -c ginger.yaml -v        # custom walk options, debug output
        """
    )

    parser.add_argument(
        "-i",
        metavar="<file>",
        dest="ginger_file",
        help=f"Input ginger file (default: {constants.DEFAULT_GINGER_FILE})"
    )

    parser.add_argument(
        "-o",
        metavar="<file>",
        dest="ninja_file",
        help=f"Output ninja file (default: {constants.DEFAULT_NINJA_FILE})"
    )

    parser.add_argument(
        "-c", "--config",
        metavar="<file>",
        type=Path,
        help=f"YAML configuration file (default: ${constants.CONFIG_FILE_ENV})"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line interface"""
    args = build_parser().parse_args(argv)

    try:
        config = ConfigLoader(args.config)
        ginger_file = args.ginger_file or config.get_option("files", "input", constants.DEFAULT_GINGER_FILE)
        ninja_file = args.ninja_file or config.get_option("files", "output", constants.DEFAULT_NINJA_FILE)

        Ginger(config=config, verbose=args.verbose).generate(ginger_file, ninja_file)
    except (GingerError, OSError) as e:
        # One line, no prefix
        print(e, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("interrupted", file=sys.stderr)
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
