"""Turns the lines of a ginger file into a BuildContext.

A directive line is ``<keyword> <argument>``. Keywords are matched without
regard to case; the argument is everything after the first space, kept
verbatim. Blank lines, ``#`` comments, lines without a space and unknown
keywords are skipped without complaint.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional, Union

from ginger.constants import constants
from ginger.ginger_types.context import BuildContext

logger = logging.getLogger(__name__)


class Action(Enum):
    """How a directive combines with earlier occurrences"""
    OVERRIDE = "override"
    ACCUMULATE = "accumulate"


class Directive(Enum):
    """Every keyword a ginger file understands"""
    BUILDDIR = ("-builddir", "build_directory", Action.OVERRIDE)
    CC = ("-cc", "compiler", Action.OVERRIDE)
    CF = ("-cf", "compiler_flags", Action.ACCUMULATE)
    LL = ("-ll", "linker", Action.OVERRIDE)
    LF = ("-lf", "linker_flags", Action.ACCUMULATE)
    TARGET = ("-target", "target", Action.OVERRIDE)

    def __init__(self, keyword: str, field: str, action: Action):
        self.keyword = keyword
        self.field = field
        self.action = action

    @classmethod
    def lookup(cls, keyword: str) -> Optional["Directive"]:
        """Return the directive for ``keyword`` ignoring case, or None"""
        folded = keyword.casefold()
        for directive in cls:
            if directive.keyword == folded:
                return directive
        return None

    def apply(self, context: BuildContext, argument: str) -> BuildContext:
        """Return ``context`` with ``argument`` applied to this directive's field"""
        if self.action is Action.ACCUMULATE:
            value = [*getattr(context, self.field), argument]
        else:
            value = argument
        return context.evolve(**{self.field: value})


def _strip_terminator(line: str) -> str:
    """Drop a trailing newline, then at most one carriage return"""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def parse_line(line: str, context: BuildContext) -> BuildContext:
    """Apply a single ginger file line to ``context``"""
    if not line or line.startswith(constants.COMMENT_PREFIX):
        return context

    tokens = line.split(" ", 1)
    if len(tokens) < 2:
        return context

    keyword = tokens[0]
    argument = line[len(keyword) + 1:]

    directive = Directive.lookup(keyword)
    if directive is None:
        logger.debug(f"Ignoring unknown directive {keyword!r}")
        return context

    logger.debug(f"{directive.keyword} {argument!r}")
    return directive.apply(context, argument)


def parse_directives(lines: Iterable[str], context: Optional[BuildContext] = None) -> BuildContext:
    """
    Fold a sequence of ginger file lines into a BuildContext

    Args:
        lines: Lines with or without their terminators
        context: Starting context, defaults to a fresh one

    Returns:
        The updated context
    """
    if context is None:
        context = BuildContext()

    for line in lines:
        context = parse_line(_strip_terminator(line), context)

    return context


def parse_ginger_file(file_name: Union[str, Path], context: Optional[BuildContext] = None) -> BuildContext:
    """
    Read and parse a ginger file

    Args:
        file_name: Path to the ginger file
        context: Starting context, defaults to a fresh one

    Returns:
        The updated context

    Raises:
        OSError: The file could not be opened or read
    """
    logger.debug(f"Reading {file_name}")
    # Only \n ends a line; a lone \r stays part of it
    with open(file_name, 'r', encoding="utf-8", newline="\n") as f:
        return parse_directives(f, context)
