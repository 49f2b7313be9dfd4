"""Checks a populated BuildContext before anything is written"""

import logging

from ginger.ginger_types.context import BuildContext
from ginger.ginger_types.exceptions import MissingDirectiveError, NoSourceFilesError
from ginger.parser.directives import Directive

logger = logging.getLogger(__name__)


def validate_context(context: BuildContext) -> None:
    """
    Make sure ``context`` can produce a usable build graph

    The target, build directory and flags are not checked. An empty target
    is allowed through with a warning.

    Raises:
        MissingDirectiveError: No compiler or no linker was configured
        NoSourceFilesError: The walk found no source files
    """
    if context.compiler == "":
        raise MissingDirectiveError(Directive.CC.keyword)
    if context.linker == "":
        raise MissingDirectiveError(Directive.LL.keyword)
    if not context.source_files:
        raise NoSourceFilesError()

    if context.target == "":
        logger.warning(f"{Directive.TARGET.keyword} not defined, the link edge will have an empty output")
