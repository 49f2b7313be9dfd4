"""Serializes a BuildContext into a build.ninja document"""

import logging
from pathlib import Path
from typing import List, Union

from ginger.ginger_types.context import BuildContext

logger = logging.getLogger(__name__)

HEADER = "#ginger ninja file"
LINK_EDGE = "build $target : link "
# Continuation lines of the link edge line up under its first input
LINK_INDENT = " " * len(LINK_EDGE)


def _variables(context: BuildContext) -> List[str]:
    lines = [
        f"target = {context.target}",
        f"builddir = {context.build_directory}",
        f"cc = {context.compiler}",
    ]

    # Include paths ride along with the compiler flags
    if context.compiler_flags:
        cf = "cf ="
        for flag in context.compiler_flags:
            cf += " " + flag
        for include_path in context.include_paths:
            cf += f' -I "{include_path}"'
        lines.append(cf)

    lines.append(f"ll = {context.linker}")

    if context.linker_flags:
        lines.append("lf =" + "".join(" " + flag for flag in context.linker_flags))

    return lines


def _rules() -> List[str]:
    return [
        "",
        "rule compile",
        "  command = $cc $cf -c $in -o $out",
        "",
        "rule link",
        "  command = $ll $lf $in -o $out",
    ]


def _compile_edges(context: BuildContext) -> List[str]:
    lines = []
    for source_file in context.source_files:
        lines.append("")
        lines.append(f"build $builddir{source_file.object_path}: compile {source_file.input_path}")
    return lines


def _link_edge(context: BuildContext) -> List[str]:
    lines = [""]
    last = len(context.source_files) - 1
    for i, source_file in enumerate(context.source_files):
        prefix = LINK_EDGE if i == 0 else LINK_INDENT
        suffix = "" if i == last else " $"
        lines.append(f"{prefix}$builddir{source_file.object_path}{suffix}")
    return lines


def render_build_graph(context: BuildContext) -> str:
    """
    Render the complete build.ninja text for ``context``

    The layout is: header comment, variables, the compile and link rules,
    one compile edge per source, the link edge and the default target.
    """
    lines = [HEADER, ""]
    lines += _variables(context)
    lines += _rules()
    lines += _compile_edges(context)
    lines += _link_edge(context)
    lines += ["", "default $target"]
    return "\n".join(lines) + "\n"


def write_build_graph(file_name: Union[str, Path], context: BuildContext) -> None:
    """
    Write the build graph for ``context`` to ``file_name``, replacing it

    The document is rendered before the file is opened. A write that fails
    part way can still leave the file truncated.

    Raises:
        OSError: The file could not be created or written
    """
    document = render_build_graph(context)
    with open(file_name, 'w', encoding="utf-8", newline="\n") as f:
        f.write(document)
    logger.debug(f"Wrote {len(context.source_files)} compile edges to {file_name}")
