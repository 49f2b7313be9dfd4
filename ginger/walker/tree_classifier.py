"""Walks a source tree and sorts its files into sources and include paths"""

import logging
import os
from typing import List, Optional

from ginger.config import WalkOptions
from ginger.constants import constants
from ginger.ginger_types.context import BuildContext, SourceFile

logger = logging.getLogger(__name__)


def contains_path(path: str, include_paths: List[str]) -> bool:
    """Check ``include_paths`` for ``path`` ignoring case"""
    folded = path.casefold()
    return any(include_path.casefold() == folded for include_path in include_paths)


def _extension(file_name: str) -> str:
    """Return the text from the last dot on, so '.h' is a header and 'a.tar.c' a source"""
    dot = file_name.rfind(".")
    return file_name[dot:] if dot >= 0 else ""


def _normalize_root(root: str) -> str:
    """Anchor a relative root at "." so object paths stay under $builddir/"""
    if root == "." or os.path.isabs(root):
        return root
    if any(root.startswith("." + sep) for sep in (os.sep, os.altsep) if sep):
        return root
    return "." + os.sep + root


def _list_directory(root: str, options: WalkOptions) -> List[os.DirEntry]:
    """Read every entry of ``root`` up front so the handle is closed before recursing"""
    with os.scandir(root) as it:
        entries = list(it)
    if options.sort_entries:
        entries.sort(key=lambda entry: entry.name)
    return entries


def walk_project(root: str,
                 source_files: List[SourceFile],
                 include_paths: List[str],
                 options: Optional[WalkOptions] = None) -> None:
    """
    Recursively classify the entries below ``root``

    Sub-directories are walked before the rest of the current directory is
    examined. A directory is registered as an include path by its first
    header file.

    Args:
        root: Directory to walk
        source_files: Receives every compilable file found
        include_paths: Receives every directory holding a header
        options: Walk options, defaults apply when omitted

    Raises:
        OSError: A directory could not be listed
    """
    options = options or WalkOptions()

    for entry in _list_directory(root, options):
        path = root + os.sep + entry.name
        extension = _extension(entry.name)

        if entry.is_dir(follow_symlinks=False):
            if entry.name in options.exclude_dirs:
                logger.debug(f"Skipping excluded directory {path}")
                continue
            walk_project(path, source_files, include_paths, options)
        elif extension in constants.SOURCE_EXTENSIONS:
            source_file = SourceFile(
                name=entry.name[:-len(extension)],
                path=root + os.sep,
                extension=extension,
            )
            logger.debug(f"Source: {source_file.input_path}")
            source_files.append(source_file)
        elif extension in constants.HEADER_EXTENSIONS and not contains_path(root, include_paths):
            logger.debug(f"Include path: {root}")
            include_paths.append(root)


def classify_tree(root: str = ".",
                  context: Optional[BuildContext] = None,
                  options: Optional[WalkOptions] = None) -> BuildContext:
    """
    Walk ``root`` and return ``context`` extended with what was found

    Nothing is returned if the walk fails part way; the error propagates.

    Args:
        root: Directory to walk
        context: Context to extend, defaults to a fresh one
        options: Walk options, defaults apply when omitted

    Returns:
        A new context with the discovered sources and include paths appended
    """
    if context is None:
        context = BuildContext()

    root = _normalize_root(root)
    source_files = list(context.source_files)
    include_paths = list(context.include_paths)
    walk_project(root, source_files, include_paths, options)

    logger.debug(f"Found {len(source_files) - len(context.source_files)} source files "
                 f"and {len(include_paths) - len(context.include_paths)} include paths under {root}")
    return context.evolve(source_files=source_files, include_paths=include_paths)
