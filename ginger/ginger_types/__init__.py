"""
Types shared across the ginger pipeline
"""

from .context import BuildContext, SourceFile
from .exceptions import (
    ConfigurationError,
    GingerError,
    InvalidConfigError,
    MissingDirectiveError,
    NoSourceFilesError,
)

__all__ = [
    "BuildContext",
    "SourceFile",
    "GingerError",
    "ConfigurationError",
    "InvalidConfigError",
    "MissingDirectiveError",
    "NoSourceFilesError",
]
