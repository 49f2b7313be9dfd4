"""
ginger
Generates ninja build files from a ginger project description and the
layout of the source tree
"""

__version__ = "1.0.0"

from .main import Ginger, main

__all__ = ["Ginger", "main", "__version__"]
