"""Constant variables"""

import os

# ##########
# User Configurable Options
# ##########

DEFAULT_GINGER_FILE: str = os.getenv("GINGER_FILE", "build.ginger")
"""Project description read when -i is not given"""
DEFAULT_NINJA_FILE: str = os.getenv("GINGER_NINJA_FILE", "build.ninja")
"""Build graph written when -o is not given"""
CONFIG_FILE_ENV: str = "GINGER_CONFIG"
"""Environment variable naming a user configuration file"""

# ##########
# Classification
# ##########

SOURCE_EXTENSIONS: frozenset[str] = frozenset({".c", ".cpp"})
"""Extensions compiled into objects, matched case-sensitively"""
HEADER_EXTENSIONS: frozenset[str] = frozenset({".h"})
"""Extensions that mark a directory as an include path"""
OBJECT_EXTENSION: str = ".o"
"""Extension given to compiled objects"""

# ##########
# Build context defaults
# ##########

DEFAULT_BUILD_DIRECTORY: str = "."
"""Build directory used when -builddir is absent"""
COMMENT_PREFIX: str = "#"
"""Lines starting with this are ignored"""
