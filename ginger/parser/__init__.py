"""
Directive parsing for ginger files
"""

from .directives import Action, Directive, parse_directives, parse_ginger_file, parse_line

__all__ = ["Action", "Directive", "parse_directives", "parse_ginger_file", "parse_line"]
