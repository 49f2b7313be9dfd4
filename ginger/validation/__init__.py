"""
Build context validation
"""

from .validator import validate_context

__all__ = ["validate_context"]
