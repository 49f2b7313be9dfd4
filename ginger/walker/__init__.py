"""
Source tree classification
"""

from .tree_classifier import classify_tree, contains_path, walk_project

__all__ = ["classify_tree", "contains_path", "walk_project"]
