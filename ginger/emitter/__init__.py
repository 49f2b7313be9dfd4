"""
build.ninja generation
"""

from .ninja_writer import render_build_graph, write_build_graph

__all__ = ["render_build_graph", "write_build_graph"]
