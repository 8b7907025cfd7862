"""
Junction Graph Module
=====================
Up / right adjacency between the junctions of a planar arrangement.
"""

from .junctions import JunctionGraph, GridGraphBuilder, GraphConfig, build_junction_graph

__all__ = ['JunctionGraph', 'GridGraphBuilder', 'GraphConfig', 'build_junction_graph']
