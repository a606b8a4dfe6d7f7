"""Minimum spanning forests over adjacency-matrix graphs."""

from .exceptions import (  # noqa: F401
    CapacityError,
    ConfigurationError,
    InputFormatError,
    InvalidVertexError,
    KruskalError,
    MSTGraphError,
)
from .graph.adjacency_matrix import Graph  # noqa: F401
from .graph.advanced.mst import KruskalMST, KruskalResult, kruskal  # noqa: F401
from .graph.basic.bfs import ForestBFS, bfs_forest  # noqa: F401
from .graph.edge import Edge, EdgeClass  # noqa: F401

__all__ = [
    "CapacityError",
    "ConfigurationError",
    "Edge",
    "EdgeClass",
    "ForestBFS",
    "Graph",
    "InputFormatError",
    "InvalidVertexError",
    "KruskalError",
    "KruskalMST",
    "KruskalResult",
    "MSTGraphError",
    "bfs_forest",
    "kruskal",
]
