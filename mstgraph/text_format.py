"""Line based text input and output for graphs.

Input format::

    4            <- vertex capacity
    0 1 1.0      <- one edge per line: v1 v2 weight
    1 2 2.0

Blank lines and lines starting with ``#`` are ignored.
"""
from __future__ import annotations

import logging
import math
from typing import Iterable, List, Sequence

from .exceptions import InputFormatError, InvalidVertexError
from .graph.adjacency_matrix import Graph

logger = logging.getLogger(__name__)


def _meaningful(lines: Iterable[str]):
    for number, line in enumerate(lines, start=1):
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            yield number, line, stripped


def _parse_capacity(number: int, line: str, stripped: str) -> int:
    try:
        capacity = int(stripped)
    except ValueError:
        raise InputFormatError("expected the vertex capacity", number, line) from None
    if capacity <= 0:
        raise InputFormatError("vertex capacity must be positive", number, line)
    return capacity


def _parse_edge(number: int, line: str, stripped: str):
    parts = stripped.split()
    if len(parts) != 3:
        raise InputFormatError("expected 'v1 v2 weight'", number, line)
    try:
        v1, v2, weight = int(parts[0]), int(parts[1]), float(parts[2])
    except ValueError:
        raise InputFormatError("expected two integers and a number", number, line) from None
    if v1 < 0 or v2 < 0:
        raise InputFormatError("vertex ids must be non-negative", number, line)
    if not math.isfinite(weight):
        raise InputFormatError("weight must be finite", number, line)
    return v1, v2, weight


def parse_graph(lines: Iterable[str]) -> Graph:
    """从文本行构建图。

    异常:
        InputFormatError: 缺少容量行、边的格式错误，或边无法加入图中
    """
    entries = _meaningful(lines)
    header = next(entries, None)
    if header is None:
        raise InputFormatError("empty input: missing vertex capacity")
    graph = Graph(_parse_capacity(*header))

    for number, line, stripped in entries:
        v1, v2, weight = _parse_edge(number, line, stripped)
        try:
            added = graph.add_edge(v1, v2, weight)
        except InvalidVertexError as err:
            raise InputFormatError(str(err), number, line) from err
        if not added:
            raise InputFormatError(
                f"cannot create edge ({v1}, {v2}) in a graph of capacity {graph.capacity}",
                number,
                line,
            )

    logger.debug("Parsed %r", graph)
    return graph


def format_edges(graph: Graph) -> List[str]:
    """按边的枚举顺序逐行输出边及其分类。"""
    return [edge.format() for edge in graph.edges()]


def format_parents(parent: Sequence[int]) -> List[str]:
    return [f"parent[{i}] = {p}" for i, p in enumerate(parent)]


def render_report(graph: Graph, parent: Sequence[int]) -> str:
    """组合边列表与父节点数组，得到命令行工具的完整输出。"""
    lines = ["Edges after Kruskal:"]
    lines.extend(format_edges(graph))
    lines.append("")
    lines.append("Parent array (after BFS):")
    lines.extend(format_parents(parent))
    return "\n".join(lines) + "\n"
