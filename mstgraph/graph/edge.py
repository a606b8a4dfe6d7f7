"""Undirected weighted edge with a mutable classification tag."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from ..exceptions import InvalidVertexError
from ..utils import check_vertex_id


class EdgeClass(Enum):
    """边的分类标记。

    Kruskal 只使用 UNVISITED → REJECTED / SELECTED；
    IN_PROGRESS 与 VISITED 保留给其他遍历算法着色使用。
    """
    UNVISITED = 0
    IN_PROGRESS = 1
    VISITED = 2
    SELECTED = 3
    REJECTED = 4

    @property
    def label(self) -> str:
        return self.name


@dataclass(eq=False)
class Edge:
    """无向带权边。

    端点以创建时的方向保存，但在概念上是无序的；
    ``key`` 给出规范化坐标 ``(max(v1, v2), min(v1, v2))``，
    即邻接矩阵下三角中的位置。

    属性:
        v1: 第一个端点
        v2: 第二个端点
        weight: 边的权重
        classification: 当前分类标记
    """
    v1: int
    v2: int
    weight: float
    classification: EdgeClass = field(default=EdgeClass.UNVISITED)

    def __post_init__(self) -> None:
        check_vertex_id(self.v1, "v1")
        check_vertex_id(self.v2, "v2")
        if self.v1 == self.v2:
            raise InvalidVertexError(f"self-loop on vertex {self.v1} is not allowed")
        self.weight = float(self.weight)
        if not isinstance(self.classification, EdgeClass):
            self.classification = EdgeClass(self.classification)

    @property
    def key(self) -> Tuple[int, int]:
        """规范化坐标 ``(较大端点, 较小端点)``。"""
        return (self.v1, self.v2) if self.v1 > self.v2 else (self.v2, self.v1)

    def other(self, vertex: int) -> int:
        """返回与 ``vertex`` 相对的另一个端点。"""
        if vertex == self.v1:
            return self.v2
        if vertex == self.v2:
            return self.v1
        raise InvalidVertexError(f"vertex {vertex} is not an endpoint of {self}")

    def connects(self, a: int, b: int) -> bool:
        return {a, b} == {self.v1, self.v2}

    def format(self) -> str:
        """按 ``v1 --(ww)--> v2<TAB>LABEL`` 的格式输出，权重截断为整数。"""
        weight = f"{int(self.weight):02d}" if math.isfinite(self.weight) else str(self.weight)
        return f"{self.v1} --({weight})--> {self.v2}\t{self.classification.label}"

    def __str__(self) -> str:
        return self.format()
