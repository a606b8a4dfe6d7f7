"""使用邻接矩阵实现的无向带权图。

矩阵的每个单元格保存的是边仓库（arena）中的键，而不是边对象本身：
同一条边在 ``(i, j)`` 与 ``(j, i)`` 两个单元格中各出现一次，
但在仓库中只存在一份，删除和销毁都只遍历仓库。
"""
from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from ..utils import check_capacity, check_vertex_id
from .edge import Edge, EdgeClass

logger = logging.getLogger(__name__)

Row = List[Optional[int]]


class Graph:
    """容量固定的无向图（邻接矩阵表示）。

    顶点编号为 ``0..capacity-1``。顶点“存在”当且仅当它的行已经分配，
    与是否有关联边无关。矩阵始终对称且对角线为空（不允许自环）。

    主要操作：
        - add_vertex / remove_vertex: 增删顶点
        - add_edge / remove_edge: 增删边，缺失的端点会自动加入
        - first_edge / next_edge: 按下三角顺序枚举边，每条边恰好一次
        - degree: 顶点的度数

    时间复杂度:
        - has_vertex / has_edge / get_edge / add_edge / remove_edge: O(1)
        - degree / remove_vertex / first_edge / next_edge: O(capacity)
    空间复杂度: O(capacity^2)
    """

    def __init__(self, capacity: int) -> None:
        """创建一个最多容纳 ``capacity`` 个顶点的空图。

        异常:
            CapacityError: capacity 不是正整数
        """
        self._capacity = check_capacity(capacity)
        self._rows: List[Optional[Row]] = [None] * self._capacity
        self._edges: Dict[int, Edge] = {}
        self._next_key = 0

    # ------------------------------------------------------------------
    # 查询
    # ------------------------------------------------------------------
    @property
    def capacity(self) -> int:
        """图最多能容纳的顶点数（最大编号 + 1）。"""
        return self._capacity

    def has_vertex(self, v: int) -> bool:
        check_vertex_id(v)
        return v < self._capacity and self._rows[v] is not None

    def has_edge(self, v1: int, v2: int) -> bool:
        return self.get_edge(v1, v2) is not None

    def get_edge(self, v1: int, v2: int) -> Optional[Edge]:
        """返回连接 v1 与 v2 的边，不存在时返回 ``None``。"""
        if not (self.has_vertex(v1) and self.has_vertex(v2)):
            return None
        key = self._rows[v1][v2]
        return None if key is None else self._edges[key]

    def is_empty(self) -> bool:
        """图中没有任何顶点时返回 True。"""
        return all(row is None for row in self._rows)

    def vertex_count(self) -> int:
        return sum(1 for row in self._rows if row is not None)

    def edge_count(self) -> int:
        return len(self._edges)

    def vertices(self) -> List[int]:
        """按编号升序返回所有存在的顶点。"""
        return [v for v, row in enumerate(self._rows) if row is not None]

    def degree(self, v: int) -> int:
        """返回顶点 v 的度数；顶点不存在时为 0。"""
        if not self.has_vertex(v):
            return 0
        return sum(1 for key in self._rows[v] if key is not None)

    def neighbors(self, v: int) -> List[Tuple[int, Edge]]:
        """返回 ``(邻居编号, 边)`` 列表，按邻居编号升序。"""
        if not self.has_vertex(v):
            return []
        return [
            (k, self._edges[key])
            for k, key in enumerate(self._rows[v])
            if key is not None
        ]

    # ------------------------------------------------------------------
    # 修改
    # ------------------------------------------------------------------
    def add_vertex(self, v: int) -> bool:
        """加入顶点 v；已存在时什么也不做。

        返回:
            bool: v 超出容量时返回 False，否则返回 True
        """
        check_vertex_id(v)
        if v >= self._capacity:
            return False
        if self._rows[v] is None:
            self._rows[v] = [None] * self._capacity
        return True

    def add_edge(
        self,
        v1: int,
        v2: int,
        weight: float,
        classification: EdgeClass = EdgeClass.UNVISITED,
    ) -> bool:
        """加入一条连接 v1 与 v2 的边，缺失的端点会自动加入。

        同一对顶点之间只保存一条边：重复添加时，旧边会先从仓库中移除。

        返回:
            bool: 任一端点超出容量时返回 False，否则返回 True

        异常:
            InvalidVertexError: 端点为负数、非整数，或 v1 == v2
        """
        check_vertex_id(v1, "v1")
        check_vertex_id(v2, "v2")
        if v1 >= self._capacity or v2 >= self._capacity:
            return False
        edge = Edge(v1, v2, weight, classification)
        self.add_vertex(v1)
        self.add_vertex(v2)

        old_key = self._rows[v1][v2]
        if old_key is not None:
            logger.warning("Replacing existing edge (%d, %d)", v1, v2)
            del self._edges[old_key]

        key = self._next_key
        self._next_key += 1
        self._edges[key] = edge
        self._rows[v1][v2] = key
        self._rows[v2][v1] = key
        return True

    def remove_edge(self, v1: int, v2: int) -> bool:
        """删除连接 v1 与 v2 的边，返回该边是否存在。"""
        if not (self.has_vertex(v1) and self.has_vertex(v2)):
            return False
        key = self._rows[v1][v2]
        if key is None:
            return False
        del self._edges[key]
        self._rows[v1][v2] = None
        self._rows[v2][v1] = None
        return True

    def remove_vertex(self, v: int) -> bool:
        """删除顶点 v 及其所有关联边，返回顶点是否存在。"""
        if not self.has_vertex(v):
            return False
        for k in range(self._capacity):
            if self._rows[v][k] is not None:
                self.remove_edge(v, k)
        self._rows[v] = None
        return True

    def clear(self) -> None:
        """销毁所有顶点与边。

        每条边只在仓库中释放一次，矩阵随后整体丢弃。
        """
        released = len(self._edges)
        self._edges.clear()
        self._rows = [None] * self._capacity
        logger.debug("Graph cleared, %d edges released", released)

    # ------------------------------------------------------------------
    # 边枚举
    # ------------------------------------------------------------------
    def _scan_from(self, i: int, j: int) -> Optional[Edge]:
        """从下三角位置 (i, j) 开始（含）查找第一条边。"""
        while i < self._capacity:
            row = self._rows[i]
            if row is not None:
                while j < i:
                    if row[j] is not None:
                        return self._edges[row[j]]
                    j += 1
            i += 1
            j = 0
        return None

    def first_edge(self) -> Optional[Edge]:
        """返回枚举顺序中的第一条边；图中没有边时返回 None。"""
        return self._scan_from(1, 0)

    def next_edge(self, edge: Edge) -> Optional[Edge]:
        """返回枚举顺序中紧跟在 edge 之后的边，edge 为最后一条时返回 None。

        扫描只覆盖严格下三角（列 j < 行 i），因此每条边恰好出现一次，
        且未修改的图在多次完整遍历中顺序一致。
        """
        i, j = edge.key
        if i >= self._capacity:
            return None
        return self._scan_from(i, j + 1)

    def edges(self) -> Iterator[Edge]:
        """按 first_edge / next_edge 的顺序迭代所有边。"""
        current = self.first_edge()
        while current is not None:
            yield current
            current = self.next_edge(current)

    def dump(self) -> str:
        """返回逐行列出顶点及其关联边的调试文本。"""
        lines: List[str] = []
        for v, row in enumerate(self._rows):
            if row is None:
                continue
            cells = " ".join(
                f"({k} {self._edges[key].format()})"
                for k, key in enumerate(row)
                if key is not None
            )
            lines.append(f"Vertex {v:3d}: {cells}".rstrip())
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"Graph(capacity={self._capacity}, vertices={self.vertex_count()}, "
            f"edges={self.edge_count()})"
        )
