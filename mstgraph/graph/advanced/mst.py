"""Minimum Spanning Tree algorithm using Kruskal's method."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ...base import Algorithm
from ...data_structures.advanced.disjoint_set import DisjointSet
from ...data_structures.advanced.priority_heap import PriorityHeap
from ...exceptions import (
    InvalidArgumentError,
    InvalidCollaboratorError,
    KruskalError,
    MSTGraphError,
)
from ..adjacency_matrix import Graph
from ..edge import Edge, EdgeClass

HEAP_SIZING_MODES = ("exact", "quadratic")


def edge_relation(a: Edge, b: Edge) -> bool:
    """堆中使用的顺序关系：权重较大（或相等）的边下沉，得到按权重的最小堆。"""
    return a.weight >= b.weight


@dataclass
class KruskalResult:
    """Kruskal 的执行结果。

    属性:
        selected: 被选入最小生成森林的边，按选中顺序排列
        rejected: 会形成环而被拒绝的边，按处理顺序排列
        total_weight: 选中边的权重之和
    """
    selected: List[Edge] = field(default_factory=list)
    rejected: List[Edge] = field(default_factory=list)
    total_weight: float = 0.0


class KruskalMST(Algorithm):
    """基于 Kruskal 算法的最小生成森林实现。

    算法直接在图上给边打标记：属于最小生成森林的边标记为
    ``EdgeClass.SELECTED``，其余的边标记为 ``EdgeClass.REJECTED``。
    对于不连通的图，每个连通分量各得到一棵最小生成树。

    执行阶段：
        1. 初始化: 创建按权重排序的最小堆，以及为每个存在的顶点建立单元素集合
        2. 建堆: 按枚举顺序把每条边放入堆中，并先标记为 REJECTED
        3. 处理: 依次取出权重最小的边，两端点不在同一集合时选中并合并集合
    权重相同的边之间的先后次序由堆的交换行为决定，不做额外保证。

    时间复杂度: O(V^2 + E log E)，其中 V^2 来自邻接矩阵的边枚举
    空间复杂度: O(V + E)
    """

    def __init__(
        self,
        heap_sizing: str = "exact",
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """参数:
            heap_sizing: ``"exact"`` 先统计边数再按边数分配堆；
                ``"quadratic"`` 直接按 capacity^2 分配
            logger: 用于跟踪执行过程的日志记录器，默认使用本模块的记录器
        """
        if heap_sizing not in HEAP_SIZING_MODES:
            raise InvalidArgumentError(
                f"heap_sizing must be one of {HEAP_SIZING_MODES}, got {heap_sizing!r}"
            )
        self.heap_sizing = heap_sizing
        self.logger = logger or logging.getLogger(__name__)

    def _heap_capacity(self, graph: Graph) -> int:
        if self.heap_sizing == "quadratic":
            return graph.capacity * graph.capacity
        return max(1, graph.edge_count())

    def execute(self, graph: Graph) -> KruskalResult:
        """在 graph 上运行 Kruskal 算法并给所有边打标记。

        参数:
            graph: 要处理的图，边的分类标记会被原地修改

        返回:
            KruskalResult: 选中边、拒绝边以及总权重

        异常:
            InvalidCollaboratorError: graph 不是 Graph
            KruskalError: 堆或并查集无法创建，或建堆时堆溢出
        """
        if not isinstance(graph, Graph):
            raise InvalidCollaboratorError(f"graph must be a Graph, got {type(graph).__name__}")
        log = self.logger
        log.debug("Entering kruskal: initialising (capacity=%d)", graph.capacity)

        try:
            heap: PriorityHeap[Edge] = PriorityHeap(
                self._heap_capacity(graph), edge_relation
            )
            groups = DisjointSet(graph.capacity)
        except (MemoryError, MSTGraphError) as err:
            raise KruskalError(f"kruskal: failed to allocate working structures: {err}") from err

        for v in graph.vertices():
            groups.make_set(v)

        for edge in graph.edges():
            if not heap.insert(edge):
                raise KruskalError(
                    f"kruskal: heap overflow at capacity {heap.capacity()}"
                )
            edge.classification = EdgeClass.REJECTED

        log.debug("Processing %d edges", heap.size())
        result = KruskalResult()
        while not heap.is_empty():
            current = heap.extract_root()
            log.debug("Lightest edge: %s", current.format())
            if groups.same_set(current.v1, current.v2):
                result.rejected.append(current)
                continue
            current.classification = EdgeClass.SELECTED
            groups.union(current.v1, current.v2)
            result.selected.append(current)
            result.total_weight += current.weight
            log.debug("Edge selected => union: %d U %d", current.v1, current.v2)

        log.debug(
            "Leaving kruskal: %d selected, %d rejected, total weight %g",
            len(result.selected),
            len(result.rejected),
            result.total_weight,
        )
        return result


def kruskal(
    graph: Graph,
    logger: Optional[logging.Logger] = None,
    heap_sizing: str = "exact",
) -> KruskalResult:
    """``KruskalMST(heap_sizing, logger).execute(graph)`` 的便捷写法。"""
    return KruskalMST(heap_sizing=heap_sizing, logger=logger).execute(graph)
