"""Breadth-first traversal of the spanning forest selected by Kruskal."""
from __future__ import annotations

import logging
from typing import List, Optional

from ...base import Algorithm
from ...data_structures.basic.queue import BoundedQueue
from ...exceptions import InvalidCollaboratorError
from ..adjacency_matrix import Graph
from ..edge import EdgeClass

ROOT = -1


class ForestBFS(Algorithm):
    """在选中的边（``EdgeClass.SELECTED``）构成的子图上做广度优先搜索，
    计算生成森林的父节点数组。

    所有存在的顶点按编号升序作为候选起点，尚未访问的顶点会成为一棵
    新树的根。只沿着被选中的边扩展，因此原图的每个连通分量各产生一棵 BFS 树。

    结果:
        长度为 ``graph.capacity`` 的列表；根节点以及从未被访问的编号
        （包括不存在的顶点）取值 -1，其余顶点取其 BFS 父节点的编号。

    时间复杂度: O(V^2) - 邻接矩阵上每个出队顶点扫描一整行
    空间复杂度: O(V)
    """

    def __init__(
        self,
        classification: EdgeClass = EdgeClass.SELECTED,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """参数:
            classification: 只沿带有该标记的边扩展
            logger: 用于跟踪执行过程的日志记录器
        """
        self.classification = classification
        self.logger = logger or logging.getLogger(__name__)

    def execute(self, graph: Graph) -> List[int]:
        """返回 graph 的生成森林父节点数组。

        异常:
            InvalidCollaboratorError: graph 不是 Graph
        """
        if not isinstance(graph, Graph):
            raise InvalidCollaboratorError(f"graph must be a Graph, got {type(graph).__name__}")
        self.logger.debug("Entering BFS: initialising")

        parent = [ROOT] * graph.capacity
        marked = [False] * graph.capacity
        for root in graph.vertices():
            if not marked[root]:
                self._visit(graph, root, marked, parent)

        self.logger.debug("Leaving BFS")
        return parent

    def _visit(
        self, graph: Graph, root: int, marked: List[bool], parent: List[int]
    ) -> None:
        log = self.logger
        log.debug("BFS visit from vertex %d", root)

        queue = BoundedQueue(graph.capacity)
        marked[root] = True
        queue.put(root)
        while not queue.is_empty():
            u = queue.get()
            for k, edge in graph.neighbors(u):
                if marked[k] or edge.classification is not self.classification:
                    continue
                marked[k] = True
                parent[k] = u
                queue.put(k)
                log.debug("Enqueued %d, parent[%d] <= %d", k, k, u)


def bfs_forest(graph: Graph, logger: Optional[logging.Logger] = None) -> List[int]:
    """``ForestBFS(logger=logger).execute(graph)`` 的便捷写法。"""
    return ForestBFS(logger=logger).execute(graph)
