from __future__ import annotations

from typing import List, Optional, Tuple

from mstgraph.base import Algorithm
from mstgraph.utils import check_capacity, check_vertex_id


class DisjointSet(Algorithm):
    """不相交集合（并查集），元素为 ``0..capacity-1`` 的整数。

    采用按秩合并与完整路径压缩：查找时把路径上的每个节点
    直接指向根，摊还复杂度接近常数。

    主要操作：
        - make_set: 把元素放入只含自身的新集合
        - find_set: 返回元素所在集合的代表（根），未放入时返回 None
        - union: 合并两个元素所在的集合
        - same_set: 判断两个元素是否在同一集合

    时间复杂度: 单次操作摊还 O(α(n))，按秩合并保证树高 O(log n)
    空间复杂度: O(n)
    """

    def __init__(self, capacity: int) -> None:
        """创建一个可容纳 ``capacity`` 个元素的集合族，所有元素初始均未放入。"""
        self._capacity = check_capacity(capacity)
        self.father: List[Optional[int]] = [None] * self._capacity
        self.rank: List[int] = [0] * self._capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    def _in_universe(self, n: int) -> bool:
        check_vertex_id(n, "element")
        return n < self._capacity

    def make_set(self, n: int) -> bool:
        """把 n 作为秩为 0 的根放入新集合。

        返回:
            bool: n 超出容量时返回 False
        """
        if not self._in_universe(n):
            return False
        self.father[n] = n
        self.rank[n] = 0
        return True

    def find_set(self, n: int) -> Optional[int]:
        """返回 n 所在集合的根；n 从未放入或超出容量时返回 None。"""
        if not self._in_universe(n) or self.father[n] is None:
            return None

        root = n
        while self.father[root] != root:
            root = self.father[root]

        # 路径压缩：路径上的节点全部直接指向根
        while self.father[n] != root:
            self.father[n], n = root, self.father[n]
        return root

    def union(self, a: int, b: int) -> bool:
        """合并 a 与 b 所在的集合。

        秩较小的根挂到秩较大的根下；秩相同时 b 的根挂到 a 的根下，
        并且只在这种情况下把存活根的秩加一。

        返回:
            bool: 任一元素未放入集合时返回 False（不做任何修改）
        """
        root_a = self.find_set(a)
        root_b = self.find_set(b)
        if root_a is None or root_b is None:
            return False
        if root_a == root_b:
            return True

        if self.rank[root_a] < self.rank[root_b]:
            self.father[root_a] = root_b
        elif self.rank[root_a] > self.rank[root_b]:
            self.father[root_b] = root_a
        else:
            self.father[root_b] = root_a
            self.rank[root_a] += 1
        return True

    def same_set(self, a: int, b: int) -> bool:
        root_a = self.find_set(a)
        root_b = self.find_set(b)
        return root_a is not None and root_a == root_b

    def component_count(self) -> int:
        """返回已放入元素构成的集合个数。"""
        return sum(1 for i, f in enumerate(self.father) if f == i)

    def snapshot(self) -> List[Tuple[int, Optional[int]]]:
        """返回每个元素及其代表组成的 ``(i, find_set(i))`` 列表。"""
        return [(i, self.find_set(i)) for i in range(self._capacity)]

    def execute(self, *args, **kwargs) -> List[Tuple[int, Optional[int]]]:
        """返回 snapshot() 的结果。"""
        return self.snapshot()
