from typing import Any, List, Optional

from mstgraph.base import Algorithm
from mstgraph.utils import check_capacity


class BoundedQueue(Algorithm):
    """容量固定的先进先出（FIFO）循环队列。

    元素保存在长度为 ``max_size`` 的环形数组中，
    ``oldest`` 指向最早入队的元素，``newest`` 指向下一个空位。

    主要操作：
        - put: 将元素加入队尾，队列已满时直接丢弃
        - get: 从队头取出元素，队列为空时返回 None
        - peek: 查看队头元素但不移除

    时间复杂度: 所有操作 O(1)
    空间复杂度: O(max_size)

    应用场景:
        - 广度优先搜索（容量取图的顶点容量即可保证不会溢出）
    """

    def __init__(self, max_size: int) -> None:
        """创建最多容纳 ``max_size`` 个元素的空队列。"""
        self._max_size = check_capacity(max_size, "max_size")
        self._items: List[Any] = [None] * self._max_size
        self._oldest = 0
        self._newest = 0
        self._length = 0

    @property
    def max_size(self) -> int:
        return self._max_size

    def __len__(self) -> int:
        return self._length

    def is_empty(self) -> bool:
        return self._length == 0

    def is_full(self) -> bool:
        return self._length == self._max_size

    def put(self, item: Any) -> bool:
        """将元素加入队尾。

        返回:
            bool: 队列已满时返回 False，元素被丢弃
        """
        if self.is_full():
            return False
        self._items[self._newest] = item
        self._newest = (self._newest + 1) % self._max_size
        self._length += 1
        return True

    def get(self) -> Optional[Any]:
        """从队头移除并返回元素，队列为空时返回 None。"""
        if self.is_empty():
            return None
        item = self._items[self._oldest]
        self._items[self._oldest] = None
        self._oldest = (self._oldest + 1) % self._max_size
        self._length -= 1
        return item

    def peek(self) -> Optional[Any]:
        return None if self.is_empty() else self._items[self._oldest]

    def snapshot(self) -> List[Any]:
        """按出队顺序返回当前元素的副本。"""
        return [
            self._items[(self._oldest + i) % self._max_size]
            for i in range(self._length)
        ]

    def execute(self, *args, **kwargs) -> List[Any]:
        """返回当前队列的快照。"""
        return self.snapshot()
