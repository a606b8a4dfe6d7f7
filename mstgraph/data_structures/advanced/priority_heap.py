"""Array-backed binary heap ordered by a caller-supplied relation."""
from __future__ import annotations

from typing import Callable, Generic, List, Optional, TypeVar

from mstgraph.base import Algorithm
from mstgraph.exceptions import InvalidCollaboratorError
from mstgraph.utils import check_capacity, swap

T = TypeVar("T")
K = TypeVar("K")

#: ``relation(a, b)`` 为真表示 a 应当沉到 b 的下方。
Relation = Callable[[T, T], bool]


def min_relation(key: Callable[[T], K]) -> Relation:
    """按 ``key`` 构造最小堆关系：``key(a) >= key(b)`` 时 a 下沉。"""

    def relation(a: T, b: T) -> bool:
        return key(a) >= key(b)

    return relation


def max_relation(key: Callable[[T], K]) -> Relation:
    """按 ``key`` 构造最大堆关系：``key(a) <= key(b)`` 时 a 下沉。"""

    def relation(a: T, b: T) -> bool:
        return key(a) <= key(b)

    return relation


class PriorityHeap(Algorithm, Generic[T]):
    """容量固定的二叉堆。

    堆的顺序完全由调用方提供的关系 ``relation(a, b)`` 决定：
    当它为真时，a 应该位于 b 的下方。因此 ``a >= b`` 得到最小堆，
    ``a <= b`` 得到最大堆。堆只保存元素的引用，不复制其内容。

    数组布局：下标 i 的左右孩子分别为 ``2i+1`` 与 ``2i+2``，父节点为 ``(i-1)//2``。

    时间复杂度:
        - insert / extract_root: O(log n)
        - root / size / capacity: O(1)
    空间复杂度: O(capacity)
    """

    def __init__(self, capacity: int, relation: Relation) -> None:
        """创建空堆。

        参数:
            capacity: 最多容纳的元素个数
            relation: 顺序关系，见类文档

        异常:
            CapacityError: capacity 不是正整数
            InvalidCollaboratorError: relation 不可调用
        """
        self._capacity = check_capacity(capacity)
        if not callable(relation):
            raise InvalidCollaboratorError("relation must be callable")
        self._relation = relation
        self._items: List[T] = []

    def size(self) -> int:
        return len(self._items)

    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def root(self) -> Optional[T]:
        """查看堆顶元素但不移除，空堆返回 None。"""
        return self._items[0] if self._items else None

    def insert(self, item: T) -> bool:
        """插入元素并上浮到合适位置。

        返回:
            bool: 堆已满时返回 False，堆保持不变
        """
        if self.is_full():
            return False
        self._items.append(item)
        self._sift_up(len(self._items) - 1)
        return True

    def extract_root(self) -> Optional[T]:
        """移除并返回堆顶元素，空堆返回 None。"""
        if not self._items:
            return None
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return top

    def _sift_up(self, i: int) -> None:
        items = self._items
        while i > 0:
            parent = (i - 1) // 2
            if not self._relation(items[parent], items[i]):
                return
            swap(items, parent, i)
            i = parent

    def _sift_down(self, i: int) -> None:
        items = self._items
        last = len(items) - 1
        while 2 * i + 1 <= last:
            child = 2 * i + 1
            right = child + 1
            # 选出两个孩子中应当位于上方的那个
            if right <= last and self._relation(items[child], items[right]):
                child = right
            if not self._relation(items[i], items[child]):
                return
            swap(items, i, child)
            i = child

    def snapshot(self) -> List[T]:
        """按数组顺序返回堆中元素的副本。"""
        return list(self._items)

    def execute(self, *args, **kwargs) -> List[T]:
        """返回 snapshot() 的结果。"""
        return self.snapshot()
