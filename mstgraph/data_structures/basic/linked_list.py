from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional

from mstgraph.base import Algorithm


@dataclass
class Node:
    """链表节点类。

    属性:
        item: 节点存储的元素
        next: 指向下一个节点的引用，如果是最后一个节点则为 None
    """
    item: Any
    next: Optional[Node] = None


class SinglyLinkedList(Algorithm):
    """带游标的单向链表。

    除了常规的插入、查找与迭代外，链表维护一个游标 ``current``：
    ``reset`` 把游标移到表头，``next`` 逐个前进，``remove`` 删除游标所指元素。

    主要操作：
        - insert: 在表头插入元素
        - insert_sorted: 按 key 有序插入
        - find: 查找第一个满足谓词的元素，并把游标停在该元素上
        - remove: 删除游标所指元素
        - for_each: 对每个元素调用函数

    时间复杂度:
        - insert: O(1)
        - insert_sorted / find / remove: O(n)
    空间复杂度: O(n)
    """

    def __init__(self) -> None:
        """初始化空链表。"""
        self.head: Optional[Node] = None
        self._current: Optional[Node] = None
        self._index = -1
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node:
            yield node.item
            node = node.next

    def is_empty(self) -> bool:
        return self.head is None

    @property
    def index(self) -> int:
        """游标位置，游标未指向任何元素时为 -1。"""
        return self._index

    def current(self) -> Optional[Any]:
        return self._current.item if self._current else None

    def reset(self) -> None:
        """把游标移到表头（空链表时游标为空）。"""
        self._current = self.head
        self._index = 0 if self.head else -1

    def next(self) -> Optional[Any]:
        """游标前进一步并返回新位置上的元素，越过末尾时返回 None。"""
        if self._current is None:
            return None
        self._current = self._current.next
        self._index = self._index + 1 if self._current else -1
        return self.current()

    def insert(self, item: Any) -> None:
        """在表头插入元素，游标指向新元素。"""
        self.head = Node(item, self.head)
        self._current = self.head
        self._index = 0
        self._length += 1

    def insert_sorted(
        self, item: Any, key: Callable[[Any], Any] = lambda x: x
    ) -> None:
        """在第一个 key 大于新元素 key 的节点之前插入，保持升序。"""
        new_key = key(item)
        prev: Optional[Node] = None
        node = self.head
        position = 0
        while node and key(node.item) <= new_key:
            prev = node
            node = node.next
            position += 1

        new_node = Node(item, node)
        if prev:
            prev.next = new_node
        else:
            self.head = new_node
        self._current = new_node
        self._index = position
        self._length += 1

    def find(self, predicate: Callable[[Any], bool]) -> Optional[Any]:
        """返回第一个满足 predicate 的元素，并把游标停在该元素上。

        未找到时返回 None，游标不变。
        """
        node = self.head
        position = 0
        while node:
            if predicate(node.item):
                self._current = node
                self._index = position
                return node.item
            node = node.next
            position += 1
        return None

    def remove(self) -> bool:
        """删除游标所指的元素，游标移到后继元素。

        返回:
            bool: 游标为空时返回 False
        """
        if self._current is None:
            return False

        if self._current is self.head:
            self.head = self.head.next
        else:
            prev = self.head
            while prev.next is not self._current:
                prev = prev.next
            prev.next = self._current.next

        self._current = self._current.next
        if self._current is None:
            self._index = -1
        self._length -= 1
        return True

    def for_each(self, func: Callable[[Any, Any], None], data: Any = None) -> None:
        """对每个元素调用 ``func(item, data)``。"""
        for item in self:
            func(item, data)

    def to_list(self) -> List[Any]:
        return list(self)

    def execute(self, *args, **kwargs) -> List[Any]:
        """返回链表的列表表示。"""
        return self.to_list()
