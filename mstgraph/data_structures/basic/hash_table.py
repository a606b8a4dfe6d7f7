from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional, Tuple

from mstgraph.base import Algorithm
from mstgraph.utils import check_capacity

from .linked_list import SinglyLinkedList


@dataclass
class HashItem:
    """哈希表中的一个键值对。"""
    key: Any
    item: Any


def _default_equal(a: Any, b: Any) -> bool:
    return a == b


class HashTable(Algorithm):
    """容量固定、以拉链法处理冲突的哈希表。

    每个桶是一条 ``SinglyLinkedList``。桶的数量与最多保存的键值对个数
    都等于 ``max_size``，不会自动扩容。键的哈希函数与相等判断都可以由
    调用方提供。

    主要操作：
        - insert: 插入新的键值对（键已存在或表已满时失败）
        - find: 根据键获取对应的值
        - remove: 删除键值对
    """

    def __init__(
        self,
        max_size: int,
        hash_func: Callable[[Any], int] = hash,
        key_equal: Callable[[Any, Any], bool] = _default_equal,
    ) -> None:
        """初始化哈希表。

        参数:
            max_size: 桶数量，同时也是最多保存的键值对个数
            hash_func: 把键转换为整数的函数
            key_equal: 判断两个键是否相等的谓词
        """
        self._max_size = check_capacity(max_size, "max_size")
        self._hash_func = hash_func
        self._key_equal = key_equal
        self.buckets: List[SinglyLinkedList] = [
            SinglyLinkedList() for _ in range(self._max_size)
        ]
        self._size = 0

    @property
    def max_size(self) -> int:
        return self._max_size

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size >= self._max_size

    def _bucket(self, key: Any) -> SinglyLinkedList:
        return self.buckets[self._hash_func(key) % self._max_size]

    def _lookup(self, key: Any) -> Tuple[SinglyLinkedList, Optional[HashItem]]:
        bucket = self._bucket(key)
        entry = bucket.find(lambda pair: self._key_equal(pair.key, key))
        return bucket, entry

    def insert(self, key: Any, item: Any) -> bool:
        """插入键值对。

        返回:
            bool: 表已满或键已存在时返回 False
        """
        if self.is_full():
            return False
        bucket, entry = self._lookup(key)
        if entry is not None:
            return False
        bucket.insert(HashItem(key, item))
        self._size += 1
        return True

    def find(self, key: Any) -> Any:
        """根据键获取对应的值，不存在时返回 None。"""
        _, entry = self._lookup(key)
        return None if entry is None else entry.item

    def remove(self, key: Any) -> bool:
        """删除键值对，返回键是否存在。"""
        bucket, entry = self._lookup(key)
        if entry is None:
            return False
        # find() 已把游标停在该元素上
        bucket.remove()
        self._size -= 1
        return True

    def __contains__(self, key: Any) -> bool:
        return self._lookup(key)[1] is not None

    def __iter__(self) -> Iterator[Tuple[Any, Any]]:
        for bucket in self.buckets:
            for entry in bucket:
                yield entry.key, entry.item

    def execute(self, *args, **kwargs) -> dict[Any, Any]:
        """返回当前哈希表中的所有键值对。"""
        return dict(self)
