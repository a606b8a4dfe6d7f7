"""数据结构实现中共用的辅助函数。

包括元素交换以及顶点编号的合法性检查。
"""
from typing import Any, List

from .exceptions import CapacityError, InvalidVertexError


def swap(items: List[Any], i: int, j: int) -> None:
    """在列表中原地交换两个元素的位置。

    参数:
        items: 要操作的列表
        i: 第一个元素的索引
        j: 第二个元素的索引

    时间复杂度: O(1)

    示例:
        >>> arr = [1, 2, 3]
        >>> swap(arr, 0, 2)
        >>> print(arr)  # [3, 2, 1]
    """
    items[i], items[j] = items[j], items[i]


def check_vertex_id(vertex: Any, name: str = "vertex") -> int:
    """校验顶点编号为非负整数并原样返回。

    超出容量属于“容量越界”，由各数据结构自行以返回值报告；
    这里只拒绝负数、布尔值以及非整数这类前置条件错误。

    异常:
        InvalidVertexError: 编号不是非负整数
    """
    if isinstance(vertex, bool) or not isinstance(vertex, int):
        raise InvalidVertexError(f"{name} must be an int, got {vertex!r}")
    if vertex < 0:
        raise InvalidVertexError(f"{name} must be non-negative, got {vertex}")
    return vertex


def check_capacity(capacity: Any, name: str = "capacity") -> int:
    """校验容量为正整数。"""
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise CapacityError(f"{name} must be an int, got {capacity!r}")
    if capacity <= 0:
        raise CapacityError(f"{name} must be positive, got {capacity}")
    return capacity
