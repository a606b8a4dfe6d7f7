"""mstgraph 项目级异常。

错误分类:
    - 容量越界（顶点编号 >= 容量、堆已满等）: 以返回值 ``False`` 报告，不抛异常
    - 缺失结果（未放入集合的元素、空堆、空队列）: 返回 ``None``
    - 前置条件错误（负数编号、空协作者、非法容量）: 抛出下面定义的异常
    - Kruskal 初始化失败: 抛出 ``KruskalError``，整个算法中止
"""

from __future__ import annotations

import logging
from typing import Optional


class MSTGraphError(Exception):
    """mstgraph 中所有自定义异常的基类。"""


class InvalidVertexError(MSTGraphError, ValueError):
    """顶点编号不是非负整数，或构成自环等非法边。"""


class CapacityError(MSTGraphError, ValueError):
    """容量参数非法（非整数或不为正）。"""


class InvalidArgumentError(MSTGraphError, ValueError):
    """参数取值不在允许的范围内（例如未知的堆分配模式）。"""


class InvalidCollaboratorError(MSTGraphError, TypeError):
    """协作对象缺失或类型不对（例如 graph 为 None、relation 不可调用）。"""


class KruskalError(MSTGraphError, RuntimeError):
    """Kruskal 算法在初始化或建堆阶段失败，不保留任何部分结果。"""


class ConfigurationError(MSTGraphError):
    """配置文件或环境变量中的取值非法。"""


class InputFormatError(MSTGraphError, ValueError):
    """文本输入格式错误。

    属性:
        line_number: 出错行号（从 1 开始）
        line: 出错行的原始内容
    """

    def __init__(self, message: str, line_number: int = 0, line: str = "") -> None:
        super().__init__(message)
        self.line_number = line_number
        self.line = line

    def __str__(self) -> str:
        base = super().__str__()
        if self.line_number:
            return f"line {self.line_number}: {base}: {self.line.rstrip()!r}"
        return base


def log_and_format_exception(
    exc: Exception, logger: Optional[logging.Logger] = None
) -> dict[str, str]:
    """记录异常日志并返回标准化的错误表示。

    参数:
        exc: 要处理的异常对象
        logger: 可选的日志记录器，如果未提供则使用本模块的记录器

    返回:
        dict[str, str]: ``error_type`` 为异常类名，``message`` 为异常消息
    """
    log = logger or logging.getLogger(__name__)
    log.error("%s: %s", type(exc).__name__, exc)
    return {
        "error_type": type(exc).__name__,
        "message": str(exc),
    }
