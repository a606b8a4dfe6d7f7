from abc import ABC, abstractmethod
from typing import Any


class Algorithm(ABC):
    """所有算法与数据结构的基类。

    定义统一的 ``execute`` 接口：算法类返回计算结果，
    数据结构类返回其当前内容的快照，便于调试和测试。

    子类必须实现:
        execute: 执行算法（或生成快照）并返回结果的抽象方法
    """

    @abstractmethod
    def execute(self, *args, **kwargs) -> Any:
        """执行算法并返回结果。

        参数:
            *args: 位置参数，具体参数取决于实现
            **kwargs: 关键字参数，具体参数取决于实现

        返回:
            Any: 执行结果，类型取决于具体实现

        异常:
            NotImplementedError: 如果子类没有实现此方法
        """
        raise NotImplementedError
