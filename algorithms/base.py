from abc import ABC, abstractmethod
from typing import Any, Dict


class Algorithm(ABC):
    """所有算法与数据结构的基类。

    这是一个抽象基类，定义了通用的 execute 接口。

    子类必须实现:
        execute: 执行算法并返回结果的抽象方法
    """

    @abstractmethod
    def execute(self, *args, **kwargs) -> Any:
        """执行算法并返回结果。

        参数:
            *args: 位置参数，具体参数取决于实现
            **kwargs: 关键字参数，具体参数取决于实现

        返回:
            Any: 执行的结果，类型取决于具体实现
        """
        raise NotImplementedError


class DataStructure(Algorithm):
    """集合语义的数据结构接口。

    元素本身既是存储的值也是查找的键。所有失败情况（重复插入、
    元素不存在、表已满）都通过返回 False 表示，而不是抛出异常。

    子类必须实现:
        insert, find, remove, clear 以及 count 属性
    """

    @abstractmethod
    def insert(self, item: Any) -> bool:
        """插入元素，重复元素返回 False。"""
        raise NotImplementedError

    @abstractmethod
    def find(self, item: Any) -> bool:
        """查找元素是否存在。"""
        raise NotImplementedError

    @abstractmethod
    def remove(self, item: Any) -> bool:
        """删除元素，元素不存在时返回 False。"""
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        """清空所有元素。"""
        raise NotImplementedError

    @property
    @abstractmethod
    def count(self) -> int:
        """当前存储的元素数量。"""
        raise NotImplementedError

    @property
    def is_empty(self) -> bool:
        return self.count == 0

    def __len__(self) -> int:
        return self.count

    def execute(self, *args, **kwargs) -> Dict[str, Any]:
        """返回当前结构的统计快照。"""
        return {"count": self.count}
