"""
核心领域模型基类模块。
包含Entity基类，用于所有具有唯一标识的领域对象。
"""
from typing import Any
import uuid


def generate_id() -> str:
    """生成全局唯一的字符串标识。"""
    return str(uuid.uuid4())


class Entity:
    """
    实体基类。
    实体是具有唯一标识的领域对象，其相等性通过标识而非属性值判断。
    """
    def __init__(self, id: Any = None):
        """
        初始化实体。

        Args:
            id: 实体标识，如果未提供，将自动生成UUID字符串
        """
        self._id = id if id is not None else generate_id()

    @property
    def id(self) -> Any:
        """实体标识，创建后不可重新分配"""
        return self._id

    def __eq__(self, other: Any) -> bool:
        """
        判断两个实体是否相等，通过比较它们的类型和标识。

        Args:
            other: 另一个实体

        Returns:
            如果两个实体标识相等，则返回True；否则返回False
        """
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
