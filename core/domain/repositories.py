"""
仓储接口模块。
定义仓储接口，用于持久化和检索领域对象。
"""
from abc import ABC, abstractmethod
from typing import Any, Generic, List, TypeVar

T = TypeVar('T')


class Repository(Generic[T], ABC):
    """
    仓储接口。
    定义了所有仓储必须实现的基本操作。
    """

    @abstractmethod
    def create(self, entity: T) -> None:
        """
        持久化一个新的实体。

        Args:
            entity: 要创建的实体
        """
        pass

    @abstractmethod
    def update(self, entity: T) -> None:
        """
        更新已存在的实体。

        Args:
            entity: 要更新的实体
        """
        pass

    @abstractmethod
    def find(self, id: Any) -> T:
        """
        根据ID获取实体。

        Args:
            id: 实体ID

        Returns:
            找到的实体

        Raises:
            EntityNotFoundException: 实体不存在
        """
        pass

    @abstractmethod
    def find_all(self) -> List[T]:
        """
        获取所有实体。

        Returns:
            实体列表
        """
        pass
