"""
事务管理器模块。
提供事务控制的接口和实现。
"""
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Generator, Optional

from django.db import transaction as django_transaction
from loguru import logger


class TransactionManager(ABC):
    """
    事务管理器接口。
    定义开启和回滚事务的抽象方法，提交由start的作用域正常结束完成。
    """

    @abstractmethod
    @contextmanager
    def start(self) -> Generator[None, None, None]:
        """
        开启一个事务。
        返回一个上下文管理器，作用域正常结束时提交，抛出异常时回滚。

        Yields:
            None
        """
        pass

    @abstractmethod
    def rollback(self) -> None:
        """
        回滚当前事务。
        """
        pass


class DjangoTransactionManager(TransactionManager):
    """
    基于Django的事务管理器实现。
    使用Django的事务机制来管理事务，嵌套调用时退化为保存点。
    """

    def __init__(self, using: Optional[str] = None):
        """
        初始化Django事务管理器。

        Args:
            using: 数据库别名，默认使用default数据库
        """
        self.using = using

    @contextmanager
    def start(self) -> Generator[None, None, None]:
        """
        使用Django的事务机制开启一个事务。

        Yields:
            None
        """
        try:
            with django_transaction.atomic(using=self.using):
                logger.debug("事务已开启")
                yield
            logger.debug("事务已提交")
        except Exception as e:
            logger.error(f"事务回滚: {e}")
            raise

    def rollback(self) -> None:
        """
        回滚当前事务。
        标记当前atomic块需要回滚，块结束时Django执行回滚。
        """
        logger.debug("显式回滚事务")
        django_transaction.set_rollback(True, using=self.using)


class NoOpTransactionManager(TransactionManager):
    """
    空操作事务管理器。
    用于单元测试或不需要事务的场景。
    """

    @contextmanager
    def start(self) -> Generator[None, None, None]:
        try:
            logger.debug("模拟事务已开启")
            yield
            logger.debug("模拟事务已提交")
        except Exception:
            logger.debug("模拟事务已回滚")
            raise

    def rollback(self) -> None:
        logger.debug("模拟回滚事务")
