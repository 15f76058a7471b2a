"""
领域事件模块。
包含DomainEvent基类、EventHandler处理器接口和EventDispatcher事件分发器，
用于领域事件的发布和订阅。
"""
import copy
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple
import uuid

from loguru import logger

from core.domain.exceptions import HandlerExecutionException


class DomainEvent:
    """
    领域事件基类。
    领域事件表示领域模型中发生的重要事件，通常用于跨聚合的业务流程。

    事件数据在创建时深拷贝保存为快照，之后修改源实体不会影响
    已经创建(或已经分发)的事件。
    """

    def __init__(self, event_data: Optional[Dict[str, Any]] = None, name: Optional[str] = None):
        """
        初始化领域事件。
        自动设置事件ID和发生时间。

        Args:
            event_data: 事件数据，将被深拷贝为快照
            name: 事件名称，作为分发键，默认使用事件类名
        """
        self.id = uuid.uuid4()
        self.occurred_on = datetime.now()
        self.name = name or type(self).__name__
        self._event_data = copy.deepcopy(event_data or {})

    @property
    def event_data(self) -> Dict[str, Any]:
        """获取事件数据快照"""
        return self._event_data

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, id={self.id})"


class EventHandler(ABC):
    """
    事件处理器接口。
    处理器只需实现handle方法，副作用(打印、发邮件等)由处理器自己负责。
    """

    @abstractmethod
    def handle(self, event: DomainEvent) -> None:
        """
        处理领域事件。

        Args:
            event: 被分发的领域事件
        """
        pass


class EventDispatcher:
    """
    领域事件分发器。
    维护事件名称到处理器列表的注册表，并同步地把事件分发给处理器。

    分发器需要显式创建并由调用方持有，生命周期和测试隔离由调用方控制。
    注册表没有内部锁，多线程环境下由调用方负责同步。
    """

    def __init__(self):
        # 事件处理器字典，键为事件名称，值为按注册顺序排列的处理器列表
        self._event_handlers: Dict[str, List[EventHandler]] = {}

    @property
    def get_event_handlers(self) -> Dict[str, List[EventHandler]]:
        """获取事件处理器注册表"""
        return self._event_handlers

    def register(self, event_name: str, handler: EventHandler) -> None:
        """
        注册事件处理器。
        同一处理器可以重复注册，每注册一次就会被调用一次。

        Args:
            event_name: 事件名称
            handler: 事件处理器
        """
        if event_name not in self._event_handlers:
            self._event_handlers[event_name] = []
        self._event_handlers[event_name].append(handler)
        logger.debug(f"注册事件处理器: {event_name} -> {type(handler).__name__}")

    def unregister(self, event_name: str, handler: EventHandler) -> None:
        """
        取消注册事件处理器。
        只移除第一个相等的处理器；事件名称或处理器不存在时不做任何操作。

        Args:
            event_name: 事件名称
            handler: 事件处理器
        """
        handlers = self._event_handlers.get(event_name)
        if not handlers or handler not in handlers:
            return

        handlers.remove(handler)
        if not handlers:
            del self._event_handlers[event_name]
        logger.debug(f"取消注册事件处理器: {event_name} -> {type(handler).__name__}")

    def unregister_all(self) -> None:
        """
        清除所有事件处理器。
        """
        self._event_handlers.clear()
        logger.debug("已清除所有事件处理器")

    def notify(self, event: DomainEvent) -> None:
        """
        分发事件。
        按注册顺序同步调用该事件名称下的所有处理器。
        处理器抛出的异常不会被捕获，后续处理器将不再被调用。

        Args:
            event: 要分发的事件
        """
        handlers = self._event_handlers.get(event.name)
        if not handlers:
            return

        logger.debug(f"分发事件 {event.name} 到 {len(handlers)} 个处理器")
        # 遍历副本，处理器在执行中修改注册表不影响本次分发
        for handler in list(handlers):
            handler.handle(event)

    def notify_isolated(self, event: DomainEvent) -> None:
        """
        分发事件，处理器之间相互隔离。
        每个处理器都会被调用；全部调用结束后，如果有处理器失败，
        抛出包含所有失败信息的HandlerExecutionException。

        Args:
            event: 要分发的事件

        Raises:
            HandlerExecutionException: 至少一个处理器执行失败
        """
        handlers = self._event_handlers.get(event.name)
        if not handlers:
            return

        errors: List[Tuple[EventHandler, Exception]] = []
        for handler in list(handlers):
            try:
                handler.handle(event)
            except Exception as e:
                logger.error(f"事件处理器 {type(handler).__name__} 处理 {event.name} 失败: {e}")
                errors.append((handler, e))

        if errors:
            raise HandlerExecutionException(event.name, errors)
