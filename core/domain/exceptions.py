"""
领域异常模块。
包含领域模型中使用的各种异常类。
"""
from typing import Any, List, Optional, Tuple


class DomainException(Exception):
    """
    领域异常基类。
    所有领域模型中的异常都应继承自此类。
    """

    def __init__(self, message: str):
        """
        初始化领域异常。

        Args:
            message: 异常消息
        """
        self.message = message
        super().__init__(self.message)


class InvalidEntityStateException(DomainException):
    """
    实体状态无效异常。
    当实体处于无效状态时抛出。
    """

    def __init__(self, entity_name: str, reason: str):
        """
        初始化实体状态无效异常。

        Args:
            entity_name: 实体名称
            reason: 无效原因
        """
        message = f"{entity_name}处于无效状态: {reason}"
        super().__init__(message)
        self.entity_name = entity_name
        self.reason = reason


class EntityNotFoundException(DomainException):
    """
    实体未找到异常。
    当请求的实体不存在时抛出。
    """

    def __init__(self, entity_name: str, entity_id: Any):
        """
        初始化实体未找到异常。

        Args:
            entity_name: 实体名称
            entity_id: 实体ID
        """
        message = f"无法找到{entity_name}: ID={entity_id}"
        super().__init__(message)
        self.entity_name = entity_name
        self.entity_id = entity_id


class BusinessRuleViolationException(DomainException):
    """
    业务规则违反异常。
    当违反业务规则时抛出。
    """

    def __init__(self, rule_name: str, message: str):
        """
        初始化业务规则违反异常。

        Args:
            rule_name: 规则名称
            message: 异常消息
        """
        full_message = f"违反业务规则 '{rule_name}': {message}"
        super().__init__(full_message)
        self.rule_name = rule_name


class ValidationException(DomainException):
    """
    数据验证异常。
    当数据验证失败时抛出，field_name标识违反的规则。
    """

    def __init__(self, field_name: Optional[str] = None, message: str = "数据验证失败"):
        """
        初始化数据验证异常。

        Args:
            field_name: 字段名称
            message: 异常消息
        """
        if field_name:
            full_message = f"字段'{field_name}'验证失败: {message}"
        else:
            full_message = message
        super().__init__(full_message)
        self.field_name = field_name


class PersistenceException(DomainException):
    """
    持久化异常。
    仓储操作失败时抛出，不包含底层存储错误的细节。
    """

    def __init__(self, entity_name: str, operation: str):
        """
        初始化持久化异常。

        Args:
            entity_name: 实体名称
            operation: 失败的操作名称
        """
        message = f"{operation}{entity_name}失败"
        super().__init__(message)
        self.entity_name = entity_name
        self.operation = operation


class HandlerExecutionException(DomainException):
    """
    事件处理器执行异常。
    隔离分发模式下，汇总所有失败的处理器及其异常。
    """

    def __init__(self, event_name: str, errors: List[Tuple[Any, Exception]]):
        """
        初始化事件处理器执行异常。

        Args:
            event_name: 事件名称
            errors: (处理器, 异常) 列表
        """
        handler_names = ", ".join(type(handler).__name__ for handler, _ in errors)
        message = f"事件'{event_name}'有{len(errors)}个处理器执行失败: {handler_names}"
        super().__init__(message)
        self.event_name = event_name
        self.errors = errors
