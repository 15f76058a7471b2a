"""
领域模型包。
提供实体、值对象、聚合根和领域事件等领域驱动设计(DDD)的核心概念。
"""

# 基础类
from core.domain.base import Entity, generate_id
from core.domain.value_objects import ValueObject, quantize_amount
from core.domain.aggregates import AggregateRoot

# 领域事件
from core.domain.events import (
    DomainEvent,
    EventHandler,
    EventDispatcher,
)

# 领域异常
from core.domain.exceptions import (
    DomainException,
    InvalidEntityStateException,
    EntityNotFoundException,
    BusinessRuleViolationException,
    ValidationException,
    PersistenceException,
    HandlerExecutionException,
)

# 仓储接口
from core.domain.repositories import Repository

__all__ = [
    # 基础类
    'Entity',
    'generate_id',
    'ValueObject',
    'quantize_amount',
    'AggregateRoot',

    # 领域事件
    'DomainEvent',
    'EventHandler',
    'EventDispatcher',

    # 领域异常
    'DomainException',
    'InvalidEntityStateException',
    'EntityNotFoundException',
    'BusinessRuleViolationException',
    'ValidationException',
    'PersistenceException',
    'HandlerExecutionException',

    # 仓储接口
    'Repository',
]
