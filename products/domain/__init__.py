"""
商品领域模型包。
提供商品相关的实体、事件、事件处理器和仓储接口。
"""

# 实体
from products.domain.entities import Product

# 领域事件
from products.domain.events import ProductCreatedEvent

# 事件处理器
from products.domain.event_handlers import SendEmailWhenProductIsCreatedHandler

# 仓储接口
from products.domain.repositories import ProductRepository

__all__ = [
    'Product',
    'ProductCreatedEvent',
    'SendEmailWhenProductIsCreatedHandler',
    'ProductRepository',
]
