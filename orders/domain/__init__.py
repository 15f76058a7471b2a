"""
订单领域模型包。
提供订单项实体、订单聚合根、订单领域服务和仓储接口。
"""

# 实体
from orders.domain.entities import OrderItem

# 聚合根
from orders.domain.aggregates import Order

# 仓储接口
from orders.domain.repositories import OrderRepository

__all__ = [
    'OrderItem',
    'Order',
    'OrderRepository',
]
