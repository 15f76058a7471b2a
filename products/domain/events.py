"""
商品领域模型中的事件。
"""
from typing import Any

from core.domain.events import DomainEvent


class ProductCreatedEvent(DomainEvent):
    """商品创建事件"""

    def __init__(self, product: Any):
        """
        初始化商品创建事件。

        Args:
            product: 刚创建的商品
        """
        super().__init__({
            "id": product.id,
            "name": product.name,
            "price": product.price,
        })
