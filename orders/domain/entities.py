"""
订单领域模型中的实体。
"""
from decimal import Decimal
from typing import Any, Dict

from core.domain import Entity, ValidationException, quantize_amount


class OrderItem(Entity):
    """
    订单项实体。
    只引用商品ID，不持有商品；数量是否大于0由所属订单校验。
    """

    def __init__(self, id: Any, name: str, price: Any, product_id: Any, quantity: int):
        """
        初始化订单项。

        Args:
            id: 订单项ID
            name: 商品名称
            price: 单价，不能为负数，保留两位小数
            product_id: 商品ID
            quantity: 数量
        """
        super().__init__(id)
        self._name = name
        self._price = quantize_amount(price)
        self._product_id = product_id
        self._quantity = quantity
        if self._price < 0:
            raise ValidationException("price", "单价不能为负数")

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> Decimal:
        return self._price

    @property
    def product_id(self) -> Any:
        return self._product_id

    @property
    def quantity(self) -> int:
        return self._quantity

    @property
    def total(self) -> Decimal:
        """订单项小计: 单价 × 数量"""
        return self._price * self._quantity

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self._name,
            "price": str(self._price),
            "product_id": self._product_id,
            "quantity": self._quantity,
            "total": str(self.total),
        }
