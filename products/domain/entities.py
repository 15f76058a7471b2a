"""
商品领域模型中的实体。
"""
from decimal import Decimal
from typing import Any, Dict

from core.domain import Entity, ValidationException, quantize_amount


class Product(Entity):
    """
    商品实体。
    创建后不可修改。
    """

    def __init__(self, id: Any = None, name: str = "", price: Any = 0):
        """
        初始化商品实体。

        Args:
            id: 商品ID，如果未提供则自动生成
            name: 商品名称
            price: 商品价格，不能为负数，保留两位小数

        Raises:
            ValidationException: 名称为空或价格为负数
        """
        super().__init__(id)
        self._name = name
        self._price = quantize_amount(price)
        self.validate()

    def validate(self) -> None:
        if not self.id:
            raise ValidationException("id", "商品ID不能为空")
        if not self._name:
            raise ValidationException("name", "商品名称不能为空")
        if self._price < 0:
            raise ValidationException("price", "商品价格不能为负数")

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> Decimal:
        return self._price

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self._name,
            "price": str(self._price),
        }
