"""
订单领域模型中的聚合根。
订单与其订单项构成一个一致性边界。
"""
from decimal import Decimal
from typing import Any, Dict, Iterable, List

from core.domain import AggregateRoot, ValidationException
from orders.domain.entities import OrderItem


class Order(AggregateRoot):
    """
    订单聚合根。
    不变性规则在构造时和每次修改前检查，按以下顺序，第一个违反的规则生效:
    ID非空 → 客户ID非空 → 至少一个订单项 → 每个订单项数量大于0。
    """

    def __init__(self, id: Any, customer_id: Any, items: Iterable[OrderItem]):
        """
        初始化订单聚合根。

        Args:
            id: 订单ID
            customer_id: 客户ID
            items: 订单项

        Raises:
            ValidationException: 违反任一不变性规则
        """
        # 订单ID由调用方提供，不使用实体的自动生成
        if id is None:
            raise ValidationException("id", "订单ID不能为空")
        super().__init__(id)
        self._customer_id = customer_id
        self._items: List[OrderItem] = list(items or [])
        self.validate()

    @property
    def customer_id(self) -> Any:
        return self._customer_id

    @property
    def items(self) -> List[OrderItem]:
        """订单项副本，修改订单项需通过add_order_item"""
        return list(self._items)

    @property
    def total(self) -> Decimal:
        """订单总额，每次读取时根据当前订单项重新计算"""
        return sum((item.total for item in self._items), Decimal("0"))

    def validate(self) -> None:
        """
        检查订单的不变性规则。

        Raises:
            ValidationException: field_name标识违反的规则
        """
        if not self.id:
            raise ValidationException("id", "订单ID不能为空")
        if not self._customer_id:
            raise ValidationException("customer_id", "客户ID不能为空")
        if not self._items:
            raise ValidationException("items", "订单至少需要一个订单项")
        for item in self._items:
            self._check_quantity(item)

    @staticmethod
    def _check_quantity(item: OrderItem) -> None:
        if item.quantity is None or item.quantity <= 0:
            raise ValidationException("quantity", f"订单项 {item.id} 的数量必须大于0")

    def update_customer(self, customer_id: Any) -> None:
        """
        更换订单所属客户。
        不检查客户是否存在，由存储层的外键约束保证。

        Args:
            customer_id: 新的客户ID
        """
        if not customer_id:
            raise ValidationException("customer_id", "客户ID不能为空")
        self._customer_id = customer_id

    def add_order_item(self, item: OrderItem) -> None:
        """
        添加订单项，数量不合法时在修改前失败。

        Args:
            item: 订单项
        """
        self._check_quantity(item)
        self._items.append(item)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "customer_id": self._customer_id,
            "items": [item.to_dict() for item in self._items],
            "total": str(self.total),
        }
