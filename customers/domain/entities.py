"""
客户领域模型中的实体。
"""
from decimal import Decimal
from typing import Any, Dict, Optional

from core.domain import AggregateRoot, InvalidEntityStateException, ValidationException, quantize_amount
from customers.domain.events import CustomerAddressChangedEvent
from customers.domain.value_objects import Address


class Customer(AggregateRoot):
    """
    客户聚合根。
    没有地址的客户不能被激活，积分只能增加。
    """

    def __init__(
        self,
        id: Any = None,
        name: str = "",
        address: Optional[Address] = None,
        reward_points: Any = 0,
        active: bool = False,
    ):
        """
        初始化客户。

        Args:
            id: 客户ID，如果未提供则自动生成
            name: 客户名称
            address: 客户地址
            reward_points: 初始积分
            active: 是否激活

        Raises:
            ValidationException: ID或名称为空，或积分为负数
            InvalidEntityStateException: 要求激活但没有地址
        """
        super().__init__(id)
        self._name = name
        self._address = address
        self._reward_points = quantize_amount(reward_points)
        self._active = False
        self.validate()
        if active:
            self.activate()

    def validate(self) -> None:
        if not self.id:
            raise ValidationException("id", "客户ID不能为空")
        if not self._name:
            raise ValidationException("name", "客户名称不能为空")
        if self._reward_points < 0:
            raise ValidationException("reward_points", "积分不能为负数")

    @property
    def name(self) -> str:
        return self._name

    @property
    def address(self) -> Optional[Address]:
        return self._address

    @property
    def reward_points(self) -> Decimal:
        return self._reward_points

    def is_active(self) -> bool:
        return self._active

    def change_name(self, name: str) -> None:
        if not name:
            raise ValidationException("name", "客户名称不能为空")
        self._name = name

    def change_address(self, address: Address) -> None:
        """
        更换客户地址，并记录地址变更事件。

        Args:
            address: 新地址
        """
        if address is None:
            raise ValidationException("address", "地址不能为空")
        self._address = address
        self.add_domain_event(CustomerAddressChangedEvent(self))

    def add_reward_points(self, points: Any) -> None:
        """
        增加客户积分。

        Args:
            points: 增加的积分，不能为负数，四舍五入到两位小数
        """
        points = quantize_amount(points)
        if points < 0:
            raise ValidationException("reward_points", "增加的积分不能为负数")
        self._reward_points += points

    def activate(self) -> None:
        """
        激活客户。

        Raises:
            InvalidEntityStateException: 客户没有地址
        """
        if self._address is None:
            raise InvalidEntityStateException("客户", "激活客户前必须设置地址")
        self._active = True

    def deactivate(self) -> None:
        self._active = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self._name,
            "address": self._address.to_dict() if self._address else None,
            "reward_points": str(self._reward_points),
            "active": self._active,
        }
