"""
客户领域模型中的事件。
事件数据是客户在事件创建时刻的快照。
"""
from typing import Any, Dict

from core.domain.events import DomainEvent


def _customer_snapshot(customer: Any) -> Dict[str, Any]:
    return {
        "id": customer.id,
        "name": customer.name,
        "address": customer.address,
        "reward_points": customer.reward_points,
        "active": customer.is_active(),
    }


class CustomerCreatedEvent(DomainEvent):
    """客户创建事件"""

    def __init__(self, customer: Any):
        """
        初始化客户创建事件。

        Args:
            customer: 刚创建的客户
        """
        super().__init__(_customer_snapshot(customer))


class CustomerAddressChangedEvent(DomainEvent):
    """客户地址变更事件"""

    def __init__(self, customer: Any):
        """
        初始化客户地址变更事件。

        Args:
            customer: 已变更地址的客户
        """
        super().__init__(_customer_snapshot(customer))
