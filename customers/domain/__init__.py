"""
客户领域模型包。
提供客户相关的实体、值对象、事件、事件处理器和仓储接口。
"""

# 值对象
from customers.domain.value_objects import Address

# 实体
from customers.domain.entities import Customer

# 领域事件
from customers.domain.events import CustomerCreatedEvent, CustomerAddressChangedEvent

# 事件处理器
from customers.domain.event_handlers import (
    NotifyWhenCustomerIsCreated1Handler,
    NotifyWhenCustomerIsCreated2Handler,
    NotifyWhenCustomerAddressChangedHandler,
)

# 仓储接口
from customers.domain.repositories import CustomerRepository

__all__ = [
    'Address',
    'Customer',
    'CustomerCreatedEvent',
    'CustomerAddressChangedEvent',
    'NotifyWhenCustomerIsCreated1Handler',
    'NotifyWhenCustomerIsCreated2Handler',
    'NotifyWhenCustomerAddressChangedHandler',
    'CustomerRepository',
]
