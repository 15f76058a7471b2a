"""
订单应用服务层包。
提供订单相关的应用服务和命令。
"""

# 命令
from orders.application.commands import PlaceOrderCommand, ChangeOrderCustomerCommand

# 应用服务
from orders.application.order_service import OrderApplicationService

__all__ = [
    'PlaceOrderCommand',
    'ChangeOrderCustomerCommand',
    'OrderApplicationService',
]
