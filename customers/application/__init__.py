"""
客户应用服务层包。
提供客户相关的应用服务和命令。
"""

# 命令
from customers.application.commands import CreateCustomerCommand, ChangeCustomerAddressCommand

# 应用服务
from customers.application.customer_service import CustomerApplicationService

__all__ = [
    'CreateCustomerCommand',
    'ChangeCustomerAddressCommand',
    'CustomerApplicationService',
]
