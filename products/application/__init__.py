"""
商品应用服务层包。
提供商品相关的应用服务和命令。
"""

# 命令
from products.application.commands import CreateProductCommand

# 应用服务
from products.application.product_service import ProductApplicationService

__all__ = [
    'CreateProductCommand',
    'ProductApplicationService',
]
