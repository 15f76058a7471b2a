"""
商品应用服务层的命令对象。
定义用于修改系统状态的命令。
"""
from decimal import Decimal
from typing import Optional


class CreateProductCommand:
    """创建商品命令"""

    def __init__(self, name: str, price: Decimal, id: Optional[str] = None):
        """
        初始化创建商品命令。

        Args:
            name: 商品名称
            price: 商品价格
            id: 商品ID，不提供时自动生成
        """
        self.name = name
        self.price = price
        self.id = id
