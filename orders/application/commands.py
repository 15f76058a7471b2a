"""
订单应用服务层的命令对象。
定义用于修改系统状态的命令。
"""
from typing import List, Tuple


class PlaceOrderCommand:
    """下单命令"""

    def __init__(self, customer_id: str, items: List[Tuple[str, int]]):
        """
        初始化下单命令。

        Args:
            customer_id: 客户ID
            items: (商品ID, 数量) 列表
        """
        self.customer_id = customer_id
        self.items = items


class ChangeOrderCustomerCommand:
    """更换订单客户命令"""

    def __init__(self, order_id: str, customer_id: str):
        self.order_id = order_id
        self.customer_id = customer_id
