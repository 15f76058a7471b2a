"""
客户应用服务层的命令对象。
定义用于修改系统状态的命令。
"""
from typing import Any, Dict, Optional


class CreateCustomerCommand:
    """创建客户命令"""

    def __init__(
        self,
        name: str,
        address: Optional[Dict[str, Any]] = None,
        reward_points: Any = 0,
        activate: bool = False,
        id: Optional[str] = None
    ):
        """
        初始化创建客户命令。

        Args:
            name: 客户名称
            address: 地址字典，包含street、number、zip_code、city
            reward_points: 初始积分
            activate: 创建后是否立即激活
            id: 客户ID，不提供时自动生成
        """
        self.name = name
        self.address = address
        self.reward_points = reward_points
        self.activate = activate
        self.id = id


class ChangeCustomerAddressCommand:
    """变更客户地址命令"""

    def __init__(self, customer_id: str, address: Dict[str, Any]):
        self.customer_id = customer_id
        self.address = address
