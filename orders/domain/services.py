"""
订单领域服务。
实现跨客户和订单的下单业务逻辑。
"""
from decimal import Decimal
from typing import Callable, Iterable, List, Optional

from core.domain import BusinessRuleViolationException, generate_id, quantize_amount
from customers.domain import Customer
from orders.domain import config
from orders.domain.aggregates import Order
from orders.domain.entities import OrderItem


class OrderService:
    """
    订单领域服务。
    """

    def __init__(
        self,
        id_generator: Callable[[], str] = generate_id,
        reward_points_rate: Optional[Decimal] = None
    ):
        """
        初始化订单领域服务。

        Args:
            id_generator: 订单ID生成器
            reward_points_rate: 积分比例，默认读取订单模块配置
        """
        self.id_generator = id_generator
        self.reward_points_rate = (
            reward_points_rate if reward_points_rate is not None else config.REWARD_POINTS_RATE
        )

    def place_order(self, customer: Customer, items: List[OrderItem]) -> Order:
        """
        为客户下单，并按订单总额给客户增加积分。

        Args:
            customer: 下单客户
            items: 订单项

        Returns:
            新建的订单

        Raises:
            BusinessRuleViolationException: 没有订单项
        """
        if not items:
            raise BusinessRuleViolationException("order_requires_items", "订单至少需要一个订单项")

        order = Order(self.id_generator(), customer.id, items)
        # 积分与金额同精度，四舍五入到两位小数
        customer.add_reward_points(quantize_amount(order.total * self.reward_points_rate))
        return order

    def total_operation(self, orders: Iterable[Order]) -> Decimal:
        """计算多个订单的总额"""
        return sum((order.total for order in orders), Decimal("0"))
