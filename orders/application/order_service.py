"""
订单应用服务。
协调客户、商品、订单仓储和订单领域服务。
"""
from typing import Any, List

from loguru import logger

from core.domain import generate_id
from core.infrastructure.transaction import TransactionManager
from customers.domain import CustomerRepository
from orders.application.commands import ChangeOrderCustomerCommand, PlaceOrderCommand
from orders.domain import Order, OrderItem, OrderRepository
from orders.domain.services import OrderService
from products.domain import ProductRepository


class OrderApplicationService:
    """
    订单应用服务。
    """

    def __init__(
        self,
        order_service: OrderService,
        order_repository: OrderRepository,
        customer_repository: CustomerRepository,
        product_repository: ProductRepository,
        transaction_manager: TransactionManager
    ):
        """
        初始化订单应用服务。

        Args:
            order_service: 订单领域服务
            order_repository: 订单仓储
            customer_repository: 客户仓储
            product_repository: 商品仓储
            transaction_manager: 事务管理器
        """
        self.order_service = order_service
        self.order_repository = order_repository
        self.customer_repository = customer_repository
        self.product_repository = product_repository
        self.transaction_manager = transaction_manager

    def place_order(self, command: PlaceOrderCommand) -> Order:
        """
        下单: 创建订单并更新客户积分，两者在同一事务中完成。

        Args:
            command: 下单命令

        Returns:
            创建的订单
        """
        try:
            with self.transaction_manager.start():
                customer = self.customer_repository.find(command.customer_id)

                items = []
                for product_id, quantity in command.items:
                    product = self.product_repository.find(product_id)
                    items.append(OrderItem(generate_id(), product.name, product.price, product.id, quantity))

                order = self.order_service.place_order(customer, items)
                self.order_repository.create(order)
                self.customer_repository.update(customer)
        except Exception as e:
            logger.error(f"下单失败: 客户ID={command.customer_id}, 原因: {e}")
            raise

        logger.info(f"下单成功: 订单ID={order.id}, 总额={order.total}")
        return order

    def change_customer(self, command: ChangeOrderCustomerCommand) -> Order:
        """
        更换订单所属客户。

        Args:
            command: 更换订单客户命令

        Returns:
            更新后的订单
        """
        order = self.order_repository.find(command.order_id)
        order.update_customer(command.customer_id)
        self.order_repository.update(order)
        return order

    def get_order(self, order_id: Any) -> Order:
        return self.order_repository.find(order_id)

    def list_orders(self) -> List[Order]:
        return self.order_repository.find_all()
