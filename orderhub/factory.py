"""
应用工厂。
负责创建和管理仓储、应用服务以及事件分发器实例。
"""
from typing import Optional

from core.domain import EventDispatcher
from core.infrastructure.transaction import DjangoTransactionManager, TransactionManager

from customers.application import CustomerApplicationService
from customers.domain import (
    CustomerAddressChangedEvent,
    CustomerCreatedEvent,
    CustomerRepository,
    NotifyWhenCustomerAddressChangedHandler,
    NotifyWhenCustomerIsCreated1Handler,
    NotifyWhenCustomerIsCreated2Handler,
)
from customers.infrastructure.repositories.django_customer_repository import DjangoCustomerRepository
from orders.application import OrderApplicationService
from orders.domain import OrderRepository
from orders.domain.services import OrderService
from orders.infrastructure.repositories.django_order_repository import DjangoOrderRepository
from products.application import ProductApplicationService
from products.domain import ProductCreatedEvent, ProductRepository, SendEmailWhenProductIsCreatedHandler
from products.infrastructure.repositories.django_product_repository import DjangoProductRepository


class ApplicationFactory:
    """
    应用工厂类。
    同一个工厂实例创建的服务共享同一个事件分发器和事务管理器。
    """

    def __init__(
        self,
        transaction_manager: Optional[TransactionManager] = None,
        event_dispatcher: Optional[EventDispatcher] = None
    ):
        """
        初始化应用工厂。

        Args:
            transaction_manager: 事务管理器，默认使用Django事务
            event_dispatcher: 事件分发器，默认创建并注册内置处理器
        """
        self.transaction_manager = transaction_manager or DjangoTransactionManager()
        self._event_dispatcher = event_dispatcher

        # 存储已创建的实例
        self._customer_repository = None
        self._product_repository = None
        self._order_repository = None

    def create_event_dispatcher(self) -> EventDispatcher:
        """
        创建事件分发器，并注册内置的事件处理器。

        Returns:
            事件分发器实例
        """
        if self._event_dispatcher is None:
            dispatcher = EventDispatcher()
            dispatcher.register(CustomerCreatedEvent.__name__, NotifyWhenCustomerIsCreated1Handler())
            dispatcher.register(CustomerCreatedEvent.__name__, NotifyWhenCustomerIsCreated2Handler())
            dispatcher.register(CustomerAddressChangedEvent.__name__, NotifyWhenCustomerAddressChangedHandler())
            dispatcher.register(ProductCreatedEvent.__name__, SendEmailWhenProductIsCreatedHandler())
            self._event_dispatcher = dispatcher

        return self._event_dispatcher

    def create_customer_repository(self) -> CustomerRepository:
        if not self._customer_repository:
            self._customer_repository = DjangoCustomerRepository()
        return self._customer_repository

    def create_product_repository(self) -> ProductRepository:
        if not self._product_repository:
            self._product_repository = DjangoProductRepository()
        return self._product_repository

    def create_order_repository(self) -> OrderRepository:
        if not self._order_repository:
            self._order_repository = DjangoOrderRepository(self.transaction_manager)
        return self._order_repository

    def create_customer_service(self) -> CustomerApplicationService:
        return CustomerApplicationService(
            customer_repository=self.create_customer_repository(),
            transaction_manager=self.transaction_manager,
            event_dispatcher=self.create_event_dispatcher()
        )

    def create_product_service(self) -> ProductApplicationService:
        return ProductApplicationService(
            product_repository=self.create_product_repository(),
            transaction_manager=self.transaction_manager,
            event_dispatcher=self.create_event_dispatcher()
        )

    def create_order_service(self, order_service: Optional[OrderService] = None) -> OrderApplicationService:
        """
        创建订单应用服务。

        Args:
            order_service: 订单领域服务，默认使用配置中的积分比例

        Returns:
            订单应用服务实例
        """
        return OrderApplicationService(
            order_service=order_service or OrderService(),
            order_repository=self.create_order_repository(),
            customer_repository=self.create_customer_repository(),
            product_repository=self.create_product_repository(),
            transaction_manager=self.transaction_manager
        )
