"""
客户应用服务。
协调客户仓储、事务管理器和事件分发器。
"""
from loguru import logger

from core.domain import AggregateRoot, EventDispatcher
from core.infrastructure.transaction import TransactionManager
from customers.application.commands import ChangeCustomerAddressCommand, CreateCustomerCommand
from customers.domain import Address, Customer, CustomerCreatedEvent, CustomerRepository


class CustomerApplicationService:
    """
    客户应用服务。
    持久化成功后才分发聚合上记录的领域事件。
    """

    def __init__(
        self,
        customer_repository: CustomerRepository,
        transaction_manager: TransactionManager,
        event_dispatcher: EventDispatcher
    ):
        """
        初始化客户应用服务。

        Args:
            customer_repository: 客户仓储
            transaction_manager: 事务管理器
            event_dispatcher: 事件分发器
        """
        self.customer_repository = customer_repository
        self.transaction_manager = transaction_manager
        self.event_dispatcher = event_dispatcher

    def _publish_events(self, aggregate: AggregateRoot) -> None:
        for event in aggregate.clear_domain_events():
            self.event_dispatcher.notify(event)

    def create_customer(self, command: CreateCustomerCommand) -> Customer:
        """
        创建客户并分发客户创建事件。

        Args:
            command: 创建客户命令

        Returns:
            创建的客户
        """
        address = Address(**command.address) if command.address else None
        customer = Customer(
            id=command.id,
            name=command.name,
            address=address,
            reward_points=command.reward_points,
            active=command.activate,
        )
        customer.add_domain_event(CustomerCreatedEvent(customer))

        try:
            with self.transaction_manager.start():
                self.customer_repository.create(customer)
        except Exception as e:
            logger.error(f"创建客户失败: {e}")
            raise

        self._publish_events(customer)
        return customer

    def change_address(self, command: ChangeCustomerAddressCommand) -> Customer:
        """
        变更客户地址并分发地址变更事件。

        Args:
            command: 变更客户地址命令

        Returns:
            变更后的客户
        """
        with self.transaction_manager.start():
            customer = self.customer_repository.find(command.customer_id)
            customer.change_address(Address(**command.address))
            self.customer_repository.update(customer)

        self._publish_events(customer)
        return customer
