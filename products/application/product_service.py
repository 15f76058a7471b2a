"""
商品应用服务。
定义商品相关的应用层服务，协调仓储、事务和事件分发。
"""
from typing import Any, List

from loguru import logger

from core.domain import EventDispatcher
from core.infrastructure.transaction import TransactionManager
from products.application.commands import CreateProductCommand
from products.domain import Product, ProductCreatedEvent, ProductRepository


class ProductApplicationService:
    """
    商品应用服务。
    """

    def __init__(
        self,
        product_repository: ProductRepository,
        transaction_manager: TransactionManager,
        event_dispatcher: EventDispatcher
    ):
        """
        初始化商品应用服务。

        Args:
            product_repository: 商品仓储
            transaction_manager: 事务管理器
            event_dispatcher: 事件分发器
        """
        self.product_repository = product_repository
        self.transaction_manager = transaction_manager
        self.event_dispatcher = event_dispatcher

    def create_product(self, command: CreateProductCommand) -> Product:
        """
        创建商品，持久化后分发商品创建事件。

        Args:
            command: 创建商品命令

        Returns:
            创建的商品
        """
        product = Product(id=command.id, name=command.name, price=command.price)

        try:
            with self.transaction_manager.start():
                self.product_repository.create(product)
        except Exception as e:
            logger.error(f"创建商品失败: {e}")
            raise

        self.event_dispatcher.notify(ProductCreatedEvent(product))
        return product

    def get_product(self, product_id: Any) -> Product:
        return self.product_repository.find(product_id)

    def list_products(self) -> List[Product]:
        return self.product_repository.find_all()
