"""
订单仓储的Django实现。
订单头和订单项作为一个聚合整体读写。
"""
from typing import Any, List, Optional

from django.db import DEFAULT_DB_ALIAS, connections, transaction
from loguru import logger

from core.domain import EntityNotFoundException, PersistenceException
from core.infrastructure.transaction import DjangoTransactionManager, TransactionManager
from orders.domain import Order, OrderItem, OrderRepository
from orders.infrastructure.models.order_models import (
    Order as OrderModel,
    OrderItem as OrderItemModel
)


class DjangoOrderRepository(OrderRepository):
    """
    基于Django ORM的订单仓储实现。

    更新时先删除订单的全部订单项，再更新订单头，最后重新批量插入当前订单项。
    订单项没有跨更新的稳定标识，整体替换不会留下孤立或重复的订单项。
    """

    def __init__(
        self,
        transaction_manager: Optional[TransactionManager] = None,
        using: Optional[str] = None
    ):
        """
        初始化订单仓储。

        Args:
            transaction_manager: 更新订单使用的事务管理器
            using: 数据库别名
        """
        self.using = using or DEFAULT_DB_ALIAS
        self.transaction_manager = transaction_manager or DjangoTransactionManager(using=self.using)

    def create(self, order: Order) -> None:
        """
        创建订单，订单头和订单项一起写入。
        存储层的异常(如客户不存在导致的外键约束错误)原样抛出。

        Args:
            order: 要保存的订单
        """
        with transaction.atomic(using=self.using):
            OrderModel.objects.using(self.using).create(
                id=order.id,
                customer_id=order.customer_id,
                total=order.total
            )
            OrderItemModel.objects.using(self.using).bulk_create(
                [self._to_item_model(order.id, item) for item in order.items]
            )
            self._check_integrity()

        logger.debug(f"订单已创建: ID={order.id}, 订单项={len(order.items)}")

    def update(self, order: Order) -> None:
        """
        在一个事务中更新订单:
        删除原有订单项 → 更新订单头 → 插入当前订单项。
        任一步骤失败整个事务回滚，抛出不包含底层细节的PersistenceException。

        Args:
            order: 要更新的订单

        Raises:
            PersistenceException: 更新失败，已持久化的数据保持不变
        """
        try:
            with self.transaction_manager.start():
                OrderItemModel.objects.using(self.using).filter(order_id=order.id).delete()

                updated = OrderModel.objects.using(self.using).filter(id=order.id).update(
                    customer_id=order.customer_id,
                    total=order.total
                )
                if not updated:
                    raise EntityNotFoundException("订单", order.id)

                OrderItemModel.objects.using(self.using).bulk_create(
                    [self._to_item_model(order.id, item) for item in order.items]
                )
                self._check_integrity()
        except Exception as e:
            logger.error(f"更新订单失败: ID={order.id}, 原因: {e}")
            raise PersistenceException("订单", "更新") from None

        logger.debug(f"订单已更新: ID={order.id}, 订单项={len(order.items)}")

    def find(self, id: Any) -> Order:
        """
        根据ID获取订单，订单项一并加载。

        Args:
            id: 订单ID

        Returns:
            重新构建的订单聚合根

        Raises:
            EntityNotFoundException: 订单不存在
        """
        try:
            order_model = OrderModel.objects.using(self.using).prefetch_related('items').get(id=id)
        except OrderModel.DoesNotExist:
            raise EntityNotFoundException("订单", id) from None

        return self._to_domain_aggregate(order_model)

    def find_all(self) -> List[Order]:
        """
        获取所有订单，顺序由存储层决定。

        Returns:
            订单聚合根列表
        """
        order_models = OrderModel.objects.using(self.using).prefetch_related('items').all()
        return [self._to_domain_aggregate(model) for model in order_models]

    def _check_integrity(self) -> None:
        # 外键约束可能延迟到提交时检查，这里在事务内提前检查，保证失败发生在本次操作中
        connections[self.using].check_constraints(
            table_names=[OrderModel._meta.db_table, OrderItemModel._meta.db_table]
        )

    def _to_item_model(self, order_id: Any, item: OrderItem) -> OrderItemModel:
        return OrderItemModel(
            id=item.id,
            name=item.name,
            price=item.price,
            product_id=item.product_id,
            quantity=item.quantity,
            order_id=order_id
        )

    def _to_domain_aggregate(self, order_model: OrderModel) -> Order:
        """
        将数据库模型转换为订单聚合根，构造时执行聚合校验。

        Args:
            order_model: 订单数据库模型

        Returns:
            订单聚合根
        """
        items = [
            OrderItem(
                id=item_model.id,
                name=item_model.name,
                price=item_model.price,
                product_id=item_model.product_id,
                quantity=item_model.quantity
            )
            for item_model in order_model.items.all()
        ]
        return Order(order_model.id, order_model.customer_id, items)
