"""
客户领域事件处理器。
处理器只负责通知，通知内容通过loguru输出。
"""
from loguru import logger

from core.domain.events import DomainEvent, EventHandler


class NotifyWhenCustomerIsCreated1Handler(EventHandler):
    """客户创建后的第一个通知"""

    def handle(self, event: DomainEvent) -> None:
        logger.info(f"这是CustomerCreated事件的第一个通知: 客户 {event.event_data['id']}")


class NotifyWhenCustomerIsCreated2Handler(EventHandler):
    """客户创建后的第二个通知"""

    def handle(self, event: DomainEvent) -> None:
        logger.info(f"这是CustomerCreated事件的第二个通知: 客户 {event.event_data['id']}")


class NotifyWhenCustomerAddressChangedHandler(EventHandler):
    """客户地址变更通知"""

    def handle(self, event: DomainEvent) -> None:
        data = event.event_data
        logger.info(f"客户 {data['id']} - {data['name']} 的地址已变更为: {data['address']}")
