"""
商品领域事件处理器。
"""
from loguru import logger

from core.domain.events import DomainEvent, EventHandler


class SendEmailWhenProductIsCreatedHandler(EventHandler):
    """商品创建后发送邮件通知"""

    def handle(self, event: DomainEvent) -> None:
        logger.info(f"发送邮件: 新商品 {event.event_data['name']} 已上架")
