"""
订单领域模型中的仓储接口。
"""
from core.domain.repositories import Repository
from orders.domain.aggregates import Order


class OrderRepository(Repository[Order]):
    """
    订单仓储接口。
    订单头和订单项作为一个整体读写:
    create失败时原样抛出存储异常；update在事务中执行，失败时整体回滚并抛出
    PersistenceException；find找不到订单时抛出EntityNotFoundException。
    """
