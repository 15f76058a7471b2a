"""
客户领域模型中的仓储接口。
"""
from core.domain.repositories import Repository
from customers.domain.entities import Customer


class CustomerRepository(Repository[Customer]):
    """
    客户仓储接口。
    find找不到客户时抛出EntityNotFoundException。
    """
