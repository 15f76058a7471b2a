"""
商品领域模型中的仓储接口。
"""
from core.domain.repositories import Repository
from products.domain.entities import Product


class ProductRepository(Repository[Product]):
    """
    商品仓储接口。
    find找不到商品时抛出EntityNotFoundException。
    """
