"""
商品仓储的Django实现。
"""
from typing import Any, List

from django.db import transaction
from loguru import logger

from core.domain import EntityNotFoundException
from products.domain import Product, ProductRepository
from products.infrastructure.models.product_models import Product as ProductModel


class DjangoProductRepository(ProductRepository):
    """
    基于Django ORM的商品仓储实现。
    """

    def create(self, product: Product) -> None:
        ProductModel.objects.create(id=product.id, name=product.name, price=product.price)
        logger.debug(f"商品已创建: ID={product.id}")

    def update(self, product: Product) -> None:
        """
        更新商品。

        Args:
            product: 要更新的商品

        Raises:
            EntityNotFoundException: 商品不存在
        """
        with transaction.atomic():
            updated = ProductModel.objects.filter(id=product.id).update(
                name=product.name,
                price=product.price
            )
            if not updated:
                raise EntityNotFoundException("商品", product.id)

    def find(self, id: Any) -> Product:
        """
        根据ID获取商品。

        Args:
            id: 商品ID

        Returns:
            找到的商品

        Raises:
            EntityNotFoundException: 商品不存在
        """
        try:
            product_model = ProductModel.objects.get(id=id)
        except ProductModel.DoesNotExist:
            raise EntityNotFoundException("商品", id) from None

        return self._to_domain_entity(product_model)

    def find_all(self) -> List[Product]:
        return [self._to_domain_entity(model) for model in ProductModel.objects.all()]

    def _to_domain_entity(self, product_model: ProductModel) -> Product:
        return Product(id=product_model.id, name=product_model.name, price=product_model.price)
