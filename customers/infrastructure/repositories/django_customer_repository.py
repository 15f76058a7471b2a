"""
客户仓储的Django实现。
"""
from typing import Any, List

from django.db import transaction
from loguru import logger

from core.domain import EntityNotFoundException
from customers.domain import Address, Customer, CustomerRepository
from customers.infrastructure.models.customer_models import Customer as CustomerModel


class DjangoCustomerRepository(CustomerRepository):
    """
    基于Django ORM的客户仓储实现。
    """

    def create(self, customer: Customer) -> None:
        """
        保存新客户。

        Args:
            customer: 要保存的客户
        """
        CustomerModel.objects.create(id=customer.id, **self._to_model_fields(customer))
        logger.debug(f"客户已创建: ID={customer.id}")

    def update(self, customer: Customer) -> None:
        """
        更新客户。

        Args:
            customer: 要更新的客户

        Raises:
            EntityNotFoundException: 客户不存在
        """
        with transaction.atomic():
            updated = CustomerModel.objects.filter(id=customer.id).update(**self._to_model_fields(customer))
            if not updated:
                raise EntityNotFoundException("客户", customer.id)
        logger.debug(f"客户已更新: ID={customer.id}")

    def find(self, id: Any) -> Customer:
        """
        根据ID获取客户。

        Args:
            id: 客户ID

        Returns:
            找到的客户

        Raises:
            EntityNotFoundException: 客户不存在
        """
        try:
            customer_model = CustomerModel.objects.get(id=id)
        except CustomerModel.DoesNotExist:
            raise EntityNotFoundException("客户", id) from None

        return self._to_domain_entity(customer_model)

    def find_all(self) -> List[Customer]:
        return [self._to_domain_entity(model) for model in CustomerModel.objects.all()]

    def _to_model_fields(self, customer: Customer) -> dict:
        address = customer.address
        return {
            'name': customer.name,
            'street': address.street if address else None,
            'number': address.number if address else None,
            'zipcode': address.zip_code if address else None,
            'city': address.city if address else None,
            'active': customer.is_active(),
            'reward_points': customer.reward_points,
        }

    def _to_domain_entity(self, customer_model: CustomerModel) -> Customer:
        """
        将数据库模型转换为领域实体。

        Args:
            customer_model: 客户数据库模型

        Returns:
            客户领域实体
        """
        address = None
        if customer_model.street:
            address = Address(
                street=customer_model.street,
                number=customer_model.number,
                zip_code=customer_model.zipcode,
                city=customer_model.city,
            )

        return Customer(
            id=customer_model.id,
            name=customer_model.name,
            address=address,
            reward_points=customer_model.reward_points,
            active=customer_model.active,
        )
