"""Shared fixtures for the orderhub test suite."""

from decimal import Decimal

import pytest

from core.domain import EventDispatcher
from customers.domain import Address, Customer
from customers.infrastructure.repositories.django_customer_repository import DjangoCustomerRepository
from orders.infrastructure.repositories.django_order_repository import DjangoOrderRepository
from products.domain import Product
from products.infrastructure.repositories.django_product_repository import DjangoProductRepository


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------

@pytest.fixture
def event_dispatcher() -> EventDispatcher:
    return EventDispatcher()


@pytest.fixture
def journal() -> list:
    return []


# ---------------------------------------------------------------------------
# Domain objects
# ---------------------------------------------------------------------------

@pytest.fixture
def address() -> Address:
    return Address("Street 1", 1, "Zipcode 1", "City 1")


@pytest.fixture
def customer(address) -> Customer:
    return Customer("1", "Customer 1", address=address)


@pytest.fixture
def product() -> Product:
    return Product("1", "Product 1", Decimal("10"))


# ---------------------------------------------------------------------------
# Repositories
# ---------------------------------------------------------------------------

@pytest.fixture
def customer_repository() -> DjangoCustomerRepository:
    return DjangoCustomerRepository()


@pytest.fixture
def product_repository() -> DjangoProductRepository:
    return DjangoProductRepository()


@pytest.fixture
def order_repository() -> DjangoOrderRepository:
    return DjangoOrderRepository()


@pytest.fixture
def saved_customer(db, customer_repository, customer) -> Customer:
    customer_repository.create(customer)
    return customer


@pytest.fixture
def saved_product(db, product_repository, product) -> Product:
    product_repository.create(product)
    return product
