"""Tests for the customer, product and order application services."""

from decimal import Decimal

import pytest

from core.domain import EntityNotFoundException, PersistenceException
from core.infrastructure.transaction import NoOpTransactionManager
from customers.application import (
    ChangeCustomerAddressCommand,
    CreateCustomerCommand,
    CustomerApplicationService,
)
from customers.domain import CustomerRepository
from orderhub.factory import ApplicationFactory
from orders.application import ChangeOrderCustomerCommand, PlaceOrderCommand
from orders.infrastructure.models.order_models import Order as OrderModel
from products.application import CreateProductCommand
from tests.helpers import RecordingHandler

ADDRESS = {"street": "Street 1", "number": 1, "zip_code": "Zipcode 1", "city": "City 1"}


class InMemoryCustomerRepository(CustomerRepository):
    def __init__(self):
        self.customers = {}

    def create(self, customer):
        self.customers[customer.id] = customer

    def update(self, customer):
        if customer.id not in self.customers:
            raise EntityNotFoundException("客户", customer.id)
        self.customers[customer.id] = customer

    def find(self, id):
        try:
            return self.customers[id]
        except KeyError:
            raise EntityNotFoundException("客户", id) from None

    def find_all(self):
        return list(self.customers.values())


class BrokenCustomerRepository(InMemoryCustomerRepository):
    def create(self, customer):
        raise RuntimeError("storage unavailable")


@pytest.fixture
def customer_service(event_dispatcher):
    return CustomerApplicationService(
        customer_repository=InMemoryCustomerRepository(),
        transaction_manager=NoOpTransactionManager(),
        event_dispatcher=event_dispatcher,
    )


class TestCustomerApplicationService:
    def test_create_customer_publishes_created_event(self, customer_service, event_dispatcher, journal):
        event_dispatcher.register("CustomerCreatedEvent", RecordingHandler("created", journal))

        customer = customer_service.create_customer(
            CreateCustomerCommand("Customer 1", address=ADDRESS, activate=True, id="1")
        )

        assert customer_service.customer_repository.find("1") is customer
        assert customer.is_active()
        assert [label for label, _ in journal] == ["created"]
        assert journal[0][1].event_data["name"] == "Customer 1"
        assert customer.domain_events == []

    def test_create_customer_without_id_generates_one(self, customer_service):
        customer = customer_service.create_customer(CreateCustomerCommand("Customer 1"))

        assert customer.id
        assert not customer.is_active()

    def test_failed_create_publishes_nothing(self, event_dispatcher, journal):
        event_dispatcher.register("CustomerCreatedEvent", RecordingHandler("created", journal))
        service = CustomerApplicationService(
            BrokenCustomerRepository(), NoOpTransactionManager(), event_dispatcher
        )

        with pytest.raises(RuntimeError):
            service.create_customer(CreateCustomerCommand("Customer 1", id="1"))

        assert journal == []

    def test_change_address_publishes_address_changed_event(self, customer_service, event_dispatcher, journal):
        customer_service.create_customer(CreateCustomerCommand("Customer 1", address=ADDRESS, id="1"))
        event_dispatcher.register("CustomerAddressChangedEvent", RecordingHandler("address", journal))

        new_address = {"street": "Street 2", "number": 2, "zip_code": "Zipcode 2", "city": "City 2"}
        customer = customer_service.change_address(ChangeCustomerAddressCommand("1", new_address))

        assert str(customer.address) == "Street 2, 2, Zipcode 2, City 2"
        assert len(journal) == 1
        assert str(journal[0][1].event_data["address"]) == "Street 2, 2, Zipcode 2, City 2"

    def test_change_address_of_unknown_customer(self, customer_service):
        with pytest.raises(EntityNotFoundException):
            customer_service.change_address(ChangeCustomerAddressCommand("missing", ADDRESS))


@pytest.mark.django_db
class TestOrderFlow:
    @pytest.fixture
    def factory(self, event_dispatcher):
        return ApplicationFactory(event_dispatcher=event_dispatcher)

    @pytest.fixture
    def seeded(self, factory):
        customers = factory.create_customer_service()
        products = factory.create_product_service()
        customers.create_customer(CreateCustomerCommand("Customer 1", address=ADDRESS, activate=True, id="C1"))
        customers.create_customer(CreateCustomerCommand("Customer 2", address=ADDRESS, id="C2"))
        products.create_product(CreateProductCommand("Product 1", Decimal("10"), id="P1"))
        products.create_product(CreateProductCommand("Product 2", Decimal("25.50"), id="P2"))
        return factory

    def test_place_order_persists_order_and_reward_points(self, seeded):
        service = seeded.create_order_service()

        order = service.place_order(PlaceOrderCommand("C1", [("P1", 2), ("P2", 1)]))

        found = service.get_order(order.id)
        assert found.customer_id == "C1"
        assert found.total == Decimal("45.50")
        assert sorted(item.product_id for item in found.items) == ["P1", "P2"]
        customer = seeded.create_customer_repository().find("C1")
        assert customer.reward_points == Decimal("22.75")

    def test_stored_reward_points_match_award(self, seeded):
        seeded.create_product_service().create_product(CreateProductCommand("Product 3", "10.01", id="P3"))
        service = seeded.create_order_service()
        customer = seeded.create_customer_repository().find("C1")
        expected = customer.reward_points + Decimal("5.01")

        service.place_order(PlaceOrderCommand("C1", [("P3", 1)]))

        assert seeded.create_customer_repository().find("C1").reward_points == expected

    def test_place_order_with_unknown_product_changes_nothing(self, seeded):
        service = seeded.create_order_service()

        with pytest.raises(EntityNotFoundException):
            service.place_order(PlaceOrderCommand("C1", [("P1", 2), ("missing", 1)]))

        assert service.list_orders() == []
        assert seeded.create_customer_repository().find("C1").reward_points == 0

    def test_change_customer(self, seeded):
        service = seeded.create_order_service()
        order = service.place_order(PlaceOrderCommand("C1", [("P1", 1)]))

        service.change_customer(ChangeOrderCustomerCommand(order.id, "C2"))

        assert service.get_order(order.id).customer_id == "C2"

    def test_change_to_unknown_customer_fails_without_changes(self, seeded):
        service = seeded.create_order_service()
        order = service.place_order(PlaceOrderCommand("C1", [("P1", 1)]))

        with pytest.raises(PersistenceException):
            service.change_customer(ChangeOrderCustomerCommand(order.id, "missing"))

        assert OrderModel.objects.get(id=order.id).customer_id == "C1"
        assert len(service.get_order(order.id).items) == 1

    def test_built_in_handlers_are_registered(self):
        dispatcher = ApplicationFactory().create_event_dispatcher()

        assert len(dispatcher.get_event_handlers["CustomerCreatedEvent"]) == 2
        assert len(dispatcher.get_event_handlers["CustomerAddressChangedEvent"]) == 1
        assert len(dispatcher.get_event_handlers["ProductCreatedEvent"]) == 1

    def test_product_creation_publishes_event(self, factory, event_dispatcher, journal):
        event_dispatcher.register("ProductCreatedEvent", RecordingHandler("product", journal))

        factory.create_product_service().create_product(CreateProductCommand("Product 3", 5, id="P3"))

        assert [event.event_data["id"] for _, event in journal] == ["P3"]
