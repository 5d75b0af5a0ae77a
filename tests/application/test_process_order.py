"""Integration tests for the ProcessOrder use case."""

import pytest

from store.application.dto import ProductSpec
from store.application.process_order import ProcessOrderHandler
from store.domain.exceptions import ValidationError
from store.domain.model.value_objects import Money
from store.infrastructure.console.deliveries import CourierDelivery
from store.infrastructure.console.notifications import EmailNotification, SmsNotification
from store.infrastructure.console.payments import CreditCardPayment
from tests.fakes import FakeDelivery, FakeNotifier, FakePayment

_SPECS = [ProductSpec("iPhone 15", "999.99"), ProductSpec("AirPods Pro", "249.99")]


class TestProcessOrderHappyPath:

    def test_returns_dto_with_sequential_product_ids(self):
        handler = ProcessOrderHandler(None, None, [], echo=lambda line: None)
        dto = handler.handle("ORDER-67", _SPECS)

        assert dto.order_id == "ORDER-67"
        assert [p.id for p in dto.products] == ["1", "2"]
        assert [p.price for p in dto.products] == ["$999.99", "$249.99"]
        assert dto.total == "$1249.98"
        assert dto.notifications_sent == 0

    def test_delegates_to_attached_strategies(self):
        payment, delivery = FakePayment(), FakeDelivery()
        notifiers = [FakeNotifier("email"), FakeNotifier("sms")]
        handler = ProcessOrderHandler(payment, delivery, notifiers, echo=lambda line: None)

        dto = handler.handle("ORDER-67", _SPECS)

        assert payment.charges == [Money.of("1249.98")]
        assert delivery.delivered == ["ORDER-67"]
        assert [n.messages for n in notifiers] == [["Order ORDER-67 processed!"]] * 2
        assert dto.notifications_sent == 2

    def test_empty_order_is_processed(self):
        payment = FakePayment()
        handler = ProcessOrderHandler(payment, None, [], echo=lambda line: None)
        dto = handler.handle("ORDER-0", [])
        assert dto.total == "$0.00"
        assert payment.charges == [Money.zero()]


class TestProcessOrderScenario:

    def test_card_courier_email_sms(self):
        lines: list[str] = []
        handler = ProcessOrderHandler(
            payment=CreditCardPayment("4400456894236", echo=lines.append),
            delivery=CourierDelivery(echo=lines.append),
            notifiers=[
                EmailNotification("client@gmail.com", echo=lines.append),
                SmsNotification("+77777777777", echo=lines.append),
            ],
            echo=lines.append,
        )

        handler.handle("ORDER-67", _SPECS)

        assert lines == [
            "=== PROCESSING ORDER ORDER-67 ===",
            "Products: 2",
            "Total: $1249.98",
            "Card payment 4400... Amount: $1249.98",
            "Courier delivery of order ORDER-67",
            "Email to client@gmail.com: Order ORDER-67 processed!",
            "SMS to +77777777777: Order ORDER-67 processed!",
        ]


class TestProcessOrderValidation:

    def test_negative_price_rejected_before_charging(self):
        payment = FakePayment()
        handler = ProcessOrderHandler(payment, None, [], echo=lambda line: None)

        with pytest.raises(ValidationError, match="cannot be negative"):
            handler.handle("ORDER-1", [ProductSpec("Widget", "-5")])

        assert payment.charges == []

    def test_unparsable_price_rejected(self):
        handler = ProcessOrderHandler(None, None, [], echo=lambda line: None)
        with pytest.raises(ValidationError, match="Invalid money amount"):
            handler.handle("ORDER-1", [ProductSpec("Widget", "cheap")])
