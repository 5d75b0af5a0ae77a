"""Composition root — wires concrete strategies to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import click

from store.domain.exceptions import ValidationError
from store.domain.model.order import Echo, Order
from store.domain.model.product import Product
from store.domain.model.value_objects import Money
from store.domain.strategy.delivery import Delivery
from store.domain.strategy.message_sender import MessageSender
from store.domain.strategy.notification import Notifier
from store.domain.strategy.payment import Payment
from store.infrastructure.console.deliveries import CourierDelivery, PickUpPointDelivery
from store.infrastructure.console.notifications import EmailNotification, SmsNotification
from store.infrastructure.console.payments import CreditCardPayment, PayPalPayment
from store.infrastructure.console.senders import EmailSender, SmsSender

# Fixed demonstration scenario.
DEMO_ORDER_ID = "ORDER-67"
DEMO_PRODUCTS = [
    ("1", "iPhone 15", "999.99"),
    ("2", "AirPods Pro", "249.99"),
]
DEMO_CARD_NUMBER = "4400456894236"
DEMO_EMAIL = "client@gmail.com"
DEMO_PHONE = "+77777777777"

PAYMENT_KINDS = ("card", "paypal")
DELIVERY_KINDS = ("courier", "pickup")
CHANNELS = ("email", "sms")


def demo_order(echo: Echo = click.echo) -> Order:
    """Build the demo order: two products, card, courier, email + SMS."""
    order = Order(order_id=DEMO_ORDER_ID, echo=echo)
    for product_id, name, price in DEMO_PRODUCTS:
        order.add_product(Product(id=product_id, name=name, price=Money.of(price)))

    order.payment = CreditCardPayment(DEMO_CARD_NUMBER, echo=echo)
    order.delivery = CourierDelivery(echo=echo)
    order.add_notification(EmailNotification(DEMO_EMAIL, echo=echo))
    order.add_notification(SmsNotification(DEMO_PHONE, echo=echo))
    return order


# --- Strategy factories -------------------------------------------------------


def payment_strategy(kind: str, account: str, echo: Echo = click.echo) -> Payment:
    if kind == "card":
        return CreditCardPayment(account, echo=echo)
    if kind == "paypal":
        return PayPalPayment(account, echo=echo)
    raise ValidationError(f"Unknown payment method '{kind}'")


def delivery_strategy(kind: str, echo: Echo = click.echo) -> Delivery:
    if kind == "courier":
        return CourierDelivery(echo=echo)
    if kind == "pickup":
        return PickUpPointDelivery(echo=echo)
    raise ValidationError(f"Unknown delivery method '{kind}'")


def notifier(channel: str, recipient: str, echo: Echo = click.echo) -> Notifier:
    if channel == "email":
        return EmailNotification(recipient, echo=echo)
    if channel == "sms":
        return SmsNotification(recipient, echo=echo)
    raise ValidationError(f"Unknown notification channel '{channel}'")


def message_sender(channel: str, echo: Echo = click.echo) -> MessageSender:
    if channel == "email":
        return EmailSender(echo=echo)
    if channel == "sms":
        return SmsSender(echo=echo)
    raise ValidationError(f"Unknown notification channel '{channel}'")
