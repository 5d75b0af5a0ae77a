"""CLI commands for processing and quoting orders."""

from __future__ import annotations

import click

from store.application.dto import ProductSpec
from store.application.process_order import ProcessOrderHandler
from store.application.quote_order import QuoteOrderHandler
from store.domain.exceptions import DomainException
from store.infrastructure.bootstrap import (
    DELIVERY_KINDS,
    PAYMENT_KINDS,
    delivery_strategy,
    notifier,
    payment_strategy,
)
from store.infrastructure.console.discounts import PercentageDiscount


def _parse_products(raw: str) -> list[ProductSpec]:
    """Parse 'iPhone 15:999.99,AirPods Pro:249.99' into ProductSpec list."""
    specs: list[ProductSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid product format '{pair}'. Expected 'Name:Price'."
            )
        name, price = pair.rsplit(":", 1)
        specs.append(ProductSpec(name=name.strip(), price=price.strip()))
    return specs


@click.command("process")
@click.option("--id", "order_id", required=True, help="Order ID, e.g. ORDER-67.")
@click.option("--products", default="", help="Products as 'Name:Price,Name:Price'.")
@click.option("--payment", type=click.Choice(PAYMENT_KINDS), default=None, help="Payment method.")
@click.option("--account", default=None, help="Card number or PayPal email.")
@click.option("--delivery", type=click.Choice(DELIVERY_KINDS), default=None, help="Delivery method.")
@click.option("--email", "emails", multiple=True, help="Email address to notify (repeatable).")
@click.option("--sms", "phones", multiple=True, help="Phone number to notify (repeatable).")
def order_process(
    order_id: str,
    products: str,
    payment: str | None,
    account: str | None,
    delivery: str | None,
    emails: tuple[str, ...],
    phones: tuple[str, ...],
) -> None:
    """Process an order: charge, ship and notify."""
    if payment and not account:
        raise click.ClickException("--payment requires --account")

    specs = _parse_products(products)

    try:
        handler = ProcessOrderHandler(
            payment=payment_strategy(payment, account) if payment else None,
            delivery=delivery_strategy(delivery) if delivery else None,
            notifiers=[notifier("email", e) for e in emails]
            + [notifier("sms", p) for p in phones],
            echo=click.echo,
        )
        dto = handler.handle(order_id=order_id, product_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo()
    click.echo(f"Order {dto.order_id} processed  ({dto.notifications_sent} notification(s) sent)")


@click.command("quote")
@click.option("--id", "order_id", required=True, help="Order ID, e.g. ORDER-67.")
@click.option("--products", required=True, help="Products as 'Name:Price,Name:Price'.")
@click.option("--delivery", type=click.Choice(DELIVERY_KINDS), default="courier", show_default=True, help="Delivery method.")
@click.option("--discount", "percent", default=None, help="Percentage discount, 0-100.")
def order_quote(order_id: str, products: str, delivery: str, percent: str | None) -> None:
    """Show what an order would cost, including delivery."""
    specs = _parse_products(products)

    try:
        handler = QuoteOrderHandler(
            delivery=delivery_strategy(delivery),
            discount=PercentageDiscount(percent) if percent is not None else None,
            echo=click.echo,
        )
        dto = handler.handle(order_id=order_id, product_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Quote for {dto.order_id}")
    click.echo(f"  {'Subtotal':<20} {dto.subtotal:>12}")
    click.echo(f"  {'After discount':<20} {dto.discounted_total:>12}")
    click.echo(f"  {'Delivery':<20} {dto.delivery_cost:>12}")
    click.echo(f"  {'-'*33}")
    click.echo(f"  {'Total':<20} {dto.grand_total:>12}")
