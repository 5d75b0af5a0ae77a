"""CLI command running the fixed demonstration scenario."""

from __future__ import annotations

import click

from store.infrastructure.bootstrap import demo_order


@click.command("demo")
def demo() -> None:
    """Process the built-in demo order (two products, card, courier)."""
    click.echo("STARTING STORE SYSTEM")
    click.echo()

    demo_order(echo=click.echo).process()

    click.echo()
    click.echo("DONE! SOLID principles at work!")
