import click

from store.infrastructure.cli.demo_commands import demo
from store.infrastructure.cli.notify_commands import notify
from store.infrastructure.cli.order_commands import order_process, order_quote
from store.infrastructure.cli.payroll_commands import payroll


@click.group()
def cli() -> None:
    """Online Store — order processing demo"""


@cli.group()
def order() -> None:
    """Process and quote orders."""


# Register subcommands
cli.add_command(demo)
cli.add_command(notify)
cli.add_command(payroll)
order.add_command(order_process)
order.add_command(order_quote)
