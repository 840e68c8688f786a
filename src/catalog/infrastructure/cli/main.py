import click

from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_set_stock,
    product_show,
    product_update,
)
from catalog.infrastructure.config import get_settings
from catalog.infrastructure.logging_config import LOG_LEVELS, configure_logging


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Override the configured log level.",
)
def cli(log_level: str | None) -> None:
    """Catalog — Product Catalog Management"""
    try:
        configure_logging(log_level or get_settings().log_level)
    except ValueError as exc:
        # only reachable through CATALOG_LOG_LEVEL
        raise click.BadParameter(str(exc), param_hint="CATALOG_LOG_LEVEL")


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_set_stock)
product.add_command(product_show)
product.add_command(product_update)
