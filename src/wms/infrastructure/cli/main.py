import shlex
from typing import TextIO

import click

from wms.domain.model.warehouse import DEFAULT_WAREHOUSE_NAME
from wms.infrastructure.bootstrap import AppContext, configure_logging, default_context
from wms.infrastructure.cli.change_commands import changes_drain
from wms.infrastructure.cli.product_commands import (
    product_add,
    product_by_category,
    product_grouped,
    product_list,
    product_show,
    product_update_price,
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log ledger activity to stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """WMS — in-memory warehouse ledger"""
    configure_logging(verbose)
    if ctx.obj is None:
        ctx.obj = default_context()


@click.group("ledger")
def ledger() -> None:
    """Commands accepted on each line of a session script."""


# Register session commands
ledger.add_command(product_add)
ledger.add_command(product_update_price)
ledger.add_command(product_list)
ledger.add_command(product_show)
ledger.add_command(product_by_category)
ledger.add_command(product_grouped)
ledger.add_command(changes_drain)


@cli.command("session")
@click.argument("script", type=click.File("r"), default="-")
@click.option(
    "--warehouse",
    "warehouse_name",
    default=DEFAULT_WAREHOUSE_NAME,
    show_default=True,
    help="Warehouse the script operates on.",
)
@click.pass_obj
def session(app: AppContext, script: TextIO, warehouse_name: str) -> None:
    """Run a script of ledger commands against one in-memory warehouse.

    Each non-blank line not starting with '#' is one command, for example
    ``add --name Hammer --category tools --price 9.99``.  Reads stdin when
    SCRIPT is omitted.  Nothing is kept once the session ends.
    """
    ledger_session = app.session(warehouse_name)

    for lineno, line in enumerate(script, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        try:
            args = shlex.split(line)
        except ValueError as exc:
            raise click.ClickException(f"line {lineno}: {exc}")

        try:
            ledger.main(
                args=args,
                prog_name="ledger",
                standalone_mode=False,
                obj=ledger_session,
            )
        except click.ClickException as exc:
            raise click.ClickException(f"line {lineno}: {exc.format_message()}")
