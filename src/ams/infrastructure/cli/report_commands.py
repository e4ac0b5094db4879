"""CLI commands for reports."""

from __future__ import annotations

import click

from ams.application.sales_report import SalesReportHandler
from ams.infrastructure.bootstrap import unit_of_work


@click.command("sales")
def report_sales() -> None:
    """Total sales per calendar month."""
    rows = SalesReportHandler(unit_of_work()).handle()

    click.echo(f"{'Month':<6} {'Sales':>14}")
    click.echo("-" * 21)
    for row in rows:
        click.echo(f"{row.month:<6} {row.sales:>14.2f}")
