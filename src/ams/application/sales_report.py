"""Application service: Sales Report use case (query).

Sums order totals per calendar month across all years, the shape the
admin dashboard charts.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ams.domain.repository.unit_of_work import UnitOfWork

# Fixed labels; the dashboard must not change with the server locale
MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


@dataclass(frozen=True)
class MonthlySalesDTO:
    month: str
    sales: Decimal


class SalesReportHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[MonthlySalesDTO]:
        totals = [Decimal("0")] * len(MONTHS)
        with self._uow as uow:
            for order in uow.orders.list_all():
                totals[order.purchased_at.month - 1] += order.money.amount

        return [
            MonthlySalesDTO(month=month, sales=total)
            for month, total in zip(MONTHS, totals)
        ]
