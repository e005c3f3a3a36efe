"""Filter descriptors for each analytical domain.

An empty tuple or an unset date bound means "no restriction on this
dimension", never "exclude everything".
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from typing import TypeVar

from src.domain.models.records import (
    ExpenseRecord,
    HRRecord,
    Modality,
    PurchaseRecord,
    SaleRecord,
    StockRecord,
)

T = TypeVar("T")


def _allows(selected: tuple, value) -> bool:
    return not selected or value in selected


@dataclass(frozen=True)
class PeriodFilters:
    """Year/month selection shared by cross-domain computations."""

    years: tuple[int, ...] = ()
    months: tuple[int, ...] = ()

    def matches_period(self, value: date) -> bool:
        """Return True when ``value`` falls in the selected years/months."""
        return _allows(self.years, value.year) and _allows(
            self.months, value.month
        )

    def matches(self, record) -> bool:
        return self.matches_period(record.date)


@dataclass(frozen=True)
class SalesFilters(PeriodFilters):
    """Sales selection.

    Attributes:
        years: Selected years.
        months: Selected months (1-12).
        branches: Selected branch codes, compared verbatim.
        salespeople: Selected salesperson names, compared verbatim.
        start_date: Inclusive lower date bound.
        end_date: Inclusive upper date bound.
    """

    branches: tuple[str, ...] = ()
    salespeople: tuple[str, ...] = ()
    start_date: date | None = None
    end_date: date | None = None

    def matches_date(self, value: date) -> bool:
        """Return True when ``value`` lies within the date bounds."""
        if self.start_date is not None and value < self.start_date:
            return False
        if self.end_date is not None and value > self.end_date:
            return False
        return True

    def matches_day_of_year(self, value: date) -> bool:
        """Compare ``value`` to the date bounds by month and day only."""
        key = (value.month, value.day)
        if self.start_date is not None and key < (
            self.start_date.month,
            self.start_date.day,
        ):
            return False
        if self.end_date is not None and key > (
            self.end_date.month,
            self.end_date.day,
        ):
            return False
        return True

    def matches_dimensions(self, record: SaleRecord) -> bool:
        """Apply branch, salesperson and month restrictions only."""
        return (
            _allows(self.branches, record.branch)
            and _allows(self.salespeople, record.salesperson)
            and _allows(self.months, record.month)
        )

    def matches(self, record: SaleRecord) -> bool:
        return (
            self.matches_dimensions(record)
            and _allows(self.years, record.year)
            and self.matches_date(record.date)
        )


@dataclass(frozen=True)
class PurchaseFilters(PeriodFilters):
    """Purchases selection by provider, period and modality."""

    providers: tuple[str, ...] = ()
    modalities: tuple[Modality, ...] = ()

    def matches(self, record: PurchaseRecord) -> bool:
        return (
            _allows(self.providers, record.provider)
            and self.matches_period(record.date)
            and _allows(self.modalities, record.modality)
        )


@dataclass(frozen=True)
class ExpenseFilters(PeriodFilters):
    """Expenses selection by category, subcategory and period."""

    categories: tuple[str, ...] = ()
    subcategories: tuple[str, ...] = ()

    def matches(self, record: ExpenseRecord) -> bool:
        return (
            _allows(self.categories, record.category)
            and _allows(self.subcategories, record.subcategory)
            and self.matches_period(record.date)
        )


@dataclass(frozen=True)
class HRFilters(PeriodFilters):
    """Payroll selection by period, area, activity and pay component."""

    areas: tuple[str, ...] = ()
    activities: tuple[str, ...] = ()
    types: tuple[str, ...] = ()

    def matches_roster(self, record: HRRecord) -> bool:
        """Apply the year, area and activity restrictions only."""
        return (
            _allows(self.years, record.year)
            and _allows(self.areas, record.area)
            and _allows(self.activities, record.activity)
        )

    def matches(self, record: HRRecord) -> bool:
        return (
            self.matches_roster(record)
            and _allows(self.months, record.month)
            and _allows(self.types, record.transaction_type)
        )


@dataclass(frozen=True)
class StockFilters(PeriodFilters):
    """Stock selection by period, branch and product category."""

    branches: tuple[str, ...] = ()
    categories: tuple[str, ...] = ()

    def matches(self, record: StockRecord) -> bool:
        return (
            self.matches_period(record.date)
            and _allows(self.branches, record.branch)
            and _allows(self.categories, record.category)
        )

    @property
    def is_single_month(self) -> bool:
        """Return True when exactly one year and one month are selected."""
        return len(self.years) == 1 and len(self.months) == 1


def apply_filters(records: Iterable[T], filters) -> list[T]:
    """Return a new list with the records matching ``filters``.

    Args:
        records: Records to filter; never mutated.
        filters: Any filter descriptor exposing ``matches``.

    Returns:
        list: Matching records in input order.
    """
    return [record for record in records if filters.matches(record)]


__all__ = [
    "PeriodFilters",
    "SalesFilters",
    "PurchaseFilters",
    "ExpenseFilters",
    "HRFilters",
    "StockFilters",
    "apply_filters",
]
