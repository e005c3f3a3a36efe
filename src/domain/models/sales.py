"""Domain models for the sales analysis."""

from dataclasses import dataclass, field

from src.domain.models.common import (
    ChartPoint,
    RankingItem,
    TimeSeriesPoint,
    TrendRow,
)


@dataclass(frozen=True)
class SalesKpis:
    """Headline sales indicators.

    Attributes:
        total_sales: Invoice total minus credit-note total.
        average_sale: Invoice total divided by invoice count.
        invoice_count: Number of invoices.
        invoice_total: Gross magnitude of invoices.
        credit_note_count: Number of credit notes.
        credit_note_total: Gross magnitude of credit notes (positive).
        declared_sales: Signed gross of the declared channel.
        undeclared_sales: Signed gross of the undeclared channel.
        credit_note_percentage: Credit-note total over invoice total x 100.
        total_net_of_tax: Signed net-of-tax sum.
        total_vat: Signed VAT sum.
        total_discounts: Discount/surcharge sum across all vouchers.
        invoice_types: Invoice count per voucher type.
        total_operations: Sum of voucher quantities.
        purchase_frequency: Invoices per distinct invoiced client.
        financial_impact_percent: Invoice financial adjustments over the
            invoice pre-discount total x 100.
        total_without_discount: Invoice pre-discount total.
        total_financial_adjustments: Invoice discount/surcharge sum.
    """

    total_sales: float = 0.0
    average_sale: float = 0.0
    invoice_count: int = 0
    invoice_total: float = 0.0
    credit_note_count: int = 0
    credit_note_total: float = 0.0
    declared_sales: float = 0.0
    undeclared_sales: float = 0.0
    credit_note_percentage: float = 0.0
    total_net_of_tax: float = 0.0
    total_vat: float = 0.0
    total_discounts: float = 0.0
    invoice_types: dict[str, int] = field(default_factory=dict)
    total_operations: float = 0.0
    purchase_frequency: float = 0.0
    financial_impact_percent: float = 0.0
    total_without_discount: float = 0.0
    total_financial_adjustments: float = 0.0


@dataclass(frozen=True)
class SalespersonAverage:
    """Average ticket of a salesperson."""

    name: str
    branches: str
    total_sales: float
    invoice_count: int
    average_sale: float


@dataclass(frozen=True)
class CustomerShare:
    """Client count and share within a month."""

    count: int = 0
    percentage: float = 0.0


@dataclass(frozen=True)
class AcquisitionPoint:
    """New vs recurring client counts for one month."""

    month: str
    new: int
    recurring: int


@dataclass(frozen=True)
class CustomerAcquisition:
    """New vs recurring clients for the latest filtered month.

    Attributes:
        new_customers: Clients whose first ever purchase is in that month.
        recurring_customers: Remaining invoiced clients of that month.
        new_customers_pct_change: Change of the new-client share vs the
            previous month.
        recurring_customers_pct_change: Change of the recurring share.
        last_six_months: Trailing breakdown, oldest to newest.
        total_customers: Distinct invoiced clients in the latest month.
        latest_month: Label of the latest month (e.g. ``Ene 2024``).
    """

    new_customers: CustomerShare
    recurring_customers: CustomerShare
    new_customers_pct_change: float
    recurring_customers_pct_change: float
    last_six_months: list[AcquisitionPoint]
    total_customers: int
    latest_month: str


@dataclass(frozen=True)
class SalesAnalysis:
    """Full result of the sales aggregation."""

    kpis: SalesKpis = field(default_factory=SalesKpis)
    sales_by_branch: list[ChartPoint] = field(default_factory=list)
    sales_by_salesperson: list[ChartPoint] = field(default_factory=list)
    sales_by_voucher_type: list[ChartPoint] = field(default_factory=list)
    sales_by_modality: list[ChartPoint] = field(default_factory=list)
    sales_over_time: list[TimeSeriesPoint] = field(default_factory=list)
    branch_ranking: list[RankingItem] = field(default_factory=list)
    salesperson_ranking: list[RankingItem] = field(default_factory=list)
    client_ranking: list[RankingItem] = field(default_factory=list)
    yearly_trend: list[TrendRow] = field(default_factory=list)
    trend_years: list[str] = field(default_factory=list)
    average_sale_by_salesperson: list[SalespersonAverage] = field(
        default_factory=list
    )
    customer_acquisition: CustomerAcquisition | None = None
    daily_sales_over_time: list[TimeSeriesPoint] = field(
        default_factory=list
    )
    daily_yearly_trend: list[TrendRow] = field(default_factory=list)
    daily_trend_years: list[str] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "SalesAnalysis":
        """Return the zeroed result used when there is no data."""
        return cls()


__all__ = [
    "SalesKpis",
    "SalespersonAverage",
    "CustomerShare",
    "AcquisitionPoint",
    "CustomerAcquisition",
    "SalesAnalysis",
]
