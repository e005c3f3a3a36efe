"""Domain models for the purchases analysis."""

from dataclasses import dataclass, field

from src.domain.models.common import (
    ChartPoint,
    RankingItem,
    TimeSeriesPoint,
    TopEntry,
)


@dataclass(frozen=True)
class PurchaseKpis:
    """Headline purchase indicators.

    Attributes:
        total_purchases: Gross purchases total.
        average_purchase_per_provider: Gross total over distinct providers.
        top_month: Month with the highest gross total (e.g. ``Enero 2024``).
        top_provider: Provider with the highest gross total.
        declared_total: Gross total of the declared channel.
        undeclared_total: Gross total of the undeclared channel.
        declared_percentage: Declared share of the gross total x 100.
        undeclared_percentage: Undeclared share of the gross total x 100.
    """

    total_purchases: float = 0.0
    average_purchase_per_provider: float = 0.0
    top_month: TopEntry = field(default_factory=TopEntry)
    top_provider: TopEntry = field(default_factory=TopEntry)
    declared_total: float = 0.0
    undeclared_total: float = 0.0
    declared_percentage: float = 0.0
    undeclared_percentage: float = 0.0


@dataclass(frozen=True)
class ModalitySplitPoint:
    """Monthly gross purchases split by channel."""

    period: str
    declared: float = 0.0
    undeclared: float = 0.0


@dataclass(frozen=True)
class ProviderDetail:
    """Per-provider breakdown of net amount, taxes and gross total."""

    name: str
    net_amount: float
    vat_amount: float
    other_taxes: float
    total: float


@dataclass(frozen=True)
class SalesVsPurchasesPoint:
    """Monthly net sales against gross purchases."""

    period: str
    sales: float
    purchases: float


@dataclass(frozen=True)
class PurchasesAnalysis:
    """Full result of the purchases aggregation."""

    kpis: PurchaseKpis = field(default_factory=PurchaseKpis)
    purchases_over_time: list[ModalitySplitPoint] = field(
        default_factory=list
    )
    provider_ranking: list[RankingItem] = field(default_factory=list)
    purchases_by_modality: list[ChartPoint] = field(default_factory=list)
    vat_over_time: list[TimeSeriesPoint] = field(default_factory=list)
    provider_details: list[ProviderDetail] = field(default_factory=list)
    available_years: list[str] = field(default_factory=list)
    available_providers: list[str] = field(default_factory=list)
    sales_vs_purchases: list[SalesVsPurchasesPoint] = field(
        default_factory=list
    )

    @classmethod
    def empty(cls) -> "PurchasesAnalysis":
        """Return the zeroed result used when there is no data."""
        return cls()


__all__ = [
    "PurchaseKpis",
    "ModalitySplitPoint",
    "ProviderDetail",
    "SalesVsPurchasesPoint",
    "PurchasesAnalysis",
]
