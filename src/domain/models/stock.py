"""Domain models for the inventory valuation analysis."""

from dataclasses import dataclass, field

from src.domain.models.common import ChartPoint, RankingItem, TimeSeriesPoint


@dataclass(frozen=True)
class StockKpis:
    """Headline inventory indicators.

    Totals are point-in-time balances of the latest filtered month.

    Attributes:
        total_local_official: Local-currency valuation at the official rate.
        total_usd_official: USD valuation at the official rate.
        total_usd_system: USD valuation at the system rate.
        total_local_change: Month-over-month change of the local valuation.
        avg_monthly_stock: Average monthly local valuation of the period.
        avg_official_rate: Average official quotation, latest month.
        avg_system_rate: Average system quotation, latest month.
        rate_spread_percent: ``(system / official - 1) x 100``.
        stock_turnover: Annualized sales over average monthly stock.
        days_of_coverage: Current stock over average daily sales.
        stock_to_purchase_ratio: Current stock over period purchases.
        financial_coverage: Current stock over period expenses plus payroll,
            in months.
    """

    total_local_official: float = 0.0
    total_usd_official: float = 0.0
    total_usd_system: float = 0.0
    total_local_change: float = 0.0
    avg_monthly_stock: float = 0.0
    avg_official_rate: float = 0.0
    avg_system_rate: float = 0.0
    rate_spread_percent: float = 0.0
    stock_turnover: float = 0.0
    days_of_coverage: float = 0.0
    stock_to_purchase_ratio: float = 0.0
    financial_coverage: float = 0.0


@dataclass(frozen=True)
class RatePoint:
    """Average official and system quotations of a month."""

    period: str
    official: float
    system: float


@dataclass(frozen=True)
class StockAnalysis:
    """Full result of the inventory aggregation."""

    kpis: StockKpis = field(default_factory=StockKpis)
    stock_evolution: list[TimeSeriesPoint] = field(default_factory=list)
    stock_over_time: list[TimeSeriesPoint] = field(default_factory=list)
    stock_by_category: list[ChartPoint] = field(default_factory=list)
    stock_by_category_usd: list[ChartPoint] = field(default_factory=list)
    stock_by_branch: list[ChartPoint] = field(default_factory=list)
    stock_by_branch_usd: list[ChartPoint] = field(default_factory=list)
    rate_evolution: list[RatePoint] = field(default_factory=list)
    category_ranking_usd: list[RankingItem] = field(default_factory=list)
    turnover_by_branch: list[ChartPoint] = field(default_factory=list)
    total_turnover: float = 0.0
    available_years: list[str] = field(default_factory=list)
    available_months: list[int] = field(default_factory=list)
    available_branches: list[str] = field(default_factory=list)
    available_categories: list[str] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "StockAnalysis":
        """Return the zeroed result used when there is no data."""
        return cls()


__all__ = ["StockKpis", "RatePoint", "StockAnalysis"]
