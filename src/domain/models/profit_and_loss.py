"""Domain models for the income statement."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProfitAndLossKpis:
    """Income statement figures for a period.

    Attributes:
        net_sales: Signed net-of-tax sales, credit notes subtracted.
        financial_income: Sum of positive discount/surcharge values.
        discounts_granted: Sum of negative discount/surcharge values
            (kept negative).
        adjusted_net_sales: Net sales plus income plus discounts.
        purchases: Purchases net of tax.
        cost_of_goods: Cost of goods sold, approximated by purchases.
        gross_margin: Adjusted net sales minus cost of goods.
        gross_margin_percentage: Gross margin over adjusted net sales x 100.
        operating_expenses: Expense-domain total.
        payroll: Payroll total.
        total_expenses: Operating expenses plus payroll.
        ebit: Gross margin minus total expenses.
        net_income: Equal to EBIT; taxes and interest are not modelled.
        net_margin_percentage: Net income over adjusted net sales x 100.
    """

    net_sales: float = 0.0
    financial_income: float = 0.0
    discounts_granted: float = 0.0
    adjusted_net_sales: float = 0.0
    purchases: float = 0.0
    cost_of_goods: float = 0.0
    gross_margin: float = 0.0
    gross_margin_percentage: float = 0.0
    operating_expenses: float = 0.0
    payroll: float = 0.0
    total_expenses: float = 0.0
    ebit: float = 0.0
    net_income: float = 0.0
    net_margin_percentage: float = 0.0


@dataclass(frozen=True)
class StatementLine:
    """Line of the income statement table.

    Attributes:
        category: Section (Ingresos, Costos, Gastos, Resultados).
        concept: Line label.
        amount: Signed amount; costs and expenses are negative.
        percentage_of_sales: Amount over adjusted net sales x 100; None on
            the net sales line when adjusted net sales are not positive.
        is_subtotal: Whether the line is a subtotal.
        is_title: Whether the line is a section title.
    """

    category: str
    concept: str
    amount: float
    percentage_of_sales: float | None
    is_subtotal: bool = False
    is_title: bool = False


@dataclass(frozen=True)
class MonthlyResult:
    """Core income statement figures of one month."""

    period: str
    net_sales: float
    cost_of_goods: float
    total_expenses: float
    ebit: float
    gross_margin: float


@dataclass(frozen=True)
class ProfitAndLoss:
    """Full income statement result."""

    kpis: ProfitAndLossKpis = field(default_factory=ProfitAndLossKpis)
    table: list[StatementLine] = field(default_factory=list)
    monthly: list[MonthlyResult] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "ProfitAndLoss":
        """Return the zeroed result used when there is no data."""
        return cls()


__all__ = [
    "ProfitAndLossKpis",
    "StatementLine",
    "MonthlyResult",
    "ProfitAndLoss",
]
