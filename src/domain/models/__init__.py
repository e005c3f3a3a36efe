"""Domain models package."""

from .common import (
    ChartPoint,
    RankingItem,
    TimeSeriesPoint,
    TopEntry,
    TrendRow,
)
from .expenses import AggregatedExpense, ExpenseKpis, ExpensesAnalysis
from .filters import (
    ExpenseFilters,
    HRFilters,
    PeriodFilters,
    PurchaseFilters,
    SalesFilters,
    StockFilters,
    apply_filters,
)
from .goals import (
    ComplianceStatus,
    GoalComplianceReport,
    GoalPerformance,
    GoalRow,
    SalesGoal,
)
from .hr import HRAnalysis, HRKpis
from .profit_and_loss import ProfitAndLoss, ProfitAndLossKpis, StatementLine
from .purchases import PurchaseKpis, PurchasesAnalysis
from .records import (
    ExpenseRecord,
    HRRecord,
    Modality,
    PurchaseRecord,
    RecordKind,
    RecordSets,
    SaleRecord,
    StockRecord,
    VoucherKind,
)
from .sales import CustomerAcquisition, SalesAnalysis, SalesKpis
from .stock import StockAnalysis, StockKpis

__all__ = [
    "ChartPoint",
    "RankingItem",
    "TimeSeriesPoint",
    "TopEntry",
    "TrendRow",
    "SaleRecord",
    "PurchaseRecord",
    "ExpenseRecord",
    "HRRecord",
    "StockRecord",
    "RecordSets",
    "RecordKind",
    "Modality",
    "VoucherKind",
    "PeriodFilters",
    "SalesFilters",
    "PurchaseFilters",
    "ExpenseFilters",
    "HRFilters",
    "StockFilters",
    "apply_filters",
    "SalesKpis",
    "SalesAnalysis",
    "CustomerAcquisition",
    "PurchaseKpis",
    "PurchasesAnalysis",
    "ExpenseKpis",
    "ExpensesAnalysis",
    "AggregatedExpense",
    "HRKpis",
    "HRAnalysis",
    "StockKpis",
    "StockAnalysis",
    "ProfitAndLossKpis",
    "ProfitAndLoss",
    "StatementLine",
    "SalesGoal",
    "ComplianceStatus",
    "GoalPerformance",
    "GoalRow",
    "GoalComplianceReport",
]
