"""Domain package for business rules and core models."""

from .errors import MissingDatasetError
from .models import (
    RecordKind,
    RecordSets,
    SaleRecord,
    SalesFilters,
    VoucherKind,
)
from .policies import classify_voucher
from .services import (
    compute_expenses_analysis,
    compute_goal_compliance,
    compute_hr_analysis,
    compute_profit_and_loss,
    compute_purchases_analysis,
    compute_sales_analysis,
    compute_stock_analysis,
    normalize_key,
)

__all__ = [
    "MissingDatasetError",
    "RecordKind",
    "RecordSets",
    "SaleRecord",
    "SalesFilters",
    "VoucherKind",
    "classify_voucher",
    "compute_sales_analysis",
    "compute_purchases_analysis",
    "compute_expenses_analysis",
    "compute_hr_analysis",
    "compute_stock_analysis",
    "compute_profit_and_loss",
    "compute_goal_compliance",
    "normalize_key",
]
