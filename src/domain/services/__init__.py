"""Domain services package."""

from .classification import exclude_debit_notes, is_credit_note, is_debit_note
from .expenses import (
    aggregate_expenses_by,
    compute_expenses_analysis,
    drill_down_details,
    drill_down_subcategories,
)
from .formatters import (
    build_ranking,
    format_for_chart,
    format_for_pie_chart,
    top_entry,
)
from .goals import (
    compliance_status,
    compute_goal_compliance,
    merge_goal_actuals,
    summarize_goals,
)
from .hr import compute_hr_analysis, vacation_days_for
from .normalization import normalize_key
from .profit_and_loss import compute_profit_and_loss
from .purchases import compute_purchases_analysis
from .sales import compute_sales_analysis
from .stock import compute_stock_analysis

__all__ = [
    "is_credit_note",
    "is_debit_note",
    "exclude_debit_notes",
    "normalize_key",
    "format_for_pie_chart",
    "format_for_chart",
    "build_ranking",
    "top_entry",
    "compute_sales_analysis",
    "compute_purchases_analysis",
    "compute_expenses_analysis",
    "aggregate_expenses_by",
    "drill_down_subcategories",
    "drill_down_details",
    "compute_hr_analysis",
    "vacation_days_for",
    "compute_stock_analysis",
    "compute_profit_and_loss",
    "merge_goal_actuals",
    "compliance_status",
    "summarize_goals",
    "compute_goal_compliance",
]
