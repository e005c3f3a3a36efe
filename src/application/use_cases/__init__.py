"""Application use cases package."""

from .get_expenses_analysis import GetExpensesAnalysisUseCase
from .get_goal_compliance import GetGoalComplianceUseCase
from .get_hr_analysis import GetHRAnalysisUseCase
from .get_profit_and_loss import GetProfitAndLossUseCase
from .get_purchases_analysis import GetPurchasesAnalysisUseCase
from .get_sales_analysis import GetSalesAnalysisUseCase
from .get_stock_analysis import GetStockAnalysisUseCase
from .import_records import (
    ImportGoalsUseCase,
    ImportRecordsResult,
    ImportRecordsUseCase,
)

__all__ = [
    "ImportRecordsUseCase",
    "ImportRecordsResult",
    "ImportGoalsUseCase",
    "GetSalesAnalysisUseCase",
    "GetPurchasesAnalysisUseCase",
    "GetExpensesAnalysisUseCase",
    "GetHRAnalysisUseCase",
    "GetStockAnalysisUseCase",
    "GetProfitAndLossUseCase",
    "GetGoalComplianceUseCase",
]
