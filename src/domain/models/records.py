"""Domain models for the raw business records consumed by the aggregators.

Records arrive already typed: dates are ``datetime.date`` values, amounts are
floats in local currency and text fields are trimmed. Every record is
immutable for the duration of an aggregation call.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from src.domain.policies.vouchers import VoucherKind, classify_voucher


class Modality(str, Enum):
    """Two-valued sale/purchase channel tag."""

    DECLARED = "Blanco"
    UNDECLARED = "Negro"


class RecordKind(str, Enum):
    """Kinds of record sets handled by storage and loading."""

    SALES = "sales"
    PURCHASES = "purchases"
    EXPENSES = "expenses"
    HR = "hr"
    STOCK = "stock"


class _Dated:
    """Mixin exposing year and month derived from ``date``."""

    date: date

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month


@dataclass(frozen=True)
class SaleRecord(_Dated):
    """Single sale voucher.

    Attributes:
        date: Voucher date.
        branch: Branch code; may be blank.
        salesperson: Salesperson name.
        client: Client name.
        voucher_type: Voucher type code (e.g. ``FA A``, ``NC B``, ``ND A``).
        voucher_quantity: Voucher quantity; -1 flags a credit note.
        gross_amount: Final amount including taxes.
        net_amount: Amount without taxes.
        vat_amount: VAT amount.
        total_without_discount: Total before financial discount/surcharge.
        financial_adjustment: Financial discount (negative) or surcharge.
        modality: Declared or undeclared channel.
        point_of_sale: Point-of-sale number.
        kind: Voucher classification computed at construction.
    """

    date: date
    branch: str = ""
    salesperson: str = ""
    client: str = ""
    voucher_type: str = ""
    voucher_quantity: float = 1
    gross_amount: float = 0.0
    net_amount: float = 0.0
    vat_amount: float = 0.0
    total_without_discount: float = 0.0
    financial_adjustment: float = 0.0
    modality: Modality = Modality.DECLARED
    point_of_sale: int = 0
    kind: VoucherKind = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "kind",
            classify_voucher(self.voucher_type, self.voucher_quantity),
        )

    @property
    def sign(self) -> int:
        """Return -1 for credit notes and 1 otherwise."""
        return -1 if self.kind is VoucherKind.CREDIT_NOTE else 1

    @property
    def signed_gross(self) -> float:
        """Return the gross magnitude signed by the voucher kind."""
        return abs(self.gross_amount) * self.sign


@dataclass(frozen=True)
class PurchaseRecord(_Dated):
    """Single purchase voucher.

    Attributes:
        date: Purchase date.
        provider: Provider name.
        modality: Declared or undeclared channel.
        net_amount: Amount without taxes.
        other_taxes: Other taxes amount.
        vat_amount: VAT amount.
        gross_amount: Amount including taxes.
    """

    date: date
    provider: str = ""
    modality: Modality = Modality.DECLARED
    net_amount: float = 0.0
    other_taxes: float = 0.0
    vat_amount: float = 0.0
    gross_amount: float = 0.0


@dataclass(frozen=True)
class ExpenseRecord(_Dated):
    """Single expense entry."""

    date: date
    category: str = ""
    subcategory: str = ""
    detail: str = ""
    amount: float = 0.0


@dataclass(frozen=True)
class HRRecord(_Dated):
    """Single payroll transaction for one employee and pay component.

    Attributes:
        date: Payroll period date.
        tax_id: Employee tax identifier (unique per employee).
        employee_name: Employee full name.
        employee_file: Internal employee file number.
        transaction_type: Pay component (base pay, bonus, commissions...).
        amount: Component amount.
        area: Area the employee works in.
        activity: Activity of the employee.
        category: Category or role.
        hire_date: Hire date.
        termination_date: Termination date, None while still employed.
        birth_date: Birth date.
        vacation_days: Contractual vacation days as loaded.
        health_insurance: Health insurance provider.
    """

    date: date
    tax_id: str
    employee_name: str = ""
    employee_file: str = ""
    transaction_type: str = ""
    amount: float = 0.0
    area: str = ""
    activity: str = ""
    category: str = ""
    hire_date: date | None = None
    termination_date: date | None = None
    birth_date: date | None = None
    vacation_days: float = 0.0
    health_insurance: str = ""


@dataclass(frozen=True)
class StockRecord(_Dated):
    """Point-in-time stock valuation of one category in one branch.

    Attributes:
        date: Snapshot date (one per month).
        category: Product category.
        branch: Branch code.
        cost: Cost without taxes in local currency.
        system_rate: Secondary market dollar quotation.
        official_rate: Official dollar quotation.
        valued_usd_system: Valuation in USD at the system rate.
        valued_usd_official: Valuation in USD at the official rate.
        valued_local_official: Valuation in local currency at the official
            rate.
    """

    date: date
    category: str = ""
    branch: str = ""
    cost: float = 0.0
    system_rate: float = 0.0
    official_rate: float = 0.0
    valued_usd_system: float = 0.0
    valued_usd_official: float = 0.0
    valued_local_official: float = 0.0


@dataclass(frozen=True)
class RecordSets:
    """Stored record sets for all five kinds."""

    sales: list[SaleRecord] = field(default_factory=list)
    purchases: list[PurchaseRecord] = field(default_factory=list)
    expenses: list[ExpenseRecord] = field(default_factory=list)
    hr: list[HRRecord] = field(default_factory=list)
    stock: list[StockRecord] = field(default_factory=list)

    def get(self, kind: RecordKind) -> list:
        """Return the records stored for ``kind``."""
        return getattr(self, RecordKind(kind).value)


__all__ = [
    "Modality",
    "RecordKind",
    "SaleRecord",
    "PurchaseRecord",
    "ExpenseRecord",
    "HRRecord",
    "StockRecord",
    "RecordSets",
    "VoucherKind",
]
