"""Sale classification helpers built on the voucher policy."""

from collections.abc import Iterable

from src.domain.models.records import SaleRecord
from src.domain.policies.vouchers import (
    VoucherKind,
    is_credit_note_quantity,
    is_debit_note_code,
)


def is_credit_note(sale: SaleRecord) -> bool:
    """Return True iff the voucher quantity is exactly -1."""
    return is_credit_note_quantity(sale.voucher_quantity)


def is_debit_note(sale: SaleRecord) -> bool:
    """Return True iff the voucher type is one of the debit codes."""
    return is_debit_note_code(sale.voucher_type)


def exclude_debit_notes(sales: Iterable[SaleRecord]) -> list[SaleRecord]:
    """Return a new list without debit-note records."""
    return [sale for sale in sales if sale.kind is not VoucherKind.DEBIT_NOTE]


__all__ = ["is_credit_note", "is_debit_note", "exclude_debit_notes"]
