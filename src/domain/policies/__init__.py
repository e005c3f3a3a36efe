"""Domain policies package."""

from .vouchers import (
    CREDIT_NOTE_QUANTITY,
    DEBIT_NOTE_CODES,
    VoucherKind,
    classify_voucher,
    is_credit_note_quantity,
    is_debit_note_code,
)

__all__ = [
    "CREDIT_NOTE_QUANTITY",
    "DEBIT_NOTE_CODES",
    "VoucherKind",
    "classify_voucher",
    "is_credit_note_quantity",
    "is_debit_note_code",
]
