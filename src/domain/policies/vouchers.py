"""Voucher classification policy for sale records.

A sale is exactly one of invoice, credit note or debit note. Debit notes are
accounting adjustments and never count as sales activity; credit notes are
flagged upstream by a voucher quantity of exactly -1.
"""

from enum import Enum

DEBIT_NOTE_CODES = frozenset({"ND A", "ND B"})
CREDIT_NOTE_QUANTITY = -1


class VoucherKind(str, Enum):
    """Classification of a sale voucher."""

    INVOICE = "invoice"
    CREDIT_NOTE = "credit_note"
    DEBIT_NOTE = "debit_note"


def is_debit_note_code(voucher_type: str | None) -> bool:
    """Return True when the voucher type is a debit-adjustment code.

    Args:
        voucher_type: Raw voucher type code.

    Returns:
        bool: True for the debit codes, regardless of case or padding.
    """
    if not voucher_type:
        return False
    return voucher_type.strip().upper() in DEBIT_NOTE_CODES


def is_credit_note_quantity(voucher_quantity: float | None) -> bool:
    """Return True when the voucher quantity is the credit-note sentinel."""
    return voucher_quantity == CREDIT_NOTE_QUANTITY


def classify_voucher(
    voucher_type: str | None,
    voucher_quantity: float | None,
) -> VoucherKind:
    """Classify a sale voucher.

    Debit codes take precedence over the credit-note sentinel so a record
    carrying both is still excluded from sales figures.

    Args:
        voucher_type: Raw voucher type code.
        voucher_quantity: Voucher quantity field.

    Returns:
        VoucherKind: The single classification of the voucher.
    """
    if is_debit_note_code(voucher_type):
        return VoucherKind.DEBIT_NOTE
    if is_credit_note_quantity(voucher_quantity):
        return VoucherKind.CREDIT_NOTE
    return VoucherKind.INVOICE


__all__ = [
    "DEBIT_NOTE_CODES",
    "CREDIT_NOTE_QUANTITY",
    "VoucherKind",
    "classify_voucher",
    "is_credit_note_quantity",
    "is_debit_note_code",
]
