"""Tests for voucher classification."""

from datetime import date

from src.domain.models import SaleRecord, VoucherKind
from src.domain.policies import classify_voucher
from src.domain.services.classification import (
    exclude_debit_notes,
    is_credit_note,
    is_debit_note,
)


def test_credit_note_depends_only_on_quantity_sentinel() -> None:
    """Only a voucher quantity of exactly -1 flags a credit note."""
    assert classify_voucher("FA A", -1) is VoucherKind.CREDIT_NOTE
    assert classify_voucher("NC B", -1.0) is VoucherKind.CREDIT_NOTE
    assert classify_voucher("NC B", -2) is VoucherKind.INVOICE
    assert classify_voucher("NC B", 1) is VoucherKind.INVOICE


def test_debit_codes_are_normalized_and_win_over_credit_sentinel() -> None:
    """Debit codes match trimmed, upper-cased types even with quantity -1."""
    assert classify_voucher(" nd a ", 1) is VoucherKind.DEBIT_NOTE
    assert classify_voucher("ND B", -1) is VoucherKind.DEBIT_NOTE
    assert classify_voucher("ND C", 1) is VoucherKind.INVOICE


def test_sale_record_computes_kind_at_construction() -> None:
    """SaleRecord should expose its kind, sign and signed gross amount."""
    invoice = SaleRecord(date(2024, 1, 5), gross_amount=100.0)
    credit = SaleRecord(
        date(2024, 1, 6), voucher_quantity=-1, gross_amount=-40.0
    )
    debit = SaleRecord(date(2024, 1, 7), voucher_type="ND A")

    assert invoice.kind is VoucherKind.INVOICE
    assert credit.kind is VoucherKind.CREDIT_NOTE
    assert credit.sign == -1
    assert credit.signed_gross == -40.0
    assert invoice.signed_gross == 100.0
    assert is_credit_note(credit)
    assert is_debit_note(debit)
    assert not is_debit_note(invoice)


def test_exclude_debit_notes_returns_new_list() -> None:
    """Debit notes are dropped without mutating the input."""
    records = [
        SaleRecord(date(2024, 1, 1), voucher_type="FA A"),
        SaleRecord(date(2024, 1, 2), voucher_type="ND B"),
    ]

    kept = exclude_debit_notes(records)

    assert [sale.voucher_type for sale in kept] == ["FA A"]
    assert len(records) == 2
