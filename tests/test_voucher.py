"""Tests for the voucher lifecycle."""

from datetime import date
from decimal import Decimal

import pytest

from ledgerbook.domain.entities import Side, VoucherStatus
from ledgerbook.domain.errors import (
    ClosedPeriodError,
    DuplicateVoucherNumberError,
    NotFoundError,
    StatusTransitionError,
    UnbalancedVoucherError,
    ValidationError,
)
from ledgerbook.domain.voucher import make_line
from conftest import credit, debit


class TestCreateVoucher:
    """Tests for VoucherService.create_voucher."""

    def test_balanced_voucher_is_pending(self, voucher_service, sample_accounts):
        """Debit 1001 / credit 1002 for 1000 is stored as pending."""
        voucher = voucher_service.create_voucher(
            voucher_no="V001",
            date=date(2024, 3, 5),
            lines=[debit("1001", 1000), credit("1002", 1000)],
            description="Cash withdrawn from bank",
        )

        assert voucher.status == VoucherStatus.PENDING
        assert voucher.voucher_no == "V001"
        assert voucher.date == date(2024, 3, 5)
        assert voucher.amount == Decimal("1000")
        assert [(l.account, l.side) for l in voucher.lines] == [
            ("1001", Side.DEBIT),
            ("1002", Side.CREDIT),
        ]

    def test_lines_keep_their_order_and_memo(self, voucher_service, sample_accounts):
        lines = [
            make_line("6602", "debit", "300", "rent"),
            make_line("6602", "debit", "200", "utilities"),
            make_line("1002", "credit", "500"),
        ]

        voucher = voucher_service.create_voucher("V002", date(2024, 3, 6), lines)

        assert [l.memo for l in voucher.lines] == ["rent", "utilities", ""]

    def test_unbalanced_voucher_rejected(self, voucher_service, sample_accounts):
        """Debit 900 against credit 1000 is rejected with difference -100."""
        with pytest.raises(UnbalancedVoucherError) as exc_info:
            voucher_service.create_voucher(
                "V003", date(2024, 3, 5), [debit("1001", 900), credit("1002", 1000)]
            )

        assert exc_info.value.difference == Decimal("-100")
        assert voucher_service.list_vouchers() == []

    def test_sub_cent_lines_rejected(self, voucher_service, sample_accounts):
        """Ten debits of 0.105 would be stored as 1.00 against a credit of 1.05."""
        lines = [debit("6602", "0.105")] * 10 + [credit("1002", "1.05")]

        with pytest.raises(ValidationError, match="two decimal places"):
            voucher_service.create_voucher("V009", date(2024, 3, 5), lines)

        assert voucher_service.list_vouchers() == []

    def test_duplicate_number_rejected(self, voucher_service, pending_voucher):
        with pytest.raises(DuplicateVoucherNumberError) as exc_info:
            voucher_service.create_voucher(
                "V001", date(2024, 3, 6), [debit("1001", 5), credit("1002", 5)]
            )

        assert "Please use a different voucher number" in str(exc_info.value)
        assert len(voucher_service.list_vouchers()) == 1

    def test_unknown_account_code_rejected(self, voucher_service, sample_accounts):
        with pytest.raises(ValidationError, match="Unknown account code"):
            voucher_service.create_voucher(
                "V004", date(2024, 3, 5), [debit("9999", 10), credit("1002", 10)]
            )

    def test_blank_number_rejected(self, voucher_service, sample_accounts):
        with pytest.raises(ValidationError, match="Voucher number is required"):
            voucher_service.create_voucher(" ", date(2024, 3, 5), [debit("1001", 1), credit("1002", 1)])

    def test_closed_period_rejected(self, voucher_service, period_service, sample_accounts):
        period_service.close_period("2024-02")

        with pytest.raises(ClosedPeriodError):
            voucher_service.create_voucher(
                "V005", date(2024, 2, 29), [debit("1001", 1), credit("1002", 1)]
            )

    def test_caller_assigned_id(self, voucher_service, sample_accounts):
        voucher = voucher_service.create_voucher(
            "V006", date(2024, 3, 5), [debit("1001", 1), credit("1002", 1)], voucher_id="v_6"
        )
        assert voucher.id == "v_6"


class TestMakeLine:
    def test_short_side_is_rejected(self):
        with pytest.raises(ValidationError, match="Invalid side"):
            make_line("1001", "left", "10")

    def test_amount_conversion(self):
        assert make_line("1001", "DEBIT", 0.1).amount == Decimal("0.1")
        assert make_line("1001", "credit", "1,000").amount == Decimal("1000")

    def test_sub_cent_amount(self):
        with pytest.raises(ValidationError, match="two decimal places"):
            make_line("1001", "debit", "0.105")
        assert make_line("1001", "debit", "0.500").amount == Decimal("0.5")

    def test_bad_amount(self):
        with pytest.raises(ValidationError, match="Invalid amount"):
            make_line("1001", "debit", "ten")

    def test_blank_account(self):
        with pytest.raises(ValidationError):
            make_line("", "debit", "10")


class TestPosting:
    """Tests for posting vouchers."""

    def test_post_voucher(self, voucher_service, pending_voucher):
        posted = voucher_service.post_voucher(pending_voucher.id)

        assert posted.status == VoucherStatus.POSTED
        assert [v.id for v in voucher_service.list_posted()] == [pending_voucher.id]
        assert voucher_service.list_pending() == []

    def test_post_is_idempotent(self, voucher_service, posted_voucher):
        again = voucher_service.post_voucher(posted_voucher.id)

        assert again.status == VoucherStatus.POSTED

    def test_post_missing_voucher(self, voucher_service):
        with pytest.raises(NotFoundError, match="Voucher nope not found"):
            voucher_service.post_voucher("nope")

    def test_post_in_closed_period_rejected(self, voucher_service, period_service, pending_voucher):
        # Closing requires no pending vouchers, so the period is closed directly
        period_service.open_period("2024-03")
        voucher_service.db.update_period_status("2024-03", "closed")

        with pytest.raises(ClosedPeriodError):
            voucher_service.post_voucher(pending_voucher.id)
        assert voucher_service.get_voucher(pending_voucher.id).status == VoucherStatus.PENDING

    def test_posted_voucher_cannot_return_to_pending(self, voucher_service, posted_voucher):
        with pytest.raises(StatusTransitionError):
            voucher_service.set_status(posted_voucher.id, "pending")

    def test_set_status_posted(self, voucher_service, pending_voucher):
        assert voucher_service.set_status(pending_voucher.id, "posted").status == VoucherStatus.POSTED

    def test_set_status_unknown(self, voucher_service, pending_voucher):
        with pytest.raises(ValidationError):
            voucher_service.set_status(pending_voucher.id, "approved")

    def test_posted_never_listed_as_pending(self, voucher_service, sample_accounts):
        ids = []
        for number in range(3):
            voucher = voucher_service.create_voucher(
                f"V10{number}", date(2024, 3, number + 1), [debit("1001", 10), credit("6001", 10)]
            )
            ids.append(voucher.id)

        voucher_service.post_voucher(ids[1])

        assert ids[1] not in {v.id for v in voucher_service.list_pending()}
        assert ids[1] in {v.id for v in voucher_service.list_posted()}


class TestPostBatch:
    def _create(self, voucher_service, count):
        return [
            voucher_service.create_voucher(
                f"B{i}", date(2024, 4, i + 1), [debit("1001", 10), credit("6001", 10)]
            ).id
            for i in range(count)
        ]

    def test_batch_posts_all(self, voucher_service, sample_accounts):
        ids = self._create(voucher_service, 3)

        result = voucher_service.post_batch(ids)

        assert set(result.posted) == set(ids)
        assert result.already_posted == ()
        assert voucher_service.list_pending() == []

    def test_batch_reports_already_posted(self, voucher_service, sample_accounts):
        ids = self._create(voucher_service, 2)
        voucher_service.post_voucher(ids[0])

        result = voucher_service.post_batch(ids + [ids[1]])

        assert result.posted == (ids[1],)
        assert result.already_posted == (ids[0],)
        assert result.total == 2

    def test_batch_is_all_or_nothing(self, voucher_service, sample_accounts):
        """One unknown id leaves every voucher pending."""
        ids = self._create(voucher_service, 2)

        with pytest.raises(NotFoundError):
            voucher_service.post_batch([ids[0], "missing", ids[1]])

        assert len(voucher_service.list_pending()) == 2

    def test_post_all_pending(self, voucher_service, sample_accounts):
        self._create(voucher_service, 3)

        result = voucher_service.post_all_pending()

        assert len(result.posted) == 3
        assert len(voucher_service.list_posted()) == 3


def test_list_vouchers_newest_first(voucher_service, sample_accounts):
    for number, day in [("V1", 3), ("V2", 1), ("V3", 2)]:
        voucher_service.create_voucher(number, date(2024, 5, day), [debit("1001", 1), credit("1002", 1)])

    assert [v.voucher_no for v in voucher_service.list_vouchers()] == ["V1", "V3", "V2"]


def test_list_vouchers_bad_status(voucher_service):
    with pytest.raises(ValidationError):
        voucher_service.list_vouchers(status="draft")
