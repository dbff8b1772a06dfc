"""General ledger projection and trial balance.

Balances are never stored per transaction. Both views are recomputed from
the posted vouchers each time they are requested.
"""

import logging
from decimal import Decimal
from typing import Iterable, Iterator

from ledgerbook.database.base import Database
from ledgerbook.domain.entities import (
    Account,
    AccountType,
    LedgerRow,
    Side,
    TrialBalance,
    TrialBalanceRow,
    Voucher,
    VoucherStatus,
)
from ledgerbook.domain.errors import NotFoundError, account_not_found

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def signed_change(account_type: AccountType, debit: Decimal, credit: Decimal) -> Decimal:
    """Net effect of debit and credit amounts on an account's balance."""
    if account_type.is_debit_normal:
        return debit - credit
    return credit - debit


def account_movement(account_code: str, voucher: Voucher) -> tuple[Decimal, Decimal]:
    """Return (debit, credit) of a voucher's lines on one account code."""
    debit = ZERO
    credit = ZERO
    for line in voucher.lines:
        if line.account != account_code:
            continue
        if line.side == Side.DEBIT:
            debit += line.amount
        else:
            credit += line.amount
    return debit, credit


def project_ledger(account: Account, vouchers: Iterable[Voucher]) -> Iterator[LedgerRow]:
    """Yield ledger rows for one account.

    Vouchers must already be in ledger order (date, then voucher number).
    A voucher with no line on the account produces no row; the running
    balance starts from the account's opening balance.

    Args:
        account: Account to project
        vouchers: Posted vouchers in ledger order

    Yields:
        One LedgerRow per voucher touching the account
    """
    balance = account.balance
    for voucher in vouchers:
        if not any(line.account == account.code for line in voucher.lines):
            continue
        debit, credit = account_movement(account.code, voucher)
        balance += signed_change(account.type, debit, credit)
        yield LedgerRow(
            date=voucher.date,
            voucher_id=voucher.id,
            voucher_no=voucher.voucher_no,
            description=voucher.description,
            debit=debit,
            credit=credit,
            running_balance=balance,
        )


class LedgerService:
    """Service exposing ledger read models over posted vouchers."""

    def __init__(self, db: Database):
        """Initialize ledger service.

        Args:
            db: Database instance
        """
        self.db = db

    def posted_vouchers(self) -> list[Voucher]:
        """Posted vouchers in ledger order."""
        return self.db.list_vouchers(status=VoucherStatus.POSTED.value, ascending=True)

    def account_ledger(self, account_id: str) -> Iterator[LedgerRow]:
        """Project the general ledger of one account.

        The returned iterator is lazy; call again to recompute.

        Raises:
            NotFoundError: If the account does not exist
        """
        account = self.db.get_account(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))
        return project_ledger(account, self.posted_vouchers())

    def trial_balance(self) -> TrialBalance:
        """Sum posted debits and credits per account.

        Returns:
            TrialBalance with one row per account in code order
        """
        movements: dict[str, list[Decimal]] = {}
        for voucher in self.posted_vouchers():
            for line in voucher.lines:
                debit_credit = movements.setdefault(line.account, [ZERO, ZERO])
                debit_credit[0 if line.side == Side.DEBIT else 1] += line.amount

        rows = []
        total_debit = ZERO
        total_credit = ZERO
        for account in self.db.list_accounts():
            debit, credit = movements.get(account.code, (ZERO, ZERO))
            rows.append(
                TrialBalanceRow(
                    account_id=account.id,
                    code=account.code,
                    name=account.name,
                    type=account.type,
                    opening_balance=account.balance,
                    debit=debit,
                    credit=credit,
                    closing_balance=account.balance + signed_change(account.type, debit, credit),
                )
            )
            total_debit += debit
            total_credit += credit

        result = TrialBalance(rows=tuple(rows), total_debit=total_debit, total_credit=total_credit)
        if not result.balanced:
            logger.warning(
                "Trial balance does not balance: debit %s, credit %s", total_debit, total_credit
            )
        return result
