"""Account registry domain service (chart of accounts)."""

import logging
from decimal import Decimal
from typing import Optional

from ledgerbook.database.base import Database
from ledgerbook.domain.entities import Account as AccountEntity, AccountType
from ledgerbook.domain.errors import (
    DuplicateCodeError,
    NotFoundError,
    ReferencedByVoucherError,
    ValidationError,
    account_not_found,
)
from ledgerbook.utils.amount_parser import to_amount

logger = logging.getLogger(__name__)


def coerce_account_type(value: "str | AccountType") -> AccountType:
    """Convert a raw account type to AccountType.

    Raises:
        ValidationError: If the value is not a known account type
    """
    try:
        return AccountType(value.lower() if isinstance(value, str) else value)
    except ValueError:
        allowed = ", ".join(t.value for t in AccountType)
        raise ValidationError(f"Invalid account type '{value}' (expected one of: {allowed})") from None


class AccountService:
    """Service for managing the chart of accounts."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(
        self,
        code: str,
        name: str,
        type: "str | AccountType",
        opening_balance: "Decimal | int | str" = Decimal("0"),
        account_id: Optional[str] = None,
    ) -> AccountEntity:
        """Create a new account.

        Args:
            code: Unique account code (e.g. "1001")
            name: Display name
            type: Account type (asset, liability, equity, income, expense)
            opening_balance: Opening balance in accounting-currency units
            account_id: Optional caller-assigned ID

        Returns:
            The created account

        Raises:
            ValidationError: If a field is missing or invalid
            DuplicateCodeError: If an account with the same code exists
        """
        code = (code or "").strip()
        name = (name or "").strip()
        if not code:
            raise ValidationError("Account code is required")
        if not name:
            raise ValidationError("Account name is required")
        account_type = coerce_account_type(type)
        balance = to_amount(opening_balance, "opening balance", allow_negative=True)

        if self.db.get_account_by_code(code) is not None:
            raise DuplicateCodeError(code)

        new_id = self.db.create_account(
            code=code,
            name=name,
            type=account_type.value,
            balance=balance,
            account_id=account_id,
        )
        logger.info("Created account %s '%s' (%s)", code, name, account_type.value)
        return self.db.get_account(new_id)

    def get_account(self, account_id: str) -> Optional[AccountEntity]:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity or None if not found
        """
        return self.db.get_account(account_id)

    def get_account_by_code(self, code: str) -> Optional[AccountEntity]:
        """Get account by code."""
        return self.db.get_account_by_code(code)

    def require_account(self, account_id: str) -> AccountEntity:
        """Get account by ID or raise NotFoundError."""
        account = self.db.get_account(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))
        return account

    def list_accounts(self) -> list[AccountEntity]:
        """List all accounts ordered by code.

        Returns:
            List of account entities
        """
        return self.db.list_accounts()

    def update_account(
        self,
        account_id: str,
        code: Optional[str] = None,
        name: Optional[str] = None,
        type: "str | AccountType | None" = None,
        balance: "Decimal | int | str | None" = None,
    ) -> AccountEntity:
        """Update account fields in place.

        Args:
            account_id: Account ID to update
            code: New code (optional)
            name: New name (optional)
            type: New account type (optional)
            balance: New opening balance (optional)

        Returns:
            The updated account

        Raises:
            NotFoundError: If the account does not exist
            DuplicateCodeError: If the new code belongs to another account
            ReferencedByVoucherError: If the code changes while vouchers use it
        """
        account = self.require_account(account_id)

        if code is not None:
            code = code.strip()
            if not code:
                raise ValidationError("Account code cannot be empty")
            if code != account.code:
                existing = self.db.get_account_by_code(code)
                if existing is not None and existing.id != account_id:
                    raise DuplicateCodeError(code)
                references = self.db.count_vouchers_referencing(account.code)
                if references > 0:
                    raise ReferencedByVoucherError(account.code, references)
        if name is not None:
            name = name.strip()
            if not name:
                raise ValidationError("Account name cannot be empty")
        account_type = coerce_account_type(type) if type is not None else None
        new_balance = (
            to_amount(balance, "balance", allow_negative=True) if balance is not None else None
        )

        self.db.update_account(
            account_id=account_id,
            code=code,
            name=name,
            type=account_type.value if account_type is not None else None,
            balance=new_balance,
        )
        logger.info("Updated account %s", account_id)
        return self.db.get_account(account_id)

    def delete_account(self, account_id: str) -> None:
        """Delete an account.

        Args:
            account_id: Account ID to delete

        Raises:
            NotFoundError: If the account does not exist
            ReferencedByVoucherError: If any voucher line uses the account code
        """
        account = self.require_account(account_id)

        references = self.db.count_vouchers_referencing(account.code)
        if references > 0:
            raise ReferencedByVoucherError(account.code, references)

        self.db.delete_account(account_id)
        logger.info("Deleted account %s (%s)", account.code, account_id)
