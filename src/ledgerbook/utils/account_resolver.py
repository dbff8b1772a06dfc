"""Utility for resolving an account reference (id or code) to an account."""

from ledgerbook.domain.account import AccountService
from ledgerbook.domain.entities import Account
from ledgerbook.domain.errors import NotFoundError


def resolve_account(account_service: AccountService, account: str) -> Account:
    """Resolve an account id or account code to the account.

    The id is tried first; codes are short numbers such as "1001" and never
    collide with generated hex ids.

    Args:
        account_service: AccountService instance
        account: Account id or code

    Returns:
        The account

    Raises:
        NotFoundError: If neither an id nor a code matches
    """
    account = account.strip()
    found = account_service.get_account(account)
    if found is None:
        found = account_service.get_account_by_code(account)
    if found is None:
        raise NotFoundError(f"Account '{account}' not found")
    return found
