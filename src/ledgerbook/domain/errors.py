"""Shared domain error messages and error types."""

from decimal import Decimal


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class UnbalancedVoucherError(ValidationError):
    """Entry lines do not form a balanced, non-zero voucher."""

    def __init__(
        self,
        difference: Decimal,
        total_debit: Decimal,
        total_credit: Decimal,
        reason: str | None = None,
    ):
        self.difference = difference
        self.total_debit = total_debit
        self.total_credit = total_credit
        super().__init__(reason or unbalanced_voucher(total_debit, total_credit))


class StatusTransitionError(ValidationError):
    """Requested status change is not allowed by the workflow."""


class ClosedPeriodError(ValidationError):
    """Voucher date falls inside a closed accounting period."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DuplicateKeyError(ConflictError):
    """A natural business key is already taken."""

    def __init__(self, field: str, value: str, message: str | None = None):
        self.field = field
        self.value = value
        super().__init__(message or f"{field} '{value}' already exists")


class DuplicateCodeError(DuplicateKeyError):
    def __init__(self, code: str):
        super().__init__("code", code, duplicate_account_code(code))


class DuplicateVoucherNumberError(DuplicateKeyError):
    def __init__(self, voucher_no: str):
        super().__init__("voucher_no", voucher_no, duplicate_voucher_number(voucher_no))


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


class ReferencedByVoucherError(DependencyError):
    def __init__(self, code: str, voucher_count: int):
        self.code = code
        self.voucher_count = voucher_count
        super().__init__(account_referenced(code, voucher_count))


class StorageError(DomainError):
    """Persistence failure not covered by a more specific error."""


def not_found(kind: str, entity_id: str) -> str:
    """Return message for a missing entity."""
    return f"{kind} {entity_id} not found"


def account_not_found(account_id: str) -> str:
    """Return message for missing account."""
    return not_found("Account", account_id)


def voucher_not_found(voucher_id: str) -> str:
    """Return message for missing voucher."""
    return not_found("Voucher", voucher_id)


def duplicate_account_code(code: str) -> str:
    return f"Account with code '{code}' already exists"


def duplicate_voucher_number(voucher_no: str) -> str:
    """Return message for a voucher number collision.

    Callers retry with a new number, so the message says so.
    """
    return (
        f"Voucher number '{voucher_no}' already exists. "
        "Please use a different voucher number."
    )


def unbalanced_voucher(total_debit: Decimal, total_credit: Decimal) -> str:
    return (
        f"Voucher is not balanced: debit {total_debit} != credit {total_credit} "
        f"(difference {total_debit - total_credit})"
    )


def account_referenced(code: str, voucher_count: int) -> str:
    """Return message when an account is still used by vouchers."""
    return (
        f"Cannot delete or recode account '{code}': it is referenced by "
        f"{voucher_count} voucher{'s' if voucher_count != 1 else ''}."
    )


def invalid_transition(kind: str, current: str, requested: str) -> str:
    return f"Cannot change {kind} status from '{current}' to '{requested}'"
