"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class StorageError(DomainError):
    """The backing store could not complete an operation."""


class InvalidAccountType(ValidationError):
    """Account type is not one of the known classifications."""


class InvalidAccountName(ValidationError):
    """Account name is empty or too long."""


class InvalidAccountId(ValidationError):
    """Explicit account ID lies outside its type's range."""


class InvalidNarrative(ValidationError):
    """Narrative text is too long."""


class UnbalancedJournal(ValidationError):
    """Journal entries do not sum to zero or have fewer than two legs."""


class AccountNotFound(NotFoundError):
    """Account ID does not resolve."""


class JournalNotFound(NotFoundError):
    """Journal ID does not resolve."""


class BatchNotFound(NotFoundError):
    """Batch ID does not resolve."""


class AccountExists(ConflictError):
    """An account with the requested ID already exists."""


class RangeExhausted(ConflictError):
    """No account numbers remain in a type's range."""


class StorageTransactionFailure(StorageError):
    """A storage transaction failed and was rolled back."""


def account_not_found(account_id: int) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def journal_not_found(journal_id: int) -> str:
    """Return message for missing journal."""
    return f"Journal {journal_id} not found"


def batch_not_found(batch_id: int) -> str:
    """Return message for missing batch."""
    return f"Batch {batch_id} not found"


def account_exists(account_id: int) -> str:
    """Return message for an account ID that is already taken."""
    return f"Account {account_id} already exists"


def invalid_account_type(account_type: object) -> str:
    """Return message for an unknown account type."""
    return f"Unknown account type '{account_type}'"


def account_id_out_of_range(account_id: int, type_name: str, low: int, high: int) -> str:
    """Return message for an explicit account ID outside its type's range."""
    return f"Account ID {account_id} is outside the {type_name} range {low}-{high}"


def range_exhausted(type_name: str, low: int, high: int) -> str:
    """Return message when a type's numbering range is used up."""
    return f"No account numbers left for {type_name} (range {low}-{high})"


def text_too_long(field: str, limit: int) -> str:
    """Return message for text exceeding its column limit."""
    return f"{field} must be at most {limit} characters"


def too_few_entries(count: int) -> str:
    """Return message for a journal with fewer than two legs."""
    return (
        f"Journal has {count} entr{'y' if count == 1 else 'ies'}; "
        "at least 2 are required to balance"
    )


def journal_does_not_balance(total: int) -> str:
    """Return message for a journal whose amounts do not sum to zero."""
    return f"Journal entries do not balance: they sum to {total}, expected 0"


def amount_out_of_range(amount: int, low: int, high: int) -> str:
    """Return message for an amount the ledger cannot store."""
    return f"Amount {amount} is outside the storable range {low} to {high}"
