"""Utility for resolving account names to IDs."""

from ledgerit.domain.account import AccountService
from ledgerit.domain.errors import AccountNotFound, ValidationError


def resolve_account(account_service: AccountService, account: str | int) -> int:
    """Resolve account name or ID to account ID.

    Args:
        account_service: AccountService instance
        account: Account name, or ID as an int or digit string (zero-padded
            IDs such as "00000200" are accepted)

    Returns:
        Account ID

    Raises:
        AccountNotFound: If no account matches
        ValidationError: If the name matches more than one account
    """
    if isinstance(account, int):
        return account_service.get_account(account).id

    text = account.strip()
    if text.isdigit():
        return account_service.get_account(int(text)).id

    matches = [
        acc.id for acc in account_service.list_accounts(include_archived=True) if acc.name == text
    ]
    if not matches:
        raise AccountNotFound(f"Account '{text}' not found")
    if len(matches) > 1:
        ids = ", ".join(str(i) for i in matches)
        raise ValidationError(f"Account name '{text}' is ambiguous (IDs: {ids}); use an ID")
    return matches[0]
