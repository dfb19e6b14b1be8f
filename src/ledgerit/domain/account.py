"""Account domain service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from ledgerit.domain.entities import (
    ACCOUNT_NAME_MAX_LENGTH,
    Account as AccountEntity,
    AccountType,
)
from ledgerit.domain.errors import (
    AccountExists,
    AccountNotFound,
    InvalidAccountId,
    InvalidAccountName,
    account_id_out_of_range,
    account_not_found,
    text_too_long,
)
from ledgerit.domain.numbering import NumberAllocator

if TYPE_CHECKING:
    from ledgerit.database.base import Database

logger = logging.getLogger(__name__)


class AccountService:
    """Service for managing accounts."""

    def __init__(self, db: Database, allocator: Optional[NumberAllocator] = None):
        """Initialize account service.

        Args:
            db: Database instance
            allocator: Number allocator (defaults to one over the same database)
        """
        self.db = db
        self.allocator = allocator if allocator is not None else NumberAllocator(db)

    def create_account(
        self,
        account_type: AccountType | str,
        name: str,
        account_id: Optional[int] = None,
    ) -> AccountEntity:
        """Create a new account.

        Args:
            account_type: Account type or type name
            name: Account name (1-140 characters)
            account_id: Optional explicit ID within the type's range. When
                omitted, the next ID is taken from the number allocator.

        Returns:
            Created account entity

        Raises:
            InvalidAccountType: If the type is unknown
            InvalidAccountName: If the name is empty or too long
            InvalidAccountId: If an explicit ID is outside the type's range
            AccountExists: If an explicit ID is already taken
            RangeExhausted: If the type's range has no IDs left
        """
        account_type = AccountType.parse(account_type)
        name = self._validate_name(name)

        if account_id is not None:
            if not account_type.contains(account_id):
                low, high = account_type.id_range
                raise InvalidAccountId(
                    account_id_out_of_range(account_id, account_type.value, low, high)
                )
            account = self.db.create_account(account_id, name, account_type)
        else:
            account = self._create_with_allocated_id(account_type, name)

        logger.info("Created account %d '%s' (%s)", account.id, account.name, account_type.value)
        return account

    def _create_with_allocated_id(self, account_type: AccountType, name: str) -> AccountEntity:
        # IDs taken by explicit creation are skipped; each skipped ID stays consumed.
        while True:
            account_id = self.allocator.allocate(account_type)
            try:
                return self.db.create_account(account_id, name, account_type)
            except AccountExists:
                logger.debug("Account ID %d already taken, allocating another", account_id)

    @staticmethod
    def _validate_name(name: str) -> str:
        if not isinstance(name, str) or not name.strip():
            raise InvalidAccountName("Account name must not be empty")
        name = name.strip()
        if len(name) > ACCOUNT_NAME_MAX_LENGTH:
            raise InvalidAccountName(text_too_long("Account name", ACCOUNT_NAME_MAX_LENGTH))
        return name

    def get_account(self, account_id: int) -> AccountEntity:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity

        Raises:
            AccountNotFound: If the account does not exist
        """
        account = self.db.get_account(account_id)
        if account is None:
            raise AccountNotFound(account_not_found(account_id))
        return account

    def find_account(self, account_id: int) -> Optional[AccountEntity]:
        """Get account by ID, or None if it does not exist."""
        return self.db.get_account(account_id)

    def list_accounts(self, include_archived: bool = False) -> list[AccountEntity]:
        """List accounts ordered by ID.

        Args:
            include_archived: If True, archived accounts are included

        Returns:
            List of account entities
        """
        return self.db.list_accounts(include_archived=include_archived)

    def archive(self, account_id: int) -> AccountEntity:
        """Mark an account archived. Archived accounts still accept postings."""
        account = self.db.update_account_flags(account_id, archived=True)
        logger.info("Archived account %d", account_id)
        return account

    def unarchive(self, account_id: int) -> AccountEntity:
        """Clear an account's archived flag."""
        account = self.db.update_account_flags(account_id, archived=False)
        logger.info("Unarchived account %d", account_id)
        return account

    def set_confidential(self, account_id: int, confidential: bool = True) -> AccountEntity:
        """Set or clear an account's confidential flag."""
        return self.db.update_account_flags(account_id, confidential=confidential)
