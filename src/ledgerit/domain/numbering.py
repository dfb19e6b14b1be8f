"""Account number allocation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from ledgerit.domain.entities import AccountType
from ledgerit.domain.errors import RangeExhausted, range_exhausted

if TYPE_CHECKING:
    from ledgerit.database.base import Database

logger = logging.getLogger(__name__)


class NumberAllocator:
    """Hands out account IDs from each type's range.

    Each type has a persisted counter holding the next free ID. Allocation
    is a single storage transaction, so an ID is never handed out twice and
    is never returned to the pool, even when the caller fails to use it.
    """

    def __init__(self, db: Database):
        """Initialize number allocator.

        Args:
            db: Database instance
        """
        self.db = db

    def allocate(self, account_type: AccountType | str) -> int:
        """Consume and return the next ID for a type.

        Args:
            account_type: Account type or type name

        Returns:
            Newly allocated account ID

        Raises:
            InvalidAccountType: If the type is unknown
            RangeExhausted: If the type's range has no IDs left
        """
        account_type = AccountType.parse(account_type)
        low, high = account_type.id_range
        account_id = self.db.allocate_counter(account_type.counter_name, high)
        if account_id is None:
            logger.warning("Account range exhausted for %s", account_type.value)
            raise RangeExhausted(range_exhausted(account_type.value, low, high))
        logger.debug("Allocated account ID %d for %s", account_id, account_type.value)
        return account_id

    def peek(self, account_type: AccountType | str) -> Optional[int]:
        """Return the next ID for a type without consuming it, or None if exhausted."""
        account_type = AccountType.parse(account_type)
        next_id = self.db.get_setting_int(account_type.counter_name)
        if next_id is None or not account_type.contains(next_id):
            return None
        return next_id

    def remaining(self, account_type: AccountType | str) -> int:
        """Return how many IDs are left in a type's range."""
        account_type = AccountType.parse(account_type)
        next_id = self.peek(account_type)
        if next_id is None:
            return 0
        return account_type.id_range[1] - next_id + 1
