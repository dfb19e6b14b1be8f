"""Ledger view domain service.

Balances are never stored. They are derived from committed entries each time
they are asked for, so a reader sees either all or none of a journal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Optional

from ledgerit.domain.entities import (
    AccountBalance,
    AccountDetail,
    AccountType,
    BalanceSheet,
    LedgerEntry,
)
from ledgerit.domain.errors import AccountNotFound, account_not_found

if TYPE_CHECKING:
    from ledgerit.database.base import Database

# Setting holding the name printed on reports.
ENTITY_NAME_SETTING = "entityName"

DEFAULT_PAGE_SIZE = 500


class EntryHistory:
    """Lazy, restartable sequence of an account's entries in journal order.

    Every iteration starts a fresh read from the store and fetches entries a
    page at a time, so no read is held open while the caller consumes them.
    """

    def __init__(
        self,
        db: Database,
        account_id: int,
        after: Optional[int] = None,
        until: Optional[int] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self.db = db
        self.account_id = account_id
        self.after = after
        self.until = until
        self.page_size = page_size

    def __iter__(self) -> Iterator[LedgerEntry]:
        # Entry IDs are positive, so (after + 1, 0) starts at the first journal past `after`.
        position = (self.after + 1, 0) if self.after is not None else None
        while True:
            page = self.db.list_ledger_entries(
                self.account_id,
                after=position,
                until_journal=self.until,
                limit=self.page_size,
            )
            yield from page
            if len(page) < self.page_size:
                return
            last = page[-1]
            position = (last.journal_id, last.id)


class LedgerService:
    """Service for reading balances and entry histories."""

    def __init__(self, db: Database):
        """Initialize ledger service.

        Args:
            db: Database instance
        """
        self.db = db

    def _require_account(self, account_id: int):
        account = self.db.get_account(account_id)
        if account is None:
            raise AccountNotFound(account_not_found(account_id))
        return account

    def balance(self, account_id: int, as_of: Optional[int] = None) -> int:
        """Return an account's balance.

        Args:
            account_id: Account ID
            as_of: Optional journal ID; only journals up to and including it count

        Returns:
            Sum of entry amounts (positive is a debit balance)

        Raises:
            AccountNotFound: If the account does not exist
        """
        self._require_account(account_id)
        return self.db.sum_entries(account_id, as_of=as_of)

    def entries(
        self,
        account_id: int,
        after: Optional[int] = None,
        until: Optional[int] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> EntryHistory:
        """Return an account's entry history.

        Args:
            account_id: Account ID
            after: Only journals with a greater ID are included
            until: Only journals with an ID up to and including this are included
            page_size: Number of entries fetched per read

        Raises:
            AccountNotFound: If the account does not exist
        """
        self._require_account(account_id)
        return EntryHistory(self.db, account_id, after=after, until=until, page_size=page_size)

    def account_detail(self, account_id: int) -> AccountDetail:
        """Return debit and credit totals for an account."""
        account = self._require_account(account_id)
        debits, credits = self.db.entry_totals(account_id)
        return AccountDetail(account=account, total_debits=debits, total_credits=credits)

    def account_balances(self, include_archived: bool = False) -> list[AccountBalance]:
        """Return every account with its balance, ordered by ID."""
        return [
            AccountBalance(account=account, balance=balance)
            for account, balance in self.db.account_balances(include_archived=include_archived)
        ]

    def balance_sheet(self) -> BalanceSheet:
        """Build the current balance sheet."""
        balances = self.account_balances(include_archived=True)

        def of_type(account_type: AccountType) -> tuple[AccountBalance, ...]:
            return tuple(b for b in balances if b.account.type is account_type)

        return BalanceSheet(
            entity_name=self.entity_name(),
            cash=of_type(AccountType.CASH),
            current_assets=of_type(AccountType.CURRENT_ASSET),
            current_liabilities=of_type(AccountType.CURRENT_LIABILITY),
        )

    def entity_name(self) -> Optional[str]:
        """Return the entity name shown on reports, if set."""
        return self.db.get_setting_str(ENTITY_NAME_SETTING)

    def set_entity_name(self, name: str) -> None:
        """Set the entity name shown on reports."""
        self.db.set_setting_str(ENTITY_NAME_SETTING, name)
