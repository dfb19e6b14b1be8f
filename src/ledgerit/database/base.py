"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from datetime import date

# Import entities directly to avoid circular import through domain/__init__.py
from ledgerit.domain.entities import (
    Account,
    AccountType,
    Batch,
    BankStatementEntry,
    EntryLine,
    JournalRequest,
    LedgerEntry,
    PostedJournal,
)


class Database(ABC):
    """Abstract database interface for ledgerit.

    Every mutating method runs as a single storage transaction: it either
    commits completely or leaves no trace and raises
    StorageTransactionFailure.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Create tables and seed the Cash account and numbering counters."""
        pass

    # Account operations
    @abstractmethod
    def create_account(self, account_id: int, name: str, account_type: AccountType) -> Account:
        """Insert an account with a known ID. Raises AccountExists if taken."""
        pass

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def list_accounts(self, include_archived: bool = False) -> list[Account]:
        """List accounts ordered by ID."""
        pass

    @abstractmethod
    def missing_account_ids(self, account_ids: Sequence[int]) -> set[int]:
        """Return the subset of account_ids that do not exist."""
        pass

    @abstractmethod
    def update_account_flags(
        self,
        account_id: int,
        archived: Optional[bool] = None,
        confidential: Optional[bool] = None,
    ) -> Account:
        """Set archived and/or confidential flags. Raises AccountNotFound."""
        pass

    # Settings and counters
    @abstractmethod
    def allocate_counter(self, name: str, upper_bound: int) -> Optional[int]:
        """Atomically return and increment an integer counter.

        Returns None, without changing the counter, when its value already
        exceeds upper_bound.
        """
        pass

    @abstractmethod
    def get_setting_int(self, name: str) -> Optional[int]:
        """Get an integer setting."""
        pass

    @abstractmethod
    def get_setting_str(self, name: str) -> Optional[str]:
        """Get a string setting."""
        pass

    @abstractmethod
    def set_setting_str(self, name: str, value: str) -> None:
        """Insert or replace a string setting."""
        pass

    # Batch and journal operations
    @abstractmethod
    def create_batch(self, batch_date: date) -> Batch:
        """Create an empty batch."""
        pass

    @abstractmethod
    def get_batch(self, batch_id: int) -> Optional[Batch]:
        """Get batch by ID."""
        pass

    @abstractmethod
    def create_journal(
        self,
        unstructured_narrative: str,
        entries: Sequence[EntryLine],
        batch_id: Optional[int] = None,
    ) -> PostedJournal:
        """Insert one journal and all of its entries in one transaction."""
        pass

    @abstractmethod
    def create_batch_with_journals(
        self, batch_date: date, journals: Sequence[JournalRequest]
    ) -> tuple[Batch, list[PostedJournal]]:
        """Insert a batch and every journal in it in one transaction."""
        pass

    @abstractmethod
    def get_journal(self, journal_id: int) -> Optional[PostedJournal]:
        """Get a journal with its entries."""
        pass

    @abstractmethod
    def list_batch_journals(self, batch_id: int) -> list[PostedJournal]:
        """List journals in a batch, in creation order."""
        pass

    # Ledger queries
    @abstractmethod
    def sum_entries(self, account_id: int, as_of: Optional[int] = None) -> int:
        """Sum entry amounts for an account, optionally up to journal as_of."""
        pass

    @abstractmethod
    def entry_totals(self, account_id: int) -> tuple[int, int]:
        """Return (total debits, total credits) for an account."""
        pass

    @abstractmethod
    def account_balances(self, include_archived: bool = False) -> list[tuple[Account, int]]:
        """Return every account with its balance, ordered by ID."""
        pass

    @abstractmethod
    def list_ledger_entries(
        self,
        account_id: int,
        after: Optional[tuple[int, int]] = None,
        until_journal: Optional[int] = None,
        limit: int = 500,
    ) -> list[LedgerEntry]:
        """Return one page of an account's entries in journal order.

        Args:
            account_id: Account whose entries to read
            after: Exclusive (journal_id, entry_id) position to resume from
            until_journal: Inclusive upper bound on journal ID
            limit: Maximum number of entries in the page
        """
        pass

    # Bank statement operations
    @abstractmethod
    def create_statement_entry(
        self,
        account_id: int,
        amount: int,
        unstructured_narrative: str = "",
        entry_date: Optional[date] = None,
    ) -> BankStatementEntry:
        """Record a bank statement line."""
        pass

    @abstractmethod
    def list_statement_entries(self, account_id: int) -> list[BankStatementEntry]:
        """List statement lines for an account ordered by ID."""
        pass
