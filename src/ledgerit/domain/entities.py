"""Domain model entities for ledgerit.

These are pure data classes representing business concepts, independent of
database schema. Amounts are integers in minor currency units. Positive
amounts are debits and negative amounts are credits; an account's balance is
the plain sum of its entry amounts.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from ledgerit.domain.errors import InvalidAccountType, invalid_account_type

ACCOUNT_NAME_MAX_LENGTH = 140
NARRATIVE_MAX_LENGTH = 140

# Amounts are stored as signed 64-bit integers.
AMOUNT_MIN = -(2**63)
AMOUNT_MAX = 2**63 - 1


class AccountType(Enum):
    """Account classification. Each type owns a fixed, inclusive ID range."""

    CASH = "Cash"
    CURRENT_ASSET = "CurrentAsset"
    NON_CURRENT_ASSET = "NonCurrentAsset"
    CURRENT_LIABILITY = "CurrentLiability"
    NON_CURRENT_LIABILITY = "NonCurrentLiability"
    EQUITY = "Equity"
    REVENUE = "Revenue"
    OTHER_INCOME = "OtherIncome"
    EXPENSE = "Expense"

    @property
    def id_range(self) -> tuple[int, int]:
        """Return the (lowest, highest) account ID reserved for this type."""
        return _ID_RANGES[self]

    @property
    def counter_name(self) -> str:
        """Name of the settings row holding the next free ID."""
        return f"nextAccount{self.value}"

    def contains(self, account_id: int) -> bool:
        low, high = self.id_range
        return low <= account_id <= high

    @classmethod
    def parse(cls, value: "AccountType | str") -> "AccountType":
        """Resolve an AccountType from an enum member or a name.

        Matching ignores case, underscores, hyphens and spaces, so
        "CurrentLiability", "current_liability" and "CURRENT-LIABILITY" all
        resolve to the same member.

        Raises:
            InvalidAccountType: If the value names no known type
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidAccountType(invalid_account_type(value))
        key = value.replace("_", "").replace("-", "").replace(" ", "").lower()
        for member in cls:
            if member.value.lower() == key:
                return member
        raise InvalidAccountType(invalid_account_type(value))

    @classmethod
    def for_account_id(cls, account_id: int) -> Optional["AccountType"]:
        """Return the type whose range contains account_id, if any."""
        for member in cls:
            if member.contains(account_id):
                return member
        return None


_ID_RANGES: dict[AccountType, tuple[int, int]] = {
    AccountType.CASH: (100, 119),
    AccountType.CURRENT_ASSET: (120, 179),
    AccountType.NON_CURRENT_ASSET: (180, 199),
    AccountType.CURRENT_LIABILITY: (200, 279),
    AccountType.NON_CURRENT_LIABILITY: (280, 299),
    AccountType.EQUITY: (300, 399),
    AccountType.REVENUE: (400, 479),
    AccountType.OTHER_INCOME: (480, 499),
    AccountType.EXPENSE: (500, 599),
}


@dataclass(frozen=True)
class Account:
    """Ledger account domain entity."""

    id: int
    name: str
    type: AccountType
    archived: bool = False
    confidential: bool = False


@dataclass(frozen=True)
class Batch:
    """A dated group of journals posted together."""

    id: int
    date: date


@dataclass(frozen=True)
class Journal:
    """One balanced transaction."""

    id: int
    batch_id: Optional[int]
    unstructured_narrative: str


@dataclass(frozen=True)
class Entry:
    """One leg of a journal against one account."""

    id: int
    journal_id: int
    account_id: int
    amount: int


@dataclass(frozen=True)
class BankStatementEntry:
    """A line reported by the bank, awaiting reconciliation."""

    id: int
    account: int
    amt: int
    unstructured_narrative: str
    date: Optional[date] = None


@dataclass(frozen=True)
class EntryLine:
    """A requested journal leg before it is posted."""

    account_id: int
    amount: int


@dataclass(frozen=True)
class JournalRequest:
    """A journal awaiting posting as part of a batch."""

    entries: tuple[EntryLine, ...]
    unstructured_narrative: Optional[str] = None


@dataclass(frozen=True)
class PostedJournal:
    """A committed journal together with its entries."""

    journal: Journal
    entries: tuple[Entry, ...]

    @property
    def id(self) -> int:
        return self.journal.id

    @property
    def total(self) -> int:
        return sum(entry.amount for entry in self.entries)


@dataclass(frozen=True)
class LedgerEntry:
    """An entry with the context of its owning journal."""

    entry: Entry
    unstructured_narrative: str
    batch_id: Optional[int]
    date: Optional[date]

    @property
    def id(self) -> int:
        return self.entry.id

    @property
    def journal_id(self) -> int:
        return self.entry.journal_id

    @property
    def account_id(self) -> int:
        return self.entry.account_id

    @property
    def amount(self) -> int:
        return self.entry.amount


@dataclass(frozen=True)
class AccountDetail:
    """Debit and credit totals for one account."""

    account: Account
    total_debits: int
    total_credits: int

    @property
    def balance(self) -> int:
        return self.total_debits - self.total_credits


@dataclass(frozen=True)
class AccountBalance:
    """An account and its current balance."""

    account: Account
    balance: int


@dataclass(frozen=True)
class BalanceSheet:
    """Current position of the entity, grouped by account class."""

    entity_name: Optional[str]
    cash: tuple[AccountBalance, ...]
    current_assets: tuple[AccountBalance, ...]
    current_liabilities: tuple[AccountBalance, ...]

    @property
    def total_cash(self) -> int:
        return sum(item.balance for item in self.cash)

    @property
    def total_current_assets(self) -> int:
        """Cash plus other current assets."""
        return self.total_cash + sum(item.balance for item in self.current_assets)

    @property
    def total_current_liabilities(self) -> int:
        return sum(item.balance for item in self.current_liabilities)

    @property
    def net_assets(self) -> int:
        # Liabilities carry credit (negative) balances.
        return self.total_current_assets + self.total_current_liabilities


@dataclass(frozen=True)
class StatementMatch:
    """A statement line paired with the ledger entry it confirms."""

    statement_entry: BankStatementEntry
    entry: LedgerEntry


@dataclass(frozen=True)
class AmbiguousLine:
    """A statement line with several equally plausible ledger entries."""

    statement_entry: BankStatementEntry
    candidates: tuple[LedgerEntry, ...]


@dataclass(frozen=True)
class ReconciliationReport:
    """Outcome of matching a statement against an account's entries."""

    account_id: int
    matches: tuple[StatementMatch, ...] = ()
    ambiguous: tuple[AmbiguousLine, ...] = ()
    unmatched_statement_entries: tuple[BankStatementEntry, ...] = ()
    unmatched_entries: tuple[LedgerEntry, ...] = ()

    @property
    def is_reconciled(self) -> bool:
        """True when every line and every entry found a partner."""
        return not (self.ambiguous or self.unmatched_statement_entries or self.unmatched_entries)


@dataclass(frozen=True)
class ImportResult:
    """Statistics from a statement import."""

    imported: tuple[BankStatementEntry, ...] = ()
    errors: tuple[str, ...] = ()
