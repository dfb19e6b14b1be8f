"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the domain entities stay stable
when the table layout changes.
"""

from ledgerit.domain import entities as domain
from ledgerit.database.models import (
    Account as ORMAccount,
    Batch as ORMBatch,
    Journal as ORMJournal,
    Entry as ORMEntry,
    BankStatementEntry as ORMBankStatementEntry,
)


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        name=orm_account.name,
        type=domain.AccountType.parse(orm_account.type),
        archived=bool(orm_account.archived),
        confidential=bool(orm_account.confidential),
    )


def batch_to_domain(orm_batch: ORMBatch) -> domain.Batch:
    """Convert SQLAlchemy Batch model to domain Batch entity."""
    return domain.Batch(id=orm_batch.id, date=orm_batch.date)


def journal_to_domain(orm_journal: ORMJournal) -> domain.Journal:
    """Convert SQLAlchemy Journal model to domain Journal entity."""
    return domain.Journal(
        id=orm_journal.id,
        batch_id=orm_journal.batch_id,
        unstructured_narrative=orm_journal.unstructured_narrative or "",
    )


def entry_to_domain(orm_entry: ORMEntry) -> domain.Entry:
    """Convert SQLAlchemy Entry model to domain Entry entity."""
    return domain.Entry(
        id=orm_entry.id,
        journal_id=orm_entry.journal_id,
        account_id=orm_entry.account_id,
        amount=orm_entry.amount,
    )


def posted_journal_to_domain(orm_journal: ORMJournal) -> domain.PostedJournal:
    """Convert a SQLAlchemy Journal and its entries to a PostedJournal."""
    return domain.PostedJournal(
        journal=journal_to_domain(orm_journal),
        entries=tuple(entry_to_domain(e) for e in orm_journal.entries),
    )


def ledger_entry_to_domain(
    orm_entry: ORMEntry, orm_journal: ORMJournal, orm_batch: ORMBatch | None
) -> domain.LedgerEntry:
    """Convert an entry row joined with its journal and batch to a LedgerEntry."""
    return domain.LedgerEntry(
        entry=entry_to_domain(orm_entry),
        unstructured_narrative=orm_journal.unstructured_narrative or "",
        batch_id=orm_journal.batch_id,
        date=orm_batch.date if orm_batch is not None else None,
    )


def statement_entry_to_domain(orm_line: ORMBankStatementEntry) -> domain.BankStatementEntry:
    """Convert SQLAlchemy BankStatementEntry model to domain entity."""
    return domain.BankStatementEntry(
        id=orm_line.id,
        account=orm_line.account,
        amt=orm_line.amt,
        unstructured_narrative=orm_line.unstructured_narrative or "",
        date=orm_line.date,
    )
