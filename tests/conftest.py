"""Shared pytest fixtures for ledgerit tests."""

import tempfile
import os
from datetime import date
from pathlib import Path
import pytest

from ledgerit.database.factories import create_sqlite_database
from ledgerit.domain.account import AccountService
from ledgerit.domain.journal import JournalService
from ledgerit.domain.ledger import LedgerService
from ledgerit.domain.numbering import NumberAllocator
from ledgerit.domain.reconciliation import ReconciliationService
from ledgerit.domain.statement import StatementService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def allocator(temp_db):
    """Create a NumberAllocator with a temporary database."""
    return NumberAllocator(temp_db)


@pytest.fixture
def journal_service(temp_db):
    """Create a JournalService with a temporary database."""
    return JournalService(temp_db)


@pytest.fixture
def ledger_service(temp_db):
    """Create a LedgerService with a temporary database."""
    return LedgerService(temp_db)


@pytest.fixture
def statement_service(temp_db):
    """Create a StatementService with a temporary database."""
    return StatementService(temp_db)


@pytest.fixture
def reconciliation_service(temp_db):
    """Create a ReconciliationService with a temporary database."""
    return ReconciliationService(temp_db)


@pytest.fixture
def liability_account(account_service):
    """Create a current liability account (gets ID 200 in a fresh ledger)."""
    return account_service.create_account("CurrentLiability", "Accounts payable")


@pytest.fixture
def expense_account(account_service):
    """Create an expense account (gets ID 500 in a fresh ledger)."""
    return account_service.create_account("Expense", "Office supplies")


@pytest.fixture
def dated_batch(journal_service):
    """Create a batch dated 2024-03-15."""
    return journal_service.create_batch(date(2024, 3, 15))


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
