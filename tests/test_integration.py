"""Integration tests for end-to-end workflows."""

from datetime import date

from ledgerit.cli.main import cli
from ledgerit.domain.entities import JournalRequest


def test_full_workflow(cli_runner, temp_db, fixtures_dir):
    """Test complete workflow: accounts -> journals -> statement -> reconcile -> report."""
    base = ["--db-path", temp_db.database_path]

    # Step 1: Create accounts
    for args in (
        ["CurrentLiability", "Supplier"],
        ["Expense", "Office supplies"],
        ["Revenue", "Sales"],
    ):
        result = cli_runner.invoke(cli, base + ["account", "create", *args])
        assert result.exit_code == 0

    # Step 2: Post a dated batch of journals
    result = cli_runner.invoke(cli, base + ["batch", "create", "--date", "2024-03-15"])
    assert result.exit_code == 0
    for entries, narrative in (
        (["100=1000.00", "Sales=-1000.00"], "Customer payment"),
        (["Office supplies=12.50", "100=-12.50"], "Office supplies"),
        (["100=-2.00", "Office supplies=2.00"], "Bank fee"),
    ):
        args = ["journal", "post", "--batch", "1", "-n", narrative]
        for entry in entries:
            args += ["--entry", entry]
        result = cli_runner.invoke(cli, base + args)
        assert result.exit_code == 0, result.output

    # Step 3: Import the bank statement
    result = cli_runner.invoke(
        cli, base + ["statement", "import", str(fixtures_dir / "sample_statement.csv"), "--account", "Cash"]
    )
    assert result.exit_code == 0

    # Step 4: Reconcile
    result = cli_runner.invoke(cli, base + ["reconcile", "Cash"])
    assert result.exit_code == 0
    assert "Matched: 3" in result.output
    assert "Reconciled." in result.output

    # Step 5: Balance sheet
    result = cli_runner.invoke(cli, base + ["report", "balance-sheet"])
    assert result.exit_code == 0
    assert "985.50" in result.output


def test_services_share_one_ledger(temp_db, account_service, journal_service, ledger_service):
    """Test that a batch posted through the service is visible to every reader."""
    supplier = account_service.create_account("CurrentLiability", "Supplier")
    expense = account_service.create_account("Expense", "Stationery")

    batch, posted = journal_service.post_batch(
        [
            JournalRequest(entries=((expense.id, 1250), (supplier.id, -1250)), unstructured_narrative="Bill"),
            JournalRequest(entries=((supplier.id, 1250), (100, -1250)), unstructured_narrative="Pay bill"),
        ],
        batch_date=date(2024, 3, 31),
    )

    assert ledger_service.balance(supplier.id) == 0
    assert ledger_service.balance(100) == -1250
    assert ledger_service.balance(100, as_of=posted[0].id) == 0
    assert [e.date for e in ledger_service.entries(expense.id)] == [batch.date]
