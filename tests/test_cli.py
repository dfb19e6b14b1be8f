"""Tests for CLI commands."""

import pytest
from ledgerit.cli.main import cli


@pytest.fixture
def run(cli_runner, temp_db):
    """Invoke the CLI against the temporary database."""

    def invoke(*args):
        return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args])

    return invoke


class TestAccountCommands:
    """Tests for account commands."""

    def test_account_create(self, run):
        result = run("account", "create", "Expense", "Office supplies")

        assert result.exit_code == 0
        assert "Created account 'Office supplies' (ID: 00000500)" in result.output

    def test_account_create_explicit_id(self, run):
        result = run("account", "create", "current-liability", "Card", "--id", "210")

        assert result.exit_code == 0
        assert "(ID: 00000210)" in result.output

    def test_account_create_bad_type(self, run):
        result = run("account", "create", "Goodwill", "Brand")

        assert result.exit_code == 1
        assert "Unknown account type" in result.output

    def test_account_create_out_of_range(self, run):
        result = run("account", "create", "Expense", "Travel", "--id", "200")

        assert result.exit_code == 1
        assert "outside the Expense range" in result.output

    def test_account_list(self, run):
        result = run("account", "list")

        assert result.exit_code == 0
        assert "00000100" in result.output
        assert "Cash" in result.output

    def test_account_show(self, run):
        result = run("account", "show", "Cash")

        assert result.exit_code == 0
        assert "Balance:  0.00" in result.output

    def test_account_show_unknown(self, run):
        result = run("account", "show", "999")

        assert result.exit_code == 1
        assert "Account 999 not found" in result.output

    def test_archive_and_unarchive(self, run):
        run("account", "create", "Expense", "Old")

        assert "Archived account 'Old'" in run("account", "archive", "Old").output
        assert "Old" not in run("account", "list").output
        assert "archived" in run("account", "list", "--all").output
        assert run("account", "unarchive", "00000500").exit_code == 0

    def test_confidential(self, run):
        assert "is now confidential" in run("account", "confidential", "100").output
        assert "is now not confidential" in run("account", "confidential", "100", "--off").output


class TestJournalCommands:
    """Tests for journal commands."""

    @pytest.fixture(autouse=True)
    def liability(self, run):
        run("account", "create", "CurrentLiability", "Loan")

    def test_post(self, run):
        result = run("journal", "post", "--entry", "100=50.00", "--entry", "Loan=-50.00", "-n", "Loan in")

        assert result.exit_code == 0
        assert "Posted journal 00000001 with 2 entries" in result.output
        assert "00000100 50.00" in run("ledger", "balance", "100").output

    def test_post_unbalanced(self, run):
        result = run("journal", "post", "--entry", "100=50.00", "--entry", "200=-49.99")

        assert result.exit_code == 1
        assert "do not balance" in result.output
        assert "00000100 0.00" in run("ledger", "balance", "100").output

    def test_post_bad_entry_syntax(self, run):
        result = run("journal", "post", "--entry", "100:50", "--entry", "200=-50")

        assert result.exit_code == 1
        assert "ACCOUNT=AMOUNT" in result.output

    def test_post_amount_too_large(self, run):
        result = run("journal", "post", "--entry", "100=99999999999999999999.00", "--entry", "Cash=-99999999999999999999.00")

        assert result.exit_code == 1
        assert "Error: Amount" in result.output
        assert "outside the storable range" in result.output

    def test_post_bad_amount(self, run):
        result = run("journal", "post", "--entry", "100=abc", "--entry", "200=-50")

        assert result.exit_code == 1
        assert "Could not parse amount" in result.output

    def test_show_and_reverse(self, run):
        run("journal", "post", "--entry", "100=10.00", "--entry", "200=-10.00", "-n", "Typo")

        shown = run("journal", "show", "1")
        assert shown.exit_code == 0
        assert "Typo" in shown.output
        assert "10.00" in shown.output

        reversed_ = run("journal", "reverse", "1")
        assert "reversing 00000001" in reversed_.output
        assert "00000100 0.00" in run("ledger", "balance", "100").output

    def test_show_missing_journal(self, run):
        result = run("journal", "show", "99")

        assert result.exit_code == 1
        assert "Journal 99 not found" in result.output

    def test_batch(self, run):
        created = run("batch", "create", "--date", "2024-03-15")
        assert "Created batch 00000001 dated 2024-03-15" in created.output

        run("journal", "post", "--entry", "100=1.00", "--entry", "200=-1.00", "--batch", "1")
        shown = run("batch", "show", "1")
        assert shown.exit_code == 0
        assert "Journal 00000001" in shown.output

    def test_entries(self, run):
        run("journal", "post", "--entry", "100=1.00", "--entry", "200=-1.00", "-n", "First")
        run("journal", "post", "--entry", "100=2.00", "--entry", "200=-2.00", "-n", "Second")

        result = run("ledger", "entries", "Cash")

        assert result.exit_code == 0
        assert "First" in result.output
        assert "3.00" in result.output

    def test_entries_none(self, run):
        assert "No entries found." in run("ledger", "entries", "100").output


class TestStatementAndReconcile:
    """Tests for statement and reconcile commands."""

    def test_add_list_and_reconcile(self, run):
        run("account", "create", "CurrentLiability", "Loan")
        run("batch", "create", "--date", "2024-03-15")
        run("journal", "post", "--entry", "100=50.00", "--entry", "200=-50.00", "--batch", "1", "-n", "Deposit")

        added = run("statement", "add", "--account", "100", "--amount", "50.00", "--description", "DEPOSIT", "--date", "2024-03-16")
        assert added.exit_code == 0
        assert "DEPOSIT" in run("statement", "list", "100").output

        result = run("reconcile", "100")
        assert result.exit_code == 0
        assert "Matched: 1" in result.output
        assert "Reconciled." in result.output

    def test_reconcile_reports_leftovers(self, run):
        run("statement", "add", "--account", "100", "--amount", "-3.00", "--description", "Fee")

        result = run("reconcile", "Cash")

        assert "Statement lines without an entry: 1" in result.output
        assert "Not reconciled." in result.output

    def test_import(self, run, fixtures_dir):
        result = run("statement", "import", str(fixtures_dir / "sample_statement.csv"), "--account", "100")

        assert result.exit_code == 0
        assert "Imported 3 statement lines" in result.output
        assert "Row 5: Missing amount" in result.output


class TestReportCommands:
    """Tests for report and settings commands."""

    def test_entity_name_and_balance_sheet(self, run):
        assert "(not set)" in run("settings", "entity-name").output
        run("settings", "entity-name", "Acme Ltd")
        assert "Acme Ltd" in run("settings", "entity-name").output

        result = run("report", "balance-sheet")

        assert result.exit_code == 0
        assert "Acme Ltd" in result.output
        assert "Net current assets" in result.output
