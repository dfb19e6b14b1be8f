"""Tests for balances and entry histories."""

import pytest
from datetime import date

from ledgerit.domain.errors import AccountNotFound, StorageTransactionFailure


@pytest.fixture
def posted_history(journal_service, liability_account, expense_account):
    """Post three journals touching Cash and return them."""
    return [
        journal_service.post("Loan", [(100, 10000), (200, -10000)]),
        journal_service.post("Paper", [(500, 2500), (100, -2500)]),
        journal_service.post("Ink", [(500, 1000), (200, -1000)]),
    ]


class TestBalances:
    """Tests for LedgerService balances."""

    def test_balance_of_new_account_is_zero(self, ledger_service):
        assert ledger_service.balance(100) == 0

    def test_balance(self, ledger_service, posted_history):
        assert ledger_service.balance(100) == 7500
        assert ledger_service.balance(200) == -11000
        assert ledger_service.balance(500) == 3500

    def test_balance_as_of_journal(self, ledger_service, posted_history):
        first, second, _ = posted_history
        assert ledger_service.balance(100, as_of=first.id) == 10000
        assert ledger_service.balance(200, as_of=second.id) == -10000

    def test_balance_missing_account(self, ledger_service):
        with pytest.raises(AccountNotFound):
            ledger_service.balance(999)

    def test_total_beyond_64_bits_is_storage_failure(self, ledger_service, journal_service, liability_account):
        for _ in range(2):
            journal_service.post("Max", [(100, 2**63 - 1), (200, -(2**63 - 1))])

        with pytest.raises(StorageTransactionFailure):
            ledger_service.balance(100)

    def test_account_detail(self, ledger_service, posted_history):
        detail = ledger_service.account_detail(100)

        assert detail.total_debits == 10000
        assert detail.total_credits == 2500
        assert detail.balance == 7500

    def test_all_balances_sum_to_zero(self, ledger_service, posted_history):
        balances = ledger_service.account_balances(include_archived=True)

        assert [b.account.id for b in balances] == [100, 200, 500]
        assert sum(b.balance for b in balances) == 0

    def test_account_balances_skip_archived(self, ledger_service, account_service, posted_history):
        account_service.archive(500)
        assert [b.account.id for b in ledger_service.account_balances()] == [100, 200]


class TestEntryHistory:
    """Tests for LedgerService.entries."""

    def test_entries_in_journal_order(self, ledger_service, posted_history):
        history = list(ledger_service.entries(100))

        assert [e.journal_id for e in history] == [posted_history[0].id, posted_history[1].id]
        assert [e.amount for e in history] == [10000, -2500]
        assert [e.unstructured_narrative for e in history] == ["Loan", "Paper"]

    def test_history_is_restartable(self, ledger_service, posted_history):
        history = ledger_service.entries(200)
        assert list(history) == list(history)

    def test_history_sees_later_postings(self, ledger_service, journal_service, posted_history):
        history = ledger_service.entries(100)
        assert len(list(history)) == 2

        journal_service.post("Refund", [(100, 300), (500, -300)])
        assert len(list(history)) == 3

    def test_after_and_until(self, ledger_service, posted_history):
        first, second, third = posted_history

        assert [e.journal_id for e in ledger_service.entries(200, after=first.id)] == [third.id]
        assert [e.journal_id for e in ledger_service.entries(200, until=first.id)] == [first.id]
        assert list(ledger_service.entries(100, after=third.id)) == []

    def test_paging_returns_every_entry_once(self, ledger_service, journal_service, liability_account):
        for i in range(7):
            journal_service.post(f"J{i}", [(100, i + 1), (200, -(i + 1))])

        history = list(ledger_service.entries(100, page_size=3))

        assert [e.amount for e in history] == [1, 2, 3, 4, 5, 6, 7]
        assert len({e.id for e in history}) == 7

    def test_same_account_twice_in_one_journal(self, ledger_service, journal_service, liability_account):
        journal_service.post("Split", [(100, 5), (100, 5), (200, -10)])

        history = list(ledger_service.entries(100, page_size=1))
        assert [e.amount for e in history] == [5, 5]

    def test_entry_date_comes_from_batch(self, ledger_service, journal_service, liability_account, dated_batch):
        journal_service.post("Dated", [(100, 1), (200, -1)], batch_id=dated_batch.id)
        journal_service.post("Undated", [(100, 1), (200, -1)])

        dates = [e.date for e in ledger_service.entries(100)]
        assert dates == [date(2024, 3, 15), None]

    def test_entries_missing_account(self, ledger_service):
        with pytest.raises(AccountNotFound):
            ledger_service.entries(999)


class TestBalanceSheet:
    """Tests for LedgerService.balance_sheet."""

    def test_balance_sheet(self, ledger_service, account_service, journal_service, liability_account):
        account_service.create_account("CurrentAsset", "Receivables")
        journal_service.post("Loan", [(100, 10000), (200, -10000)])
        journal_service.post("Invoice", [(120, 400), (100, -400)])
        ledger_service.set_entity_name("Acme Ltd")

        sheet = ledger_service.balance_sheet()

        assert sheet.entity_name == "Acme Ltd"
        assert [b.account.id for b in sheet.cash] == [100]
        assert sheet.total_cash == 9600
        assert sheet.total_current_assets == 10000
        assert sheet.total_current_liabilities == -10000
        assert sheet.net_assets == 0

    def test_entity_name_unset(self, ledger_service):
        assert ledger_service.entity_name() is None
        assert ledger_service.balance_sheet().entity_name is None

    def test_entity_name_can_be_changed(self, ledger_service):
        ledger_service.set_entity_name("Old")
        ledger_service.set_entity_name("New")
        assert ledger_service.entity_name() == "New"
