"""Property-based tests for posting and balances."""

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from ledgerit.domain.entities import AccountType, EntryLine
from ledgerit.domain.errors import RangeExhausted, UnbalancedJournal
from ledgerit.domain.journal import check_balanced
from ledgerit.utils.amount_parser import format_amount, parse_minor_units

ACCOUNTS = [100, 200, 500]

amounts = st.integers(min_value=-10**9, max_value=10**9)
legs = st.lists(st.tuples(st.sampled_from(ACCOUNTS), amounts), min_size=1, max_size=6)

db_settings = settings(
    max_examples=25,
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)


def balanced(pairs):
    """Append a closing leg so the legs sum to zero."""
    total = sum(amount for _, amount in pairs)
    return list(pairs) + [(ACCOUNTS[0], -total)]


@given(legs)
def test_closing_leg_always_balances(pairs):
    check_balanced([EntryLine(a, n) for a, n in balanced(pairs)])


@given(legs, st.integers(min_value=1, max_value=10**6))
def test_any_nonzero_total_is_rejected(pairs, offset):
    lines = [EntryLine(a, n) for a, n in balanced(pairs)]
    lines[0] = EntryLine(lines[0].account_id, lines[0].amount + offset)
    with pytest.raises(UnbalancedJournal):
        check_balanced(lines)


@given(amounts)
def test_formatted_amount_parses_back(minor):
    assert parse_minor_units(format_amount(minor)) == minor


@db_settings
@given(legs)
def test_ledger_always_sums_to_zero(journal_service, ledger_service, liability_account, expense_account, pairs):
    journal_service.post("Generated", balanced(pairs))

    balances = ledger_service.account_balances(include_archived=True)
    assert sum(b.balance for b in balances) == 0


@db_settings
@given(legs, st.integers(min_value=1, max_value=10**6))
def test_rejected_journal_changes_nothing(
    journal_service, ledger_service, liability_account, expense_account, pairs, offset
):
    before = [b.balance for b in ledger_service.account_balances(include_archived=True)]
    lines = balanced(pairs)
    lines[-1] = (lines[-1][0], lines[-1][1] + offset)

    with pytest.raises(UnbalancedJournal):
        journal_service.post("Broken", lines)

    assert [b.balance for b in ledger_service.account_balances(include_archived=True)] == before


@db_settings
@given(st.lists(st.sampled_from(["Cash", "Equity", "Expense"]), max_size=10))
def test_allocated_numbers_stay_in_range(allocator, types):
    for account_type in types:
        low, high = AccountType.parse(account_type).id_range
        try:
            account_id = allocator.allocate(account_type)
        except RangeExhausted:
            assert allocator.remaining(account_type) == 0
        else:
            assert low <= account_id <= high
