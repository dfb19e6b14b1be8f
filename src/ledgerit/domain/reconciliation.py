"""Bank reconciliation domain service.

Matches bank statement lines to the ledger entries of one account. Matching
is one-to-one: a ledger entry confirms at most one statement line. The
result is a derived report and nothing is written back to storage.
"""

from __future__ import annotations

import logging
from difflib import SequenceMatcher
from typing import TYPE_CHECKING, Iterable, Optional

from ledgerit.domain.entities import (
    AmbiguousLine,
    BankStatementEntry,
    LedgerEntry,
    ReconciliationReport,
    StatementMatch,
)
from ledgerit.domain.errors import ValidationError
from ledgerit.domain.ledger import LedgerService
from ledgerit.domain.statement import StatementService

if TYPE_CHECKING:
    from ledgerit.database.base import Database

logger = logging.getLogger(__name__)

DEFAULT_DATE_WINDOW_DAYS = 7


def narrative_similarity(a: str, b: str) -> float:
    """Return a 0.0-1.0 similarity ratio of two narratives, ignoring case."""
    a = (a or "").strip().lower()
    b = (b or "").strip().lower()
    if not a and not b:
        return 1.0
    return SequenceMatcher(None, a, b).ratio()


class ReconciliationService:
    """Service for reconciling statement lines against posted entries."""

    def __init__(self, db: Database):
        """Initialize reconciliation service.

        Args:
            db: Database instance
        """
        self.db = db
        self.ledger = LedgerService(db)
        self.statements = StatementService(db)

    def reconcile(
        self,
        account_id: int,
        statement_entries: Optional[Iterable[BankStatementEntry]] = None,
        invert_sign: bool = False,
        date_window_days: int = DEFAULT_DATE_WINDOW_DAYS,
    ) -> ReconciliationReport:
        """Match statement lines to an account's ledger entries.

        A candidate entry has the same amount as the line (after optional
        sign inversion) and, when both dates are known, lies within
        date_window_days of it. Candidates are ranked by date distance,
        then narrative similarity, then journal ID. Entries without a date,
        or lines without one, rank after every dated candidate. When the
        two best candidates are indistinguishable the line is reported as
        ambiguous and nothing is claimed.

        Args:
            account_id: Account to reconcile
            statement_entries: Lines to match, in processing order. When
                None, the account's stored statement lines are used.
            invert_sign: Negate statement amounts before matching, for banks
                that print deposits as negative numbers
            date_window_days: Largest date distance for a candidate

        Returns:
            ReconciliationReport

        Raises:
            AccountNotFound: If the account does not exist
            ValidationError: If a line belongs to another account or the
                window is negative
        """
        if date_window_days < 0:
            raise ValidationError("Date window must not be negative")

        entries = list(self.ledger.entries(account_id))
        if statement_entries is None:
            lines = self.statements.list_entries(account_id)
        else:
            lines = list(statement_entries)
            for line in lines:
                if line.account != account_id:
                    raise ValidationError(
                        f"Statement line {line.id} belongs to account {line.account}, "
                        f"not {account_id}"
                    )

        claimed: set[int] = set()
        matches: list[StatementMatch] = []
        ambiguous: list[AmbiguousLine] = []
        unmatched_lines: list[BankStatementEntry] = []

        for line in lines:
            amount = -line.amt if invert_sign else line.amt
            ranked = sorted(
                (
                    (self._rank(line, entry), entry)
                    for entry in entries
                    if entry.id not in claimed
                    and entry.amount == amount
                    and self._within_window(line, entry, date_window_days)
                ),
                key=lambda pair: pair[0],
            )

            if not ranked:
                logger.debug("Statement line %d has no candidate", line.id)
                unmatched_lines.append(line)
                continue

            best_rank, best = ranked[0]
            tied = [entry for rank, entry in ranked if rank[:3] == best_rank[:3]]
            if len(tied) > 1:
                logger.debug(
                    "Statement line %d is ambiguous between %d entries", line.id, len(tied)
                )
                ambiguous.append(AmbiguousLine(statement_entry=line, candidates=tuple(tied)))
                continue

            claimed.add(best.id)
            logger.debug("Statement line %d matched entry %d", line.id, best.id)
            matches.append(StatementMatch(statement_entry=line, entry=best))

        report = ReconciliationReport(
            account_id=account_id,
            matches=tuple(matches),
            ambiguous=tuple(ambiguous),
            unmatched_statement_entries=tuple(unmatched_lines),
            unmatched_entries=tuple(e for e in entries if e.id not in claimed),
        )
        logger.info(
            "Reconciled account %d: %d matched, %d ambiguous, %d lines and %d entries unmatched",
            account_id,
            len(report.matches),
            len(report.ambiguous),
            len(report.unmatched_statement_entries),
            len(report.unmatched_entries),
        )
        return report

    @staticmethod
    def _within_window(line: BankStatementEntry, entry: LedgerEntry, window: int) -> bool:
        if line.date is None or entry.date is None:
            return True
        return abs((entry.date - line.date).days) <= window

    @staticmethod
    def _rank(line: BankStatementEntry, entry: LedgerEntry) -> tuple:
        # (undated, distance, -similarity, journal)
        if line.date is None or entry.date is None:
            undated, distance = 1, 0
        else:
            undated, distance = 0, abs((entry.date - line.date).days)
        similarity = narrative_similarity(line.unstructured_narrative, entry.unstructured_narrative)
        return (undated, distance, -similarity, entry.journal_id, entry.id)
