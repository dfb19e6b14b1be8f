"""Journal posting domain service."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional, Sequence

from ledgerit.domain.entities import (
    AMOUNT_MAX,
    AMOUNT_MIN,
    NARRATIVE_MAX_LENGTH,
    Batch as BatchEntity,
    EntryLine,
    JournalRequest,
    PostedJournal,
)
from ledgerit.domain.errors import (
    AccountNotFound,
    BatchNotFound,
    InvalidNarrative,
    JournalNotFound,
    UnbalancedJournal,
    ValidationError,
    account_not_found,
    amount_out_of_range,
    batch_not_found,
    journal_does_not_balance,
    journal_not_found,
    text_too_long,
    too_few_entries,
)

if TYPE_CHECKING:
    from ledgerit.database.base import Database

logger = logging.getLogger(__name__)

EntryInput = EntryLine | tuple[int, int] | Mapping[str, Any]


def validate_narrative(narrative: Optional[str]) -> str:
    """Return the narrative to store, or raise InvalidNarrative if too long."""
    if narrative is None:
        return ""
    if len(narrative) > NARRATIVE_MAX_LENGTH:
        raise InvalidNarrative(text_too_long("Narrative", NARRATIVE_MAX_LENGTH))
    return narrative


def validate_amount(amount: Any, label: str = "Entry amount") -> int:
    """Return amount if it is an integer the ledger can store.

    Raises:
        ValidationError: If amount is not an int or is outside the signed
            64-bit range
    """
    # bool is an int subclass but never a valid amount
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValidationError(f"{label} must be an integer number of minor units, got {amount!r}")
    if not AMOUNT_MIN <= amount <= AMOUNT_MAX:
        raise ValidationError(amount_out_of_range(amount, AMOUNT_MIN, AMOUNT_MAX))
    return amount


def to_entry_line(value: EntryInput) -> EntryLine:
    """Coerce an EntryLine, (account, amount) pair or mapping into an EntryLine.

    Mappings may name the account as "account" (the journal submission
    format) or "account_id".

    Raises:
        ValidationError: If the value has the wrong shape, the account is not
            an integer ID or the amount is not a storable integer
    """
    if isinstance(value, EntryLine):
        line = value
    elif isinstance(value, Mapping):
        account_id = value.get("account_id", value.get("account"))
        line = EntryLine(account_id=account_id, amount=value.get("amount"))
    else:
        try:
            account_id, amount = value
        except (TypeError, ValueError):
            raise ValidationError(f"Entry must be an (account, amount) pair, got {value!r}") from None
        line = EntryLine(account_id=account_id, amount=amount)

    if isinstance(line.account_id, bool) or not isinstance(line.account_id, int):
        raise ValidationError(f"Entry account must be an integer ID, got {line.account_id!r}")
    validate_amount(line.amount)
    return line


def check_balanced(lines: Sequence[EntryLine]) -> None:
    """Raise UnbalancedJournal unless there are two or more lines summing to zero."""
    if len(lines) < 2:
        raise UnbalancedJournal(too_few_entries(len(lines)))
    total = sum(line.amount for line in lines)
    if total != 0:
        raise UnbalancedJournal(journal_does_not_balance(total))


class JournalService:
    """Service for posting balanced journals.

    Journals are never updated or deleted. Mistakes are corrected by posting
    a reversal.
    """

    def __init__(self, db: Database):
        """Initialize journal service.

        Args:
            db: Database instance
        """
        self.db = db

    def _require_accounts(self, lines: Iterable[EntryLine]) -> None:
        missing = self.db.missing_account_ids([line.account_id for line in lines])
        if missing:
            raise AccountNotFound(account_not_found(min(missing)))

    def _prepare(
        self, narrative: Optional[str], entries: Iterable[EntryInput]
    ) -> tuple[str, list[EntryLine]]:
        narrative = validate_narrative(narrative)
        lines = [to_entry_line(e) for e in entries]
        if len(lines) < 2:
            raise UnbalancedJournal(too_few_entries(len(lines)))
        self._require_accounts(lines)
        check_balanced(lines)
        return narrative, lines

    def post(
        self,
        narrative: Optional[str],
        entries: Iterable[EntryInput],
        batch_id: Optional[int] = None,
    ) -> PostedJournal:
        """Post a balanced journal.

        Args:
            narrative: Free-text memo (at most 140 characters, None for empty)
            entries: Journal legs as EntryLine objects, (account_id, amount)
                pairs or {"account": id, "amount": n} mappings. Amounts are
                integer minor units; positive debits, negative credits.
            batch_id: Optional batch to post into

        Returns:
            The committed journal and its entries

        Raises:
            UnbalancedJournal: If fewer than two entries or a non-zero sum
            AccountNotFound: If an entry references an unknown account
            BatchNotFound: If batch_id does not exist
            InvalidNarrative: If the narrative is too long
            StorageTransactionFailure: If the write failed; nothing is stored
        """
        try:
            narrative, lines = self._prepare(narrative, entries)
        except UnbalancedJournal as exc:
            logger.warning("Rejected journal: %s", exc)
            raise

        if batch_id is not None and self.db.get_batch(batch_id) is None:
            raise BatchNotFound(batch_not_found(batch_id))

        posted = self.db.create_journal(narrative, lines, batch_id=batch_id)
        logger.info("Posted journal %d with %d entries", posted.id, len(posted.entries))
        return posted

    def create_batch(self, batch_date: Optional[date] = None) -> BatchEntity:
        """Create an empty batch dated batch_date (default today)."""
        batch = self.db.create_batch(batch_date or date.today())
        logger.info("Created batch %d dated %s", batch.id, batch.date)
        return batch

    def post_batch(
        self,
        journals: Sequence[JournalRequest],
        batch_date: Optional[date] = None,
    ) -> tuple[BatchEntity, list[PostedJournal]]:
        """Create a batch and post every journal into it, all or nothing.

        Args:
            journals: Journals to post
            batch_date: Batch date (default today)

        Returns:
            Tuple of the created batch and the posted journals

        Raises:
            ValidationError: If no journals are given
            UnbalancedJournal, AccountNotFound, InvalidNarrative: If any
                journal is invalid; no journal is stored
        """
        if not journals:
            raise ValidationError("A batch needs at least one journal")

        prepared = []
        for index, request in enumerate(journals, start=1):
            try:
                narrative, lines = self._prepare(request.unstructured_narrative, request.entries)
            except UnbalancedJournal as exc:
                logger.warning("Rejected batch, journal %d: %s", index, exc)
                raise
            prepared.append(JournalRequest(entries=tuple(lines), unstructured_narrative=narrative))

        batch, posted = self.db.create_batch_with_journals(batch_date or date.today(), prepared)
        logger.info("Posted batch %d with %d journals", batch.id, len(posted))
        return batch, posted

    def get_journal(self, journal_id: int) -> PostedJournal:
        """Get a journal with its entries.

        Raises:
            JournalNotFound: If the journal does not exist
        """
        journal = self.db.get_journal(journal_id)
        if journal is None:
            raise JournalNotFound(journal_not_found(journal_id))
        return journal

    def get_batch(self, batch_id: int) -> BatchEntity:
        """Get a batch.

        Raises:
            BatchNotFound: If the batch does not exist
        """
        batch = self.db.get_batch(batch_id)
        if batch is None:
            raise BatchNotFound(batch_not_found(batch_id))
        return batch

    def list_batch_journals(self, batch_id: int) -> list[PostedJournal]:
        """List the journals of a batch in creation order."""
        self.get_batch(batch_id)
        return self.db.list_batch_journals(batch_id)

    def reverse(self, journal_id: int, narrative: Optional[str] = None) -> PostedJournal:
        """Post a journal that cancels journal_id.

        Args:
            journal_id: Journal to reverse
            narrative: Narrative for the reversal (default "Reversal of journal N")

        Returns:
            The reversing journal
        """
        original = self.get_journal(journal_id)
        if narrative is None:
            narrative = f"Reversal of journal {journal_id}"
        lines = [EntryLine(account_id=e.account_id, amount=-e.amount) for e in original.entries]
        reversal = self.post(narrative, lines)
        logger.info("Reversed journal %d with journal %d", journal_id, reversal.id)
        return reversal
