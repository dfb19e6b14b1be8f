"""Bank statement domain service."""

from __future__ import annotations

import csv
import logging
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from ledgerit.domain.entities import BankStatementEntry, ImportResult
from ledgerit.domain.errors import (
    AccountNotFound,
    StorageError,
    ValidationError,
    account_not_found,
)
from ledgerit.domain.journal import validate_amount, validate_narrative
from ledgerit.utils.amount_parser import parse_minor_units
from ledgerit.utils.date_parser import parse_date

if TYPE_CHECKING:
    from ledgerit.database.base import Database

logger = logging.getLogger(__name__)


class StatementService:
    """Service for recording bank statement lines.

    Statement lines are an immutable record of what the bank reported. They
    are never edited and carry no reconciliation state.
    """

    def __init__(self, db: Database):
        """Initialize statement service.

        Args:
            db: Database instance
        """
        self.db = db

    def _require_account(self, account_id: int) -> None:
        if self.db.get_account(account_id) is None:
            raise AccountNotFound(account_not_found(account_id))

    def add_entry(
        self,
        account_id: int,
        amount: int,
        narrative: Optional[str] = None,
        entry_date: Optional[date] = None,
    ) -> BankStatementEntry:
        """Record one statement line.

        Args:
            account_id: Account the statement belongs to
            amount: Amount in minor units, as printed by the bank
            narrative: Statement description (at most 140 characters)
            entry_date: Value date of the line, if known

        Returns:
            Recorded statement line

        Raises:
            AccountNotFound: If the account does not exist
            InvalidNarrative: If the narrative is too long
            ValidationError: If the amount is not a storable integer
        """
        validate_amount(amount, "Statement amount")
        narrative = validate_narrative(narrative)
        self._require_account(account_id)
        return self.db.create_statement_entry(account_id, amount, narrative, entry_date)

    def list_entries(self, account_id: int) -> list[BankStatementEntry]:
        """List an account's statement lines ordered by ID."""
        self._require_account(account_id)
        return self.db.list_statement_entries(account_id)

    def import_csv(
        self,
        csv_file_path: str,
        account_id: int,
        amount_column: str = "Amount",
        narrative_column: str = "Description",
        date_column: Optional[str] = "Date",
        dayfirst: bool = False,
    ) -> ImportResult:
        """Import statement lines from a CSV file.

        Amounts are read as decimal major units ("12.34", "(5.00)") and
        stored as minor units. Rows that fail to parse are reported and
        skipped; the other rows are still imported.

        Args:
            csv_file_path: Path to CSV file
            account_id: Account the statement belongs to
            amount_column: Header of the amount column (required)
            narrative_column: Header of the description column (optional in file)
            date_column: Header of the date column (optional in file; None to ignore)
            dayfirst: Read ambiguous numeric dates as day/month

        Returns:
            ImportResult with the imported lines and per-row error messages

        Raises:
            AccountNotFound: If the account does not exist
            FileNotFoundError: If the CSV file doesn't exist
            ValidationError: If the file has no header or lacks the amount column
        """
        self._require_account(account_id)

        csv_path = Path(csv_file_path)
        if not csv_path.exists():
            raise FileNotFoundError(f"CSV file not found: {csv_file_path}")

        imported: list[BankStatementEntry] = []
        errors: list[str] = []

        with open(csv_path, "r", encoding="utf-8-sig", newline="") as f:
            # Try to detect delimiter
            sample = f.read(1024)
            f.seek(0)
            try:
                delimiter = csv.Sniffer().sniff(sample, delimiters=",;\t").delimiter
            except csv.Error:
                delimiter = ","

            reader = csv.DictReader(f, delimiter=delimiter)
            if reader.fieldnames is None:
                raise ValidationError("CSV file has no columns")
            if amount_column not in reader.fieldnames:
                raise ValidationError(f"CSV file missing required column: {amount_column}")

            for row_num, row in enumerate(reader, start=2):  # Start at 2 (header is row 1)
                amount_str = (row.get(amount_column) or "").strip()
                if not amount_str:
                    errors.append(f"Row {row_num}: Missing amount")
                    continue
                try:
                    amount = parse_minor_units(amount_str)
                    entry_date = None
                    date_str = (row.get(date_column) or "").strip() if date_column else ""
                    if date_str:
                        entry_date = parse_date(date_str, dayfirst=dayfirst)
                    narrative = (row.get(narrative_column) or "").strip()
                    line = self.add_entry(account_id, amount, narrative, entry_date)
                except StorageError:
                    raise
                except ValueError as e:
                    errors.append(f"Row {row_num}: {e}")
                    continue
                imported.append(line)

        logger.info(
            "Imported %d statement lines for account %d (%d errors)",
            len(imported),
            account_id,
            len(errors),
        )
        return ImportResult(imported=tuple(imported), errors=tuple(errors))
