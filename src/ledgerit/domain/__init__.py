"""Domain layer for ledgerit application."""

from ledgerit.domain.account import AccountService
from ledgerit.domain.numbering import NumberAllocator
from ledgerit.domain.journal import JournalService
from ledgerit.domain.ledger import LedgerService
from ledgerit.domain.statement import StatementService
from ledgerit.domain.reconciliation import ReconciliationService

__all__ = [
    "AccountService",
    "NumberAllocator",
    "JournalService",
    "LedgerService",
    "StatementService",
    "ReconciliationService",
]
