"""Data classes for transactions extracted from statement text."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional


CURRENCY_MARKERS = ("$",)

NOT_A_STATEMENT_MESSAGE = "This does not appear to be a bank statement."
NO_TRANSACTIONS_MESSAGE = "No transactions found. Please try another file."


class StatementExtractionError(Exception):
    """Base exception for statement extraction outcomes."""
    pass


class ClassificationRejected(StatementExtractionError):
    """Raised when the document does not look like a bank statement."""
    pass


class EmptyResult(StatementExtractionError):
    """Raised when a statement yielded no transactions."""
    pass


class ExtractionStatus(Enum):
    """Outcome of a statement extraction run."""

    SUCCESS = "success"
    NOT_A_STATEMENT = "not_a_statement"
    NO_TRANSACTIONS = "no_transactions"


def strip_currency(amount: str) -> str:
    """Remove currency markers and surrounding whitespace from an amount token.

    Args:
        amount: Raw amount token, e.g. ``"$1,234.56"``.

    Returns:
        Amount string with sign, thousands separators and fraction digits kept.
    """
    for marker in CURRENCY_MARKERS:
        amount = amount.replace(marker, "")
    return amount.strip()


@dataclass(frozen=True)
class TransactionRecord:
    """Normalized transaction row ready for tabular output."""

    date: str
    description: str
    amount: str

    def normalized(self) -> "TransactionRecord":
        """Return a copy with trimmed fields and a bare amount."""
        return TransactionRecord(
            date=self.date.strip(),
            description=self.description.strip(),
            amount=strip_currency(self.amount),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert record to dictionary.

        Returns:
            Dictionary keyed by ``date``, ``description`` and ``amount``.
        """
        return {
            "date": self.date,
            "description": self.description,
            "amount": self.amount,
        }


@dataclass(frozen=True)
class TransactionDraft:
    """Raw tokens captured from one line by one pattern."""

    date: str
    description: str
    amount: str
    pattern: str
    line_index: int

    def to_record(self) -> TransactionRecord:
        """Normalize the draft into a :class:`TransactionRecord`."""
        return TransactionRecord(self.date, self.description, self.amount).normalized()


@dataclass
class ExtractionResult:
    """Records extracted from one document together with the run outcome."""

    status: ExtractionStatus
    records: List[TransactionRecord] = field(default_factory=list)
    lines_scanned: int = 0

    @property
    def ok(self) -> bool:
        """True when at least one transaction was extracted."""
        return self.status is ExtractionStatus.SUCCESS

    @property
    def message(self) -> Optional[str]:
        """Caller-facing message for failed outcomes, ``None`` on success."""
        if self.status is ExtractionStatus.NOT_A_STATEMENT:
            return NOT_A_STATEMENT_MESSAGE
        if self.status is ExtractionStatus.NO_TRANSACTIONS:
            return NO_TRANSACTIONS_MESSAGE
        return None

    def raise_for_status(self) -> None:
        """Raise the exception matching a failed outcome.

        Raises:
            ClassificationRejected: If the document is not a statement.
            EmptyResult: If no transactions were extracted.
        """
        if self.status is ExtractionStatus.NOT_A_STATEMENT:
            raise ClassificationRejected(NOT_A_STATEMENT_MESSAGE)
        if self.status is ExtractionStatus.NO_TRANSACTIONS:
            raise EmptyResult(NO_TRANSACTIONS_MESSAGE)

    def to_dicts(self) -> List[Dict[str, Any]]:
        """Records as dictionaries, in line order."""
        return [record.to_dict() for record in self.records]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[TransactionRecord]:
        return iter(self.records)
