"""Transaction extraction from bank statement text."""

from src.statement_parser.classifier import looks_like_statement
from src.statement_parser.extractor import TransactionExtractor
from src.statement_parser.models import (
    ClassificationRejected,
    EmptyResult,
    ExtractionResult,
    ExtractionStatus,
    StatementExtractionError,
    TransactionDraft,
    TransactionRecord,
)

__all__ = [
    "ClassificationRejected",
    "EmptyResult",
    "ExtractionResult",
    "ExtractionStatus",
    "StatementExtractionError",
    "TransactionDraft",
    "TransactionExtractor",
    "TransactionRecord",
    "looks_like_statement",
]
