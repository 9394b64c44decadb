"""Line-oriented transaction extraction from statement text."""

from typing import List, Optional, Sequence, Tuple

from src.statement_parser.classifier import looks_like_statement
from src.statement_parser.models import (
    ExtractionResult,
    ExtractionStatus,
    TransactionDraft,
    TransactionRecord,
)
from src.statement_parser.patterns import CASCADE, Matcher
from src.utils.logger import get_logger


class TransactionExtractor:
    """Turns statement text into transaction records.

    The extractor holds no per-run state, so one instance can be shared
    between documents and threads.
    """

    def __init__(self, patterns: Optional[Sequence[Tuple[str, Matcher]]] = None) -> None:
        """Initialize transaction extractor.

        Args:
            patterns: Ordered ``(name, matcher)`` pairs. Defaults to ``CASCADE``.
        """
        self.logger = get_logger(__name__)
        self.patterns = tuple(patterns if patterns is not None else CASCADE)

    @staticmethod
    def split_lines(text: str) -> List[str]:
        """Split document text into trimmed lines, keeping empty ones."""
        return [line.strip() for line in text.split("\n")]

    def match_line(self, lines: Sequence[str], index: int) -> Optional[TransactionDraft]:
        """Run the pattern cascade against a single line.

        Args:
            lines: Trimmed document lines.
            index: Index of the line to classify.

        Returns:
            Draft from the first matching pattern, or None.
        """
        for _, matcher in self.patterns:
            draft = matcher(lines, index)
            if draft is not None:
                return draft
        return None

    def extract_drafts(self, text: str) -> List[TransactionDraft]:
        """Collect drafts for every matching line of ``text``, in line order."""
        return self.match_lines(self.split_lines(text))

    def match_lines(self, lines: Sequence[str]) -> List[TransactionDraft]:
        """Run the cascade over every line.

        A line that raises while being matched is skipped.

        Args:
            lines: Trimmed document lines.

        Returns:
            List of TransactionDraft objects.
        """
        drafts = []

        for index in range(len(lines)):
            if not lines[index]:
                continue
            try:
                draft = self.match_line(lines, index)
            except Exception as e:
                self.logger.debug(f"Failed to process line {index + 1}: {str(e)}")
                continue

            if draft is not None:
                self.logger.debug(f"Line {index + 1} matched pattern '{draft.pattern}'")
                drafts.append(draft)

        return drafts

    def extract_records(self, text: str) -> List[TransactionRecord]:
        """Extract normalized records without classifying the document.

        Args:
            text: Full document text.

        Returns:
            List of TransactionRecord objects in line order.
        """
        return [draft.to_record() for draft in self.extract_drafts(text)]

    def parse_statement(self, text: str) -> ExtractionResult:
        """Classify the document, then extract its transactions.

        Args:
            text: Full document text.

        Returns:
            ExtractionResult whose status tells a rejected document, an empty
            statement and a successful run apart.
        """
        if not looks_like_statement(text):
            self.logger.warning("Document does not look like a bank statement")
            return ExtractionResult(status=ExtractionStatus.NOT_A_STATEMENT)

        lines = self.split_lines(text)
        line_count = len(lines)
        self.logger.info(f"Starting extraction from {line_count} lines")

        records = [draft.to_record() for draft in self.match_lines(lines)]
        if not records:
            self.logger.warning("No transactions found in statement text")
            return ExtractionResult(
                status=ExtractionStatus.NO_TRANSACTIONS,
                lines_scanned=line_count,
            )

        self.logger.info(f"Extracted {len(records)} transactions")
        return ExtractionResult(
            status=ExtractionStatus.SUCCESS,
            records=records,
            lines_scanned=line_count,
        )
