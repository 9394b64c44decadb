"""Ordered line patterns used to pull transactions out of statement text.

Every matcher takes the full list of trimmed lines and the index of the line
under test, and returns a :class:`TransactionDraft` or ``None``. Matchers are
tried in ``CASCADE`` order and the first draft wins.
"""

import re
from typing import Callable, List, Optional, Sequence, Tuple

from src.statement_parser.models import TransactionDraft


# MM-DD, description, $amount
INLINE_PATTERN = re.compile(
    r'(\d{2}-\d{2})\s+(.{5,}?)\s+\$?(-?\d{1,3}(?:,?\d{3})*(?:\.\d{2}))'
)

# MM-DD ... $amount, description on a neighbouring line
DATE_AMOUNT_PATTERN = re.compile(
    r'(\d{2}-\d{2})(.*?)(\$?-?\d{1,3}(?:,?\d{3})*(?:\.\d{2}))'
)

# MM-DD check# amount
CHECK_PATTERN = re.compile(
    r'(\d{2}-\d{2})\s+(\d{3,6})\s+\$?(-?(?:\d{1,3}(?:,?\d{3})*\.\d{2}|\d+,\d{2})(?![\d.,]))'
)

LOOSE_DATE_PATTERN = re.compile(r'\d{2}[/-]\d{2}(?:[/-]\d{2,4})?')
LOOSE_AMOUNT_PATTERN = re.compile(r'\$?-?\d+[.,]\d{2}')

CHECK_NUMBER_PATTERN = re.compile(r'\d{3,6}')
DESCRIPTION_TEXT_PATTERN = re.compile(r'[^\d\s]')

# Preceding lines this short are not used as a description.
MIN_CONTEXT_LENGTH = 5

Matcher = Callable[[Sequence[str], int], Optional[TransactionDraft]]


def backfill_description(lines: Sequence[str], index: int) -> str:
    """Borrow a description from the lines around ``index``.

    The preceding line is used when it is longer than ``MIN_CONTEXT_LENGTH``
    characters, otherwise the following line is used as-is, even when empty.

    Args:
        lines: Trimmed document lines.
        index: Index of the line missing a description.

    Returns:
        Borrowed description text.
    """
    previous_line = lines[index - 1] if index > 0 else ""
    next_line = lines[index + 1] if index < len(lines) - 1 else ""
    if len(previous_line) > MIN_CONTEXT_LENGTH:
        return previous_line
    return next_line


def match_inline(lines: Sequence[str], index: int) -> Optional[TransactionDraft]:
    """Date, inline description and amount on a single line."""
    match = INLINE_PATTERN.search(lines[index])
    if not match:
        return None

    date, description, amount = match.groups()
    # A bare number where the description should be is a check number
    if not DESCRIPTION_TEXT_PATTERN.search(description):
        return None

    return TransactionDraft(date, description.strip(), amount, "inline", index)


def match_date_amount(lines: Sequence[str], index: int) -> Optional[TransactionDraft]:
    """Date and amount with the description taken from a neighbouring line."""
    match = DATE_AMOUNT_PATTERN.search(lines[index])
    if not match:
        return None

    date, between, amount = match.groups()
    if CHECK_NUMBER_PATTERN.fullmatch(between.strip()):
        return None

    return TransactionDraft(
        date, backfill_description(lines, index), amount, "date_amount", index
    )


def match_check(lines: Sequence[str], index: int) -> Optional[TransactionDraft]:
    """Date, check number and amount."""
    match = CHECK_PATTERN.search(lines[index])
    if not match:
        return None

    date, check_number, amount = match.groups()
    return TransactionDraft(date, f"Check {check_number}", amount, "check", index)


def match_loose(lines: Sequence[str], index: int) -> Optional[TransactionDraft]:
    """Any date-like and amount-like token on the line, in either order.

    The leftmost date wins. The first amount after it wins, falling back to
    the first amount before it. The description is whatever remains once the
    first occurrence of each token is removed.
    """
    line = lines[index]
    date_match = LOOSE_DATE_PATTERN.search(line)
    if not date_match:
        return None

    amount_match = LOOSE_AMOUNT_PATTERN.search(line, date_match.end())
    if amount_match is None:
        amount_match = LOOSE_AMOUNT_PATTERN.search(line, 0, date_match.start())
    if amount_match is None:
        return None

    date = date_match.group()
    amount = amount_match.group()
    description = line.replace(date, "", 1).replace(amount, "", 1).strip()
    return TransactionDraft(date, description, amount, "loose", index)


CASCADE: List[Tuple[str, Matcher]] = [
    ("inline", match_inline),
    ("date_amount", match_date_amount),
    ("check", match_check),
    ("loose", match_loose),
]
