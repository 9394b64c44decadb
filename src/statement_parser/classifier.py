"""Coarse document check run before any line is parsed."""

import re


STATEMENT_KEYWORDS = ["account", "transaction", "statement", "balance"]

_KEYWORD_PATTERN = re.compile("|".join(STATEMENT_KEYWORDS), re.IGNORECASE)


def looks_like_statement(text: str) -> bool:
    """Check whether text plausibly comes from a bank statement.

    A single case-insensitive occurrence of any keyword anywhere in the
    text is enough. False positives and negatives are expected.

    Args:
        text: Full document text.

    Returns:
        True if at least one statement keyword is present.
    """
    if not text:
        return False
    return _KEYWORD_PATTERN.search(text) is not None
