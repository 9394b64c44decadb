"""Bank Statement Transaction Extractor.

Pulls transaction rows out of bank statement text (usually extracted from a
PDF) and writes them to Excel workbooks.
"""

__version__ = "1.0.0"
__author__ = "Statement Extraction Team"
