"""Pytest configuration and fixtures for the statement extraction system."""

import logging
import os
import tempfile
import shutil
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from src.config.settings import Settings
from src.statement_parser.models import TransactionRecord


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def sample_settings(temp_dir):
    """Create sample settings writing into the temporary directory."""
    return Settings(
        output_dir=str(temp_dir / "reports"),
        logs_dir=str(temp_dir / "logs"),
        log_level="INFO",
        max_file_size_mb=5,
    )


@pytest.fixture
def statement_text():
    """Statement text mixing every line shape the extractor handles."""
    return (
        "First National Bank - Account Statement\n"
        "Date Description Amount\n"
        "01-15 GROCERY STORE PURCHASE $45.67\n"
        "Grocery Run\n"
        "01-16  $12.00\n"
        "01-20 001234 -100.00\n"
        "Interest paid 01/31/2024 0.25\n"
        "Closing balance 1,234.56\n"
    )


@pytest.fixture
def sample_records():
    """Records matching ``statement_text``."""
    return [
        TransactionRecord("01-15", "GROCERY STORE PURCHASE", "45.67"),
        TransactionRecord("01-16", "Grocery Run", "12.00"),
        TransactionRecord("01-20", "Check 001234", "-100.00"),
        TransactionRecord("01/31/2024", "Interest paid", "0.25"),
    ]


@pytest.fixture
def sample_pdf_file(temp_dir):
    """Create a sample PDF file for testing."""
    pdf_file = temp_dir / "statement.pdf"
    # Minimal header only; pdfplumber is mocked wherever this is read
    pdf_file.write_bytes(b"%PDF-1.4\n1 0 obj\n<<\n/Type /Catalog\n/Pages 2 0 R\n>>\nendobj\n")
    return str(pdf_file)


@pytest.fixture
def mock_pdfplumber():
    """Patch ``pdfplumber.open`` and let tests set the page texts."""
    with patch('pdfplumber.open') as mock_open:
        def set_pages(*page_texts):
            mock_open.return_value.__enter__.return_value.pages = [
                Mock(extract_text=Mock(return_value=text)) for text in page_texts
            ]
        mock_open.set_pages = set_pages
        yield mock_open


@pytest.fixture
def sample_environment(temp_dir):
    """Create sample environment variables for testing."""
    env_vars = {
        "OUTPUT_DIR": str(temp_dir / "reports"),
        "LOGS_DIR": str(temp_dir / "logs"),
        "LOG_LEVEL": "DEBUG",
        "MAX_FILE_SIZE_MB": "5",
        "SHEET_NAME": "Statement",
    }
    with patch.dict(os.environ, env_vars):
        yield env_vars


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attaches to the package logger."""
    yield
    package_logger = logging.getLogger("src")
    for handler in list(package_logger.handlers):
        handler.close()
        package_logger.removeHandler(handler)
