"""PDF text loading for statement extraction."""

from typing import List, Optional

import pdfplumber

from src.utils.logger import get_logger


class PDFTextExtractionError(Exception):
    """Custom exception for PDF text extraction errors."""
    pass


class StatementTextLoader:
    """Reads the plain text of a PDF statement, page by page."""

    def __init__(self) -> None:
        """Initialize text loader."""
        self.logger = get_logger(__name__)

    def extract_pages(self, pdf_path: str, password: Optional[str] = None) -> List[str]:
        """Extract text content from PDF file.

        Args:
            pdf_path: Path to PDF file.
            password: Optional password for encrypted PDF.

        Returns:
            List of text strings, one per page that had text.

        Raises:
            PDFTextExtractionError: If text extraction fails.
        """
        try:
            text_content = []

            with pdfplumber.open(pdf_path, password=password) as pdf:
                for page_num, page in enumerate(pdf.pages, 1):
                    try:
                        page_text = page.extract_text()
                    except Exception as e:
                        self.logger.warning(f"Failed to extract text from page {page_num}: {str(e)}")
                        continue

                    if page_text:
                        text_content.append(page_text)
                        self.logger.debug(f"Extracted text from page {page_num}")
                    else:
                        self.logger.warning(f"No text found on page {page_num}")

        except Exception as e:
            raise PDFTextExtractionError(f"Failed to extract text from PDF: {str(e)}") from e

        if not text_content:
            raise PDFTextExtractionError("No text content extracted from PDF")

        self.logger.info(f"Extracted text from {len(text_content)} pages")
        return text_content

    def load_text(self, pdf_path: str, password: Optional[str] = None) -> str:
        """Load the whole document as one newline-joined string.

        Args:
            pdf_path: Path to PDF file.
            password: Optional password for encrypted PDF.

        Returns:
            Document text with page order and line breaks preserved.
        """
        return "\n".join(self.extract_pages(pdf_path, password))
