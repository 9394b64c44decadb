"""PDF input handling."""

from src.pdf_processor.text_loader import PDFTextExtractionError, StatementTextLoader

__all__ = ["PDFTextExtractionError", "StatementTextLoader"]
