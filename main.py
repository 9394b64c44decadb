#!/usr/bin/env python3
"""Bank statement transaction extractor.

Reads bank statement PDFs (or text already extracted from them), pulls out
the transaction rows, and writes them to an Excel workbook with Date,
Description and Amount columns.

Usage:
    python main.py --pdf-file <path_to_pdf> [--password <password>] [--output-dir <dir>]

    python main.py --text-file <path_to_txt> [--output-dir <dir>]

    python main.py --batch-dir <directory_with_pdfs> [--output-dir <dir>]
"""

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from src.config.settings import Settings
from src.excel_generator.converter import ExcelConverter, ExcelConversionError
from src.pdf_processor.text_loader import PDFTextExtractionError, StatementTextLoader
from src.statement_parser.extractor import TransactionExtractor
from src.utils.logger import get_logger, setup_logger
from src.utils.validators import ValidationError, validate_file_path, validate_pdf_file

CONVERSION_FAILED_MESSAGE = "Failed to parse and convert PDF"


@dataclass
class ProcessingReport:
    """What happened to one input file."""

    source: str
    message: str
    output_path: Optional[str] = None
    transaction_count: int = 0

    @property
    def succeeded(self) -> bool:
        return self.output_path is not None


class StatementProcessor:
    """Main processor for bank statement files."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        """Initialize the processor.

        Args:
            settings: Optional settings; read from the environment when omitted.
        """
        self.settings = settings or Settings.from_env()
        self.logger = get_logger(__name__)
        self.loader = StatementTextLoader()
        self.extractor = TransactionExtractor()
        self.converter = ExcelConverter(self.settings)

    def process_text(
        self,
        text: str,
        source: str = "<text>",
        output_dir: Optional[str] = None,
        suffix: Optional[str] = None
    ) -> ProcessingReport:
        """Extract transactions from statement text and write a workbook.

        Args:
            text: Full statement text.
            source: Name of the input, used in logs and the report.
            output_dir: Optional output directory for reports.
            suffix: Optional suffix for the generated filename.

        Returns:
            ProcessingReport for the input.
        """
        result = self.extractor.parse_statement(text)
        if not result.ok:
            self.logger.warning(f"{source}: {result.message}")
            return ProcessingReport(source=source, message=result.message)

        try:
            output_path = self.converter.convert_to_excel(
                result.records,
                output_path=output_dir or self.settings.output_dir,
                suffix=suffix,
            )
        except ExcelConversionError as e:
            self.logger.error(f"Excel conversion failed for {source}: {str(e)}")
            return ProcessingReport(source=source, message=CONVERSION_FAILED_MESSAGE)

        return ProcessingReport(
            source=source,
            message=f"Report created: {output_path}",
            output_path=output_path,
            transaction_count=len(result),
        )

    def process_single_pdf(
        self,
        pdf_path: str,
        password: Optional[str] = None,
        output_dir: Optional[str] = None,
        suffix: Optional[str] = None
    ) -> ProcessingReport:
        """Process a single PDF file and generate an Excel report.

        Args:
            pdf_path: Path to the PDF file.
            password: Optional password for encrypted PDF.
            output_dir: Optional output directory for reports.
            suffix: Optional suffix for the generated filename.

        Returns:
            ProcessingReport for the file.
        """
        self.logger.info(f"Processing PDF: {pdf_path}")

        try:
            validate_pdf_file(pdf_path, max_size_mb=self.settings.max_file_size_mb)
            text = self.loader.load_text(pdf_path, password)
        except ValidationError as e:
            self.logger.error(f"Invalid input file {pdf_path}: {str(e)}")
            return ProcessingReport(source=pdf_path, message=str(e))
        except PDFTextExtractionError as e:
            self.logger.error(f"PDF extraction failed for {pdf_path}: {str(e)}")
            return ProcessingReport(source=pdf_path, message=CONVERSION_FAILED_MESSAGE)

        return self.process_text(text, source=pdf_path, output_dir=output_dir, suffix=suffix)

    def process_text_file(
        self,
        text_path: str,
        output_dir: Optional[str] = None
    ) -> ProcessingReport:
        """Process a plain text dump of a statement.

        Args:
            text_path: Path to the text file.
            output_dir: Optional output directory for reports.

        Returns:
            ProcessingReport for the file.
        """
        self.logger.info(f"Processing text file: {text_path}")

        try:
            validate_file_path(text_path)
        except ValidationError as e:
            self.logger.error(f"Invalid input file {text_path}: {str(e)}")
            return ProcessingReport(source=text_path, message=str(e))

        text = Path(text_path).read_text(encoding="utf-8", errors="replace")
        return self.process_text(text, source=text_path, output_dir=output_dir)

    def process_batch(
        self,
        batch_dir: str,
        password: Optional[str] = None,
        output_dir: Optional[str] = None
    ) -> List[ProcessingReport]:
        """Process every PDF file in a directory.

        Args:
            batch_dir: Directory containing PDF files.
            password: Optional password shared by the PDFs.
            output_dir: Optional output directory for reports.

        Returns:
            One ProcessingReport per PDF, in filename order.
        """
        self.logger.info(f"Processing batch directory: {batch_dir}")

        pdf_files = sorted(Path(batch_dir).glob("*.pdf"))
        if not pdf_files:
            self.logger.warning(f"No PDF files found in {batch_dir}")
            return []

        self.logger.info(f"Found {len(pdf_files)} PDF files")

        reports = [
            self.process_single_pdf(str(pdf_file), password, output_dir, suffix=pdf_file.stem)
            for pdf_file in pdf_files
        ]

        succeeded = sum(1 for report in reports if report.succeeded)
        self.logger.info(f"Successfully processed {succeeded}/{len(pdf_files)} files")
        return reports


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Optional argument list; ``sys.argv`` is used when omitted.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        description="Extract transactions from bank statements into Excel",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Process single PDF
    python main.py --pdf-file statement.pdf

    # Process an encrypted PDF
    python main.py --pdf-file statement.pdf --password mypassword

    # Process text already extracted from a PDF
    python main.py --text-file statement.txt

    # Process multiple PDFs in directory
    python main.py --batch-dir ./statements --output-dir ./reports
        """
    )

    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        '--pdf-file',
        type=str,
        help='Path to single PDF file to process'
    )
    group.add_argument(
        '--text-file',
        type=str,
        help='Path to a text dump of a statement'
    )
    group.add_argument(
        '--batch-dir',
        type=str,
        help='Directory containing multiple PDF files to process'
    )

    parser.add_argument(
        '--password',
        type=str,
        help='Password for encrypted PDFs'
    )
    parser.add_argument(
        '--output-dir',
        type=str,
        default=None,
        help='Output directory for reports (default: REPORTS_DIR)'
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Args:
        argv: Optional argument list; ``sys.argv`` is used when omitted.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    args = parse_arguments(argv)

    try:
        settings = Settings.from_env()
        if not settings.validate():
            print("Error: Invalid configuration. Check MAX_FILE_SIZE_MB, SHEET_NAME and EXCEL_OUTPUT_FORMAT.")
            return 1
        settings.create_directories()
        setup_logger("src", level=settings.get_log_level(), logs_dir=settings.logs_dir)
        processor = StatementProcessor(settings)

        if args.batch_dir:
            reports = processor.process_batch(
                batch_dir=args.batch_dir,
                password=args.password,
                output_dir=args.output_dir
            )
            created = [report for report in reports if report.succeeded]

            for report in reports:
                status = "ok" if report.succeeded else "failed"
                print(f"  - {report.source}: {status} ({report.message})")

            if created:
                print(f"Success! Created {len(created)} reports.")
                return 0
            print("Error: No files were processed successfully. Check logs for details.")
            return 1

        if args.pdf_file:
            report = processor.process_single_pdf(
                pdf_path=args.pdf_file,
                password=args.password,
                output_dir=args.output_dir
            )
        else:
            report = processor.process_text_file(
                text_path=args.text_file,
                output_dir=args.output_dir
            )

        if report.succeeded:
            print(f"Success! Extracted {report.transaction_count} transactions. {report.message}")
            return 0

        print(f"Error: {report.message}")
        return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 130
    except Exception as e:
        print(f"Unexpected error: {str(e)}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
