"""Excel conversion utilities for extracted statement transactions."""

import os
from datetime import datetime
from typing import Dict, List, Optional

import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill, Alignment
from openpyxl.utils import get_column_letter
from openpyxl.utils.dataframe import dataframe_to_rows

from src.config.settings import Settings
from src.statement_parser.models import TransactionRecord
from src.utils.logger import get_logger
from src.utils.validators import ValidationError, validate_directory_path


class ExcelConversionError(Exception):
    """Custom exception for Excel conversion errors."""
    pass


class ExcelConverter:
    """Writes transaction records to an Excel workbook."""

    COLUMNS = ["Date", "Description", "Amount"]
    MIN_COLUMN_WIDTHS: Dict[str, int] = {"Date": 15, "Description": 40, "Amount": 15}
    MAX_COLUMN_WIDTH = 80

    def __init__(self, settings: Optional[Settings] = None) -> None:
        """Initialize Excel converter.

        Args:
            settings: Optional settings; defaults are used when omitted.
        """
        self.settings = settings or Settings()
        self.logger = get_logger(__name__)

        # Define Excel styles
        self.header_font = Font(bold=True, color="FFFFFF")
        self.header_fill = PatternFill(start_color="366092", end_color="366092", fill_type="solid")
        self.header_alignment = Alignment(horizontal="center", vertical="center")

    def generate_filename(
        self,
        base_name: str = "statement",
        suffix: Optional[str] = None,
        timestamp: bool = True
    ) -> str:
        """Generate Excel filename with timestamp.

        Args:
            base_name: Base filename.
            suffix: Optional suffix to add.
            timestamp: Whether to include timestamp.

        Returns:
            Generated filename.
        """
        parts = [base_name]
        if suffix:
            parts.append(suffix)
        if timestamp:
            parts.append(datetime.now().strftime("%Y%m%d_%H%M%S"))

        filename = "_".join(parts)
        return f"{filename}.{self.settings.excel_output_format}"

    def records_to_dataframe(self, records: List[TransactionRecord]) -> pd.DataFrame:
        """Convert records to a DataFrame in Date, Description, Amount order.

        Args:
            records: List of TransactionRecord objects.

        Returns:
            pandas DataFrame with one row per record.
        """
        data = [
            {
                "Date": record.date,
                "Description": record.description,
                "Amount": record.amount,
            }
            for record in records
        ]
        return pd.DataFrame(data, columns=self.COLUMNS)

    def create_statement_sheet(self, workbook: Workbook, records_df: pd.DataFrame) -> None:
        """Write the records sheet, replacing the workbook's default sheet.

        Args:
            workbook: Excel workbook object.
            records_df: DataFrame with record data.
        """
        worksheet = workbook.active
        worksheet.title = self.settings.sheet_name

        for col_num, header in enumerate(records_df.columns, 1):
            cell = worksheet.cell(row=1, column=col_num, value=header)
            cell.font = self.header_font
            cell.fill = self.header_fill
            cell.alignment = self.header_alignment

        for row_num, row in enumerate(dataframe_to_rows(records_df, index=False, header=False), 2):
            for col_num, value in enumerate(row, 1):
                worksheet.cell(row=row_num, column=col_num, value=value)

        for col_idx, header in enumerate(records_df.columns, 1):
            max_length = max(
                (len(str(cell.value)) for cell in worksheet[get_column_letter(col_idx)] if cell.value),
                default=0,
            )
            width = max(max_length + 2, self.MIN_COLUMN_WIDTHS.get(header, 10))
            worksheet.column_dimensions[get_column_letter(col_idx)].width = min(width, self.MAX_COLUMN_WIDTH)

        self.logger.info(f"Created statement sheet with {len(records_df)} rows")

    def convert_to_excel(
        self,
        records: List[TransactionRecord],
        output_path: Optional[str] = None,
        filename: Optional[str] = None,
        suffix: Optional[str] = None
    ) -> str:
        """Convert records to an Excel file.

        Args:
            records: List of TransactionRecord objects.
            output_path: Optional output directory path.
            filename: Optional filename for output file.
            suffix: Optional suffix for generated filenames.

        Returns:
            Path to created Excel file.

        Raises:
            ExcelConversionError: If there is nothing to write or writing fails.
        """
        if not records:
            raise ExcelConversionError("No transactions to write")

        try:
            if output_path is None:
                output_path = self.settings.output_dir

            validate_directory_path(output_path)

            if filename is None:
                filename = self.generate_filename(suffix=suffix)

            extension = f".{self.settings.excel_output_format}"
            if not filename.endswith(extension):
                filename = f"{filename}{extension}"

            full_path = os.path.join(output_path, filename)

            workbook = Workbook()
            self.create_statement_sheet(workbook, self.records_to_dataframe(records))

            workbook.save(full_path)
            workbook.close()

            self.logger.info(f"Excel file created successfully: {full_path}")
            return full_path

        except ValidationError as e:
            raise ExcelConversionError(f"Validation error: {str(e)}") from e
        except Exception as e:
            raise ExcelConversionError(f"Failed to convert to Excel: {str(e)}") from e
