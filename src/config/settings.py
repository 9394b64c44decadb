"""Configuration settings for the statement extraction system."""

import os
from typing import List
from dataclasses import dataclass, field

# Input Configuration
SUPPORTED_PDF_FORMATS = [".pdf"]
MAX_FILE_SIZE_MB = int(os.getenv("MAX_FILE_SIZE_MB", "5"))

# File Paths
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
REPORTS_DIR = os.getenv("REPORTS_DIR", os.path.join(BASE_DIR, "reports"))
LOGS_DIR = os.getenv("LOGS_DIR", os.path.join(BASE_DIR, "logs"))

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Excel Output Configuration
EXCEL_OUTPUT_FORMAT = os.getenv("EXCEL_OUTPUT_FORMAT", "xlsx")
SHEET_NAME = os.getenv("SHEET_NAME", "Statement")


@dataclass
class Settings:
    """Configuration settings class."""

    # Output Configuration
    output_dir: str = REPORTS_DIR
    excel_output_format: str = EXCEL_OUTPUT_FORMAT
    sheet_name: str = SHEET_NAME

    # Logging
    log_level: str = "INFO"
    log_format: str = LOG_FORMAT
    logs_dir: str = LOGS_DIR

    # Input limits
    max_file_size_mb: int = MAX_FILE_SIZE_MB
    supported_pdf_formats: List[str] = field(default_factory=lambda: SUPPORTED_PDF_FORMATS.copy())

    @classmethod
    def from_env(cls) -> "Settings":
        """Create Settings from environment variables."""
        return cls(
            output_dir=os.getenv("OUTPUT_DIR", REPORTS_DIR),
            excel_output_format=os.getenv("EXCEL_OUTPUT_FORMAT", "xlsx"),
            sheet_name=os.getenv("SHEET_NAME", "Statement"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", LOG_FORMAT),
            logs_dir=os.getenv("LOGS_DIR", LOGS_DIR),
            max_file_size_mb=int(os.getenv("MAX_FILE_SIZE_MB", "5")),
        )

    def validate(self) -> bool:
        """Validate settings."""
        return (
            self.max_file_size_mb > 0 and
            len(self.sheet_name) > 0 and
            self.excel_output_format in ("xlsx", "xlsm")
        )

    def get_log_level(self) -> str:
        """Get log level as string."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.log_level.upper() in valid_levels:
            return self.log_level.upper()
        return "INFO"

    def create_directories(self) -> None:
        """Create necessary directories."""
        for directory in [self.output_dir, self.logs_dir]:
            os.makedirs(directory, exist_ok=True)
