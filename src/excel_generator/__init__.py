"""Spreadsheet output for extracted transactions."""

from src.excel_generator.converter import ExcelConversionError, ExcelConverter

__all__ = ["ExcelConversionError", "ExcelConverter"]
