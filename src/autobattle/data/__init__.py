"""Data layer utilities for loading JSON definitions."""

from .errors import DataLoadError, DataReferenceError, DataValidationError
from .paths import get_definitions_path, get_package_data_root

__all__ = [
    "DataLoadError",
    "DataReferenceError",
    "DataValidationError",
    "get_definitions_path",
    "get_package_data_root",
]
