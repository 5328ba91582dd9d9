"""Utility modules for ContextCrafter."""

from src.utils.exceptions import (
    ConfigurationError,
    ContextCrafterError,
    DocumentUnreadableError,
    NoFocalDocumentError,
    StoreError,
)
from src.utils.logger import get_logger, setup_logging
from src.utils.paths import folder_segments, is_in_excluded_folder, normalize_path

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Paths
    "normalize_path",
    "folder_segments",
    "is_in_excluded_folder",
    # Exceptions
    "ContextCrafterError",
    "NoFocalDocumentError",
    "StoreError",
    "DocumentUnreadableError",
    "ConfigurationError",
]
