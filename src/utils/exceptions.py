"""
Custom exception hierarchy for ContextCrafter.

Provides structured error types for collection and scoring failures.
All exceptions inherit from ContextCrafterError for easy catching.
"""


class ContextCrafterError(Exception):
    """
    Base exception for all ContextCrafter errors.
    All custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, context: dict | None = None):
        """
        Initialize ContextCrafter error.
        Args:
            message: Error message
            context: Optional context dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class NoFocalDocumentError(ContextCrafterError):
    """
    No focal document was designated.
    Raised by collectors when called without a seed document. Never retried.
    """

    pass


class StoreError(ContextCrafterError):
    """
    Base exception for document store operations.
    """

    pass


class DocumentUnreadableError(StoreError):
    """
    A single document could not be read or its metadata could not be extracted.
    Collectors skip the document and continue, unless it is the focal document.
    """

    def __init__(self, path: str, reason: str | None = None, context: dict | None = None):
        message = f"Document unreadable: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, {"path": path, **(context or {})})
        self.path = path


class ConfigurationError(ContextCrafterError):
    """
    Configuration errors.
    Raised when configuration is invalid or missing required values.
    """

    pass
