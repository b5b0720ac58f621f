"""
Custom exception hierarchy for CodeNote.

Provides structured error types for the derivation pipeline and its
collaborators. All exceptions inherit from CodeNoteError for easy catching.
"""


class CodeNoteError(Exception):
    """
    Base exception for all CodeNote errors.
    All custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, context: dict | None = None):
        """
        Initialize CodeNote error.
        Args:
            message: Error message
            context: Optional context dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class LLMError(CodeNoteError):
    """
    LLM operation errors.
    Base for every failure of the model-backed derivation path.
    """

    pass


class ModelUnavailableError(LLMError):
    """
    Raised when no model backend is configured or it cannot be reached.
    """

    pass


class ModelTimeoutError(LLMError):
    """
    Raised when the model call did not finish within its time budget.
    """

    pass


class ModelRefusalError(LLMError):
    """
    Raised when the model answered with refusal or non-answer phrasing.
    """

    pass


class ModelRuntimeError(LLMError):
    """
    Raised when the model backend failed while producing a response.
    """

    pass


class ValidationError(CodeNoteError):
    """
    Validation errors.
    Raised when input validation fails or data is invalid.
    """

    pass


class NotFoundError(CodeNoteError):
    """
    Resource not found errors.
    Raised when a requested note or folder doesn't exist.
    """

    pass


class ConfigurationError(CodeNoteError):
    """
    Configuration errors.
    Raised when configuration is invalid or missing required values.
    """

    pass
