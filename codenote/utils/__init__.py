"""Utility modules for CodeNote."""

from codenote.utils.exceptions import (
    CodeNoteError,
    ConfigurationError,
    LLMError,
    ModelRefusalError,
    ModelRuntimeError,
    ModelTimeoutError,
    ModelUnavailableError,
    NotFoundError,
    ValidationError,
)
from codenote.utils.id_generator import generate_folder_id, generate_note_id
from codenote.utils.logger import get_logger, setup_logging
from codenote.utils.timeout import with_timeout

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # ID Generators
    "generate_note_id",
    "generate_folder_id",
    # Timeout
    "with_timeout",
    # Exceptions
    "CodeNoteError",
    "LLMError",
    "ModelUnavailableError",
    "ModelTimeoutError",
    "ModelRefusalError",
    "ModelRuntimeError",
    "ValidationError",
    "NotFoundError",
    "ConfigurationError",
]
