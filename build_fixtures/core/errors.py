"""
Core error definitions for build-fixtures

Provides error codes and the configuration exception raised by fixture helpers.
"""

from enum import Enum
from typing import Dict, Optional


class ErrorCode(Enum):
    """Standardized error codes for fixture helpers."""

    # Module importer errors
    IMPORT_PATH_NOT_DEFINED = "IMPORT_PATH_NOT_DEFINED"

    # Project definition errors
    INVALID_PROJECT_DEFINITION = "INVALID_PROJECT_DEFINITION"


class FixtureConfigurationError(Exception):
    """Raised when a fixture helper is wired up incorrectly."""

    def __init__(self, code: ErrorCode, message: str, details: Optional[Dict] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ImportPathNotDefinedError(FixtureConfigurationError):
    """Raised when a mock is supplied for a key with no declared import path."""

    def __init__(self, key: str):
        super().__init__(
            ErrorCode.IMPORT_PATH_NOT_DEFINED,
            f"[Module Importer] Import path not defined for module: {key}",
            {"key": key}
        )
        self.key = key
