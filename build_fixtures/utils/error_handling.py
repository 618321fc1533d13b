"""
Error Handling Utilities

Provides consistent logging around fixture operations. Errors are logged and
re-raised, never converted or swallowed.
"""

import inspect
import logging
from typing import Dict, Any, Optional, Callable
from functools import wraps
from build_fixtures.core.errors import FixtureConfigurationError

logger = logging.getLogger(__name__)


def log_fixture_error(fixture_name: str, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
    """
    Log fixture errors with consistent formatting.

    Args:
        fixture_name: Name of the fixture helper where the error occurred
        error: Exception that occurred
        context: Optional context information
    """
    context_str = f" Context: {context}" if context else ""
    logger.error(f"Error in {fixture_name}: {type(error).__name__}: {str(error)}{context_str}")


def log_fixture_action(fixture_name: str, action: str, context: Optional[Dict[str, Any]] = None) -> None:
    """
    Log fixture actions with consistent formatting.

    Args:
        fixture_name: Name of the fixture helper
        action: Action being performed
        context: Optional context information
    """
    context_str = f" Context: {context}" if context else ""
    logger.info(f"{fixture_name}: {action}{context_str}")


def _error_context(error: Exception) -> Optional[Dict[str, Any]]:
    if isinstance(error, FixtureConfigurationError):
        return {"error_code": error.code.value, **error.details}
    return None


def with_error_logging(fixture_name: str):
    """
    Decorator to add consistent logging to fixture functions and coroutines.

    Args:
        fixture_name: Name of the fixture helper for logging

    Returns:
        Decorator function
    """
    def decorator(func: Callable) -> Callable:
        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                try:
                    log_fixture_action(fixture_name, f"Starting {func.__name__}")
                    result = await func(*args, **kwargs)
                    log_fixture_action(fixture_name, f"Completed {func.__name__}")
                    return result
                except Exception as e:
                    log_fixture_error(fixture_name, e, _error_context(e))
                    raise

            return async_wrapper

        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                log_fixture_action(fixture_name, f"Starting {func.__name__}")
                result = func(*args, **kwargs)
                log_fixture_action(fixture_name, f"Completed {func.__name__}")
                return result
            except Exception as e:
                log_fixture_error(fixture_name, e, _error_context(e))
                raise

        return wrapper
    return decorator
