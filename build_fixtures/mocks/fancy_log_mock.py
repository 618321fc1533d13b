"""
Mock for the fancy-log logging library.
"""

from unittest.mock import Mock

FANCY_LOG_METHODS = ['log', 'dir', 'info', 'warn', 'error']


def create_fancy_log_mock() -> Mock:
    """Create a mock fancy-log object.

    Returns:
        Mock: A mock exposing only log, dir, info, warn and error; each
        records its calls and returns None
    """
    mock_log = Mock(spec=FANCY_LOG_METHODS)

    for method in FANCY_LOG_METHODS:
        setattr(mock_log, method, Mock(return_value=None, name=f"fancy_log.{method}"))

    return mock_log
