"""
Mock factories for the build-orchestration library, the logging library and
task builder components.
"""

from .gulp_mock import GulpMock, create_gulp_mock
from .task_builder_mock import TaskBuilderMock, create_task_builder_mock
from .fancy_log_mock import FANCY_LOG_METHODS, create_fancy_log_mock

__all__ = [
    'GulpMock',
    'create_gulp_mock',
    'TaskBuilderMock',
    'create_task_builder_mock',
    'FANCY_LOG_METHODS',
    'create_fancy_log_mock'
]
