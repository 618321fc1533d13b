"""
Mock for task builder components.
"""

import logging
from typing import Optional
from unittest.mock import Mock

from build_fixtures.config_factory import FixtureConfig, get_config

logger = logging.getLogger(__name__)


class TaskBuilderMock:
    """Stand-in for a named task builder and its constructor."""

    def __init__(self, name: str, task_return: str):
        self._name = name
        self._ret = task_return

        task = Mock(return_value=task_return, name=f"{name}.task")

        # Constructor semantics: calling ctor yields this mock
        self.ctor = Mock(return_value=self, name=f"{name}.ctor")
        self.build_task = Mock(return_value=task, name=f"{name}.build_task")

    def __repr__(self) -> str:
        return f"TaskBuilderMock(name={self._name!r})"


def create_task_builder_mock(name: str, config: Optional[FixtureConfig] = None) -> TaskBuilderMock:
    """Create a mock task builder.

    Args:
        name: The name of the task builder
        config: Optional fixture configuration supplying the task return template

    Returns:
        TaskBuilderMock: A task builder mock whose task returns a token
        embedding the name, '_<name>_task_ret_' by default
    """
    config = config or get_config()
    logger.debug(f"Creating task builder mock: {name}")
    return TaskBuilderMock(name, config.task_return_template.format(name=name))
