"""
build-fixtures - Test fixtures for build tooling.

Factories for project definitions and for mocks of gulp, fancy-log and task
builders, plus a module importer that loads a module under test with its
dependencies replaced by mocks.
"""

from build_fixtures.builders.project_definition import build_project_definition, load_project_definition
from build_fixtures.builders.task_builder_imports import (
    TaskBuilderImportMocks,
    TaskBuilderImportSpec,
    create_task_builder_import_definitions,
    create_task_builder_import_mocks,
    register_task_builder_mocks
)
from build_fixtures.core.errors import ErrorCode, FixtureConfigurationError, ImportPathNotDefinedError
from build_fixtures.importer.module_importer import create_module_importer
from build_fixtures.mocks.fancy_log_mock import create_fancy_log_mock
from build_fixtures.mocks.gulp_mock import GulpMock, create_gulp_mock
from build_fixtures.mocks.task_builder_mock import TaskBuilderMock, create_task_builder_mock

__version__ = '1.0.0'

__all__ = [
    'build_project_definition',
    'load_project_definition',
    'create_gulp_mock',
    'GulpMock',
    'create_task_builder_mock',
    'TaskBuilderMock',
    'create_fancy_log_mock',
    'create_module_importer',
    'create_task_builder_import_definitions',
    'create_task_builder_import_mocks',
    'register_task_builder_mocks',
    'TaskBuilderImportMocks',
    'TaskBuilderImportSpec',
    'ErrorCode',
    'FixtureConfigurationError',
    'ImportPathNotDefinedError'
]
