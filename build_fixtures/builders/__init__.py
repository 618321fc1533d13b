"""
Builders for project definitions and task builder import wiring.
"""

from .project_definition import build_project_definition, load_project_definition
from .task_builder_imports import (
    TaskBuilderImportSpec,
    TaskBuilderImportMocks,
    prepare_task_builder_specs,
    create_task_builder_import_definitions,
    create_task_builder_import_mocks,
    register_task_builder_mocks
)

__all__ = [
    'build_project_definition',
    'load_project_definition',
    'TaskBuilderImportSpec',
    'TaskBuilderImportMocks',
    'prepare_task_builder_specs',
    'create_task_builder_import_definitions',
    'create_task_builder_import_mocks',
    'register_task_builder_mocks'
]
