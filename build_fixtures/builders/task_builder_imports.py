"""
Batch helpers that wire several task builder mocks into a test at once.

For every task name a reference name (camelCase name + 'TaskBuilder'), an
import key (reference name + 'Mock'), a class name and a module path under
the task builder directory are derived. The module path always uses the
snake_case form of the camelCase name, so 'docker-build' and 'dockerBuild'
both map to 'src/task_builders/docker_build_task_builder.py'.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, NamedTuple, Optional

from build_fixtures.config_factory import FixtureConfig, get_config
from build_fixtures.mocks.task_builder_mock import TaskBuilderMock, create_task_builder_mock
from build_fixtures.utils.naming import camel_case, pascal_case, snake_case

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaskBuilderImportSpec:
    """Names derived for a single task builder."""
    name: str
    ref_name: str
    import_key: str
    class_name: str
    import_path: str


class TaskBuilderImportMocks(NamedTuple):
    """Task builder mocks and the import references that expose their constructors."""
    mocks: Dict[str, TaskBuilderMock]
    mock_references: Dict[str, Dict[str, object]]


def prepare_task_builder_specs(
    names: Iterable[str],
    config: Optional[FixtureConfig] = None
) -> List[TaskBuilderImportSpec]:
    """Derive the import names and module path for each task builder name."""
    config = config or get_config()
    task_builder_dir = config.task_builder_dir.rstrip('/')

    specs = []
    for name in names:
        camel_name = camel_case(name)
        ref_name = camel_name + config.task_builder_suffix
        specs.append(TaskBuilderImportSpec(
            name=name,
            ref_name=ref_name,
            import_key=ref_name + config.import_key_suffix,
            class_name=pascal_case(ref_name),
            import_path=f"{task_builder_dir}/{snake_case(camel_name)}_task_builder.py"
        ))
    return specs


def create_task_builder_import_definitions(
    names: Iterable[str],
    config: Optional[FixtureConfig] = None
) -> Dict[str, str]:
    """
    Create the import definition map for task builder mocks.

    Args:
        names: The names of the task builders

    Returns:
        Mapping of import key to module path, suitable as the path
        definitions of create_module_importer()
    """
    return {spec.import_key: spec.import_path for spec in prepare_task_builder_specs(names, config)}


def create_task_builder_import_mocks(
    names: Iterable[str],
    config: Optional[FixtureConfig] = None
) -> TaskBuilderImportMocks:
    """
    Create task builder mocks and their import references.

    Args:
        names: The names of the task builders

    Returns:
        TaskBuilderImportMocks with:
         - mocks: task name -> TaskBuilderMock
         - mock_references: import key -> {class name: mock constructor}
    """
    config = config or get_config()
    mocks: Dict[str, TaskBuilderMock] = {}
    mock_references: Dict[str, Dict[str, object]] = {}

    for spec in prepare_task_builder_specs(names, config):
        mock = create_task_builder_mock(spec.name, config)
        mocks[spec.name] = mock
        mock_references[spec.import_key] = {spec.class_name: mock.ctor}

    return TaskBuilderImportMocks(mocks=mocks, mock_references=mock_references)


def register_task_builder_mocks(
    container,
    names: Iterable[str],
    config: Optional[FixtureConfig] = None
) -> Dict[str, TaskBuilderMock]:
    """
    Inject task builder mock constructors into a service container.

    Each constructor is set as an external dependency named after the task
    builder class (e.g. 'DockerBuildTaskBuilder'), so components that receive
    their builder classes through the container get the mocks instead.

    Returns:
        Mapping of task name -> TaskBuilderMock
    """
    config = config or get_config()
    mocks: Dict[str, TaskBuilderMock] = {}

    for spec in prepare_task_builder_specs(names, config):
        mock = create_task_builder_mock(spec.name, config)
        container.set_external_dependency(spec.class_name, mock.ctor)
        mocks[spec.name] = mock

    logger.debug(f"Registered {len(mocks)} task builder mocks")
    return mocks
