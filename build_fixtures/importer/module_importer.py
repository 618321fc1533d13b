"""
Module Importer

Loads a module under test with selected dependencies replaced by mocks.

Dependencies are declared as a map of symbolic keys to import paths. Paths that
start with the source-root marker ('src/') are files resolved against the
project root and are substituted under their dotted module name
('src/task_builders/clean_task_builder.py' -> 'src.task_builders.clean_task_builder').
Any other path is treated as a module name and used as-is ('gulp').

The target module is executed fresh on every load with sys.modules patched,
so mocks only affect that one load. Modules first imported during the load
are evicted again when it completes.
"""

import importlib.util
import logging
import sys
from pathlib import Path
from types import ModuleType
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional
from unittest.mock import patch

from build_fixtures.config_factory import FixtureConfig, get_config
from build_fixtures.core.errors import ImportPathNotDefinedError
from build_fixtures.utils.error_handling import log_fixture_action, with_error_logging

logger = logging.getLogger(__name__)

ModuleImporter = Callable[[Optional[Mapping[str, Any]]], Awaitable[Any]]


def resolve_import_path(path: str, config: FixtureConfig) -> str:
    """Resolve source-root paths against the project root; other paths pass through."""
    if path.startswith(config.source_root_marker):
        return str(config.project_path / path)
    return path


def to_module_name(path: str, config: FixtureConfig) -> str:
    """
    Convert a resolved import path to the module name it is imported as.

    Files under the project root become dotted module names relative to it.
    Anything else is already a module name.
    """
    candidate = Path(path)
    if not candidate.is_absolute():
        return path

    try:
        relative = candidate.resolve().relative_to(config.project_path)
    except ValueError:
        raise ValueError(f"Module path is outside the project root: {path}")

    parts = list(relative.with_suffix('').parts)
    if parts and parts[-1] == '__init__':
        parts.pop()
    return '.'.join(parts)


def _as_module(module_name: str, value: Any) -> Any:
    """Wrap a mapping of members into a module object; other values are used as-is."""
    if isinstance(value, Mapping) and not isinstance(value, ModuleType):
        module = ModuleType(module_name)
        for member, member_value in value.items():
            setattr(module, member, member_value)
        return module
    return value


def _build_substitutions(
    mock_defs: Mapping[str, Any],
    path_definitions: Mapping[str, str],
    config: FixtureConfig
) -> Dict[str, Any]:
    substitutions = {}
    for key, mock in mock_defs.items():
        declared_path = path_definitions.get(key)
        if not declared_path:
            raise ImportPathNotDefinedError(key)

        module_name = to_module_name(resolve_import_path(declared_path, config), config)
        substitutions[module_name] = _as_module(module_name, mock)
    return substitutions


def _load_module(module_file: Path, module_name: str, substitutions: Dict[str, Any], project_root: Path) -> ModuleType:
    spec = importlib.util.spec_from_file_location(module_name, module_file)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load module from {module_file}")
    module = importlib.util.module_from_spec(spec)

    with patch.dict(sys.modules, {**substitutions, module_name: module}), \
            patch.object(sys, 'path', [str(project_root), *sys.path]):
        spec.loader.exec_module(module)

    return module


def create_module_importer(
    module_path: str,
    path_definitions: Mapping[str, str],
    member_name: Optional[str] = None,
    config: Optional[FixtureConfig] = None
) -> ModuleImporter:
    """
    Create an importer that loads a module with mocks injected into its dependencies.

    Args:
        module_path: Path of the module being imported, e.g. 'src/task_factory.py'
        path_definitions: Map of keys to dependency import paths. The same keys
            are used for the mocks passed when the importer is invoked.
        member_name: Optional member of the module to return instead of the module
        config: Optional fixture configuration; the global one is used otherwise

    Returns:
        Coroutine function taking a map of key -> mock and returning the
        loaded module (or member)
    """
    path_definitions = dict(path_definitions)

    @with_error_logging("ModuleImporter")
    async def import_module(mock_defs: Optional[Mapping[str, Any]] = None) -> Any:
        settings = config or get_config()
        substitutions = _build_substitutions(dict(mock_defs or {}), path_definitions, settings)

        module_file = settings.project_path / resolve_import_path(module_path, settings)
        module_name = to_module_name(str(module_file), settings)

        log_fixture_action(
            "ModuleImporter",
            f"Loading {module_name}",
            {"mocked": sorted(substitutions)} if substitutions else None
        )
        module = _load_module(module_file, module_name, substitutions, settings.project_path)

        return module if member_name is None else getattr(module, member_name)

    return import_module
