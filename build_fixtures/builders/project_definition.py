"""
Project Definition Builder

Creates default project definitions for build tests, with dotted-path
overrides for the properties a test cares about.
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from build_fixtures.core.errors import ErrorCode, FixtureConfigurationError
from build_fixtures.utils.dotted_path import set_property

logger = logging.getLogger(__name__)

DEFAULT_PROJECT_DEFINITION: Dict[str, Any] = {
    'name': 'sample-project',
    'description': 'Sample project description',
    'version': '1.0.0',
    'buildMetadata': {
        'type': 'lib',
        'language': 'py',
        'requiredEnv': ['ENV_1', 'ENV_2'],
        'aws': {
            'stacks': {
                'myStack': 'my-stack'
            }
        },
        'staticFilePatterns': ['foo'],
        'container': {
            'myBuild': {
                'repo': 'my-repo',
                'buildFile': 'BuildFile-1',
                'buildArgs': {
                    'arg1': 'value1'
                }
            }
        }
    }
}


def _apply_overrides(definition: Dict[str, Any], overrides: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    for path, value in (overrides or {}).items():
        set_property(definition, path, value)
    return definition


def _deep_merge(base: Dict[str, Any], updates: Mapping[str, Any]) -> Dict[str, Any]:
    for key, value in updates.items():
        if isinstance(value, Mapping) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = copy.deepcopy(value)
    return base


def build_project_definition(overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Create a default project definition, with the option to override specific
    properties.

    Args:
        overrides: Optional mapping of property paths to overridden values.
            Nested properties are referenced with a dot separator between
            levels, e.g. {'buildMetadata.aws.stacks.myStack': 'other-stack'}

    Returns:
        A new project definition dict on every call
    """
    definition = copy.deepcopy(DEFAULT_PROJECT_DEFINITION)
    return _apply_overrides(definition, overrides)


def load_project_definition(
    path: Union[str, Path],
    overrides: Optional[Mapping[str, Any]] = None
) -> Dict[str, Any]:
    """
    Load a project definition from a YAML manifest.

    The manifest is merged over the default definition, then the dotted-path
    overrides are applied.

    Raises:
        FileNotFoundError: If the manifest doesn't exist
        yaml.YAMLError: If YAML parsing fails
        FixtureConfigurationError: If the manifest is not a mapping
    """
    with open(path, 'r', encoding='utf-8') as file:
        data = yaml.safe_load(file)

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise FixtureConfigurationError(
            ErrorCode.INVALID_PROJECT_DEFINITION,
            f"Project definition must be a mapping, got {type(data).__name__}",
            {'path': str(path)}
        )

    logger.debug(f"Loaded project definition from {path}")
    definition = _deep_merge(copy.deepcopy(DEFAULT_PROJECT_DEFINITION), data)
    return _apply_overrides(definition, overrides)
