"""
Global pytest configuration and fixtures.
Resets shared configuration and the service container around every test.
"""

import os
from pathlib import Path

import pytest

# Ensure testing environment
os.environ.setdefault('BUILD_FIXTURES_ENVIRONMENT', 'testing')

SAMPLE_PROJECT_ROOT = Path(__file__).resolve().parent / 'tests' / 'fixtures' / 'sample_project'
MANIFESTS_DIR = Path(__file__).resolve().parent / 'tests' / 'fixtures' / 'manifests'


@pytest.fixture(scope="function", autouse=True)
def reset_global_state():
    """Reset configuration and the global container before each test to ensure clean state."""
    from build_fixtures.config_factory import reset_config
    from build_fixtures.container import reset_container

    reset_config()
    reset_container()

    yield

    reset_config()
    reset_container()


@pytest.fixture(scope="function")
def sample_project_config():
    """Load a configuration rooted at the sample project used as a load target."""
    from build_fixtures.config_factory import load_config_from_dict

    return load_config_from_dict({
        'project_root': str(SAMPLE_PROJECT_ROOT),
        'environment': 'testing'
    })


@pytest.fixture(scope="function")
def manifests_dir():
    """Directory holding YAML project manifests."""
    return MANIFESTS_DIR


@pytest.fixture(scope="function")
def container():
    """Provide a freshly configured service container."""
    from build_fixtures.container import configure_container

    return configure_container()
