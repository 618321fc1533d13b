"""
Dependency-substituting module loading for unit tests.
"""

from .module_importer import create_module_importer, resolve_import_path, to_module_name

__all__ = [
    'create_module_importer',
    'resolve_import_path',
    'to_module_name'
]
