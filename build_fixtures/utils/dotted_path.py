"""
Dotted path access for nested mappings.

A dotted path addresses a nested field by joining keys with '.', e.g.
'buildMetadata.aws.stacks.myStack'. A backslash-escaped dot ('\\.') is part
of the key rather than a separator. Inside a list, a key made of digits is an
index, e.g. 'buildMetadata.requiredEnv.1'.
"""

import re
from typing import Any, List, MutableMapping

_UNESCAPED_DOT = re.compile(r'(?<!\\)\.')

_MISSING = object()


def split_path(path: str) -> List[str]:
    """Split a dotted path into its keys."""
    return [segment.replace('\\.', '.') for segment in _UNESCAPED_DOT.split(path)]


def _list_index(key: str) -> int:
    if not key.isdigit():
        raise TypeError(f"List index must be a non-negative integer, got {key!r}")
    return int(key)


def _child(current: Any, key: str) -> Any:
    if isinstance(current, list):
        index = _list_index(key)
        return current[index] if index < len(current) else _MISSING
    return current.get(key, _MISSING)


def _assign(current: Any, key: str, value: Any) -> None:
    if isinstance(current, list):
        index = _list_index(key)
        if index < len(current):
            current[index] = value
        elif index == len(current):
            current.append(value)
        else:
            raise IndexError(f"List index {index} out of range for list of length {len(current)}")
    else:
        current[key] = value


def set_property(target: MutableMapping[str, Any], path: str, value: Any) -> MutableMapping[str, Any]:
    """
    Set the value at a dotted path, creating intermediate levels as needed.

    Lists along the path are kept and indexed into: an index inside the list
    replaces that element and an index equal to its length appends. Any other
    intermediate value that is neither a mapping nor a list is replaced by a
    new dict.

    Raises:
        TypeError: If a key addressing a list is not an index
        IndexError: If a list index is past the end of the list

    Returns:
        The target mapping, for chaining
    """
    keys = split_path(path)
    current = target
    for key in keys[:-1]:
        child = _child(current, key)
        if not isinstance(child, (MutableMapping, list)):
            child = {}
            _assign(current, key, child)
        current = child
    _assign(current, keys[-1], value)
    return target


def get_property(source: Any, path: str, default: Any = None) -> Any:
    """Get the value at a dotted path, or default when any level is missing."""
    current = source
    for key in split_path(path):
        if isinstance(current, list):
            if not key.isdigit():
                return default
        elif not isinstance(current, MutableMapping):
            return default
        current = _child(current, key)
        if current is _MISSING:
            return default
    return current


def has_property(source: Any, path: str) -> bool:
    """Check whether a dotted path exists."""
    return get_property(source, path, _MISSING) is not _MISSING
