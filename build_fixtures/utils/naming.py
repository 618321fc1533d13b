"""
Naming helpers used to derive task builder references from task names.
"""

import re
from typing import List

_SEPARATORS = re.compile(r'[\s_.\-]+')
_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])')


def _split_words(name: str) -> List[str]:
    words = []
    for chunk in _SEPARATORS.split(name.strip()):
        if chunk:
            words.extend(part for part in _CAMEL_BOUNDARY.split(chunk) if part)
    return words


def camel_case(name: str) -> str:
    """
    Convert a dash, underscore, dot or space separated name to camelCase.

    Examples:
        camel_case('docker-build') == 'dockerBuild'
        camel_case('FOO_BAR') == 'fooBar'
        camel_case('dockerBuild') == 'dockerBuild'
    """
    words = [word.lower() for word in _split_words(name)]
    if not words:
        return ''
    return words[0] + ''.join(word[:1].upper() + word[1:] for word in words[1:])


def pascal_case(name: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return name[:1].upper() + name[1:]


def snake_case(name: str) -> str:
    """Convert any supported spelling to snake_case ('dockerBuild' -> 'docker_build')."""
    return '_'.join(word.lower() for word in _split_words(name))
