from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Sequence

from ..errors import ResolutionError

EMPTY_PATH = "empty path"
KEY_NOT_FOUND = "key not found"
NOT_A_MAPPING = "not a mapping"

def resolve(m: Mapping, path: Sequence[str]) -> Any:
    """Look up the value at path inside a (possibly nested) mapping.

    Each segment but the last must lead to another mapping.
    """
    if not path:
        raise ResolutionError(EMPTY_PATH)
    return _descend(m, tuple(path), 0)

def _descend(m: Mapping, path: tuple[str, ...], depth: int) -> Any:
    current = path[depth]
    if current not in m:
        raise ResolutionError(KEY_NOT_FOUND, path[:depth + 1])
    val = m[current]
    if depth == len(path) - 1:
        return val
    if not isinstance(val, Mapping):
        raise ResolutionError(NOT_A_MAPPING, path[:depth + 1])
    return _descend(val, path, depth + 1)
