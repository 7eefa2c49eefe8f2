from .snapshot import StatSnapshot, aggregate
from .namespace import EMPTY_PATH, KEY_NOT_FOUND, NOT_A_MAPPING, resolve

__all__ = ["StatSnapshot", "aggregate", "resolve", "EMPTY_PATH", "KEY_NOT_FOUND", "NOT_A_MAPPING"]
