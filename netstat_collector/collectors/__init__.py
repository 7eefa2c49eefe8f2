from __future__ import annotations
from typing import Callable, List

from ..config import CFG
from ..errors import EnumerationError
from ..models import Conn
from .generic import collect as psutil_collect
from .linux import collect as ss_collect

Enumerator = Callable[[], List[Conn]]

ENUMERATORS: dict[str, Enumerator] = {
    "psutil": psutil_collect,
    "ss": ss_collect,
}

def get_enumerator(cfg: CFG) -> Enumerator:
    try:
        return ENUMERATORS[cfg.source]
    except KeyError:
        raise EnumerationError(f"unsupported connection source {cfg.source!r}") from None

__all__ = ["Enumerator", "ENUMERATORS", "get_enumerator", "psutil_collect", "ss_collect"]
