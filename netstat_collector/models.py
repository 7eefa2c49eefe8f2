from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Tuple

TCP = "tcp"
UDP = "udp"

@dataclass(frozen=True)
class Conn:
    transport: str            # 'tcp', 'udp', anything else is ignored
    state: str = "NONE"       # 'ESTABLISHED', 'LISTEN', ... ; meaningless for udp
    family: Optional[str] = None
    laddr: Optional[Tuple[str, int]] = None
    raddr: Optional[Tuple[str, int]] = None
    pid: Optional[int] = None

@dataclass
class Metric:
    namespace: Tuple[str, ...]
    data: Any = None
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def name(self) -> str:
        return "/".join(self.namespace)

@dataclass
class PluginMeta:
    name: str
    version: int
    type: str = "collector"
    accept_content_types: list[str] = field(default_factory=list)
    return_content_types: list[str] = field(default_factory=list)
    concurrency_count: int = 1
