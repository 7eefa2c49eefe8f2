from __future__ import annotations
import logging
from collections import Counter
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from ..config import CFG, state_key
from ..models import Conn, TCP, UDP

_LOGGER = logging.getLogger(__name__)

StatSnapshot = Mapping[str, int]

def aggregate(conns: Iterable[Conn], cfg: Optional[CFG] = None) -> StatSnapshot:
    """Bucket connections into the fixed per-state counters.

    Every key in cfg.metric_keys is present, zero when nothing matched.
    UDP sockets are counted regardless of their state field. TCP connections
    in a state outside cfg.tcp_states and other transports are not counted.
    """
    cfg = cfg or CFG()
    known = set(cfg.tcp_states)
    counts = dict.fromkeys(cfg.metric_keys, 0)
    dropped: Counter = Counter()

    for c in conns:
        if c.transport == UDP:
            counts[cfg.udp_key] += 1
            continue
        if c.transport != TCP:
            dropped[f"transport:{c.transport}"] += 1
            continue
        if c.state not in known:
            dropped[c.state] += 1
            continue
        counts[state_key(c.state)] += 1

    if dropped:
        _LOGGER.debug("Not counted: %s", dict(dropped))
    return MappingProxyType(counts)
