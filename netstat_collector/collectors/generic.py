from __future__ import annotations
import logging
import socket

import psutil

from ..errors import EnumerationError
from ..models import Conn, TCP, UDP

_LOGGER = logging.getLogger(__name__)

FAMILIES = {socket.AF_INET: "inet", socket.AF_INET6: "inet6"}

def _addr(a) -> tuple[str, int] | None:
    if not a:
        return None
    return (a.ip if hasattr(a, 'ip') else a[0], a.port if hasattr(a, 'port') else a[1])

def _transport(sock_type) -> str:
    if sock_type == socket.SOCK_DGRAM:
        return UDP
    if sock_type == socket.SOCK_STREAM:
        return TCP
    return str(sock_type)

def collect() -> list[Conn]:
    """All TCP and UDP sockets, IPv4 and IPv6, as seen by psutil."""
    try:
        raw = psutil.net_connections(kind='inet')
    except (psutil.Error, OSError, NotImplementedError) as err:
        raise EnumerationError(f"psutil.net_connections failed: {err}") from err

    conns = [
        Conn(
            transport=_transport(getattr(c, 'type', None)),
            state=str(getattr(c, 'status', None) or psutil.CONN_NONE),
            family=FAMILIES.get(getattr(c, 'family', None)),
            laddr=_addr(getattr(c, 'laddr', None)),
            raddr=_addr(getattr(c, 'raddr', None)),
            pid=getattr(c, 'pid', None),
        )
        for c in raw
    ]
    _LOGGER.debug("psutil reported %d connections", len(conns))
    return conns
