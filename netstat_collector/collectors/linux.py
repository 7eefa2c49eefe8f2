from __future__ import annotations
import logging
import re
import subprocess
from typing import List, Optional, Tuple

from ..config import SS_STATE_MAP
from ..errors import EnumerationError
from ..models import Conn, TCP, UDP

_LOGGER = logging.getLogger(__name__)

SS_CMD = ["ss", "-tuan"]
SS_RE = re.compile(
    r"^(?P<netid>tcp|udp)\s+(?P<state>\S+)\s+\d+\s+\d+\s+(?P<laddr>\S+)\s+(?P<raddr>\S+)")

def _safe_int(s: str, default: int = 0) -> int:
    try:
        return int(s)
    except ValueError:
        return default

def parse_addr(addr: str) -> Tuple[str, int]:
    """
    Handles:
      - '1.2.3.4:5678'
      - '[::1]:443', '[::ffff:10.0.0.1]:22'
      - '0.0.0.0:*', '*:443', '*:*', '*'
      - 'fe80::1%eth0:546'
    """
    if not addr or addr == '*':
        return ('*', 0)

    if addr.startswith('['):
        host, _, port = addr.rpartition(':')
        host = host[1:].replace(']', '', 1)
        return (host or '::', 0 if port in ('*', '') else _safe_int(port))

    if ':' in addr:
        host, port = addr.rsplit(':', 1)
        return (host or '0.0.0.0', 0 if port in ('*', '') else _safe_int(port))

    return (addr, 0)

def _family(host: str) -> Optional[str]:
    if host == '*':
        return None
    return "inet6" if ':' in host else "inet"

def parse_ss(out: str) -> List[Conn]:
    conns: List[Conn] = []
    for line in out.splitlines():
        if not line.strip() or line.startswith("Netid"):
            continue
        m = SS_RE.match(line)
        if not m:
            _LOGGER.warning("Skipping unparsable ss row: %r", line)
            continue
        state = m.group("state").upper()
        laddr = parse_addr(m.group("laddr"))
        conns.append(Conn(
            transport=TCP if m.group("netid") == "tcp" else UDP,
            state=SS_STATE_MAP.get(state, state),
            family=_family(laddr[0]),
            laddr=laddr,
            raddr=parse_addr(m.group("raddr")),
        ))
    return conns

def collect() -> List[Conn]:
    try:
        out = subprocess.check_output(SS_CMD, text=True, stderr=subprocess.PIPE)
    except (OSError, subprocess.CalledProcessError) as err:
        raise EnumerationError(f"{' '.join(SS_CMD)} failed: {err}") from err
    conns = parse_ss(out)
    _LOGGER.debug("ss reported %d connections", len(conns))
    return conns
