from __future__ import annotations
from dataclasses import dataclass, field, fields, replace
import json
import logging
from pathlib import Path
from typing import List, Optional, Tuple

import yaml

from .errors import ConfigError

_LOGGER = logging.getLogger(__name__)

VENDOR = "staples"
GROUP = "procfs"
PLUGIN_NAME = "netstat"
PLUGIN_VERSION = 1

TCP_STATES = [
    "ESTABLISHED", "SYN_SENT", "SYN_RECV", "FIN_WAIT1", "FIN_WAIT2", "TIME_WAIT",
    "CLOSE", "CLOSE_WAIT", "LAST_ACK", "LISTEN", "CLOSING", "NONE",
]
UDP_KEY = "udp_socket"
SOURCE_NAMES = ("psutil", "ss")

# `ss` spells states differently from psutil / the kernel's tcp_states.h names
SS_STATE_MAP = {
    "ESTAB": "ESTABLISHED",
    "SYN-SENT": "SYN_SENT",
    "SYN-RECV": "SYN_RECV",
    "FIN-WAIT-1": "FIN_WAIT1",
    "FIN-WAIT-2": "FIN_WAIT2",
    "TIME-WAIT": "TIME_WAIT",
    "CLOSE": "CLOSE",
    "UNCONN": "CLOSE",
    "CLOSE-WAIT": "CLOSE_WAIT",
    "LAST-ACK": "LAST_ACK",
    "LISTEN": "LISTEN",
    "CLOSING": "CLOSING",
}

@dataclass(frozen=True)
class CFG:
    vendor: str = VENDOR
    group: str = GROUP
    plugin_name: str = PLUGIN_NAME
    plugin_version: int = PLUGIN_VERSION
    source: str = "psutil"
    tcp_states: Tuple[str, ...] = field(default_factory=lambda: tuple(TCP_STATES))
    udp_key: str = UDP_KEY

    @property
    def prefix(self) -> Tuple[str, ...]:
        """Routing prefix the host puts in front of every metric key."""
        return (self.vendor, self.group, self.plugin_name)

    @property
    def metric_keys(self) -> List[str]:
        return [state_key(s) for s in self.tcp_states] + [self.udp_key]

def state_key(state: str) -> str:
    return "tcp_" + state.lower()

def _coerce(name: str, value):
    if name == "tcp_states":
        if not isinstance(value, (list, tuple)) or not all(isinstance(s, str) for s in value):
            raise ConfigError("tcp_states must be a list of strings")
        return tuple(s.upper() for s in value)
    if name == "plugin_version":
        try:
            return int(value)
        except (TypeError, ValueError) as err:
            raise ConfigError(f"plugin_version must be an integer, got {value!r}") from err
    if name == "source" and value not in SOURCE_NAMES:
        raise ConfigError(f"unknown source {value!r}, expected one of {', '.join(SOURCE_NAMES)}")
    if not isinstance(value, str):
        raise ConfigError(f"{name} must be a string, got {value!r}")
    return value

def cfg_from_dict(data: dict, base: Optional[CFG] = None) -> CFG:
    base = base or CFG()
    bad = [k for k in data if not isinstance(k, str)]
    if bad:
        raise ConfigError(f"config keys must be strings, got {', '.join(map(repr, bad))}")
    known = {f.name for f in fields(CFG)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(unknown)}")
    return replace(base, **{k: _coerce(k, v) for k, v in data.items()})

def load_cfg(path: Optional[str]) -> CFG:
    """Read a YAML or JSON file with CFG overrides.

    No path means the built-in defaults. Files ending in .yaml/.yml are parsed
    with yaml.safe_load, everything else as JSON.
    """
    if not path:
        return CFG()
    p = Path(path).expanduser()
    try:
        txt = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise ConfigError(f"cannot read config {p}: {err}") from err
    try:
        data = yaml.safe_load(txt) if p.suffix in (".yaml", ".yml") else json.loads(txt)
    except (yaml.YAMLError, ValueError) as err:
        raise ConfigError(f"cannot parse config {p}: {err}") from err
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"config {p} must contain a mapping")
    _LOGGER.debug("Loaded config overrides from %s: %s", p, list(data))
    return cfg_from_dict(data)

def init_cfg_from_args(args) -> CFG:
    cfg = load_cfg(getattr(args, "config", None))
    if getattr(args, "source", None):
        cfg = cfg_from_dict({"source": args.source}, base=cfg)
    return cfg
