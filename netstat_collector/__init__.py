from .config import CFG, TCP_STATES, UDP_KEY, load_cfg
from .errors import ConfigError, EnumerationError, NetstatError, ResolutionError
from .models import Conn, Metric, PluginMeta
from .plugin import CollectResult, NetstatCollector
from .stats import aggregate, resolve

__all__ = [
    "CFG", "TCP_STATES", "UDP_KEY", "load_cfg",
    "ConfigError", "EnumerationError", "NetstatError", "ResolutionError",
    "Conn", "Metric", "PluginMeta",
    "CollectResult", "NetstatCollector",
    "aggregate", "resolve",
]
