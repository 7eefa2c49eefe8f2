from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from .collectors import Enumerator, get_enumerator
from .config import CFG
from .errors import ResolutionError
from .models import Metric, PluginMeta
from .stats import StatSnapshot, aggregate, resolve

_LOGGER = logging.getLogger(__name__)

@dataclass
class CollectResult:
    path: Tuple[str, ...]
    value: Any = None
    error: Optional[ResolutionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

class NetstatCollector:
    """Per-state TCP and UDP socket counts, addressed by metric namespace.

    Nothing is cached: every call enumerates the connections again.
    """

    def __init__(self, cfg: Optional[CFG] = None, enumerator: Optional[Enumerator] = None):
        self.cfg = cfg or CFG()
        self._enumerate = enumerator or get_enumerator(self.cfg)

    def meta(self) -> PluginMeta:
        return PluginMeta(
            name=self.cfg.plugin_name,
            version=self.cfg.plugin_version,
            return_content_types=["gob"],
            concurrency_count=1,
        )

    def get_config_policy(self) -> dict:
        return {}

    def snapshot(self) -> StatSnapshot:
        return aggregate(self._enumerate(), self.cfg)

    def list_metric_names(self) -> List[str]:
        return list(self.snapshot())

    def get_metric_types(self) -> List[Metric]:
        names = self.list_metric_names()
        now = datetime.now()
        return [Metric(namespace=self.cfg.prefix + (name,), timestamp=now) for name in names]

    def collect(self, paths: Iterable[Sequence[str]], partial: bool = False) -> List[CollectResult]:
        """Resolve each path against one fresh snapshot.

        A failed lookup aborts the whole batch unless partial is set, in which
        case the error is carried on that item's result instead.
        """
        snap = self.snapshot()
        results: List[CollectResult] = []
        for path in paths:
            path = tuple(path)
            try:
                results.append(CollectResult(path=path, value=resolve(snap, path)))
            except ResolutionError as err:
                if not partial:
                    raise
                _LOGGER.debug("Skipping %s: %s", "/".join(path), err)
                results.append(CollectResult(path=path, error=err))
        return results

    def collect_metrics(self, namespaces: Iterable[Sequence[str]]) -> List[Metric]:
        namespaces = [tuple(ns) for ns in namespaces]
        depth = len(self.cfg.prefix)
        results = self.collect(ns[depth:] for ns in namespaces)
        now = datetime.now()
        return [Metric(namespace=ns, data=r.value, timestamp=now) for ns, r in zip(namespaces, results)]
