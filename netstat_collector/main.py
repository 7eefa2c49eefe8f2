from __future__ import annotations
import argparse
import json
import logging
import sys

from .config import SOURCE_NAMES, init_cfg_from_args
from .errors import NetstatError
from .plugin import NetstatCollector

_LOGGER = logging.getLogger(__name__)

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

def parse_args(argv=None):
    ap = argparse.ArgumentParser(description='TCP state and UDP socket counters for a metrics host')
    ap.add_argument('--config', type=str, default=None, help='YAML or JSON file overriding vendor/prefix/states')
    ap.add_argument('--source', choices=SOURCE_NAMES, default=None, help='connection source (default: psutil)')
    ap.add_argument('--log-level', type=str.upper, default='WARNING', choices=LOG_LEVELS)
    sub = ap.add_subparsers(dest='command', required=True)
    sub.add_parser('list', help='print the metric catalog')
    pc = sub.add_parser('collect', help='print current values as JSON')
    pc.add_argument('namespaces', nargs='*', help="e.g. staples/procfs/netstat/tcp_listen (default: all)")
    pc.add_argument('--partial', action='store_true', help='report unknown namespaces instead of failing')
    return ap.parse_args(argv)

def run(args) -> int:
    cfg = init_cfg_from_args(args)
    collector = NetstatCollector(cfg)

    if args.command == 'list':
        for m in collector.get_metric_types():
            print(m.name)
        return 0

    if args.namespaces:
        namespaces = [tuple(ns.split('/')) for ns in args.namespaces]
    else:
        namespaces = [m.namespace for m in collector.get_metric_types()]

    depth = len(cfg.prefix)
    if args.partial:
        results = collector.collect((ns[depth:] for ns in namespaces), partial=True)
        out = {"/".join(ns): (r.value if r.ok else {"error": str(r.error)}) for ns, r in zip(namespaces, results)}
    else:
        out = {m.name: m.data for m in collector.collect_metrics(namespaces)}
    print(json.dumps(out, indent=2))
    return 0

def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        return run(args)
    except NetstatError as err:
        _LOGGER.error("%s", err)
        return 1

if __name__ == '__main__':
    sys.exit(main())
