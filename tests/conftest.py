"""Fixtures for netstat collector tests."""
from collections import namedtuple
import socket

import psutil
import pytest

from netstat_collector.models import Conn

# same shape as psutil's sconn
FakeSConn = namedtuple("FakeSConn", ["fd", "family", "type", "laddr", "raddr", "status", "pid"])
Addr = namedtuple("Addr", ["ip", "port"])


def tcp(status, family=socket.AF_INET, pid=None):
    return FakeSConn(-1, family, socket.SOCK_STREAM, Addr("127.0.0.1", 8080), (), status, pid)


def udp(status="NONE", family=socket.AF_INET):
    return FakeSConn(-1, family, socket.SOCK_DGRAM, Addr("0.0.0.0", 53), (), status, None)


@pytest.fixture
def scenario_conns():
    """3 established, 1 listening, 2 udp and one in a state nobody knows."""
    return (
        [Conn("tcp", "ESTABLISHED")] * 3
        + [Conn("tcp", "LISTEN")]
        + [Conn("udp", "NONE"), Conn("udp", "ESTABLISHED")]
        + [Conn("tcp", "BOGUS")]
    )


@pytest.fixture
def fake_psutil(monkeypatch):
    """Replace psutil.net_connections with a settable list."""
    rows = []

    def net_connections(kind="inet"):
        assert kind == "inet"
        return list(rows)

    monkeypatch.setattr(psutil, "net_connections", net_connections)
    return rows
