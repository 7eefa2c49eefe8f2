"""Tests for configuration loading."""
import argparse

import pytest

from netstat_collector.config import CFG, TCP_STATES, cfg_from_dict, init_cfg_from_args, load_cfg
from netstat_collector.errors import ConfigError


def test_defaults():
    cfg = CFG()
    assert cfg.prefix == ("staples", "procfs", "netstat")
    assert cfg.source == "psutil"
    assert len(cfg.metric_keys) == 13
    assert cfg.metric_keys[-1] == "udp_socket"
    assert list(cfg.tcp_states) == TCP_STATES


def test_no_path_gives_defaults():
    assert load_cfg(None) == CFG()


def test_load_yaml(tmp_path):
    p = tmp_path / "netstat.yaml"
    p.write_text("vendor: acme\nsource: ss\ntcp_states: [established, listen]\n", encoding="utf-8")
    cfg = load_cfg(str(p))
    assert cfg.vendor == "acme"
    assert cfg.source == "ss"
    assert cfg.tcp_states == ("ESTABLISHED", "LISTEN")
    assert cfg.metric_keys == ["tcp_established", "tcp_listen", "udp_socket"]


def test_load_json(tmp_path):
    p = tmp_path / "netstat.json"
    p.write_text('{"plugin_name": "sockets", "plugin_version": "2"}', encoding="utf-8")
    cfg = load_cfg(str(p))
    assert cfg.prefix == ("staples", "procfs", "sockets")
    assert cfg.plugin_version == 2


def test_empty_yaml(tmp_path):
    p = tmp_path / "empty.yml"
    p.write_text("", encoding="utf-8")
    assert load_cfg(str(p)) == CFG()


@pytest.mark.parametrize("content", [
    "vendor: [unclosed",
    "- just\n- a list\n",
    "colour: blue\n",
    "source: netlink\n",
    "tcp_states: LISTEN\n",
    "plugin_version: one\n",
    "vendor: 5\n",
    "1: x\n",
    "true: x\nvendor: acme\n",
])
def test_invalid_yaml(tmp_path, content):
    p = tmp_path / "bad.yaml"
    p.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_cfg(str(p))


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="cannot read"):
        load_cfg(str(tmp_path / "nope.yaml"))


def test_cfg_from_dict_keeps_base():
    base = CFG(vendor="acme")
    assert cfg_from_dict({"source": "ss"}, base=base) == CFG(vendor="acme", source="ss")


def test_init_cfg_from_args(tmp_path):
    p = tmp_path / "netstat.yaml"
    p.write_text("vendor: acme\n", encoding="utf-8")
    cfg = init_cfg_from_args(argparse.Namespace(config=str(p), source="ss"))
    assert cfg.vendor == "acme"
    assert cfg.source == "ss"
    assert init_cfg_from_args(argparse.Namespace(config=None, source=None)) == CFG()


def test_not_utf8(tmp_path):
    p = tmp_path / "latin1.yaml"
    p.write_bytes(b"vendor: \xff\xfe\n")
    with pytest.raises(ConfigError, match="cannot read"):
        load_cfg(str(p))


def test_non_string_keys():
    with pytest.raises(ConfigError, match="must be strings"):
        cfg_from_dict({1: "x", "vendor": "acme"})
