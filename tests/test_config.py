import sys
from pathlib import Path
from unittest import mock

import pytest

from minsql.config import Config, ConfigError


def test_defaults_without_arguments():
    config = Config.from_args([])
    assert config.node_id == 1
    assert config.data_dir == "./data"
    assert config.port == 5433
    assert config.peers == []
    assert config.buffer_pool_size == 1024
    assert config.wal_buffer_size == 65536
    assert config.deterministic is False
    assert config.num_shards == 16


def test_all_options_parsed():
    config = Config.from_args(
        ["--node-id", "3", "--data-dir", "/tmp/node3", "--port", "6000", "--peers", "a:1,b:2"]
    )
    assert config.node_id == 3
    assert config.data_dir == "/tmp/node3"
    assert config.port == 6000
    assert config.peers == ["a:1", "b:2"]


def test_unknown_arguments_are_skipped():
    config = Config.from_args(["--verbose", "--port", "7000", "extra"])
    assert config.port == 7000
    assert config.node_id == Config().node_id


def test_reads_sys_argv_when_not_given():
    with mock.patch.object(sys, "argv", ["minsql", "--node-id", "9"]):
        config = Config.from_args()
    assert config.node_id == 9


@pytest.mark.parametrize("value", ["abc", "-1", "1.5", "4294967296"])
def test_invalid_node_id(value):
    with pytest.raises(ConfigError, match="node-id"):
        Config.from_args(["--node-id", value])


@pytest.mark.parametrize("value", ["70000", "port"])
def test_invalid_port(value):
    with pytest.raises(ConfigError, match="port"):
        Config.from_args(["--port", value])


def test_missing_value_raises():
    with pytest.raises(ConfigError, match="--data-dir"):
        Config.from_args(["--data-dir"])


def test_data_path():
    config = Config.from_args(["--data-dir", "some/dir"])
    assert config.data_path() == Path("some/dir")