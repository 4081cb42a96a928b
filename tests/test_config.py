"""Tests for environment-driven server configuration."""

import pytest
from pydantic import ValidationError

from rss_reader.core.config import (
    DEFAULT_TIMEOUT,
    ServerConfig,
    Transport,
    load_server_config,
)


class TestLoadServerConfig:
    """load_server_config() maps environment variables onto ServerConfig."""

    def test_defaults_with_empty_environment(self):
        cfg = load_server_config({})
        assert cfg.transport is Transport.stdio
        assert cfg.host == "localhost"
        assert cfg.port == 8081
        assert cfg.request_timeout == DEFAULT_TIMEOUT
        assert "Mozilla" in cfg.user_agent

    def test_reads_http_settings(self):
        cfg = load_server_config(
            {"TRANSPORT": "http", "MCP_SERVER_HOST": "0.0.0.0", "PORT": "9000"}
        )
        assert cfg.transport is Transport.http
        assert cfg.host == "0.0.0.0"
        assert cfg.port == 9000

    def test_legacy_http_stream_name(self):
        cfg = load_server_config({"TRANSPORT": "httpStream"})
        assert cfg.transport is Transport.http

    def test_blank_values_keep_defaults(self):
        cfg = load_server_config({"PORT": "", "TRANSPORT": ""})
        assert cfg.port == 8081
        assert cfg.transport is Transport.stdio

    def test_timeout_and_user_agent(self):
        cfg = load_server_config(
            {"RSS_READER_TIMEOUT": "5.5", "RSS_READER_USER_AGENT": "TestBot/1.0"}
        )
        assert cfg.request_timeout == 5.5
        assert cfg.user_agent == "TestBot/1.0"

    def test_invalid_port(self):
        with pytest.raises(ValidationError):
            load_server_config({"PORT": "not-a-port"})

    def test_out_of_range_port(self):
        with pytest.raises(ValidationError):
            load_server_config({"PORT": "70000"})

    def test_unknown_transport(self):
        with pytest.raises(ValidationError):
            load_server_config({"TRANSPORT": "carrier-pigeon"})


def test_server_config_rejects_non_positive_timeout():
    with pytest.raises(ValidationError):
        ServerConfig(request_timeout=0)
