"""Tests for config loading and the endpoint model."""

import pytest

from owlim.config import (
    DEFAULT_TIMEOUT,
    LONG_TIMEOUT,
    Endpoint,
    HeadOptions,
    QueryOptions,
    load_config,
)
from owlim.result import FailKind


class TestEndpoint:
    def test_parts(self):
        ep = Endpoint.from_url("http://localhost:8080/openrdf-sesame/")
        assert (ep.scheme, ep.host, ep.port, ep.path) == ("http", "localhost", 8080, "/openrdf-sesame")

    def test_default_ports(self):
        assert Endpoint.from_url("http://store/sesame").port == 80
        assert Endpoint.from_url("https://store/sesame").port == 443

    def test_resolve(self):
        ep = Endpoint.from_url("http://store:8080/sesame")
        assert ep.resolve("/repositories") == "http://store:8080/sesame/repositories"

    def test_ipv6_host_keeps_brackets(self):
        ep = Endpoint.from_url("http://[::1]:8080/s")
        assert ep.host == "[::1]"
        assert ep.resolve("/repositories") == "http://[::1]:8080/s/repositories"

    def test_ipv6_default_port(self):
        assert Endpoint.from_url("https://[fe80::1]/s").resolve("/x") == "https://[fe80::1]:443/s/x"

    def test_immutable(self):
        ep = Endpoint.from_url("http://store:8080/sesame")
        with pytest.raises(AttributeError):
            ep.host = "other"

    @pytest.mark.parametrize("url", ["", "store:8080", "ftp://store/x"])
    def test_invalid(self, url):
        with pytest.raises(ValueError):
            Endpoint.from_url(url)


class TestOptions:
    def test_query_defaults(self):
        options = QueryOptions()
        assert options.format == "tabular"
        assert options.infer is False

    def test_head_defaults(self):
        options = HeadOptions()
        assert (options.limit, options.offset, options.format) == (20, 1, "tabular")


class TestLoadConfig:
    def test_full(self, tmp_path):
        path = tmp_path / "owlim.yaml"
        path.write_text(
            "endpoint: http://store:8080/sesame\n"
            "timeout: 5\n"
            "long_timeout: 600\n"
            "default_prefixes: false\n"
            "prefixes:\n"
            "  ex: http://example.org/\n",
            encoding="utf-8",
        )
        result = load_config(path)
        assert result.ok
        config = result.data
        assert config.endpoint.port == 8080
        assert config.timeout == 5
        assert config.long_timeout == 600
        assert config.default_prefixes is False
        assert config.prefixes == {"ex": "http://example.org/"}

    def test_defaults(self, tmp_path):
        path = tmp_path / "owlim.yaml"
        path.write_text("endpoint: http://store/sesame\n", encoding="utf-8")
        config = load_config(path).data
        assert config.timeout == DEFAULT_TIMEOUT
        assert config.long_timeout == LONG_TIMEOUT
        assert config.default_prefixes is True
        assert config.prefixes == {}

    def test_missing_file(self, tmp_path):
        result = load_config(tmp_path / "nope.yaml")
        assert not result.ok
        assert result.kind is FailKind.CONFIG

    def test_yaml_error(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("endpoint: [unclosed\n", encoding="utf-8")
        assert load_config(path).kind is FailKind.CONFIG

    def test_missing_endpoint(self, tmp_path):
        path = tmp_path / "owlim.yaml"
        path.write_text("timeout: 5\n", encoding="utf-8")
        result = load_config(path)
        assert not result.ok
        assert "endpoint" in result.error
