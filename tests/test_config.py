"""Tests for the dot-path Config accessor."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import BaseModel

from dotfn.config import Config
from dotfn.errors import ConfigError, ConfigNotFoundError, EnvVarNotSetError
from dotfn.path import GetterCache


class ServerSettings(BaseModel):
    host: str
    port: int
    debug: bool = False


class CacheSettings(BaseModel):
    ttl: int = 60


class TestConfigAccess:
    def test_get_nested_value(self) -> None:
        config = Config({"server": {"port": 8080}})
        assert config.get("server.port") == 8080

    def test_get_missing_returns_default(self) -> None:
        config = Config({"server": {}})
        assert config.get("server.port") is None
        assert config.get("server.port", 80) == 80

    def test_false_value_is_not_replaced_by_default(self) -> None:
        config = Config({"debug": False})
        assert config.get("debug", True) is False

    def test_require_present(self) -> None:
        assert Config({"a": {"b": 1}}).require("a.b") == 1

    def test_require_missing_raises(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            Config().require("a.b")
        assert exc_info.value.details == {"key": "a.b"}

    def test_set_creates_sections(self) -> None:
        config = Config()
        assert config.set("db.url", "sqlite://") is config
        assert config.get("db.url") == "sqlite://"
        assert config.to_dict() == {"db": {"url": "sqlite://"}}

    def test_to_dict_is_a_copy(self) -> None:
        config = Config({"a": {"b": 1}})
        snapshot = config.to_dict()
        snapshot["a"]["b"] = 2
        assert config.get("a.b") == 1

    def test_uses_injected_cache(self) -> None:
        cache = GetterCache()
        Config({"a": {"b": 1}}, cache=cache).get("a.b")
        assert "a" in cache

    def test_falsy_parent_returns_default(self) -> None:
        config = Config({"db": "", "cache": {"ttl": 0}})
        assert config.get("db.port", 5432) == 5432
        assert config.get("cache.ttl.unit", "s") == "s"
        assert config.get("cache.ttl", 30) == 0

    def test_scalar_parent_returns_default(self) -> None:
        config = Config({"name": "svc", "count": 3})
        assert config.get("name.0", "d") == "d"
        assert config.get("count.real") is None

    def test_empty_key_returns_all_data(self) -> None:
        data = {"a": 1}
        assert Config(data).get("") is data

    def test_require_raises_under_falsy_parent(self) -> None:
        config = Config({"server": False})
        with pytest.raises(ConfigError) as exc_info:
            config.require("server.port")
        assert exc_info.value.details == {"key": "server.port"}


class TestConfigLoad:
    def test_loads_yaml_file(self, config_yaml: Path) -> None:
        config = Config.load(config_yaml)
        assert config.get("server.host") == "localhost"
        assert config.get("server.port") == 8080
        assert config.get("features.1") == "export"

    def test_accepts_string_path(self, config_yaml: Path) -> None:
        assert Config.load(str(config_yaml)).get("server.debug") is False

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigNotFoundError) as exc_info:
            Config.load(tmp_path / "nope.yaml")
        assert exc_info.value.config_path.endswith("nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.yaml"
        bad.write_text("server: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            Config.load(bad)

    def test_non_mapping_root(self, tmp_path: Path) -> None:
        bad = tmp_path / "list.yaml"
        bad.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="must be a mapping"):
            Config.load(bad)

    def test_empty_file(self, tmp_path: Path) -> None:
        empty = tmp_path / "empty.yaml"
        empty.write_text("")
        assert Config.load(empty).to_dict() == {}


class TestConfigEnv:
    def test_copies_environment_variable(self, monkeypatch) -> None:
        monkeypatch.setenv("DOTFN_TEST_DB", "postgres://db")
        config = Config()
        assert config.env("db.url", "DOTFN_TEST_DB") == "postgres://db"
        assert config.get("db.url") == "postgres://db"

    def test_uses_default(self, monkeypatch) -> None:
        monkeypatch.delenv("DOTFN_TEST_DB", raising=False)
        config = Config()
        assert config.env("db.url", "DOTFN_TEST_DB", "sqlite://") == "sqlite://"
        assert config.get("db.url") == "sqlite://"

    def test_raises_without_default(self, monkeypatch) -> None:
        monkeypatch.delenv("DOTFN_TEST_DB", raising=False)
        config = Config()
        with pytest.raises(EnvVarNotSetError):
            config.env("db.url", "DOTFN_TEST_DB")
        assert config.get("db.url") is None


class TestConfigSection:
    def test_validates_subtree(self, config_yaml: Path) -> None:
        server = Config.load(config_yaml).section("server", ServerSettings)
        assert server == ServerSettings(host="localhost", port=8080, debug=False)

    def test_missing_section_uses_defaults(self) -> None:
        assert Config().section("cache", CacheSettings).ttl == 60

    def test_invalid_section_raises_config_error(self) -> None:
        config = Config({"server": {"host": "h", "port": "not-a-port"}})
        with pytest.raises(ConfigError) as exc_info:
            config.section("server", ServerSettings)
        error = exc_info.value
        assert error.details["key"] == "server"
        assert [e["path"] for e in error.details["errors"]] == ["server.port"]
        assert error.cause is not None
