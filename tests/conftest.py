"""Shared fixtures for the dotfn test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from dotfn.path import GetterCache


@pytest.fixture
def cache() -> GetterCache:
    """An empty getter cache isolated from the process-wide one."""
    return GetterCache()


@pytest.fixture
def nested() -> dict:
    """Nested data mixing dicts, lists and primitives."""
    return {"root": {"arr": [1, 2, {"lol": "wut", "inner": [3]}]}}


@pytest.fixture
def config_yaml(tmp_path: Path) -> Path:
    """Write a sample config YAML file and return its path."""
    content = """
server:
  host: localhost
  port: 8080
  debug: false
features:
  - search
  - export
"""
    yaml_file = tmp_path / "config.yaml"
    yaml_file.write_text(content)
    return yaml_file
