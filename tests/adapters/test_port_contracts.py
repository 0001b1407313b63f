"""Adapter contract tests: default adapters satisfy the application ports."""

from __future__ import annotations

from pathlib import Path

import pytest

from lib_service_bindings.adapters.bindings.directory import DirectoryBindingsLoader
from lib_service_bindings.adapters.capabilities.default import StaticCapabilityProbe, capability_probe_from_settings
from lib_service_bindings.adapters.env.default import DefaultEnvLoader
from lib_service_bindings.adapters.file_loaders.structured import JSONFileLoader, TOMLFileLoader, YAMLFileLoader
from lib_service_bindings.application import ports
from lib_service_bindings.domain.binding import Bindings
from lib_service_bindings.domain.settings import Settings
from tests.support import create_bindings_sandbox


def test_directory_loader_contract(tmp_path: Path) -> None:
    sandbox = create_bindings_sandbox(tmp_path)
    sandbox.write_kubernetes("cache", "Redis", {"host": "redis"})
    loader = DirectoryBindingsLoader(sandbox.root)
    assert isinstance(loader, ports.BindingsLoader)
    assert isinstance(loader.load(), Bindings)


def test_env_loader_contract() -> None:
    loader = DefaultEnvLoader(environ={})
    assert isinstance(loader, ports.EnvLoader)
    assert loader.load("SERVICE_BINDINGS") == {}


@pytest.mark.parametrize("loader_type", [TOMLFileLoader, JSONFileLoader, YAMLFileLoader])
def test_file_loader_contract(loader_type) -> None:
    assert isinstance(loader_type(), ports.FileLoader)


def test_static_probe() -> None:
    probe = StaticCapabilityProbe(["org.postgresql.Driver", " ", ""])
    assert probe("org.postgresql.Driver") is True
    assert probe("org.mariadb.jdbc.Driver") is False
    assert probe.names == frozenset({"org.postgresql.Driver"})


@pytest.mark.parametrize(
    "raw",
    [
        ["org.mariadb.jdbc.Driver", "org.postgresql.Driver"],
        "org.mariadb.jdbc.Driver, org.postgresql.Driver",
    ],
)
def test_probe_from_settings_accepts_list_or_csv(raw) -> None:
    probe = capability_probe_from_settings(Settings({"bindings": {"capabilities": raw}}))
    assert probe.names == frozenset({"org.mariadb.jdbc.Driver", "org.postgresql.Driver"})


def test_probe_from_settings_adds_extras_and_ignores_junk() -> None:
    probe = capability_probe_from_settings(Settings({"bindings": {"capabilities": 42}}), ["com.mysql.cj.jdbc.Driver"])
    assert probe.names == frozenset({"com.mysql.cj.jdbc.Driver"})
