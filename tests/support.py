"""Shared sandbox helpers for filesystem-backed binding tests.

The sandbox writes bindings in either mounted layout below a temporary root
and exposes the environment variables that point the library at it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

import pytest


@dataclass
class BindingsSandbox:
    root: Path
    env: dict[str, str] = field(default_factory=dict)

    def write_kubernetes(
        self,
        name: str,
        kind: str,
        secret: Mapping[str, str],
        *,
        provider: str | None = None,
    ) -> Path:
        """Write a binding in the ``<name>/type`` + flat secret file layout."""

        directory = self.root / name
        directory.mkdir(parents=True, exist_ok=True)
        (directory / "type").write_text(f"{kind}\n", encoding="utf-8")
        if provider is not None:
            (directory / "provider").write_text(f"{provider}\n", encoding="utf-8")
        for key, value in secret.items():
            (directory / key).write_text(value, encoding="utf-8")
        return directory

    def write_buildpacks(
        self,
        name: str,
        kind: str,
        secret: Mapping[str, str],
        *,
        provider: str | None = None,
    ) -> Path:
        """Write a binding in the ``metadata/`` + ``secret/`` layout."""

        directory = self.root / name
        (directory / "metadata").mkdir(parents=True, exist_ok=True)
        (directory / "secret").mkdir(parents=True, exist_ok=True)
        (directory / "metadata" / "kind").write_text(kind, encoding="utf-8")
        if provider is not None:
            (directory / "metadata" / "provider").write_text(provider, encoding="utf-8")
        for key, value in secret.items():
            (directory / "secret" / key).write_text(value, encoding="utf-8")
        return directory

    def apply_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CNB_BINDINGS", raising=False)
        for key, value in self.env.items():
            monkeypatch.setenv(key, value)


def create_bindings_sandbox(tmp_path: Path) -> BindingsSandbox:
    root = tmp_path / "bindings"
    root.mkdir(parents=True, exist_ok=True)
    return BindingsSandbox(root=root, env={"SERVICE_BINDING_ROOT": str(root)})


MYSQL_SECRET = {
    "host": "h",
    "port": "5432",
    "database": "d",
    "username": "u",
    "password": "p",
}

KAFKA_SECRET = {
    "bootstrap-servers": "kafka:9092",
    "consumer.bootstrap-servers": "consumer:9092",
    "producer.bootstrap-servers": "producer:9092",
    "streams.bootstrap-servers": "streams:9092",
}
