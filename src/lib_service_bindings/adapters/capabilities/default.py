"""Capability probe adapters.

Purpose
-------
Answer "is this driver available?" for processors that choose between driver
classes. The host application's runtime is outside this process, so the
available capabilities are declared explicitly, either in settings
(``bindings.capabilities``) or on the command line.

Contents
--------
* :class:`StaticCapabilityProbe` – probe backed by a fixed set of names.
* :func:`capability_probe_from_settings` – builds a probe from settings plus
  optional extra names.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable

from ...observability import log_debug

CAPABILITIES_KEY = "bindings.capabilities"


class StaticCapabilityProbe:
    """Report exactly the configured capability names as available.

    Examples
    --------
    >>> probe = StaticCapabilityProbe(["org.postgresql.Driver"])
    >>> probe("org.postgresql.Driver"), probe("com.mysql.cj.jdbc.Driver")
    (True, False)
    """

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names = frozenset(name.strip() for name in names if name and name.strip())

    @property
    def names(self) -> frozenset[str]:
        return self._names

    def __call__(self, name: str) -> bool:
        return name in self._names

    def __repr__(self) -> str:
        return f"StaticCapabilityProbe({sorted(self._names)!r})"


def capability_probe_from_settings(settings: Mapping[str, Any], extra: Iterable[str] = ()) -> StaticCapabilityProbe:
    """Build a probe from ``bindings.capabilities`` plus *extra* names.

    The setting may be a list of names or a comma-separated string (the shape
    environment variables produce).

    Examples
    --------
    >>> from lib_service_bindings.domain.settings import Settings
    >>> settings = Settings({"bindings": {"capabilities": "org.mariadb.jdbc.Driver, org.postgresql.Driver"}})
    >>> sorted(capability_probe_from_settings(settings).names)
    ['org.mariadb.jdbc.Driver', 'org.postgresql.Driver']
    """

    raw = _lookup(settings, CAPABILITIES_KEY)
    names = [*_as_names(raw), *extra]
    probe = StaticCapabilityProbe(names)
    log_debug("capabilities_declared", capabilities=sorted(probe.names))
    return probe


def _lookup(settings: Mapping[str, Any], dotted: str) -> Any:
    current: Any = settings
    for part in dotted.split("."):
        if not isinstance(current, Mapping) or part not in current:
            return None
        current = current[part]
    return current


def _as_names(raw: Any) -> list[str]:
    if raw is None:
        return []
    if isinstance(raw, str):
        return [part.strip() for part in raw.split(",")]
    if isinstance(raw, (list, tuple, set, frozenset)):
        return [str(item) for item in raw]
    log_debug("capabilities_ignored", value=repr(raw))
    return []
