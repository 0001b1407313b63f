"""Domain-level settings value object.

Purpose
-------
Carry the merged library settings (guard flags, capability lists) through the
system as an immutable, dotted-path friendly mapping. The module contains no
I/O; adapters produce the raw payload and the composition root wraps it.

Contents
--------
* :class:`Settings` – ``Mapping`` implementation with dotted lookups.
* :func:`_freeze` / :func:`_thaw` – helpers converting between nested
  read-only proxies and plain dictionaries.
* :data:`EMPTY_SETTINGS` – canonical instance used when no layer produced
  values; every guard reads it as "everything enabled".

System Role
-----------
:class:`lib_service_bindings.application.guard.Guard` and the default capability
probe read from a :class:`Settings` instance injected at construction time, so
a single object decides every enable/disable question during a pass.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterator, TypeVar, overload

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Settings(Mapping[str, Any]):
    """Immutable nested mapping with dotted-path access.

    Why
    ----
    Guards and probes need read-only access to flags such as
    ``bindings.mysql.enabled`` without caring whether they came from a file or
    the environment.

    Parameters
    ----------
    _data:
        Nested mapping produced by the merge policy. Nested mappings are frozen
        during initialisation.

    Examples
    --------
    >>> settings = Settings({"bindings": {"mysql": {"enabled": False}}})
    >>> settings.get("bindings.mysql.enabled")
    False
    >>> settings.get("bindings.kafka.enabled", default=True)
    True
    >>> settings.with_overrides({"bindings": {"enabled": False}}).get("bindings.enabled")
    False
    """

    _data: Mapping[str, Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "_data", _freeze(self._data))

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    @overload
    def get(self, key: str, *, default: T) -> Any | T:  # type: ignore[override]
        ...

    @overload
    def get(self, key: str, *, default: None = ...) -> Any | None:  # type: ignore[override]
        ...

    def get(self, key: str, *, default: Any = None) -> Any:
        """Resolve *key* as a dotted path, returning ``default`` when missing.

        A literal top-level key containing dots (as produced by flat
        ``.properties``-style sources) wins over the nested interpretation.
        """

        if key in self._data:
            return self._data[key]
        current: Any = self._data
        for part in key.split("."):
            if not isinstance(current, Mapping) or part not in current:
                return default
            current = current[part]
        return current

    def as_dict(self) -> dict[str, Any]:
        """Return a deep, mutable copy of the settings tree.

        Examples
        --------
        >>> settings = Settings({"bindings": {"capabilities": ["a"]}})
        >>> clone = settings.as_dict()
        >>> clone["bindings"]["capabilities"].append("b")
        >>> settings.get("bindings.capabilities")
        ('a',)
        """

        return _thaw(self._data)

    def with_overrides(self, overrides: Mapping[str, Any]) -> Settings:
        """Return new settings with *overrides* deep-merged on top."""

        merged = self.as_dict()
        _overlay(merged, overrides)
        return Settings(merged)


def _freeze(value: Any) -> Any:
    """Wrap mappings in read-only proxies and lists in tuples, recursively."""

    if isinstance(value, Mapping):
        return MappingProxyType({str(key): _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _overlay(target: dict[str, Any], overrides: Mapping[str, Any]) -> None:
    """Deep-merge *overrides* into *target* in place."""

    for key, value in overrides.items():
        existing = target.get(key)
        if isinstance(value, Mapping) and isinstance(existing, dict):
            _overlay(existing, value)
        else:
            target[key] = _thaw(value)


def _thaw(value: Any) -> Any:
    """Inverse of :func:`_freeze` producing plain ``dict``/``list`` containers."""

    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


#: Shared empty settings; every kind is enabled and no capability is known.
EMPTY_SETTINGS = Settings({})
