"""Enable/disable guard for binding kinds.

Purpose
-------
Decide whether the processor for a kind may run. One guard instance reads one
injected settings source, so every processor in a pass sees the same answer.

Contents
--------
* :data:`DEFAULT_FLAG_PREFIX` – namespace of the guard flags.
* :class:`Guard` – the predicate, implementing :class:`~lib_service_bindings.application.ports.KindGuard`.
* :func:`parse_flag` – tolerant boolean parsing for file and environment values.

Flag Convention
---------------
``<prefix>.<kind-lowercase>.enabled`` decides for one kind; ``<prefix>.enabled``
decides for every kind that has no flag of its own. Absence means enabled.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final

from ..domain.settings import EMPTY_SETTINGS, Settings
from ..observability import log_debug

DEFAULT_FLAG_PREFIX: Final[str] = "bindings"

_TRUE_WORDS: Final[frozenset[str]] = frozenset({"true", "1", "yes", "on"})
_FALSE_WORDS: Final[frozenset[str]] = frozenset({"false", "0", "no", "off"})


def parse_flag(value: Any) -> bool | None:
    """Interpret *value* as a boolean flag; ``None`` when it is not one.

    Examples
    --------
    >>> parse_flag(False), parse_flag("OFF"), parse_flag(" yes "), parse_flag(1)
    (False, False, True, True)
    >>> parse_flag("maybe") is None, parse_flag(None) is None
    (True, True)
    """

    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_WORDS:
            return True
        if lowered in _FALSE_WORDS:
            return False
    return None


class Guard:
    """Answer whether processing is enabled for a kind.

    Why
    ----
    Operators must be able to switch off the translation of a technology (or of
    all technologies) without removing the mounted secrets.

    Examples
    --------
    >>> guard = Guard(Settings({"bindings": {"mysql": {"enabled": "false"}}}))
    >>> guard.is_kind_enabled("MySQL"), guard.is_kind_enabled("Kafka")
    (False, True)
    >>> Guard().is_kind_enabled("Redis")
    True
    """

    def __init__(self, settings: Mapping[str, Any] | None = None, *, prefix: str = DEFAULT_FLAG_PREFIX) -> None:
        if settings is None:
            settings = EMPTY_SETTINGS
        elif not isinstance(settings, Settings):
            settings = Settings(settings)
        self._settings = settings
        self._prefix = prefix

    @property
    def prefix(self) -> str:
        return self._prefix

    def kind_flag(self, kind: str) -> str:
        """Return the dotted flag name controlling *kind*.

        >>> Guard().kind_flag("PostgreSQL")
        'bindings.postgresql.enabled'
        """

        return f"{self._prefix}.{kind.lower()}.enabled"

    def global_flag(self) -> str:
        """Return the dotted flag name controlling every kind."""

        return f"{self._prefix}.enabled"

    def is_kind_enabled(self, kind: str) -> bool:
        """Return ``True`` unless configuration explicitly disables *kind*."""

        for flag in (self.kind_flag(kind), self.global_flag()):
            decision = self._read(flag)
            if decision is not None:
                return decision
        return True

    def _read(self, flag: str) -> bool | None:
        raw = self._settings.get(flag)
        if raw is None:
            parent = flag.rpartition(".")[0]
            container = self._settings.get(parent) if parent else None
            if container is not None and not isinstance(container, Mapping):
                log_debug("guard_flag_invalid", flag=flag, value=repr(container), reason=f"{parent} is not a table")
            return None
        decision = parse_flag(raw)
        if decision is None:
            log_debug("guard_flag_invalid", flag=flag, value=repr(raw))
        return decision
