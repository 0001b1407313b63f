"""Shared skeleton for per-kind binding processors.

Purpose
-------
Every technology processor follows the same three steps: consult the guard,
select bindings of its kind, and apply its mapping rules to each one. The
skeleton lives here so concrete processors only describe their mapping.

Contents
--------
* :class:`BindingsPropertiesProcessor` – base class implementing
  :class:`~lib_service_bindings.application.ports.PropertiesProcessor`.
* :class:`SimpleBindingsPropertiesProcessor` – variant driven by a static
  ``secret key -> property key`` table.
* :func:`probe_first` – returns the first capability a probe reports.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import ClassVar, Iterable

from ..application.guard import Guard
from ..application.mapper import MapMapper
from ..application.ports import CapabilityProbe, KindGuard
from ..domain.binding import Binding, Bindings
from ..observability import log_debug, make_event


def _never(_name: str) -> bool:
    return False


class BindingsPropertiesProcessor:
    """Translate bindings of :attr:`kind` into framework properties.

    Why
    ----
    Keeps guard evaluation and binding selection identical across kinds so
    disabled or unmatched kinds provably leave the property map untouched.

    Parameters
    ----------
    guard:
        Enable/disable predicate; defaults to a guard with empty settings
        (everything enabled).
    probe:
        Capability probe for processors that choose between drivers; defaults
        to a probe that reports nothing as available.
    """

    kind: ClassVar[str]

    def __init__(self, guard: KindGuard | None = None, probe: CapabilityProbe | None = None) -> None:
        self._guard = guard if guard is not None else Guard()
        self._probe = probe if probe is not None else _never

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!r})"

    def process(self, bindings: Bindings, properties: MutableMapping[str, object]) -> None:
        """Apply the mapping rules to every matching binding when enabled."""

        if not self._guard.is_kind_enabled(self.kind):
            log_debug("processor_disabled", **make_event(self.kind, None))
            return
        for binding in bindings.filter_bindings(self.kind):
            before = len(properties)
            self.apply(binding, properties)
            log_debug(
                "binding_processed",
                **make_event(self.kind, binding.name, {"new_properties": len(properties) - before}),
            )

    def apply(self, binding: Binding, properties: MutableMapping[str, object]) -> None:
        """Write the properties derived from one *binding*."""

        raise NotImplementedError


class SimpleBindingsPropertiesProcessor(BindingsPropertiesProcessor):
    """Processor whose whole behaviour is a table of key renames."""

    mappings: ClassVar[tuple[tuple[str, str], ...]] = ()

    def apply(self, binding: Binding, properties: MutableMapping[str, object]) -> None:
        mapper = MapMapper(binding.get_secret(), properties)
        for source, target in self.mappings:
            mapper.from_(source).to(target)


def probe_first(probe: CapabilityProbe, candidates: Iterable[str]) -> str | None:
    """Return the first of *candidates* that *probe* reports as available.

    Probe failures count as "unavailable" and never propagate.

    Examples
    --------
    >>> probe_first(lambda name: name == "b", ["a", "b", "c"])
    'b'
    >>> probe_first(lambda name: False, ["a"]) is None
    True
    """

    for candidate in candidates:
        try:
            available = probe(candidate)
        except Exception as exc:  # noqa: BLE001 - a broken probe means "not available"
            log_debug("capability_probe_failed", capability=candidate, error=str(exc))
            continue
        if available:
            return candidate
    return None
