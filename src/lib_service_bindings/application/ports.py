"""Application-layer ports describing collaborator responsibilities.

Purpose
-------
Define the structural contracts the composition root and the registry depend
on, so adapters and processors can be swapped without touching orchestration.

Contents
--------
* :data:`CapabilityProbe` – predicate answering "is this capability loadable?".
* :class:`BindingsLoader` – produces a :class:`Bindings` snapshot.
* :class:`FileLoader` – parses a structured settings file.
* :class:`EnvLoader` – materialises prefixed environment variables.
* :class:`KindGuard` – decides whether a kind is enabled.
* :class:`PropertiesProcessor` – translates bindings of one kind.

System Role
-----------
These protocols enforce Dependency Inversion. Each adapter or processor
implements one protocol; tests assert conformance with ``isinstance`` checks.
"""

from __future__ import annotations

from typing import Callable, Mapping, MutableMapping, Protocol, runtime_checkable

from ..domain.binding import Bindings

CapabilityProbe = Callable[[str], bool]
"""Return ``True`` when the named runtime capability (e.g. a driver class) is available."""


@runtime_checkable
class BindingsLoader(Protocol):
    """Discover bindings and return an immutable snapshot.

    Why
    ----
    Keep filesystem conventions (Kubernetes, Buildpacks) out of the core.
    """

    def load(self) -> Bindings:
        """Return every binding discovered by the loader."""


@runtime_checkable
class FileLoader(Protocol):
    """Parse a structured settings file into a mapping."""

    def load(self, path: str) -> Mapping[str, object]:
        """Read *path* and return a mapping or raise ``InvalidFormat``/``NotFound``."""


@runtime_checkable
class EnvLoader(Protocol):
    """Translate prefixed environment variables into nested settings."""

    def load(self, prefix: str) -> Mapping[str, object]:
        """Return variables that match *prefix* (``__`` for nesting)."""


@runtime_checkable
class KindGuard(Protocol):
    """Enable/disable predicate consulted once per processor invocation."""

    def is_kind_enabled(self, kind: str) -> bool:
        """Return ``False`` only when configuration explicitly disables *kind*."""


@runtime_checkable
class PropertiesProcessor(Protocol):
    """Map bindings of one kind into framework properties.

    Why
    ----
    The registry treats every technology uniformly; only the kind tag and the
    mapping rules differ.
    """

    kind: str

    def process(self, bindings: Bindings, properties: MutableMapping[str, object]) -> None:
        """Write properties for every enabled binding of :attr:`kind`."""
