"""Domain value objects for discovered service bindings.

Purpose
-------
Model the secret bundles mounted into an application's container. A binding
carries credentials for one backing service (database, broker, cache) and is
tagged with a *kind* that selects the processor able to translate it.

Contents
--------
* :class:`Binding` – immutable value object for one secret bundle.
* :class:`Bindings` – ordered, immutable collection with kind filtering.
* :data:`EMPTY_BINDINGS` – canonical empty snapshot.

System Role
-----------
Loaders (see :mod:`lib_service_bindings.adapters.bindings.directory`) build a
:class:`Bindings` snapshot once at start-up; processors only read it. The
module contains no I/O.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Iterator, overload

from .errors import DuplicateBinding, InvalidBinding


@dataclass(frozen=True, slots=True)
class Binding:
    """One discovered secret bundle tagged with a technology kind.

    Why
    ----
    Processors need a read-only view of the secret plus the metadata that
    decides whether they apply.

    Parameters
    ----------
    name:
        Unique name of the binding (typically the mount directory name).
    kind:
        Technology tag such as ``"MySQL"`` or ``"Kafka"``. Compared
        case-sensitively.
    secret:
        Flat mapping of secret entries. Values must be strings; absent entries
        are simply absent.
    provider:
        Optional provider label (e.g. ``"bitnami"``).

    Examples
    --------
    >>> binding = Binding("orders-db", "MySQL", {"host": "db", "port": "3306"})
    >>> binding.get_secret()["host"]
    'db'
    >>> binding.provider is None
    True
    """

    name: str
    kind: str
    secret: Mapping[str, str] = field(default_factory=dict)
    provider: str | None = None

    def __post_init__(self) -> None:
        """Validate identity fields and freeze the secret mapping."""

        if not self.name:
            raise InvalidBinding("Binding name must not be empty")
        if not self.kind:
            raise InvalidBinding(f"Binding {self.name!r} has no kind")
        for key, value in self.secret.items():
            if not isinstance(value, str):
                raise InvalidBinding(
                    f"Binding {self.name!r} secret entry {key!r} must be a string, got {type(value).__name__}"
                )
        object.__setattr__(self, "secret", MappingProxyType(dict(self.secret)))

    def __hash__(self) -> int:
        return hash((self.name, self.kind, self.provider, tuple(sorted(self.secret.items()))))

    def get_secret(self) -> Mapping[str, str]:
        """Return the raw key/value secret mapping."""

        return self.secret

    def __repr__(self) -> str:
        # secret values stay out of logs and tracebacks
        return (
            f"Binding(name={self.name!r}, kind={self.kind!r}, "
            f"provider={self.provider!r}, keys={sorted(self.secret)!r})"
        )


class Bindings(Sequence[Binding]):
    """Ordered collection of :class:`Binding` in discovery order.

    Why
    ----
    Every processor queries the same snapshot, so the collection must be
    immutable and its ordering deterministic.

    What
    ----
    Stores bindings in a tuple, rejects duplicate names, and answers kind
    queries with stable sub-ordering.

    Examples
    --------
    >>> bindings = Bindings([
    ...     Binding("a", "MySQL", {}),
    ...     Binding("b", "Kafka", {}),
    ...     Binding("c", "MySQL", {}),
    ... ])
    >>> [b.name for b in bindings.filter_bindings("MySQL")]
    ['a', 'c']
    >>> bindings.filter_bindings("mysql")
    ()
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[Binding] = ()) -> None:
        collected = tuple(entries)
        seen: set[str] = set()
        for binding in collected:
            if binding.name in seen:
                raise DuplicateBinding(f"Duplicate binding name: {binding.name!r}")
            seen.add(binding.name)
        self._entries = collected

    @overload
    def __getitem__(self, index: int) -> Binding: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Binding]: ...

    def __getitem__(self, index: int | slice) -> Binding | Sequence[Binding]:
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Binding]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bindings):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"Bindings({list(self._entries)!r})"

    def filter_bindings(self, kind: str) -> tuple[Binding, ...]:
        """Return every binding whose kind equals *kind* (case-sensitive).

        Returns
        -------
        tuple[Binding, ...]
            Matches in discovery order; empty when nothing matches.
        """

        return tuple(binding for binding in self._entries if binding.kind == kind)

    def find_binding(self, name: str) -> Binding | None:
        """Return the binding called *name* or ``None``."""

        for binding in self._entries:
            if binding.name == name:
                return binding
        return None

    def kinds(self) -> tuple[str, ...]:
        """Return the distinct kinds present, in order of first appearance.

        Examples
        --------
        >>> Bindings([Binding("a", "Redis"), Binding("b", "Kafka"), Binding("c", "Redis")]).kinds()
        ('Redis', 'Kafka')
        """

        return tuple(dict.fromkeys(binding.kind for binding in self._entries))


#: Shared empty snapshot used when discovery finds nothing.
EMPTY_BINDINGS = Bindings()
