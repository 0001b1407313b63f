"""Ordered processor registry.

Purpose
-------
Run every known processor against one bindings snapshot and one shared
property map, in a fixed and inspectable order.

Contents
--------
* :class:`ProcessorRegistry` – holds the ordered processors and runs a pass.
* :func:`default_registry` – builds the registry of all bundled processors.

Ordering
--------
Processors run in registration order and write into the same map, so when two
processors write one key the later one wins. The default order is
alphabetical by kind: Cassandra, Kafka, MongoDB, MySQL, PostgreSQL, RabbitMQ,
Redis.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Iterable, Iterator

from ..domain.binding import Bindings
from ..domain.errors import DuplicateProcessor
from ..observability import log_debug, log_info
from ..processors import PROCESSOR_TYPES
from .ports import CapabilityProbe, KindGuard, PropertiesProcessor


class ProcessorRegistry:
    """Fixed, ordered list of processors.

    Examples
    --------
    >>> from lib_service_bindings.domain.binding import Binding
    >>> registry = default_registry()
    >>> registry.kinds()
    ('Cassandra', 'Kafka', 'MongoDB', 'MySQL', 'PostgreSQL', 'RabbitMQ', 'Redis')
    >>> bindings = Bindings([Binding("events", "Kafka", {"bootstrap-servers": "k:9092"})])
    >>> registry.process_all(bindings)
    {'spring.kafka.bootstrap-servers': 'k:9092'}
    """

    def __init__(self, processors: Iterable[PropertiesProcessor]) -> None:
        ordered = tuple(processors)
        seen: set[str] = set()
        for processor in ordered:
            if processor.kind in seen:
                raise DuplicateProcessor(f"More than one processor registered for kind {processor.kind!r}")
            seen.add(processor.kind)
        self._processors = ordered

    def __iter__(self) -> Iterator[PropertiesProcessor]:
        return iter(self._processors)

    def __len__(self) -> int:
        return len(self._processors)

    def kinds(self) -> tuple[str, ...]:
        """Return the registered kinds in execution order."""

        return tuple(processor.kind for processor in self._processors)

    def process_all(
        self,
        bindings: Bindings,
        properties: MutableMapping[str, object] | None = None,
    ) -> MutableMapping[str, object]:
        """Run every processor in order against *bindings*.

        Parameters
        ----------
        bindings:
            Snapshot shared by every processor.
        properties:
            Map to populate; a fresh ``dict`` is created when omitted.

        Returns
        -------
        MutableMapping[str, object]
            The populated map (the same object when one was supplied).
        """

        if properties is None:
            properties = {}
        for processor in self._processors:
            log_debug("processor_started", kind=processor.kind)
            processor.process(bindings, properties)
        log_info("properties_resolved", bindings=len(bindings), properties=len(properties))
        return properties


def default_registry(guard: KindGuard | None = None, probe: CapabilityProbe | None = None) -> ProcessorRegistry:
    """Return a registry of all bundled processors sharing *guard* and *probe*."""

    return ProcessorRegistry(processor_type(guard, probe) for processor_type in PROCESSOR_TYPES)
