"""Cassandra binding processor.

Maps secrets of kind ``Cassandra`` onto Spring Data Cassandra properties.
"""

from __future__ import annotations

from typing import Final

from .base import SimpleBindingsPropertiesProcessor

KIND: Final[str] = "Cassandra"


class CassandraBindingsPropertiesProcessor(SimpleBindingsPropertiesProcessor):
    """Rename Cassandra secret entries to ``spring.data.cassandra.*`` keys."""

    kind = KIND
    mappings = (
        ("cluster-name", "spring.data.cassandra.cluster-name"),
        ("compression", "spring.data.cassandra.compression"),
        ("contact-points", "spring.data.cassandra.contact-points"),
        ("keyspace-name", "spring.data.cassandra.keyspace-name"),
        ("password", "spring.data.cassandra.password"),
        ("port", "spring.data.cassandra.port"),
        ("ssl", "spring.data.cassandra.ssl"),
        ("username", "spring.data.cassandra.username"),
    )
