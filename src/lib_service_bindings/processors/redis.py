"""Redis binding processor.

Covers standalone, cluster, and sentinel topologies; whichever entries the
secret carries are mapped, the rest stay unset.
"""

from __future__ import annotations

from typing import Final

from .base import SimpleBindingsPropertiesProcessor

KIND: Final[str] = "Redis"


class RedisBindingsPropertiesProcessor(SimpleBindingsPropertiesProcessor):
    """Rename Redis secret entries to ``spring.redis.*`` keys."""

    kind = KIND
    mappings = (
        ("client-name", "spring.redis.client-name"),
        ("cluster.max-redirects", "spring.redis.cluster.max-redirects"),
        ("cluster.nodes", "spring.redis.cluster.nodes"),
        ("database", "spring.redis.database"),
        ("host", "spring.redis.host"),
        ("password", "spring.redis.password"),
        ("port", "spring.redis.port"),
        ("sentinel.master", "spring.redis.sentinel.master"),
        ("sentinel.nodes", "spring.redis.sentinel.nodes"),
        ("ssl", "spring.redis.ssl"),
        ("url", "spring.redis.url"),
    )
