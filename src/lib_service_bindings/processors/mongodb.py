"""MongoDB binding processor."""

from __future__ import annotations

from typing import Final

from .base import SimpleBindingsPropertiesProcessor

KIND: Final[str] = "MongoDB"


class MongoDbBindingsPropertiesProcessor(SimpleBindingsPropertiesProcessor):
    """Rename MongoDB secret entries to ``spring.data.mongodb.*`` keys."""

    kind = KIND
    mappings = (
        ("authentication-database", "spring.data.mongodb.authentication-database"),
        ("database", "spring.data.mongodb.database"),
        ("grid-fs-database", "spring.data.mongodb.gridfs.database"),
        ("host", "spring.data.mongodb.host"),
        ("password", "spring.data.mongodb.password"),
        ("port", "spring.data.mongodb.port"),
        ("uri", "spring.data.mongodb.uri"),
        ("username", "spring.data.mongodb.username"),
    )
