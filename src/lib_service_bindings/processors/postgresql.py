"""PostgreSQL binding processor."""

from __future__ import annotations

from typing import Final

from .jdbc import JdbcBindingsPropertiesProcessor

KIND: Final[str] = "PostgreSQL"

POSTGRESQL_DRIVER: Final[str] = "org.postgresql.Driver"


class PostgreSqlBindingsPropertiesProcessor(JdbcBindingsPropertiesProcessor):
    """Map PostgreSQL secrets onto ``spring.datasource.*``."""

    kind = KIND
    url_scheme = "postgresql"
    driver_classes = (POSTGRESQL_DRIVER,)
