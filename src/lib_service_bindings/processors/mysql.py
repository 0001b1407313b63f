"""MySQL binding processor.

See https://dev.mysql.com/doc/connector-j/8.0/en/connector-j-reference-jdbc-url-format.html
for the URL format.
"""

from __future__ import annotations

from typing import Final

from .jdbc import JdbcBindingsPropertiesProcessor

KIND: Final[str] = "MySQL"

MARIADB_DRIVER: Final[str] = "org.mariadb.jdbc.Driver"
MYSQL_DRIVER: Final[str] = "com.mysql.cj.jdbc.Driver"


class MySqlBindingsPropertiesProcessor(JdbcBindingsPropertiesProcessor):
    """Map MySQL secrets, preferring the MariaDB driver over Connector/J.

    Examples
    --------
    >>> from lib_service_bindings.domain.binding import Binding, Bindings
    >>> secret = {"host": "h", "port": "5432", "database": "d", "username": "u", "password": "p"}
    >>> properties: dict[str, object] = {}
    >>> MySqlBindingsPropertiesProcessor().process(Bindings([Binding("db", "MySQL", secret)]), properties)
    >>> properties["spring.datasource.url"]
    'jdbc:mysql://h:5432/d'
    """

    kind = KIND
    url_scheme = "mysql"
    driver_classes = (MARIADB_DRIVER, MYSQL_DRIVER)
