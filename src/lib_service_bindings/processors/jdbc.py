"""Common behaviour of relational database processors.

Purpose
-------
MySQL and PostgreSQL secrets share one shape (``host``, ``port``,
``database``, ``username``, ``password``) and map onto the same
``spring.datasource.*`` keys. Only the JDBC URL scheme and the driver classes
differ.

Contents
--------
* :class:`JdbcBindingsPropertiesProcessor` – datasource mapping with a
  capability-probed driver fallback chain.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import ClassVar

from ..application.mapper import MapMapper
from ..domain.binding import Binding
from .base import BindingsPropertiesProcessor, probe_first

DRIVER_KEY = "spring.datasource.driver-class-name"


class JdbcBindingsPropertiesProcessor(BindingsPropertiesProcessor):
    """Map a relational database secret onto ``spring.datasource.*``.

    Subclasses set :attr:`url_scheme` (``jdbc:<scheme>://host:port/database``)
    and :attr:`driver_classes`, tried in order through the injected probe.
    When no candidate is available the driver property is left unset, even
    if another processor wrote one earlier in the pass.
    """

    url_scheme: ClassVar[str]
    driver_classes: ClassVar[tuple[str, ...]] = ()

    def apply(self, binding: Binding, properties: MutableMapping[str, object]) -> None:
        driver = probe_first(self._probe, self.driver_classes)
        if driver is None:
            # a driver written for another kind must not survive this URL
            properties.pop(DRIVER_KEY, None)
        else:
            properties[DRIVER_KEY] = driver

        mapper = MapMapper(binding.get_secret(), properties)
        mapper.from_("password").to("spring.datasource.password")
        mapper.from_("host", "port", "database").to("spring.datasource.url", self.jdbc_url)
        mapper.from_("username").to("spring.datasource.username")

    def jdbc_url(self, host: str, port: str, database: str) -> str:
        """Assemble the connection URL from its parts."""

        return f"jdbc:{self.url_scheme}://{host}:{port}/{database}"
