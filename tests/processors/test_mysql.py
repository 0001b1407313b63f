"""MySQL processor tests including the probed driver fallback chain."""

from __future__ import annotations

from lib_service_bindings.application.guard import Guard
from lib_service_bindings.domain.binding import EMPTY_BINDINGS, Binding, Bindings
from lib_service_bindings.domain.settings import Settings
from lib_service_bindings.processors.mysql import MARIADB_DRIVER, MYSQL_DRIVER, MySqlBindingsPropertiesProcessor
from tests.support import MYSQL_SECRET


def run(bindings: Bindings, **kwargs) -> dict[str, object]:
    properties: dict[str, object] = {}
    MySqlBindingsPropertiesProcessor(**kwargs).process(bindings, properties)
    return properties


def single(secret: dict[str, str]) -> Bindings:
    return Bindings([Binding("db", "MySQL", secret)])


def test_maps_datasource_properties() -> None:
    properties = run(single(MYSQL_SECRET))
    assert properties["spring.datasource.url"] == "jdbc:mysql://h:5432/d"
    assert properties["spring.datasource.username"] == "u"
    assert properties["spring.datasource.password"] == "p"


def test_prefers_mariadb_driver() -> None:
    properties = run(single(MYSQL_SECRET), probe=lambda name: True)
    assert properties["spring.datasource.driver-class-name"] == MARIADB_DRIVER


def test_falls_back_to_connector_j() -> None:
    properties = run(single(MYSQL_SECRET), probe=lambda name: name == MYSQL_DRIVER)
    assert properties["spring.datasource.driver-class-name"] == MYSQL_DRIVER


def test_driver_unset_without_capability() -> None:
    properties = run(single(MYSQL_SECRET), probe=lambda name: False)
    assert "spring.datasource.driver-class-name" not in properties


def test_failing_probe_counts_as_unavailable() -> None:
    def probe(name: str) -> bool:
        if name == MARIADB_DRIVER:
            raise RuntimeError("classpath unavailable")
        return True

    properties = run(single(MYSQL_SECRET), probe=probe)
    assert properties["spring.datasource.driver-class-name"] == MYSQL_DRIVER


def test_partial_secret_omits_missing_properties() -> None:
    properties = run(single({"host": "h", "username": "u"}))
    assert properties == {"spring.datasource.username": "u"}


def test_disabled_kind_has_no_side_effects() -> None:
    guard = Guard(Settings({"bindings": {"mysql": {"enabled": False}}}))
    properties = {"untouched": True}
    MySqlBindingsPropertiesProcessor(guard, lambda name: True).process(single(MYSQL_SECRET), properties)
    assert properties == {"untouched": True}


def test_no_matching_binding_leaves_map_unchanged() -> None:
    assert run(EMPTY_BINDINGS, probe=lambda name: True) == {}
    assert run(Bindings([Binding("db", "PostgreSQL", MYSQL_SECRET)]), probe=lambda name: True) == {}


def test_second_binding_wins_on_collision() -> None:
    bindings = Bindings(
        [
            Binding("primary", "MySQL", MYSQL_SECRET),
            Binding("replica", "MySQL", {**MYSQL_SECRET, "host": "replica", "password": "q"}),
        ]
    )
    properties = run(bindings)
    assert properties["spring.datasource.url"] == "jdbc:mysql://replica:5432/d"
    assert properties["spring.datasource.password"] == "q"


def test_repeated_runs_are_identical() -> None:
    bindings = single(MYSQL_SECRET)
    assert run(bindings, probe=lambda name: True) == run(bindings, probe=lambda name: True)
