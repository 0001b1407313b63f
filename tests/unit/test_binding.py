"""Binding model tests covering immutability, filtering, and contract violations."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lib_service_bindings.domain.binding import EMPTY_BINDINGS, Binding, Bindings
from lib_service_bindings.domain.errors import DuplicateBinding, InvalidBinding


def make_bindings() -> Bindings:
    return Bindings(
        [
            Binding("orders-db", "MySQL", {"host": "a"}),
            Binding("events", "Kafka", {"bootstrap-servers": "k:9092"}, provider="strimzi"),
            Binding("billing-db", "MySQL", {"host": "b"}),
        ]
    )


def test_filter_bindings_keeps_discovery_order() -> None:
    names = [binding.name for binding in make_bindings().filter_bindings("MySQL")]
    assert names == ["orders-db", "billing-db"]


def test_filter_bindings_is_case_sensitive() -> None:
    assert make_bindings().filter_bindings("mysql") == ()


def test_filter_bindings_without_match_is_empty() -> None:
    assert make_bindings().filter_bindings("Redis") == ()
    assert EMPTY_BINDINGS.filter_bindings("Redis") == ()


def test_sequence_protocol() -> None:
    bindings = make_bindings()
    assert len(bindings) == 3
    assert bindings[1].provider == "strimzi"
    assert [binding.name for binding in bindings] == ["orders-db", "events", "billing-db"]


def test_find_binding_and_kinds() -> None:
    bindings = make_bindings()
    found = bindings.find_binding("events")
    assert found is not None and found.kind == "Kafka"
    assert bindings.find_binding("missing") is None
    assert bindings.kinds() == ("MySQL", "Kafka")


def test_duplicate_names_rejected() -> None:
    with pytest.raises(DuplicateBinding):
        Bindings([Binding("db", "MySQL"), Binding("db", "Redis")])


@pytest.mark.parametrize(
    ("name", "kind", "secret"),
    [
        ("", "MySQL", {}),
        ("db", "", {}),
        ("db", "MySQL", {"port": 3306}),
    ],
)
def test_invalid_binding_rejected(name: str, kind: str, secret: dict) -> None:
    with pytest.raises(InvalidBinding):
        Binding(name, kind, secret)


def test_secret_is_read_only_copy() -> None:
    raw = {"host": "db"}
    binding = Binding("db", "MySQL", raw)
    raw["host"] = "changed"
    assert binding.get_secret()["host"] == "db"
    with pytest.raises(TypeError):
        binding.get_secret()["host"] = "other"  # type: ignore[index]


def test_repr_hides_secret_values() -> None:
    binding = Binding("db", "MySQL", {"password": "hunter2"})
    assert "hunter2" not in repr(binding)
    assert "password" in repr(binding)


def test_absent_secret_keys_are_absent() -> None:
    secret = Binding("db", "MySQL", {"host": "h"}).get_secret()
    assert "password" not in secret


KINDS = st.sampled_from(["MySQL", "Kafka", "Redis", "Cassandra"])


@given(st.lists(KINDS, max_size=8), KINDS)
def test_filter_returns_exact_subsequence(kinds: list[str], wanted: str) -> None:
    bindings = Bindings(Binding(f"binding-{index}", kind) for index, kind in enumerate(kinds))
    matches = bindings.filter_bindings(wanted)
    assert [binding.name for binding in matches] == [
        f"binding-{index}" for index, kind in enumerate(kinds) if kind == wanted
    ]
