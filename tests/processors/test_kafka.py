from __future__ import annotations

from lib_service_bindings.application.guard import Guard
from lib_service_bindings.domain.binding import Binding, Bindings
from lib_service_bindings.domain.settings import Settings
from lib_service_bindings.processors.kafka import KafkaBindingsPropertiesProcessor
from tests.support import KAFKA_SECRET


def test_bootstrap_servers_fan_out() -> None:
    properties: dict[str, object] = {}
    KafkaBindingsPropertiesProcessor().process(Bindings([Binding("events", "Kafka", KAFKA_SECRET)]), properties)
    assert properties == {
        "spring.kafka.bootstrap-servers": "kafka:9092",
        "spring.kafka.consumer.bootstrap-servers": "consumer:9092",
        "spring.kafka.producer.bootstrap-servers": "producer:9092",
        "spring.kafka.streams.bootstrap-servers": "streams:9092",
    }


def test_only_present_scopes_are_mapped() -> None:
    properties: dict[str, object] = {}
    secret = {"producer.bootstrap-servers": "producer:9092"}
    KafkaBindingsPropertiesProcessor().process(Bindings([Binding("events", "Kafka", secret)]), properties)
    assert properties == {"spring.kafka.producer.bootstrap-servers": "producer:9092"}


def test_ignores_other_kinds() -> None:
    properties: dict[str, object] = {}
    bindings = Bindings([Binding("cassandra", "Cassandra", {"bootstrap-servers": "x"})])
    KafkaBindingsPropertiesProcessor().process(bindings, properties)
    assert properties == {}


def test_disabled_by_flag() -> None:
    properties: dict[str, object] = {}
    guard = Guard(Settings({"bindings": {"kafka": {"enabled": "false"}}}))
    KafkaBindingsPropertiesProcessor(guard).process(Bindings([Binding("events", "Kafka", KAFKA_SECRET)]), properties)
    assert properties == {}
