"""Kafka binding processor."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Final

from ..application.mapper import MapMapper
from ..domain.binding import Binding
from .base import BindingsPropertiesProcessor

KIND: Final[str] = "Kafka"


class KafkaBindingsPropertiesProcessor(BindingsPropertiesProcessor):
    """Fan bootstrap server entries out to the client-scoped Spring Kafka keys.

    The shared ``bootstrap-servers`` entry and the consumer, producer, and
    streams specific entries are mapped independently; each lands only under
    its own scope.
    """

    kind = KIND

    def apply(self, binding: Binding, properties: MutableMapping[str, object]) -> None:
        mapper = MapMapper(binding.get_secret(), properties)

        mapper.from_("bootstrap-servers").to("spring.kafka.bootstrap-servers")
        mapper.from_("consumer.bootstrap-servers").to("spring.kafka.consumer.bootstrap-servers")
        mapper.from_("producer.bootstrap-servers").to("spring.kafka.producer.bootstrap-servers")
        mapper.from_("streams.bootstrap-servers").to("spring.kafka.streams.bootstrap-servers")
