"""Per-kind binding processors in their documented registry order."""

from __future__ import annotations

from .base import BindingsPropertiesProcessor, SimpleBindingsPropertiesProcessor, probe_first
from .cassandra import CassandraBindingsPropertiesProcessor
from .kafka import KafkaBindingsPropertiesProcessor
from .mongodb import MongoDbBindingsPropertiesProcessor
from .mysql import MySqlBindingsPropertiesProcessor
from .postgresql import PostgreSqlBindingsPropertiesProcessor
from .rabbitmq import RabbitMqBindingsPropertiesProcessor
from .redis import RedisBindingsPropertiesProcessor

#: Processor classes in registry order (alphabetical by kind).
PROCESSOR_TYPES: tuple[type[BindingsPropertiesProcessor], ...] = (
    CassandraBindingsPropertiesProcessor,
    KafkaBindingsPropertiesProcessor,
    MongoDbBindingsPropertiesProcessor,
    MySqlBindingsPropertiesProcessor,
    PostgreSqlBindingsPropertiesProcessor,
    RabbitMqBindingsPropertiesProcessor,
    RedisBindingsPropertiesProcessor,
)

__all__ = [
    "BindingsPropertiesProcessor",
    "SimpleBindingsPropertiesProcessor",
    "probe_first",
    "CassandraBindingsPropertiesProcessor",
    "KafkaBindingsPropertiesProcessor",
    "MongoDbBindingsPropertiesProcessor",
    "MySqlBindingsPropertiesProcessor",
    "PostgreSqlBindingsPropertiesProcessor",
    "RabbitMqBindingsPropertiesProcessor",
    "RedisBindingsPropertiesProcessor",
    "PROCESSOR_TYPES",
]
