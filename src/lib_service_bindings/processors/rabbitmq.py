"""RabbitMQ binding processor."""

from __future__ import annotations

from typing import Final

from .base import SimpleBindingsPropertiesProcessor

KIND: Final[str] = "RabbitMQ"


class RabbitMqBindingsPropertiesProcessor(SimpleBindingsPropertiesProcessor):
    """Rename RabbitMQ secret entries to ``spring.rabbitmq.*`` keys."""

    kind = KIND
    mappings = (
        ("addresses", "spring.rabbitmq.addresses"),
        ("host", "spring.rabbitmq.host"),
        ("password", "spring.rabbitmq.password"),
        ("port", "spring.rabbitmq.port"),
        ("username", "spring.rabbitmq.username"),
        ("virtual-host", "spring.rabbitmq.virtual-host"),
    )
