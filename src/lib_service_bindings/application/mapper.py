"""Fluent secret-to-property key mapping.

Purpose
-------
Give every processor the same small vocabulary for copying secret entries into
the shared property map: ``mapper.from_("host").to("spring.redis.host")``.

Contents
--------
* :class:`MapMapper` – binds a secret and a target property map.
* :class:`Source` – the pending ``from_`` half of a mapping chain.

Missing source keys are the normal case for optional fields, so every chain
silently does nothing when a key is absent. Nothing is ever written as ``None``.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Callable


class MapMapper:
    """Copy values from *secret* into *properties* under new dotted keys.

    Examples
    --------
    >>> properties: dict[str, object] = {}
    >>> mapper = MapMapper({"host": "h", "port": "5432"}, properties)
    >>> mapper.from_("host").to("spring.data.mongodb.host")
    >>> mapper.from_("missing").to("spring.data.mongodb.uri")
    >>> mapper.from_("host", "port").to("target", lambda host, port: f"{host}:{port}")
    >>> properties
    {'spring.data.mongodb.host': 'h', 'target': 'h:5432'}
    """

    __slots__ = ("_secret", "_properties")

    def __init__(self, secret: Mapping[str, str], properties: MutableMapping[str, object]) -> None:
        self._secret = secret
        self._properties = properties

    def from_(self, *keys: str) -> Source:
        """Start a chain reading *keys* from the secret."""

        if not keys:
            raise ValueError("from_() requires at least one source key")
        return Source(self._secret, self._properties, keys)


class Source:
    """Pending mapping created by :meth:`MapMapper.from_`.

    Each instance captures its own key tuple, so independent chains on one
    mapper never share state.
    """

    __slots__ = ("_secret", "_properties", "_keys")

    def __init__(
        self,
        secret: Mapping[str, str],
        properties: MutableMapping[str, object],
        keys: tuple[str, ...],
    ) -> None:
        self._secret = secret
        self._properties = properties
        self._keys = keys

    def to(self, target: str, converter: Callable[..., object | None] | None = None) -> None:
        """Write to ``properties[target]`` when every source key is present.

        Without *converter* exactly one source key is allowed and its value is
        copied verbatim. With *converter* the values are passed positionally in
        source-key order; a ``None`` result leaves *target* untouched.
        """

        if any(key not in self._secret for key in self._keys):
            return
        values = [self._secret[key] for key in self._keys]
        if converter is None:
            if len(values) != 1:
                raise ValueError(f"Mapping {self._keys!r} to {target!r} needs a converter")
            self._properties[target] = values[0]
            return
        converted = converter(*values)
        if converted is not None:
            self._properties[target] = converted
