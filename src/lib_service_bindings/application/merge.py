"""Application-layer merge policy for settings layers.

Purpose
-------
Combine the settings layers (settings file, then environment) into one nested
mapping. Remains free of I/O so the composition root and
:meth:`Settings.with_overrides` share the same precedence rules.

Contents
    - ``merge_layers``: public entry point driven by a simple loop.
    - ``_merge_mapping``: recursive stanza applying one layer.

System Role
-----------
Receives payloads from :mod:`lib_service_bindings.core` ordered from lowest to
highest precedence; later layers win on scalar conflicts while sibling keys of
nested mappings survive.
"""

from __future__ import annotations

from collections.abc import Mapping
from copy import deepcopy
from typing import Iterable


def merge_layers(layers: Iterable[Mapping[str, object]]) -> dict[str, object]:
    """Deep-merge *layers* so later layers take precedence.

    Parameters
    ----------
    layers:
        Mappings ordered from lowest to highest precedence.

    Returns
    -------
    dict[str, object]
        Fresh nested ``dict``; inputs are never mutated.

    Examples
    --------
    >>> merge_layers([
    ...     {"bindings": {"enabled": True, "mysql": {"enabled": True}}},
    ...     {"bindings": {"mysql": {"enabled": False}}},
    ... ])
    {'bindings': {'enabled': True, 'mysql': {'enabled': False}}}
    """

    merged: dict[str, object] = {}
    for layer in layers:
        _merge_mapping(merged, layer)
    return merged


def _merge_mapping(target: dict[str, object], incoming: Mapping[str, object]) -> None:
    """Recursively merge ``incoming`` into ``target``."""

    for key, value in incoming.items():
        existing = target.get(key)
        if isinstance(value, Mapping):
            container = existing if isinstance(existing, dict) else {}
            target[key] = container
            _merge_mapping(container, value)
        else:
            target[key] = deepcopy(value)
