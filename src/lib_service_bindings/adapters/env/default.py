"""Environment variable settings adapter.

Purpose
-------
Translate prefixed process environment variables into the nested settings
tree consumed by the guard and the capability probe. Forms the highest
precedence settings layer.

Key behaviours
--------------
* Only variables starting with the prefix (``SERVICE_BINDINGS_`` by default)
  are captured.
* ``__`` is the nesting delimiter:
  ``SERVICE_BINDINGS_BINDINGS__MYSQL__ENABLED`` → ``bindings.mysql.enabled``.
* Scalars are coerced (bools, ints, floats, ``null``/``none``).
"""

from __future__ import annotations

import os
from typing import Final, Mapping

from ...observability import log_debug

DEFAULT_SLUG: Final[str] = "service-bindings"


def env_prefix(slug: str) -> str:
    """Return the environment prefix for *slug*.

    Examples
    --------
    >>> env_prefix('service-bindings')
    'SERVICE_BINDINGS'
    """

    return slug.replace("-", "_").upper()


DEFAULT_ENV_PREFIX: Final[str] = env_prefix(DEFAULT_SLUG)


class DefaultEnvLoader:
    """Load environment variables that belong to the settings namespace."""

    def __init__(self, *, environ: Mapping[str, str] | None = None) -> None:
        """Initialise the loader with a specific ``environ`` mapping for testability."""

        self._environ = os.environ if environ is None else environ

    def load(self, prefix: str = DEFAULT_ENV_PREFIX) -> dict[str, object]:
        """Return a nested mapping built from variables carrying *prefix*.

        Examples
        --------
        >>> env = {
        ...     'SERVICE_BINDINGS_BINDINGS__MYSQL__ENABLED': 'false',
        ...     'SERVICE_BINDINGS_BINDINGS__CAPABILITIES': 'org.postgresql.Driver',
        ...     'PATH': '/usr/bin',
        ... }
        >>> DefaultEnvLoader(environ=env).load()
        {'bindings': {'mysql': {'enabled': False}, 'capabilities': 'org.postgresql.Driver'}}
        """

        prefix = f"{prefix}_" if prefix and not prefix.endswith("_") else prefix
        collected: dict[str, object] = {}
        for key, value in self._environ.items():
            if not key.startswith(prefix):
                continue
            stripped = key[len(prefix) :]
            if not stripped:
                continue
            assign_nested(collected, stripped, _coerce(value))
        log_debug("env_settings_loaded", prefix=prefix, keys=sorted(collected.keys()))
        return collected


def assign_nested(target: dict[str, object], key: str, value: object) -> None:
    """Assign ``value`` inside ``target`` using ``__`` as a nesting delimiter.

    Raises
    ------
    ValueError
        When a nested key would replace an existing scalar.

    Examples
    --------
    >>> data: dict[str, object] = {}
    >>> assign_nested(data, 'BINDINGS__REDIS__ENABLED', True)
    >>> data
    {'bindings': {'redis': {'enabled': True}}}
    """

    parts = key.lower().split("__")
    cursor = target
    for part in parts[:-1]:
        child = cursor.setdefault(part, {})
        if not isinstance(child, dict):
            raise ValueError(f"Cannot override scalar with mapping for key {key}")
        cursor = child
    cursor[parts[-1]] = value


def _coerce(value: str) -> object:
    """Coerce textual environment values to Python primitives where possible.

    Examples
    --------
    >>> _coerce('true'), _coerce('10'), _coerce('3.5'), _coerce('org.postgresql.Driver')
    (True, 10, 3.5, 'org.postgresql.Driver')
    """

    lowered = value.lower()
    if lowered in {"true", "false"}:
        return lowered == "true"
    if lowered in {"null", "none"}:
        return None
    if value.isdigit() or (value.startswith("-") and value[1:].isdigit()):
        return int(value)
    try:
        return float(value)
    except ValueError:
        return value
