"""Composition root for ``lib_service_bindings``.

Purpose
-------
Wire the adapters (binding directory, settings file, environment) to the core
(guard, probe, processor registry) and expose the stable, consumer-ready API.

Contents
--------
* :class:`SettingsLoadError` – raised when an explicit settings file fails.
* :func:`load_settings` – merge settings file and environment into
  :class:`Settings`.
* :func:`load_bindings` – discover bindings below a root directory.
* :func:`build_registry` – registry with guard and probe derived from settings.
* :func:`resolve_properties` – the whole pipeline in one call.

System Role
-----------
This module is the canonical place to change layer precedence or to wire new
adapters. Everything below it stays free of environment access.
"""

from __future__ import annotations

import os
from typing import Iterable, Mapping

from .adapters.bindings.directory import DirectoryBindingsLoader
from .adapters.capabilities.default import capability_probe_from_settings
from .adapters.env.default import DEFAULT_ENV_PREFIX, DefaultEnvLoader
from .adapters.file_loaders.structured import loader_for
from .application.guard import Guard
from .application.merge import merge_layers
from .application.ports import CapabilityProbe
from .application.registry import ProcessorRegistry, default_registry
from .domain.binding import Bindings
from .domain.errors import BindingError, InvalidFormat, NotFound
from .domain.settings import EMPTY_SETTINGS, Settings
from .observability import log_debug, log_info, trace_scope


class SettingsLoadError(BindingError):
    """Raised when a requested settings file cannot be materialised.

    Wraps :class:`NotFound` or :class:`InvalidFormat` with the offending path so
    callers catch a single exception family.
    """


def load_settings(
    config_file: str | os.PathLike[str] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    prefix: str = DEFAULT_ENV_PREFIX,
) -> Settings:
    """Return settings merged from *config_file* (lowest) and the environment.

    Parameters
    ----------
    config_file:
        Optional TOML/JSON/YAML settings file. When given it must exist.
    environ:
        Mapping used instead of :data:`os.environ`.
    prefix:
        Environment prefix; ``SERVICE_BINDINGS`` by default.

    Examples
    --------
    >>> settings = load_settings(environ={"SERVICE_BINDINGS_BINDINGS__KAFKA__ENABLED": "false"})
    >>> settings.get("bindings.kafka.enabled")
    False
    """

    layers: list[Mapping[str, object]] = []
    if config_file is not None:
        path = os.fspath(config_file)
        try:
            layers.append(loader_for(path).load(path))
        except (NotFound, InvalidFormat) as exc:
            raise SettingsLoadError(f"Failed to load settings file {path}: {exc}") from exc
        log_debug("settings_layer_loaded", layer="file", path=path)

    env_data = DefaultEnvLoader(environ=environ).load(prefix)
    if env_data:
        layers.append(env_data)
        log_debug("settings_layer_loaded", layer="env", path=None, keys=len(env_data))

    if not layers:
        return EMPTY_SETTINGS
    return Settings(merge_layers(layers))


def load_bindings(
    root: str | os.PathLike[str] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> Bindings:
    """Discover bindings below *root* (or ``$SERVICE_BINDING_ROOT``/``$CNB_BINDINGS``)."""

    return DirectoryBindingsLoader(root, environ=environ).load()


def build_registry(
    settings: Settings | None = None,
    *,
    probe: CapabilityProbe | None = None,
    capabilities: Iterable[str] = (),
) -> ProcessorRegistry:
    """Return the default registry with guard and probe derived from *settings*.

    An explicit *probe* replaces the settings-derived one; *capabilities* are
    added to the capabilities declared in settings.
    """

    settings = settings if settings is not None else EMPTY_SETTINGS
    if probe is None:
        probe = capability_probe_from_settings(settings, capabilities)
    return default_registry(Guard(settings), probe)


def resolve_properties(
    bindings: Bindings | None = None,
    *,
    settings: Settings | None = None,
    root: str | os.PathLike[str] | None = None,
    probe: CapabilityProbe | None = None,
    capabilities: Iterable[str] = (),
    environ: Mapping[str, str] | None = None,
    trace_id: str | None = None,
) -> dict[str, object]:
    """Run the full pipeline and return the framework property map.

    Parameters
    ----------
    bindings:
        Snapshot to translate; discovered below *root* when omitted.
    settings:
        Guard and capability settings; loaded from the environment when
        omitted.
    root / environ:
        Forwarded to :func:`load_bindings` and :func:`load_settings`.
    probe / capabilities:
        Forwarded to :func:`build_registry`.
    trace_id:
        Identifier bound to every log record of this pass.

    Examples
    --------
    >>> from lib_service_bindings.domain.binding import Binding
    >>> secret = {"host": "h", "port": "5432", "database": "d", "username": "u", "password": "p"}
    >>> properties = resolve_properties(Bindings([Binding("db", "MySQL", secret)]), settings=Settings({}))
    >>> sorted(properties)
    ['spring.datasource.password', 'spring.datasource.url', 'spring.datasource.username']
    """

    with trace_scope(trace_id):
        if bindings is None:
            bindings = load_bindings(root, environ=environ)
        if settings is None:
            settings = load_settings(environ=environ)
        registry = build_registry(settings, probe=probe, capabilities=capabilities)
        properties: dict[str, object] = {}
        registry.process_all(bindings, properties)
        log_info("pipeline_complete", kinds=list(bindings.kinds()), properties=len(properties))
    return properties


__all__ = [
    "SettingsLoadError",
    "load_settings",
    "load_bindings",
    "build_registry",
    "resolve_properties",
]
