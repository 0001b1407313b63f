"""Translate mounted service binding secrets into framework properties.

The public surface re-exports the binding model, the guard, the mapper, the
processor registry, and the composition-root helpers so applications can
``import lib_service_bindings`` and call :func:`resolve_properties`.
"""

from __future__ import annotations

from .application.guard import Guard
from .application.mapper import MapMapper
from .application.registry import ProcessorRegistry, default_registry
from .core import SettingsLoadError, build_registry, load_bindings, load_settings, resolve_properties
from .domain.binding import EMPTY_BINDINGS, Binding, Bindings
from .domain.errors import BindingError, DuplicateBinding, DuplicateProcessor, InvalidBinding, InvalidFormat, NotFound
from .domain.settings import EMPTY_SETTINGS, Settings
from .observability import bind_trace_id, get_logger

__all__ = [
    "Binding",
    "Bindings",
    "EMPTY_BINDINGS",
    "Settings",
    "EMPTY_SETTINGS",
    "Guard",
    "MapMapper",
    "ProcessorRegistry",
    "default_registry",
    "BindingError",
    "InvalidBinding",
    "DuplicateBinding",
    "DuplicateProcessor",
    "InvalidFormat",
    "NotFound",
    "SettingsLoadError",
    "load_settings",
    "load_bindings",
    "build_registry",
    "resolve_properties",
    "bind_trace_id",
    "get_logger",
]
