"""Domain-level exception hierarchy.

Purpose
-------
Expose the error taxonomy shared by the binding model, the processor registry,
the settings adapters, and consuming applications. The hierarchy lives in the
domain layer so outer layers may depend on it without the reverse dependency.

Contents
--------
* :class:`BindingError` – umbrella base class for all library failures.
* :class:`InvalidBinding` – a binding value object violates its contract.
* :class:`DuplicateBinding` – two bindings in one snapshot share a name.
* :class:`DuplicateProcessor` – two processors claim the same kind.
* :class:`InvalidFormat` – a settings artifact cannot be parsed.
* :class:`NotFound` – an optional resource (settings file) is missing.

System Role
-----------
Only contract violations at the external boundary raise. Missing secret
fields, unavailable capabilities, and disabled kinds are normal outcomes and
never surface as exceptions.
"""

from __future__ import annotations


class BindingError(Exception):
    """Base type for all exceptions emitted by ``lib_service_bindings``.

    Why
    ----
    Provide a single catch-all type for consumers that do not need fine-grained
    handling.
    """


class InvalidBinding(BindingError):
    """Raised when a :class:`~lib_service_bindings.domain.binding.Binding` is malformed.

    Typical Sources
    ---------------
    Empty names or kinds, and secret values that are not strings.
    """


class DuplicateBinding(BindingError):
    """Raised when a :class:`~lib_service_bindings.domain.binding.Bindings` snapshot repeats a name."""


class DuplicateProcessor(BindingError):
    """Raised when a registry receives two processors for the same kind.

    Why
    ----
    Overwrite semantics depend on a single, well-ordered processor per kind.
    """


class InvalidFormat(BindingError):
    """Raised when a settings file cannot be parsed into structured data.

    Typical Sources
    ---------------
    Structured file loaders (:mod:`tomllib`, :mod:`json`, :mod:`yaml`).
    """


class NotFound(BindingError):
    """Represents missing-but-optional resources (settings files, loaders).

    Why
    ----
    Allow adapters to signal absence without aborting start-up. The
    composition root decides whether absence is fatal.
    """
