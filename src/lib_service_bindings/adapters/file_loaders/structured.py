"""Structured settings file loaders.

Purpose
-------
Parse the optional settings file (guard flags, declared capabilities) into a
mapping the merge policy understands. Each loader is a thin wrapper around
``tomllib``/``json``/``yaml.safe_load`` so error handling and logging live in
one place.

Contents
--------
* :class:`BaseFileLoader` – shared read and mapping-validation helpers.
* :class:`TOMLFileLoader` / :class:`JSONFileLoader` / :class:`YAMLFileLoader`.
* :func:`loader_for` – picks a loader from the file suffix.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Mapping

import yaml

if sys.version_info >= (3, 11):
    import tomllib
else:  # pragma: no cover - exercised on Python 3.10 only
    import tomli as tomllib

from ...domain.errors import InvalidFormat, NotFound
from ...observability import log_debug, log_error


class BaseFileLoader:
    """Common utilities shared by the structured file loaders."""

    format_name = "unknown"

    def _read(self, path: str) -> bytes:
        """Read *path* as bytes, raising :class:`NotFound` when the file is missing."""

        file_path = Path(path)
        if not file_path.is_file():
            raise NotFound(f"Settings file not found: {path}")
        payload = file_path.read_bytes()
        log_debug("settings_file_read", path=path, size=len(payload))
        return payload

    def _ensure_mapping(self, data: object, *, path: str) -> Mapping[str, object]:
        """Ensure *data* is a mapping, otherwise raise :class:`InvalidFormat`.

        Examples
        --------
        >>> JSONFileLoader()._ensure_mapping({"bindings": {}}, path="demo")
        {'bindings': {}}
        >>> JSONFileLoader()._ensure_mapping([1], path="demo")
        Traceback (most recent call last):
        ...
        lib_service_bindings.domain.errors.InvalidFormat: File demo did not produce a mapping
        """

        if not isinstance(data, Mapping):
            raise InvalidFormat(f"File {path} did not produce a mapping")
        log_debug("settings_file_loaded", path=path, format=self.format_name)
        return data

    def _fail(self, path: str, exc: Exception) -> InvalidFormat:
        log_error("settings_file_invalid", path=path, format=self.format_name, error=str(exc))
        return InvalidFormat(f"Invalid {self.format_name.upper()} in {path}: {exc}")


class TOMLFileLoader(BaseFileLoader):
    """Load TOML settings documents.

    Examples
    --------
    >>> from tempfile import NamedTemporaryFile
    >>> tmp = NamedTemporaryFile('w', suffix='.toml', delete=False, encoding='utf-8')
    >>> _ = tmp.write('[bindings.mysql]\\nenabled = false\\n')
    >>> tmp.close()
    >>> TOMLFileLoader().load(tmp.name)["bindings"]["mysql"]["enabled"]
    False
    >>> Path(tmp.name).unlink()
    """

    format_name = "toml"

    def load(self, path: str) -> Mapping[str, object]:
        try:
            data = tomllib.loads(self._read(path).decode("utf-8"))
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
            raise self._fail(path, exc) from exc
        return self._ensure_mapping(data, path=path)


class JSONFileLoader(BaseFileLoader):
    """Load JSON settings documents."""

    format_name = "json"

    def load(self, path: str) -> Mapping[str, object]:
        try:
            data = json.loads(self._read(path))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise self._fail(path, exc) from exc
        return self._ensure_mapping(data, path=path)


class YAMLFileLoader(BaseFileLoader):
    """Load YAML settings documents; an empty document yields an empty mapping."""

    format_name = "yaml"

    def load(self, path: str) -> Mapping[str, object]:
        try:
            data = yaml.safe_load(self._read(path))
        except yaml.YAMLError as exc:
            raise self._fail(path, exc) from exc
        return self._ensure_mapping({} if data is None else data, path=path)


_LOADERS: dict[str, BaseFileLoader] = {
    ".toml": TOMLFileLoader(),
    ".json": JSONFileLoader(),
    ".yaml": YAMLFileLoader(),
    ".yml": YAMLFileLoader(),
}


def loader_for(path: str) -> BaseFileLoader:
    """Return the loader matching the suffix of *path*.

    Raises
    ------
    InvalidFormat
        When the suffix is not one of ``.toml``, ``.json``, ``.yaml``, ``.yml``.

    Examples
    --------
    >>> type(loader_for("settings.YML")).__name__
    'YAMLFileLoader'
    """

    suffix = Path(path).suffix.lower()
    try:
        return _LOADERS[suffix]
    except KeyError as exc:
        raise InvalidFormat(f"Unsupported settings file type {suffix or '<none>'!r}: {path}") from exc
