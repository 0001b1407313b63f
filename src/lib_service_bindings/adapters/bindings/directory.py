"""Filesystem binding discovery.

Purpose
-------
Implement the :class:`lib_service_bindings.application.ports.BindingsLoader`
protocol by scanning a binding root directory, as mounted by Kubernetes service
binding operators or Cloud Native Buildpacks.

Layouts
-------
Each immediate sub-directory of the root is one binding named after the
directory.

* Kubernetes: ``<name>/type`` holds the kind, ``<name>/provider`` the optional
  provider, every other regular file is a secret entry.
* Buildpacks: ``<name>/metadata/kind``, ``<name>/metadata/provider``, and secret
  entries under ``<name>/secret/``.

Contents
--------
* :data:`ROOT_VARIABLES` – environment variables consulted for the root.
* :func:`resolve_root` – picks the root from an argument or the environment.
* :class:`DirectoryBindingsLoader` – the adapter.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final, Mapping

from ...domain.binding import EMPTY_BINDINGS, Binding, Bindings
from ...observability import log_debug, log_info

ROOT_VARIABLES: Final[tuple[str, ...]] = ("SERVICE_BINDING_ROOT", "CNB_BINDINGS")

_TYPE_FILE: Final[str] = "type"
_PROVIDER_FILE: Final[str] = "provider"
_METADATA_DIR: Final[str] = "metadata"
_SECRET_DIR: Final[str] = "secret"
_KIND_FILE: Final[str] = "kind"


def resolve_root(root: str | os.PathLike[str] | None = None, *, environ: Mapping[str, str] | None = None) -> Path | None:
    """Return the binding root from *root* or the first set root variable.

    Examples
    --------
    >>> resolve_root(environ={"CNB_BINDINGS": "/platform/bindings"}).as_posix()
    '/platform/bindings'
    >>> resolve_root(environ={}) is None
    True
    """

    if root is not None:
        return Path(root)
    env = os.environ if environ is None else environ
    for variable in ROOT_VARIABLES:
        value = env.get(variable)
        if value:
            return Path(value)
    return None


class DirectoryBindingsLoader:
    """Load every binding found below a root directory.

    Why
    ----
    Mounted secrets are the canonical source of bindings; discovery order must
    be deterministic, so sub-directories are visited sorted by name.
    """

    def __init__(self, root: str | os.PathLike[str] | None = None, *, environ: Mapping[str, str] | None = None) -> None:
        """Initialise the loader.

        Parameters
        ----------
        root:
            Binding root. Defaults to ``$SERVICE_BINDING_ROOT`` then
            ``$CNB_BINDINGS``.
        environ:
            Mapping used instead of :data:`os.environ` for root lookup.
        """

        self.root = resolve_root(root, environ=environ)

    def load(self) -> Bindings:
        """Return the discovered bindings; empty when the root is unset or missing.

        Examples
        --------
        >>> from tempfile import TemporaryDirectory
        >>> tmp = TemporaryDirectory()
        >>> binding_dir = Path(tmp.name) / "orders-db"
        >>> binding_dir.mkdir()
        >>> _ = (binding_dir / "type").write_text("MySQL\\n", encoding="utf-8")
        >>> _ = (binding_dir / "host").write_text("db.local", encoding="utf-8")
        >>> bindings = DirectoryBindingsLoader(tmp.name).load()
        >>> bindings[0].kind, dict(bindings[0].get_secret())
        ('MySQL', {'host': 'db.local'})
        >>> tmp.cleanup()
        """

        if self.root is None or not self.root.is_dir():
            log_debug("bindings_root_missing", root=str(self.root) if self.root else None)
            return EMPTY_BINDINGS
        bindings = [
            binding
            for candidate in sorted(self.root.iterdir(), key=lambda path: path.name)
            if (binding := self._load_binding(candidate)) is not None
        ]
        log_info("bindings_discovered", root=str(self.root), count=len(bindings))
        return Bindings(bindings)

    def _load_binding(self, directory: Path) -> Binding | None:
        if directory.name.startswith(".") or not directory.is_dir():
            return None
        metadata = directory / _METADATA_DIR
        if (metadata / _KIND_FILE).is_file():
            kind = _read_text(metadata / _KIND_FILE)
            provider = _read_text(metadata / _PROVIDER_FILE)
            secret = _read_entries(directory / _SECRET_DIR, exclude=())
        else:
            kind = _read_text(directory / _TYPE_FILE)
            provider = _read_text(directory / _PROVIDER_FILE)
            secret = _read_entries(directory, exclude=(_TYPE_FILE, _PROVIDER_FILE))
        if not kind:
            log_debug("binding_skipped", binding=directory.name, reason="no kind")
            return None
        log_debug("binding_loaded", kind=kind, binding=directory.name, keys=sorted(secret))
        return Binding(directory.name, kind, secret, provider or None)


def _read_text(path: Path) -> str | None:
    """Return the stripped UTF-8 content of *path*, or ``None`` when unreadable."""

    if not path.is_file():
        return None
    try:
        return path.read_text(encoding="utf-8").strip()
    except UnicodeDecodeError:
        log_debug("binding_entry_skipped", path=str(path), reason="not utf-8")
        return None
    except OSError as exc:
        log_debug("binding_entry_skipped", path=str(path), reason=exc.strerror or type(exc).__name__)
        return None


def _read_entries(directory: Path, *, exclude: tuple[str, ...]) -> dict[str, str]:
    """Read every visible regular file in *directory* as a secret entry."""

    if not directory.is_dir():
        return {}
    entries: dict[str, str] = {}
    for path in sorted(directory.iterdir(), key=lambda item: item.name):
        if path.name.startswith(".") or path.name in exclude:
            continue
        value = _read_text(path)
        if value is not None:
            entries[path.name] = value
    return entries
