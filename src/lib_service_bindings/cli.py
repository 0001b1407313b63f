"""CLI adapter for ``lib_service_bindings`` built on ``lib_cli_exit_tools``.

Purpose
-------
Let operators inspect what the library sees inside a container: which
bindings are mounted, which kinds are enabled, and which properties result.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command wiring traceback handling into
  ``lib_cli_exit_tools``.
* :func:`cli_info` – prints distribution metadata.
* :func:`cli_list` – lists discovered bindings (secret values are never shown).
* :func:`cli_guards` – shows the enabled state of every registered kind.
* :func:`cli_properties` – prints the resolved property map as JSON.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
The CLI lives in the outermost layer. It calls the composition root
(:mod:`lib_service_bindings.core`) and never reaches into processors directly.
"""

from __future__ import annotations

import json
import sys
from importlib import metadata
from pathlib import Path
from typing import Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .application.guard import Guard
from .core import build_registry, load_bindings, load_settings, resolve_properties

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000
_DISTRIBUTION: Final[str] = "lib_service_bindings"

_ROOT_OPTION = click.option(
    "--root",
    type=click.Path(path_type=Path, file_okay=False, dir_okay=True),
    default=None,
    help="Binding root directory (defaults to $SERVICE_BINDING_ROOT, then $CNB_BINDINGS)",
)
_CONFIG_OPTION = click.option(
    "--config",
    "config_file",
    type=click.Path(path_type=Path, exists=True, file_okay=True, dir_okay=False, readable=True),
    default=None,
    help="Settings file (TOML, JSON or YAML) holding guard flags and capabilities",
)


def _resolve_version() -> str:
    """Return the installed package version, ``"0.0.0"`` when not installed."""

    try:
        return metadata.version(_DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="Service binding to framework property translator",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name=_DISTRIBUTION,
    message="lib_service_bindings version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Root command storing the traceback preference for all subcommands.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata(_DISTRIBUTION)
    except metadata.PackageNotFoundError:
        click.echo(f"{_DISTRIBUTION} (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', _DISTRIBUTION)}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.10')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")


@cli.command("list", context_settings=CLICK_CONTEXT_SETTINGS)
@_ROOT_OPTION
@click.option("--indent", type=int, default=2, show_default=True, help="JSON indent size")
def cli_list(root: Optional[Path], indent: int) -> None:
    """List discovered bindings as JSON (names, kinds, providers, secret keys).

    Secret values are never printed.
    """

    bindings = load_bindings(root)
    payload = [
        {
            "name": binding.name,
            "kind": binding.kind,
            "provider": binding.provider,
            "keys": sorted(binding.get_secret()),
        }
        for binding in bindings
    ]
    click.echo(json.dumps(payload, indent=indent))


@cli.command("guards", context_settings=CLICK_CONTEXT_SETTINGS)
@_CONFIG_OPTION
def cli_guards(config_file: Optional[Path]) -> None:
    """Print ``{kind: enabled}`` for every registered processor.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> result = CliRunner().invoke(cli, ["guards"], env={"SERVICE_BINDINGS_BINDINGS__REDIS__ENABLED": "false"})
    >>> json.loads(result.output)["Redis"]
    False
    """

    settings = load_settings(config_file)
    guard = Guard(settings)
    registry = build_registry(settings)
    payload = {kind: guard.is_kind_enabled(kind) for kind in registry.kinds()}
    click.echo(json.dumps(payload, indent=2))


@cli.command("properties", context_settings=CLICK_CONTEXT_SETTINGS)
@_ROOT_OPTION
@_CONFIG_OPTION
@click.option(
    "--capability",
    "capabilities",
    multiple=True,
    help="Declare a driver class as available (repeatable)",
)
@click.option("--indent", type=int, default=None, help="Pretty-print JSON output with the provided indent size")
@click.option("--trace-id", default=None, help="Trace identifier attached to log records")
def cli_properties(
    root: Optional[Path],
    config_file: Optional[Path],
    capabilities: Sequence[str],
    indent: Optional[int],
    trace_id: Optional[str],
) -> None:
    """Resolve bindings into framework properties and print them as JSON.

    The output contains secret values; redirect it with care.
    """

    settings = load_settings(config_file)
    properties = resolve_properties(
        load_bindings(root),
        settings=settings,
        capabilities=tuple(capabilities),
        trace_id=trace_id,
    )
    click.echo(json.dumps(dict(sorted(properties.items())), indent=indent))


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name=_DISTRIBUTION,
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
