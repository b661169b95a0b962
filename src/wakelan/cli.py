"""Command-line interface for wakelan."""

import logging
import sys
from pathlib import Path
from typing import Callable, Optional

import click

from wakelan import __version__
from wakelan.config.loader import ConfigError, Settings, load_settings
from wakelan.core.wol import EXIT_BAD_INPUT, EXIT_OK, SendResult

DEFAULT_CONFIG = Path.home() / ".config" / "wakelan" / "config.yaml"


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )


def _load_settings(config: Optional[str]) -> Settings:
    path = Path(config) if config else DEFAULT_CONFIG
    try:
        return load_settings(path, required=config is not None)
    except ConfigError as exc:
        click.echo(str(exc), err=True)
        sys.exit(EXIT_BAD_INPUT)


def _result_printer(verbose: bool) -> Callable[[SendResult], None]:
    def _print(result: SendResult) -> None:
        if result.invalid:
            click.echo(f"✗  {result.error}", err=True)
            return
        where = f"{result.interface} -> {result.interface.broadcast}:{result.port}"
        if result.success:
            if verbose:
                click.echo(f"✓  {result.mac} via {where}")
        else:
            click.echo(f"✗  {result.mac} via {where}: {result.error}", err=True)

    return _print


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", prog_name="wakelan")
@click.argument("targets", nargs=-1)
@click.option(
    "--file",
    "-f",
    "target_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Read more MAC addresses from FILE, one per line (# and // start comments)",
)
@click.option(
    "--net",
    "-n",
    "nets",
    multiple=True,
    metavar="IP[/SUBNET]",
    help="Only broadcast on the interface matching this address; repeatable",
)
@click.option(
    "--port",
    "-p",
    type=click.IntRange(1, 65535),
    default=None,
    help="UDP destination port  [default: 9]",
)
@click.option(
    "--config",
    "-c",
    default=None,
    envvar="WAKELAN_CONFIG",
    help=f"Path to wakelan config.yaml  [default: {DEFAULT_CONFIG}]",
)
@click.option("--verbose", "-v", is_flag=True, help="Show every send and enable debug logging")
def main(
    targets: tuple[str, ...],
    target_file: Optional[Path],
    nets: tuple[str, ...],
    port: Optional[int],
    config: Optional[str],
    verbose: bool,
) -> None:
    """Wake computers on the local network with Wake-on-LAN magic packets.

    TARGETS are MAC addresses such as 01:23:45:67:89:AB or 01-23-45-67-89-AB,
    or host names from the config file.
    """
    _setup_logging(verbose)
    settings = _load_settings(config)

    from wakelan.core.errors import FileReadError, InterfaceNotFound
    from wakelan.core.interfaces import resolve_many
    from wakelan.core.targets import read_targets
    from wakelan.core.wol import wake_targets

    collected = list(targets)
    file_failed = False
    if target_file is not None:
        try:
            collected.extend(read_targets(target_file))
        except FileReadError as exc:
            click.echo(f"Error: {exc}", err=True)
            if not collected:
                sys.exit(EXIT_BAD_INPUT)
            file_failed = True

    if not collected:
        click.echo("Error: no MAC addresses given (see --help)", err=True)
        sys.exit(EXIT_BAD_INPUT)

    try:
        interfaces = resolve_many(nets or settings.nets)
    except InterfaceNotFound as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(EXIT_BAD_INPUT)

    if verbose:
        for iface in interfaces:
            click.echo(f"Using {iface}, broadcast {iface.broadcast}")

    report = wake_targets(
        [settings.expand(t) for t in collected],
        interfaces,
        port=port or settings.port,
        on_result=_result_printer(verbose),
    )

    click.echo(
        f"Sent {len(report.sent)} packet(s), {len(report.failed)} failed, "
        f"{len(report.invalid)} invalid target(s)"
    )

    code = report.exit_code
    if code == EXIT_OK and file_failed:
        code = EXIT_BAD_INPUT
    if code != EXIT_OK:
        sys.exit(code)


if __name__ == "__main__":
    main()
