"""knob command-line interface.

Two small commands that load their own arguments through ``Settings``:

- ``options`` registers ``--port`` and ``--environment`` and prints what was
  loaded, or the usage text when the arguments are wrong.
- ``socket`` resolves a socket address from ``--ip``, ``--port`` and
  ``--addr``.
"""

from __future__ import annotations

import logging
import sys
from typing import Final

import typer

from knob.errors import ArgumentError, FetchError
from knob.network import SocketKey, SocketSettings
from knob.options import optopt
from knob.settings import Settings

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="knob settings CLI", add_completion=False)

logger: Final = logging.getLogger(__name__)  # Will be "knob.cli"

DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
# Everything typer does not know is handed to Settings.load_args
PASSTHROUGH = {"allow_extra_args": True, "ignore_unknown_options": True}

USAGE_BRIEF = "Try one of these:"


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _report(settings: Settings, errors: list[ArgumentError]) -> None:
    """Print argument errors and usage, then exit with status 1."""
    for error in errors:
        typer.secho(str(error), fg=typer.colors.RED, err=True)
    typer.echo(settings.usage(USAGE_BRIEF))
    raise typer.Exit(code=1)


@app.command(context_settings=PASSTHROUGH)
def options(ctx: typer.Context, debug: bool = DEBUG_OPTION) -> None:
    """Load --port and --environment from the given arguments."""
    _configure_logging(debug)

    settings = Settings()
    settings.opt(optopt("p", "port", "the port to bind to", "4000"))
    settings.opt(optopt("e", "environment", "the environment to run in", ""))

    errors = settings.load_args(ctx.args)
    if errors:
        _report(settings, errors)

    for descriptor in settings.options:
        value = settings.get(descriptor.key)
        if value is not None:
            typer.echo(f"{descriptor.key} = {value}")


@app.command(context_settings=PASSTHROUGH)
def socket(ctx: typer.Context, debug: bool = DEBUG_OPTION) -> None:
    """Resolve a socket address from --ip, --port and --addr."""
    _configure_logging(debug)

    settings = SocketSettings()
    settings.opt(optopt("i", SocketKey.IP.value, "the IP address to bind to", "127.0.0.1"))
    settings.opt(optopt("p", SocketKey.PORT.value, "the port to bind to", "8080"))
    settings.opt(optopt("a", SocketKey.ADDR.value, "full address, overrides ip and port", "IP:PORT"))

    errors = settings.load_args(ctx.args)
    if errors:
        _report(settings, errors)

    try:
        address = settings.socket()
    except FetchError as exc:
        logger.debug("Socket lookup failed: %s", exc)
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(str(address))


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
