"""
Brambl CLI

Command-line front-end for a Bifrost node's Loki-layer JSON-RPC API.

Commands:
  methods  - List every available operation
  call     - Invoke one operation with a JSON parameter object
  wait     - Wait for a transaction to be confirmed
"""

from __future__ import annotations

import asyncio
import json
import sys
from typing import Any, Optional

import click
from loguru import logger

from .config import API_KEY_ENV, URL_ENV, ClientConfig
from .polling import wait_for_confirmation
from .requests import Requests
from .rpc.errors import BramblError, ProtocolError
from .rpc.operations import OPERATIONS


# ============ Constants ============

VERSION = "4.1.0"


# ============ Main CLI Group ============


@click.group()
@click.version_option(version=VERSION, prog_name="brambl")
@click.option("--verbose", "-v", is_flag=True, help="Log requests to stderr")
def cli(verbose: bool) -> None:
    """Brambl - Bifrost node JSON-RPC client."""
    if verbose:
        logger.enable("brambl")


_url_option = click.option(
    "--url",
    envvar=URL_ENV,
    default=None,
    help="Node base URL (default: http://localhost:9085/)",
)
_api_key_option = click.option(
    "--api-key",
    envvar=API_KEY_ENV,
    default=None,
    help="Value for the x-api-key header",
)


# ============ Commands ============


@cli.command()
def methods() -> None:
    """List available operations."""
    for name, op in OPERATIONS.items():
        required = ", ".join(op.required) if op.takes_params else "-"
        click.echo(
            click.style(f"  {name:<34}", fg="bright_white")
            + click.style(f"{op.route}{op.method:<30}", fg="cyan")
            + click.style(required, dim=True)
        )


@cli.command()
@click.argument("operation")
@click.option("--params", "params_json", default=None, help="Parameter object as JSON")
@click.option("--id", "request_id", default="1", help="JSON-RPC request id")
@_url_option
@_api_key_option
def call(
    operation: str,
    params_json: Optional[str],
    request_id: str,
    url: Optional[str],
    api_key: Optional[str],
) -> None:
    """Invoke OPERATION and print its result."""
    params = None
    if params_json is not None:
        try:
            params = json.loads(params_json)
        except json.JSONDecodeError as exc:
            click.secho(f"ERROR: Invalid params: {exc}", fg="red")
            sys.exit(1)

    client = _build_client(url, api_key)
    result = _run(client.call(operation, params, request_id))
    click.echo(json.dumps(result, indent=2, sort_keys=True))


@cli.command()
@click.argument("transaction_id")
@click.option("--timeout", default=90.0, type=float, help="Maximum wait in seconds")
@click.option("--interval", default=3.0, type=float, help="Polling interval in seconds")
@_url_option
@_api_key_option
def wait(
    transaction_id: str,
    timeout: float,
    interval: float,
    url: Optional[str],
    api_key: Optional[str],
) -> None:
    """Wait until TRANSACTION_ID is included in a block."""
    client = _build_client(url, api_key)
    result = _run(wait_for_confirmation(client, transaction_id, timeout=timeout, interval=interval))
    click.secho("SUCCESS: Transaction confirmed!", fg="green")
    click.echo(json.dumps(result, indent=2, sort_keys=True))


# ============ Helper Functions ============


def _build_client(url: Optional[str], api_key: Optional[str]) -> Requests:
    config = ClientConfig.from_env()
    if url:
        config.set_url(url)
    if api_key:
        config.set_api_key(api_key)
    return Requests(config=config)


def _run(coro: Any) -> Any:
    try:
        return asyncio.run(coro)
    except ProtocolError as exc:
        click.secho(f"Node error {exc.code}: {exc.message}", fg="red")
        if exc.data is not None:
            click.echo(f"  {exc.data}")
        sys.exit(exc.exit_code)
    except BramblError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(exc.exit_code)


# ============ Entry Points ============


def main() -> None:
    """Brambl CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
