from __future__ import annotations
"""Command-line entry point: login, list and get."""
from dataclasses import dataclass, field
import functools
import logging
from typing import Callable

import click

from .config import FILE_MODE, ConfigStore
from .errors import StorachaError
from .fetch import fetch_object
from .listing import list_objects
from .models import CredentialRecord
from .session import RemoteSession
from .utils import format_listing_line

DIST_NAME = "storacha-rclone"

LOGGER = logging.getLogger(__name__)


@dataclass
class CliContext:
    """Collaborators shared by every command."""

    config_store: ConfigStore = field(default_factory=ConfigStore)
    session_factory: Callable[[CredentialRecord], RemoteSession] = RemoteSession.from_record

    def open_session(self) -> RemoteSession:
        record = self.config_store.load()
        return self.session_factory(record)


def _report_errors(func):
    """Turn :class:`StorachaError` into an error message and exit code."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except StorachaError as exc:
            LOGGER.debug("Command failed", exc_info=True)
            click.echo(f"Error: {exc}", err=True)
            raise click.exceptions.Exit(exc.exit_code) from exc

    return wrapper


def _required(value: str) -> str:
    cleaned = value.strip()
    if not cleaned:
        raise click.UsageError("a value is required")
    return cleaned


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(package_name=DIST_NAME)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Log in to S3, list a bucket and download objects."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if ctx.obj is None:
        ctx.obj = CliContext()


@click.command(name="login")
@click.pass_obj
@_report_errors
def login(obj: CliContext) -> None:
    """Prompt for credentials and save them locally."""
    click.echo("== storacha-rclone AWS login ==")
    access_key_id = click.prompt("AWS Access Key ID", value_proc=_required)
    secret_access_key = click.prompt("AWS Secret Access Key", hide_input=True, value_proc=_required)
    region = click.prompt("Default AWS Region (e.g., us-east-1)", value_proc=_required)
    bucket = click.prompt("Default S3 bucket name", value_proc=_required)
    record = CredentialRecord(
        access_key_id=access_key_id,
        secret_access_key=secret_access_key,
        region=region,
        bucket=bucket,
    )
    path = obj.config_store.save(record)
    click.echo(f"Saved. (stored in {path} with {FILE_MODE:04o} perms)")


@click.command(name="list")
@click.option("--prefix", default="", help="Only list keys starting with this prefix.")
@click.pass_obj
@_report_errors
def list_command(obj: CliContext, prefix: str) -> None:
    """List every object in the configured bucket."""
    session = obj.open_session()
    for entry in list_objects(session, prefix=prefix or None):
        click.echo(format_listing_line(entry))


@click.command(name="get")
@click.option("--key", required=True, help="Object key to download.")
@click.option("--out", "out_file", default="", help="Local output file (defaults to the key's base name).")
@click.pass_obj
@_report_errors
def get_command(obj: CliContext, key: str, out_file: str) -> None:
    """Download a single object."""
    if not key:
        raise click.UsageError("--key must not be empty")
    session = obj.open_session()
    result = fetch_object(session, key, out_file or None)
    click.echo(f"downloaded {result.bytes_written} bytes -> {result.destination_path}")


cli.add_command(login)
cli.add_command(list_command)
cli.add_command(get_command)
# Command names used by earlier releases.
cli.add_command(login, name="aws-login")
cli.add_command(list_command, name="s3-ls")
cli.add_command(get_command, name="s3-get")


def main() -> None:
    cli()
