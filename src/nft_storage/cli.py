"""CLI entry point for the nft_storage client."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Awaitable, Callable

import click

from nft_storage.client import NftStorageClient
from nft_storage.config import load_config
from nft_storage.errors import ApiError, NftStorageError
from nft_storage.interfaces.storage import PinningStorage
from nft_storage.models.config import ClientConfig


def _make_client(cfg: ClientConfig) -> NftStorageClient:
    return NftStorageClient.from_config(cfg)


def _require_token(cfg: ClientConfig) -> None:
    """Exit with error if no API token is configured."""
    if not cfg.token:
        click.echo("Error: No API token configured.", err=True)
        click.echo("Set NFT_STORAGE_TOKEN env var or [api] token in config.", err=True)
        sys.exit(1)


def _echo_json(result) -> None:
    click.echo(json.dumps(result.to_dict(), indent=2))


def _run(
    ctx: click.Context,
    op: Callable[[PinningStorage], Awaitable[object]],
    confirm: str | None = None,
) -> None:
    """Run ``op`` against a fresh client and print its result as JSON.

    When ``confirm`` is given the user is prompted after the token check.
    """
    cfg: ClientConfig = ctx.obj["cfg"]
    _require_token(cfg)
    if confirm:
        click.confirm(confirm, abort=True)

    async def _call():
        async with _make_client(cfg) as client:
            return await op(client)

    try:
        result = asyncio.run(_call())
    except ApiError as exc:
        click.echo(f"Error: API returned HTTP {exc.status_code}", err=True)
        body = exc.body if isinstance(exc.body, str) else json.dumps(exc.body, indent=2)
        click.echo(body, err=True)
        sys.exit(1)
    except (NftStorageError, ValueError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    _echo_json(result)


def _read_files(paths: tuple[str, ...]) -> tuple[list[bytes], list[str]]:
    return [Path(p).read_bytes() for p in paths], [Path(p).name for p in paths]


_file_arg = click.Path(exists=True, dir_okay=False)


@click.group()
@click.option("-c", "--config", "config_path", default=None, help="Path to config TOML file")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """nft-storage - store and manage content on NFT.Storage."""
    ctx.ensure_object(dict)
    cfg = load_config(config_path)
    ctx.obj["cfg"] = cfg

    level = logging.DEBUG if verbose else getattr(
        logging, cfg.log_level.upper(), logging.INFO,
    )
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


# ── Info ───────────────────────────────────────────────


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show client configuration."""
    cfg: ClientConfig = ctx.obj["cfg"]
    click.echo(f"API URL:    {cfg.api_url}")
    click.echo(f"Log level:  {cfg.log_level}")
    click.echo(f"Token:      {'***configured***' if cfg.token else '(not set)'}")


@cli.command("list")
@click.option("--before", default=None, help="Only items created before this timestamp")
@click.option("--limit", type=int, default=None, help="Maximum number of items to return")
@click.option("--only-metadata", is_flag=True, help="Only items stored with store/store-dir")
@click.pass_context
def list_(ctx: click.Context, before: str | None, limit: int | None, only_metadata: bool) -> None:
    """List stored items."""
    _run(ctx, lambda c: c.list_nfts(before, limit, only_metadata))


@cli.command()
@click.argument("cid")
@click.pass_context
def get(ctx: click.Context, cid: str) -> None:
    """Show a stored item."""
    _run(ctx, lambda c: c.get_nft(cid))


@cli.command()
@click.argument("cid")
@click.pass_context
def check(ctx: click.Context, cid: str) -> None:
    """Check whether a CID is stored."""
    _run(ctx, lambda c: c.check_nft(cid))


# ── Uploads ────────────────────────────────────────────


@cli.command()
@click.argument("path", type=_file_arg)
@click.pass_context
def upload(ctx: click.Context, path: str) -> None:
    """Upload a single file (not wrapped in a directory)."""
    data = Path(path).read_bytes()
    _run(ctx, lambda c: c.upload_file(data))


@cli.command("upload-dir")
@click.argument("paths", nargs=-1, required=True, type=_file_arg)
@click.pass_context
def upload_dir(ctx: click.Context, paths: tuple[str, ...]) -> None:
    """Upload one or more files into a new IPFS directory."""
    files, names = _read_files(paths)
    _run(ctx, lambda c: c.upload_files_in_directory(files, names))


@cli.command()
@click.argument("path", type=_file_arg)
@click.option("--name", required=True, help="NFT name")
@click.option("--description", default="", help="NFT description")
@click.pass_context
def store(ctx: click.Context, path: str, name: str, description: str) -> None:
    """Upload a file and a metadata blob referencing it."""
    data = Path(path).read_bytes()
    _run(ctx, lambda c: c.store_nft(data, name, description))


@cli.command("store-dir")
@click.argument("paths", nargs=-1, required=True, type=_file_arg)
@click.option("--name", required=True, help="NFT name")
@click.option("--description", default="", help="NFT description")
@click.pass_context
def store_dir(ctx: click.Context, paths: tuple[str, ...], name: str, description: str) -> None:
    """Upload files into a directory plus a metadata.json listing them."""
    files, names = _read_files(paths)
    _run(ctx, lambda c: c.store_nft_in_directory(files, names, name, description))


# ── Deletion ───────────────────────────────────────────


@cli.command()
@click.argument("cid")
@click.pass_context
def delete(ctx: click.Context, cid: str) -> None:
    """Delete a stored item."""
    _run(ctx, lambda c: c.delete_nft(cid))


@cli.command("delete-all")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def delete_all(ctx: click.Context, yes: bool) -> None:
    """Delete EVERY item stored under the configured token."""
    prompt = None if yes else "This deletes all stored items. Proceed?"
    _run(ctx, lambda c: c.delete_all_nfts(), confirm=prompt)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
