"""CLI main entry point."""

import json
import os
import sys
from typing import BinaryIO

import click

from ...core import NotFoundError, SpreadFS, SpreadFSError
from ...factory import create_store


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=str),
    help="Cache root directory (default: $SFS_CACHE_DIR or /tmp/.spreadfs/cache)",
)
@click.option("--mode", help="Octal permission bits for cache directories (default: 0755)")
@click.pass_context
def cli(ctx: click.Context, debug: bool, root: str | None, mode: str | None) -> None:
    """SpreadFS - sharded, content-addressable file cache."""
    log_level = "DEBUG" if debug else os.environ.get("SFS_LOG_LEVEL", "INFO")
    try:
        ctx.obj = create_store(root=root, mode=mode, log_level=log_level)
    except (SpreadFSError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("key")
@click.pass_obj
def path(store: SpreadFS, key: str) -> None:
    """Print the path an entry for KEY is stored at."""
    click.echo(store.map_key(key))


@cli.command()
@click.argument("key")
@click.argument("file", type=click.File("rb"), default="-")
@click.pass_obj
def put(store: SpreadFS, key: str, file: BinaryIO) -> None:
    """Store FILE (or stdin) under KEY."""
    entry = store.map_key(key)
    size = 0
    try:
        with store.atomic_create(entry) as out:
            for chunk in iter(lambda: file.read(8192), b""):
                out.write(chunk)
                size += len(chunk)
    except (SpreadFSError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(json.dumps({"key": key, "path": entry, "size": size}, indent=2))


@cli.command()
@click.argument("key")
@click.option("-o", "--output", type=click.File("wb"), default="-", help="Output file path")
@click.pass_obj
def get(store: SpreadFS, key: str, output: BinaryIO) -> None:
    """Write the entry stored under KEY to OUTPUT (default: stdout)."""
    try:
        with store.open(store.map_key(key)) as src:
            for chunk in iter(lambda: src.read(8192), b""):
                output.write(chunk)
    except NotFoundError:
        click.echo(f"Error: No cache entry for key: {key}", err=True)
        sys.exit(1)
    except (SpreadFSError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("key")
@click.pass_obj
def stat(store: SpreadFS, key: str) -> None:
    """Show file information for the entry stored under KEY."""
    try:
        info = store.stat(store.map_key(key))
    except NotFoundError:
        click.echo(f"Error: No cache entry for key: {key}", err=True)
        sys.exit(1)
    except (SpreadFSError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(json.dumps(info.to_dict(), indent=2))


@cli.command()
@click.pass_obj
def reload(store: SpreadFS) -> None:
    """Walk the cache root and summarize the entries found on disk."""
    sizes: list[int] = []

    def visit(key: str, name: str) -> None:
        try:
            sizes.append(os.path.getsize(name))
        except OSError as e:
            store.logger.warning("Could not size cache entry", path=name, error=str(e))

    try:
        count = store.reload(visit)
    except SpreadFSError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    output = {"root": store.root, "entries": count, "total_bytes": sum(sizes)}
    click.echo(json.dumps(output, indent=2))


@cli.command()
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_obj
def purge(store: SpreadFS, yes: bool) -> None:
    """Remove every entry under the cache root."""
    if not yes:
        click.confirm(f"Remove all cache entries under {store.root}?", abort=True)

    try:
        removed = store.remove_all()
    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Removed {removed} item(s) from {store.root}")


def main() -> None:
    """Main entry point."""
    cli()
