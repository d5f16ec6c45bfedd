import logging
from dataclasses import dataclass

import typer
from typing import Annotated
from pathlib import Path

from .backends import DirectoryBlobStore
from .config import default_store_dir, load_extensions
from .errors import InvalidKeyFormat, StoreError
from .importer import ImportEngine
from .store import CredentialStore
from .validator import describe

app = typer.Typer(help="Manage the local store of SSH private keys")


@dataclass
class Settings:
    store_dir: Path
    config: Path | None = None

    def open_store(self) -> CredentialStore:
        return CredentialStore(DirectoryBlobStore(self.store_dir))


@app.callback()
def main(
    ctx: typer.Context,
    store_dir: Annotated[
        Path | None, typer.Option("--store-dir", help="Key directory")
    ] = None,
    config: Annotated[Path | None, typer.Option(help="Path to config file")] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging")
    ] = False,
):
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    ctx.obj = Settings(store_dir or default_store_dir(), config)


@app.command("import")
def import_keys(
    ctx: typer.Context,
    files: Annotated[list[Path], typer.Argument(help="Private key files to import")],
    all_extensions: Annotated[
        bool, typer.Option("--all-extensions", help="Do not filter files by extension")
    ] = False,
):
    """Import private key files into the store.

    Each file is validated and stored under its file name; a file whose name is
    already taken by a foreign file in the key directory gets a "name (2)" style name.
    """
    settings: Settings = ctx.obj
    engine = ImportEngine(settings.open_store(), load_extensions(settings.config))
    result = engine.import_files(files, all_extensions=all_extensions)

    for name in result.imported:
        typer.echo(f"  ✓ Imported: {name}")
    for name in result.skipped:
        typer.echo(f"  - Skipped (extension): {name}")
    for failure in result.failed:
        typer.echo(f"  ⚠ Error: {failure.name}: {failure.error.reason}", err=True)

    typer.echo(
        f"\nSummary: {len(result.imported)} imported, {len(result.failed)} failed, {len(result.skipped)} skipped"
    )
    if not result.ok:
        raise typer.Exit(1)


@app.command("list")
def list_keys(ctx: typer.Context):
    """List stored private keys."""
    try:
        entries = ctx.obj.open_store().list()
    except StoreError as exc:
        typer.echo(f"Cannot read key store: {exc}", err=True)
        raise typer.Exit(1)

    if not entries:
        typer.echo("No private keys stored. Use 'import' to add some.")
    for entry in entries:
        typer.echo(f"✓ {entry.name}")


@app.command()
def show(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Key name")],
):
    """Write a stored key's content to stdout."""
    try:
        entry = ctx.obj.open_store().lookup(name)
    except StoreError as exc:
        typer.echo(f"Cannot read key store: {exc}", err=True)
        raise typer.Exit(1)

    if entry:
        typer.echo(entry.data, nl=False)
    else:
        typer.echo(f"Key not found: {name}", err=True)
        raise typer.Exit(1)


@app.command()
def remove(
    ctx: typer.Context,
    names: Annotated[list[str], typer.Argument(help="Key names to delete")],
):
    """Delete stored keys. Names that are not stored are ignored."""
    store = ctx.obj.open_store()
    failed = False
    for name in names:
        try:
            store.remove(name)
            typer.echo(f"  ✗ Removed: {name}")
        except StoreError as exc:
            typer.echo(f"  ⚠ Error: {exc}", err=True)
            failed = True
    if failed:
        raise typer.Exit(1)


@app.command()
def validate(
    files: Annotated[list[Path], typer.Argument(help="Files to check")],
):
    """Check key files without storing them."""
    failed = False
    for path in files:
        try:
            info = describe(path.read_bytes())
        except InvalidKeyFormat as exc:
            typer.echo(f"  ✗ {path.name}: {exc.reason}", err=True)
            failed = True
        except OSError as exc:
            typer.echo(f"  ⚠ {path.name}: {exc}", err=True)
            failed = True
        else:
            protection = "passphrase protected" if info.encrypted else "unencrypted"
            typer.echo(f"  ✓ {path.name}: {info.format}, {protection}")
    if failed:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
