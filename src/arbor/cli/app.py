# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
from pathlib import Path

import typer

from ..adapters.local_fs import LocalFS
from ..domain.errors import ArborError, ErrorKind
from ..domain.results import TreeResult
from ..services import EntryClassifier, TreeService
from ..logging_config import setup_logging

setup_logging()

app = typer.Typer(help="Arbor CLI - copy, move and delete directory trees")

logger = logging.getLogger(__name__)

EXIT_CODES = {
    ErrorKind.INTERNAL: 1,
    ErrorKind.NOT_FOUND: 2,
    ErrorKind.VALIDATION: 3,
}


def _wire() -> TreeService:
    return TreeService(LocalFS())


def _verbose(enabled: bool) -> None:
    if enabled:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")


def _finish(result: TreeResult, done: str) -> None:
    """Echo success, or report the error kind and exit non-zero."""
    if result.ok:
        typer.echo(done)
        return
    err = result.error
    step = f" during {err.step.value}" if err.step else ""
    typer.echo(f"Error ({err.kind.value}{step}): {err.message}", err=True)
    raise typer.Exit(code=EXIT_CODES[err.kind])


@app.command()
def copy(
    source: Path = typer.Argument(..., help="Directory to copy"),
    dest: Path = typer.Argument(..., help="Destination directory (created if missing)"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
):
    """
    Recursively copy SOURCE into DEST, overwriting files that already exist.
    """
    _verbose(verbose)
    result = _wire().try_copy_directory(source, dest)
    _finish(result, f"Copied {source} -> {dest}")


@app.command()
def move(
    source: Path = typer.Argument(..., help="Directory to move"),
    dest: Path = typer.Argument(..., help="Destination directory"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
):
    """
    Copy SOURCE into DEST, then delete SOURCE. SOURCE is kept if the copy fails.
    """
    _verbose(verbose)
    result = _wire().try_move_directory(source, dest)
    _finish(result, f"Moved {source} -> {dest}")


@app.command()
def delete(
    path: Path = typer.Argument(..., help="Directory to delete"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
):
    """
    Recursively delete PATH. Symlinks inside it are removed, not followed.
    """
    _verbose(verbose)
    result = _wire().try_delete_directory(path)
    _finish(result, f"Deleted {path}")


@app.command()
def classify(
    path: Path = typer.Argument(..., help="Path to inspect"),
):
    """
    Print whether PATH is a file or a directory.
    """
    try:
        kind = EntryClassifier(LocalFS()).classify(path)
    except ArborError as e:
        typer.echo(f"Error ({e.kind.value}): {e.message}", err=True)
        raise typer.Exit(code=EXIT_CODES[e.kind])
    typer.echo(kind.value)
