from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from jsonwriter.config import (
    merge_payload,
    output_defaults,
    output_encoding,
    output_trailing_newline,
)
from jsonwriter.escape import escape
from jsonwriter.exceptions import SinkWriteError
from jsonwriter.json_io import dump_json_path, load_json_value_path, load_json_value_text
from jsonwriter.json_types import JsonValue
from jsonwriter.writer import JsonWriter

app = typer.Typer(add_completion=False)
logger = logging.getLogger(__name__)

_STDIN_ALIAS = "-"
_EXIT_SINK_FAILURE = 1
_EXIT_BAD_INPUT = 2


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _read_input(source: str) -> JsonValue:
    if source == _STDIN_ALIAS:
        logger.debug("Reading JSON from stdin")
        return load_json_value_text(sys.stdin.read())
    return load_json_value_path(Path(source))


def _write_stdout(value: JsonValue, *, trailing_newline: bool) -> None:
    writer = JsonWriter(sys.stdout)
    writer.write_value(value)
    if trailing_newline:
        writer.write("\n")


@app.command()
def encode(
    source: str = typer.Argument(_STDIN_ALIAS, help="JSON input path, or '-' for stdin."),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write to this file in the configured [output] encoding instead of stdout.",
    ),
    config: Optional[Path] = typer.Option(None, "--config"),
    newline: Optional[bool] = typer.Option(
        None,
        "--newline/--no-newline",
        help="Terminate the output with a newline.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Re-emit UTF-8 JSON input as compact JSON text.

    The configured output encoding applies to --output files; stdout keeps
    the stream encoding of the terminal.
    """
    _configure_logging(verbose)
    defaults = output_defaults(config_path=config)
    settings = merge_payload({"trailing_newline": newline}, defaults)
    encoding = output_encoding(settings)
    trailing_newline = output_trailing_newline(settings)
    try:
        value = _read_input(source)
    except (OSError, ValueError) as exc:
        typer.echo(f"Cannot read JSON from {source}: {exc}", err=True)
        raise typer.Exit(code=_EXIT_BAD_INPUT)
    try:
        if output is None:
            _write_stdout(value, trailing_newline=trailing_newline)
        else:
            dump_json_path(
                value,
                output,
                encoding=encoding,
                trailing_newline=trailing_newline,
            )
            logger.info("Wrote %s", output)
    except SinkWriteError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=_EXIT_SINK_FAILURE)


@app.command("escape")
def escape_command(text: str = typer.Argument(...)) -> None:
    """Print TEXT as a quoted JSON string literal."""
    typer.echo(escape(text))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
