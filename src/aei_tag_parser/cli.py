#!/usr/bin/env python3
"""Command-line interface for aei-tag-parser using Typer."""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

import typer
from typing_extensions import Annotated

from . import __version__  # type: ignore
from .batch import DecodeResult, decode_many
from .errors import TagDecodeError
from .fields import FIELD_LAYOUT
from .groups import EQUIPMENT_GROUPS
from .tag import AEITagData

app = typer.Typer(
    name="aei-tag-parser",
    help="Decode railway AEI RFID tags (128-bit, 32 hex digits).",
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "csv", "json")

# ============================================================================
# Shared options and helpers
# ============================================================================

VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable debug logging"),
]
JsonOption = Annotated[
    bool,
    typer.Option("--json", help="Output as JSON"),
]


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbose flag."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if not verbose else "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def read_tags_from_file(path: Path) -> list[str]:
    """
    Return one tag per line of path, stripped of surrounding whitespace.

    Bytes that are not valid UTF-8 are replaced, so such a line still yields
    its own decode error instead of aborting the whole file.
    """
    with open(path, encoding="utf-8", errors="replace") as f:
        return [line.strip() for line in f]


def read_tags_from_stdin() -> list[str]:
    """Return one tag per stdin line; nothing when stdin is an interactive terminal."""
    if sys.stdin.isatty():
        logger.debug("stdin is a terminal, not reading tags from it")
        return []
    stream = getattr(sys.stdin, "buffer", None)
    if stream is None:
        return [line.strip() for line in sys.stdin]
    return [line.decode("utf-8", errors="replace").strip() for line in stream]


def format_result(result: DecodeResult, output_format: str, delimiter: str = ";", detailed: bool = False) -> str:
    """Render one decode result as a single output line."""
    if result.error is not None:
        if output_format == "json":
            return json.dumps(
                {
                    "tag": result.tag,
                    "error": str(result.error),
                    "cause": type(result.error.cause).__name__,
                }
            )
        if output_format == "csv":
            return f"Error: {result.error}"
        return f"{result.tag} : Error: {result.error}"

    data = result.data
    if output_format == "json":
        return json.dumps(data.to_dict())
    if output_format == "csv":
        return data.to_csv(delimiter)
    return f"{result.tag} : {data.to_short_string(detailed)}"


def describe_fields(data: AEITagData) -> list[dict[str, Any]]:
    """Per-field breakdown of a decoded tag: source bits, raw value, interpreted value."""
    values = data.to_dict()
    interpreted = {
        "equipment_group_code": data.equipment_group,
        "equipment_initial_code": data.equipment_initial,
        "side_indicator": data.side_indicator.value,
        "length_dm": f"{data.length_ft} ft",
    }
    rows = []
    for field in FIELD_LAYOUT:
        rows.append(
            {
                "field": field.name,
                "width": field.width,
                "source": field.source,
                "value": values[field.name],
                "meaning": interpreted.get(field.name, str(values[field.name])),
            }
        )
    return rows


# ============================================================================
# Commands
# ============================================================================


@app.command()
def decode(
    tags: Annotated[Optional[list[str]], typer.Argument(help="One or more tags to decode (32 hex digits each)")] = None,
    file: Annotated[
        Optional[Path],
        typer.Option("--file", "-f", help="Read tags from a file, one per line", envvar="AEI_TAG_FILE"),
    ] = None,
    stdin: Annotated[bool, typer.Option("--stdin", "-s", help="Read tags from stdin, one per line")] = False,
    output_format: Annotated[
        str,
        typer.Option("--format", help="Output format: text, csv, json", envvar="AEI_TAG_FORMAT"),
    ] = "text",
    csv_output: Annotated[bool, typer.Option("--csv", help="Shortcut for --format csv")] = False,
    delimiter: Annotated[
        str,
        typer.Option("--delimiter", "-d", help="Field delimiter for CSV rows", envvar="AEI_TAG_DELIMITER"),
    ] = ";",
    details: Annotated[bool, typer.Option("--details", help="Add raw value, equipment type and side to text output")] = False,
    verbose: VerboseOption = False,
) -> None:
    """
    Decode tags given as arguments, from a file, or from stdin.

    Tags from --file (or --stdin) come first, then the arguments. Piped stdin
    is also read when neither a file nor argument tags are given. Each tag
    prints exactly one line; a malformed tag prints its error on its own line
    and does not stop the others.
    """
    setup_logging(verbose)

    if csv_output:
        output_format = "csv"
    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Error: Invalid format '{output_format}'. Must be text, csv, or json.", err=True)
        raise typer.Exit(2)

    try:
        all_tags: list[str] = []
        if file is not None:
            all_tags.extend(read_tags_from_file(file))
        elif stdin or not tags:
            all_tags.extend(read_tags_from_stdin())
        all_tags.extend(tags or [])

        if not all_tags:
            typer.echo("Error: No tags to decode", err=True)
            raise typer.Exit(2)

        logger.debug("Decoding %d tags (format=%s)", len(all_tags), output_format)
        for result in decode_many(all_tags):
            typer.echo(format_result(result, output_format, delimiter, details))
    except typer.Exit:
        raise
    except OSError as e:
        typer.echo(f"Error: Couldn't read tags: {e}", err=True)
        raise typer.Exit(1)
    except Exception as e:
        typer.echo(f"Error: Unexpected error: {e}", err=True)
        if verbose:
            import traceback
            traceback.print_exc()
        raise typer.Exit(4)


@app.command()
def explain(
    tag: Annotated[str, typer.Argument(help="Tag to explain (32 hex digits)")],
    verbose: VerboseOption = False,
    json_output: JsonOption = False,
) -> None:
    """Show every field of a tag with its bit source, raw value and meaning."""
    setup_logging(verbose)

    try:
        data = AEITagData.from_hex(tag)
    except TagDecodeError as e:
        typer.echo(f"Error: Invalid tag: {e}", err=True)
        raise typer.Exit(2)

    rows = describe_fields(data)
    if json_output:
        typer.echo(json.dumps({"tag": data.raw_hex, "fields": rows}, indent=2))
        return

    typer.echo(f"Tag:  {data.raw_hex}")
    for row in rows:
        typer.echo(f"  {row['field']:<24} {row['value']!s:>8}  {row['meaning']:<24} [{row['width']} bits: {row['source']}]")


@app.command()
def groups(json_output: JsonOption = False) -> None:
    """List the equipment group codes and their names."""
    if json_output:
        typer.echo(json.dumps({str(code): name for code, name in enumerate(EQUIPMENT_GROUPS)}, indent=2))
        return
    for code, name in enumerate(EQUIPMENT_GROUPS):
        typer.echo(f"{code:>2}  {name}")


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"aei-tag-parser {__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show version and exit"),
    ] = None,
) -> None:
    """aei-tag-parser - decode railway AEI RFID tags."""
    pass


if __name__ == "__main__":
    app()
