"""Command-line entry point: print the styled-run documents of an HTML fragment as JSON."""

from __future__ import annotations

import io
from typing import Optional

import click

from styleruns.html.partition import partition_html
from styleruns.logger import get_logger
from styleruns.staging.base import documents_to_json


@click.command(name="styleruns")
@click.argument("filename", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("--text", "-t", default=None, help="HTML fragment to parse, instead of a file.")
@click.option(
    "--encoding",
    default=None,
    help="Encoding of FILENAME or stdin bytes. Detected when not specified.",
)
@click.option(
    "--container-tag",
    default=None,
    help="Tag of the top-level elements that each become a document. [default: div]",
)
@click.option("--indent", default=4, show_default=True, type=click.IntRange(min=0))
@click.option(
    "--output",
    "-o",
    default=None,
    type=click.Path(dir_okay=False, writable=True),
    help="Write the JSON here instead of to stdout.",
)
def styleruns(
    filename: Optional[str],
    text: Optional[str],
    encoding: Optional[str],
    container_tag: Optional[str],
    indent: int,
    output: Optional[str],
) -> None:
    """Extract bold/italic text runs from the HTML fragment in FILENAME.

    The fragment is read from stdin when neither FILENAME nor --text is given.
    """
    logger = get_logger()

    if filename and text is not None:
        raise click.UsageError("Specify either FILENAME or --text, not both.")

    file = None
    if not filename and text is None:
        raw = click.get_binary_stream("stdin").read()
        logger.debug("read %d byte(s) from stdin", len(raw))
        file = io.BytesIO(raw)

    try:
        documents = partition_html(
            filename=filename or None,
            file=file,
            text=text,
            encoding=encoding,
            container_tag=container_tag,
        )
    except UnicodeDecodeError as e:
        raise click.ClickException(f"Unable to decode the HTML fragment: {e}") from e
    except ValueError as e:
        raise click.UsageError(str(e)) from e

    json_str = documents_to_json(documents, filename=output, indent=indent)
    if json_str is not None:
        click.echo(json_str)
