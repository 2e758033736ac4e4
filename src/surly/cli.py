"""CLI interface using typer."""

from enum import Enum
from xml.etree import ElementTree as ET

import typer

from .config import settings
from .errors import InvalidURLSyntax
from .url import URL
from .xml_codec import tostring

app = typer.Typer(
    name="surly",
    help="Validate, resolve and convert URLs",
    no_args_is_help=True,
)


class Format(str, Enum):
    json = "json"
    xml = "xml"
    xml_attr = "xml-attr"
    text = "text"


def _parse_or_exit(text: str) -> URL:
    try:
        return URL(text)
    except InvalidURLSyntax as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def check(
    urls: list[str] = typer.Argument(..., help="URLs to validate"),
):
    """Check that URLs are syntactically valid."""
    failed = 0
    for text in urls:
        try:
            URL(text)
        except InvalidURLSyntax as e:
            typer.echo(f"invalid {text}: {e.reason}")
            failed += 1
        else:
            typer.echo(f"ok {text}")

    if failed:
        raise typer.Exit(code=1)


@app.command()
def resolve(
    first: str = typer.Argument(..., help="Base URL, or the reference when SURLY_BASE_URL is set"),
    second: str = typer.Argument(None, help="Reference to resolve"),
):
    """Resolve a reference against a base URL."""
    if second is None:
        if settings.base_url is None:
            typer.echo("Error: no base URL given and SURLY_BASE_URL is not set", err=True)
            raise typer.Exit(code=1)
        base, ref = settings.base_url, _parse_or_exit(first)
    else:
        base, ref = _parse_or_exit(first), _parse_or_exit(second)

    typer.echo(str(base.resolve_reference(ref)))


@app.command()
def convert(
    url: str = typer.Argument(..., help="URL to encode"),
    to: Format = typer.Option(Format.json, "--to", "-t", help="Output format"),
):
    """Encode a URL in one of the supported formats."""
    value = _parse_or_exit(url)

    if to is Format.json:
        typer.echo(value.to_json())
    elif to is Format.xml:
        typer.echo(value.to_xml(settings.xml_tag))
    elif to is Format.xml_attr:
        element = ET.Element(settings.xml_tag)
        value.to_xml_attribute(element, settings.xml_attribute)
        typer.echo(tostring(element))
    else:
        typer.echo(value.to_text())


@app.command()
def version():
    """Show version."""
    from . import __version__

    typer.echo(f"surly {__version__}")


if __name__ == "__main__":
    app()
