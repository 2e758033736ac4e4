"""URL values that round-trip through JSON, XML and plain text unchanged."""

from .errors import InvalidURLLiteral, InvalidURLSyntax
from .json_codec import URLEncoder, url_object_hook
from .protocols import JSONCodec, TextCodec, XMLCodec
from .reference import resolve_reference
from .url import URL, must_parse, parse

__version__ = "0.1.0"

__all__ = [
    "URL",
    "parse",
    "must_parse",
    "resolve_reference",
    "InvalidURLSyntax",
    "InvalidURLLiteral",
    "URLEncoder",
    "url_object_hook",
    "JSONCodec",
    "TextCodec",
    "XMLCodec",
]
