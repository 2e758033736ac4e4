"""URI reference resolution (RFC 3986 section 5)."""

from . import grammar
from .url import URL


def resolve_reference(base: URL, ref: URL) -> URL:
    """
    Resolve ref against base and return a new URL.

    An absolute ref is returned as is and an empty ref yields base.
    Everything else is merged per RFC 3986 section 5.2 without touching
    case or percent-escapes.
    """
    if ref.is_absolute():
        return URL(ref.raw)
    if not ref.raw:
        return URL(base.raw)
    return URL(grammar.resolve(base.parsed, ref.parsed))
