"""JSON codec: a URL is always a JSON string scalar."""

import json
from typing import Any, Callable, Self

from .errors import InvalidURLSyntax


class JSONCodecMixin:
    __slots__ = ()

    @classmethod
    def from_json(cls, document: str | bytes) -> Self:
        """Decode a JSON document holding a single string."""
        value = json.loads(document)
        if not isinstance(value, str):
            raise InvalidURLSyntax(_as_text(document), "expected a JSON string")
        return cls(value.strip())

    def to_json(self) -> str:
        return json.dumps(self.raw, ensure_ascii=False)


class URLEncoder(json.JSONEncoder):
    """JSON encoder that writes URL values as strings."""

    def default(self, o: Any) -> Any:
        if isinstance(o, JSONCodecMixin):
            return o.raw
        return super().default(o)


def url_object_hook(*fields: str) -> Callable[[dict], dict]:
    """
    Build a json ``object_hook`` that decodes the named fields as URLs.

    Any object carrying one of the fields gets it converted; a field that
    does not hold a valid URL string aborts the whole decode.

        json.loads(document, object_hook=url_object_hook("url", "homepage"))
    """
    from .url import URL

    names = frozenset(fields)

    def hook(obj: dict) -> dict:
        for name in obj.keys() & names:
            value = obj[name]
            if not isinstance(value, str):
                raise InvalidURLSyntax(repr(value), f"field {name!r} is not a JSON string")
            obj[name] = URL(value.strip())
        return obj

    return hook


def _as_text(document: str | bytes) -> str:
    if isinstance(document, bytes):
        return document.decode("utf-8", errors="replace")
    return document
