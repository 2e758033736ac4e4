"""The URL value type."""

from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from . import grammar
from .errors import InvalidURLLiteral
from .json_codec import JSONCodecMixin
from .text_codec import TextCodecMixin
from .xml_codec import XMLCodecMixin


class URL(JSONCodecMixin, XMLCodecMixin, TextCodecMixin):
    """
    A string that is guaranteed to be a valid URI reference.

    The text is kept exactly as given; equality and hashing compare it
    verbatim. ``URL()`` is the empty reference, which encodes as empty text
    in every format.
    """

    __slots__ = ("_raw", "_parsed")

    def __init__(self, raw: str = ""):
        if not isinstance(raw, str):
            raise TypeError(f"URL text must be a string, not {type(raw).__name__}")
        object.__setattr__(self, "_parsed", grammar.split(raw))
        object.__setattr__(self, "_raw", raw)

    def __setattr__(self, name: str, value: Any):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def parsed(self) -> grammar.Components:
        """Components of the URL, exactly as written."""
        return self._parsed

    @property
    def scheme(self) -> str | None:
        return self._parsed.scheme

    @property
    def authority(self) -> str | None:
        return self._parsed.authority

    @property
    def userinfo(self) -> str | None:
        return self._parsed.userinfo

    @property
    def host(self) -> str | None:
        return self._parsed.host

    @property
    def port(self) -> str | None:
        return self._parsed.port

    @property
    def path(self) -> str:
        return self._parsed.path

    @property
    def query(self) -> str | None:
        return self._parsed.query

    @property
    def fragment(self) -> str | None:
        return self._parsed.fragment

    def is_absolute(self) -> bool:
        """True when the URL carries a scheme."""
        return self._parsed.scheme is not None

    def resolve_reference(self, ref: "URL") -> "URL":
        """Resolve ref against this URL (RFC 3986 section 5)."""
        from .reference import resolve_reference

        return resolve_reference(self, ref)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, URL):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash((URL, self._raw))

    def __bool__(self) -> bool:
        return self._raw != ""

    def __str__(self) -> str:
        return self._raw

    def __repr__(self) -> str:
        return f"URL({self._raw!r})"

    def __reduce__(self):
        return type(self), (self._raw,)

    def __copy__(self) -> "URL":
        return self

    def __deepcopy__(self, memo: dict) -> "URL":
        return self

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_text = core_schema.chain_schema([
            core_schema.str_schema(strip_whitespace=True),
            core_schema.no_info_plain_validator_function(cls),
        ])
        return core_schema.json_or_python_schema(
            json_schema=from_text,
            python_schema=core_schema.union_schema([
                core_schema.is_instance_schema(cls),
                from_text,
            ]),
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, return_schema=core_schema.str_schema()
            ),
        )


def parse(text: str) -> URL:
    """Validate text and return it as a URL, raising InvalidURLSyntax."""
    return URL(text)


def must_parse(text: str) -> URL:
    """
    Like parse, but for literals known to be valid when the code is written.

    Invalid text raises InvalidURLLiteral, which is not meant to be handled.
    Never pass untrusted input here.
    """
    try:
        return URL(text)
    except ValueError as e:
        raise InvalidURLLiteral(str(e)) from e
