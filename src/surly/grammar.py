"""Adapter over the rfc3986 URI grammar."""

import re
from typing import NamedTuple

from rfc3986 import URIReference, abnf_regexp, exceptions, misc, normalizers, validators

from .errors import InvalidURLSyntax

_VALIDATOR = validators.Validator().check_validity_of("scheme", "path", "query", "fragment")
_IP_LITERAL_VALIDATOR = validators.Validator().check_validity_of("host")

# rfc3986's own authority patterns reject an empty userinfo and ports above
# 65535, both of which the ABNF allows.
_USERINFO = re.compile(
    f"(?:[{abnf_regexp.UNRESERVED_RE}{abnf_regexp.SUB_DELIMITERS_RE}:]|{abnf_regexp.PCT_ENCODED})*"
)
_REG_NAME = re.compile(
    f"(?:[{abnf_regexp.UNRESERVED_RE}{abnf_regexp.SUB_DELIMITERS_RE}]|{abnf_regexp.PCT_ENCODED})*"
)
_PORT = re.compile("[0-9]*")


class Components(NamedTuple):
    """
    The parts of a URI reference, exactly as written.

    Absent parts are None; present but empty parts are "". The path is
    always a string.
    """

    scheme: str | None
    authority: str | None
    userinfo: str | None
    host: str | None
    port: str | None
    path: str
    query: str | None
    fragment: str | None


def _control_character(text: str) -> str | None:
    for char in text:
        if char.isspace() or ord(char) < 0x20 or ord(char) == 0x7F:
            return char
    return None


def _split_authority(text: str, authority: str) -> tuple[str | None, str, str | None]:
    userinfo, at, hostport = authority.rpartition("@")
    if not at:
        userinfo = None
    elif not _USERINFO.fullmatch(userinfo):
        raise InvalidURLSyntax(text, "invalid userinfo")

    if hostport.startswith("["):
        end = hostport.find("]") + 1
        if not end:
            raise InvalidURLSyntax(text, "unterminated IP literal")
        host, rest = hostport[:end], hostport[end:]
        if rest and not rest.startswith(":"):
            raise InvalidURLSyntax(text, "invalid text after IP literal")
        port = rest[1:] if rest else None
        try:
            _IP_LITERAL_VALIDATOR.validate(URIReference(None, host, None, None, None))
        except exceptions.RFC3986Exception as e:
            raise InvalidURLSyntax(text, str(e)) from e
    else:
        host, colon, port = hostport.partition(":")
        if not colon:
            port = None
        if not _REG_NAME.fullmatch(host):
            raise InvalidURLSyntax(text, "invalid host")

    if port is not None and not _PORT.fullmatch(port):
        raise InvalidURLSyntax(text, "invalid port")
    return userinfo, host, port


def split(text: str) -> Components:
    """Validate text as a URI reference and return its components."""
    char = _control_character(text)
    if char is not None:
        raise InvalidURLSyntax(text, f"invalid character {char!r}")

    match = misc.URI_MATCHER.fullmatch(text)
    if match is None:
        raise InvalidURLSyntax(text, "not a URI reference")

    scheme, authority, path, query, fragment = match.group(
        "scheme", "authority", "path", "query", "fragment"
    )
    path = path or ""
    if scheme is None and authority is None and ":" in path.split("/", 1)[0]:
        raise InvalidURLSyntax(text, "colon in first path segment")

    try:
        _VALIDATOR.validate(URIReference(scheme, None, path or None, query, fragment))
    except exceptions.RFC3986Exception as e:
        raise InvalidURLSyntax(text, str(e)) from e

    userinfo = host = port = None
    if authority is not None:
        userinfo, host, port = _split_authority(text, authority)
    return Components(scheme, authority, userinfo, host, port, path, query, fragment)


def recompose(parts: Components) -> str:
    """Join components back into text (RFC 3986 section 5.3)."""
    result = []
    if parts.scheme is not None:
        result.append(parts.scheme + ":")
    if parts.authority is not None:
        result.append("//" + parts.authority)
    result.append(parts.path)
    if parts.query is not None:
        result.append("?" + parts.query)
    if parts.fragment is not None:
        result.append("#" + parts.fragment)
    return "".join(result)


def _merge(base: Components, path: str) -> str:
    if base.authority is not None and not base.path:
        return "/" + path
    return base.path[:base.path.rfind("/") + 1] + path


def resolve(base: Components, ref: Components) -> str:
    """
    Resolve ref against base (RFC 3986 section 5.2.2) and return the text.

    Components are taken over as written; only dot segments are removed,
    so case and percent-escapes survive.
    """
    if ref.scheme is not None:
        target = ref._replace(path=normalizers.remove_dot_segments(ref.path))
    elif ref.authority is not None:
        target = ref._replace(scheme=base.scheme, path=normalizers.remove_dot_segments(ref.path))
    elif not ref.path:
        query = ref.query if ref.query is not None else base.query
        target = base._replace(query=query, fragment=ref.fragment)
    else:
        if ref.path.startswith("/"):
            path = ref.path
        else:
            path = _merge(base, ref.path)
        target = base._replace(
            path=normalizers.remove_dot_segments(path),
            query=ref.query,
            fragment=ref.fragment,
        )
    return recompose(target)
