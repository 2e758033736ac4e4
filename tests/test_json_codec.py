"""Tests for the JSON codec and the pydantic binding."""

import json

import pytest
from pydantic import BaseModel, ValidationError

from surly import InvalidURLSyntax, URL, URLEncoder, must_parse, url_object_hook


class Document(BaseModel):
    url: URL = URL()
    urlattr: URL = URL()


class TestJSONScalar:
    def test_encodes_quoted_string(self):
        """Should encode as a JSON string."""
        assert URL("http://example.com").to_json() == '"http://example.com"'

    def test_zero_value_encodes_empty_string(self):
        """URL() should encode as an empty JSON string."""
        assert URL().to_json() == '""'

    def test_decodes_string(self):
        """Should unwrap the quoting."""
        assert URL.from_json('"http://example.com"') == URL("http://example.com")

    def test_decodes_bytes(self):
        """Should accept a bytes document."""
        assert URL.from_json(b'"http://example.com"') == URL("http://example.com")

    def test_trims_whitespace(self):
        """Should strip whitespace inside and around the string."""
        assert URL.from_json(' "  http://example.com\\n" ') == URL("http://example.com")

    def test_decodes_escapes(self):
        """Should apply JSON escapes before validating."""
        assert URL.from_json('"http:\\/\\/example.com\\/a"') == URL("http://example.com/a")

    @pytest.mark.parametrize("text", [
        "http://example.com/a?b=1&c=2#frag",
        "urn:isbn:0451450523",
        "../relative/path",
        "",
    ])
    def test_round_trip(self, text):
        """Decoding then encoding should give back the same document."""
        document = json.dumps(text)
        assert URL.from_json(document).to_json() == document

    def test_rejects_invalid_url(self):
        """Should raise InvalidURLSyntax for an invalid URL."""
        with pytest.raises(InvalidURLSyntax):
            URL.from_json('"[foul] http://example.com"')

    def test_rejects_non_string(self):
        """Should raise InvalidURLSyntax for a JSON number."""
        with pytest.raises(InvalidURLSyntax):
            URL.from_json("42")

    def test_malformed_json_raises_decode_error(self):
        """Malformed JSON should raise the json module's error."""
        with pytest.raises(json.JSONDecodeError):
            URL.from_json('"http://example.com')


class TestURLEncoder:
    def test_encodes_fields(self):
        """Should encode URL fields as strings and zero values as empty."""
        document = {"url": must_parse("http://example.com"), "urlattr": URL()}
        encoded = json.dumps(document, cls=URLEncoder, separators=(",", ":"))
        assert encoded == '{"url":"http://example.com","urlattr":""}'

    def test_other_types_still_fail(self):
        """Should defer unknown types to the base encoder."""
        with pytest.raises(TypeError):
            json.dumps({"x": object()}, cls=URLEncoder)


class TestURLObjectHook:
    def test_decodes_named_fields(self):
        """Should convert only the named fields."""
        hook = url_object_hook("url", "urlattr")
        result = json.loads('{"url": "http://example.com", "urlattr": "", "name": "x"}', object_hook=hook)

        assert result["url"] == URL("http://example.com")
        assert result["urlattr"] == URL()
        assert result["name"] == "x"

    def test_decodes_nested_objects(self):
        """Should convert fields in nested objects."""
        hook = url_object_hook("href")
        result = json.loads('{"links": [{"href": "/a"}, {"href": "/b"}]}', object_hook=hook)

        assert [link["href"] for link in result["links"]] == [URL("/a"), URL("/b")]

    def test_invalid_field_aborts_decode(self):
        """An invalid URL should abort the whole decode."""
        hook = url_object_hook("url")
        with pytest.raises(InvalidURLSyntax):
            json.loads('{"url": "[foul] http://example.com"}', object_hook=hook)

    def test_non_string_field_aborts_decode(self):
        """A non-string value should abort the decode."""
        hook = url_object_hook("url")
        with pytest.raises(InvalidURLSyntax):
            json.loads('{"url": {"href": "http://example.com"}}', object_hook=hook)


class TestPydanticModel:
    def test_dumps_json(self):
        """Should serialize as JSON strings."""
        document = Document(url=must_parse("http://example.com"))
        assert document.model_dump_json() == '{"url":"http://example.com","urlattr":""}'

    def test_dumps_python(self):
        """model_dump should give plain strings."""
        document = Document(url=must_parse("http://example.com"))
        assert document.model_dump() == {"url": "http://example.com", "urlattr": ""}

    def test_validates_json(self):
        """Should decode and trim JSON strings."""
        document = Document.model_validate_json('{"url": " http://example.com "}')

        assert document.url == URL("http://example.com")
        assert document.urlattr == URL()

    def test_accepts_instances_and_strings(self):
        """Should accept URL instances and plain strings in Python mode."""
        url = URL("http://example.com")

        assert Document(url=url).url is url
        assert Document(url="http://example.com").url == url

    def test_invalid_json_raises_validation_error(self):
        """An invalid URL should fail model validation."""
        with pytest.raises(ValidationError):
            Document.model_validate_json('{"url": "[foul] http://example.com"}')

    def test_non_string_raises_validation_error(self):
        """A JSON number should fail model validation."""
        with pytest.raises(ValidationError):
            Document.model_validate_json('{"url": 42}')
