from http import HTTPStatus

import pytest
from pydantic import ValidationError

from httpapis import HttpResponse, TransportOutcome, parse_json, parse_json_array


def make_response(content: bytes | None, status_code: int = 200) -> HttpResponse:
    return HttpResponse(
        outcome=TransportOutcome.SUCCESS, status_code=status_code, content=content
    )


class TestHttpResponse:
    def test_content_is_returned_unchanged(self):
        payload = b"\x00\x01\xffbinary"

        assert make_response(payload).content == payload

    def test_missing_content_becomes_empty_bytes(self):
        response = make_response(None)

        assert response.content == b""
        assert response.text == ""

    def test_text_decodes_utf8(self):
        assert make_response("héllo".encode("utf-8")).text == "héllo"

    def test_text_never_fails_on_malformed_utf8(self):
        assert make_response(b"ok \xff\xfe").text == "ok \ufffd\ufffd"

    def test_json_object(self):
        assert make_response(b'{"a":1}').json() == {"a": 1}

    @pytest.mark.parametrize("payload", [b"not valid json", b"", b"[1, 2]", b'"a"'])
    def test_json_returns_empty_object_for_anything_else(self, payload: bytes):
        assert make_response(payload).json() == {}

    def test_json_array(self):
        assert make_response(b'[1, {"b": 2}]').json_array() == [1, {"b": 2}]

    @pytest.mark.parametrize("payload", [b"not valid json", b"", b'{"a": 1}'])
    def test_json_array_returns_empty_list_for_anything_else(self, payload: bytes):
        assert make_response(payload).json_array() == []

    def test_response_is_immutable(self):
        response = make_response(b"{}")

        with pytest.raises(ValidationError):
            response.status_code = 500  # type: ignore[misc]

    def test_status(self):
        assert make_response(b"", status_code=201).status is HTTPStatus.CREATED
        assert make_response(b"", status_code=299).status is None

    def test_is_success(self):
        assert make_response(b"").is_success is True
        failed = HttpResponse(
            outcome=TransportOutcome.TRANSPORT_ERROR, status_code=500, content=b""
        )
        assert failed.is_success is False


class TestParseHelpers:
    def test_parse_json(self):
        assert parse_json('{"a": {"b": [1]}}') == {"a": {"b": [1]}}
        assert parse_json("not valid json") == {}

    def test_parse_json_array(self):
        assert parse_json_array('["a", "b"]') == ["a", "b"]
        assert parse_json_array("not valid json") == []
