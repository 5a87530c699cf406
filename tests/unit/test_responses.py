import httpx

from claimcheck.transport.responses import extract_error_message


def _response(status: int, **kwargs: object) -> httpx.Response:
    return httpx.Response(status, **kwargs)  # type: ignore[arg-type]


class TestExtractErrorMessage:
    def test_detail_wins(self) -> None:
        response = _response(422, json={"detail": "bad invoice", "message": "other"})
        assert extract_error_message(response) == "bad invoice"

    def test_message_when_no_detail(self) -> None:
        response = _response(400, json={"message": "missing field", "error": "x"})
        assert extract_error_message(response) == "missing field"

    def test_error_when_no_detail_or_message(self) -> None:
        response = _response(500, json={"error": "internal"})
        assert extract_error_message(response) == "internal"

    def test_structured_detail_is_json_encoded(self) -> None:
        response = _response(422, json={"detail": [{"loc": ["body"], "msg": "required"}]})
        assert extract_error_message(response) == '[{"loc": ["body"], "msg": "required"}]'

    def test_empty_detail_is_skipped(self) -> None:
        response = _response(400, json={"detail": "", "message": "fallback"})
        assert extract_error_message(response) == "fallback"

    def test_other_json_body(self) -> None:
        response = _response(400, json={"code": 17})
        assert extract_error_message(response) == 'Server error: {"code": 17}'

    def test_plain_text_body(self) -> None:
        response = _response(502, text="upstream timeout")
        assert extract_error_message(response) == "Server error: upstream timeout"

    def test_status_fallback(self) -> None:
        response = _response(503)
        assert extract_error_message(response) == "HTTP 503: Service Unavailable"

    def test_empty_json_object_falls_back_to_status(self) -> None:
        response = _response(404, json={})
        assert extract_error_message(response) == "HTTP 404: Not Found"
