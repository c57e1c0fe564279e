"""Testes para parsing de erros da LINE."""

from __future__ import annotations

import pytest

from api.connectors.line.line_errors import (
    LineErrorDetail,
    LineErrorKind,
    LineErrorResponse,
    LineMessagingError,
    parse_line_error,
)


class TestParseLineError:
    def test_parse_message_and_details(self) -> None:
        error = parse_line_error(
            b'{"message": "Invalid reply token", '
            b'"details": [{"message": "must be specified", "property": "to"}]}'
        )
        assert error == LineErrorResponse(
            message="Invalid reply token",
            details=[LineErrorDetail(message="must be specified", property="to")],
        )

    def test_parse_without_details(self) -> None:
        error = parse_line_error('{"message": "Not found"}')
        assert error is not None
        assert error.details == []

    @pytest.mark.parametrize(
        "content",
        [b"", b"null", b"not json", b"[]", b'{"details": []}', b'{"message": 123}'],
    )
    def test_unparseable_returns_none(self, content: bytes) -> None:
        """Corpos fora do formato estruturado retornam None."""
        assert parse_line_error(content) is None


class TestLineMessagingError:
    def test_from_error_response(self) -> None:
        response = LineErrorResponse(message="The request body has 2 error(s)")
        error = LineMessagingError.from_error_response("/p", response, 400, "Bad Request")
        assert error.kind is LineErrorKind.API_ERROR
        assert error.error is response
        assert error.path == "/p"
        assert str(error) == "The request body has 2 error(s)"

    def test_str_includes_details(self) -> None:
        response = LineErrorResponse(
            message="Bad",
            details=[
                LineErrorDetail(message="too long", property="messages[0].text"),
                LineErrorDetail(message="invalid"),
            ],
        )
        error = LineMessagingError.from_error_response("/p", response)
        assert str(error) == "Bad (messages[0].text: too long; invalid)"

    def test_default_kind_is_http_status(self) -> None:
        error = LineMessagingError("/p", "boom", status_code=502)
        assert error.kind is LineErrorKind.HTTP_STATUS
        assert not error.is_timeout

    def test_str_skips_details_without_message(self) -> None:
        """Detalhes sem message não geram 'None' na mensagem."""
        response = LineErrorResponse(
            message="Bad",
            details=[LineErrorDetail(), LineErrorDetail(property="to")],
        )
        error = LineMessagingError.from_error_response("/p", response)
        assert str(error) == "Bad"
        assert "None" not in str(error)
