"""Tests for WriteResult and ReturnFormat."""

from loguru import logger

from github_manager.core import GitHubNotFoundError, ReturnFormat, WriteResult


class TestWriteResult:
    """Truthiness and diagnostic payloads of write outcomes."""

    def test_success_is_truthy(self):
        result = WriteResult.success(204)

        assert result
        assert result.status_code == 204
        assert result.error_response is None
        assert result.json_error_response is None

    def test_failure_is_falsy(self):
        result = WriteResult.failure(status_code=422, response_text='{"message": "Validation Failed"}')

        assert not result
        assert result.error_response == '{"message": "Validation Failed"}'
        assert result.json_error_response == {"message": "Validation Failed"}

    def test_body_wins_over_default_message(self):
        result = WriteResult.failure(
            status_code=500, response_text="boom", default_error_message="request failed"
        )
        assert result.error_response == "boom"

    def test_default_message_without_body(self):
        result = WriteResult.failure(status_code=500, default_error_message="request failed")

        assert result.error_response == "request failed"
        assert result.json_error_response is None

    def test_error_text_fallback(self):
        error = GitHubNotFoundError("Resource not found", status_code=404)
        result = WriteResult.failure(status_code=404, error=error)

        assert result.error_response == "Resource not found"

    def test_status_fallback(self):
        assert WriteResult.failure(status_code=418).error_response == "Unexpected status code 418"

    def test_unparsable_body(self):
        result = WriteResult.failure(status_code=502, response_text="<html>Bad Gateway</html>")

        assert result.error_response == "<html>Bad Gateway</html>"
        assert result.json_error_response is None

    def test_print_error_response_logs(self):
        messages: list[str] = []
        sink_id = logger.add(messages.append, level="ERROR", format="{message}")
        try:
            WriteResult.failure(status_code=404, response_text="missing").print_error_response()
            WriteResult.success(204).print_error_response()
        finally:
            logger.remove(sink_id)

        assert len(messages) == 1
        assert "404" in messages[0]
        assert "missing" in messages[0]


class TestReturnFormat:
    """Output format selection."""

    def test_values(self):
        assert ReturnFormat("json") is ReturnFormat.JSON
        assert ReturnFormat("typed") is ReturnFormat.LIBRARY_OBJECT
        assert ReturnFormat("raw") is ReturnFormat.STRING
