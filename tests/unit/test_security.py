"""API 키 / 입력 검증 테스트"""
import pytest

from westlaw_proxy.core.exceptions import (
    AuthenticationRequiredException,
    InvalidApiKeyException,
    InvalidURLException,
    MissingParameterException,
)
from westlaw_proxy.core.logging import mask_query_params, request_log_line, sanitize_for_log
from westlaw_proxy.core.security import (
    SecurityValidator,
    extract_api_key,
    verify_api_key,
)


class TestApiKey:
    """API 키 추출/검증"""

    def test_extract_from_header(self):
        assert extract_api_key({"x-api-key": "h"}, {}) == "h"

    def test_extract_from_query(self):
        assert extract_api_key({}, {"api_key": "q"}) == "q"

    def test_header_preferred(self):
        assert extract_api_key({"x-api-key": "h"}, {"api_key": "q"}) == "h"

    def test_empty_values_are_missing(self):
        assert extract_api_key({"x-api-key": ""}, {"api_key": ""}) is None

    def test_missing_key(self):
        with pytest.raises(AuthenticationRequiredException):
            verify_api_key(None, "secret")

    def test_wrong_key(self):
        with pytest.raises(InvalidApiKeyException):
            verify_api_key("secreT", "secret")

    def test_correct_key(self):
        verify_api_key("secret", "secret")

    def test_non_ascii_key_does_not_crash(self):
        with pytest.raises(InvalidApiKeyException):
            verify_api_key("비밀", "secret")


class TestRequireParams:
    """필수 파라미터 검증"""

    def test_all_present(self):
        assert SecurityValidator.require_params({"q": "smith"}, "m") == {"q": "smith"}

    def test_values_passed_through_unstripped(self):
        assert SecurityValidator.require_params({"q": "  People v Smith "}, "m") == {"q": "  People v Smith "}

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_or_blank(self, value):
        with pytest.raises(MissingParameterException) as exc_info:
            SecurityValidator.require_params({"q": value}, 'Missing query parameter "q"')

        assert exc_info.value.status_code == 400
        assert exc_info.value.to_payload() == {"error": 'Missing query parameter "q"'}

    def test_one_of_many_missing(self):
        with pytest.raises(MissingParameterException) as exc_info:
            SecurityValidator.require_params(
                {"vol": "50", "reporter": None, "page": "100"},
                "Missing parameters: vol, reporter, page",
            )

        assert exc_info.value.params == ["vol", "reporter", "page"]


class TestValidateUrl:
    """열람 URL 검증"""

    def test_https_allowed(self):
        url = "https://govt.westlaw.com/nyofficial/Document/I123"
        assert SecurityValidator.validate_url(url) == url

    @pytest.mark.parametrize(
        "url",
        ["file:///etc/passwd", "javascript:alert(1)", "chrome://settings", "govt.westlaw.com/doc", "http://"],
    )
    def test_rejected(self, url):
        with pytest.raises(InvalidURLException):
            SecurityValidator.validate_url(url)

    def test_surrounding_whitespace_tolerated(self):
        url = " https://govt.westlaw.com/nyofficial/Document/I123"
        assert SecurityValidator.validate_url(url) == url

    def test_too_long(self):
        with pytest.raises(InvalidURLException):
            SecurityValidator.validate_url("https://x.com/" + "a" * 3000)


class TestRequestLog:
    """요청 로그 한 줄과 마스킹"""

    def test_api_key_masked_by_name(self):
        line = request_log_line("GET", "/search", "1.2.3.4", {"q": "smith", "api_key": "topsecret"})

        assert "topsecret" not in line
        assert "'api_key': '***'" in line
        assert line.startswith("GET /search from 1.2.3.4")

    def test_sensitive_words_in_query_not_masked(self):
        assert mask_query_params({"q": "trade secret token"}) == {"q": "trade secret token"}

    def test_plain_request_line(self):
        assert request_log_line("GET", "/health", "1.2.3.4", {}) == "GET /health from 1.2.3.4"

    def test_newlines_cannot_forge_log_lines(self):
        line = request_log_line("GET", "/search", "1.2.3.4", {"q": "x\r\nINFO fake entry"})
        assert "\n" not in line
        assert "\r" not in line

    def test_sanitize_truncates(self):
        assert sanitize_for_log("a" * 150) == "a" * 100 + "..."

    def test_sanitize_empty(self):
        assert sanitize_for_log("") == "[empty]"
