"""테스트 자산 레이어

규칙:
- 실제 Westlaw/네트워크 의존 없음
- fake_browser: Playwright 대역
- westlaw_pages: 실제 Chromium 추출 테스트용 HTML
"""

TEST_API_KEY = "test-key"
ALLOWED_ORIGIN = "https://platforms.cc"
