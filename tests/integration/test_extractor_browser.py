"""페이지 내 추출 스크립트를 실제 Chromium 에서 검증

브라우저가 설치되어 있지 않으면 건너뛴다 (`playwright install chromium`).
"""

from __future__ import annotations

import pytest
import pytest_asyncio
from playwright.async_api import async_playwright

from westlaw_proxy.crawlers.playwright import build_launch_args
from westlaw_proxy.crawlers.westlaw.extractor import extract_document, extract_result_list

from tests.fixtures import westlaw_pages

pytestmark = pytest.mark.browser


@pytest_asyncio.fixture
async def page():
    pw = await async_playwright().start()
    try:
        browser = await pw.chromium.launch(headless=True, args=build_launch_args())
    except Exception as e:
        await pw.stop()
        pytest.skip(f"Chromium not available: {e}")

    page = await browser.new_page()
    try:
        yield page
    finally:
        await browser.close()
        await pw.stop()


@pytest.mark.asyncio
async def test_result_list_capped_with_fallbacks(page):
    await page.set_content(westlaw_pages.results_page(rows=7, untitled_index=1))

    items = await extract_result_list(page, limit=5)

    assert len(items) == 5
    assert items[0].title == "People v Case 0"
    assert items[0].url == "https://govt.westlaw.com/nyofficial/Document/I0000"
    assert items[0].citation == "0 N.Y.3d 100"
    assert items[0].summary == items[0].citation
    assert items[1].title == "Unknown Title"
    assert items[1].url is None
    assert items[1].summary == "No link row"


@pytest.mark.asyncio
async def test_no_results_marker(page):
    await page.set_content(westlaw_pages.NO_RESULTS_PAGE)
    assert await extract_result_list(page) == []


@pytest.mark.asyncio
async def test_unrelated_markup_is_also_empty(page):
    await page.set_content(westlaw_pages.UNRELATED_PAGE)
    assert await extract_result_list(page) == []


@pytest.mark.asyncio
async def test_document_primary_container(page):
    await page.set_content(westlaw_pages.DOCUMENT_WITH_CONTENT_BODY)

    content = await extract_document(page)

    assert content.title == "People v Smith"
    assert "Primary opinion text." in content.text
    assert "Frame footer" not in content.text
    assert "<p>Primary opinion text.</p>" in content.html


@pytest.mark.asyncio
async def test_document_falls_back_to_frame(page):
    await page.set_content(westlaw_pages.DOCUMENT_FRAME_ONLY)

    content = await extract_document(page)

    assert "Frame opinion text." in content.text
    assert "navigation chrome" not in content.text


@pytest.mark.asyncio
async def test_document_falls_back_to_body(page):
    await page.set_content(westlaw_pages.DOCUMENT_BODY_ONLY)

    content = await extract_document(page)

    assert content.title == "Plain Page"
    assert "Whole body text." in content.text
