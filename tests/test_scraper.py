import asyncio

import httpx
import pytest

from app.main import app
from app.modules.scraper.extractor import NO_CONTENT_TEXT, clean_extract, extract_page, truncate
from app.modules.scraper.fetcher import FetchError, PageFetcher, get_page_fetcher, is_valid_url

LONG = "Routers forward packets between networks using routing tables. " * 6

PAGE = f"""
<html><head><title>Routing Basics</title>
<meta name="description" content="How routers work">
<meta property="og:type" content="article">
<script>var tracking = 1;</script></head>
<body><nav>Menu</nav><main><p>{LONG}</p></main></body></html>
"""


@pytest.mark.parametrize("url,valid", [
    ("https://example.com", True),
    ("http://example.com/a?b=c", True),
    ("ftp://example.com", False),
    ("example.com", False),
    ("http://example.com:notaport/page", False),
    ("http://:80/", False),
    ("", False),
    (None, False),
])
def test_is_valid_url(url, valid):
    assert is_valid_url(url) is valid


def test_truncate_marks_cut_text():
    assert truncate("abcdef", 3) == "abc..."
    assert truncate("abc", 3) == "abc"


def test_extract_page():
    page = extract_page(PAGE)

    assert page["title"] == "Routing Basics"
    assert page["description"] == "How routers work"
    assert page["og_type"] == "article"
    assert page["text"].startswith("Routers forward packets")
    assert "tracking" not in page["text"]


def test_extract_page_short_body_uses_description():
    page = extract_page('<html><head><meta name="description" content="Short page"></head><body>Hi</body></html>')

    assert page["text"] == "Short page"


def test_clean_extract_drops_noise_and_truncates():
    page = clean_extract(PAGE, budget=50)

    assert page["title"] == "Routing Basics"
    assert "Menu" not in page["content"]
    assert page["content"].endswith("...")
    assert len(page["content"]) == 53


def test_clean_extract_fallback():
    html = '<html><head><title>Empty</title></head><body></body></html>'

    assert clean_extract(html)["content"] == "Empty"
    assert clean_extract(html, fallback=False)["content"] == ""
    assert clean_extract("<html></html>")["content"] == NO_CONTENT_TEXT


def test_page_fetcher_sends_browser_headers():
    seen = {}

    def handler(request):
        seen["user_agent"] = request.headers["User-Agent"]
        seen["referer"] = request.headers.get("Referer")
        return httpx.Response(200, text="<html>ok</html>")

    fetcher = PageFetcher(user_agent="TestAgent/1.0", transport=httpx.MockTransport(handler))
    html = asyncio.run(fetcher.fetch_html("https://example.com/", referer="https://example.com/"))

    assert html == "<html>ok</html>"
    assert seen == {"user_agent": "TestAgent/1.0", "referer": "https://example.com/"}


def test_page_fetcher_raises_on_http_error():
    fetcher = PageFetcher(transport=httpx.MockTransport(lambda request: httpx.Response(503)))

    with pytest.raises(FetchError) as excinfo:
        asyncio.run(fetcher.fetch_html("https://example.com/"))
    assert excinfo.value.status == 503


def test_page_fetcher_raises_on_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    fetcher = PageFetcher(transport=httpx.MockTransport(handler))

    with pytest.raises(FetchError) as excinfo:
        asyncio.run(fetcher.fetch_html("https://example.com/"))
    assert excinfo.value.status is None


def test_fetch_url_route(client, fetcher):
    fetcher.pages["https://example.com/routing"] = PAGE

    resp = client.post("/api/fetch-url", json={"url": "https://example.com/routing"})

    assert resp.status_code == 200
    data = resp.json()
    assert data["title"] == "Routing Basics"
    assert "Routers forward packets" in data["text"]


def test_fetch_url_failure_carries_fallback(client):
    resp = client.post("/api/fetch-url", json={"url": "https://example.com/missing"})

    assert resp.status_code == 500
    body = resp.json()
    assert body["code"] == "EXTRACTION_FAILED"
    assert body["fallback"]["title"] == "Web Page"


def test_fetch_url_requires_url(client):
    assert client.post("/api/fetch-url", json={}).status_code == 400


def test_scrape_content_route(client, fetcher):
    fetcher.pages["https://example.com/routing"] = PAGE

    data = client.post("/api/scrape-content", json={"url": "https://example.com/routing"}).json()

    assert data["status"] == "success"
    assert data["title"] == "Routing Basics"
    assert data["description"] == "How routers work"
    assert data["url"] == "https://example.com/routing"


def test_scrape_content_rejects_invalid_url(client):
    resp = client.post("/api/scrape-content", json={"url": "nope"})

    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid URL provided"


def test_scrape_content_upstream_failure(client):
    resp = client.post("/api/scrape-content", json={"url": "https://example.com/missing"})

    assert resp.status_code == 502
    assert resp.json()["error"] == "Failed to fetch URL: HTTP 404"


def test_page_fetcher_rejects_malformed_port():
    fetcher = PageFetcher(transport=httpx.MockTransport(lambda request: httpx.Response(200, text="ok")))

    with pytest.raises(FetchError):
        asyncio.run(fetcher.fetch_html("http://example.com:notaport/page"))


def test_fetch_url_malformed_port_uses_fallback(client):
    real_fetcher = PageFetcher(transport=httpx.MockTransport(lambda request: httpx.Response(200, text=PAGE)))
    app.dependency_overrides[get_page_fetcher] = lambda: real_fetcher

    resp = client.post("/api/fetch-url", json={"url": "http://example.com:notaport/page"})

    assert resp.status_code == 500
    body = resp.json()
    assert body["code"] == "EXTRACTION_FAILED"
    assert body["fallback"]["title"] == "Web Page"
