"""Shared fixtures: sample pages and a fake network layer."""

import gzip
from typing import Callable

import httpx
import pytest

from site_audit.checks import PageContext

TITLE_60 = "Acme Widgets - Handmade Industrial Widgets for All Workshops"
DESCRIPTION_160 = (
    "Acme Widgets builds handmade industrial widgets for workshops of every size. "
    "Browse our catalog, compare specs, and order online with free shipping on all gear."
)

SECURE_HEADERS = {
    "content-type": "text/html; charset=utf-8",
    "content-encoding": "gzip",
    "strict-transport-security": "max-age=31536000; includeSubDomains",
    "x-frame-options": "SAMEORIGIN",
    "x-content-type-options": "nosniff",
}


def build_page(
    title: str = TITLE_60,
    description: str | None = DESCRIPTION_160,
    h1s: tuple[str, ...] = ("Handmade Widgets",),
    head_extra: str = "",
    body_extra: str = "",
    canonical: bool = True,
    viewport: str | None = "width=device-width, initial-scale=1",
    lang: str | None = "en",
) -> str:
    """A small, well-formed page; every piece can be switched off."""
    head = [f"<title>{title}</title>"]
    if description is not None:
        head.append(f'<meta name="description" content="{description}">')
    if canonical:
        head.append('<link rel="canonical" href="https://acme.example/">')
    if viewport is not None:
        head.append(f'<meta name="viewport" content="{viewport}">')
    head.append('<link rel="icon" href="/favicon.ico">')
    head.append('<meta property="og:title" content="Acme Widgets">')
    head.append(head_extra)
    body = [f"<h1>{h}</h1>" for h in h1s]
    body.append('<img src="/widget.png" alt="A blue widget">')
    body.append('<a href="/products">Products</a>')
    body.append('<a href="https://twitter.com/acme">Twitter</a>')
    body.append('<a href="/sitemap.xml">Sitemap</a>')
    body.append(body_extra)
    lang_attr = f' lang="{lang}"' if lang else ""
    return (
        f"<!DOCTYPE html><html{lang_attr}><head>{''.join(head)}</head>"
        f"<body>{''.join(body)}</body></html>"
    )


@pytest.fixture
def good_html() -> str:
    return build_page()


@pytest.fixture
def make_page() -> Callable[..., PageContext]:
    """Build a PageContext without touching the network."""

    def _make(
        html: str = "",
        url: str = "https://acme.example/",
        headers: dict | None = None,
        elapsed_ms: int = 120,
        html_size: int | None = None,
    ) -> PageContext:
        return PageContext.from_html(url, html, headers=headers, elapsed_ms=elapsed_ms, html_size=html_size)

    return _make


class FakeServer:
    """MockTransport handler that records every request."""

    def __init__(self, html: str = "", headers: dict | None = None, status: int = 200, error: Exception | None = None):
        self.html = html
        self.headers = dict(headers or {})
        self.status = status
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        body = self.html.encode("utf-8")
        if "gzip" in self.headers.get("content-encoding", ""):
            body = gzip.compress(body)
        return httpx.Response(self.status, headers=self.headers, content=body)

    @property
    def calls(self) -> int:
        return len(self.requests)


@pytest.fixture
def fake_server() -> Callable[..., FakeServer]:
    return FakeServer


@pytest.fixture
def mock_client():
    """Factory for an httpx.Client backed by a FakeServer."""
    clients = []

    def _make(server: FakeServer) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(server))
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()
