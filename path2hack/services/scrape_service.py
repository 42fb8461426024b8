"""
Path2Hack Backend: Page Fetcher & Markup-to-Text Extractor
===========================================================

What:  The first half of the scrape-and-review pipeline: download a project page
       and flatten its visible text into one string.
How:   httpx GET (redirects followed, like a browser) → BeautifulSoup tree →
       every visible text node under <body>, in document order.
Who:   Used by ReviewService for POST /api/scrapeAndReviewProject.

Extraction policy:
    Each text node contributes exactly once. Walking every element and taking its
    full text content would repeat nested text once per ancestor
    (`<div>A<span>B</span></div>` would give "AB B"); this module yields "A B".
    Text sitting directly in <body> counts as well: `<body>Hello<div>A</div></body>`
    gives "Hello A", where a `body *` element selector would drop "Hello".

Resource note:
    Pages are fully buffered and nothing is truncated. A very large page becomes a
    very large prompt. `fetch_timeout` bounds the wait, not the size.
"""

import logging
from typing import Optional

import httpx
from bs4 import BeautifulSoup
from bs4.element import PreformattedString

from path2hack.config import settings
from path2hack.exceptions import PageFetchError

logger = logging.getLogger(__name__)

# Text inside these elements is never rendered
NON_VISIBLE_TAGS = frozenset({"head", "script", "style", "noscript", "template"})


def extract_page_text(html: str) -> str:
    """
    Flatten the visible text of an HTML document.

    Args:
        html: Raw markup as returned by the fetcher.

    Returns:
        Stripped text nodes joined by single spaces, in document order. An empty
        string when the page has no visible text.
    """
    soup = BeautifulSoup(html, "html.parser")
    # html.parser does not synthesize <body> for fragments
    root = soup.body or soup

    pieces = []
    for node in root.find_all(string=True):
        # Comments, doctypes, CDATA and processing instructions
        if isinstance(node, PreformattedString):
            continue
        if any(parent.name in NON_VISIBLE_TAGS for parent in node.parents):
            continue
        text = node.strip()
        if text:
            pieces.append(text)

    return " ".join(pieces)


class PageFetcher:
    """Downloads arbitrary caller-supplied URLs."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout if timeout is not None else settings.fetch_timeout
        self._transport = transport

    async def fetch(self, url: str) -> str:
        """
        GET `url` and return the decoded body.

        Raises:
            PageFetchError: Invalid URL, transport failure or non-2xx status.
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning("Fetch of %s returned %d", url, exc.response.status_code)
            raise PageFetchError(
                context={"url": url, "status": exc.response.status_code},
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Fetch of %s failed: %s", url, exc)
            raise PageFetchError(
                context={"url": url, "error_type": type(exc).__name__},
            ) from exc

        logger.info("Fetched %s (%d bytes)", url, len(response.content))
        return response.text


# ── Singleton Instance ────────────────────────────────────────────────────
page_fetcher = PageFetcher()


def get_page_fetcher() -> PageFetcher:
    """FastAPI dependency returning the shared page fetcher."""
    return page_fetcher
