"""Chord sheets published on the web.

Plain-text responses are used as-is.  HTML pages are expected to carry the
sheet in one or more ``<pre>`` blocks, the usual way chord-above-lyric text
is published; the blocks are joined in document order and everything else
on the page is ignored.
"""

import httpx
from bs4 import BeautifulSoup

from ..exceptions import FetchError, SourceError
from .base import SheetSource

HTTP_TIMEOUT = 15


class HttpSource(SheetSource):
    """Chord sheet at an ``http://`` or ``https://`` URL."""

    @classmethod
    def can_handle(cls, location: str) -> bool:
        return location.startswith(("http://", "https://"))

    def fetch(self, location: str) -> str:
        try:
            resp = httpx.get(location, follow_redirects=True, timeout=HTTP_TIMEOUT)
        except httpx.RequestError as exc:
            raise FetchError(location, 0) from exc
        if resp.status_code != 200:
            raise FetchError(location, resp.status_code)

        if "html" not in resp.headers.get("content-type", ""):
            return resp.text
        return _pre_text(resp.text, location)


def _pre_text(html: str, url: str) -> str:
    """Return the text of every ``<pre>`` block in *html*, joined by newlines."""
    soup = BeautifulSoup(html, "html.parser")
    blocks = [pre.get_text() for pre in soup.find_all("pre")]
    if not blocks:
        raise SourceError(url, "no <pre> block with chord sheet text found")
    return "\n".join(blocks)
