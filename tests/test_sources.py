from unittest.mock import MagicMock, patch

import httpx
import pytest

from sheet2songs.exceptions import FetchError, SourceError, UnsupportedSourceError
from sheet2songs.registry import get_source
from sheet2songs.sources.file import FileSource
from sheet2songs.sources.web import HttpSource

TEST_URL = "https://example.com/sheets/amazing-grace"


def _response(text: str, status_code: int = 200, content_type: str = "text/plain") -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text
    resp.headers = {"content-type": content_type}
    return resp


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


def test_registry_http_url():
    assert isinstance(get_source(TEST_URL), HttpSource)
    assert isinstance(get_source("http://example.com/x.txt"), HttpSource)


def test_registry_local_path():
    assert isinstance(get_source("sheets/amazing-grace.txt"), FileSource)


def test_registry_unsupported_scheme():
    with pytest.raises(UnsupportedSourceError):
        get_source("ftp://example.com/x.txt")


# ---------------------------------------------------------------------------
# FileSource
# ---------------------------------------------------------------------------


def test_file_read_drops_zero_length_lines(tmp_path):
    sheet = tmp_path / "sheet.txt"
    sheet.write_bytes(b"C  G\r\n\r\nHello\n   \n")
    assert FileSource().read(str(sheet)) == ["C  G", "Hello", "   "]


def test_file_read_keeps_column_alignment(tmp_path):
    sheet = tmp_path / "sheet.txt"
    sheet.write_text("    G\n\tla\n", encoding="utf-8")
    assert FileSource().read(str(sheet)) == ["    G", "\tla"]


def test_file_missing_raises_source_error(tmp_path):
    with pytest.raises(SourceError) as info:
        FileSource().read(str(tmp_path / "missing.txt"))
    assert "no such file" in str(info.value)


def test_file_directory_raises_source_error(tmp_path):
    with pytest.raises(SourceError):
        FileSource().read(str(tmp_path))


def test_file_not_utf8_raises_source_error(tmp_path):
    sheet = tmp_path / "sheet.txt"
    sheet.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(SourceError):
        FileSource().read(str(sheet))


# ---------------------------------------------------------------------------
# HttpSource
# ---------------------------------------------------------------------------


def test_http_plain_text():
    with patch("sheet2songs.sources.web.httpx.get", return_value=_response("C\nHello\n")):
        assert HttpSource().read(TEST_URL) == ["C", "Hello"]


def test_http_html_pre_blocks():
    html = (
        "<html><body><h1>Amazing Grace</h1>"
        "<pre>C       G\nAmazing grace</pre>"
        "<p>ignored</p>"
        "<pre>[Chorus]</pre>"
        "</body></html>"
    )
    resp = _response(html, content_type="text/html; charset=utf-8")
    with patch("sheet2songs.sources.web.httpx.get", return_value=resp):
        assert HttpSource().read(TEST_URL) == ["C       G", "Amazing grace", "[Chorus]"]


def test_http_html_without_pre_raises_source_error():
    resp = _response("<html><body><p>nothing</p></body></html>", content_type="text/html")
    with patch("sheet2songs.sources.web.httpx.get", return_value=resp):
        with pytest.raises(SourceError):
            HttpSource().read(TEST_URL)


def test_http_status_error():
    with patch("sheet2songs.sources.web.httpx.get", return_value=_response("", status_code=404)):
        with pytest.raises(FetchError) as info:
            HttpSource().fetch(TEST_URL)
    assert info.value.status_code == 404
    assert info.value.url == TEST_URL


def test_http_transport_error():
    with patch(
        "sheet2songs.sources.web.httpx.get",
        side_effect=httpx.ConnectError("connection refused"),
    ):
        with pytest.raises(FetchError) as info:
            HttpSource().fetch(TEST_URL)
    assert info.value.status_code == 0
