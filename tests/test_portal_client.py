"""Tests for portal retrieval with a mocked requests layer."""

from __future__ import annotations

import pytest
import requests
from portal_pages import listing_page, ministries_page, ministry_page

from retsinfo_parser.config import PortalConfig
from retsinfo_parser.errors import FetchError, PageStructureError
from retsinfo_parser.portal import client as client_module
from retsinfo_parser.portal.client import PortalClient


class _FakeResponse:
    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")


class _Recorder:
    """Serves listing pages by page number and records every request."""

    def __init__(self, pages: dict[int, str]):
        self.pages = pages
        self.calls: list[tuple[str, dict]] = []

    def __call__(self, url: str, params=None, timeout=None, headers=None) -> _FakeResponse:
        self.calls.append((url, dict(params or {})))
        return _FakeResponse(self.pages.get((params or {}).get("page", 1), listing_page([])))


def _rows(start: int, count: int) -> list[tuple[int, str, str]]:
    return [(start + n, f"Dokument {start + n}", "01-02-2003") for n in range(count)]


def _client(page_size: int = 3) -> PortalClient:
    return PortalClient(PortalConfig(base_url="https://portal.test/", page_size=page_size))


def test_fetch_page_passes_query_timeout_and_user_agent(monkeypatch) -> None:
    seen: dict = {}

    def _fake_get(url, params=None, timeout=None, headers=None):
        seen.update(url=url, params=params, timeout=timeout, headers=headers)
        return _FakeResponse("<html></html>")

    monkeypatch.setattr(client_module.requests, "get", _fake_get)

    html = PortalClient(PortalConfig(base_url="https://portal.test", timeout=5.0, user_agent="ua/1")).fetch_page(
        "R0710.aspx", {"id": 164746}
    )

    assert html == "<html></html>"
    assert seen["url"] == "https://portal.test/Forms/R0710.aspx"
    assert seen["params"] == {"id": 164746}
    assert seen["timeout"] == 5.0
    assert seen["headers"] == {"User-Agent": "ua/1"}


def test_fetch_page_wraps_http_errors(monkeypatch) -> None:
    monkeypatch.setattr(client_module.requests, "get", lambda *_args, **_kwargs: _FakeResponse("", 503))

    with pytest.raises(FetchError, match="503"):
        _client().fetch_page("R0300.aspx")


def test_fetch_page_wraps_connection_errors(monkeypatch) -> None:
    def _raise(*_args, **_kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(client_module.requests, "get", _raise)

    with pytest.raises(FetchError, match="connection refused"):
        _client().fetch_page("R0300.aspx")


def test_list_ministries(monkeypatch) -> None:
    monkeypatch.setattr(
        client_module.requests,
        "get",
        lambda *_args, **_kwargs: _FakeResponse(ministries_page([("11", "Justitsministeriet")])),
    )

    (ministry,) = _client().list_ministries()

    assert ministry.id == "11"
    assert ministry.name == "Justitsministeriet"


def test_get_ministry_info_sends_res_argument(monkeypatch) -> None:
    recorder = _Recorder({1: ministry_page("Justitsministeriet", [(10, "Love", 3)])})
    monkeypatch.setattr(client_module.requests, "get", recorder)

    info = _client().get_ministry_info(11)

    assert info.document_types[10].count == 3
    assert recorder.calls == [("https://portal.test/Forms/R0310.aspx", {"res": 11})]


def test_get_ministry_info_rejects_unknown_ministry(monkeypatch) -> None:
    monkeypatch.setattr(client_module.requests, "get", lambda *_args, **_kwargs: _FakeResponse(ministry_page("", [])))

    with pytest.raises(PageStructureError, match="Invalid ministry ID 4242"):
        _client().get_ministry_info(4242)


def test_list_ministry_documents_follows_pages_until_short_page(monkeypatch) -> None:
    recorder = _Recorder({1: listing_page(_rows(1, 3)), 2: listing_page(_rows(4, 3)), 3: listing_page(_rows(7, 1))})
    monkeypatch.setattr(client_module.requests, "get", recorder)

    documents = _client().list_ministry_documents(11, 2)

    assert [d.id for d in documents] == list(range(1, 8))
    assert [params["page"] for _url, params in recorder.calls] == [1, 2, 3]
    assert recorder.calls[0][1] == {"res": 11, "nres": 2, "page": 1}


def test_list_ministry_documents_stops_at_limit(monkeypatch) -> None:
    recorder = _Recorder({1: listing_page(_rows(1, 3)), 2: listing_page(_rows(4, 3))})
    monkeypatch.setattr(client_module.requests, "get", recorder)

    documents = _client().list_ministry_documents(11, 2, limit=4)

    assert [d.id for d in documents] == [1, 2, 3, 4]
    assert len(recorder.calls) == 2


def test_list_ministry_documents_applies_offset_across_pages(monkeypatch) -> None:
    recorder = _Recorder({1: listing_page(_rows(1, 3)), 2: listing_page(_rows(4, 3)), 3: listing_page([])})
    monkeypatch.setattr(client_module.requests, "get", recorder)

    documents = _client().list_ministry_documents(11, 2, limit=2, offset=4)

    assert [d.id for d in documents] == [5, 6]


def test_list_ministry_documents_rejects_negative_offset() -> None:
    with pytest.raises(ValueError):
        _client().list_ministry_documents(11, 2, offset=-1)


def test_get_document_html_requests_document_form(monkeypatch) -> None:
    recorder = _Recorder({})
    monkeypatch.setattr(client_module.requests, "get", recorder)

    _client().get_document_html(164746)

    assert recorder.calls == [("https://portal.test/Forms/R0710.aspx", {"id": 164746})]
