"""Tests for Wiktionary table extraction (no network)."""

import json

import pytest

import wiktionary_forms

CONJUGATION_HTML = """
<h2 id="Turkish">Turkish</h2>
<p>yapmak (third-person singular simple present yapar)</p>
<div class="NavFrame">
  <div class="NavHead">Conjugation of yapmak</div>
  <div class="NavContent">
    <table class="inflection-table">
      <tr><th>positive</th><th>ben</th><th>sen</th></tr>
      <tr><th>past</th><td>yaptım</td><td>yaptın</td></tr>
      <tr><th>progressive</th><td>yapıyorum / yapıyom</td><td>yapıyorsun<sup>1</sup></td></tr>
      <tr><th>future</th><td>yapacağım</td><td>yapacaksın</td></tr>
    </table>
  </div>
</div>
<table class="wikitable"><tr><td>unrelated</td></tr></table>
"""


@pytest.fixture
def empty_cache(monkeypatch):
    monkeypatch.setattr(wiktionary_forms, "HTML_CACHE", {})
    monkeypatch.setattr(wiktionary_forms, "cache_dirty", False)
    monkeypatch.setattr(wiktionary_forms, "THROTTLE_DELAY", 0)


def test_extract_forms_from_tables():
    forms = wiktionary_forms.extract_forms_from_html(CONJUGATION_HTML)
    assert {"yaptım", "yaptın", "yapıyorum", "yapıyom", "yapacağım"} <= forms
    assert "yapıyorsun" in forms
    assert "unrelated" not in forms
    assert "past" not in forms  # header cells are skipped


def test_extract_forms_empty_page():
    assert wiktionary_forms.extract_forms_from_html("") == set()
    assert wiktionary_forms.extract_forms_from_html("<p>no tables</p>") == set()


def test_normalize_form():
    assert wiktionary_forms.normalize_form("  Yapmak ") == "yapmak"
    assert wiktionary_forms.normalize_form("çok") == "çok"


def test_fetch_page_html_caches(monkeypatch, empty_cache):
    calls = []

    def fake_get(url, params):
        calls.append(params["page"])
        return {"parse": {"title": params["page"], "text": CONJUGATION_HTML}}

    monkeypatch.setattr(wiktionary_forms, "get", fake_get)
    assert wiktionary_forms.fetch_page_html("yapmak") == CONJUGATION_HTML
    assert wiktionary_forms.fetch_page_html("yapmak") == CONJUGATION_HTML
    assert calls == ["yapmak"]
    assert wiktionary_forms.cache_dirty


def test_fetch_missing_page(monkeypatch, empty_cache):
    def fake_get(url, params):
        return {"error": {"code": "missingtitle", "info": "page does not exist"}}

    monkeypatch.setattr(wiktionary_forms, "get", fake_get)
    assert wiktionary_forms.fetch_page_html("yokmak") == ""
    assert wiktionary_forms.attested_forms("yokmak") == set()
    assert wiktionary_forms.HTML_CACHE["yokmak"] == ""


def test_attested_forms(monkeypatch, empty_cache):
    monkeypatch.setattr(
        wiktionary_forms,
        "get",
        lambda url, params: {"parse": {"text": CONJUGATION_HTML}},
    )
    assert "yaptım" in wiktionary_forms.attested_forms("yapmak")


def test_disk_cache_round_trip(tmp_path, monkeypatch, empty_cache):
    path = tmp_path / "cache.json"
    wiktionary_forms.HTML_CACHE["gelmek"] = "<p>gel</p>"
    monkeypatch.setattr(wiktionary_forms, "cache_dirty", True)
    wiktionary_forms.save_disk_cache(path)
    assert json.loads(path.read_text(encoding="utf-8")) == {"gelmek": "<p>gel</p>"}
    assert not wiktionary_forms.cache_dirty

    monkeypatch.setattr(wiktionary_forms, "HTML_CACHE", {})
    wiktionary_forms.load_disk_cache(path)
    assert wiktionary_forms.HTML_CACHE == {"gelmek": "<p>gel</p>"}


def test_corrupt_disk_cache_is_reset(tmp_path, empty_cache, capsys):
    path = tmp_path / "cache.json"
    path.write_text("{not json", encoding="utf-8")
    wiktionary_forms.load_disk_cache(path)
    assert wiktionary_forms.HTML_CACHE == {}
    assert "Warning" in capsys.readouterr().out


class FakeResponse:
    def __init__(self, status_code=200, payload=None, headers=None):
        self.status_code = status_code
        self.headers = headers or {}
        self._payload = payload or {}

    def raise_for_status(self):
        pass

    def json(self):
        return self._payload


class FakeSession:
    def __init__(self, response):
        self.response = response
        self.params = []

    def get(self, url, params=None, timeout=None):
        self.params.append(params)
        return self.response


# get() without the tenacity wrapper: one attempt, no backoff
single_get = wiktionary_forms.get.__wrapped__


def test_get_sends_maxlag_and_decodes_json(monkeypatch):
    session = FakeSession(FakeResponse(payload={"parse": {"text": "<p/>"}}))
    monkeypatch.setattr(wiktionary_forms, "_SESSION", session)
    data = single_get(wiktionary_forms.WIKI_API_EN, {"page": "gelmek"})
    assert data == {"parse": {"text": "<p/>"}}
    assert session.params == [{"maxlag": "5", "page": "gelmek"}]


def test_get_rate_limited_waits_then_raises(monkeypatch):
    slept = []
    monkeypatch.setattr(wiktionary_forms.time, "sleep", slept.append)
    monkeypatch.setattr(
        wiktionary_forms,
        "_SESSION",
        FakeSession(FakeResponse(429, headers={"Retry-After": "3"})),
    )
    with pytest.raises(wiktionary_forms.Throttled):
        single_get(wiktionary_forms.WIKI_API_EN, {"page": "gelmek"})
    assert slept == [3.0]


def test_get_maxlag_error_is_throttled(monkeypatch):
    payload = {"error": {"code": "maxlag", "info": "Waiting for a database server"}}
    monkeypatch.setattr(
        wiktionary_forms, "_SESSION", FakeSession(FakeResponse(payload=payload))
    )
    with pytest.raises(wiktionary_forms.Throttled):
        single_get(wiktionary_forms.WIKI_API_EN, {"page": "gelmek"})


def test_missing_title_error_is_returned(monkeypatch):
    payload = {"error": {"code": "missingtitle"}}
    monkeypatch.setattr(
        wiktionary_forms, "_SESSION", FakeSession(FakeResponse(payload=payload))
    )
    assert single_get(wiktionary_forms.WIKI_API_EN, {"page": "x"}) == payload


@pytest.mark.parametrize(
    "headers, expected",
    [
        ({}, 2.0),
        ({"Retry-After": "1"}, 1.0),
        ({"Retry-After": "600"}, 10.0),
        ({"Retry-After": "soon"}, 2.0),
    ],
)
def test_retry_after(headers, expected):
    assert wiktionary_forms.retry_after(headers) == expected
