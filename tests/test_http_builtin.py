import pytest
import requests

from risp.builtin import http_builtin
from risp.errors import RispArityError, RispError
from risp.types.document import Document


def make_response(url, status=200, body=b"", headers=None):
    response = requests.Response()
    response.status_code = status
    response.url = url
    response._content = body
    response.headers.update(headers or {})
    return response


@pytest.fixture
def fake_get(monkeypatch):
    """Replace requests.get; records (url, timeout) of each call."""
    calls = []
    responses = {}

    def get(url, timeout=None):
        calls.append((url, timeout))
        if url not in responses:
            raise requests.ConnectionError(f"cannot reach {url}")
        return responses[url]

    monkeypatch.setattr(http_builtin.requests, "get", get)
    get.calls = calls
    get.responses = responses
    return get


def test_json_response_includes_document(interp, fake_get):
    url = "http://example.test/posts/1"
    fake_get.responses[url] = make_response(
        url, body=b'{"id": 1, "title": "hello"}', headers={"Content-Type": "application/json; charset=utf-8"}
    )
    status, final_url, headers, doc = interp.eval(f'(httpget "{url}")')
    assert status == 200.0
    assert final_url == url
    assert ["Content-Type", "application/json; charset=utf-8"] in headers
    assert doc == Document({"id": 1, "title": "hello"})


def test_json_document_is_usable_from_lisp(interp, fake_get):
    url = "http://example.test/posts/1"
    fake_get.responses[url] = make_response(url, body=b'{"title": "hello"}', headers={"content-type": "application/json"})
    interp.eval(f'(def resp (httpget "{url}"))')
    assert interp.eval('(json-get (car (cdr (cdr (cdr resp)))) "title")') == "hello"


def test_non_json_response_has_three_elements(interp, fake_get):
    url = "http://example.test/"
    fake_get.responses[url] = make_response(url, status=404, body=b"<html/>", headers={"Content-Type": "text/html"})
    result = interp.eval(f'(httpget "{url}")')
    assert result == [404.0, url, [["Content-Type", "text/html"]]]


def test_response_without_headers(fake_get):
    url = "http://example.test/empty"
    fake_get.responses[url] = make_response(url, status=204)
    assert http_builtin.httpget([url]) == [204.0, url, []]


def test_test_alias_uses_configured_url(interp, fake_get, monkeypatch):
    monkeypatch.setenv("RISP_TEST_URL", "http://example.test/alias")
    fake_get.responses["http://example.test/alias"] = make_response("http://example.test/alias")
    interp.eval('(httpget "test")')
    assert fake_get.calls[0][0] == "http://example.test/alias"


def test_test_alias_default(fake_get):
    default = "https://jsonplaceholder.typicode.com/posts/1"
    fake_get.responses[default] = make_response(default)
    http_builtin.httpget(["test"])
    assert fake_get.calls == [(default, 10.0)]


def test_symbol_url_is_taken_by_name(interp, fake_get):
    # :kw evaluates to itself and its name is used as the url
    with pytest.raises(RispError, match="cannot reach :kw"):
        interp.eval("(httpget :kw)")


def test_timeout_comes_from_config(fake_get, monkeypatch):
    monkeypatch.setenv("RISP_HTTP_TIMEOUT", "2.5")
    url = "http://example.test/"
    fake_get.responses[url] = make_response(url)
    http_builtin.httpget([url])
    assert fake_get.calls == [(url, 2.5)]


def test_transport_errors_become_risp_errors(interp, fake_get):
    with pytest.raises(RispError, match="cannot reach http://nowhere.test/"):
        interp.eval('(httpget "http://nowhere.test/")')


def test_invalid_json_body_is_an_error(fake_get):
    url = "http://example.test/bad"
    fake_get.responses[url] = make_response(url, body=b"{nope", headers={"Content-Type": "application/json"})
    with pytest.raises(RispError, match="invalid json"):
        http_builtin.httpget([url])


def test_url_is_required():
    with pytest.raises(RispArityError, match="pass a url"):
        http_builtin.httpget([])
