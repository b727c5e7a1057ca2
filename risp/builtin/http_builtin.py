"""HTTP retrieval native.

(httpget url) -> (status url headers) or (status url headers document)

headers is a list of (name value) string pairs. When the response declares a
JSON content type the decoded body is appended as a Document. The call blocks
the interpreter for the duration of the request.
"""

from __future__ import annotations

import logging

import requests

from risp import RispValue
from risp.builtin.json_builtin import loads
from risp.config import get_http_timeout, get_test_url
from risp.errors import RispArityError, RispError
from risp.printer import lisp_value
from risp.types.document import Document

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
TEST_URL_ALIAS = "test"


def _header_list(response: requests.Response) -> list[list[str]]:
    return [[name, value] for name, value in response.headers.items()]


def _json_body(response: requests.Response) -> Document | None:
    content_type = response.headers.get("content-type", "")
    if not content_type.startswith(JSON_CONTENT_TYPE):
        return None
    response.encoding = response.encoding or "utf-8"
    return loads(response.text)


def httpget(args: list[RispValue]) -> list[RispValue]:
    if not args:
        raise RispArityError("pass a url")
    url = lisp_value(args[0])
    if url == TEST_URL_ALIAS:
        url = get_test_url()

    logger.info("GET %s", url)
    try:
        response = requests.get(url, timeout=get_http_timeout())
    except requests.RequestException as e:
        raise RispError(str(e)) from e
    logger.debug("GET %s -> %d", response.url, response.status_code)

    result: list[RispValue] = [
        float(response.status_code),
        response.url,
        _header_list(response),
    ]
    document = _json_body(response)
    if document is not None:
        result.append(document)
    return result
