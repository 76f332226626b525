"""Unit tests for ecx_client.client.http and ecx_client.client.errors."""

from __future__ import annotations

import json
import logging
from unittest.mock import patch

import pytest
import requests
import responses as rsps_lib

from ecx_client.client.errors import (
    EcxApiError,
    EcxParseError,
    EcxRequestError,
    EcxResponseError,
)
from ecx_client.client.http import EcxHTTP, _normalise_base_url, _parse_api_errors

BASE_URL = "http://localhost:8888"
PATH = "/ecx/v3/l2/connections/connId"


def _json(payload: object) -> str:
    return json.dumps(payload)


# ---------------------------------------------------------------------------
# errors.py
# ---------------------------------------------------------------------------

def test_request_error_wraps_cause() -> None:
    cause = ConnectionError("refused")
    err = EcxRequestError(url="http://host/path", cause=cause)
    assert "http://host/path" in str(err)
    assert err.cause is cause


def test_response_error_stores_status() -> None:
    err = EcxResponseError(status_code=404, url="http://host/path")
    assert err.status_code == 404
    assert err.errors == []
    assert str(err) == "HTTP 404 for 'http://host/path'"


def test_response_error_message_lists_api_errors() -> None:
    err = EcxResponseError(
        status_code=400,
        url="http://host/path",
        errors=[EcxApiError(code="IC-LAYER2-4021", message="already deleted", property="uuid")],
    )
    assert "[IC-LAYER2-4021] already deleted (uuid)" in str(err)


# ---------------------------------------------------------------------------
# http.py - URL normalisation
# ---------------------------------------------------------------------------

def test_normalise_base_url_strips_slash() -> None:
    assert _normalise_base_url("https://api.equinix.com/") == "https://api.equinix.com"


def test_normalise_base_url_adds_https_scheme() -> None:
    assert _normalise_base_url("api.equinix.com") == "https://api.equinix.com"


def test_normalise_base_url_preserves_http() -> None:
    assert _normalise_base_url("http://localhost:8888/") == "http://localhost:8888"


# ---------------------------------------------------------------------------
# http.py - API error body parsing
# ---------------------------------------------------------------------------

def test_parse_api_errors_list() -> None:
    errors = _parse_api_errors(
        _json([{"errorCode": "E1", "errorMessage": "bad", "property": "speed"}])
    )
    assert errors == [EcxApiError(code="E1", message="bad", property="speed")]


def test_parse_api_errors_single_object() -> None:
    errors = _parse_api_errors(_json({"errorCode": "E2", "errorMessage": "nope"}))
    assert errors == [EcxApiError(code="E2", message="nope")]


def test_parse_api_errors_ignores_unrelated_bodies() -> None:
    assert _parse_api_errors("<html>Bad Gateway</html>") == []
    assert _parse_api_errors(_json({"message": "oops"})) == []
    assert _parse_api_errors(_json("text")) == []


# ---------------------------------------------------------------------------
# http.py - EcxHTTP
# ---------------------------------------------------------------------------

@rsps_lib.activate
def test_get_json_success() -> None:
    rsps_lib.add(rsps_lib.GET, f"{BASE_URL}{PATH}", json={"uuid": "connId"}, status=200)
    with EcxHTTP(BASE_URL) as http:
        assert http.get_json(PATH) == {"uuid": "connId"}


@rsps_lib.activate
def test_default_headers_sent() -> None:
    rsps_lib.add(rsps_lib.GET, f"{BASE_URL}{PATH}", json={}, status=200)
    with EcxHTTP(BASE_URL) as http:
        http.get_json(PATH)
    headers = rsps_lib.calls[0].request.headers
    assert headers["User-Agent"].startswith("ecx-l2-client/")
    assert headers["Accept"] == "application/json"
    assert "Authorization" not in headers


@rsps_lib.activate
def test_bearer_token_attached() -> None:
    rsps_lib.add(rsps_lib.GET, f"{BASE_URL}{PATH}", json={}, status=200)
    with EcxHTTP(BASE_URL, token="s3cr3t") as http:
        http.get_json(PATH)
    assert rsps_lib.calls[0].request.headers["Authorization"] == "Bearer s3cr3t"


@rsps_lib.activate
def test_post_json_sends_json_body() -> None:
    rsps_lib.add(
        rsps_lib.POST,
        f"{BASE_URL}/ecx/v3/l2/connections",
        json={"primaryConnectionId": "abc"},
        status=200,
    )
    with EcxHTTP(BASE_URL) as http:
        result = http.post_json("/ecx/v3/l2/connections", {"primaryName": "name"})

    req = rsps_lib.calls[0].request
    assert req.headers["Content-Type"] == "application/json"
    assert json.loads(req.body) == {"primaryName": "name"}
    assert result == {"primaryConnectionId": "abc"}


@rsps_lib.activate
def test_get_and_delete_send_no_content_type() -> None:
    rsps_lib.add(rsps_lib.GET, f"{BASE_URL}{PATH}", json={}, status=200)
    rsps_lib.add(rsps_lib.DELETE, f"{BASE_URL}{PATH}", body="", status=204)
    with EcxHTTP(BASE_URL) as http:
        http.get_json(PATH)
        http.delete(PATH)
    assert "Content-Type" not in rsps_lib.calls[0].request.headers
    assert "Content-Type" not in rsps_lib.calls[1].request.headers


@rsps_lib.activate
def test_authorization_key_masked_in_debug_log(caplog: pytest.LogCaptureFixture) -> None:
    rsps_lib.add(
        rsps_lib.POST,
        f"{BASE_URL}/ecx/v3/l2/connections",
        json={"primaryConnectionId": "abc"},
        status=200,
    )
    payload = {"primaryName": "name", "authorizationKey": "seller-secret"}
    with caplog.at_level(logging.DEBUG, logger="ecx_client.client.http"):
        with EcxHTTP(BASE_URL) as http:
            http.post_json("/ecx/v3/l2/connections", payload)

    assert "seller-secret" not in caplog.text
    assert "'authorizationKey': '***'" in caplog.text
    assert json.loads(rsps_lib.calls[0].request.body)["authorizationKey"] == "seller-secret"
    assert payload["authorizationKey"] == "seller-secret"


@rsps_lib.activate
def test_non2xx_raises_response_error_with_api_errors() -> None:
    rsps_lib.add(
        rsps_lib.GET,
        f"{BASE_URL}{PATH}",
        body=_json([{"errorCode": "IC-LAYER2-4021", "errorMessage": "gone"}]),
        status=400,
    )
    with EcxHTTP(BASE_URL) as http:
        with pytest.raises(EcxResponseError) as exc_info:
            http.get_json(PATH)
    assert exc_info.value.status_code == 400
    assert exc_info.value.errors[0].code == "IC-LAYER2-4021"


@rsps_lib.activate
def test_connection_error_raises_request_error() -> None:
    rsps_lib.add(
        rsps_lib.GET,
        f"{BASE_URL}{PATH}",
        body=requests.exceptions.ConnectionError("refused"),
    )
    with EcxHTTP(BASE_URL) as http:
        with pytest.raises(EcxRequestError) as exc_info:
            http.get_json(PATH)
    assert isinstance(exc_info.value.cause, requests.exceptions.ConnectionError)


@rsps_lib.activate
def test_malformed_json_raises_parse_error() -> None:
    rsps_lib.add(rsps_lib.GET, f"{BASE_URL}{PATH}", body="{not json", status=200)
    with EcxHTTP(BASE_URL) as http:
        with pytest.raises(EcxParseError):
            http.get_json(PATH)


@rsps_lib.activate
def test_json_array_raises_parse_error() -> None:
    rsps_lib.add(rsps_lib.GET, f"{BASE_URL}{PATH}", json=[1, 2], status=200)
    with EcxHTTP(BASE_URL) as http:
        with pytest.raises(EcxParseError):
            http.get_json(PATH)


@rsps_lib.activate
def test_delete_empty_body_returns_none() -> None:
    rsps_lib.add(rsps_lib.DELETE, f"{BASE_URL}{PATH}", body="", status=204)
    with EcxHTTP(BASE_URL) as http:
        assert http.delete(PATH) is None


@rsps_lib.activate
def test_delete_json_body_returned() -> None:
    rsps_lib.add(rsps_lib.DELETE, f"{BASE_URL}{PATH}", json={"message": "ok"}, status=200)
    with EcxHTTP(BASE_URL) as http:
        assert http.delete(PATH) == {"message": "ok"}


def test_injected_session_not_closed() -> None:
    session = requests.Session()
    with patch.object(session, "close") as close:
        EcxHTTP(BASE_URL, session=session).close()
    close.assert_not_called()


def test_owned_session_closed() -> None:
    http = EcxHTTP(BASE_URL)
    with patch.object(http._session, "close") as close:
        http.close()
    close.assert_called_once()
