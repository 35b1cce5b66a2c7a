"""Unit tests for request building on endpoints."""

import json

import pytest

from grest import Request, RequestSpec


def test_endpoint_url(api):
    """Test the endpoint URL is base + name + slash."""
    assert api.users.url == "https://api.net/users/"
    assert api.authLogin.url == "https://api.net/auth/login/"


def test_login_scenario(api, recorder):
    """Test a login POST through a camelCase accessor."""
    body = {"email": "ann@api.net", "pass": "secret"}

    request = api.authLogin.post(body)

    assert request.config.method == "post"
    assert request.config.url == "https://api.net/auth/login/"
    assert request.config.data == body
    assert request.config.params is None

    sent = recorder.last
    assert sent.method == "POST"
    assert str(sent.url) == "https://api.net/auth/login/"
    assert sent.url.query == b""
    assert json.loads(sent.content) == body


def test_requested_with_is_always_set(api):
    """Test X-Requested-With overrides caller input."""
    spec = api.users.build_spec("get", headers={"X-Requested-With": "curl"})

    assert spec.headers["X-Requested-With"] == "XMLHttpRequest"


def test_global_headers_are_merged(api):
    """Test call headers win over global headers per key."""
    api.headers({"Accept-Language": "en", "X-Tenant": "acme"})

    spec = api.users.build_spec("get", headers={"X-Tenant": "other"})

    assert spec.headers == {
        "Accept-Language": "en",
        "X-Tenant": "other",
        "X-Requested-With": "XMLHttpRequest",
    }
    assert api.headers() == {"Accept-Language": "en", "X-Tenant": "acme"}


def test_removed_header_is_not_sent(api, recorder):
    """Test headers({"K": None}) after headers({"K": "v"}) stops sending K."""
    api.headers({"K": "v"})
    api.users.get()
    assert recorder.last.headers["K"] == "v"

    api.headers({"K": None})
    api.users.get()
    assert "K" not in recorder.last.headers


def test_authorization_is_injected(api, recorder):
    """Test the client authorization becomes the Authorization header."""
    api.authorization = "Bearer X"

    request = api.users.get()

    assert request.config.headers["Authorization"] == "Bearer X"
    assert recorder.last.headers["Authorization"] == "Bearer X"


def test_explicit_authorization_wins_for_one_call(api):
    """Test a call-level Authorization header beats the client field once."""
    api.authorization = "Bearer X"

    explicit = api.users.build_spec("get", headers={"Authorization": "Basic Y"})
    following = api.users.build_spec("get")

    assert explicit.headers["Authorization"] == "Basic Y"
    assert following.headers["Authorization"] == "Bearer X"


def test_explicit_authorization_any_case(api):
    """Test the Authorization check ignores header case."""
    api.authorization = "Bearer X"

    spec = api.users.build_spec("get", headers={"authorization": "Basic Y"})

    assert spec.headers["authorization"] == "Basic Y"
    assert "Authorization" not in spec.headers


def test_global_authorization_header_wins_over_field(api):
    """Test an Authorization set through headers() is kept."""
    api.authorization = "Bearer X"
    api.headers({"Authorization": "Basic Z"})

    assert api.users.build_spec("get").headers["Authorization"] == "Basic Z"

    api.headers({"Authorization": None})

    assert api.users.build_spec("get").headers["Authorization"] == "Bearer X"


def test_no_authorization_by_default(api):
    """Test nothing is sent when authorization is unset."""
    assert "Authorization" not in api.users.build_spec("get").headers


def test_query_mapping_becomes_params(api, recorder):
    """Test a mapping query is sent as query parameters."""
    request = api.users.get({"foo": "bar"})

    assert request.config.url == "https://api.net/users/"
    assert request.config.params == {"foo": "bar"}
    assert recorder.last.url.params["foo"] == "bar"


def test_query_string_is_appended(api, recorder):
    """Test a string query is appended verbatim to the URL."""
    request = api.users.get("?foo=bar")

    assert request.config.url == "https://api.net/users/?foo=bar"
    assert request.config.params is None
    assert recorder.last.url.params["foo"] == "bar"


def test_mapping_and_string_target_same_resource(api, recorder):
    """Test both query styles hit the same path with foo=bar."""
    api.users.get({"foo": "bar"})
    api.users.get("?foo=bar")

    first, second = recorder.requests
    assert first.url == second.url
    assert first.url.path == "/users/"


def test_resource_id_is_appended(api, recorder):
    """Test ids are appended as path suffixes."""
    api.users.get(42)
    api.users.delete("7")

    assert str(recorder.requests[0].url) == "https://api.net/users/42"
    assert recorder.requests[1].method == "DELETE"
    assert str(recorder.requests[1].url) == "https://api.net/users/7"


def test_empty_query_is_present(api):
    """Test an empty mapping differs from no query."""
    assert api.users.build_spec("get", {}).params == {}
    assert api.users.build_spec("get").params is None


def test_put_with_query_and_body(api, recorder):
    """Test put() with an explicit id and a body."""
    request = api.users.put({"name": "Bob"}, query=42)

    assert request.config.method == "put"
    assert request.config.url == "https://api.net/users/42"
    assert json.loads(recorder.last.content) == {"name": "Bob"}


def test_post_with_query_mapping(api, recorder):
    """Test post() with query parameters and a body."""
    api.supportTickets.post({"subject": "Help"}, query={"notify": "yes"})

    assert str(recorder.last.url) == "https://api.net/support-tickets/?notify=yes"


def test_raw_body_is_sent_as_content(api, recorder):
    """Test str bodies are not JSON encoded."""
    api.users.post("name=Ann", query="?form=1")

    assert recorder.last.content == b"name=Ann"


def test_http_custom_method(api, recorder):
    """Test http() sends any method."""
    request = api.users.http("patch", 42, data={"name": "Ann"}, timeout=5)

    assert isinstance(request, Request)
    assert request.config.timeout == 5
    assert recorder.last.method == "PATCH"
    assert str(recorder.last.url) == "https://api.net/users/42"


def test_spec_is_captured_by_value(api, recorder):
    """Test later client changes never reach an existing request."""
    api.headers({"X-Version": "1"})
    api.authorization = "Bearer old"
    request = api.users.get()

    api.headers({"X-Version": "2"})
    api.authorization = "Bearer new"
    request.again()

    assert recorder.calls == 2
    assert recorder.last.headers["X-Version"] == "1"
    assert recorder.last.headers["Authorization"] == "Bearer old"
    assert api.users.get().config.headers["X-Version"] == "2"


def test_spec_is_frozen(api):
    """Test request specs cannot be reassigned."""
    spec = api.users.build_spec("get")

    assert isinstance(spec, RequestSpec)
    with pytest.raises(AttributeError):
        spec.url = "https://elsewhere.net/"
