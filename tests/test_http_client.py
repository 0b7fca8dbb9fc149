"""Tests for the HTTP client and fire-and-forget dispatch."""

import logging
from concurrent.futures import Future

import pytest
import requests

from huelight.api.http_client import HttpClient
from huelight.models.light import CommandTarget, ConnectionContext, LightResource

from conftest import make_response


@pytest.fixture
def client(session):
    session.request.return_value = make_response([{"success": {}}])
    c = HttpClient("http://192.168.1.2/api/", timeout=3, session=session)
    yield c
    c.close()


@pytest.fixture
def target():
    return CommandTarget(
        context=ConnectionContext(bridge="192.168.1.2", username="abc123"),
        light_number="4",
    )


class TestRequests:
    def test_get_joins_base_url(self, client, session):
        session.request.return_value = make_response({"1": {}})

        assert client.get("abc123/lights") == {"1": {}}
        session.request.assert_called_once_with(
            "GET", "http://192.168.1.2/api/abc123/lights", json=None, headers={}, timeout=3
        )

    def test_post_to_base_url(self, client, session):
        client.post("", {"devicetype": "app"})
        args, kwargs = session.request.call_args
        assert args == ("POST", "http://192.168.1.2/api")
        assert kwargs["json"] == {"devicetype": "app"}

    def test_absolute_url_is_used_as_is(self, client, session):
        client.put("http://10.0.0.1/api/u/lights/1/state", {"on": True})
        args, _ = session.request.call_args
        assert args[1] == "http://10.0.0.1/api/u/lights/1/state"

    def test_http_error_propagates(self, client, session):
        response = make_response(None)
        response.raise_for_status.side_effect = requests.HTTPError("500")
        session.request.return_value = response

        with pytest.raises(requests.HTTPError):
            client.get("abc123/lights")

    def test_non_json_body_returns_none(self, client, session):
        response = make_response(None)
        response.json.side_effect = ValueError("no json")
        session.request.return_value = response

        assert client.get("") is None


class TestIssue:
    def test_issue_returns_future_and_puts_payload(self, client, session, target):
        future = client.issue(target, {"bri": 10})

        assert isinstance(future, Future)
        assert future.result(timeout=5) == [{"success": {}}]
        args, kwargs = session.request.call_args
        assert args == ("PUT", "http://192.168.1.2/api/abc123/lights/4/state")
        assert kwargs["json"] == {"bri": 10}

    def test_identity_target(self, client, session):
        target = CommandTarget(
            context=ConnectionContext(bridge="192.168.1.2", username="abc123"),
            light_number="4",
            resource=LightResource.IDENTITY,
        )
        client.issue(target, {"name": "Hall"}).result(timeout=5)
        args, _ = session.request.call_args
        assert args[1] == "http://192.168.1.2/api/abc123/lights/4"

    def test_commands_are_sent_in_order(self, client, session, target):
        for bri in range(5):
            client.issue(target, {"bri": bri})
        client.close()

        sent = [c.kwargs["json"] for c in session.request.call_args_list]
        assert sent == [{"bri": bri} for bri in range(5)]

    def test_failure_is_logged_not_raised(self, client, session, target, caplog):
        session.request.side_effect = requests.ConnectionError("bridge down")

        with caplog.at_level(logging.WARNING, logger="huelight.api.http_client"):
            future = client.issue(target, {"on": True})
            client.close()

        assert isinstance(future.exception(), requests.ConnectionError)
        assert "bridge down" in caplog.text
        assert "lights/4/state" in caplog.text


class TestClose:
    def test_does_not_close_borrowed_session(self, session):
        HttpClient("http://h/api", session=session).close()
        session.close.assert_not_called()

    def test_context_manager_closes_own_session(self, monkeypatch):
        closed = []
        monkeypatch.setattr(requests.Session, "close", lambda self: closed.append(self))

        with HttpClient("http://h/api") as client:
            pass

        assert closed == [client.session]
