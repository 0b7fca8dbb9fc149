"""Pytest configuration and fixtures for huelight tests."""

from typing import Any, Mapping
from unittest.mock import MagicMock

import pytest

from huelight.models.light import CommandTarget, ConnectionContext, LightIdentity, LightState
from huelight.services.light_service import Light


class RecordingTransport:
    """Transport double that records every issued command."""

    def __init__(self):
        self.calls: list[tuple[CommandTarget, dict[str, Any]]] = []

    def issue(self, target: CommandTarget, payload: Mapping[str, Any]) -> str:
        self.calls.append((target, dict(payload)))
        return f"dispatch-{len(self.calls)}"

    @property
    def payloads(self) -> list[dict[str, Any]]:
        return [payload for _, payload in self.calls]


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def context() -> ConnectionContext:
    return ConnectionContext(bridge="192.168.1.2", username="abc123")


@pytest.fixture
def make_light(transport, context):
    """Factory for lights wired to the recording transport."""

    def _make(on: bool = True, number: str = "1", name: str = "Kitchen1") -> Light:
        return Light(LightIdentity(number=number, name=name), LightState(on=on), context, transport)

    return _make


@pytest.fixture
def light_on(make_light) -> Light:
    return make_light(on=True)


@pytest.fixture
def light_off(make_light) -> Light:
    return make_light(on=False)


def make_response(data: Any) -> MagicMock:
    response = MagicMock()
    response.json.return_value = data
    response.raise_for_status.return_value = None
    return response


@pytest.fixture
def session() -> MagicMock:
    """A requests.Session stand-in; set ``request``/``get`` return values per test."""
    return MagicMock()


LIGHTS = {
    "1": {"name": "Kitchen1", "state": {"on": True, "bri": 200, "hue": 1000, "sat": 100,
                                        "xy": [0.3, 0.3], "reachable": True, "mode": "homeautomation"}},
    "2": {"name": "Kitchen2", "state": {"on": False, "bri": 10}},
    "3": {"name": "Bedroom", "state": {"on": True}},
}

GROUPS = {
    "1": {"name": "Kitchen", "lights": ["1", "2"], "type": "Room"},
    "2": {"name": "Upstairs", "lights": ["3"], "type": "Zone"},
}
