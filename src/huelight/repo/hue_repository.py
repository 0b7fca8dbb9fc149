import logging
import re
from typing import Any, Optional, Union

import requests
from pydantic import BaseModel, Field

from huelight.api.http_client import HttpClient
from huelight.config import DISCOVERY_URL, HueSettings
from huelight.errors import BridgeError, BridgeNotSelectedError, InvalidBridgeAddressError
from huelight.models.light import ConnectionContext
from huelight.services.light_service import Light, light_from_bridge

logger = logging.getLogger(__name__)

_IPV4 = re.compile(r"\b([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})\b")


class DiscoveredBridge(BaseModel):
    id: str
    internalipaddress: str
    port: Optional[int] = Field(None, ge=0)


def _raise_for_bridge_error(data: Any) -> None:
    # the bridge answers errors with HTTP 200 and a list of {"error": {...}}
    if isinstance(data, list):
        for entry in data:
            if isinstance(entry, dict) and "error" in entry:
                raise BridgeError.from_response(entry["error"])


class HueRepository:
    """Selects a bridge and user and enumerates its lights and groups."""

    def __init__(self, bridge: Optional[str] = None, username: Optional[str] = None, *,
                 timeout: float = 5, discovery_url: str = DISCOVERY_URL,
                 session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.discovery_url = discovery_url
        self.session = session or requests.Session()
        self.selected_bridge: Optional[str] = None
        self.selected_user: Optional[str] = None
        self._client: Optional[HttpClient] = None
        if bridge:
            self.set_bridge(bridge)
        if username:
            self.set_user(username)

    @classmethod
    def from_settings(cls, settings: Optional[HueSettings] = None, **kwargs: Any) -> "HueRepository":
        settings = settings or HueSettings.from_env()
        return cls(settings.bridge_ip, settings.username, timeout=settings.timeout,
                   discovery_url=settings.discovery_url, **kwargs)

    # ---- bridge / user selection
    def find_bridges(self) -> list[DiscoveredBridge]:
        r = self.session.get(self.discovery_url, timeout=self.timeout)
        r.raise_for_status()
        return [DiscoveredBridge.model_validate(b) for b in r.json()]

    def set_bridge(self, bridge_ip: str) -> "HueRepository":
        if not isinstance(bridge_ip, str) or not _IPV4.search(bridge_ip):
            raise InvalidBridgeAddressError(bridge_ip)
        if self._client is not None:
            self._client.close()
        self.selected_bridge = bridge_ip
        self._client = HttpClient(f"http://{bridge_ip}/api", timeout=self.timeout, session=self.session)
        logger.info("Selected bridge %s", bridge_ip)
        return self

    def create_user(self, device_name: str) -> str:
        """Register a new API user; the bridge's link button must be pressed first."""
        if self._client is None:
            raise BridgeNotSelectedError("You must select a bridge to connect to, before setting a user.")
        if not device_name:
            raise ValueError("You must specify a device name.")
        data = self._client.post("", {"devicetype": device_name})
        _raise_for_bridge_error(data)
        username = data[0]["success"]["username"]
        logger.info("Created user for %s on bridge %s", device_name, self.selected_bridge)
        return username

    def set_user(self, username: str) -> "HueRepository":
        self.selected_user = username
        return self

    def _verify(self) -> None:
        if self.selected_bridge is None or self.selected_user is None:
            raise BridgeNotSelectedError("You need to select both a bridge and username to use this method.")

    @property
    def context(self) -> ConnectionContext:
        self._verify()
        return ConnectionContext(bridge=self.selected_bridge, username=self.selected_user)

    @property
    def client(self) -> HttpClient:
        self._verify()
        return self._client

    def _get(self, resource: str) -> dict[str, Any]:
        data = self.client.get(f"{self.selected_user}/{resource}")
        _raise_for_bridge_error(data)
        return data or {}

    # ---- lights
    def get_all_lights_raw(self) -> dict[str, Any]:
        """The bridge's ``/lights`` listing as-is, keyed by light number."""
        return self._get("lights")

    def get_all_lights(self) -> list[Light]:
        context = self.context
        return [
            light_from_bridge(number, data, context, self.client)
            for number, data in self.get_all_lights_raw().items()
        ]

    def get_lights_by_name(self, name: Union[str, re.Pattern]) -> list[Light]:
        """Lights named exactly ``name``, or matching it when it is a compiled pattern."""
        if isinstance(name, re.Pattern):
            return [light for light in self.get_all_lights() if name.search(light.name)]
        if isinstance(name, str):
            return [light for light in self.get_all_lights() if light.name == name]
        return []

    # ---- groups
    def get_all_groups_raw(self) -> dict[str, Any]:
        return self._get("groups")

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
        self.session.close()
