from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class LightIdentity(BaseModel):
    model_config = ConfigDict(frozen=True)

    number: str  # assigned by the bridge, e.g. "3"
    name: str


class LightState(BaseModel):
    """Last known state of a light as reported by the bridge.

    Only ``on`` is kept in sync by commands; the other fields are whatever
    the bridge returned when the light was enumerated.
    """
    model_config = ConfigDict(extra="allow")

    on: bool
    bri: Optional[int] = None
    hue: Optional[int] = None
    sat: Optional[int] = None
    ct: Optional[int] = None
    xy: Optional[list[float]] = None
    effect: Optional[str] = None
    alert: Optional[str] = None
    colormode: Optional[str] = None
    reachable: Optional[bool] = None


class ConnectionContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    bridge: str
    username: str


class LightResource(str, Enum):
    STATE = "state"
    IDENTITY = "identity"


class CommandTarget(BaseModel):
    model_config = ConfigDict(frozen=True)

    context: ConnectionContext
    light_number: str
    resource: LightResource = LightResource.STATE

    @property
    def path(self) -> str:
        if self.resource is LightResource.STATE:
            return f"lights/{self.light_number}/state"
        return f"lights/{self.light_number}"

    @property
    def url(self) -> str:
        return f"http://{self.context.bridge}/api/{self.context.username}/{self.path}"
