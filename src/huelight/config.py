import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

DISCOVERY_URL = "https://discovery.meethue.com/"


class HueSettings(BaseModel):
    bridge_ip: Optional[str] = None
    username: Optional[str] = None
    timeout: float = Field(5.0, gt=0)
    discovery_url: str = DISCOVERY_URL

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "HueSettings":
        """Read HUE_BRIDGE_IP, HUE_USERNAME and HUE_TIMEOUT, loading a ``.env`` file first."""
        load_dotenv(dotenv_path or find_dotenv(usecwd=True))
        values = {
            "bridge_ip": os.getenv("HUE_BRIDGE_IP") or None,
            "username": os.getenv("HUE_USERNAME") or None,
        }
        timeout = os.getenv("HUE_TIMEOUT")
        if timeout:
            values["timeout"] = timeout
        return cls(**values)
