import logging
from typing import Any

from huelight.api.transport import Transport
from huelight.commands.base import (
    AlertCommand,
    BrightnessCommand,
    BrightnessIncrementCommand,
    ColorTemperatureCommand,
    ColorTemperatureIncrementCommand,
    Command,
    EffectCommand,
    HueCommand,
    HueIncrementCommand,
    OnCommand,
    RenameCommand,
    SaturationCommand,
    SaturationIncrementCommand,
    TransitionTimeCommand,
    XYCommand,
    build_payload,
)
from huelight.errors import PreconditionError
from huelight.models.light import (
    CommandTarget,
    ConnectionContext,
    LightIdentity,
    LightResource,
    LightState,
)
from huelight.utils.color import rgb_to_xy

logger = logging.getLogger(__name__)


class Light:
    """One light on a bridge.

    Every command returns the light itself so calls can be chained::

        light.turn_on().set_color_rgb(100, 123, 255).set_brightness(100)

    Arguments are checked before anything is sent. ``state.on`` mirrors the
    last power command that was issued, it is never read back.
    """

    def __init__(self, identity: LightIdentity, state: LightState,
                 context: ConnectionContext, transport: Transport):
        self._identity = identity
        self._state = state
        self._context = context
        self._transport = transport
        self.last_dispatch: Any = None

    def __repr__(self) -> str:
        return f"Light(number={self.number!r}, name={self.name!r}, on={self.is_on})"

    @property
    def identity(self) -> LightIdentity:
        return self._identity

    @property
    def name(self) -> str:
        return self._identity.name

    @property
    def number(self) -> str:
        return self._identity.number

    @property
    def state(self) -> LightState:
        return self._state

    @property
    def context(self) -> ConnectionContext:
        return self._context

    @property
    def is_on(self) -> bool:
        return self._state.on

    # ---- internals
    def _require_on(self) -> None:
        if not self.is_on:
            raise PreconditionError()

    def _issue(self, payload: dict[str, Any], resource: LightResource = LightResource.STATE) -> None:
        target = CommandTarget(context=self._context, light_number=self.number, resource=resource)
        logger.debug("Light %s (%s): %s", self.number, self.name, payload)
        self.last_dispatch = self._transport.issue(target, payload)

    def _send(self, command_cls: type[Command], *, gated: bool = True, **values: Any) -> "Light":
        if gated:
            self._require_on()
        self._issue(build_payload(command_cls, **values))
        return self

    # ---- identity
    def rename(self, name: str) -> "Light":
        self._issue(build_payload(RenameCommand, name=name), LightResource.IDENTITY)
        return self

    # ---- power
    def turn_on(self) -> "Light":
        self._issue(build_payload(OnCommand, on=True))
        self._state.on = True
        return self

    def turn_off(self) -> "Light":
        self._issue(build_payload(OnCommand, on=False))
        self._state.on = False
        return self

    # ---- alerts and effects
    def blink(self) -> "Light":
        """Blink once."""
        return self._send(AlertCommand, gated=False, alert="select")

    def blink_long(self) -> "Light":
        """Blink for 15 seconds."""
        return self._send(AlertCommand, gated=False, alert="lselect")

    def start_color_loop(self) -> "Light":
        """Cycle through all hues at the current brightness and saturation."""
        return self._send(EffectCommand, effect="colorloop")

    def stop_color_loop(self) -> "Light":
        return self._send(EffectCommand, effect="none")

    def set_transition_time(self, transition_time: int) -> "Light":
        """Set the transition time in multiples of 100ms (10 = 1 second)."""
        return self._send(TransitionTimeCommand, gated=False, transitiontime=transition_time)

    # ---- colour
    def set_color_xy(self, x: float, y: float) -> "Light":
        return self._send(XYCommand, xy=[x, y])

    def set_color_rgb(self, red: float, green: float, blue: float) -> "Light":
        """Set the colour from 0-255 RGB values, converted to xy."""
        self._require_on()
        return self.set_color_xy(*rgb_to_xy(red, green, blue))

    # ---- absolute settings
    def set_brightness(self, brightness: int) -> "Light":
        return self._send(BrightnessCommand, bri=brightness)

    def set_hue(self, hue: int) -> "Light":
        return self._send(HueCommand, hue=hue)

    def set_saturation(self, saturation: int) -> "Light":
        return self._send(SaturationCommand, sat=saturation)

    def set_color_temperature(self, ct: int) -> "Light":
        return self._send(ColorTemperatureCommand, ct=ct)

    # ---- relative settings, negative values decrease
    def increment_brightness(self, change: int) -> "Light":
        return self._send(BrightnessIncrementCommand, bri_inc=change)

    def increment_hue(self, change: int) -> "Light":
        return self._send(HueIncrementCommand, hue_inc=change)

    def increment_saturation(self, change: int) -> "Light":
        return self._send(SaturationIncrementCommand, sat_inc=change)

    def increment_color_temperature(self, change: int) -> "Light":
        return self._send(ColorTemperatureIncrementCommand, ct_inc=change)


def light_from_bridge(number: str, data: dict[str, Any], context: ConnectionContext,
                      transport: Transport) -> Light:
    """Build a :class:`Light` from one entry of the bridge's ``/lights`` listing."""
    identity = LightIdentity(number=str(number), name=data.get("name", ""))
    state = LightState.model_validate(data.get("state") or {"on": False})
    return Light(identity, state, context, transport)
