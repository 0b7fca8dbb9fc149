from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from huelight.errors import ValidationError


class Command(BaseModel):
    model_config = ConfigDict(frozen=True)

    def payload(self) -> dict[str, Any]:
        return self.model_dump()


class OnCommand(Command):
    on: bool


class BrightnessCommand(Command):
    bri: int = Field(..., ge=0, le=255, title="Brightness")


class BrightnessIncrementCommand(Command):
    bri_inc: int = Field(..., ge=-255, le=255, title="Brightness increment")


class HueCommand(Command):
    hue: int = Field(..., ge=0, le=65535, title="Hue")


class HueIncrementCommand(Command):
    hue_inc: int = Field(..., ge=-65535, le=65535, title="Hue increment")


class SaturationCommand(Command):
    sat: int = Field(..., ge=0, le=255, title="Saturation")


class SaturationIncrementCommand(Command):
    sat_inc: int = Field(..., ge=-255, le=255, title="Saturation increment")


class ColorTemperatureCommand(Command):
    ct: int = Field(..., ge=0, le=65535, title="Color temperature")


class ColorTemperatureIncrementCommand(Command):
    ct_inc: int = Field(..., ge=-65535, le=65535, title="Color temperature increment")


class TransitionTimeCommand(Command):
    # multiples of 100ms, 10 -> 1 second
    transitiontime: int = Field(..., ge=0, le=65535, title="Transition time")


# x and y are passed through unchecked, the bridge maps them into its gamut
class XYCommand(Command):
    xy: list[float] = Field(..., min_length=2, max_length=2)


class AlertCommand(Command):
    alert: Literal["select", "lselect"]


class EffectCommand(Command):
    effect: Literal["colorloop", "none"]


class RenameCommand(Command):
    name: str


def _bounds(command_cls: type[Command], field: str) -> tuple[Any, Any]:
    minimum = maximum = None
    for constraint in command_cls.model_fields[field].metadata:
        minimum = getattr(constraint, "ge", minimum)
        maximum = getattr(constraint, "le", maximum)
    return minimum, maximum


def build_payload(command_cls: type[Command], **values: Any) -> dict[str, Any]:
    """Validate ``values`` against ``command_cls`` and return the wire payload.

    A pydantic failure is re-raised as :class:`huelight.errors.ValidationError`
    naming the attribute and its allowed range.
    """
    try:
        command = command_cls(**values)
    except PydanticValidationError as exc:
        field = next(iter(values))
        info = command_cls.model_fields[field]
        minimum, maximum = _bounds(command_cls, field)
        raise ValidationError(info.title or field, minimum, maximum, values[field]) from exc
    return command.payload()
