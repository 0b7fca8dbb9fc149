"""Exception types raised by huelight."""

from typing import Any


class HueError(Exception):
    """Base class for all huelight errors."""


class PreconditionError(HueError):
    """Raised when a light setting is changed while the light is off."""

    def __init__(self, message: str = "You cannot change a light's settings while it is off."):
        super().__init__(message)


class ValidationError(HueError, ValueError):
    """Raised when a command argument is outside its allowed range."""

    def __init__(self, attribute: str, minimum: Any = None, maximum: Any = None, value: Any = None):
        self.attribute = attribute
        self.minimum = minimum
        self.maximum = maximum
        self.value = value
        if minimum is None and maximum is None:
            message = f"{attribute} is not valid: {value!r}"
        else:
            message = f"{attribute} must be between {minimum} and {maximum}."
        super().__init__(message)


class InvalidBridgeAddressError(HueError, ValueError):
    def __init__(self, address: str):
        self.address = address
        super().__init__(f"The IP provided was not valid: {address!r}")


class BridgeNotSelectedError(HueError):
    pass


class BridgeError(HueError):
    """An error entry returned by the bridge itself."""

    def __init__(self, error_type: int | None, description: str, address: str | None = None,
                 message: str | None = None):
        self.error_type = error_type
        self.description = description
        self.address = address
        super().__init__(message or f"Bridge error {error_type}: {description}")

    @classmethod
    def from_response(cls, error: dict[str, Any]) -> "BridgeError":
        error_type = error.get("type")
        description = error.get("description", "")
        address = error.get("address")
        if error_type == LinkButtonNotPressedError.ERROR_TYPE:
            return LinkButtonNotPressedError(description, address)
        return cls(error_type, description, address)


class LinkButtonNotPressedError(BridgeError):
    ERROR_TYPE = 101

    def __init__(self, description: str = "link button not pressed", address: str | None = None):
        super().__init__(self.ERROR_TYPE, description, address,
                         message="The link button needs to be pressed to generate a new user.")
