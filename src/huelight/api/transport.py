from typing import Any, Mapping, Protocol

from huelight.models.light import CommandTarget


class Transport(Protocol):
    """Anything a :class:`~huelight.services.light_service.Light` can hand commands to.

    ``issue`` must not block on the bridge; whatever it returns (typically a
    ``Future``) is kept by the light as ``last_dispatch`` and never inspected.
    """

    def issue(self, target: CommandTarget, payload: Mapping[str, Any]) -> Any:
        ...
