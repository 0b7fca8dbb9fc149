from typing import Any, Optional

from huelight.repo.hue_repository import HueRepository
from huelight.services.light_service import Light


class GroupService:
    def __init__(self, repository: HueRepository):
        self.repository = repository

    def find_group(self, group_name: str) -> Optional[dict[str, Any]]:
        for group in self.repository.get_all_groups_raw().values():
            if group.get("name") == group_name:
                return group
        return None

    def get_light_numbers(self, group_name: str) -> list[str]:
        group = self.find_group(group_name)
        return [str(n) for n in group.get("lights", [])] if group else []

    def get_lights(self, group_name: str) -> list[Light]:
        """Lights belonging to the first group called ``group_name``."""
        numbers = set(self.get_light_numbers(group_name))
        if not numbers:
            return []
        return [light for light in self.repository.get_all_lights() if light.number in numbers]
