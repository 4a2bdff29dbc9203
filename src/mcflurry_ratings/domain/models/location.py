"""Location domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """Represents a store location from the static catalog."""

    id: int
    display_name: str
    city_name: str
    latitude: float
    longitude: float

    @property
    def search_text(self) -> str:
        """Text used for catalog search (name and city separated by a space)."""
        return f"{self.display_name} {self.city_name}"
