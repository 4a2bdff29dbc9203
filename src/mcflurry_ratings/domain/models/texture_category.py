"""Texture category of a rated McFlurry."""

from enum import Enum

# Persisted rows use the backend's German vocabulary
_WIRE_VALUES = {
    "icy": "eisig",
    "creamy": "cremig",
    "soft": "weich",
}


class TextureCategory(str, Enum):
    """How the ice cream felt."""

    ICY = "icy"
    CREAMY = "creamy"
    SOFT = "soft"

    @property
    def wire_value(self) -> str:
        """Value written to the persistence backend."""
        return _WIRE_VALUES[self.value]

    @classmethod
    def from_wire(cls, value: str) -> "TextureCategory":
        """Parse a persisted value, accepting both German and English spellings.

        Raises:
            ValueError: If the value is not a known texture.
        """
        normalized = value.strip().lower()
        for category in cls:
            if normalized in (category.value, category.wire_value):
                return category
        raise ValueError(f"Unknown texture category: {value!r}")
