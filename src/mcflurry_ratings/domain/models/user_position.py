"""User position domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserPosition:
    """Geographic position of the user for the current session."""

    latitude: float
    longitude: float
