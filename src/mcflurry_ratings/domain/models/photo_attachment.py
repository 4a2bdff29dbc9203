"""Photo attachment domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PhotoAttachment:
    """A photo attached to a pending rating.

    Photos are kept by the caller only and are never persisted.
    """

    name: str
    url: str
