"""Raw rating row as exchanged with the persistence backend."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, field_validator


class RatingRecord(BaseModel):
    """A row of the ``ratings`` table.

    Field names follow the backend schema, not the domain vocabulary.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int | str
    restaurant_id: int
    consistency: str
    stars: float
    has_choco: bool
    sauce_amount: int
    comment: str = ""
    created_at: datetime

    @field_validator("comment", mode="before")
    @classmethod
    def default_comment(cls, v: object) -> object:
        """Treat a null comment as empty."""
        return "" if v is None else v

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Read timestamps without an offset as UTC."""
        return v.replace(tzinfo=UTC) if v.tzinfo is None else v
