"""
Saved-trip model.

Includes DynamoDB key generation (pk, sk) for the single-table design:
all trips of a user share one partition, one item per trip.
"""

from datetime import UTC, date, datetime

from pydantic import BaseModel, Field, computed_field

from wayfarer.utils.helpers import generate_id


class Trip(BaseModel):
    """Trip entity. PK=USER#id#TRIP, SK=TRIP#id."""

    trip_id: str = Field(default_factory=lambda: generate_id("trip"))
    user_id: str
    destination: str
    start_date: date
    end_date: date
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @computed_field
    @property
    def pk(self) -> str:
        return f"USER#{self.user_id}#TRIP"

    @computed_field
    @property
    def sk(self) -> str:
        return f"TRIP#{self.trip_id}"

    def to_response(self) -> dict:
        """Public representation returned to callers."""
        return {
            "id": self.trip_id,
            "userId": self.user_id,
            "destination": self.destination,
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
            "createdAt": self.created_at.isoformat(),
        }
