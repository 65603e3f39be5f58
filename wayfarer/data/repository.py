"""
DynamoDB repository for saved trips.

Maps Trip models to/from DynamoDB single-table items. Every operation is
scoped to one user's partition.
"""

from datetime import UTC, datetime
from typing import Any

from wayfarer.data.dynamodb import DynamoDBClient
from wayfarer.data.trip_models import Trip
from wayfarer.utils.logging import get_logger

logger = get_logger(__name__)


class TripRepository:
    """Repository for trip persistence."""

    def __init__(self, db: DynamoDBClient):
        self.db = db

    def _to_item(self, trip: Trip, version: int = 1) -> dict[str, Any]:
        """Convert a Trip to a DynamoDB item."""
        data = trip.model_dump(mode="json", exclude={"pk", "sk"})
        now = datetime.now(UTC).isoformat()
        return {
            "PK": trip.pk,
            "SK": trip.sk,
            "EntityType": "Trip",
            "Version": version,
            "Data": data,
            "Metadata": {
                "createdAt": now,
                "updatedAt": now,
            },
        }

    def create_trip(self, trip: Trip) -> Trip:
        self.db.put_item(self._to_item(trip))
        logger.info(f"Saved trip {trip.trip_id} for user {trip.user_id}")
        return trip

    def list_trips(self, user_id: str) -> list[Trip]:
        """Return the user's trips, newest first."""
        items = self.db.query(pk=f"USER#{user_id}#TRIP", sk_prefix="TRIP#")
        trips = [Trip.model_validate(i["Data"]) for i in items]
        return sorted(trips, key=lambda t: t.created_at, reverse=True)

    def delete_trip(self, user_id: str, trip_id: str) -> bool:
        """Delete one of the user's trips. Returns False if it did not exist."""
        deleted = self.db.delete_item(f"USER#{user_id}#TRIP", f"TRIP#{trip_id}")
        if deleted:
            logger.info(f"Deleted trip {trip_id} for user {user_id}")
        return deleted
