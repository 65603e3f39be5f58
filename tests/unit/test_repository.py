"""Tests for the trip repository."""

from datetime import UTC, date, datetime
from unittest.mock import MagicMock

import pytest

from wayfarer.data.repository import TripRepository
from wayfarer.data.trip_models import Trip


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def repo(mock_db):
    return TripRepository(mock_db)


def _trip(trip_id: str, created_at: datetime) -> Trip:
    return Trip(
        trip_id=trip_id,
        user_id="123",
        destination="Paris",
        start_date=date(2024, 7, 1),
        end_date=date(2024, 7, 3),
        created_at=created_at,
    )


def test_trip_keys():
    trip = _trip("trip-1", datetime(2024, 1, 1, tzinfo=UTC))
    assert trip.pk == "USER#123#TRIP"
    assert trip.sk == "TRIP#trip-1"


def test_trip_default_id():
    trip = Trip(
        user_id="123",
        destination="Paris",
        start_date=date(2024, 7, 1),
        end_date=date(2024, 7, 3),
    )
    assert trip.trip_id.startswith("trip-")
    assert trip.created_at.tzinfo is not None


def test_trip_response_shape():
    trip = _trip("trip-1", datetime(2024, 1, 1, tzinfo=UTC))
    assert trip.to_response() == {
        "id": "trip-1",
        "userId": "123",
        "destination": "Paris",
        "startDate": "2024-07-01",
        "endDate": "2024-07-03",
        "createdAt": "2024-01-01T00:00:00+00:00",
    }


def test_create_trip(repo, mock_db):
    trip = _trip("trip-1", datetime(2024, 1, 1, tzinfo=UTC))
    assert repo.create_trip(trip) is trip

    mock_db.put_item.assert_called_once()
    item = mock_db.put_item.call_args[0][0]
    assert item["PK"] == "USER#123#TRIP"
    assert item["SK"] == "TRIP#trip-1"
    assert item["EntityType"] == "Trip"
    assert item["Data"]["destination"] == "Paris"
    assert item["Data"]["start_date"] == "2024-07-01"
    assert "pk" not in item["Data"]


def test_list_trips_newest_first(repo, mock_db):
    older = _trip("trip-old", datetime(2024, 1, 1, tzinfo=UTC))
    newer = _trip("trip-new", datetime(2024, 3, 1, tzinfo=UTC))
    mock_db.query.return_value = [
        {"PK": older.pk, "SK": older.sk, "Data": older.model_dump(mode="json")},
        {"PK": newer.pk, "SK": newer.sk, "Data": newer.model_dump(mode="json")},
    ]

    trips = repo.list_trips("123")
    assert [t.trip_id for t in trips] == ["trip-new", "trip-old"]
    mock_db.query.assert_called_once_with(pk="USER#123#TRIP", sk_prefix="TRIP#")


def test_list_trips_empty(repo, mock_db):
    mock_db.query.return_value = []
    assert repo.list_trips("123") == []


def test_delete_trip_scoped_to_user(repo, mock_db):
    mock_db.delete_item.return_value = True
    assert repo.delete_trip("123", "trip-1") is True
    mock_db.delete_item.assert_called_once_with("USER#123#TRIP", "TRIP#trip-1")


def test_delete_trip_missing(repo, mock_db):
    mock_db.delete_item.return_value = False
    assert repo.delete_trip("123", "trip-404") is False
