"""
AWS Lambda handler for the Wayfarer trip-planning back end.

Routes events by "action" field to the generation agents, the listing
services and trip persistence. The caller's identity is resolved upstream
by the auth provider and forwarded as "userId".
"""

import asyncio
from typing import Any

from pydantic import ValidationError

from wayfarer.agents import ItineraryAgent, PackingListAgent
from wayfarer.config import config
from wayfarer.data.dynamodb import DynamoDBClient
from wayfarer.data.models import TripRequest
from wayfarer.data.repository import TripRepository
from wayfarer.data.trip_models import Trip
from wayfarer.services import AttractionService, HotelService, WeatherService
from wayfarer.utils.error_handling import (
    FallbackFailure,
    MissingInputError,
    UnauthenticatedError,
)
from wayfarer.utils.logging import get_logger

logger = get_logger(__name__)

MISSING_PARAMETERS = "Missing required parameters"


def current_identity(event: dict[str, Any]) -> str | None:
    """Return the caller's user ID, accepting the USER#123 form, or None."""
    user_id_raw = event.get("userId") or ""
    if user_id_raw.startswith("USER#"):
        user_id_raw = user_id_raw[5:]
    return user_id_raw or None


def _get_repo() -> TripRepository:
    db = DynamoDBClient(
        table_name=config.api.dynamodb_table_name,
        region=config.api.aws_region,
        endpoint_url=config.api.dynamodb_endpoint,
    )
    return TripRepository(db)


def route_event(event: dict[str, Any]) -> tuple[str, dict[str, Any]]:
    """Parse event and extract action + parameters."""
    action = event.get("action", "unknown")
    params: dict[str, Any] = {
        "user_id": current_identity(event),
        "destination": event.get("destination"),
        "start_date": event.get("startDate"),
        "end_date": event.get("endDate"),
        # Hotel search
        "checkin": event.get("checkin"),
        "checkout": event.get("checkout"),
        "page": event.get("page", 1),
        "limit": event.get("limit", 6),
        # Trip management
        "trip_id": event.get("tripId"),
    }
    return action, params


def _require_user(params: dict[str, Any]) -> str:
    if not params.get("user_id"):
        raise UnauthenticatedError("Authentication required")
    return params["user_id"]


def _trip_request(params: dict[str, Any]) -> TripRequest:
    if not all(params.get(k) for k in ("destination", "start_date", "end_date")):
        raise MissingInputError(MISSING_PARAMETERS)
    try:
        return TripRequest(
            destination=params["destination"],
            start_date=params["start_date"],
            end_date=params["end_date"],
        )
    except ValidationError as e:
        logger.info(f"Rejected trip parameters: {e.error_count()} validation errors")
        raise MissingInputError("Invalid trip parameters") from e


def _positive_int(value: Any, name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError) as e:
        raise MissingInputError(f"Invalid {name}") from e
    if number < 1:
        raise MissingInputError(f"Invalid {name}")
    return number


async def _handle_generate_itinerary(params: dict[str, Any]) -> dict[str, Any]:
    _require_user(params)
    request = _trip_request(params)
    agent = ItineraryAgent(
        api_key=config.api.gemini_api_key,
        model_config=config.get_generation_model("itinerary"),
    )
    result = await agent.run(request)
    return {
        "status": "ok",
        "itinerary": [day.to_json_dict() for day in result.value],
        "source": result.source.value,
    }


async def _handle_generate_packing_list(params: dict[str, Any]) -> dict[str, Any]:
    _require_user(params)
    request = _trip_request(params)
    agent = PackingListAgent(
        api_key=config.api.gemini_api_key,
        model_config=config.get_generation_model("packing"),
    )
    result = await agent.run(request)
    return {
        "status": "ok",
        "categories": [category.to_json_dict() for category in result.value],
        "source": result.source.value,
    }


async def _handle_get_attractions(params: dict[str, Any]) -> dict[str, Any]:
    if not params.get("destination"):
        raise MissingInputError(MISSING_PARAMETERS)
    service = AttractionService(
        api_key=config.api.geoapify_api_key, mock_seed=config.system.mock_seed
    )
    attractions = await service.get_attractions(params["destination"])
    return {"status": "ok", "attractions": [a.to_json_dict() for a in attractions]}


async def _handle_search_hotels(params: dict[str, Any]) -> dict[str, Any]:
    if not all(params.get(k) for k in ("destination", "checkin", "checkout")):
        raise MissingInputError(MISSING_PARAMETERS)
    service = HotelService(mock_seed=config.system.mock_seed)
    page = service.search(
        params["destination"],
        params["checkin"],
        params["checkout"],
        page=_positive_int(params["page"], "page"),
        limit=_positive_int(params["limit"], "limit"),
    )
    return {"status": "ok", **page.to_json_dict()}


async def _handle_get_weather(params: dict[str, Any]) -> dict[str, Any]:
    request = _trip_request(params)
    service = WeatherService(mock_seed=config.system.mock_seed)
    report = service.get_forecast(
        request.destination, request.start_date, request.end_date
    )
    return {"status": "ok", "weather": report.to_json_dict()}


async def _handle_save_trip(params: dict[str, Any]) -> dict[str, Any]:
    user_id = _require_user(params)
    request = _trip_request(params)
    trip = _get_repo().create_trip(
        Trip(
            user_id=user_id,
            destination=request.destination,
            start_date=request.start_date,
            end_date=request.end_date,
        )
    )
    return {"status": "ok", "trip": trip.to_response()}


async def _handle_list_trips(params: dict[str, Any]) -> dict[str, Any]:
    user_id = _require_user(params)
    trips = _get_repo().list_trips(user_id)
    return {"status": "ok", "trips": [t.to_response() for t in trips]}


async def _handle_delete_trip(params: dict[str, Any]) -> dict[str, Any]:
    user_id = _require_user(params)
    if not params.get("trip_id"):
        raise MissingInputError(MISSING_PARAMETERS)
    if not _get_repo().delete_trip(user_id, params["trip_id"]):
        logger.info(f"Trip {params['trip_id']} not found for user {user_id}")
    return {"status": "ok", "success": True}


# Action handlers map
_HANDLERS = {
    "generate_itinerary": _handle_generate_itinerary,
    "generate_packing_list": _handle_generate_packing_list,
    "get_attractions": _handle_get_attractions,
    "search_hotels": _handle_search_hotels,
    "get_weather": _handle_get_weather,
    "save_trip": _handle_save_trip,
    "list_trips": _handle_list_trips,
    "delete_trip": _handle_delete_trip,
}


def _error(message: str, code: int) -> dict[str, Any]:
    return {"status": "error", "error": message, "code": code}


async def async_handler(event: dict[str, Any]) -> dict[str, Any]:
    """Main async handler."""
    action, params = route_event(event)

    handler_fn = _HANDLERS.get(action)
    if not handler_fn:
        return _error(f"Unknown action: {action}", 400)

    try:
        return await handler_fn(params)
    except MissingInputError as e:
        return _error(str(e), 400)
    except UnauthenticatedError:
        return _error("Authentication required", 401)
    except FallbackFailure as e:
        logger.error(f"Error handling {action}: {e}")
        return _error("Generation failed", 500)
    except Exception as e:
        logger.error(f"Error handling {action}: {e}")
        return _error(str(e), 500)


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Lambda entry point (sync wrapper)."""
    return asyncio.run(async_handler(event))
