"""
Command-line entry point for Wayfarer.

Generates an itinerary and/or packing list for a destination and date range
and prints the result as JSON. Without a Gemini API key the deterministic
fallback content is printed.
"""

import argparse
import asyncio
import json
import sys
import traceback
from typing import Any

from pydantic import ValidationError

from wayfarer.agents import ItineraryAgent, PackingListAgent
from wayfarer.config import WayfarerConfig, initialize_config
from wayfarer.data.dynamodb import DynamoDBClient
from wayfarer.data.models import TripRequest
from wayfarer.utils.logging import get_logger, setup_logging

# Initialize logger
logger = get_logger(__name__)


def setup_argparse() -> argparse.ArgumentParser:
    """
    Set up the argument parser for the CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        description="Trip itinerary and packing-list generator powered by Google Gemini"
    )

    trip_group = parser.add_argument_group("Trip")
    trip_group.add_argument(
        "--destination", type=str, required=True, help="Destination name"
    )
    trip_group.add_argument(
        "--start-date", type=str, required=True, help="First day of the trip (YYYY-MM-DD)"
    )
    trip_group.add_argument(
        "--end-date", type=str, required=True, help="Last day of the trip (YYYY-MM-DD)"
    )
    trip_group.add_argument(
        "--only",
        type=str,
        choices=["itinerary", "packing"],
        help="Generate only the itinerary or only the packing list",
    )

    # System configuration arguments
    system_group = parser.add_argument_group("System Configuration")
    system_group.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Set the logging level",
    )
    system_group.add_argument(
        "--log-file",
        type=str,
        help="Path to write log file (optional)",
    )
    system_group.add_argument(
        "--config",
        type=str,
        help="Path to custom configuration file",
    )
    system_group.add_argument(
        "--init-db",
        action="store_true",
        help="Initialize DynamoDB table if it doesn't exist",
    )

    return parser


async def generate(
    request: TripRequest, system_config: WayfarerConfig, only: str | None = None
) -> dict[str, Any]:
    """Run the requested generation agents and collect their JSON output."""
    output: dict[str, Any] = {"trip": request.to_json_dict()}

    if only in (None, "itinerary"):
        agent = ItineraryAgent(
            api_key=system_config.api.gemini_api_key,
            model_config=system_config.get_generation_model("itinerary"),
        )
        result = await agent.run(request)
        output["itinerary"] = {
            "source": result.source.value,
            "days": [day.to_json_dict() for day in result.value],
        }

    if only in (None, "packing"):
        agent = PackingListAgent(
            api_key=system_config.api.gemini_api_key,
            model_config=system_config.get_generation_model("packing"),
        )
        result = await agent.run(request)
        output["packingList"] = {
            "source": result.source.value,
            "categories": [c.to_json_dict() for c in result.value],
        }

    return output


def _initialize_database(system_config: WayfarerConfig) -> bool:
    """Initialize DynamoDB table."""
    logger.info("Initializing DynamoDB table...")
    try:
        db = DynamoDBClient(
            table_name=system_config.api.dynamodb_table_name,
            endpoint_url=system_config.api.dynamodb_endpoint,
            region=system_config.api.aws_region,
        )
        db.create_table_if_not_exists()
        logger.info("DynamoDB table initialized successfully")
        return True
    except Exception as e:
        logger.error(f"Error initializing DynamoDB table: {e}")
        print(f"\nERROR: Failed to initialize DynamoDB table: {e}")
        return False


async def main(argv: list[str] | None = None) -> int:
    """
    Main entry point function.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    args = setup_argparse().parse_args(argv)

    try:
        # Setup basic logging first to capture any initialization errors
        setup_logging(log_level=args.log_level or "INFO", log_file=args.log_file)

        system_config = initialize_config(
            custom_config_path=args.config, validate=True, raise_on_error=True
        )
        setup_logging(
            log_level=args.log_level or system_config.system.log_level,
            log_file=args.log_file,
            json_logs=system_config.system.environment == "production",
        )

        if args.init_db and not _initialize_database(system_config):
            return 1

        try:
            request = TripRequest(
                destination=args.destination,
                start_date=args.start_date,
                end_date=args.end_date,
            )
        except ValidationError as e:
            print(f"\nInvalid trip: {e}")
            return 2

        output = await generate(request, system_config, only=args.only)
        print(json.dumps(output, indent=2, ensure_ascii=False))
        return 0

    except WayfarerConfig.ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        print(f"\nConfiguration Error: {e}")
        print("Please check your environment variables and configuration settings.")
        return 1
    except KeyboardInterrupt:
        logger.info("Session interrupted by user")
        return 0
    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        print(f"\nError: {e}")
        return 1
    except Exception as e:
        logger.error(f"Error in main function: {e!s}\n{traceback.format_exc()}")
        print(f"\nError: {e!s}")
        print("An unexpected error occurred. Please check the logs for more details.")
        return 1


def cli() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
