"""
Listing services for Wayfarer: attractions, hotels and weather.
"""

from wayfarer.services.attractions import AttractionService
from wayfarer.services.hotels import HotelService
from wayfarer.services.weather import WeatherService

__all__ = ["AttractionService", "HotelService", "WeatherService"]
