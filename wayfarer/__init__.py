"""
AI-assisted trip planning back end powered by Google Gemini.

This package generates day-by-day itineraries and packing lists for a
destination and date range, with deterministic fallbacks when the model is
unavailable, and serves attractions, hotel listings, weather and saved trips
alongside them.
"""

__version__ = "0.1.0"
