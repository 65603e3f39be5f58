"""
Weather service.

Produces current conditions and a per-day forecast for the trip. Values
are synthetic, drawn from a generator seeded by the destination and dates.
"""

from datetime import date

from wayfarer.data.models import CurrentWeather, ForecastDay, WeatherReport
from wayfarer.utils.helpers import seeded_rng, trip_dates

# condition -> icon
CONDITIONS: dict[str, str] = {
    "Sunny": "sunny",
    "Cloudy": "cloudy",
    "Partly Cloudy": "partly-cloudy",
    "Light Rain": "rainy",
}


class WeatherService:
    """Service for trip weather forecasts."""

    def __init__(self, mock_seed: int | None = None):
        self.mock_seed = mock_seed

    def get_forecast(
        self, destination: str, start_date: date, end_date: date
    ) -> WeatherReport:
        rng = seeded_rng(
            "weather", destination, start_date, end_date, base_seed=self.mock_seed
        )

        current = CurrentWeather(
            temp=rng.randint(20, 34),
            condition="Partly Cloudy",
            icon=CONDITIONS["Partly Cloudy"],
            humidity=rng.randint(50, 79),
            wind_speed=rng.randint(5, 19),
        )

        forecast = []
        for day in trip_dates(start_date, end_date):
            condition = rng.choice(list(CONDITIONS))
            forecast.append(
                ForecastDay(
                    date=day,
                    temp=rng.randint(18, 32),
                    condition=condition,
                    icon=CONDITIONS[condition],
                    humidity=rng.randint(40, 79),
                )
            )

        return WeatherReport(current=current, forecast=forecast)
