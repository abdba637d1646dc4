"""
Chicken Farm: Configuration
Fixed simulation constants: calendar, age gates, laying and market figures.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class FarmConfig:
    """Constants of the barn simulation."""

    # Calendar
    start_date: date = field(default_factory=lambda: date(2023, 1, 1))
    default_birth_year: int = 2022
    default_birth_month: int = 4  # April

    # Age gates (whole months)
    laying_age_months: int = 4
    fertile_age_months: int = 8

    # Daily behaviour
    max_eggs_per_day: int = 2          # Uniform draw from 0..max
    fertilization_draw_max: int = 99   # Uniform draw from 0..99
    fertilization_threshold: int = 50  # Fertilized when draw > threshold

    # Identifiers
    id_suffix_max: int = 9999

    # Market
    egg_price: Decimal = Decimal("0.25")  # Per unfertilized egg
    currency: str = "EUR"
    locale: str = "nl"

    # Default run
    initial_chickens: int = 50
    simulation_days: int = 365

    @property
    def fertilization_chance(self) -> float:
        """Probability that a single egg is fertilized."""
        draws = self.fertilization_draw_max + 1
        return (self.fertilization_draw_max - self.fertilization_threshold) / draws


# Default configuration
FARM = FarmConfig()
