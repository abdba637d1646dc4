"""
Chicken Farm: Barn Simulation
Daily egg production and reproduction of a chicken flock.

A flock of 50 hens is simulated for a year: eggs laid, eggs fertilized,
the best layers, the revenue of unfertilized eggs and the number of
chickens hatched along the way.
"""

__version__ = "1.0.0"

from .config import FARM, FarmConfig

from .core import (
    FarmClock,
    Chicken,
    Barn,
    PeriodStats,
    age_in_months,
)

from .report import format_currency, generate_report

__all__ = [
    # Version info
    "__version__",

    # Config
    "FARM",
    "FarmConfig",

    # Core classes
    "FarmClock",
    "Chicken",
    "Barn",
    "PeriodStats",
    "age_in_months",

    # Report
    "format_currency",
    "generate_report",
]
