"""
Chicken Farm: Core Module
Contains the farm clock, the chicken and the barn that drives the simulation.
"""

from .clock import FarmClock
from .chicken import Chicken, age_in_months
from .barn import Barn, PeriodStats

__all__ = [
    # Clock
    "FarmClock",

    # Chicken
    "Chicken",
    "age_in_months",

    # Barn
    "Barn",
    "PeriodStats",
]
