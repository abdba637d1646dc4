"""
Chicken Farm: Farm Clock
Shared simulated date for a barn and every chicken living in it.
"""

from dataclasses import dataclass, field
from datetime import date, timedelta

from ..config import FARM


@dataclass
class FarmClock:
    """
    The current simulated date.

    One instance is shared by reference, so advancing it moves the date
    for the barn and all of its chickens at once.
    """
    today: date = field(default_factory=lambda: FARM.start_date)
    days_elapsed: int = 0

    def advance(self, days: int = 1) -> date:
        """Move the clock forward and return the new date."""
        if days < 0:
            raise ValueError(f"Cannot move the clock backwards: {days}")
        self.today += timedelta(days=days)
        self.days_elapsed += days
        return self.today
