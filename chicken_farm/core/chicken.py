"""
Chicken Farm: Chicken
Individual laying hen: ageing, daily egg production and hatching.
"""

from datetime import date
from typing import Dict, List, Optional
import calendar
import random

from .clock import FarmClock
from ..config import FARM


def age_in_months(dob: date, today: date) -> int:
    """Whole calendar months between a date of birth and today (floor)."""
    months = (today.year - dob.year) * 12 + (today.month - dob.month)
    if today.day < dob.day:
        months -= 1
    return max(0, months)


class Chicken:
    """
    A single chicken in the barn.

    Age gates (months since date of birth):
    - below 4: nothing happens
    - 4 to 7: lays 0-2 eggs per day
    - 8 and up: each egg laid that day may be fertilized and hatch
      immediately into a new chicken born on the current date

    All draws come from ``rng`` so a scripted source makes behaviour exact.
    """

    def __init__(self, clock: FarmClock, dob: Optional[date] = None,
                 rng: Optional[random.Random] = None):
        self.clock = clock
        self.rng = rng if rng is not None else random.Random()

        self._dob = dob if dob is not None else self._random_dob()
        self._id = self._dob.strftime("%Y%m%d-") + str(self.rng.randint(0, FARM.id_suffix_max))

        self._eggs_produced = 0
        self._eggs_fertilized = 0
        self._new_chickens: List["Chicken"] = []

    def _random_dob(self) -> date:
        """Pick a random day in the default birth month."""
        days_in_month = calendar.monthrange(FARM.default_birth_year, FARM.default_birth_month)[1]
        day = self.rng.randint(1, days_in_month)
        return date(FARM.default_birth_year, FARM.default_birth_month, day)

    @property
    def id(self) -> str:
        return self._id

    @property
    def dob(self) -> date:
        return self._dob

    @property
    def produced_eggs(self) -> int:
        return self._eggs_produced

    @property
    def fertilized_eggs(self) -> int:
        return self._eggs_fertilized

    @property
    def new_chickens(self) -> List["Chicken"]:
        """Chickens hatched during the most recent simulated day."""
        return list(self._new_chickens)

    def age_in_months(self) -> int:
        return age_in_months(self._dob, self.clock.today)

    def simulate_day(self):
        """Lay, fertilize and hatch for the clock's current date."""
        age = self.age_in_months()
        if age < FARM.laying_age_months:
            return

        self._new_chickens = []
        produced = self.rng.randint(0, FARM.max_eggs_per_day)
        self._eggs_produced += produced

        if age < FARM.fertile_age_months:
            return

        for _ in range(produced):
            if self.rng.randint(0, FARM.fertilization_draw_max) > FARM.fertilization_threshold:
                self._eggs_fertilized += 1
                self._new_chickens.append(
                    Chicken(self.clock, dob=self.clock.today, rng=self.rng)
                )

    def get_status(self) -> Dict:
        """Get chicken status."""
        return {
            "id": self._id,
            "dob": self._dob.isoformat(),
            "age_months": self.age_in_months(),
            "produced_eggs": self._eggs_produced,
            "fertilized_eggs": self._eggs_fertilized,
            "new_chickens": len(self._new_chickens),
        }

    def __repr__(self) -> str:
        return (f"Chicken(id={self._id!r}, produced={self._eggs_produced}, "
                f"fertilized={self._eggs_fertilized})")
