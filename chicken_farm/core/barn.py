"""
Chicken Farm: Barn
Owns the flock and the farm clock, drives the daily simulation loop and
collects period statistics.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Optional, Tuple
from datetime import date
import logging
import random

from .clock import FarmClock
from .chicken import Chicken
from ..config import FARM
from ..report import format_currency

logger = logging.getLogger(__name__)


@dataclass
class PeriodStats:
    """Statistics collected on the last day of a simulate() call."""
    produced_eggs: int = 0
    fertilized_eggs: int = 0
    most_produced_eggs_chicken: Optional[Chicken] = None
    most_fertilized_eggs_chicken: Optional[Chicken] = None

    def collect(self, chicken: Chicken):
        """Add a chicken's counters to the totals and update the leaders."""
        self.produced_eggs += chicken.produced_eggs
        self.fertilized_eggs += chicken.fertilized_eggs

        # Strict comparison: the first chicken to reach a maximum keeps it
        leader = self.most_produced_eggs_chicken
        if leader is None or chicken.produced_eggs > leader.produced_eggs:
            self.most_produced_eggs_chicken = chicken

        leader = self.most_fertilized_eggs_chicken
        if leader is None or chicken.fertilized_eggs > leader.fertilized_eggs:
            self.most_fertilized_eggs_chicken = chicken


class Barn:
    """
    The flock and its clock.

    Manages:
    - Initial population with random birth dates in the default birth month
    - Day loop over a population that grows while it is being traversed
    - Period statistics (last simulated day) and the all-time newborn count
    """

    def __init__(self, number_of_chickens: int, rng: Optional[random.Random] = None):
        if number_of_chickens < 0:
            raise ValueError("Number of chickens needs to be zero or larger.")

        self.rng = rng if rng is not None else random.Random()
        self.clock = FarmClock(today=FARM.start_date)

        self._chickens: List[Chicken] = [
            Chicken(self.clock, rng=self.rng) for _ in range(number_of_chickens)
        ]
        self._stats = PeriodStats()
        self._total_new_born_chickens = 0

        logger.info(f"Barn initialized: {number_of_chickens} chickens on {self.clock.today.isoformat()}")

    @property
    def chickens(self) -> Tuple[Chicken, ...]:
        return tuple(self._chickens)

    @property
    def current_date(self) -> date:
        return self.clock.today

    @property
    def total_produced_eggs(self) -> int:
        """Total produced eggs for the simulated period."""
        return self._stats.produced_eggs

    @property
    def total_fertilized_eggs(self) -> int:
        """Total fertilized eggs for the simulated period."""
        return self._stats.fertilized_eggs

    @property
    def most_produced_eggs_chicken(self) -> Optional[Chicken]:
        return self._stats.most_produced_eggs_chicken

    @property
    def most_fertilized_eggs_chicken(self) -> Optional[Chicken]:
        return self._stats.most_fertilized_eggs_chicken

    @property
    def total_new_born_chickens(self) -> int:
        """Newborn chickens across every simulated day, never reset."""
        return self._total_new_born_chickens

    @property
    def total_revenue(self) -> Decimal:
        """Revenue from selling the unfertilized eggs of the period."""
        unfertilized_eggs = self.total_produced_eggs - self.total_fertilized_eggs
        return unfertilized_eggs * FARM.egg_price

    def get_total_revenue(self) -> str:
        """Total revenue formatted as currency."""
        return format_currency(self.total_revenue, FARM.currency, FARM.locale)

    def simulate(self, days: int) -> "Barn":
        """
        Simulate a number of chicken days.

        Statistics are reset once and then collected only on the last day,
        so they describe the flock as it stands at the end of the run.
        A zero-day run changes nothing.
        """
        if days < 0:
            raise ValueError(f"Number of days needs to be zero or larger: {days}")
        if days == 0:
            return self

        self._stats = PeriodStats()
        for _ in range(days - 1):
            self._simulate_day(collect_stats=False)
        self._simulate_day(collect_stats=True)

        logger.info(f"Simulated {days} days up to {self.clock.today.isoformat()}: "
                    f"{len(self._chickens)} chickens, "
                    f"{self._total_new_born_chickens} born in total")
        return self

    def _simulate_day(self, collect_stats: bool):
        """Run every chicken through one day, then advance the clock."""
        born_today = 0

        # Index loop: chickens hatched earlier in this pass are simulated too
        i = 0
        while i < len(self._chickens):
            chicken = self._chickens[i]
            chicken.simulate_day()

            hatched = chicken.new_chickens
            self._chickens.extend(hatched)
            born_today += len(hatched)

            if collect_stats:
                self._stats.collect(chicken)
            i += 1

        self._total_new_born_chickens += born_today
        logger.debug(f"{self.clock.today.isoformat()}: {born_today} hatched, "
                     f"flock size {len(self._chickens)}")

        self.clock.advance()

    def get_status(self) -> Dict:
        """Get barn status."""
        most_produced = self.most_produced_eggs_chicken
        most_fertilized = self.most_fertilized_eggs_chicken
        return {
            "current_date": self.clock.today.isoformat(),
            "days_simulated": self.clock.days_elapsed,
            "total_chickens": len(self._chickens),
            "total_produced_eggs": self.total_produced_eggs,
            "total_fertilized_eggs": self.total_fertilized_eggs,
            "most_produced_eggs_chicken": most_produced.id if most_produced else None,
            "most_fertilized_eggs_chicken": most_fertilized.id if most_fertilized else None,
            "total_new_born_chickens": self.total_new_born_chickens,
            "total_revenue": self.total_revenue,
        }
