"""
Shared test fixtures: a scripted random source and a fixed farm clock.
"""

from datetime import date
import random

import pytest

from chicken_farm.config import FARM
from chicken_farm.core.clock import FarmClock


class ScriptedRandom(random.Random):
    """
    Random source with queued answers per draw range.

    - randint(0, 2): eggs laid today, from ``eggs`` then ``default_eggs``
    - randint(0, 99): fertilization draws, from ``fertilization`` then
      ``default_fertilization``
    - randint(0, 9999): id suffixes, counting up from 1
    - anything else (birth day): the lower bound
    """

    def __init__(self, eggs=(), fertilization=(), default_eggs=0, default_fertilization=0):
        super().__init__(0)
        self.queues = {
            (0, FARM.max_eggs_per_day): list(eggs),
            (0, FARM.fertilization_draw_max): list(fertilization),
        }
        self.defaults = {
            (0, FARM.max_eggs_per_day): default_eggs,
            (0, FARM.fertilization_draw_max): default_fertilization,
        }
        self.suffix = 0

    def randint(self, a, b):
        key = (a, b)
        if key in self.queues:
            queue = self.queues[key]
            return queue.pop(0) if queue else self.defaults[key]
        if key == (0, FARM.id_suffix_max):
            self.suffix += 1
            return self.suffix
        return a


@pytest.fixture
def scripted():
    """Factory for scripted random sources."""
    return ScriptedRandom


@pytest.fixture
def clock():
    """Farm clock at the default start date."""
    return FarmClock(today=FARM.start_date)


# Birth dates relative to the 2023-01-01 start date
CHICK_DOB = date(2022, 12, 1)    # 1 month old
LAYER_DOB = date(2022, 8, 1)     # 5 months old
BREEDER_DOB = date(2022, 4, 1)   # 9 months old


@pytest.fixture
def dobs():
    """Birth dates for a chick, a layer and a breeder."""
    return {"chick": CHICK_DOB, "layer": LAYER_DOB, "breeder": BREEDER_DOB}
