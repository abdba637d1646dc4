"""
Test: Core Framework
Verifies the farm configuration and the farm clock.
"""

from dataclasses import FrozenInstanceError
from datetime import date
from decimal import Decimal

import pytest

from chicken_farm.config import FARM, FarmConfig
from chicken_farm.core.clock import FarmClock


class TestFarmConfig:
    """Tests for the fixed simulation constants."""

    def test_defaults(self):
        """Test the default run parameters."""
        assert FARM.start_date == date(2023, 1, 1)
        assert FARM.initial_chickens == 50
        assert FARM.simulation_days == 365
        assert FARM.egg_price == Decimal("0.25")
        assert FARM.currency == "EUR"
        assert FARM.locale == "nl"

    def test_age_gates_ordered(self):
        """Test laying starts before fertilization."""
        assert FARM.laying_age_months == 4
        assert FARM.fertile_age_months == 8
        assert FARM.laying_age_months < FARM.fertile_age_months

    def test_fertilization_chance(self):
        """Test draws 51-99 out of 0-99 fertilize."""
        assert FARM.fertilization_chance == pytest.approx(0.49)

    def test_frozen(self):
        """Test constants cannot be changed at runtime."""
        with pytest.raises(FrozenInstanceError):
            FARM.initial_chickens = 10

    def test_independent_instances(self):
        """Test each config gets its own start date."""
        assert FarmConfig().start_date == FARM.start_date


class TestFarmClock:
    """Tests for the shared simulated date."""

    def test_default_start(self):
        """Test the clock starts on the farm start date."""
        clock = FarmClock()
        assert clock.today == date(2023, 1, 1)
        assert clock.days_elapsed == 0

    def test_advance(self):
        """Test advancing by one and several days."""
        clock = FarmClock()

        assert clock.advance() == date(2023, 1, 2)
        assert clock.advance(30) == date(2023, 2, 1)
        assert clock.days_elapsed == 31

    def test_advance_over_year_end(self):
        """Test the date rolls over into the next year."""
        clock = FarmClock(today=date(2023, 12, 31))
        clock.advance()
        assert clock.today == date(2024, 1, 1)

    def test_advance_zero(self):
        """Test advancing zero days keeps the date."""
        clock = FarmClock()
        clock.advance(0)
        assert clock.today == FARM.start_date

    def test_cannot_go_back(self):
        """Test negative steps are refused."""
        clock = FarmClock()
        with pytest.raises(ValueError):
            clock.advance(-1)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
