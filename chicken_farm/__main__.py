"""
Chicken Farm: Entry Point
Runs the default barn simulation and prints the report.
"""

import logging

from .config import FARM
from .core.barn import Barn
from .report import generate_report


def main() -> int:
    """Simulate the default flock for the default period."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    barn = Barn(FARM.initial_chickens)
    barn.simulate(FARM.simulation_days)

    print(generate_report(barn))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
