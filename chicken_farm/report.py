"""
Chicken Farm: Report
Currency formatting and the human-readable end-of-run report.
"""

from decimal import Decimal
from typing import TYPE_CHECKING, Union

from babel.numbers import format_currency as _babel_format_currency

from .config import FARM

if TYPE_CHECKING:
    from .core.barn import Barn


def format_currency(amount: Union[Decimal, float, int],
                    currency: str = FARM.currency,
                    locale: str = FARM.locale) -> str:
    """Format an amount as a localized currency string with two decimals."""
    return _babel_format_currency(Decimal(str(amount)), currency, locale=locale)


def generate_report(barn: "Barn") -> str:
    """Generate the question and answer report for a finished run."""
    most_produced = barn.most_produced_eggs_chicken
    most_fertilized = barn.most_fertilized_eggs_chicken

    lines = [
        "How many eggs are produced in the measured period ?",
        f"Eggs produced: {barn.total_produced_eggs}",
        "",
        "How many eggs will be fertilized in the measured period "
        "( The chance for a fertilized egg will be 50% ) ?",
        f"Eggs fertilized: {barn.total_fertilized_eggs}",
        "",
        "Which of the chickens produced the most eggs in the measured period ?",
    ]

    if most_produced is not None:
        lines.append(
            f"Chicken with ID {most_produced.id} produced the most eggs "
            f"with a number of {most_produced.produced_eggs} eggs."
        )
    else:
        lines.append("No chicken produced any eggs in the measured period.")

    lines.extend([
        "",
        "Which of the chickens fertilized the most eggs in the measured period ?",
    ])

    if most_fertilized is not None:
        lines.append(
            f"Chicken with ID {most_fertilized.id} fertilized the most eggs "
            f"with a number of {most_fertilized.fertilized_eggs} eggs."
        )
    else:
        lines.append("No chicken fertilized any eggs in the measured period.")

    lines.extend([
        "",
        "What will be the total revenue when the unfertilized eggs will be sold "
        f"for {FARM.egg_price} euro each ?",
        f"Total revenue: {barn.get_total_revenue()}",
        "",
        "How many new chickens will be born in the measured period "
        f"( a new born chicken can lay eggs {FARM.laying_age_months} months after "
        f"its egg was produced and can have fertilized eggs "
        f"{FARM.fertile_age_months} months after its egg was produced ) ?",
        f"Newborn chickens: {barn.total_new_born_chickens}",
    ])

    return "\n".join(lines)
