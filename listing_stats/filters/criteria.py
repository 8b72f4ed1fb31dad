"""
Filter criteria and how they are collected.

The filters only ever see a FilterCriteria; whether the values came from the
command line or from prompts is decided by the caller.
"""

from dataclasses import dataclass
from typing import Callable, Dict

from listing_stats.data.parsing import parse_decimal, parse_integer


# Prompt order is fixed: price bounds, room bounds, rating floor
PROMPTS = {
    'min_price': 'Enter minimum price: ',
    'max_price': 'Enter maximum price: ',
    'min_rooms': 'Enter minimum rooms: ',
    'max_rooms': 'Enter maximum rooms: ',
    'min_rating': 'Enter minimum rating: ',
}


@dataclass(frozen=True)
class FilterCriteria:
    """Range bounds for the three listing filters. Bounds are inclusive."""
    min_price: float
    max_price: float
    min_rooms: float
    max_rooms: float
    min_rating: float

    @classmethod
    def from_text(cls, values: Dict[str, str]) -> 'FilterCriteria':
        """
        Build criteria from raw text values keyed by field name.

        Prices and rating convert as decimals, rooms as integers. Text that
        does not convert becomes NaN, which makes the matching filter reject
        every listing. Bounds are not checked against each other.
        """
        return cls(
            min_price=parse_decimal(values['min_price']),
            max_price=parse_decimal(values['max_price']),
            min_rooms=parse_integer(values['min_rooms']),
            max_rooms=parse_integer(values['max_rooms']),
            min_rating=parse_decimal(values['min_rating']),
        )

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            'min_price': self.min_price,
            'max_price': self.max_price,
            'min_rooms': self.min_rooms,
            'max_rooms': self.max_rooms,
            'min_rating': self.min_rating,
        }


def prompt_filter_criteria(
    ask: Callable[[str], str] = input,
    **given: str
) -> FilterCriteria:
    """
    Collect the five filter parameters, prompting for any not already given.

    Args:
        ask: Prompt function, `input` by default
        **given: Values already known (e.g. from command-line flags), as text

    Returns:
        FilterCriteria
    """
    values = {}
    for name, prompt in PROMPTS.items():
        value = given.get(name)
        values[name] = value if value is not None else ask(prompt)
    return FilterCriteria.from_text(values)
