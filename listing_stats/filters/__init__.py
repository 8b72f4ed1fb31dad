"""Filter criteria and the price / rooms / rating filters."""
from .criteria import FilterCriteria, prompt_filter_criteria
from .pipeline import filter_by_price, filter_by_rooms, filter_by_rating, apply_filters
