from .decimal_helpers import TWO_PLACES, to_money

__all__ = [
    "TWO_PLACES",
    "to_money",
]
