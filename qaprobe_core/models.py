"""
Product listing data structures.

ProductRecord instances live for one collection call: built per scraped
card, filtered by a price threshold, then kept or discarded.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict

# Sentinels for fields that could not be read from a card
UNPARSEABLE_PRICE = 0.0
MISSING_RATING = "0"


@dataclass
class ProductRecord:
    """A product card scraped from the results grid."""
    name: str
    price: float = UNPARSEABLE_PRICE
    rating: str = MISSING_RATING

    @property
    def is_price_degraded(self) -> bool:
        """True when the price text could not be turned into a number."""
        return self.price == UNPARSEABLE_PRICE

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        return f"● Informações do produto desejado:\n● Nome: {self.name} Estrelas: {self.rating}"


@dataclass(frozen=True)
class FilterRange:
    """Price filter bounds plus the threshold used to validate results."""
    min: float
    max: float
    expected: float

    def value_label(self) -> str:
        """Value attribute of the matching filter control, e.g. "2500-5000"."""
        return f"{format_bound(self.min)}-{format_bound(self.max)}"

    def is_coherent(self) -> bool:
        return self.min <= self.expected


def format_bound(value: float) -> str:
    """Render a bound the way the site writes it (no trailing ".0")."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)
