"""
Price filter locator.

Finds the filter checkbox matching a price range. Sites rarely offer the
exact range asked for, so the search degrades through three tiers before
falling back to the first control on the page:

1. exact: value attribute equals "{min}-{max}"
2. contains: value mentions both bounds as substrings
3. superset: value parses as "low-high" with low <= min and high >= max

Selection is first-match-wins in DOM order, so the same snapshot always
yields the same control.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from ..capabilities import EvidenceSink
from ..errors import NotFoundError
from ..models import FilterRange, format_bound
from .selectors import GridSelectors

logger = logging.getLogger(__name__)

TIER_EXACT = "exact"
TIER_CONTAINS = "contains"
TIER_SUPERSET = "superset"
TIER_FALLBACK = "fallback"


def _parse_range(value: str) -> Optional[Tuple[float, float]]:
    parts = (value or "").split("-")
    if len(parts) != 2:
        return None
    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        return None


def choose_filter_index(values: Sequence[Optional[str]], low: float, high: float) -> Tuple[int, str]:
    """
    Pick the control whose value best matches [low, high].

    Args:
        values: Value attributes of the candidate controls, in DOM order
        low: Lower bound of the wanted range
        high: Upper bound of the wanted range

    Returns:
        (index into values, tier name)

    Raises:
        NotFoundError: values is empty
    """
    if not values:
        raise NotFoundError("no price filter available")

    low_label, high_label = format_bound(low), format_bound(high)
    exact = f"{low_label}-{high_label}"
    normalized: List[str] = [v or "" for v in values]

    for i, value in enumerate(normalized):
        if value == exact:
            return i, TIER_EXACT

    for i, value in enumerate(normalized):
        if low_label in value and high_label in value:
            return i, TIER_CONTAINS

    for i, value in enumerate(normalized):
        bounds = _parse_range(value)
        if bounds and bounds[0] <= low and bounds[1] >= high:
            return i, TIER_SUPERSET

    return 0, TIER_FALLBACK


async def locate_price_filter_control(
    driver,
    price_range: FilterRange,
    selectors: GridSelectors = GridSelectors(),
    evidence: Optional[EvidenceSink] = None,
):
    """
    Return the checkbox handle for price_range.

    Tries the exact-value selector first; otherwise reads every filter
    checkbox and applies choose_filter_index.

    Raises:
        NotFoundError: the page has no price filter checkboxes at all
    """
    exact_value = price_range.value_label()
    logger.debug(f"Looking for price filter with value={exact_value}")

    exact = await driver.find_elements(selectors.filter_with_value(exact_value))
    if exact:
        logger.debug(f"Exact price filter found: {exact_value}")
        return exact[0]

    controls = await driver.find_elements(selectors.filter_checkbox)
    logger.debug(f"Price filters available: {len(controls)}")
    values = [await driver.get_attribute(control, "value") for control in controls]

    index, tier = choose_filter_index(values, price_range.min, price_range.max)
    chosen = values[index]

    if tier == TIER_FALLBACK:
        note = f"No price filter matches {exact_value}; using first available: {chosen}"
        logger.warning(note)
        if evidence is not None:
            evidence.attach("Price filter fallback", note)
    else:
        logger.debug(f"Price filter matched by {tier}: {chosen}")

    return controls[index]
