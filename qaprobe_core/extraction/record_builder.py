"""
Function: build_record

Turn one product card into a ProductRecord.
"""

import logging

from ..errors import ExtractionError, NotFoundError
from ..models import MISSING_RATING, UNPARSEABLE_PRICE, ProductRecord
from ..pricing import parse_price
from .selectors import GridSelectors

logger = logging.getLogger(__name__)


async def build_record(driver, card, selectors: GridSelectors = GridSelectors()) -> ProductRecord:
    """
    Read name, price and rating from a product card.

    Only the name is required. Price text that cannot be parsed becomes
    0.0 and a missing rating becomes "0"; both are logged as warnings.

    Args:
        driver: ElementQuery capability
        card: Handle of the product card
        selectors: Field selectors relative to the card

    Returns:
        ProductRecord

    Raises:
        NotFoundError: the card has no name element
        ExtractionError: the name element is empty
    """
    name_el = await driver.find_element(selectors.product_name, root=card)
    name = await driver.get_text(name_el)
    if not name:
        raise ExtractionError("Product card has an empty name")

    price = UNPARSEABLE_PRICE
    price_text = ""
    try:
        price_el = await driver.find_element(selectors.product_price, root=card)
        price_text = await driver.get_text(price_el)
        price = parse_price(price_text)
    except NotFoundError:
        logger.debug(f"No price element for '{name}'")
    if price == UNPARSEABLE_PRICE:
        logger.warning(f"Could not parse price for '{name}' from {price_text!r}; using {UNPARSEABLE_PRICE}")

    rating_els = await driver.find_elements(selectors.product_rating, root=card)
    if rating_els:
        rating = await driver.get_text(rating_els[0]) or MISSING_RATING
    else:
        logger.warning(f"No rating for '{name}'; using {MISSING_RATING!r}")
        rating = MISSING_RATING

    record = ProductRecord(name=name, price=price, rating=rating)
    logger.debug(f"Built record: {record.name} | {record.price} | {record.rating}")
    return record
