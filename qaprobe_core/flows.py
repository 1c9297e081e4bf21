"""
End-to-end Smart TV search flow.

home -> header check -> search -> price filter -> grid checks -> collect

Each step attaches a screenshot to the evidence sink under the step name
used in the suite's reports.
"""

import asyncio
import logging
from typing import List, Sequence

from qaprobe_logs.screenshots import take_screenshot

from .config import Config
from .models import ProductRecord
from .pages.home import HomePage
from .pages.search_results import SearchResultsPage

logger = logging.getLogger(__name__)

STEP_HOME = "Página inicial"
STEP_SEARCH = "Busca realizada"
STEP_FILTER = "Filtro aplicado"
STEP_GRID = "Grid de produtos"
STEP_PRODUCTS = "Produtos filtrados"
PRODUCTS_TABLE = "Produtos acima do preço esperado"


def products_table(products: Sequence[ProductRecord]) -> str:
    """Markdown table of the collected products"""
    lines = ["| # | Nome | Preço | Estrelas |", "|---|------|-------|----------|"]
    for i, p in enumerate(products, 1):
        lines.append(f"| {i} | {p.name} | {p.price:.2f} | {p.rating} |")
    return "\n".join(lines)


async def search_and_collect(driver, config: Config, evidence=None, sleep=asyncio.sleep) -> List[ProductRecord]:
    """
    Run the whole search scenario against a live driver.

    Args:
        driver: Driver capability (BrowserDriver or a test double)
        config: Suite configuration
        evidence: Optional evidence sink for screenshots and the result table
        sleep: Awaitable delay used by waits and retries

    Returns:
        Products priced above config.price_expected
    """
    price_range = config.price_range()
    if not price_range.is_coherent():
        logger.warning(f"Expected price {price_range.expected} is below the filter minimum {price_range.min}")

    home = HomePage(
        driver, url=config.web_base_url, evidence=evidence, timeout_ms=config.wait_timeout_ms, sleep=sleep
    )
    results = SearchResultsPage(
        driver,
        price_range,
        budget=config.retry_budget(),
        satisfaction_target=config.satisfaction_target,
        settle_delay_ms=config.settle_delay_ms,
        filter_settle_ms=config.filter_settle_ms,
        evidence=evidence,
        timeout_ms=config.wait_timeout_ms,
        sleep=sleep,
    )

    await home.go_to_home_page()
    await home.validate_header_elements()
    await take_screenshot(driver, evidence, STEP_HOME)

    await home.search_for(config.search_term)
    await take_screenshot(driver, evidence, STEP_SEARCH)

    await results.apply_price_filter()
    await take_screenshot(driver, evidence, STEP_FILTER)

    await results.validate_product_grid_visible()
    await results.validate_products_in_grid()
    await take_screenshot(driver, evidence, STEP_GRID)

    products = await results.get_products_above_price(price_range.expected)
    logger.info(f"=== PRODUTOS COM VALOR ACIMA DE R${price_range.expected} ===")
    for product in products:
        logger.info(str(product))

    await take_screenshot(driver, evidence, STEP_PRODUCTS)
    if evidence is not None:
        evidence.attach(PRODUCTS_TABLE, products_table(products))
    return products


def assert_products_above(products: Sequence[ProductRecord], expected: float) -> None:
    """Post-condition of the search scenario.

    Raises:
        AssertionError: no products, or one priced at or below expected
    """
    if not products:
        raise AssertionError("Nenhum produto encontrado acima do preço esperado!")
    cheap = [p for p in products if not p.price > expected]
    if cheap:
        names = ", ".join(f"{p.name} ({p.price})" for p in cheap)
        raise AssertionError(f"Existe produto com preço menor ou igual ao valor esperado! {names}")
