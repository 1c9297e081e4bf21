"""CSS selectors for the retail search results page."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GridSelectors:
    product_card: str = ".ProductCard_productCard__MwY4X"
    product_name: str = ".ProductCard_productName__mwx7Y"
    product_price: str = ".ProductCard_productPrice__XFEqu"
    product_rating: str = ".avg-rating"
    product_grid: str = ".ProductGrid_productGallery__n3L6E"
    filter_checkbox: str = "input[data-fs-input='true'][type='checkbox']"
    show_all_filters: str = "button.FilterFacetCheckbox_showAll__e_whq"
    price_accordion: str = "xpath=//button[contains(.,'Preço')]"
    load_more: str = "button[data-testid='pagination-button']"

    def filter_with_value(self, value: str) -> str:
        return f"{self.filter_checkbox}[value='{value}']"


@dataclass(frozen=True)
class HeaderSelectors:
    search_input: str = "input[data-testid='fs-input']"
    search_button: str = "button[data-testid='fs-search-button']"
    header: str = "[data-testid='fs-navbar-header']"
    logo: str = "img[title='Americanas']"
    login_button: str = ".ButtonLogin_Container__sgzuk, a[href='/login']"
    cart_button: str = "button[data-testid='cart-toggle']"
