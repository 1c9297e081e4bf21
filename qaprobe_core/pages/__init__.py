"""Page objects for the retail web suite."""

from qaprobe_core.pages.base import BasePage
from qaprobe_core.pages.home import HomePage, HOME_URL
from qaprobe_core.pages.search_results import SearchResultsPage

__all__ = [
    'BasePage',
    'HomePage',
    'HOME_URL',
    'SearchResultsPage',
]
