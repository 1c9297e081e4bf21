"""
Extraction module - product scraping from the results grid

Filter location, per-card record building and the pagination-aware
collector.
"""

from qaprobe_core.extraction.selectors import GridSelectors, HeaderSelectors
from qaprobe_core.extraction.filter_locator import (
    choose_filter_index,
    locate_price_filter_control,
)
from qaprobe_core.extraction.record_builder import build_record
from qaprobe_core.extraction.collector import CollectorState, ProductCollector

__all__ = [
    'GridSelectors',
    'HeaderSelectors',
    'choose_filter_index',
    'locate_price_filter_control',
    'build_record',
    'CollectorState',
    'ProductCollector',
]
