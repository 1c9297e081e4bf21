"""Tests for product data structures"""

from qaprobe_core.models import FilterRange, ProductRecord, format_bound


class TestProductRecord:

    def test_defaults_are_sentinels(self):
        record = ProductRecord("TV")
        assert record.price == 0.0
        assert record.rating == "0"
        assert record.is_price_degraded

    def test_report_line(self):
        text = str(ProductRecord("Smart TV 50", 3999.0, "4.6"))
        assert text.splitlines() == [
            "● Informações do produto desejado:",
            "● Nome: Smart TV 50 Estrelas: 4.6",
        ]

    def test_to_dict(self):
        assert ProductRecord("TV", 3600.0, "5").to_dict() == {"name": "TV", "price": 3600.0, "rating": "5"}


class TestFilterRange:

    def test_value_label(self):
        assert FilterRange(2500.0, 5000.0, 3500.0).value_label() == "2500-5000"

    def test_coherence_is_reported_not_enforced(self):
        assert FilterRange(2500, 5000, 3500).is_coherent()
        assert not FilterRange(4000, 5000, 3500).is_coherent()

    def test_format_bound(self):
        assert format_bound(2500) == "2500"
        assert format_bound(2500.0) == "2500"
        assert format_bound(99.9) == "99.9"
