"""薪资解析/分档测试"""

import pytest

from hiring_insight.dictionaries.salary import SALARY_BAND_ORDER
from hiring_insight.normalizers import bucketize_salary, parse_salary_to_monthly_k


class TestParseSalary:
    """parse_salary_to_monthly_k 测试"""

    @pytest.mark.parametrize("raw, expected", [
        ("15k-25k", (15, 25)),
        ("15-25k", (15, 25)),
        ("15-25K·14薪", (15, 25)),
        ("15k-25", (15, 25)),
        ("18.5k-30k", (18.5, 30)),
        ("20k ~ 40k", (20, 40)),
    ])
    def test_monthly_k_ranges(self, raw, expected):
        assert parse_salary_to_monthly_k(raw) == expected

    def test_annual_wan_converted_and_rounded(self):
        assert parse_salary_to_monthly_k("20-40万/年") == (17, 33)
        assert parse_salary_to_monthly_k("年薪 30万-60万") == (25, 50)

    def test_monthly_wan(self):
        assert parse_salary_to_monthly_k("3-5万/月") == (30, 50)

    def test_single_value(self):
        assert parse_salary_to_monthly_k("25k") == (25, 25)

    @pytest.mark.parametrize("raw", ["面议", "薪资面议", "Competitive", "negotiable"])
    def test_negotiable(self, raw):
        assert parse_salary_to_monthly_k(raw) is None

    @pytest.mark.parametrize("raw", [None, "", "待遇优厚", 25000, "open"])
    def test_unparseable(self, raw):
        assert parse_salary_to_monthly_k(raw) is None

    def test_integral_values_are_ints(self):
        low, high = parse_salary_to_monthly_k("15k-25k")
        assert isinstance(low, int) and isinstance(high, int)


class TestBucketizeSalary:
    """bucketize_salary 测试"""

    @pytest.mark.parametrize("min_k, max_k, expected", [
        (5, 8, "<10k"),
        (8, 12, "10k-15k"),
        (10, 15, "10k-15k"),
        (15, 25, "20k-25k"),
        (17, 33, "25k-30k"),
        (30, 40, "30k-40k"),
        (40, 50, "40k-50k"),
        (40, 60, "50k+"),
        (100, 200, "50k+"),
    ])
    def test_average_into_half_open_bands(self, min_k, max_k, expected):
        assert bucketize_salary(min_k, max_k) == expected

    def test_band_order(self):
        assert SALARY_BAND_ORDER == (
            "<10k", "10k-15k", "15k-20k", "20k-25k", "25k-30k", "30k-40k", "40k-50k", "50k+",
        )
