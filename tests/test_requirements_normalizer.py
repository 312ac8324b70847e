"""经验/学历要求归一化测试"""

import pytest

from hiring_insight.dictionaries.requirements import EDUCATION_BUCKETS, EXPERIENCE_BUCKETS
from hiring_insight.normalizers import bucket_by_years, normalize_education, normalize_experience


class TestNormalizeExperience:
    """normalize_experience 测试"""

    @pytest.mark.parametrize("raw", ["不限", "经验不限", "无要求", "No experience required"])
    def test_unlimited(self, raw):
        assert normalize_experience(raw) == "不限"

    @pytest.mark.parametrize("raw", ["应届生", "实习生", "校招", "Intern", "new grad welcome"])
    def test_new_grad(self, raw):
        assert normalize_experience(raw) == "应届/实习"

    @pytest.mark.parametrize("raw, expected", [
        ("1-3年", "1-3年"),
        ("3-5年", "3-5年"),
        ("2-4年", "3-5年"),
        ("5-10年", "5-10年"),
        ("0-1年", "应届/实习"),
        ("3~5 years", "3-5年"),
        ("三到五年", "3-5年"),
        ("五至十年", "5-10年"),
        ("一到三年", "1-3年"),
    ])
    def test_range_uses_midpoint(self, raw, expected):
        assert normalize_experience(raw) == expected

    @pytest.mark.parametrize("raw, expected", [
        ("1年以上", "1-3年"),
        ("3年以上", "3-5年"),
        ("5年以上", "5-10年"),
        ("10年以上", "10年以上"),
        ("5+ years", "5-10年"),
        ("三年以上", "3-5年"),
        ("十年以上", "10年以上"),
        ("十五年以上", "10年以上"),
        ("两年以上", "1-3年"),
    ])
    def test_single_bound(self, raw, expected):
        assert normalize_experience(raw) == expected

    @pytest.mark.parametrize("raw, expected", [
        ("P6", "3-5年"),
        ("P7+", "5-10年"),
        ("P9", "10年以上"),
        ("P3", "应届/实习"),
    ])
    def test_seniority_level(self, raw, expected):
        assert normalize_experience(raw) == expected

    def test_experienced_hire_phrase(self):
        assert normalize_experience("社招") == "3-5年"

    @pytest.mark.parametrize("raw", ["资深优先", None, "", 5, ["3年"]])
    def test_unrecognized_is_other(self, raw):
        assert normalize_experience(raw) == "其他"

    @pytest.mark.parametrize("raw", ["2024年毕业", "2023年入职", "成立于2015年"])
    def test_calendar_year_not_experience(self, raw):
        assert normalize_experience(raw) == "其他"

    def test_calendar_year_alongside_requirement(self):
        assert normalize_experience("2024年招聘，3年以上") == "3-5年"

    def test_unlimited_checked_before_numbers(self):
        assert normalize_experience("不限，3年以上优先") == "不限"

    def test_result_always_in_buckets(self):
        for raw in ["1-3年", "P8", "社招", "abc", None]:
            assert normalize_experience(raw) in EXPERIENCE_BUCKETS


class TestBucketByYears:
    """bucket_by_years 测试"""

    def test_boundaries_are_lower_inclusive(self):
        assert bucket_by_years(0.5) == "应届/实习"
        assert bucket_by_years(1) == "1-3年"
        assert bucket_by_years(3) == "3-5年"
        assert bucket_by_years(5) == "5-10年"
        assert bucket_by_years(10) == "10年以上"


class TestNormalizeEducation:
    """normalize_education 测试"""

    @pytest.mark.parametrize("raw, expected", [
        ("学历不限", "不限"),
        ("博士优先", "博士"),
        ("PhD", "博士"),
        ("硕士及以上", "硕士及以上"),
        ("Master's degree", "硕士及以上"),
        ("本科及以上", "本科及以上"),
        ("统招本科", "本科及以上"),
        ("985/211 优先", "本科及以上"),
        ("Bachelor", "本科及以上"),
        ("大专", "大专及以上"),
        ("高中", "其他"),
    ])
    def test_buckets(self, raw, expected):
        assert normalize_education(raw) == expected

    def test_priority_higher_degree_wins(self):
        assert normalize_education("本科，硕士优先") == "硕士及以上"
        assert normalize_education("不限，本科优先") == "不限"

    @pytest.mark.parametrize("raw, expected", [
        ("专业不限，本科及以上", "本科及以上"),
        ("不限专业 硕士", "硕士及以上"),
        ("年龄不限，大专", "大专及以上"),
        ("专业不限", "其他"),
        ("专业不限，学历不限", "不限"),
    ])
    def test_unrelated_unlimited_phrases_ignored(self, raw, expected):
        assert normalize_education(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "   ", 3])
    def test_invalid_input(self, raw):
        assert normalize_education(raw) == "其他"

    def test_result_always_in_buckets(self):
        for raw in ["本科", "xyz", None, "博士"]:
            assert normalize_education(raw) in EDUCATION_BUCKETS
