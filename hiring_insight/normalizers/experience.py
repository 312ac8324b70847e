"""经验要求归一化模块

自由文本经验要求 -> 固定分桶。规则按顺序匹配，先命中先返回:

    1. 不限
    2. 应届/实习
    3. 区间 "N-M年" (按区间中点分桶)
    4. 单值 "N年以上" / "N+ years" (按该数值分桶)
    5. 职级 "P6" / "P7+"
    6. "社招" / "有经验" -> 3-5年
    7. 其他
"""

import re
from typing import Any, Optional

from hiring_insight.dictionaries.requirements import (
    CHINESE_DIGITS,
    EXP_3_5,
    EXP_10_PLUS,
    EXP_NEW_GRAD,
    EXP_OTHER,
    EXP_UNLIMITED,
    EXPERIENCE_NEW_GRAD_KEYWORDS,
    EXPERIENCE_SENIOR_KEYWORDS,
    EXPERIENCE_UNLIMITED_KEYWORDS,
    EXPERIENCE_YEAR_BOUNDARIES,
    SENIORITY_LEVEL_BUCKETS,
)

# 最多两位整数，"2024年" 这类年份不算经验年限
_NUM = r"(?<![\d.])(\d{1,2}(?:\.\d+)?)"
_YEAR_UNIT = r"(?:年|years?|yrs?)"

RANGE_PATTERN = re.compile(_NUM + r"\s*[-~～—–到至]\s*" + _NUM + r"\s*" + _YEAR_UNIT)
SINGLE_PATTERN = re.compile(_NUM + r"\s*\+?\s*" + _YEAR_UNIT)
LEVEL_PATTERN = re.compile(r"(?<![a-z])p(\d{1,2})(?!\d)")
CHINESE_NUMERAL_PATTERN = re.compile(r"[一二两三四五六七八九十]+")


def bucket_by_years(years: float) -> str:
    """年数 -> 经验分桶 (下界闭区间)"""
    for lower, bucket in EXPERIENCE_YEAR_BOUNDARIES:
        if years >= lower:
            return bucket
    return EXP_NEW_GRAD


def _chinese_numeral_value(run: str) -> Optional[int]:
    """中文数字串 -> 整数 (五 -> 5, 十五 -> 15, 二十 -> 20)；无法识别返回 None"""
    if "十" not in run:
        return CHINESE_DIGITS[run] if len(run) == 1 else None
    tens, _, ones = run.partition("十")
    if len(tens) > 1 or len(ones) > 1 or ones == "十":
        return None
    return CHINESE_DIGITS.get(tens, 1) * 10 + CHINESE_DIGITS.get(ones, 0)


def _replace_chinese_numerals(text: str) -> str:
    def replace(match):
        value = _chinese_numeral_value(match.group(0))
        return match.group(0) if value is None else str(value)

    return CHINESE_NUMERAL_PATTERN.sub(replace, text)


def _level_bucket(level: int) -> str:
    if level >= max(SENIORITY_LEVEL_BUCKETS):
        return EXP_10_PLUS
    if level <= min(SENIORITY_LEVEL_BUCKETS):
        return EXP_NEW_GRAD
    return SENIORITY_LEVEL_BUCKETS[level]


def normalize_experience(raw: Any) -> str:
    """
    经验要求归一化

    Args:
        raw: 原始经验要求文本

    Returns:
        经验分桶 (EXPERIENCE_BUCKETS 之一)

    Examples:
        >>> normalize_experience("3-5年")
        '3-5年'
        >>> normalize_experience("5年以上")
        '5-10年'
        >>> normalize_experience("应届生可")
        '应届/实习'
    """
    if not isinstance(raw, str):
        return EXP_OTHER

    text = _replace_chinese_numerals(raw.strip().lower())
    if not text:
        return EXP_OTHER

    if any(kw in text for kw in EXPERIENCE_UNLIMITED_KEYWORDS):
        return EXP_UNLIMITED

    if any(kw in text for kw in EXPERIENCE_NEW_GRAD_KEYWORDS):
        return EXP_NEW_GRAD

    match = RANGE_PATTERN.search(text)
    if match:
        low, high = float(match.group(1)), float(match.group(2))
        return bucket_by_years((low + high) / 2)

    match = SINGLE_PATTERN.search(text)
    if match:
        return bucket_by_years(float(match.group(1)))

    match = LEVEL_PATTERN.search(text)
    if match:
        return _level_bucket(int(match.group(1)))

    if any(kw in text for kw in EXPERIENCE_SENIOR_KEYWORDS):
        return EXP_3_5

    return EXP_OTHER
