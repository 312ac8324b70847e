"""薪资解析模块

把招聘帖中的自由文本薪资统一换算为月薪 k 区间。

Examples:
    - "15k-25k" -> (15, 25)
    - "15-25K·14薪" -> (15, 25)
    - "20-40万/年" -> (17, 33) (年薪万元 -> 月薪 k)
    - "3-5万/月" -> (30, 50)
    - "25k" -> (25, 25)
    - "面议" -> None
"""

import math
import re
from typing import Any, Optional, Tuple, Union

from hiring_insight.dictionaries.salary import NEGOTIABLE_PATTERN, SALARY_BANDS

Number = Union[int, float]
SalaryRange = Tuple[Number, Number]

_NUM = r"(\d+(?:\.\d+)?)"
_SEP = r"\s*[-~～—–至到]\s*"


class SalaryParser:
    """
    薪资文本 -> 月薪 k 区间

    模式按顺序尝试，先命中先返回。
    """

    NEGOTIABLE = re.compile(NEGOTIABLE_PATTERN, re.IGNORECASE)

    # 上界带 k，下界单位省略: "15-25k"
    UPPER_K_RANGE = re.compile(_NUM + r"\s*k?" + _SEP + _NUM + r"\s*k")
    # 下界带 k: "15k-25"
    LOWER_K_RANGE = re.compile(_NUM + r"\s*k" + _SEP + _NUM + r"\s*k?")
    # 万元区间: "20-40万/年" / "20万-40万"
    WAN_RANGE = re.compile(_NUM + r"\s*万?" + _SEP + _NUM + r"\s*万")
    # 单值: "25k"
    SINGLE_K = re.compile(_NUM + r"\s*k")

    YEARLY_MARKER = re.compile(r"年")

    def parse(self, raw: Any) -> Optional[SalaryRange]:
        """
        解析薪资文本

        Args:
            raw: 原始薪资文本

        Returns:
            (min_k, max_k)；面议/无法识别返回 None

        Examples:
            >>> parser = SalaryParser()
            >>> parser.parse("15k-25k")
            (15, 25)
            >>> parser.parse("20-40万/年")
            (17, 33)
        """
        if not isinstance(raw, str):
            return None

        text = raw.strip().lower()
        if not text or self.NEGOTIABLE.search(text):
            return None

        for pattern in (self.UPPER_K_RANGE, self.LOWER_K_RANGE):
            match = pattern.search(text)
            if match:
                return (_to_number(match.group(1)), _to_number(match.group(2)))

        match = self.WAN_RANGE.search(text)
        if match:
            divisor = 12 if self.YEARLY_MARKER.search(text) else 1
            return (
                _round_half_up(float(match.group(1)) * 10 / divisor),
                _round_half_up(float(match.group(2)) * 10 / divisor),
            )

        match = self.SINGLE_K.search(text)
        if match:
            value = _to_number(match.group(1))
            return (value, value)

        return None


def _to_number(text: str) -> Number:
    value = float(text)
    return int(value) if value.is_integer() else value


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def bucketize_salary(min_k: Number, max_k: Number) -> str:
    """
    月薪区间 -> 薪资档位 (按区间均值，左闭右开)

    Args:
        min_k: 月薪下界 (k)
        max_k: 月薪上界 (k)

    Returns:
        档位标签，如 "15k-20k"
    """
    avg = (min_k + max_k) / 2
    for upper, label in SALARY_BANDS:
        if upper is None or avg < upper:
            return label
    return SALARY_BANDS[-1][1]


# 便捷函数
_parser = SalaryParser()


def parse_salary_to_monthly_k(raw: Any) -> Optional[SalaryRange]:
    """
    薪资解析 (便捷函数)

    Args:
        raw: 原始薪资文本

    Returns:
        (min_k, max_k) 或 None
    """
    return _parser.parse(raw)
