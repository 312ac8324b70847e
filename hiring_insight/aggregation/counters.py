"""计数/排序工具"""

import math
from typing import Iterable, List, Mapping

from hiring_insight.config import AggregationConfig
from hiring_insight.models.types import MonthCount, RankingEntry


def sorted_entries(counts: Mapping[str, int]) -> List[RankingEntry]:
    """按计数降序排列；计数相同保持首次出现顺序 (sorted 稳定)"""
    ordered = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [{"name": name, "count": count} for name, count in ordered]


def top_n(counts: Mapping[str, int], n: int) -> List[RankingEntry]:
    return sorted_entries(counts)[:n]


def round2(value: float) -> float:
    """保留两位小数，0.5 向上进位"""
    return math.floor(value * 100 + 0.5) / 100


def percentage(part: int, total: int) -> float:
    """百分比 (保留两位小数，total 为 0 时返回 0)"""
    if total <= 0:
        return 0
    return round2(part / total * 100)


def month_sort_key(year_month: str):
    """"unknown" 排在所有真实月份之后"""
    return (year_month == AggregationConfig.UNKNOWN_MONTH, year_month)


def sort_months(months: Iterable[str]) -> List[str]:
    return sorted(set(months), key=month_sort_key)


def dense_series(months: List[str], counts: Mapping[str, int]) -> List[MonthCount]:
    """每个月一条记录，无数据的月份补 0"""
    return [{"yearMonth": ym, "count": counts.get(ym, 0)} for ym in months]
