"""
Aggregation 包

招聘帖集合 -> 六份统计视图。

Modules:
    - engine: Aggregator / AggregateResult
    - counters: 排序、Top-N、百分比、月份序列工具
"""

from .counters import (
    dense_series,
    percentage,
    round2,
    sort_months,
    sorted_entries,
    top_n,
)
from .engine import (
    AggregateResult,
    Aggregator,
    GlobalTotals,
    aggregate,
    empty_result,
)


__all__ = [
    # engine
    "Aggregator",
    "AggregateResult",
    "GlobalTotals",
    "aggregate",
    "empty_result",
    # counters
    "sorted_entries",
    "top_n",
    "round2",
    "percentage",
    "sort_months",
    "dense_series",
]
