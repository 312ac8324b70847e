"""TypedDict 定义 - 聚合输出文档结构

pydantic 模型用于输入校验，TypedDict 描述六份输出 JSON 的结构。
键名保持 camelCase，直接对应前端读取的字段。
"""

from typing import Dict, List, TypedDict


class RankingEntry(TypedDict):
    """排行项"""
    name: str
    count: int


class MonthCount(TypedDict):
    """月度计数"""
    yearMonth: str
    count: int


class MonthRate(TypedDict):
    """月度计数 + 占比"""
    yearMonth: str
    count: int
    percentage: float


class SalaryBucketEntry(TypedDict):
    """薪资档位"""
    range: str
    count: int


class DateRange(TypedDict):
    start: str
    end: str


class MonthlyStatsDict(TypedDict):
    """monthly-stats.json 的单月记录"""
    yearMonth: str
    totalPostings: int
    byCity: Dict[str, int]
    byTechStack: Dict[str, int]
    byCategory: Dict[str, int]
    byCompanyType: Dict[str, int]
    remoteCount: int
    overseasCount: int


class OverviewDict(TypedDict):
    """overview.json"""
    totalPostings: int
    totalMonths: int
    dateRange: DateRange
    topCities: List[RankingEntry]
    topTechStack: List[RankingEntry]
    topCompanies: List[RankingEntry]
    remotePercentage: float
    overseasPercentage: float


class CityStatsDict(TypedDict):
    """city-stats.json"""
    rankings: List[RankingEntry]
    trends: Dict[str, List[MonthCount]]


class TechStatsDict(TypedDict):
    """tech-stats.json"""
    rankings: List[RankingEntry]
    trends: Dict[str, List[MonthCount]]
    byCategory: Dict[str, List[RankingEntry]]


class CompanyStatsDict(TypedDict):
    """company-stats.json"""
    rankings: List[RankingEntry]
    byType: Dict[str, int]
    salaryDistribution: List[SalaryBucketEntry]
    salaryValidSamples: int


class TrendStatsDict(TypedDict):
    """trend-stats.json"""
    postingTrend: List[MonthCount]
    categoryTrend: Dict[str, List[MonthCount]]
    remoteTrend: List[MonthRate]
    overseasTrend: List[MonthRate]
    experienceTrend: Dict[str, List[MonthCount]]
    educationTrend: Dict[str, List[MonthCount]]
