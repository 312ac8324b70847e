"""聚合引擎

JobPosting 集合 -> 六份统计视图 (monthly / overview / city / tech / company / trend)。

处理流程:
    1. 每条招聘帖只归一化一次 (城市展开、技术栈、岗位分类、经验、学历、薪资)
    2. 按 yearMonth 分组，月份字典序排列，"unknown" 排最后
    3. 逐月统计 + 全局统计
    4. 基于统计结果生成各视图

引擎是纯函数: 不做 I/O，不修改输入，对同一输入集合 (任意顺序) 输出完全一致。
"""

from collections import Counter, defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Union

from pydantic import ValidationError

from hiring_insight.aggregation.counters import (
    dense_series,
    month_sort_key,
    percentage,
    sort_months,
    sorted_entries,
    top_n,
)
from hiring_insight.config import AggregationConfig
from hiring_insight.dictionaries.requirements import EDUCATION_BUCKETS, EXPERIENCE_BUCKETS
from hiring_insight.dictionaries.salary import SALARY_BAND_ORDER
from hiring_insight.logging_config import get_logger, log_function
from hiring_insight.models.posting import JobPosting
from hiring_insight.models.types import (
    CityStatsDict,
    CompanyStatsDict,
    MonthlyStatsDict,
    MonthRate,
    OverviewDict,
    TechStatsDict,
    TrendStatsDict,
)
from hiring_insight.normalizers.category import CategoryNormalizer
from hiring_insight.normalizers.city import CityNormalizer
from hiring_insight.normalizers.education import normalize_education
from hiring_insight.normalizers.experience import normalize_experience
from hiring_insight.normalizers.salary import SalaryParser, SalaryRange, bucketize_salary
from hiring_insight.normalizers.tech import TechNormalizer

logger = get_logger(__name__)


@dataclass
class NormalizedPosting:
    """单条招聘帖的归一化结果 (列表保留原始出现次数)"""
    posting: JobPosting
    year_month: str
    cities: List[str]
    techs: List[str]
    categories: List[str]
    experience: Optional[str]
    education: Optional[str]
    salary: Optional[SalaryRange]


@dataclass
class GlobalTotals:
    """全局统计 (视图之外也对调用方开放)"""
    total: int = 0
    cities: Counter = field(default_factory=Counter)
    techs: Counter = field(default_factory=Counter)
    categories: Counter = field(default_factory=Counter)
    company_types: Counter = field(default_factory=Counter)
    companies: Counter = field(default_factory=Counter)
    experience: Counter = field(default_factory=Counter)
    education: Counter = field(default_factory=Counter)
    salary_bands: Counter = field(default_factory=Counter)
    salary_valid: int = 0
    remote: int = 0
    overseas: int = 0


@dataclass
class AggregateResult:
    """六份视图 + 全局统计"""
    monthly_stats: List[MonthlyStatsDict]
    overview: OverviewDict
    city_stats: CityStatsDict
    tech_stats: TechStatsDict
    company_stats: CompanyStatsDict
    trend_stats: TrendStatsDict
    totals: GlobalTotals

    def views(self) -> Dict[str, Any]:
        """视图名 -> JSON 文档 (键与 AggregationConfig.OUTPUT_FILES 一致)"""
        return {
            "monthly_stats": self.monthly_stats,
            "overview": self.overview,
            "city_stats": self.city_stats,
            "tech_stats": self.tech_stats,
            "company_stats": self.company_stats,
            "trend_stats": self.trend_stats,
        }


PostingInput = Union[JobPosting, Mapping[str, Any]]


class Aggregator:
    """
    招聘帖聚合器

    归一化器与阈值通过构造参数注入，默认使用内置词典与 AggregationConfig。
    """

    def __init__(
        self,
        tech_normalizer: Optional[TechNormalizer] = None,
        city_normalizer: Optional[CityNormalizer] = None,
        category_normalizer: Optional[CategoryNormalizer] = None,
        salary_parser: Optional[SalaryParser] = None,
        experience_normalizer: Callable[[Any], str] = normalize_experience,
        education_normalizer: Callable[[Any], str] = normalize_education,
        overview_top_n: int = AggregationConfig.OVERVIEW_TOP_N,
        trend_top_n: int = AggregationConfig.TREND_TOP_N,
        tech_min_count: int = AggregationConfig.TECH_MIN_COUNT,
        category_min_count: int = AggregationConfig.CATEGORY_MIN_COUNT,
    ):
        self.tech_normalizer = tech_normalizer or TechNormalizer()
        self.city_normalizer = city_normalizer or CityNormalizer()
        self.category_normalizer = category_normalizer or CategoryNormalizer()
        self.salary_parser = salary_parser or SalaryParser()
        self.experience_normalizer = experience_normalizer
        self.education_normalizer = education_normalizer
        self.overview_top_n = overview_top_n
        self.trend_top_n = trend_top_n
        self.tech_min_count = tech_min_count
        self.category_min_count = category_min_count

    @log_function()
    def aggregate(self, postings: Iterable[PostingInput]) -> AggregateResult:
        """
        聚合全部招聘帖

        Args:
            postings: JobPosting (或同结构 dict) 集合，视为已去重；
                校验失败的 dict 记录告警后跳过

        Returns:
            AggregateResult；空输入返回全部字段齐全的零值视图
        """
        records = [self._normalize(p) for p in _valid_postings(postings)]
        # 固定处理顺序，保证同计数项的排列与输入顺序无关
        records.sort(key=lambda r: (
            month_sort_key(r.year_month),
            r.posting.issue_number,
            r.posting.comment_id,
            r.posting.id,
        ))

        by_month: Dict[str, List[NormalizedPosting]] = defaultdict(list)
        for record in records:
            by_month[record.year_month].append(record)
        months = sort_months(by_month)

        totals = self._global_totals(records)
        monthly_stats = [self._monthly_rollup(ym, by_month[ym]) for ym in months]

        return AggregateResult(
            monthly_stats=monthly_stats,
            overview=self._overview(months, totals),
            city_stats=self._city_stats(months, by_month, totals),
            tech_stats=self._tech_stats(months, by_month, totals),
            company_stats=self._company_stats(totals),
            trend_stats=self._trend_stats(months, by_month, totals),
            totals=totals,
        )

    # ========== 归一化 ==========

    def _normalize(self, posting: JobPosting) -> NormalizedPosting:
        cities: List[str] = []
        for raw in posting.location:
            cities.extend(self.city_normalizer.normalize(raw))

        techs = [t for t in map(self.tech_normalizer.normalize, posting.tech_stack) if t]

        categories = []
        for position in posting.positions:
            category = self.category_normalizer.normalize(position.category)
            if category:
                categories.append(category)

        # 原文为空的要求不计入分布
        experience = (
            self.experience_normalizer(posting.experience_req)
            if posting.experience_req else None
        )
        education = (
            self.education_normalizer(posting.education_req)
            if posting.education_req else None
        )

        return NormalizedPosting(
            posting=posting,
            year_month=posting.year_month or AggregationConfig.UNKNOWN_MONTH,
            cities=cities,
            techs=techs,
            categories=categories,
            experience=experience,
            education=education,
            salary=self.salary_parser.parse(posting.salary_range),
        )

    # ========== 统计 ==========

    def _monthly_rollup(self, year_month: str, records: List[NormalizedPosting]) -> MonthlyStatsDict:
        by_city: Counter = Counter()
        by_tech: Counter = Counter()
        by_category: Counter = Counter()
        by_company_type: Counter = Counter()
        remote = overseas = 0

        for record in records:
            by_city.update(record.cities)
            by_tech.update(record.techs)
            by_category.update(record.categories)
            if record.posting.company_type:
                by_company_type[record.posting.company_type] += 1
            remote += record.posting.is_remote
            overseas += record.posting.is_overseas

        return {
            "yearMonth": year_month,
            "totalPostings": len(records),
            "byCity": dict(by_city),
            "byTechStack": dict(by_tech),
            "byCategory": dict(by_category),
            "byCompanyType": dict(by_company_type),
            "remoteCount": remote,
            "overseasCount": overseas,
        }

    def _global_totals(self, records: List[NormalizedPosting]) -> GlobalTotals:
        totals = GlobalTotals(total=len(records))

        for record in records:
            posting = record.posting
            totals.cities.update(record.cities)
            totals.techs.update(record.techs)
            totals.categories.update(record.categories)
            if posting.company_type:
                totals.company_types[posting.company_type] += 1
            if posting.company.strip():
                totals.companies[posting.company] += 1
            if record.experience:
                totals.experience[record.experience] += 1
            if record.education:
                totals.education[record.education] += 1
            if record.salary:
                totals.salary_valid += 1
                totals.salary_bands[bucketize_salary(*record.salary)] += 1
            totals.remote += posting.is_remote
            totals.overseas += posting.is_overseas

        return totals

    # ========== 视图 ==========

    def _overview(self, months: List[str], totals: GlobalTotals) -> OverviewDict:
        return {
            "totalPostings": totals.total,
            "totalMonths": len(months),
            "dateRange": {
                "start": months[0] if months else "",
                "end": months[-1] if months else "",
            },
            "topCities": top_n(totals.cities, self.overview_top_n),
            "topTechStack": top_n(totals.techs, self.overview_top_n),
            "topCompanies": top_n(totals.companies, self.overview_top_n),
            "remotePercentage": percentage(totals.remote, totals.total),
            "overseasPercentage": percentage(totals.overseas, totals.total),
        }

    def _city_stats(self, months, by_month, totals: GlobalTotals) -> CityStatsDict:
        rankings = sorted_entries(totals.cities)
        names = [entry["name"] for entry in rankings[:self.trend_top_n]]
        touching = _touching_counts(by_month, lambda r: r.cities)
        return {
            "rankings": rankings,
            "trends": _series_for(names, months, touching),
        }

    def _tech_stats(self, months, by_month, totals: GlobalTotals) -> TechStatsDict:
        # 长尾过滤只作用于发布的排行，全局计数保持完整
        rankings = [
            entry for entry in sorted_entries(totals.techs)
            if entry["count"] >= self.tech_min_count
        ]
        names = [entry["name"] for entry in rankings[:self.trend_top_n]]
        touching = _touching_counts(by_month, lambda r: r.techs)

        by_category: Dict[str, List] = {}
        for entry in rankings:
            category = self.tech_normalizer.category_of(entry["name"])
            by_category.setdefault(category, []).append(entry)

        return {
            "rankings": rankings,
            "trends": _series_for(names, months, touching),
            "byCategory": by_category,
        }

    def _company_stats(self, totals: GlobalTotals) -> CompanyStatsDict:
        return {
            "rankings": sorted_entries(totals.companies),
            "byType": dict(totals.company_types),
            "salaryDistribution": [
                {"range": label, "count": totals.salary_bands[label]}
                for label in SALARY_BAND_ORDER
                if totals.salary_bands[label] > 0
            ],
            "salaryValidSamples": totals.salary_valid,
        }

    def _trend_stats(self, months, by_month, totals: GlobalTotals) -> TrendStatsDict:
        posting_counts = {ym: len(by_month[ym]) for ym in months}

        categories = [
            entry["name"] for entry in sorted_entries(totals.categories)
            if entry["count"] >= self.category_min_count
        ]
        category_touching = _touching_counts(by_month, lambda r: r.categories)
        experience_touching = _touching_counts(by_month, lambda r: [r.experience] if r.experience else [])
        education_touching = _touching_counts(by_month, lambda r: [r.education] if r.education else [])

        return {
            "postingTrend": dense_series(months, posting_counts),
            "categoryTrend": _series_for(categories, months, category_touching),
            "remoteTrend": _rate_series(months, by_month, lambda r: r.posting.is_remote),
            "overseasTrend": _rate_series(months, by_month, lambda r: r.posting.is_overseas),
            "experienceTrend": _series_for(EXPERIENCE_BUCKETS, months, experience_touching),
            "educationTrend": _series_for(EDUCATION_BUCKETS, months, education_touching),
        }


# ========== 工具 ==========

def _valid_postings(postings: Iterable[PostingInput]) -> Iterator[JobPosting]:
    for index, item in enumerate(postings):
        if isinstance(item, JobPosting):
            yield item
            continue
        try:
            yield JobPosting.model_validate(item)
        except ValidationError as e:
            logger.warning(f"第 {index} 条招聘帖不合法，跳过: {e.error_count()} errors")


def _touching_counts(
    by_month: Mapping[str, List[NormalizedPosting]],
    values_of: Callable[[NormalizedPosting], Iterable[str]],
) -> Dict[str, Counter]:
    """值 -> {月份: 涉及该值的招聘帖数} (每条帖子每个值至多计 1 次)"""
    result: Dict[str, Counter] = defaultdict(Counter)
    for year_month, records in by_month.items():
        for record in records:
            for value in dict.fromkeys(values_of(record)):
                result[value][year_month] += 1
    return result


def _series_for(names: Iterable[str], months: List[str], touching: Mapping[str, Counter]):
    return {name: dense_series(months, touching.get(name, {})) for name in names}


def _rate_series(months, by_month, flag: Callable[[NormalizedPosting], bool]) -> List[MonthRate]:
    series = []
    for year_month in months:
        records = by_month[year_month]
        count = sum(1 for r in records if flag(r))
        series.append({
            "yearMonth": year_month,
            "count": count,
            "percentage": percentage(count, len(records)),
        })
    return series


# 便捷函数
_aggregator = Aggregator()


def aggregate(postings: Iterable[PostingInput]) -> AggregateResult:
    """
    聚合 (便捷函数)

    Args:
        postings: JobPosting 集合

    Returns:
        AggregateResult
    """
    return _aggregator.aggregate(postings)


def empty_result() -> AggregateResult:
    """零值视图 (无招聘帖时的输出模板)"""
    return _aggregator.aggregate([])
