"""
Normalizers 包

招聘帖结构化字段归一化模块集合。全部为纯函数 (或无状态类 + 便捷函数)，
对任意输入不抛异常，无法识别时降级为 "其他"/None/原样保留。

Modules:
    - tech: 技术栈名称归一化、技术分类
    - city: 城市名归一化 (区县/省份/多城市简称/远程)
    - category: 岗位分类归一化 (含非技术岗位排除)
    - experience: 经验要求分桶
    - education: 学历要求分桶
    - salary: 薪资解析 (月薪 k) 与分档
"""

from .tech import (
    TechNormalizer,
    normalize_tech,
    get_tech_category,
)
from .city import (
    CityNormalizer,
    normalize_city,
)
from .category import (
    CategoryNormalizer,
    normalize_category,
)
from .experience import (
    normalize_experience,
    bucket_by_years,
)
from .education import normalize_education
from .salary import (
    SalaryParser,
    parse_salary_to_monthly_k,
    bucketize_salary,
)


__all__ = [
    # tech
    "TechNormalizer",
    "normalize_tech",
    "get_tech_category",
    # city
    "CityNormalizer",
    "normalize_city",
    # category
    "CategoryNormalizer",
    "normalize_category",
    # experience / education
    "normalize_experience",
    "bucket_by_years",
    "normalize_education",
    # salary
    "SalaryParser",
    "parse_salary_to_monthly_k",
    "bucketize_salary",
]
