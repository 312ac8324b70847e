"""
归一化词典包

纯数据，无逻辑依赖。扩充新框架/新城市只需修改本包。

Modules:
    - tech: 技术栈同义词、分类、噪声词
    - city: 城市/区县/省份/多城市简称/无效值
    - category: 岗位分类同义词 (含非技术岗位排除标记)
    - requirements: 经验/学历分桶与关键词
    - salary: 薪资分桶边界
"""

from .category import (
    CANONICAL_CATEGORIES,
    CATEGORY_SYNONYMS,
    EXCLUDE,
    CategoryExclusion,
)
from .requirements import EDUCATION_BUCKETS, EXPERIENCE_BUCKETS
from .salary import SALARY_BAND_ORDER, SALARY_BANDS
from .tech import NOISE_TERMS, TECH_SYNONYMS, TECH_TO_CATEGORY


__all__ = [
    "CANONICAL_CATEGORIES",
    "CATEGORY_SYNONYMS",
    "EXCLUDE",
    "CategoryExclusion",
    "EDUCATION_BUCKETS",
    "EXPERIENCE_BUCKETS",
    "SALARY_BAND_ORDER",
    "SALARY_BANDS",
    "NOISE_TERMS",
    "TECH_SYNONYMS",
    "TECH_TO_CATEGORY",
]
