"""岗位分类归一化模块

Examples:
    - "前端" -> "前端" (标准分类)
    - "Web前端" -> "前端"
    - "SRE" -> "DevOps"
    - "HR" -> None (非技术岗位，排除)
    - "区块链" -> "其他" (未收录，归入其他)
"""

from typing import Any, Mapping, Optional, Sequence

from hiring_insight.dictionaries.category import (
    CANONICAL_CATEGORIES,
    CATEGORY_SYNONYMS,
    OTHER_CATEGORY,
    CategoryExclusion,
    CategoryTarget,
)


class CategoryNormalizer:
    """岗位分类归一化"""

    def __init__(
        self,
        canonical: Sequence[str] = CANONICAL_CATEGORIES,
        synonyms: Mapping[str, CategoryTarget] = CATEGORY_SYNONYMS,
        fallback: str = OTHER_CATEGORY,
    ):
        self.canonical = frozenset(canonical)
        self.synonyms = synonyms
        self.fallback = fallback

    def normalize(self, raw: Any) -> Optional[str]:
        """
        分类归一化

        Args:
            raw: 原始分类文本

        Returns:
            标准分类；空值或非技术岗位返回 None
        """
        if not isinstance(raw, str):
            return None

        text = raw.strip()
        if not text:
            return None

        if text in self.canonical:
            return text

        target = self.synonyms.get(text.lower())
        if isinstance(target, CategoryExclusion):
            return None
        if target is not None:
            return target

        return self.fallback


# 便捷函数
_normalizer = CategoryNormalizer()


def normalize_category(raw: Any) -> Optional[str]:
    """岗位分类归一化 (便捷函数)"""
    return _normalizer.normalize(raw)
