"""技术栈归一化模块

LLM 提取的技术栈 token 写法五花八门，统一为标准名称后再计数。

Examples:
    - "React.js" / "reactjs" / "react" -> "React"
    - "k8s" -> "Kubernetes"
    - "沟通能力" -> None (噪声词)
    - "熟练掌握主流前端框架并具备大型项目架构设计与性能调优经验者优先考虑" -> None (超长描述)
    - "Deno" -> "Deno" (未收录但保留原文)
"""

from typing import AbstractSet, Any, Mapping, Optional

from hiring_insight.config import AggregationConfig
from hiring_insight.dictionaries.tech import (
    NOISE_TERMS,
    OTHER_TECH_CATEGORY,
    TECH_SYNONYMS,
    TECH_TO_CATEGORY,
)


class TechNormalizer:
    """
    技术栈名称归一化

    词典通过构造参数注入，测试时可替换为小词典。
    """

    def __init__(
        self,
        synonyms: Mapping[str, str] = TECH_SYNONYMS,
        noise_terms: AbstractSet[str] = NOISE_TERMS,
        categories: Mapping[str, str] = TECH_TO_CATEGORY,
        max_length: int = AggregationConfig.TECH_MAX_LENGTH,
    ):
        self.synonyms = synonyms
        self.noise_terms = noise_terms
        self.noise_terms_lower = frozenset(t.lower() for t in noise_terms)
        self.categories = categories
        self.max_length = max_length

    def normalize(self, raw: Any) -> Optional[str]:
        """
        技术栈 token 归一化

        Args:
            raw: 原始 token

        Returns:
            标准名称；噪声词、超长描述、空值返回 None

        Examples:
            >>> normalizer = TechNormalizer()
            >>> normalizer.normalize("reactjs")
            'React'
            >>> normalizer.normalize("HTTP") is None
            True
        """
        if not isinstance(raw, str):
            return None

        text = raw.strip()
        if not text or len(text) > self.max_length:
            return None

        # 先原样匹配，再小写匹配
        if text in self.noise_terms:
            return None
        key = text.lower()
        if key in self.noise_terms_lower:
            return None

        return self.synonyms.get(key, text)

    def category_of(self, name: str) -> str:
        """标准名称 -> 技术分类 (未收录返回 "其他")"""
        return self.categories.get(name, OTHER_TECH_CATEGORY)


# 便捷函数
_normalizer = TechNormalizer()


def normalize_tech(raw: Any) -> Optional[str]:
    """
    技术栈归一化 (便捷函数)

    Args:
        raw: 原始 token

    Returns:
        标准名称或 None
    """
    return _normalizer.normalize(raw)


def get_tech_category(name: str) -> str:
    """技术分类查询 (便捷函数)"""
    return _normalizer.category_of(name)
