"""城市名归一化模块

把 LLM 提取的地点字符串展开为 0~N 个标准城市名。

规则优先级:
    1. 无效/占位值 -> []
    2. 多城市简称 -> 展开列表 ("北上广深")
    3. 含分隔符且不是远程 -> 拆分后逐个归一化 ("北京/上海")
    4. 远程标记 -> ["远程"]
    5. 别名精确匹配 / 标准城市名前缀匹配 ("北京市海淀区" -> 北京)
    6. 区县/地标关键词 -> 所属城市 ("西二旗" -> 北京)
    7. 省份前缀: 剩余部分递归归一化，否则取省会 ("广东省东莞" -> 东莞, "浙江" -> 杭州)
    8. "XX市" -> "XX"
    9. 海外城市别名
    10. 原样保留
"""

import re
from typing import AbstractSet, Any, List, Mapping, Optional, Sequence

from hiring_insight.config import AggregationConfig
from hiring_insight.dictionaries.city import (
    CANONICAL_CITIES,
    CITY_ADMIN_SUFFIXES,
    CITY_ALIASES,
    CITY_DISTRICTS,
    INVALID_LOCATIONS,
    MULTI_CITY_SHORTHANDS,
    OVERSEAS_CITY_ALIASES,
    PROVINCE_CAPITALS,
    PROVINCE_SUFFIXES,
    REMOTE_CITY,
    REMOTE_MARKERS,
)

SPLIT_PATTERN = re.compile(r"[/／、,，|｜]")
CITY_SUFFIX_PATTERN = re.compile(r"^([\u4e00-\u9fff]{2,4})市")


class CityNormalizer:
    """
    城市名归一化

    纯函数式: 不保存调用状态，递归深度受 max_depth 限制。
    """

    def __init__(
        self,
        canonical_cities: Sequence[str] = CANONICAL_CITIES,
        aliases: Mapping[str, str] = CITY_ALIASES,
        districts: Mapping[str, Sequence[str]] = CITY_DISTRICTS,
        province_capitals: Mapping[str, str] = PROVINCE_CAPITALS,
        shorthands: Mapping[str, Sequence[str]] = MULTI_CITY_SHORTHANDS,
        invalid_values: AbstractSet[str] = INVALID_LOCATIONS,
        overseas_aliases: Mapping[str, str] = OVERSEAS_CITY_ALIASES,
        remote_markers: Sequence[str] = REMOTE_MARKERS,
        remote_city: str = REMOTE_CITY,
        max_depth: int = AggregationConfig.CITY_MAX_DEPTH,
    ):
        # 长名优先，避免短名抢先匹配
        self.cities = sorted(canonical_cities, key=len, reverse=True)
        self.provinces = sorted(province_capitals, key=len, reverse=True)
        self.aliases = aliases
        self.districts = districts
        self.province_capitals = province_capitals
        self.shorthands = shorthands
        self.invalid_values = frozenset(v.lower() for v in invalid_values)
        self.overseas_aliases = overseas_aliases
        self.remote_markers = tuple(m.lower() for m in remote_markers)
        self.remote_city = remote_city
        self.max_depth = max_depth

    def normalize(self, raw: Any) -> List[str]:
        """
        地点字符串归一化

        Args:
            raw: 原始地点

        Returns:
            标准城市名列表 (可能为空，表示整条丢弃)

        Examples:
            >>> normalizer = CityNormalizer()
            >>> normalizer.normalize("北上广深")
            ['北京', '上海', '广州', '深圳']
            >>> normalizer.normalize("远程/混合办公")
            ['远程']
            >>> normalizer.normalize("未知")
            []
        """
        if not isinstance(raw, str):
            return []
        return self._normalize(raw.strip(), depth=0)

    def _normalize(self, text: str, depth: int) -> List[str]:
        if depth > self.max_depth:
            return [text] if text else []

        key = text.lower()

        # 1. 无效值
        if key in self.invalid_values:
            return []

        # 2. 多城市简称
        if text in self.shorthands:
            return list(self.shorthands[text])

        is_remote = self._is_remote(key)

        # 3. 分隔符拆分
        if not is_remote and SPLIT_PATTERN.search(text):
            result: List[str] = []
            for part in SPLIT_PATTERN.split(text):
                part = part.strip()
                if part:
                    result.extend(self._normalize(part, depth + 1))
            return result

        # 4. 远程
        if is_remote:
            return [self.remote_city]

        # 5. 别名 / 标准城市前缀
        city = self._match_city(text, key)
        if city:
            return [city]

        # 6. 区县/地标
        city = self._match_district(text)
        if city:
            return [city]

        # 7. 省份
        result = self._match_province(text, depth)
        if result is not None:
            return result

        # 8. "XX市"
        match = CITY_SUFFIX_PATTERN.match(text)
        if match:
            return [match.group(1)]

        # 9. 海外
        if key in self.overseas_aliases:
            return [self.overseas_aliases[key]]

        # 10. 原样保留
        return [text]

    def _is_remote(self, key: str) -> bool:
        return any(marker in key for marker in self.remote_markers)

    def _match_city(self, text: str, key: str) -> Optional[str]:
        if key in self.aliases:
            return self.aliases[key]
        for city in self.cities:
            if text.startswith(city):
                return city
        return None

    def _match_district(self, text: str) -> Optional[str]:
        for city, districts in self.districts.items():
            if any(district in text for district in districts):
                return city
        return None

    def _match_province(self, text: str, depth: int) -> Optional[List[str]]:
        """省份前缀匹配；未命中返回 None"""
        for province in self.provinces:
            if not text.startswith(province):
                continue

            rest = text[len(province):]
            # 省市同名 ("吉林市")
            if rest in CITY_ADMIN_SUFFIXES:
                return [province]
            for suffix in PROVINCE_SUFFIXES:
                if rest.startswith(suffix):
                    rest = rest[len(suffix):]
                    break
            rest = rest.strip(" -·")
            if rest in CITY_ADMIN_SUFFIXES:
                rest = ""

            if rest:
                result = self._normalize(rest, depth + 1)
                if result:
                    return result
            return [self.province_capitals[province]]
        return None


# 便捷函数
_normalizer = CityNormalizer()


def normalize_city(raw: Any) -> List[str]:
    """
    城市名归一化 (便捷函数)

    Args:
        raw: 原始地点

    Returns:
        标准城市名列表
    """
    return _normalizer.normalize(raw)
