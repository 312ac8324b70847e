"""学历要求归一化模块"""

import re
from typing import Any

from hiring_insight.dictionaries.requirements import (
    EDU_OTHER,
    EDUCATION_RULES,
    EDUCATION_UNRELATED_SUBJECTS,
)

_SUBJECTS = "|".join(EDUCATION_UNRELATED_SUBJECTS)
UNRELATED_PHRASE_PATTERN = re.compile(
    rf"(?:{_SUBJECTS})\s*(?:不限|无要求)|不限\s*(?:{_SUBJECTS})"
)


def normalize_education(raw: Any) -> str:
    """
    学历要求归一化

    按关键词优先级匹配: 不限 > 博士 > 硕士 > 本科(含 985/211 等名校标记) > 大专 > 其他
    "专业不限" 之类的短语先去掉，不算学历不限。

    Args:
        raw: 原始学历要求文本

    Returns:
        学历分桶 (EDUCATION_BUCKETS 之一)

    Examples:
        >>> normalize_education("本科及以上")
        '本科及以上'
        >>> normalize_education("985/211 优先")
        '本科及以上'
        >>> normalize_education("专业不限，本科及以上")
        '本科及以上'
    """
    if not isinstance(raw, str):
        return EDU_OTHER

    text = UNRELATED_PHRASE_PATTERN.sub(" ", raw.strip().lower()).strip()
    if not text:
        return EDU_OTHER

    for bucket, keywords in EDUCATION_RULES:
        if any(kw in text for kw in keywords):
            return bucket

    return EDU_OTHER
