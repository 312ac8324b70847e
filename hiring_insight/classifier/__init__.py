"""
Classifier 包

LLM 分类结果 (hiring / job_seeking / other) 的解析与解析结果文件的增量合并。
"""

from .results import (
    HiringResult,
    SkipResult,
    build_posting,
    extract_year_month,
    interpret_result,
    merge_parsed_issue,
    parse_batch_response,
    select_pending_comments,
    strip_code_fence,
)


__all__ = [
    "HiringResult",
    "SkipResult",
    "interpret_result",
    "parse_batch_response",
    "strip_code_fence",
    "build_posting",
    "select_pending_comments",
    "merge_parsed_issue",
    "extract_year_month",
]
