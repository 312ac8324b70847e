"""
Storage 包

Modules:
    - loader: 解析结果文件读取 (data/parsed/*.json -> JobPosting)
    - writer: 统计视图写出 (六份 JSON)
"""

from .loader import (
    load_all_postings,
    load_parsed_issue,
    read_source_file,
    save_parsed_issue,
)
from .writer import write_views


__all__ = [
    "load_all_postings",
    "load_parsed_issue",
    "read_source_file",
    "save_parsed_issue",
    "write_views",
]
