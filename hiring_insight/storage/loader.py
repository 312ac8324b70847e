"""解析结果文件读取

data/parsed/{issueNumber}.json 每个讨论帖一个文件，结构为 ParsedIssue。
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from hiring_insight.exceptions import SourceFileError
from hiring_insight.logging_config import get_logger
from hiring_insight.models.posting import JobPosting, ParsedIssue

logger = get_logger(__name__)

PathLike = Union[str, Path]


def read_source_file(path: PathLike) -> Dict[str, Any]:
    """
    读取单个解析结果文件

    Raises:
        SourceFileError: 文件不可读、不是 JSON 或顶层不是对象
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise SourceFileError(str(path), f"读取失败: {e}") from e
    except json.JSONDecodeError as e:
        raise SourceFileError(str(path), f"JSON 格式错误: {e}") from e

    if not isinstance(data, dict):
        raise SourceFileError(str(path), f"顶层结构应为对象，实际为 {type(data).__name__}")
    return data


def load_parsed_issue(path: PathLike) -> Optional[ParsedIssue]:
    """
    读取并校验单个解析结果文件 (增量解析时使用)

    Returns:
        ParsedIssue；文件不存在返回 None

    Raises:
        SourceFileError: 文件损坏或结构不合法
    """
    path = Path(path)
    if not path.exists():
        return None

    data = read_source_file(path)
    try:
        return ParsedIssue.model_validate(data)
    except ValidationError as e:
        raise SourceFileError(str(path), f"结构校验失败: {e.error_count()} errors") from e


def save_parsed_issue(issue: ParsedIssue, parsed_dir: PathLike) -> Path:
    """写入 {parsed_dir}/{issueNumber}.json"""
    out_dir = Path(parsed_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / f"{issue.issue_number}.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump(issue.to_dict(), f, ensure_ascii=False, indent=2)
    return path


def load_all_postings(parsed_dir: PathLike) -> List[JobPosting]:
    """
    读取目录下全部招聘帖

    - 目录不存在 -> 空列表
    - 损坏的文件 -> 警告并跳过，不影响其他文件
    - 不合法的单条记录 -> 警告并跳过，同文件其他记录保留
    - 相同 id 只保留第一次出现的记录

    Args:
        parsed_dir: 解析结果目录

    Returns:
        JobPosting 列表 (按文件名顺序)
    """
    directory = Path(parsed_dir)
    if not directory.is_dir():
        logger.warning(f"解析结果目录不存在: {directory}")
        return []

    postings: List[JobPosting] = []
    seen_ids = set()
    file_count = 0
    duplicate_count = 0

    for path in sorted(directory.glob("*.json")):
        try:
            data = read_source_file(path)
        except SourceFileError as e:
            logger.warning(str(e))
            continue

        file_count += 1
        raw_postings = data.get("postings") or []
        if not isinstance(raw_postings, list):
            logger.warning(f"[{path.name}] postings 不是数组，跳过")
            continue

        for index, raw in enumerate(raw_postings):
            try:
                posting = JobPosting.model_validate(raw)
            except ValidationError as e:
                logger.warning(f"[{path.name}] 第 {index} 条记录不合法，跳过: {e.error_count()} errors")
                continue

            if posting.id and posting.id in seen_ids:
                duplicate_count += 1
                continue
            seen_ids.add(posting.id)
            postings.append(posting)

    logger.info(f"读取 {file_count} 个文件，共 {len(postings)} 条招聘帖")
    if duplicate_count:
        logger.info(f"  重复记录: {duplicate_count} 条 (已忽略)")

    return postings
